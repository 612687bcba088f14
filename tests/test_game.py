import pygame
import pytest

from bkgame.game import Game, GameError, main, translate_key
from bkgame.messages import message
from bkgame.physics import Facing, Key


@pytest.fixture
def dummy_display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield
    pygame.display.quit()


@pytest.fixture
def images(tmp_path):
    rabbit = pygame.Surface((126, 215))
    rabbit.fill((255, 0, 0))
    pygame.image.save(rabbit, str(tmp_path / "rabitLeft.bmp"))
    pygame.image.save(rabbit, str(tmp_path / "rabitRight.bmp"))
    background = pygame.Surface((64, 48))
    background.fill((0, 0, 255))
    pygame.image.save(background, str(tmp_path / "background.bmp"))
    return tmp_path


@pytest.mark.parametrize(
    "code, key",
    [
        (pygame.K_UP, Key.UP),
        (pygame.K_DOWN, Key.DOWN),
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_RIGHT, Key.RIGHT),
        (pygame.K_r, Key.R),
        (pygame.K_w, Key.W),
        (pygame.K_ESCAPE, Key.ESCAPE),
    ],
)
def test_translate_key(code, key):
    assert translate_key(code) is key


def test_translate_unused_key():
    assert translate_key(pygame.K_SPACE) is None


def test_missing_images_raise(dummy_display, tmp_path):
    game = Game(tmp_path / "missing")
    with pytest.raises(GameError) as info:
        game.init()
    assert str(info.value).startswith(message("ERROR_create_surface"))
    game.close()


def test_run_before_init_raises():
    with pytest.raises(GameError):
        Game().run()


def test_run_handles_keys_and_quit(dummy_display, images):
    with Game(images) as game:
        game.init()
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        game.run()
        assert game.rabbit.facing is Facing.RIGHT
        assert game.rabbit.dst.x > 550.0
        assert game.background.x1 < 0.01
        assert game.screen.get_at((1, 1)) == (0, 0, 255, 255)
        assert game.screen.get_at((600, 500)) == (255, 0, 0, 255)


def test_escape_stops_run(dummy_display, images):
    with Game(images) as game:
        game.init()
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        game.run()
        assert game.rabbit.dst.x == 550.0
    assert game.screen is None


def test_main_returns_3_on_missing_images(dummy_display, tmp_path):
    assert main(["--images", str(tmp_path)]) == 3