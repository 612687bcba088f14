"""The rabbit side-scroller: window, event loop and drawing."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from bkgame.messages import message  # noqa: E402
from bkgame.physics import (  # noqa: E402
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Background,
    Facing,
    Key,
    Rabbit,
)

TITLE = "لعبة"

_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_r: Key.R,
    pygame.K_w: Key.W,
    pygame.K_ESCAPE: Key.ESCAPE,
}


class GameError(RuntimeError):
    """Raised when the game cannot set up its window or images."""


def translate_key(key: int) -> Key | None:
    """Map a pygame key code to a game key, or None if it is not used."""
    return _KEYS.get(key)


class Game:
    """Window that shows the rabbit over a scrolling background."""

    def __init__(
        self,
        images_dir: str | os.PathLike = "../images",
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
    ) -> None:
        self.images_dir = Path(images_dir)
        self.width = width
        self.height = height
        self.rabbit = Rabbit(width=width, height=height)
        self.background = Background(width=width, height=height)
        self.screen: pygame.Surface | None = None
        self._texture_left: pygame.Surface | None = None
        self._texture_right: pygame.Surface | None = None
        self._background_texture: pygame.Surface | None = None

    def _fail(self, key: str, err: Exception) -> GameError:
        return GameError(f"{message(key)}: {err}")

    def _load(self, name: str) -> pygame.Surface:
        try:
            return pygame.image.load(str(self.images_dir / name))
        except (pygame.error, OSError) as err:
            raise self._fail("ERROR_create_surface", err) from err

    def init(self) -> None:
        """Open the window and load the images."""
        try:
            pygame.display.init()
        except pygame.error as err:
            raise self._fail("ERROR_SDL_initialize", err) from err
        try:
            self.screen = pygame.display.set_mode(
                (self.width, self.height), pygame.RESIZABLE
            )
            pygame.display.set_caption(TITLE)
        except pygame.error as err:
            raise self._fail("ERROR_window_renderer", err) from err

        self._texture_left = self._load("rabitLeft.bmp")
        self._texture_right = self._load("rabitRight.bmp")
        background = self._load("background.bmp")
        self._background_texture = pygame.transform.scale(
            background, (self.width, self.height)
        )

    def _draw(self) -> None:
        screen = self.screen
        screen.fill((0, 0, 0))
        for rect in self.background.rects():
            screen.blit(self._background_texture, (int(rect.x), int(rect.y)))
        texture = (
            self._texture_right
            if self.rabbit.facing is Facing.RIGHT
            else self._texture_left
        )
        src, dst = self.rabbit.src, self.rabbit.dst
        area = pygame.Rect(int(src.x), int(src.y), int(src.w), int(src.h))
        screen.blit(texture, (int(dst.x), int(dst.y)), area)
        pygame.display.flip()

    def run(self) -> None:
        """Run the event loop until the window is closed or Escape is pressed."""
        if self.screen is None:
            raise GameError("game is not initialised")
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = translate_key(event.key)
                    if key is Key.ESCAPE:
                        running = False
                    elif key is not None:
                        self.rabbit.press(key)
            self.rabbit.update()
            self.background.advance()
            self._draw()

    def close(self) -> None:
        """Release the images and close the window."""
        self._texture_left = None
        self._texture_right = None
        self._background_texture = None
        self.screen = None
        pygame.display.quit()

    def __enter__(self) -> "Game":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Start the game; return 3 if it cannot be set up."""
    parser = argparse.ArgumentParser(prog="bkgame")
    parser.add_argument("--images", default="../images", help="folder with the BMP images")
    args = parser.parse_args(argv)
    with Game(args.images) as game:
        try:
            game.init()
        except GameError as err:
            print(err, file=sys.stderr)
            return 3
        game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())