"""A window that shows a single BMP image stretched to fill it."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from bkgame.messages import message  # noqa: E402

TITLE = "لعبة"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600


class ViewerError(RuntimeError):
    """Raised when the viewer cannot set up its window or image."""


class Viewer:
    """Resizable window drawing one image over its whole area."""

    def __init__(
        self,
        image_path: str | os.PathLike = "../images/sample.bmp",
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> None:
        self.image_path = Path(image_path)
        self.width = width
        self.height = height
        self.screen: pygame.Surface | None = None
        self._texture: pygame.Surface | None = None
        self._scaled: pygame.Surface | None = None

    @staticmethod
    def _fail(key: str, err: Exception) -> ViewerError:
        return ViewerError(f"{message(key, 'en')}: {err}")

    def init(self) -> None:
        """Open the window and load the image."""
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
        try:
            self._texture = pygame.image.load(str(self.image_path))
        except (pygame.error, OSError) as err:
            raise self._fail("ERROR_create_surface", err) from err

    def _draw(self) -> None:
        screen = pygame.display.get_surface() or self.screen
        self.screen = screen
        size = screen.get_size()
        if self._scaled is None or self._scaled.get_size() != size:
            self._scaled = pygame.transform.scale(self._texture, size)
        screen.fill((0, 0, 0))
        screen.blit(self._scaled, (0, 0))
        pygame.display.flip()

    def run(self) -> None:
        """Draw the image every frame until the window is closed."""
        if self.screen is None or self._texture is None:
            raise ViewerError("viewer is not initialised")
        running = True
        while running:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                running = False
            self._draw()

    def close(self) -> None:
        """Release the image and close the window."""
        self._texture = None
        self._scaled = None
        self.screen = None
        pygame.display.quit()

    def __enter__(self) -> "Viewer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Show the image; return 3 if the viewer cannot be set up."""
    parser = argparse.ArgumentParser(prog="bkgame-viewer")
    parser.add_argument("--image", default="../images/sample.bmp", help="BMP image to show")
    args = parser.parse_args(argv)
    with Viewer(args.image) as viewer:
        try:
            viewer.init()
        except ViewerError as err:
            print(err, file=sys.stderr)
            return 3
        viewer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())