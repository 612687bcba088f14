# bkgame

A small side-scrolling game. A rabbit stands in front of a background that
scrolls slowly to the left, and you move it around and make it jump in an arc.

The package also holds a minimal viewer that opens a window and shows one
image stretched to fill it.

## Installing

```
pip install .
```

The game needs `pygame`, which is installed along with the package. For the
tests, install the `test` extra: `pip install .[test]`.

## Images

The game loads three BMP files from an images directory (by default
`../images`, relative to the current directory; change it with `--images`):

- `rabitLeft.bmp`: the rabbit facing left
- `rabitRight.bmp`: the rabbit facing right
- `background.bmp`: the scrolling background, scaled to the window size

If the display cannot be set up or an image cannot be loaded, the program
prints an error to standard error and exits with status 3. The game prints
its errors in Arabic, the viewer in English.

## Playing

```
bkgame
bkgame --images path/to/images
```

The window opens at 1200×750. These keys control the rabbit:

| Key         | Action                                                      |
|-------------|-------------------------------------------------------------|
| Up arrow    | move up 40 pixels (never above the top of the window)       |
| Down arrow  | move down 30 pixels (never below the bottom of the window)  |
| Left arrow  | move left 30 pixels and face left                           |
| Right arrow | move right 30 pixels and face right                         |
| `r`         | jump in an arc to the right                                 |
| `w`         | jump in an arc to the left                                  |
| Escape      | quit                                                        |

A jump lasts about 35 frames; the rabbit moves 5 pixels sideways each frame
and lands at the height it took off from. Closing the window also quits.

## Viewing an image

```
bkgame-viewer
bkgame-viewer --image path/to/picture.bmp
```

This opens an 800×600 resizable window that shows the image (by default
`../images/sample.bmp`) stretched over the whole window until you close it.

## Using the pieces from Python

The game logic does not need a display. It lives in `bkgame.physics`:

```python
from bkgame.physics import Rabbit, Background, Key

rabbit = Rabbit()
rabbit.press(Key.R)       # start a jump to the right
rabbit.update()           # advance one frame
print(rabbit.dst, rabbit.facing)

background = Background()
background.advance()
first, second = background.rects()
```

`bkgame.messages.message(key, language)` returns the error texts the game
uses, in Arabic (`"ar"`, the default) or English (`"en"`). An unknown
language raises `ValueError`, an unknown key `KeyError`.

`bkgame.game.translate_key` maps a pygame key code to a `Key`, or `None`.

The windowed programs are `bkgame.game.Game` and `bkgame.viewer.Viewer`.
Both are context managers; `init()` raises `GameError` or `ViewerError`
when setup fails, and `close()` shuts the display down.

```python
from bkgame.game import Game

with Game("images", 1200, 750) as game:
    game.init()
    game.run()
```

## What it does not do

There is no score, no obstacles or collisions, no sound and no frame-rate
limit: the loop redraws as fast as it can, so the jump and the background
scroll move at whatever speed the machine runs the loop.