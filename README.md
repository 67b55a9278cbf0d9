# konui

konui is a small declarative UI toolkit. An interface is a tree of
elements: rectangles, labels, layers, rows and columns, and click
handlers. The tree is drawn into a pygame window. Values shown in the
interface can be *shared*: changing a shared value through its guard
drops every cached text that depends on it, so the text is rebuilt the
next time it is read.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Trying it out

The package ships a counter demo: a label for the click count above a
green button.

```
konui-counter
```

The same demo can be started from Python with `konui.counter.main()`.

## Building an interface

An application is a function that receives a `SignalSender` and returns
the root element. `konui.app.run` opens a 550x310 window titled "kon3"
and runs the event loop until the window is closed:

```python
from konui.app import run
from konui.color import Color
from konui.elements import column, label, layers, on_click, rect
from konui.events import consume
from konui.values import concat, strfy


def build(signal_sender):
    clicks = signal_sender.shared(0)

    def increment():
        with clicks.lock() as guard:
            guard.value += 1

    return column(
        label(concat("clicked ", strfy(clicks), " times")),
        on_click(layers(rect(Color.GREEN), label("click me!")), consume(increment)),
    )


run(build)
```

`konui.app.run_settings(builder, settings)` does the same with a custom
`konui.window.RenderWindowSettings`, and `konui.app.build_settings`
returns the `App` without running it.

### Elements (`konui.elements`)

- `rect(color)`: fills its area with one colour.
- `label(source)`: a translucent bar standing in for the text of
  `source` (see "What konui does not do").
- `layers(*elements)`: draws the elements on top of each other in the
  given order; events go to the last one first.
- `column(*elements)` and `line(*elements)`: split the area into equal
  parts, top to bottom or left to right. `split(*elements)` makes an
  adaptive split; drawing it raises `UnsupportedSplitError`.
- `on_click(element, f)`: calls `f` when a left mouse button is
  released, then passes the event on to `element` unless `f` consumed it.

An event callback lets the event through by returning `None` or `False`
and stops it by returning `True` or a `konui.events.Consume`.
`konui.events.consume(f)` wraps `f` so that it always stops the event.
Custom elements subclass `konui.events.Element` and implement `draw`.

### Values (`konui.values`, `konui.shared`)

- `SignalSender.shared(value)` creates a `Shared` value.
  `Shared.lock()` returns a guard for a `with` block; assigning
  `guard.value` sends an `InvalidateCache` signal. `Shared.value()`
  reads the current value.
- `strfy(source)` gives the text form of a source (`True`/`False` as
  `true`/`false`); `concat(*sources)` joins text sources. Both cache
  their result until a shared value they depend on changes.
- Plain Python values can be used wherever a source is expected; they
  are wrapped in a `Constant`.

After each window event the `App` drains its signals: `InvalidateCache`
signals clear the affected caches, and a `Redraw` signal, sent with
`signal_sender.send(Redraw())`, asks the window to redraw.

### Lower-level pieces

- `konui.geometry`: `Vec2`, `Mat2`, `IntSize`, `IntPosition`,
  `Rectangle` and `Transform`.
- `konui.color`: `Color` and its named constants.
- `konui.location`: `LocationPoint` and `LocationRect`, which map areas
  in device coordinates onto the window.
- `konui.mesh`: `Mesh` and `Vertex`, triangle meshes placed by
  transforms.
- `konui.drawer`: `DrawPass`, `Resources` and batched mesh drawing.
- `konui.sheet`: `Sheet`, a sprite sheet addressed by pairs of enum
  members.
- `konui.window`: `RenderWindow`, `Frame`, `EventLoop` and `WindowApp`.
  `EventLoop(poll)` takes any function that returns batches of window
  events, or `None` to stop, in place of pygame's event queue.
- `konui.media`: `read_image` decodes an image stream into an RGBA
  surface (raising `ReadImageError` on failure); `make_default_texture`
  gives a 1x1 white one.
- `konui.board`: the 8x8 tiles, split into light and dark, and the
  starting pieces of a chess variant (`PieceType`, `PieceColor`,
  `make_piece_transforms`, `make_white_black_transforms`), with
  `rescale` to keep the board's shape as the window's ratio changes.

## What konui does not do

- Labels do not render text. A label draws a half-transparent white bar
  whose side padding is picked from a checksum of its text; for some
  texts it draws nothing.
- Clicks are not hit-tested: every `on_click` handler in the tree sees
  every left-button release, wherever the cursor is.
- Changing a shared value does not by itself redraw the window; send a
  `Redraw` signal for that.
- Textures are not drawn: meshes are filled with their tinted colours
  only, and only mouse input, resizing and closing are handled (no
  keyboard input).