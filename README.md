# blew

A small 2D game engine built on pygame. It provides a layer stack, a camera,
rectangular entities and a demo game.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Run the demo

    blew

This command opens an 800x600 window titled "Game" and runs until you close the
window. The game layer gets its drawing surface from the first event the window
receives. From then on, each frame shows two squares and the gray outline of a
500x500 camera frame in the top-left corner. The blue square is the player and
the red square is the enemy.

- Each press of `W`, `A`, `S` or `D` moves the player 5 pixels.
- A right mouse click adds a green 40x40 square with its top-left corner at
  the click position.
- Closing the window ends the program.

Log messages go to `logs/app.log`, relative to the current directory. The
directory is created if it does not exist.

## Use it as a library

```python
from blew.application import Application
from blew.layer import Layer
from blew.log import init_logger


class HelloLayer(Layer):
    def on_update(self):
        ...

    def on_event(self, event):
        ...


init_logger("logs")
app = Application("My Game")
app.push_layer(HelloLayer("HelloLayer"))
app.start()
```

Call `init_logger` before you create an `Application`. The constructor logs a
message, and `get_logger()` raises `RuntimeError` until the logger is set up.

Building blocks:

- `blew.layer.Layer` is the base class for layers. It has the hooks
  `on_attach`, `on_detach`, `on_update`, `on_render` and `on_event`. Its
  `attached` flag records whether the layer is currently on a stack.
- `blew.layer_stack.LayerStack` holds layers in the order they were pushed.
  `push_layer` attaches a layer. `pop_layer(name)` removes and detaches every
  layer with that name. The stack supports iteration and `len()`.
- `blew.camera.Camera` is a viewport with `set_position`, `move`,
  `view_rect()`, `world_to_screen(rect)` and `draw_frame(surface)`.
- `blew.entity.Entity` is a named, colored `pygame.Rect` with `move(dx, dy)`
  and `draw(surface, camera=None)`.
- `blew.keyboard` provides `update()`, which takes a snapshot of the keyboard
  state, and `is_key_pressed(key)`. Calling `is_key_pressed` before the first
  `update()` raises `RuntimeError`.
- `blew.window.Window` opens the display with `show()`. Its `surface` is
  available after the window is shown. Both raise `RuntimeError` on failure.
- `blew.game_layer.GameLayer` and `blew.input_layer.InputLayer` are the
  layers the demo uses.
- `blew.application.Application` owns the window and the layer stack.
  `start()` runs the frame loop.
- `blew.app.run()` starts the demo from Python. `blew.app.main()` first sets
  up logging and then starts the demo.

## Limitations

- `Entity.draw` accepts a camera but always draws at the entity's world
  position. Moving the camera does not scroll what is drawn.
- Entities added with a right click are also named "Player". The WASD keys
  always move the first entity with that name, which is the original blue
  square.
- There is no sound, no collision handling and no saving or loading of game
  state.