# sigmakit

Small building blocks for 2.5D games, with no third-party dependencies.

## Modules

### `sigmakit.colors`

A palette of several hundred named colours as `0xAARRGGBB` integers.

- `get_color(name)` – look a colour up. Matching ignores case, treats spaces
  and hyphens as underscores and accepts an `AE_COLORS_` prefix. Unknown
  names raise `KeyError`.
- `color_names()` – every known name, sorted.
- `pack_argb(a, r, g, b)` / `unpack_argb(value)` – convert between channels
  and a packed integer; out-of-range values raise `ValueError`.

The palette itself is split across `sigmakit.palette_a_l.colors_a_to_l()` and
`sigmakit.palette_m_z.colors_m_to_z()`, each returning a fresh `dict`.

### `sigmakit.collider`

- `ColliderFlag` – an `IntFlag` with `PLAYER`, `ENEMY`, `UI` and `BULLET`.
- `ColliderType` – `COLLISION` or `DAMAGE`.
- `Box` – a non-rotating box given by its `left`, `right`, `top` and `bottom`
  distances from the centre, a Z `depth` (default 25.0) and an `offset`.
  `set(...)` stores the absolute values of the four sides,
  `set_from_scale(scale, offset)` sizes it from an `(x, y, z)` scale,
  `sides(position)` returns the absolute `(left, right, top, bottom)` edges
  and `scale()` returns `(width, height)`.
- `BoxCollider(flag, type, size=None, depth=25.0, offset=(0, 0))` – a box
  with `enabled`, `flag`, `type`, `damage`, `damage_type` and `owner`.
  `size`, if given, must hold four values. `debug_draw(debug, parent, path)`
  moves and scales a `debug` actor (anything with `transform.position`,
  `transform.scale` and `set_texture(path)`) so that it outlines the
  collider on `parent`.

### `sigmakit.collision`

`CollisionSystem(callback)` with `update_collisions(objects)`. `objects` is a
mapping whose values have an `id`, a `transform.position` of `(x, y, z)` and
an optional `collider`. Each unordered pair is checked once: both colliders
must be enabled and share a flag bit, their Z distance must not exceed the sum
of their depths, and their boxes must overlap. For every hit each collider
sends one event aimed at the other object's id: a `DamageEvent` (with
`damage` and `damage_type`) for damage colliders, a `CollisionEvent`
otherwise. Both events are frozen dataclasses with `receiver`, `other` and
`type`.

### `sigmakit.one_hit`

`OneHitCollider(id)` holds a damage collider that hits players and enemies.
`trigger(position, size, damage, owner, debug_draw=False)` places and arms it;
the next `update(delta_time)` disarms it, so it is live for a single collision
pass.

### `sigmakit.controllers`

- `ControllerComponent(character)` – abstract base with an `update()` method
  for player and AI controllers.
- `CameraController(id)` – the most recently created controller is returned
  by `CameraController.instance()`. `set_current_camera(camera)` sets
  `active = False` on the previous camera and `active = True` on the new one;
  `current_camera()` raises `RuntimeError` if none is set, and `start()` issues
  a `RuntimeWarning` in that case.

### `sigmakit.input`

`InputComponent(keybind_path, device, clock=None)` reads keybinds from a JSON
file shaped like:

```json
{
  "keyboard": {
    "movement": {"up": "W", "left": "A", "down": "S", "right": "D"},
    "actions": {"attack": "J", "jump": "K"}
  },
  "gamepad": {
    "sticks": {"movement": "left"},
    "action": {"attack": "X", "jump": "A"}
  }
}
```

Only the first character of each binding is used. `update_input(controller_id)`
refreshes movement and the action buffer from the keyboard (`-1`) or a
gamepad; `movement()` and `last_movement()` give the current direction and the
last non-zero value on each axis; `take_action()` returns and clears the
buffered action (an empty string if none). A buffered action that is not
renewed expires after the timeout. `check_controllers()` returns the lowest
connected gamepad id among 0–3, or `-1`. `to_gamepad_key(letter)` maps `"A"`,
`"B"`, `"X"`, `"Y"` to a `GamepadButton`, anything else to `None`.

## What it does not do

There is no window, renderer, game loop or object factory, and nothing reads
real keyboards or gamepads: `InputComponent` reads through an `InputDevice`
object you supply (`key_pressed`, `key_triggered`, `gamepad_connected`,
`gamepad_stick_left`, `gamepad_stick_right`, `gamepad_button_triggered`).
`OneHitCollider.trigger` accepts `debug_draw` but spawns no outline object.

## Example

```python
from sigmakit.colors import get_color, unpack_argb
from sigmakit.collider import BoxCollider, ColliderFlag, ColliderType

a, r, g, b = unpack_argb(get_color("CORNFLOWER_BLUE"))

hitbox = BoxCollider(ColliderFlag.PLAYER | ColliderFlag.ENEMY, ColliderType.COLLISION)
hitbox.box.set(50, 50, 50, 50, 25.0, (0.0, 0.0))
left, right, top, bottom = hitbox.box.sides((100.0, 200.0, 0.0))
```

## Installation and tests

```
pip install .[test]
pytest
```