# raycube

A small first-person maze viewer built on a grid raycaster. The player
stands in a tile map made of walls (`1`) and floor (`0`), faces the
direction given by a spawn marker (`N`, `S`, `E` or `W`) and walks
around. The walls are drawn column by column across a 60-degree field of
view in a 1280×720 window.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window and reads the keyboard.

## Playing

```
raycube
```

| Key            | Action            |
|----------------|-------------------|
| `W` / `S`      | walk forward/back |
| `A` / `D`      | strafe left/right |
| `←` / `→`      | turn              |
| `Esc`          | quit              |

Closing the window also quits.

## What it does not do

The world is built in: `raycube` takes no map file and ignores any
arguments given to it. The player spawn comes from the grid returned by
`raycube.worldmap.spawn_map()` and the walls from `default_map()`. There
are no textures, floor or ceiling colours. Walls are drawn as flat
columns of a single colour, and the player walks through walls because
movement does not check for collisions.

## Using the pieces

The raycaster can be driven without a window:

```python
from raycube.worldmap import spawn_map, default_map, find_spawn
from raycube.player import init_player, Control
from raycube.raycast import FrameBuffer, render_frame

spawn = find_spawn(spawn_map())
player = init_player(spawn)
player.press(Control.UP)
player.move()

frame = FrameBuffer()
render_frame(frame, player, default_map(), debug=False)
print(frame.pixel(640, 360))
```

- `raycube.worldmap`: the `WIDTH`, `HEIGHT` and `BLOCK` constants,
  `default_map`, `spawn_map`, `find_spawn` (returns a `Spawn`, or raises
  `ValueError` when the grid has no spawn marker) and `spawn_angle`.
- `raycube.player`: the `Control` enum (`UP`, `DOWN`, `LEFT`, `RIGHT`,
  `ROTATE_LEFT`, `ROTATE_RIGHT`), the `Player` dataclass with `press`,
  `release` and `move`, and `init_player`.
- `raycube.raycast`: `FrameBuffer` (`put_pixel`, `pixel`, `clear`),
  `touch`, `distance`, `fixed_dist`, `cast_ray`, `draw_column`,
  `draw_square`, `draw_map` and `render_frame`. With `debug=True`,
  `render_frame` draws a top-down view: the map outline, the player square
  and the ray paths.
- `raycube.app`: `Game` brings these together with keyboard handling
  through `handle_key_down`, `handle_key_up`, `step` and `close`.
  `key_to_control` maps a pygame key code to a `Control`. `main` runs the
  window.

The package also includes a set of small helpers:

- `raycube.charclass`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower`.
- `raycube.strings`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strjoin`, `strdup`, `strmapi` and `striteri`.
- `raycube.search`: `strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`,
  `strlcat` and `strlcpy`. Positions are returned as indices or `None`.
- `raycube.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove` and `memset`, which work on `bytearray`.
- `raycube.fdout`: `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd`, which write to file descriptors.
- `raycube.linkedlist`: `LinkedList` and `Node`.
- `raycube.printf`: `render` and `printf` for `%d %i %u %c %s %x %X %p %%`,
  plus `format_number`, `format_unsigned`, `format_hex`, `format_pointer`
  and `format_string`.
- `raycube.linereader`: `LineReader` and `read_lines`, which read lines
  from a file descriptor or a stream.

## Running the tests

```
pip install .[test]
pytest
```