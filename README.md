# cubcaster

A small first-person raycasting explorer. You describe a scene in a `.cub`
file: four wall textures, a floor colour, a ceiling colour and a grid of
walls. `cubcaster` draws it in a 1280x960 window that you can walk around in.

## Installation

```
pip install .
```

This installs `pygame`, which provides the window and input handling, and
`pillow`, which loads the PNG textures.

## Running

```
cubcaster maps/example.cub
```

The command takes exactly one argument, the path to a file ending in `.cub`.
If there is no argument or more than one, it prints a usage message to standard
error and exits with status 1. An invalid scene file or a texture that cannot
be loaded also prints an `[Error]` report naming the problem and exits with
status 1.

Besides the wall textures named in the scene file, the game loads these
images from an `assets` directory in the current working directory:

* `assets/sprites/weapon.png`: the weapon sprite sheet, a grid of 4 rows and
  6 columns. The animation frames are taken down the second column.
* `assets/textures/mini_wall.png`: the minimap wall tile, scaled to 32x32.
* `assets/textures/mini_space.png`: the minimap floor tile, scaled to 32x32.
* `assets/textures/mini_player.png`: the minimap player marker, scaled to 10x10.

The package does not include these images. You must provide them.

### Controls

| Input                        | Action                     |
|------------------------------|----------------------------|
| `W` / `S`                    | move forward / backward    |
| `A` / `D`                    | strafe left / right        |
| `←` / `→`                    | turn left / right          |
| mouse movement               | turn                       |
| left mouse button (held)     | play the weapon animation  |
| `Esc` or closing the window  | quit                       |

The game runs at up to 60 frames per second. The minimap shows a 200x200
window of the map centred on the player, in the top-left corner.

## The `.cub` format

The file opens with six elements in any order, one per line. Each element is
an identifier and one value, separated by spaces:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

* `NO`, `SO`, `WE` and `EA` name the wall textures. Each must end in `.png`,
  exist, and start with the PNG signature. Paths are resolved against the
  current working directory.
* `F` and `C` are the floor and ceiling colours. Each is exactly three
  comma-separated numbers of one to three digits, each from 0 to 255, with
  no trailing comma.
* Each element may appear only once. Empty lines between elements are
  ignored.

The map follows the elements. It uses these characters:

* `1`: wall
* `0`: floor
* space: outside the map
* `N`, `S`, `E`, `W`: the player's start cell and the direction it faces

```
        1111111111111
        1000000000001
111111111011000001111
100000000000000000001
1111011111110000N0001
   101    10000000001
   111    11111111111
```

The map must hold exactly one player. The floor the player can reach must be
closed in by walls. Empty lines before the map are skipped. An empty line
after the first map row is an error. Only lines ending in a newline are read,
so the last line of the file needs one.

## Using it as a library

The parsing, movement and raycasting code works without a window:

```python
from cubcaster.reader import load_map
from cubcaster.movement import Key, apply_keys, resolve_collision

cub_map, player = load_map("maps/example.cub")
print(cub_map.max_rows, cub_map.max_cols, player.angle)

apply_keys(player, {Key.W})
resolve_collision(player, cub_map)
print(player.current)
```

The main modules are:

* `cubcaster.reader`: `load_map(path)` and `read_map(lines)`. Both return a
  `(CubMap, Player)` pair.
* `cubcaster.cubmap`: `CubMap`, `validate_grid` and `is_enclosed`.
* `cubcaster.elements`: `read_element`, `validate_png` and `ElementType`.
* `cubcaster.raycast`: `cast_rays(player, grid, walls, count)`. It returns one
  `Ray` per screen column. `walls` maps each `ElementType` wall side to an
  `Image`.
* `cubcaster.movement`: `apply_keys`, `apply_mouse_motion` and
  `resolve_collision`.
* `cubcaster.image`: `Image`, an RGBA pixel buffer, and `Color`.
* `cubcaster.assets`: `load_png` and `AssetManager.build(cub_map, asset_dir)`.
* `cubcaster.render`: `draw_scene`, `draw_minimap`, `draw_weapon` and
  `compose_frame`.
* `cubcaster.game`: `Game`, whose `update()` advances one frame and whose
  `frame()` composites it into one `Image`. It also holds `main`, the function
  behind the command.

Errors in a scene file raise `cubcaster.errors.MapError`. Problems loading
images raise `cubcaster.errors.AssetError`. Both derive from
`cubcaster.errors.CubError`.

## What it does not do

There are no enemies, no score and no sound. The attack button only plays
the weapon animation. The images in `assets/` are not shipped with the
package.