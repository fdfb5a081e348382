# moonbeam

A small 90s style raycasting game engine. A player walks around a 16×16 tile
map drawn column by column with a grid (DDA) raycaster, over a gradient
ceiling and floor. Walls are coloured by tile type and darken with distance;
walls hit on a y-facing side are drawn at half brightness. Resources come
from a pack file, and a MIDI lump in it is played as looping background music.

## Installing

```
pip install .
```

This installs `pygame`, which is used for the window, the keyboard and music.

## Running

```
moonbeam
moonbeam --pack path/to/data.mpk
```

Without `--pack`, the game looks for `data.mpk` in the directory of the
running program. A pack file is an ordinary zip archive; each member is a
*lump*, read fully into memory when the pack is opened. If the pack cannot be
opened, is not a valid zip archive or has no members, the message is printed
and the command exits with status 1. On success it logs
`Added <path> with <n> lumps`.

On the first frame the player is placed at tile (3, 3) facing along negative
x, and the lump named `music.mid` is started as looping music at volume 50
(of 127). If there is no such lump, its data is not recognised as music, or
no audio device can be opened, the game runs without music. Close the window
or press Escape to quit. The frame rate is capped at 60.

### Controls

| Key          | Action                      |
|--------------|-----------------------------|
| W / S        | move forward / back         |
| A / D        | strafe left / right         |
| J / L        | turn left / right           |
| I / K        | look up / down              |
| Left Shift   | move and turn 1.5× faster   |

Moves into a wall tile are refused.

## Using the pieces

The engine's parts work without opening a window.

```python
from moonbeam.archive import PackFile
from moonbeam.world import default_world
from moonbeam.player import Player, Controls
from moonbeam.raycast import cast_frame, parallax_bands

with PackFile.open("data.mpk") as pack:
    print(pack.names())
    music = pack.lump_for_name("music.mid")

world = default_world()
player = Player()
player.reset()
player.think(Controls(forward=True), 1 / 60, world, 960)

frame = cast_frame(player, world, 1280, 960)
for column in frame.columns[:3]:
    print(column.x, column.start, column.end, column.tile, column.color)

bands = parallax_bands(player, frame.min_height, 1280, 960)
```

### `moonbeam.archive`

- `PackFile.open(path)` reads a zip archive; raises `PackFileError` if it
  cannot be read or holds no members. Usable as a context manager;
  `close()` drops the lumps.
- `lump_for_name(name)` / `length_for_name(name)` give the data and size of
  the first file lump with that name, raising `KeyError` if there is none.
- `lump_for_num(num)` / `length_for_num(num)` index lumps in archive order,
  raising `IndexError` when out of range; directory members give `None` and
  length 0.
- `names()` lists file lumps; `len(pack)` counts all members.
- `Lump` holds a `name` and `data`, with `size` and `is_directory`.
- `default_pack_path()` is `data.mpk` next to the running program.

### `moonbeam.world`

`WorldMap(tiles)` is a rectangular grid indexed as `world[x, y]`; 0 is open
floor, anything else a wall. `in_bounds(x, y)` and `is_empty(x, y)` check
positions. `default_world()` returns the built-in 16×16 map.

### `moonbeam.player`

`Player` holds position, facing direction, camera plane and vertical aim
(`ang_z`). `reset()` places it at the start; `think(controls, frame_time,
world, screen_height)` applies one frame of movement from a `Controls` value.

### `moonbeam.raycast`

- `cast_ray(player, world, x, screen_width, screen_height)` returns the
  `Column` seen by screen column `x`: start and end rows, line height,
  perpendicular distance, side hit, tile, whether a wall was hit, and colour.
- `cast_frame(player, world, screen_width, screen_height)` returns a `Frame`
  of all columns and the shortest line height.
- `parallax_bands(player, min_height, screen_width, screen_height)` returns
  the `ParallaxBands` ceiling and floor gradient rectangles.
- `shade_level(distance, side)` and `wall_color(tile, level)` give wall
  brightness and colour (tiles 2, 3, 4 are red, green, blue; others purple).

### `moonbeam.music`

`MusicPlayer(output=None)` keeps playback state (`is_playing`, `is_hooked`,
`loop`, `volume`). `play(data, loop)` raises `MusicError` for empty data or
data that does not start with a known music signature; `stop()`, `pause()`,
`register_hook()`, `deregister_hook()` and `close()` manage state.
`set_volume(v)` takes a 0–127 volume and sets the gain to
`volume_gain(v) = 100 * (v / 127) ** 2`; `scale_samples(samples)` applies
that gain with `clamp_sample`, which clamps to the signed 16-bit range.
`PygameMusicOutput` sends the music to `pygame.mixer.music`.

### `moonbeam.game`

`Game` ties these together: `start()`, `update(controls, frame_time)` and
`draw(surface)` onto a pygame surface. `controls_from_keys(pressed)` builds
`Controls` from a pygame key state, and `main(argv=None)` is the `moonbeam`
command.

## What it does not do

There are no textures, sprites, enemies or weapons, and the map is the
built-in one rather than loaded from the pack file. Music plays through
pygame's mixer; there are no settings for the synthesizer, and the gain
computed by `MusicPlayer` is passed to the mixer capped at 1.0.

## Tests

```
pip install ".[test]"
pytest
```