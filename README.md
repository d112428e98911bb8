# hoboengine

A small toolkit for the CPU-side work of simple 3D scenes: vector math,
ready-made mesh data, an entity world of transforms with camera matrices,
basic rigid-body physics, RGBA texture loading and a terminal framebuffer.

## Modules

- **`hoboengine.vector`**: frozen `Vec2` and `Vec3` (addition, subtraction,
  multiplication by a number; `Vec3.xy()`, `Vec3.from_xy(xy, z)`), and `Mat2`
  and `Mat3` with `identity`, `Mat2.rotate`, `Mat2.scale`, `Mat3.rotate_x`,
  `rotate_y`, `rotate_z`, matrix products and a column-major `data` tuple.
  Free functions: `lerp`, `length`, `sqrt_length` (the squared length),
  `normalize` (returns a new vector; a zero vector raises `ZeroDivisionError`),
  `dot_product` and `clamp`.
- **`hoboengine.objects`**: interleaved vertex lists, triangle indices and
  `MeshFilter` attribute layouts for a unit cube and a unit plane, textured
  (`cube_vertex_uv`, `plane_vertex_uv`: position, normal, uv — 8 floats per
  vertex) or flat coloured (`cube_vertex_color`, `plane_vertex_color`:
  position, normal, colour — 9 floats per vertex). `cube_elements`,
  `plane_elements` and the `*_filters_uv` / `*_filters_color` functions give
  the matching indices and layouts. A `MeshFilter` holds `index`,
  `count_point`, `step` and `offset`, all counted in floats.
- **`hoboengine.ecs`**: `World` keeps a position, rotation (radians) and scale
  per entity as numpy arrays. `create_entity` reuses the most recently freed
  slot; `free_entity` resets a slot and frees it. Getters and setters raise
  `IndexError` for an index out of range; `set_positions`, `set_rotations` and
  `set_scales` take either one shared vector or one vector per index.
  `model_matrix` and `model_matrices` return 4x4 translate-rotate-scale
  matrices. `Camera3D` is an entity whose rotation holds its view direction;
  `matrix()` returns projection times view (near 0.1, far 100).
- **`hoboengine.physics`**: `Physics` gives an entity mass, bounce and a
  `velocity`. `apply_force` accumulates forces, `update(dt)` integrates them
  into velocity and position, and `resolve_collision(other, r1, r2)` exchanges
  an impulse between two spheres and pushes this body out of any overlap.
- **`hoboengine.texture`**: `Texture2D(path)` decodes an image to 8-bit RGBA
  `data` with `width` and `height`; `empty()` is true when loading failed.
  `set_flip_vertically` flips textures loaded afterwards.
- **`hoboengine.console`**: `ConsoleWindow(width, height)` holds a byte grid in
  `screen`; `render_screen(stream)` writes it (to standard output by default),
  and `normalized_coord` / `normalized_coord_aspect` map a cell position (two
  numbers or a `Vec2`) to -1..1, the latter corrected for the cell aspect.
- **`hoboengine.debug`**: `log`, `log_error` (red, and sets a flag),
  `has_crashed` and `reset_crash`.
- **`hoboengine.files`**: `newer_than`, `exists`, `create_directory`,
  `ensure_directory` and `read_file` (empty string when unreadable).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from hoboengine.ecs import World, Camera3D
from hoboengine.physics import Physics
from hoboengine.objects import cube_vertex_color, cube_elements, cube_filters_color

world = World()
camera = Camera3D(world, (0.0, 0.0, 5.0), (0.0, 0.0, -1.0), 60.0, 800, 600)

body = Physics(world)
body.apply_force((0.0, -9.8, 0.0))
body.update(0.016)

matrices = world.model_matrices()
view_projection = camera.matrix()

vertices = cube_vertex_color(1.0, 0.5, 0.2)
indices = cube_elements()
layout = cube_filters_color()
```

## What it does not do

The package does no GPU work. It opens no window, reads no keyboard or mouse
input, compiles no shaders, uploads no buffers or textures and draws nothing
on screen; the vertex data, layouts and matrices it produces are meant to be
handed to whatever rendering layer you use. Terminal output is limited to
writing the `ConsoleWindow` grid as it stands.