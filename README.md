# voxelweek

Pieces of a small voxel sandbox game that work without a window or a
graphics context: terrain noise, block-picking rays, integer coordinate
vectors, materials and item stacks, keyboard state and render handles.

## Modules

- `voxelweek.noise`: `NoiseGenerator` and `NoiseParameters`. Seeded value
  noise summed over octaves gives a terrain height for each block column.
  The defaults are 7 octaves, amplitude 70, smoothness 235, height offset -5
  and roughness 0.53. Columns with a negative world coordinate get
  `water_level - 1`, and a height that is not positive becomes 1.
- `voxelweek.vector`: `VectorXZ` and `Vector3i`, frozen and hashable integer
  vectors that can be used as dictionary keys.
- `voxelweek.ray`: `Ray`, which starts at a position and moves forward along
  a pitch/yaw direction given in degrees. `step(scale)` moves the end point,
  and the `end` and `length` properties report where the ray is.
- `voxelweek.items`: `MaterialId`, `Material` and `ItemStack`. There is one
  `Material` for each id, such as `Material.GRASS_BLOCK`. `Material.from_id`
  returns `Material.NOTHING` for an unknown id. `ItemStack.add` returns
  whatever does not fit under the material's `max_stack_size`.
  `ItemStack.remove` takes one item, and a stack that becomes empty then
  holds `Material.NOTHING`.
- `voxelweek.keyboard`: `Keyboard` tracks which keys are held, based on
  `KeyEvent`s (`KeyEventType.PRESSED`, `RELEASED`, `OTHER`). `ToggleKey`
  polls a callable you supply and reports a press at most once every
  0.2 seconds.
- `voxelweek.render_info`: `RenderInfo`, a vertex array handle and an index
  count, with `reset()`.

## Installing

```
pip install .
```

With the test extra:

```
pip install ".[test]"
pytest
```

## Examples

Terrain height at a column of a chunk:

```python
from voxelweek.noise import NoiseGenerator

gen = NoiseGenerator(seed=42, chunk_size=16, water_level=64)
height = gen.get_height(3, 7, 10, 12)
```

Marching a ray:

```python
from voxelweek.ray import Ray

ray = Ray((0.0, 10.0, 0.0), (0.0, 90.0, 0.0))
while ray.length < 6:
    ray.step(0.05)
print(ray.end)
```

Stacking items:

```python
from voxelweek.items import ItemStack, Material, MaterialId

stack = ItemStack(Material.from_id(MaterialId.DIRT), 98)
left_over = stack.add(5)   # 4: the stack holds at most 99
```

Debounced keys:

```python
from voxelweek.keyboard import ToggleKey

held = {"F"}
toggle = ToggleKey("F", lambda key: key in held)
```

## What it does not do

The package has no game loop, window, renderer, shaders or textures, and it
has no command to start it. It provides no camera, view or projection
matrices, frustum culling, settings-file reader or interpolation helpers.
It does not generate or store worlds or chunks. A program that uses the
package has to supply these parts itself.