# meshview

meshview is a small real-time 3D viewer built on pyglet and numpy. It opens an
OpenGL 3.3 core window and shows a demo scene: a loaded OBJ model and a grid of
procedural primitives (triangle, quad, circle, pyramid, cube and cylinder). Each
one is drawn three times: filled, as a wireframe and as points. All of them spin
about the vertical axis. A line is drawn from the origin to show a ray.
You can fly through the scene with the keyboard and mouse. If a shader file
changes on disk while the viewer runs, the viewer reloads it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Running the viewer

```
meshview
```

Options:

- `--assets DIR`: the directory that holds `shaders/` and `models/`. The default is `assets`.
- `--log-level LEVEL`: the logging level, for example `DEBUG`, `INFO` or `WARNING`. The default is `INFO`.
  Info and debug messages go to stdout. Warnings and errors go to stderr.

The viewer needs these files:

- `<assets>/shaders/fog_vert.glsl` and `<assets>/shaders/fog_frag.glsl` are used for the scene.
  Both must exist.
- `<assets>/models/dragon.obj` is the model. If it cannot be read, the scene is
  built without it.
- `assets/shaders/basic_vert.glsl` and `assets/shaders/basic_frag.glsl` are used for the
  ray line. Both must exist. These paths are always relative to the working
  directory. `--assets` does not change them.

The shaders must declare `mat4` uniforms named `model`, `view` and
`projection`. A warning is logged when one of them is missing. Vertex
positions go to attribute location 0 and colours to location 1.

### Controls

| Key / input  | Action                          |
|--------------|---------------------------------|
| W / S        | move forward / backward         |
| A / D        | strafe left / right             |
| Q / E        | move down / up                  |
| Left Shift   | sprint (5x by default)          |
| Mouse        | look around (pitch limited to ±89°) |
| Escape       | close the window                |

## Using the library

The maths and geometry parts work without a window or a GL context. GPU
resources are created only when something is drawn.

```python
from meshview.vector3 import Vector3
from meshview.quaternion import Quaternion
from meshview import objloader

spin = Quaternion.with_axis_angle(Vector3(0, 1, 0), 1.57)
print(spin.apply(Vector3(1, 0, 0)))

mesh = objloader.parse("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
print(mesh.vertex_count)  # 3
```

Modules:

- `meshview.vector3`: `Vector3` is an immutable vector. Equality uses a float32
  epsilon tolerance. It has arithmetic with vectors and scalars, `dot`, `cross`,
  `length`, `normalized(length)`, `distance`, `lerp`, `min`, `max` and `as_array`.
- `meshview.quaternion`: `Quaternion` is an immutable quaternion. The default is
  the identity. It has the Hamilton product and division, `normalized`,
  `inversed`, `conjugated`, `lerp`, `apply` (rotates a `Vector3`), `to_matrix`
  (a 4x4 numpy array), and the constructors `with_axis_angle` and `with_euler_angle`.
- `meshview.mesh`: `Mesh` holds a flat float32 vertex list and a colour list.
  If no colours are given, `generate_colors` derives them from the positions.
  The primitives are `Mesh.triangle`, `Mesh.quad`, `Mesh.cube`, `Mesh.pyramid`,
  `Mesh.circle` and `Mesh.cylinder`.
- `meshview.objloader`: `parse(content)` and `load(path)` read the `v` and `f`
  records of an OBJ file. Polygons are triangulated as fans. An out-of-range
  index becomes a zero vertex and an error is logged. `load` raises `OSError`
  when the file cannot be read.
- `meshview.material`: `Material` holds a `RenderType` primitive mode (points,
  lines, triangles, and others) and a `wireframe` switch.
- `meshview.shader`: `Shader` loads a vertex file and a fragment file. It links
  them the first time the shader is used. `refresh()` reloads the sources when
  a file's modification time changes.
- `meshview.entity`: `Entity` holds a mesh, a material and a shader, together
  with `position`, `rotation` and `scale`. `model_matrix()` returns translation × rotation × scale.
- `meshview.ray`: `Ray` has a normalised direction. `cast(length)` tests the
  triangles of its `objects` in world space. It returns the nearest
  `Intersection` (point, entity, distance) for each entity that is hit, sorted
  by distance. `visualization_mesh` and `visualization_entity` build a line that
  shows the ray.
- `meshview.camera`: `Camera` is a perspective camera (field of view in degrees)
  with `forward`, `right`, `up`, `view_matrix` and `projection_matrix`.
  `look_at` and `perspective` are available as functions.
- `meshview.clock`: `Clock` reports frame deltas from any time source.
- `meshview.renderer`, `meshview.window` and `meshview.controller` draw the
  scene, own the window and its input, and handle the fly controls.
- `meshview.app`: `build_scene` and `configure_logging` are used by the
  `meshview` command.

## Limitations

- The OBJ reader uses only vertex positions and faces. Texture coordinates,
  normals, groups and materials in the file are ignored.
- There is no lighting model or texturing. The look of the scene depends only
  on the shaders you provide.
- The demo scene is fixed. You cannot choose other models from the command line.