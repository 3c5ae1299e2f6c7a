# rendermath

Small geometry and shading math for renderers and ray tracers, using only
the standard library: 2D/3D/4D vectors, 4x4 matrices, quaternions, lines,
planes, axis-aligned bounding boxes, RGB spectra, rays, hit records and
simple light sources.

## Installation

```
pip install rendermath
```

To run the test suite:

```
pip install "rendermath[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `rendermath.vec2`, `vec3`, `vec4` | `Vec2`, `Vec3`, `Vec4`: mutable float vectors with componentwise arithmetic (with vectors or scalars), indexing, `abs`, `norm`, `norm_squared`, `unit`, `normalize` (in place), `valid`, `range`; module functions `hmin`, `hmax`, `dot`, plus `cross` in `vec3`. `Vec3` orders lexicographically with `<`; `Vec4` adds `xyz` and `project` (divide by `w`). |
| `rendermath.mathlib` | `radians`, `degrees`, `clamp` (scalars or vectors), `lerp`, `sign`, `frac`, `smoothstep`; constants `EPS_F`, `PI_F` |
| `rendermath.mat4` | `Mat4`, column-major (`m[i]` is column `i`), identity by default; `Mat4.I`, `Mat4.Zero`; builders `translate`, `rotation`, `euler`, `rotate_to`, `rotate_z_to`, `scale`, `axes`, `look_at`, `ortho`, `project`; methods `rotate`, `to_euler`, `transpose`, `inverse`, `det`; module function `outer` |
| `rendermath.line` | `Line` with `at`, `closest`, `closest_to_line` |
| `rendermath.plane` | `Plane` (normal `p.xyz()`, offset `p.w`), `Plane.from_point_normal`, `Plane.hit` |
| `rendermath.quat` | `Quat` (identity by default) with `axis_angle`, `euler`, `conjugate`, `inverse`, `unit`, `rotate`, `to_mat`, `to_euler`; module functions `dot`, `slerp` |
| `rendermath.bbox` | `BBox` (empty by default) with `reset`, `enclose`, `center`, `empty`, `surface_area`, `transform`, `corners`, `screen_rect` |
| `rendermath.spectrum` | `Spectrum` RGB triple with arithmetic, `luma`, `valid`, `to_vec`, `make_srgb`, `make_linear`, `Spectrum.direction`; constant `GAMMA` |
| `rendermath.ray` | `Ray` with `point`, unit `dir`, `dist_bounds`, `throughput`, `depth`; methods `at`, `transform` |
| `rendermath.trace` | `Trace` hit record (dataclass) with `Trace.min` and `transform` |
| `rendermath.primitive_list` | `PrimitiveList`: any objects with `bbox()` and `hit(ray)`, searched in turn for the nearest hit |
| `rendermath.light` | `LightSample`, `DirectionalLight`, `PointLight`, `SpotLight`, and `Light`, which places one of them with a matrix |
| `rendermath.log` | `info`, `warn` (printed to stdout with the caller's file and line), `die` (prints, then raises `SystemExit` with the caller's line number), `last_file` |

Angles given to the rotation helpers, Euler conversions and spot-light cone
bounds are in degrees. Multiplying a `Mat4` by a `Vec3` (with `*` or `@`)
transforms it as a point and divides by `w`; `Mat4.rotate` transforms a
direction. Build a `Vec4` or `Quat` from a `Vec3` with `Vec4(*v, w)` or
`Quat(*v, w)`.

## Example

```python
from rendermath.bbox import BBox
from rendermath.light import Light, PointLight
from rendermath.mat4 import Mat4
from rendermath.quat import Quat
from rendermath.ray import Ray
from rendermath.spectrum import Spectrum
from rendermath.vec3 import Vec3, cross

# Cross product of the X and Y axes is the Z axis.
print(cross(Vec3(1, 0, 0), Vec3(0, 1, 0)))

# Compose a transform and apply it to a point.
m = Mat4.translate(Vec3(1, 2, 3)) @ Mat4.rotation(90.0, Vec3(0, 1, 0))
print(m @ Vec3(1, 0, 0))

# Rotate a vector with a quaternion.
q = Quat.axis_angle(Vec3(0, 0, 1), 90.0)
print(q.rotate(Vec3(1, 0, 0)))

# Grow a bounding box around points.
box = BBox()
box.enclose(Vec3(-1, -1, -1))
box.enclose(Vec3(1, 2, 3))
print(box.center(), box.surface_area())

# Rays carry a unit direction.
ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, 5))
print(ray.at(2.0))

# A point light moved to (0, 4, 0), seen from the origin.
light = Light(PointLight(Spectrum(1.0)), 1, Mat4.translate(Vec3(0, 4, 0)))
sample = light.sample(Vec3(0, 0, 0))
print(sample.direction, sample.distance)
```

## What it does not do

This package holds the math and the simple light types only. It has no
renderer or path tracer, no acceleration structure beyond the flat
`PrimitiveList`, no shapes or triangle meshes to intersect, no materials,
no area or environment lights, no image output, and no command-line
program.