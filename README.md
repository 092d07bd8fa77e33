# bendyscene

A small library with no third-party dependencies that describes a posable
cartoon character standing in a textured room. It has five modules:

- `bendyscene.bmp` – decode uncompressed 24-bit BMP files (12- or 40-byte
  headers) into RGB pixel data, bottom row first (`parse_bmp`, `load_bmp`,
  `Image`). Anything else raises `BitmapError`, a `ValueError`.
- `bendyscene.objmodel` – read Wavefront OBJ models and their MTL material
  libraries (`parse_obj`, `load_model`, `parse_mtl`, `load_mtl`, `Model`,
  `Face`, `Material`, `MaterialSwitch`). Faces may have three or four
  vertices in the `v`, `v/t`, `v//n` and `v/t/n` forms; `usemtl` lines
  become `MaterialSwitch` entries in `Model.faces`. The model's `pos_x`,
  `pos_y` and `pos_z` give an offset that centres it in view. A material
  library that cannot be read is logged as a warning and skipped.
- `bendyscene.geometry` – 4×4 matrix helpers (`identity`, `multiply`,
  `translate`, `scale`, `rotate`, `perspective`, `transform_point`,
  `aspect_ratio`) plus half-sphere mesh generation (`half_sphere_vertices`,
  `half_sphere_quads`).
- `bendyscene.controls` – keyboard and mouse handling for posing the arms,
  hands, fingers and legs and for orbiting and zooming the camera
  (`Pose`, `Controls`, `Action`, `camera_for_model`).
- `bendyscene.scene` – build the character and the room as a flat list of
  transformed `Primitive` objects (`build_bendy`, `room_quads`,
  `build_scene`), ready to hand to a renderer.

## Installation

```
pip install .
```

## Example

```python
from bendyscene.objmodel import load_model
from bendyscene.controls import camera_for_model
from bendyscene.scene import build_scene

model = load_model("Model/BendyHead3.obj")
controls = camera_for_model(model)

controls.key("a")                 # turn the left arm by -5 degrees
controls.mouse(0, 0, 100, 100)    # press the left button
controls.motion(130, 110)         # drag to orbit the camera

for primitive in build_scene(controls):
    print(primitive.kind, primitive.color, primitive.texture)
```

## Controls

`Controls.key` takes a character or its code and returns an `Action` or
`None`:

- `a`/`A` left arm, `d`/`D` right arm, `q`/`Q` left hand, `e`/`E` right hand,
  `z`/`Z` left leg, `c`/`C` right leg, `n`/`N` left finger, `m`/`M` right
  finger. Each press moves the joint 5 degrees within a fixed range
  (arms −25..15 and −15..25, hands ±30, legs ±60, fingers 0..20) and returns
  `Action.POSE`; a press at the limit returns `None`.
- `p` returns `Action.PLAY_SOUND`, `P` returns `Action.STOP_SOUND`, and
  Escape returns `Action.QUIT`.

`Controls.mouse(button, state, x, y)` starts or ends a drag with the left
button (`LEFT_BUTTON`, states `DOWN`/`UP`); wheel buttons `WHEEL_UP` (3) and
`WHEEL_DOWN` (4) zoom in and out between scroll positions 0 and
`MAX_SCROLL` (15), starting at 5. `Controls.motion(x, y)` orbits the camera
while dragging: the yaw wraps around 360 degrees and the pitch is held
between −15 and 35 degrees.

## What it does not do

The package builds data only. It opens no window, draws nothing, uploads no
textures and plays no sound: `build_scene` returns primitives with their
transforms and texture names (see `scene.TEXTURES`), and `Action.PLAY_SOUND`
names `controls.SOUND_FILE` but playing it is left to the caller. There is
no command-line program.

## Running the tests

```
pip install .[test]
pytest
```