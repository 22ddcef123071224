# rtone

Checks for the plain-text scene files of a small ray tracer that works
with spheres, planes, cylinders and cones lit by a single point light,
together with a few character, string, byte-buffer and output helpers.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Scene files

A scene file has three blocks: `cam`, `light` and `obj`. Every value is
a list of unsigned integers separated by commas and whitespace and ended
with `;`. Keywords are case-insensitive: `check_config` lower-cases the
text before checking it.

```
cam {
    pos: 0, 0, 300;
    trs: 0, 0, 0;
    rot: 0, 0, 0;
}
light {
    pos: 0, 200, 200;
    int: 1;
}
obj {
    sphere {
        pos: 0, 0, 100;
        trs: 0, 0, 0;
        col: 255, 0, 0;
        rad: 50;
    }
    plane {
        pos: 0, 100, 0;
        trs: 0, 0, 0;
        col: 0, 0, 255;
        rot: 0, 0, 0;
        nor: 0, 1, 0;
    }
    cylinder {
        pos: 150, 0, 200;
        trs: 0, 0, 0;
        col: 0, 255, 0;
        rot: 0, 0, 0;
        dir: 0, 1, 0;
        rad: 30;
    }
    cone {
        pos: 150, 0, 200;
        trs: 0, 0, 0;
        col: 255, 255, 0;
        rot: 0, 0, 0;
        dir: 0, 1, 0;
        ang: 30;
    }
}
```

The fields each block must have:

| block      | fields (number of values)                              |
|------------|--------------------------------------------------------|
| `cam`      | `pos` (3), `trs` (3), `rot` (3)                         |
| `light`    | `pos` (3), `int` (1)                                    |
| `sphere`   | `pos` (3), `trs` (3), `col` (3), `rad` (1)              |
| `plane`    | `pos` (3), `trs` (3), `col` (3), `nor` (3), `rot` (3)   |
| `cylinder` | `pos` (3), `trs` (3), `col` (3), `dir` (3), `rot` (3), `rad` (1) |
| `cone`     | `pos` (3), `trs` (3), `col` (3), `dir` (3), `rot` (3), `ang` (1) |

A sign is not accepted in a value, so a field such as `pos: 0, 0, -300;`
is rejected. `cam` and `light` must not contain another block, `obj`
must not contain `cam` or `light`, and `obj` must hold at least one
shape. Only the first shape of each kind in `obj` is checked.

## Checking a scene

```python
from rtone.scanning import ConfigError, read_config
from rtone.validate import check_config

text = read_config("scene.rt")
try:
    lowered = check_config(text)
except ConfigError as err:
    print(err.code.name)
    print(err)
```

- `rtone.validate.check_config(text)` checks the light, then the camera,
  then the objects, and returns the lower-cased text.
  `check_light`, `check_camera` and `check_objects` check one block each
  and return it.
- `rtone.scanning.ConfigError` is a `ValueError`; its `code` is an
  `ErrorCode` member saying what is wrong, and its message describes the
  expected form.
- `rtone.scanning` also has the scanning pieces the checks are built on:
  `pick_block(text, start, end)`, `pick_nested_block(text, start, end,
  opener)`, `check_field(text, key, count)` and `read_config(path)`.

## Helpers

- `rtone.chars`: `is_white`, `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `to_lower`, `to_upper`, `atoi`,
  `atoi_consume` (returns the value and the unparsed rest) and `itoa`.
- `rtone.strings`: `find_char`, `rfind_char`, `compare`, `compare_n`,
  `equal`, `equal_n`, `find`, `find_bounded`, `split`, `substring`,
  `trim`, `map_chars`, `map_chars_indexed`, `bounded_concat`,
  `concat_n` and `join`.
- `rtone.membytes`: `mem_find`, `mem_compare`, `mem_copy_until`,
  `mem_move`, `mem_set`, `zero` and `mem_copy`, working on `bytearray`
  buffers and raising `IndexError` for spans outside the buffer.
- `rtone.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to a given text stream or to standard output.

## What this package does not do

It checks scene files but does not turn them into scene objects, does
not trace rays or produce images, and has no viewer window and no
command-line program.