"""Structural checks on scene configuration text."""

from __future__ import annotations

import string

from rtone.scanning import ConfigError, ErrorCode, check_field, pick_block, pick_nested_block

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_SHAPE_RULES = (
    ("plane {", (("pos:", 3), ("trs:", 3), ("col:", 3), ("nor:", 3), ("rot:", 3)),
     ErrorCode.PLANE),
    ("cone {", (("pos:", 3), ("trs:", 3), ("col:", 3), ("dir:", 3), ("rot:", 3),
                ("ang:", 1)), ErrorCode.CONE),
    ("cylinder {", (("pos:", 3), ("trs:", 3), ("col:", 3), ("dir:", 3), ("rot:", 3),
                    ("rad:", 1)), ErrorCode.CYLINDER),
    ("sphere {", (("pos:", 3), ("trs:", 3), ("col:", 3), ("rad:", 1)), ErrorCode.SPHERE),
)


def _fields_ok(block: str, fields: tuple[tuple[str, int], ...]) -> bool:
    return all(check_field(block, key, count) for key, count in fields)


def check_camera(text: str) -> str:
    """Validate the ``cam { }`` block and return it."""
    block = pick_block(text, "cam {", "}")
    if block is None:
        raise ConfigError(ErrorCode.NO_CAMERA)
    if "light {" in block or "obj {" in block:
        raise ConfigError(ErrorCode.CAM_NESTING)
    if not _fields_ok(block, (("pos:", 3), ("trs:", 3), ("rot:", 3))):
        raise ConfigError(ErrorCode.CAMERA_FIELDS)
    return block


def check_light(text: str) -> str:
    """Validate the ``light { }`` block and return it."""
    block = pick_block(text, "light {", "}")
    if block is None:
        raise ConfigError(ErrorCode.NO_LIGHT)
    if "cam {" in block or "obj {" in block:
        raise ConfigError(ErrorCode.LIGHT_NESTING)
    if not _fields_ok(block, (("pos:", 3), ("int:", 1))):
        raise ConfigError(ErrorCode.LIGHT_FIELDS)
    return block


def check_objects(text: str) -> str:
    """Validate the ``obj { }`` block and the shapes in it; return the block."""
    block = pick_nested_block(text, "obj {", "}", "{")
    if block is None:
        raise ConfigError(ErrorCode.BAD_OBJ)
    if "cam {" in block or "light {" in block:
        raise ConfigError(ErrorCode.OBJ_NESTING)
    if not any(tag in block for tag, _, _ in _SHAPE_RULES):
        raise ConfigError(ErrorCode.NO_OBJECT)
    for tag, fields, code in _SHAPE_RULES:
        shape = pick_block(block, tag, "}")
        if shape is not None and not _fields_ok(shape, fields):
            raise ConfigError(code)
    return block


def check_config(text: str) -> str:
    """Validate a whole configuration; returns the text lower-cased.

    The light is checked first, then the camera, then the objects.
    """
    lowered = text.translate(_LOWER)
    check_light(lowered)
    check_camera(lowered)
    check_objects(lowered)
    return lowered