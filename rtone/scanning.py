"""Low-level scanning of scene configuration text, and configuration errors."""

from __future__ import annotations

import re
from enum import IntEnum
from pathlib import Path
from typing import Optional, Union


class ErrorCode(IntEnum):
    """Reasons a configuration is rejected."""

    LIGHT_FIELDS = 0
    CAMERA_FIELDS = 1
    SPHERE = 2
    CYLINDER = 3
    CONE = 4
    PLANE = 5
    NO_OBJECT = 6
    OBJ_NESTING = 7
    CAM_NESTING = 8
    LIGHT_NESTING = 9
    NO_CAMERA = 10
    NO_LIGHT = 11
    BAD_OBJ = 12


_MESSAGES = {
    ErrorCode.LIGHT_FIELDS: (
        'error in light: "int" or "pos" are not included or bad numbers are assigned'
    ),
    ErrorCode.CAMERA_FIELDS: (
        'error in light: "trs","rot","pos" are not included or bad numbers are assigned'
    ),
    ErrorCode.SPHERE: (
        "error in sphere function;\nshould be: sphere {\npos: n,n,n;\n"
        "trs:n,n,n;\ncol: n,n,n;\nrad:n;}"
    ),
    ErrorCode.CYLINDER: (
        "error in cylinder function;\nshould be: cylinder {\npos: n,n,n;\n"
        "trs:n,n,n;\ncol: n,n,n;\nrot:n,n,n;\ndir:n,n,n;\nrad:n;}"
    ),
    ErrorCode.CONE: (
        "error in cone function;\nshould be: cone {\npos: n,n,n;\n"
        "trs:n,n,n;\ncol: n,n,n;\nrot:n,n,n;\ndir:n,n,n;\nang:n;}"
    ),
    ErrorCode.PLANE: (
        "error in plane function;\nshould be: plane {\npos: n,n,n;\n"
        "trs:n,n,n;\ncol: n,n,n;\nrot:n,n,n;\nnor:n,n,n;}"
    ),
    ErrorCode.NO_OBJECT: "no object found in obj { } function;",
    ErrorCode.OBJ_NESTING: (
        "cam or light are in obj { },,\nex: obj {cam{}}\nsould be: obj {}cam{}"
    ),
    ErrorCode.CAM_NESTING: (
        "obj or light are in cam { },,\nex: cam {obj{}}\nsould be: cam {}light{}"
    ),
    ErrorCode.LIGHT_NESTING: (
        "obj or cam are in light { },,\nex: light {cam{}}\nsould be: light {}cam{}"
    ),
    ErrorCode.NO_CAMERA: "couldn't find cam, in config file\nex:\ncam { pos:... }",
    ErrorCode.NO_LIGHT: (
        "couldn't find light, in config file\nex:\nlight { pos:...; int:...; }"
    ),
    ErrorCode.BAD_OBJ: "bad obj syntax, in config file\nex:\nobj { sphere {...} }",
}


class ConfigError(ValueError):
    """A scene configuration that cannot be used."""

    def __init__(self, code: Union[ErrorCode, int]) -> None:
        self.code = ErrorCode(code)
        super().__init__(_MESSAGES[self.code])


_FIELD_CHARS = re.compile(r"[0-9, \t\n]*")
_NUMBER = re.compile(r"[0-9]+")


def pick_block(text: str, start: str, end: str) -> Optional[str]:
    """Text from the first ``start`` through the first ``end`` after it.

    Only the first character of ``end`` is kept. Returns ``None`` when
    either marker is missing.
    """
    begin = text.find(start)
    if begin < 0 or begin + 1 >= len(text):
        return None
    stop = text.find(end, begin + 1)
    if stop < 0:
        return None
    return text[begin:stop + 1]


def pick_nested_block(text: str, start: str, end: str, opener: str) -> Optional[str]:
    """Text from ``start`` through the ``end`` that balances it.

    Each ``opener`` seen after ``start`` must be closed by an ``end``
    before the block itself is closed.
    """
    begin = text.find(start)
    if begin < 0:
        return None
    block = text[begin:]
    depth = 0
    for index, ch in enumerate(block[len(start):], start=len(start)):
        if ch == end:
            if depth == 0:
                return block[:index + 1] if index else None
            depth -= 1
        if ch == opener:
            depth += 1
    return None


def check_field(text: str, key: str, count: int) -> bool:
    """Whether ``key`` is followed by exactly ``count`` unsigned integers.

    The numbers may be separated only by commas and whitespace, and the
    field ends at ``;`` or at the end of the text; a field that runs to
    the end of the text must not end on a digit.
    """
    at = text.find(key)
    if at < 0:
        return False
    rest = text[at + len(key):]
    semicolon = rest.find(";")
    segment = rest if semicolon < 0 else rest[:semicolon]
    if not _FIELD_CHARS.fullmatch(segment):
        return False
    if semicolon < 0 and segment[-1:].isdigit():
        return False
    return len(_NUMBER.findall(segment)) == count


def read_config(path: Union[str, Path]) -> str:
    """Read a configuration file as text."""
    return Path(path).read_text(encoding="utf-8", errors="replace")