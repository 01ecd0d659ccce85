"""Piece types, part texture codes and the shape tables for every orientation."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class BlockType(enum.Enum):
    """The kinds of falling piece; ``EMPTY`` stands for no piece."""

    CUBE = "cube"
    TEE = "tee"
    RLEE = "rLee"
    ZEE = "zee"
    MZEE = "mzee"
    LLEE = "lLee"
    LINE = "line"
    EMPTY = "empty"


class BlockTexCode(enum.Enum):
    """Texture of one cell of a piece. ``O`` is an empty cell.

    ``Z`` marks a part that must not be cleared by a clearing block and has
    no texture of its own.
    """

    a = "a"
    b = "b"
    c = "c"
    d = "d"
    e = "e"
    f = "f"
    g = "g"
    h = "h"
    i = "i"
    j = "j"
    k = "k"
    l = "l"  # noqa: E741
    O = "O"  # noqa: E741
    Z = "Z"


_TEXTURED = frozenset(BlockTexCode) - {BlockTexCode.Z}


def tex_char(code: BlockTexCode) -> str:
    """Return the texture name for a part code.

    Raises KeyError for ``BlockTexCode.Z``, which has no texture.
    """
    if code not in _TEXTURED:
        raise KeyError(code)
    return code.value


Parts = tuple[tuple[BlockTexCode, ...], ...]


@dataclass(frozen=True)
class Shape:
    """A 4x4 grid of parts with the piece's bounding height and width.

    ``height`` and ``width`` are None when the shape leaves the size of the
    block it is applied to unchanged (the cube, and the empty piece).
    """

    parts: Parts
    height: int | None
    width: int | None

    def filled_cells(self) -> list[tuple[int, int]]:
        """Return ``(x, y)`` of every non-empty part, row by row."""
        return [
            (x, y)
            for y, row in enumerate(self.parts)
            for x, code in enumerate(row)
            if code is not BlockTexCode.O
        ]


def _shape(rows: tuple[str, ...], height: int | None, width: int | None) -> Shape:
    padded = tuple(rows) + ("OOOO",) * (4 - len(rows))
    parts = tuple(tuple(BlockTexCode(ch) for ch in row.ljust(4, "O")) for row in padded)
    return Shape(parts, height, width)


_EMPTY_SHAPE = _shape((), None, None)
_CUBE = _shape(("dd", "dd"), None, None)

_COMMON: dict[tuple[BlockType, int], Shape] = {}
for _o in range(4):
    _COMMON[(BlockType.CUBE, _o)] = _CUBE
    _COMMON[(BlockType.EMPTY, _o)] = _EMPTY_SHAPE

_COMMON.update(
    {
        (BlockType.TEE, 0): _shape(("e", "ee", "e"), 3, 2),
        (BlockType.TEE, 1): _shape(("eee", "Oe"), 2, 3),
        (BlockType.TEE, 2): _shape(("Oe", "ee", "Oe"), 3, 2),
        (BlockType.TEE, 3): _shape(("Oe", "eee"), 2, 3),
        (BlockType.RLEE, 0): _shape(("f", "f", "ff"), 3, 2),
        (BlockType.RLEE, 1): _shape(("fff", "f"), 2, 3),
        (BlockType.RLEE, 2): _shape(("ff", "Of", "Of"), 3, 2),
        (BlockType.RLEE, 3): _shape(("OOf", "fff"), 2, 3),
        (BlockType.MZEE, 0): _shape(("hh", "Ohh"), 2, 3),
        (BlockType.MZEE, 2): _shape(("hh", "Ohh"), 2, 3),
        (BlockType.MZEE, 1): _shape(("Oh", "hh", "h"), 3, 2),
        (BlockType.MZEE, 3): _shape(("Oh", "hh", "h"), 3, 2),
        (BlockType.LLEE, 0): _shape(("Oi", "Oi", "ii"), 3, 2),
        (BlockType.LLEE, 1): _shape(("i", "iii"), 2, 3),
        (BlockType.LLEE, 2): _shape(("ii", "i", "i"), 3, 2),
        (BlockType.LLEE, 3): _shape(("iii", "OOi"), 2, 3),
    }
)

_STANDARD: dict[tuple[BlockType, int], Shape] = dict(_COMMON)
_STANDARD.update(
    {
        (BlockType.ZEE, 0): _shape(("Ogg", "gg"), 2, 3),
        (BlockType.ZEE, 2): _shape(("Ogg", "gg"), 2, 3),
        (BlockType.ZEE, 1): _shape(("g", "gg", "Og"), 3, 2),
        (BlockType.ZEE, 3): _shape(("g", "gg", "Og"), 3, 2),
        (BlockType.LINE, 0): _shape(("jjjj",), 1, 4),
        (BlockType.LINE, 2): _shape(("jjjj",), 1, 4),
        (BlockType.LINE, 1): _shape(("Oj", "Oj", "Oj", "Oj"), 4, 2),
        (BlockType.LINE, 3): _shape(("Oj", "Oj", "Oj", "Oj"), 4, 2),
    }
)

_ODD_BALLS: dict[tuple[BlockType, int], Shape] = dict(_COMMON)
_ODD_BALLS.update(
    {
        (BlockType.ZEE, 0): _shape(("Ogg", "OOOO", "gg"), 3, 3),
        (BlockType.ZEE, 2): _shape(("Ogg", "OOOO", "gg"), 3, 3),
        (BlockType.ZEE, 1): _shape(("g", "gOg", "OOg"), 3, 3),
        (BlockType.ZEE, 3): _shape(("g", "gOg", "OOg"), 3, 3),
        (BlockType.LINE, 0): _shape(("jjOj", "OOj"), 2, 4),
        (BlockType.LINE, 1): _shape(("Oj", "Oj", "j", "Oj"), 4, 2),
        (BlockType.LINE, 2): _shape(("Oj", "jOjj"), 2, 4),
        (BlockType.LINE, 3): _shape(("j", "Oj", "j", "j"), 4, 2),
    }
)


def _lookup(table: dict[tuple[BlockType, int], Shape], block_type: BlockType, orientation: int) -> Shape:
    if orientation not in range(4):
        raise ValueError(f"orientation must be 0-3, got {orientation}")
    return table[(BlockType(block_type), orientation)]


def shape_for(block_type: BlockType, orientation: int) -> Shape:
    """Return the standard shape of a piece in orientation 0-3."""
    return _lookup(_STANDARD, block_type, orientation)


def odd_ball_shape_for(block_type: BlockType, orientation: int) -> Shape:
    """Return the broken-apart variant of a piece in orientation 0-3."""
    return _lookup(_ODD_BALLS, block_type, orientation)