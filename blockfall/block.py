"""A falling piece: its type, orientation, position and grid of parts."""

from __future__ import annotations

from dataclasses import dataclass, replace

from blockfall.shapes import BlockTexCode, BlockType, shape_for

BLOCK_START_X = 4
BLOCK_START_Y = 0

_INITIAL_SIZE: dict[BlockType, tuple[int, int]] = {
    BlockType.CUBE: (2, 2),
    BlockType.TEE: (3, 2),
    BlockType.RLEE: (3, 2),
    BlockType.ZEE: (2, 3),
    BlockType.MZEE: (2, 3),
    BlockType.LLEE: (3, 2),
    BlockType.LINE: (4, 1),
}

_EMPTY_ROW = (BlockTexCode.O,) * 4


@dataclass(frozen=True)
class Rect:
    """Position on the board and the bounding size of a piece."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


class Block:
    """A piece on the board.

    A block with the clear flag set has every part empty; it is used to wipe
    the cells a moving piece has left.
    """

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        block_type: BlockType = BlockType.EMPTY,
        clear: bool = False,
    ) -> None:
        self._type = BlockType(block_type)
        self._clear = bool(clear)
        h, w = _INITIAL_SIZE.get(self._type, (0, 0))
        self._rect = Rect(x, y, w, h)
        self._orientation = 0
        self._parts: list[tuple[BlockTexCode, ...]] = []
        self._set_block(0)

    def _set_block(self, orientation: int = 0) -> None:
        self._orientation = orientation
        shape = shape_for(self._type, orientation)
        self._parts = list(shape.parts)
        if shape.height is not None and shape.width is not None:
            self._rect = replace(self._rect, h=shape.height, w=shape.width)
        if self._clear:
            self._parts = [_EMPTY_ROW] * 4

    def __repr__(self) -> str:
        return (
            f"Block(type={self._type.value}, orientation={self._orientation}, "
            f"rect={self._rect}, clear={self._clear})"
        )

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def block_type(self) -> BlockType:
        return self._type

    @property
    def clear(self) -> bool:
        return self._clear

    @property
    def orientation(self) -> int:
        return self._orientation

    def copy(self) -> Block:
        """Return a copy at the same position with the same clear flag.

        As with every reshaping of a block, the copy starts in orientation 0.
        """
        other = Block.__new__(Block)
        other._type = self._type
        other._clear = self._clear
        other._rect = self._rect
        other._orientation = self._orientation
        other._parts = []
        other._set_block(0)
        return other

    def set_clear(self, clear: bool) -> None:
        """Set the clear flag; the block is reshaped in orientation 0."""
        self._clear = bool(clear)
        self._set_block(0)

    def set_h(self, h: int) -> None:
        self._rect = replace(self._rect, h=h)

    def set_w(self, w: int) -> None:
        self._rect = replace(self._rect, w=w)

    def debug_reset_pos(self) -> None:
        """Move the block back to the top row."""
        self._rect = replace(self._rect, y=0)

    def reset(self) -> None:
        """Return the block to its starting position."""
        self._rect = replace(self._rect, x=BLOCK_START_X, y=BLOCK_START_Y)

    def block_parts(self) -> tuple[tuple[BlockTexCode, ...], ...]:
        """Return the 4x4 grid of parts, row by row."""
        return tuple(self._parts)

    def render_part(self, x: int, y: int) -> BlockTexCode:
        """Return the part at column ``x`` and row ``y``."""
        return self._parts[y][x]

    def move_down(self) -> None:
        self._rect = replace(self._rect, y=self._rect.y + 1)

    def move_left(self) -> None:
        self._rect = replace(self._rect, x=self._rect.x - 1)

    def move_right(self) -> None:
        self._rect = replace(self._rect, x=self._rect.x + 1)

    def rotate(self, clockwise: bool) -> bool:
        """Turn the block a quarter; return False if it has only one orientation."""
        if self._type is BlockType.CUBE:
            return False
        step = 1 if clockwise else -1
        self._set_block((self._orientation + step) % 4)
        return True

    @staticmethod
    def _span(counts: list[int]) -> int:
        # Leading empties are skipped; inner gaps count once something follows.
        span = 0
        gap = 0
        started = False
        for count in counts:
            if count > 0:
                span += 1 + gap
                gap = 0
                started = True
            elif started:
                gap += 1
        return span

    def height(self) -> int:
        """Return the number of rows the piece actually occupies."""
        return self._span([self.width_at_height(row) for row in range(self._rect.h)])

    def width(self) -> int:
        """Return the number of columns the piece actually occupies."""
        return self._span([self.height_at_width(col) for col in range(self._rect.w)])

    def width_at_height(self, height: int) -> int:
        """Return how many parts are filled in row ``height``."""
        return sum(
            self.render_part(x, height) is not BlockTexCode.O for x in range(self._rect.w)
        )

    def height_at_width(self, width: int) -> int:
        """Return how many parts are filled in column ``width``."""
        return sum(
            self.render_part(width, y) is not BlockTexCode.O for y in range(self._rect.h)
        )