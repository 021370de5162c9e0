"""
Kernel: Bitarea value type

A W×H boolean grid held in a single 64-bit payload. See masks.py for the
bit layout. Two profiles share one representation:

  - Bitarea: shape is a per-instance field (any W*H <= 64)
  - Bitarea3x4: shape is fixed on the class; built from a payload alone
"""

import operator

from ..core.registry import param_registry
from .masks import (
    WORD_BITS,
    ShapeError,
    bit_index,
    check_shape,
    pack_rows,
    shift_word_left,
    shift_word_right,
    unpack_rows,
    used_mask,
)

_REGISTRY = param_registry()


class Bitarea:
    """
    Packed boolean grid.

    Mutated only through set(); shifts and copy() return new values of the
    same class and shape. Equality compares shape and used bits only.
    """

    __slots__ = ("data", "width", "height")

    def __init__(self, width: int, height: int, data: int = 0):
        check_shape(width, height)
        try:
            data = operator.index(data)
        except TypeError as e:
            raise ShapeError(f"Payload must be an integer, got {type(data).__name__}") from e
        if data < 0 or data >> WORD_BITS:
            raise ShapeError(f"Payload must be a uint64, got {data:#x}")
        self.width = width
        self.height = height
        self.data = data

    @classmethod
    def new(cls, width: int, height: int) -> "Bitarea":
        """All-false grid."""
        return cls(width, height)

    @classmethod
    def from_rows(cls, width: int, height: int, rows: list[int]) -> "Bitarea":
        """
        Build from one right-aligned int per row (bit width-1 = column 0).

        Raises:
            ShapeError: If len(rows) != height or a row overflows width.

        Example:
            >>> print(Bitarea.from_rows(3, 2, [0b100, 0b011]))
            100
            011
        """
        return cls(width, height, pack_rows(rows, width, height))

    def to_rows(self) -> list[int]:
        return unpack_rows(self.data, self.width, self.height)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def _index(self, col: int, row: int) -> int:
        col, row = operator.index(col), operator.index(row)
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise BoundsError(
                f"Cell ({col}, {row}) outside {self.width}x{self.height} grid"
            )
        return bit_index(col, row, self.width)

    def set(self, col: int, row: int, value: bool) -> None:
        mask = 1 << self._index(col, row)
        if value:
            self.data |= mask
        else:
            self.data &= ~mask

    def get(self, col: int, row: int) -> bool:
        return (self.data >> self._index(col, row)) & 1 != 0

    def count(self) -> int:
        """Number of true cells."""
        return bin(self.data & used_mask(self.width, self.height)).count("1")

    def is_empty(self) -> bool:
        return self.data & used_mask(self.width, self.height) == 0

    # ------------------------------------------------------------------
    # Shifts
    # ------------------------------------------------------------------

    def _derive(self, data: int) -> "Bitarea":
        out = object.__new__(type(self))
        out.width = self.width
        out.height = self.height
        out.data = data
        return out

    def shift_left(self, n: int) -> "Bitarea":
        """Column c of the result is column c+n of self; n >= width clears."""
        return self._derive(shift_word_left(self.data, self.width, self.height, n))

    def shift_right(self, n: int) -> "Bitarea":
        """Column c of the result is column c-n of self; n >= width clears."""
        return self._derive(shift_word_right(self.data, self.width, self.height, n))

    def __lshift__(self, n: int) -> "Bitarea":
        return self.shift_left(n)

    def __rshift__(self, n: int) -> "Bitarea":
        return self.shift_right(n)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def copy(self) -> "Bitarea":
        return self._derive(self.data)

    __copy__ = copy

    def __eq__(self, other):
        if not isinstance(other, Bitarea):
            return NotImplemented
        if (self.width, self.height) != (other.width, other.height):
            return False
        mask = used_mask(self.width, self.height)
        return self.data & mask == other.data & mask

    # set() mutates in place
    __hash__ = None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, zero: str | None = None, one: str | None = None) -> str:
        """
        Row-major text dump, rows joined by newlines, no trailing newline.

        Cell characters and the row separator default to the registry's
        render_chars and render_row_sep.

        Only used bits are read, so leaked mask bits cannot show up here
        unless they land inside a real cell.
        """
        default_zero, default_one = _REGISTRY["render_chars"]
        zero = default_zero if zero is None else zero
        one = default_one if one is None else one

        lines = []
        for r in range(self.height):
            lines.append("".join(
                one if self.get(c, r) else zero for c in range(self.width)
            ))
        return _REGISTRY["render_row_sep"].join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        rows = ", ".join(f"0b{m:0{self.width}b}" for m in self.to_rows())
        return f"{type(self).__name__}(width={self.width}, height={self.height}, rows=[{rows}])"


# ============================================================================
# Fixed-shape profile
# ============================================================================

class Bitarea3x4(Bitarea):
    """
    Bitarea whose shape is fixed at 3 columns × 4 rows (registry fixed_shape).

    Compares equal to a general Bitarea(3, 4) holding the same used bits.

    new() and from_rows(rows) drop the width/height arguments of the base
    class, so code that builds through a Bitarea-typed cls with
    cls.from_rows(w, h, rows) must use Bitarea itself, not this subclass.
    Instance methods (get, set, shifts, copy, render) are interchangeable.
    """

    __slots__ = ()

    WIDTH, HEIGHT = _REGISTRY["fixed_shape"]

    def __init__(self, data: int = 0):
        super().__init__(self.WIDTH, self.HEIGHT, data)

    @classmethod
    def new(cls) -> "Bitarea3x4":
        return cls()

    @classmethod
    def from_rows(cls, rows: list[int]) -> "Bitarea3x4":
        return cls(pack_rows(rows, cls.WIDTH, cls.HEIGHT))

    def __repr__(self) -> str:
        rows = ", ".join(f"0b{m:0{self.WIDTH}b}" for m in self.to_rows())
        return f"Bitarea3x4(rows=[{rows}])"


class BoundsError(IndexError):
    """Raised when get/set address a cell outside the grid."""
    pass
