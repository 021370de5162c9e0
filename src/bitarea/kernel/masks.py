"""
Kernel: Word Layout & Row Masks

Pure integer arithmetic for a W×H boolean grid packed into one 64-bit word.

Word layout:
  - Cell (c, r) lives at bit 63 - (r*W + c)
  - Bit 63 is the top-left cell; column advances first, then row
  - Row r occupies bits [64 - (r+1)*W, 63 - r*W]
  - The low 64 - W*H bits are unused and never carry meaning

Row representation (for from_rows / to_rows):
  - One int per row with the row in its W least-significant bits
  - Bit W-1 is column 0, bit 0 is column W-1
"""

import operator

from ..core.registry import param_registry

WORD_BITS = param_registry()["word_bits"]
WORD_MASK = (1 << WORD_BITS) - 1


# ============================================================================
# SHAPE & OFFSETS
# ============================================================================

def check_shape(W: int, H: int) -> None:
    """
    Validate a grid shape against the word size.

    Raises:
        ShapeError: If W or H is not a positive int, or W*H > 64.
    """
    for name, dim in (("width", W), ("height", H)):
        if not isinstance(dim, int) or isinstance(dim, bool):
            raise ShapeError(f"{name} must be an int, got {type(dim).__name__}")
        if dim < 1:
            raise ShapeError(f"{name} must be positive, got {dim}")
    if W * H > WORD_BITS:
        raise ShapeError(f"Shape {W}x{H} has {W * H} cells; at most {WORD_BITS} fit")


def bit_index(c: int, r: int, W: int) -> int:
    """Bit position of cell (c, r); no bounds check."""
    return WORD_BITS - 1 - (r * W + c)


def row_shift(r: int, W: int) -> int:
    """Bit position of the rightmost column of row r."""
    return WORD_BITS - (r + 1) * W


def used_mask(W: int, H: int) -> int:
    """Mask of the W*H high-order bits that hold cells."""
    used = W * H
    return ((1 << used) - 1) << (WORD_BITS - used)


# ============================================================================
# ROW MASK (shared by both shift directions)
# ============================================================================

def row_mask(W: int, H: int, valid_bits_per_row: int) -> int:
    """
    Replicate a right-aligned run of valid_bits_per_row ones into every row.

    Args:
        W: Width (columns per row).
        H: Height (number of rows).
        valid_bits_per_row: Number of rightmost columns selected in each row.

    Returns:
        int: 64-bit mask.

    Raises:
        ShapeError: If the shape is invalid.
        ValueError: If valid_bits_per_row is outside [0, W].

    Example:
        >>> bin(row_mask(3, 2, 2) >> 58)
        '0b11011'
    """
    check_shape(W, H)
    if not 0 <= valid_bits_per_row <= W:
        raise ValueError(f"valid_bits_per_row must be in [0, {W}], got {valid_bits_per_row}")

    pattern = (1 << valid_bits_per_row) - 1
    mask = 0
    for r in range(H):
        mask |= pattern << row_shift(r, W)
    return mask


# ============================================================================
# SHIFT (zero-fill; no wrap; no cross-row leakage)
# ============================================================================

def shift_word_left(data: int, W: int, H: int, n: int) -> int:
    """
    Move every row n columns toward column 0, zero-filling the right edge.

    Result column c equals operand column c+n in the same row.

    Args:
        data: Packed payload.
        W: Width.
        H: Height.
        n: Shift amount (>= 0).

    Returns:
        int: Shifted payload with unused bits cleared.

    Raises:
        ValueError: If n < 0.

    Edge case:
        n >= W returns 0. The raw word shift would pull the next row's
        leading columns into this row, so it is never attempted.
    """
    data, n = operator.index(data), operator.index(n)
    if n < 0:
        raise ValueError(f"Shift amount must be non-negative, got {n}")
    check_shape(W, H)
    if n >= W:
        return 0
    return ((data << n) & WORD_MASK) & (row_mask(W, H, W - n) << n)


def shift_word_right(data: int, W: int, H: int, n: int) -> int:
    """
    Move every row n columns away from column 0, zero-filling the left edge.

    Result column c equals operand column c-n in the same row.

    Edge case:
        n >= W returns 0.
    """
    data, n = operator.index(data), operator.index(n)
    if n < 0:
        raise ValueError(f"Shift amount must be non-negative, got {n}")
    check_shape(W, H)
    if n >= W:
        return 0
    return (data >> n) & row_mask(W, H, W - n)


# ============================================================================
# PACK / UNPACK rows
# ============================================================================

def pack_rows(rows: list[int], W: int, H: int) -> int:
    """
    Pack right-aligned row masks into a left-justified word, top row first.

    Raises:
        ShapeError: If len(rows) != H, or a row is negative or has bits at
            or above W.

    Invariant:
        unpack_rows(pack_rows(rows, W, H), W, H) == rows
    """
    check_shape(W, H)
    rows = list(rows)
    if len(rows) != H:
        raise ShapeError(f"Expected {H} rows, got {len(rows)}")

    data = 0
    for r, m in enumerate(rows):
        m = operator.index(m)
        if m < 0 or m >> W:
            raise ShapeError(f"Row {r} has bits outside [0..{W - 1}]: {m:b}")
        data |= m << row_shift(r, W)
    return data


def unpack_rows(data: int, W: int, H: int) -> list[int]:
    """Split a payload into H right-aligned row masks; unused bits dropped."""
    data = operator.index(data)
    check_shape(W, H)
    row_bits = (1 << W) - 1
    return [(data >> row_shift(r, W)) & row_bits for r in range(H)]


class ShapeError(ValueError):
    """Raised when a shape, row list or payload does not fit the 64-bit word."""
    pass
