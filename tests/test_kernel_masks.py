"""
Word-level kernel tests: offsets, row_mask, shifts, PACK/UNPACK rows.

Coverage:
  ✓ bit_index / row_shift layout (MSB-first, row-major)
  ✓ row_mask replication and bounds
  ✓ word shifts never leak across rows or into unused bits
  ✓ pack/unpack roundtrip for every shape that fits
"""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bitarea.kernel import (
    WORD_MASK,
    ShapeError,
    bit_index,
    check_shape,
    pack_rows,
    row_mask,
    shift_word_left,
    shift_word_right,
    unpack_rows,
    used_mask,
)


ALL_SHAPES = [(w, h) for w in range(1, 65) for h in range(1, 65) if w * h <= 64]


# ═══════════════════════════════════════════════════════════════════════
# Layout
# ═══════════════════════════════════════════════════════════════════════

def test_bit_index_msb_first():
    assert bit_index(0, 0, 3) == 63
    assert bit_index(2, 0, 3) == 61
    assert bit_index(0, 1, 3) == 60
    assert bit_index(2, 3, 3) == 52
    assert bit_index(7, 7, 8) == 0


def test_used_mask():
    assert used_mask(3, 4) == ((1 << 12) - 1) << 52
    assert used_mask(8, 8) == WORD_MASK
    assert used_mask(1, 1) == 1 << 63


def test_check_shape_rejects():
    for W, H in [(0, 4), (4, 0), (-1, 3), (9, 8), (65, 1), (1, 65)]:
        with pytest.raises(ShapeError):
            check_shape(W, H)
    with pytest.raises(ShapeError):
        check_shape(2.0, 2)
    check_shape(64, 1)
    check_shape(1, 64)


# ═══════════════════════════════════════════════════════════════════════
# row_mask
# ═══════════════════════════════════════════════════════════════════════

def test_row_mask_3x4():
    # rightmost 2 of 3 columns, 4 rows: 011 011 011 011
    assert row_mask(3, 4, 2) == 0b011011011011 << 52
    assert row_mask(3, 4, 3) == used_mask(3, 4)
    assert row_mask(3, 4, 0) == 0


def test_row_mask_full_word():
    assert row_mask(8, 8, 8) == WORD_MASK
    assert row_mask(8, 8, 1) == int("00000001" * 8, 2)


def test_row_mask_rejects_bad_width():
    with pytest.raises(ValueError):
        row_mask(3, 4, 4)
    with pytest.raises(ValueError):
        row_mask(3, 4, -1)


def test_row_mask_popcount_all_shapes():
    for W, H in ALL_SHAPES:
        for k in range(W + 1):
            m = row_mask(W, H, k)
            assert bin(m).count("1") == k * H
            assert m & ~used_mask(W, H) == 0


# ═══════════════════════════════════════════════════════════════════════
# Word shifts
# ═══════════════════════════════════════════════════════════════════════

def test_shift_left_scenario():
    data = pack_rows([0b001, 0b111, 0b010, 0b001], 3, 4)
    out = shift_word_left(data, 3, 4, 1)
    assert unpack_rows(out, 3, 4) == [0b010, 0b110, 0b100, 0b010]


def test_shift_right_scenario():
    data = pack_rows([0b100, 0b111, 0b010, 0b001], 3, 4)
    out = shift_word_right(data, 3, 4, 1)
    assert unpack_rows(out, 3, 4) == [0b010, 0b011, 0b001, 0b000]


def test_shift_saturates_at_width():
    data = WORD_MASK
    for W, H in [(3, 4), (8, 8), (1, 64), (64, 1)]:
        for n in (W, W + 1, 100):
            assert shift_word_left(data, W, H, n) == 0
            assert shift_word_right(data, W, H, n) == 0


def test_shift_negative_rejected():
    with pytest.raises(ValueError):
        shift_word_left(0, 3, 4, -1)
    with pytest.raises(ValueError):
        shift_word_right(0, 3, 4, -1)


def test_shift_accepts_numpy_ints():
    data = np.uint64(WORD_MASK)
    left = shift_word_left(data, 8, 8, np.int64(1))
    right = shift_word_right(data, 8, 8, np.int64(1))

    assert left == int("11111110" * 8, 2)
    assert right == int("01111111" * 8, 2)
    assert pack_rows([np.uint64(5)], 64, 1) == 5
    assert unpack_rows(np.uint64(WORD_MASK), 8, 8) == [0xFF] * 8


def test_shift_rowwise_all_shapes():
    """Each row shifts on its own; nothing lands in unused bits."""
    rng = np.random.default_rng(1234)
    for W, H in ALL_SHAPES:
        row_bits = (1 << W) - 1
        rows = [int(rng.integers(0, row_bits, dtype=np.uint64, endpoint=True)) for _ in range(H)]
        # Garbage in the unused tail must not matter
        data = pack_rows(rows, W, H) | (~used_mask(W, H) & WORD_MASK)
        unused = ~used_mask(W, H) & WORD_MASK

        for n in range(W + 2):
            left = shift_word_left(data, W, H, n)
            right = shift_word_right(data, W, H, n)

            assert left & unused == 0
            assert right & unused == 0
            assert unpack_rows(left, W, H) == [(m << n) & row_bits for m in rows]
            assert unpack_rows(right, W, H) == [m >> n for m in rows]


# ═══════════════════════════════════════════════════════════════════════
# PACK / UNPACK
# ═══════════════════════════════════════════════════════════════════════

def test_pack_rows_left_justified():
    assert pack_rows([0b100, 0b001, 0b110, 0b010], 3, 4) == 0b100001110010 << 52
    assert pack_rows([1], 1, 1) == 1 << 63


def test_pack_rows_rejects():
    with pytest.raises(ShapeError):
        pack_rows([0b100, 0b001, 0b110], 3, 4)
    with pytest.raises(ShapeError):
        pack_rows([0b1000, 0, 0, 0], 3, 4)
    with pytest.raises(ShapeError):
        pack_rows([-1, 0, 0, 0], 3, 4)


def test_pack_unpack_roundtrip_all_shapes():
    rng = np.random.default_rng(7)
    for W, H in ALL_SHAPES:
        rows = [int(rng.integers(0, (1 << W) - 1, dtype=np.uint64, endpoint=True)) for _ in range(H)]
        assert unpack_rows(pack_rows(rows, W, H), W, H) == rows


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
