"""
Kernel: packed 64-bit grid

Components:
  - masks: word layout, row_mask, word-level shifts, PACK/UNPACK rows
  - area: Bitarea value type and the fixed 3x4 profile
"""

from .masks import (
    WORD_BITS,
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
from .area import (
    Bitarea,
    Bitarea3x4,
    BoundsError,
)

__all__ = [
    # Masks
    "WORD_BITS",
    "WORD_MASK",
    "ShapeError",
    "bit_index",
    "check_shape",
    "pack_rows",
    "row_mask",
    "shift_word_left",
    "shift_word_right",
    "unpack_rows",
    "used_mask",

    # Area
    "Bitarea",
    "Bitarea3x4",
    "BoundsError",

    # Receipts
    "kernel_receipts",
]


def kernel_receipts(section_label: str, fixtures: list[dict]) -> dict:
    """
    Generate receipts for kernel operations over fixed fixtures.

    Args:
        section_label: ASCII identifier (e.g., "kernel-3x4").
        fixtures: List of dicts with keys:
            - "W": int
            - "H": int
            - "rows": list[int] (right-aligned, one per row)
            - "label": str

    Returns:
        dict: Receipt digest with per-fixture proofs.
    """
    from ..core import Receipts, blake3_hash, text_hash, serialize_bitarea_be

    receipts = Receipts(section_label)

    # 1. rows_roundtrip + render hash per fixture
    roundtrips = []
    for fix in fixtures:
        W, H = fix["W"], fix["H"]
        area = Bitarea.from_rows(W, H, fix["rows"])

        cells_ok = all(
            area.get(c, r) == bool((fix["rows"][r] >> (W - 1 - c)) & 1)
            for r in range(H) for c in range(W)
        )

        roundtrips.append({
            "label": fix["label"],
            "frame_hash": blake3_hash(serialize_bitarea_be(area)),
            "render_hash": text_hash(area.render()),
            "rows_ok": area.to_rows() == list(fix["rows"]),
            "cells_ok": cells_ok
        })

    receipts.put("roundtrips", roundtrips)

    # 2. shift_checks: identity, saturation, containment, bits dropped
    shift_checks = []
    for fix in fixtures:
        W, H = fix["W"], fix["H"]
        area = Bitarea.from_rows(W, H, fix["rows"])
        unused = ~used_mask(W, H) & WORD_MASK
        initial_bits = area.count()

        for n in range(W + 1):
            left = area << n
            right = area >> n
            shift_checks.append({
                "label": fix["label"],
                "n": n,
                "left_dropped": initial_bits - left.count(),
                "right_dropped": initial_bits - right.count(),
                "identity_ok": n != 0 or (left == area and right == area),
                "saturated_ok": n < W or (left.is_empty() and right.is_empty()),
                "contained_ok": (left.data & unused) == 0 and (right.data & unused) == 0
            })

    receipts.put("shift_checks", shift_checks)
    receipts.put("all_ok", all(
        rt["rows_ok"] and rt["cells_ok"] for rt in roundtrips
    ) and all(
        sc["identity_ok"] and sc["saturated_ok"] and sc["contained_ok"]
        for sc in shift_checks
    ))

    return receipts.digest()
