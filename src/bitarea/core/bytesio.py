"""
Byte Serialization (Big-Endian)

Stable byte frames for bitareas, used for hashing and receipts.

Frame layout (frozen):
  - 4 ASCII bytes tag: registry byte_frame_tags["BITAREA"] (b"BTA1")
  - 1 byte width (uint8)
  - 1 byte height (uint8)
  - 8 bytes payload (uint64, big-endian), unused low bits forced to 0

Because unused bits are cleared, two bitareas that compare equal always
produce the same frame.
"""

from .registry import param_registry

_TAG = param_registry()["byte_frame_tags"]["BITAREA"].encode("ascii")
_WORD_BITS = param_registry()["word_bits"]


def serialize_bitarea_be(area) -> bytes:
    """
    Encode a bitarea as a deterministic 14-byte frame.

    Args:
        area: Any object with integer ``width``, ``height`` and ``data``.

    Returns:
        bytes: Deterministic serialization.

    Raises:
        SerializationError: If the shape does not fit a 64-bit word or the
            payload is outside the uint64 range.
    """
    W, H = area.width, area.height
    if W < 1 or H < 1 or W * H > _WORD_BITS:
        raise SerializationError(f"Shape {W}x{H} does not fit a {_WORD_BITS}-bit word")
    if area.data < 0 or area.data >> _WORD_BITS:
        raise SerializationError(f"Payload {area.data:#x} out of uint64 range")

    used = W * H
    payload = area.data & (((1 << used) - 1) << (_WORD_BITS - used))

    stream = bytearray()
    stream.extend(_TAG)
    stream.append(W)
    stream.append(H)
    stream.extend(payload.to_bytes(8, byteorder='big'))

    return bytes(stream)


class SerializationError(Exception):
    """Raised when serialization encounters an invalid shape or payload."""
    pass
