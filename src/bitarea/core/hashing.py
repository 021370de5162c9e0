"""
BLAKE3 Hashing

Digests for receipts, bitarea byte frames and rendered grids.

No seeding, no timestamps.
"""

import blake3


def blake3_hash(*chunks: bytes) -> str:
    """
    Return hex-encoded BLAKE3 digest of the concatenated chunks.

    Args:
        *chunks: Byte strings fed to the hasher in order.

    Returns:
        str: Lowercase hexadecimal digest (64 characters).

    Example:
        >>> blake3_hash(b"test")
        '4878ca0425c739fa427f7eda20fe845f6b2e46ba5fe2a14df5b1e32f50603215'
        >>> blake3_hash(b"te", b"st") == blake3_hash(b"test")
        True
    """
    hasher = blake3.blake3()
    for chunk in chunks:
        hasher.update(chunk)
    return hasher.hexdigest()


def text_hash(text: str) -> str:
    """Digest of a rendered grid (UTF-8)."""
    return blake3_hash(text.encode("utf-8"))
