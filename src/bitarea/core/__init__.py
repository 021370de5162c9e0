"""
Core foundation: receipts, hashing, serialization, parameter registry.

Frozen constants and deterministic byte-level I/O.
"""

from .registry import param_registry, registry_ratio, RegistryError
from .hashing import blake3_hash, text_hash
from .bytesio import (
    serialize_bitarea_be,
    SerializationError
)
from .receipts import (
    Receipts,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError
)

__all__ = [
    # Registry
    "param_registry",
    "registry_ratio",
    "RegistryError",

    # Hashing
    "blake3_hash",
    "text_hash",

    # Serialization
    "serialize_bitarea_be",
    "SerializationError",

    # Receipts
    "Receipts",
    "assert_double_run_equal",
    "ReceiptError",
    "DeterminismError",
]
