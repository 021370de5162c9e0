"""
Parameter Registry

Frozen constants for the packed 64-bit grid.
The kernel, sampler and byte frames read word size, fixed 3x4 shape,
render characters, gamma parameters and frame tags from here.
bit_order and row_order are descriptive: they name the layout that
masks.py implements and bind it into every receipt hash.

No environment leakage, no optionals.
"""


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the package.

    Keys and values are JSON-serializable primitives or lists.
    This registry is hashed into every section receipt to prove parametric consistency.

    Returns:
        dict: Frozen parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        "format_version": "1.0",

        # Storage word
        "word_bits": 64,
        "bit_order": "MSB-first",  # bit 63 = (col 0, row 0)
        "row_order": "row-major",  # column advances first, then row

        # Fixed-shape profile (Bitarea3x4)
        "fixed_shape": [3, 4],  # [width, height]

        # Random shape sampling
        # Floats are not allowed in receipts, so the gamma parameters are
        # stored as integer ratios.
        "gamma_shape_ratio": [7, 1],
        "gamma_scale_ratio": [1, 2],
        "dim_clamp": 64,
        "sampler_max_attempts": 10000,

        # Rendering
        "render_chars": ["0", "1"],
        "render_row_sep": "\n",

        # Hashing
        "hash_algo": "BLAKE3",

        # Byte frame tags for serialization (ASCII 4-byte tags)
        "byte_frame_tags": {
            "BITAREA": "BTA1"
        }
    }

    # Consistency check: ensure all required keys are present
    required_keys = {
        "format_version", "word_bits", "bit_order", "row_order",
        "fixed_shape", "gamma_shape_ratio", "gamma_scale_ratio",
        "dim_clamp", "sampler_max_attempts", "render_chars",
        "render_row_sep", "hash_algo", "byte_frame_tags"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


def registry_ratio(key: str) -> float:
    """Resolve an integer-ratio registry entry to a float."""
    num, den = param_registry()[key]
    return num / den


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
