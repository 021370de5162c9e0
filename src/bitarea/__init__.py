"""
bitarea

Fixed-capacity 2D boolean grids packed into a single 64-bit word.
"""

__version__ = "0.1.0"

from .kernel import (
    Bitarea,
    Bitarea3x4,
    BoundsError,
    ShapeError,
    row_mask,
)
from .sampling import (
    SamplingError,
    gamma_shape_sampler,
    random_bitarea,
    random_bitareas,
    random_fixed,
    random_word,
)

__all__ = [
    "Bitarea",
    "Bitarea3x4",
    "BoundsError",
    "ShapeError",
    "row_mask",
    "SamplingError",
    "gamma_shape_sampler",
    "random_bitarea",
    "random_bitareas",
    "random_fixed",
    "random_word",
]
