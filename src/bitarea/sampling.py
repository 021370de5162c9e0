"""
Random bitarea generation

Both random sources are injected:
  - a numpy Generator for uniform 64-bit payloads
  - a shape sampler (zero-arg callable returning a float) for width/height

The default shape sampler draws from Gamma(shape=7, scale=0.5). Tests can
pass any callable to get deterministic shapes without touching the kernel.
"""

from typing import Callable

import numpy as np

from .core.registry import param_registry, registry_ratio
from .kernel import Bitarea, Bitarea3x4, check_shape

ShapeSampler = Callable[[], float]


def default_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def random_word(rng: np.random.Generator) -> int:
    """Uniform integer in [0, 2**64)."""
    return int(rng.integers(0, np.iinfo(np.uint64).max, dtype=np.uint64, endpoint=True))


def gamma_shape_sampler(
    rng: np.random.Generator,
    shape: float | None = None,
    scale: float | None = None
) -> ShapeSampler:
    """
    Gamma-distributed dimension sampler bound to rng.

    Defaults come from the registry (shape 7.0, scale 0.5, mean 3.5).
    """
    if shape is None:
        shape = registry_ratio("gamma_shape_ratio")
    if scale is None:
        scale = registry_ratio("gamma_scale_ratio")
    if shape <= 0 or scale <= 0:
        raise ValueError(f"Gamma parameters must be positive, got shape={shape}, scale={scale}")

    def sample() -> float:
        return float(rng.gamma(shape, scale))

    return sample


def random_fixed(rng: np.random.Generator) -> Bitarea3x4:
    """Fixed 3x4 profile with a full random payload (unused bits included)."""
    return Bitarea3x4(random_word(rng))


def sample_shape(
    shape_sampler: ShapeSampler,
    max_attempts: int | None = None
) -> tuple[int, int]:
    """
    Draw (width, height) until both are >= 1 and width*height <= 64.

    Each draw is truncated to int and clamped to at most 64.

    Raises:
        SamplingError: If no valid shape is found within max_attempts.
    """
    registry = param_registry()
    clamp = registry["dim_clamp"]
    if max_attempts is None:
        max_attempts = registry["sampler_max_attempts"]

    for _ in range(max_attempts):
        w = min(clamp, int(shape_sampler()))
        h = min(clamp, int(shape_sampler()))
        if w >= 1 and h >= 1 and w * h <= registry["word_bits"]:
            return w, h

    raise SamplingError(f"No valid shape after {max_attempts} draws")


def random_bitarea(
    rng: np.random.Generator,
    shape_sampler: ShapeSampler | None = None,
    max_attempts: int | None = None
) -> Bitarea:
    """
    Variable-shape random bitarea.

    Args:
        rng: Source of the 64-bit payload (and of shapes, if shape_sampler
            is None).
        shape_sampler: Optional dimension sampler; defaults to
            gamma_shape_sampler(rng).
        max_attempts: Shape retry limit; defaults to the registry value.

    Returns:
        Bitarea: Shape satisfies width*height <= 64.
    """
    if shape_sampler is None:
        shape_sampler = gamma_shape_sampler(rng)

    w, h = sample_shape(shape_sampler, max_attempts)
    check_shape(w, h)
    return Bitarea(w, h, random_word(rng))


def random_bitareas(
    count: int,
    rng: np.random.Generator,
    shape_sampler: ShapeSampler | None = None
) -> list[Bitarea]:
    if shape_sampler is None:
        shape_sampler = gamma_shape_sampler(rng)
    return [random_bitarea(rng, shape_sampler) for _ in range(count)]


class SamplingError(Exception):
    """Raised when the shape sampler never yields a shape that fits the word."""
    pass
