"""Numeric helpers shared by the fingerprinting pipeline."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

_GRAY_CODES = (0, 1, 3, 2)


def _c_round(x: float) -> float:
    """Round half away from zero."""
    if x >= 0.0:
        return math.floor(x + 0.5)
    return math.ceil(x - 0.5)


def prepare_hamming_window(size: int, scale: float = 1.0) -> list[float]:
    """Return a Hamming window of ``size`` points multiplied by ``scale``."""
    if size < 0:
        raise ValueError("window size must not be negative")
    if size == 1:
        # The formula divides by size - 1, which has no meaningful value here.
        return [math.nan]
    step = 2.0 * math.pi / (size - 1)
    return [scale * (0.54 - 0.46 * math.cos(i * step)) for i in range(size)]


def apply_window(values: Iterable[float], window: Iterable[float]) -> list[float]:
    """Multiply each value by the matching window coefficient."""
    values = list(values)
    window = list(window)
    if len(window) < len(values):
        raise ValueError("window is shorter than the input")
    return [value * coefficient for value, coefficient in zip(values, window)]


def euclidean_norm(values: Iterable[float]) -> float:
    """Return the Euclidean (L2) norm of ``values``."""
    squares = sum(value * value for value in values)
    return math.sqrt(squares) if squares > 0 else 0.0


def normalize_vector(
    values: Iterable[float],
    func: Callable[[Sequence[float]], float] = euclidean_norm,
    threshold: float = 0.01,
) -> list[float]:
    """Divide ``values`` by their norm, or zero them if the norm is below ``threshold``."""
    values = list(values)
    norm = func(values)
    if norm < threshold:
        return [0.0] * len(values)
    return [value / norm for value in values]


def gray_code(i: int) -> int:
    """Return the two-bit Gray code of ``i`` (0 to 3)."""
    if not 0 <= i < len(_GRAY_CODES):
        raise ValueError(f"gray code index out of range: {i}")
    return _GRAY_CODES[i]


def index_to_freq(i: int, frame_size: int, sample_rate: int) -> float:
    """Return the frequency in Hz of FFT bin ``i``."""
    return float(i) * sample_rate / frame_size


def freq_to_index(freq: float, frame_size: int, sample_rate: int) -> int:
    """Return the FFT bin nearest to ``freq``."""
    return int(_c_round(frame_size * freq / sample_rate))


def freq_to_bark(f: float) -> float:
    """Convert a frequency in Hz to the Bark scale."""
    z = (26.81 * f) / (1960.0 + f) - 0.53
    if z < 2.0:
        z = z + 0.15 * (2.0 - z)
    elif z > 20.1:
        z = z + 0.22 * (z - 20.1)
    return z


def count_set_bits(value: int, bits: int = 32) -> int:
    """Count the set bits of ``value`` taken as an unsigned ``bits``-wide integer."""
    if bits <= 0:
        raise ValueError("bit width must be positive")
    return (value & ((1 << bits) - 1)).bit_count()


def hamming_distance(a: int, b: int, bits: int = 32) -> int:
    """Return the number of differing bits between ``a`` and ``b``."""
    return count_set_bits(a ^ b, bits)