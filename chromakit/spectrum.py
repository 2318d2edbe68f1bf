"""Band energies of an FFT frame on the Bark scale."""

from __future__ import annotations

import math
from collections.abc import Sequence

from chromakit.consumers import FeatureVectorConsumer
from chromakit.utils import freq_to_bark, freq_to_index, index_to_freq


def _divide(numerator: float, denominator: int) -> float:
    """Divide the way IEEE floats do, without raising on a zero divisor."""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


class Spectrum:
    """Average the FFT bins of each Bark band and pass the result on."""

    def __init__(
        self,
        num_bands: int,
        min_freq: int,
        max_freq: int,
        frame_size: int,
        sample_rate: int,
        consumer: FeatureVectorConsumer,
    ) -> None:
        if num_bands < 1:
            raise ValueError("number of bands must be at least 1")
        self.consumer = consumer
        self._bands = self._prepare_bands(num_bands, min_freq, max_freq, frame_size, sample_rate)

    @staticmethod
    def _prepare_bands(
        num_bands: int, min_freq: int, max_freq: int, frame_size: int, sample_rate: int
    ) -> list[int]:
        min_bark = freq_to_bark(min_freq)
        max_bark = freq_to_bark(max_freq)
        band_size = (max_bark - min_bark) / num_bands

        min_index = freq_to_index(min_freq, frame_size, sample_rate)
        bands = [0] * (num_bands + 1)
        bands[0] = min_index
        prev_bark = min_bark
        band = 0
        for i in range(min_index, frame_size // 2):
            bark = freq_to_bark(index_to_freq(i, frame_size, sample_rate))
            if bark - prev_bark > band_size:
                band += 1
                prev_bark = bark
                bands[band] = i
                if band >= num_bands:
                    break
        return bands

    def num_bands(self) -> int:
        """Number of bands in each feature vector."""
        return len(self._bands) - 1

    def first_index(self, band: int) -> int:
        """First FFT bin of ``band``."""
        return self._bands[band]

    def last_index(self, band: int) -> int:
        """FFT bin just past the end of ``band``."""
        return self._bands[band + 1]

    def reset(self) -> None:
        """Nothing is carried between frames, so there is nothing to clear."""

    def consume(self, frame: Sequence[float]) -> None:
        """Compute the band averages of ``frame`` and hand them to the consumer."""
        features = []
        for band in range(self.num_bands()):
            first = self.first_index(band)
            last = self.last_index(band)
            total = sum(frame[j] for j in range(first, last))
            features.append(_divide(total, last - first))
        self.consumer.consume(features)