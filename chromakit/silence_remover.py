"""Drop leading silence from an audio stream."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from chromakit.consumers import AudioConsumer

SILENCE_WINDOW = 55  # 5 ms at 11025 Hz


class _MovingAverage:
    """Integer mean of the most recent ``size`` values."""

    def __init__(self, size: int) -> None:
        self._values: deque[int] = deque(maxlen=size)
        self._sum = 0

    def add(self, value: int) -> None:
        if len(self._values) == self._values.maxlen:
            self._sum -= self._values[0]
        self._values.append(value)
        self._sum += value

    def average(self) -> int:
        if not self._values:
            return 0
        return int(self._sum / len(self._values))


class SilenceRemover(AudioConsumer):
    """Pass audio on to ``consumer`` once its loudness first exceeds ``threshold``."""

    def __init__(self, consumer: AudioConsumer, threshold: int = 0) -> None:
        self.consumer = consumer
        self.threshold = threshold
        self._start = True
        self._average = _MovingAverage(SILENCE_WINDOW)

    def reset(self, sample_rate: int, num_channels: int) -> None:
        """Look for the end of silence again; only mono audio is accepted."""
        if num_channels != 1:
            raise ValueError("expecting a mono audio signal")
        self._start = True

    def consume(self, samples: Sequence[int]) -> None:
        start = 0
        if self._start:
            start = len(samples)
            for index, sample in enumerate(samples):
                self._average.add(abs(sample))
                if self._average.average() > self.threshold:
                    self._start = False
                    start = index
                    break
        if start < len(samples):
            self.consumer.consume(samples[start:])

    def flush(self) -> None:
        """Nothing is buffered, so there is nothing to flush."""