"""Cut a stream of samples into overlapping fixed-size frames."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

FrameConsumer = Callable[[Sequence[Any], Sequence[Any]], None]


class AudioSlicer:
    """Emit frames of ``size`` samples, each ``increment`` samples after the last.

    The consumer receives each frame as two sequences whose concatenation is
    the frame: samples held over from earlier input, then new samples.
    """

    def __init__(self, size: int, increment: int) -> None:
        if increment > size:
            raise ValueError("increment must not exceed the frame size")
        if increment <= 0:
            raise ValueError("increment must be positive")
        self._size = size
        self._increment = increment
        self._buffer: list[Any] = []

    @property
    def size(self) -> int:
        return self._size

    @property
    def increment(self) -> int:
        return self._increment

    def reset(self) -> None:
        """Drop any buffered samples."""
        self._buffer = []

    def process(self, samples: Sequence[Any], consumer: FrameConsumer) -> None:
        """Feed ``samples`` and call ``consumer`` for every complete frame."""
        samples = list(samples)
        pos = 0
        remaining = len(samples)
        buffered = len(self._buffer)

        while buffered > 0 and buffered + remaining >= self._size:
            take = self._size - buffered
            consumer(tuple(self._buffer), samples[pos:pos + take])
            if buffered >= self._increment:
                del self._buffer[:self._increment]
                buffered -= self._increment
            else:
                skip = self._increment - buffered
                self._buffer = []
                pos += skip
                remaining -= skip
                buffered = 0

        if buffered == 0:
            while remaining >= self._size:
                consumer(samples[pos:pos + self._size], [])
                pos += self._increment
                remaining -= self._increment

        self._buffer.extend(samples[pos:])