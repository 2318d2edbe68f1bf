"""Interfaces for stages that receive audio samples or feature vectors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class AudioConsumer(ABC):
    """A stage that receives blocks of 16-bit audio samples."""

    @abstractmethod
    def consume(self, samples: Sequence[int]) -> None:
        """Process a block of samples."""


class FeatureVectorConsumer(ABC):
    """A stage that receives one feature vector at a time."""

    @abstractmethod
    def consume(self, features: Sequence[float]) -> None:
        """Process one feature vector."""


class AudioCollector(AudioConsumer):
    """Audio consumer that keeps every sample it is given."""

    def __init__(self) -> None:
        self.samples: list[int] = []

    def consume(self, samples: Sequence[int]) -> None:
        self.samples.extend(samples)