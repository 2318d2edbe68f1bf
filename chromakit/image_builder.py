"""Feature-vector consumer that appends each vector as a row of an image."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from chromakit.consumers import FeatureVectorConsumer


class RowImage(Protocol):
    """An image that grows by one row at a time."""

    @property
    def num_columns(self) -> int:
        """Number of values in every row."""

    def add_row(self, row: Sequence[float]) -> None:
        """Append ``row`` to the image."""


class ImageBuilder(FeatureVectorConsumer):
    """Write every received feature vector into ``image`` as a new row."""

    def __init__(self, image: RowImage | None = None) -> None:
        self.image = image

    def reset(self, image: RowImage | None) -> None:
        """Start writing into another image."""
        self.image = image

    def consume(self, features: Sequence[float]) -> None:
        if self.image is None:
            raise RuntimeError("no image to write into")
        if len(features) != self.image.num_columns:
            raise ValueError(
                f"expected {self.image.num_columns} features, got {len(features)}"
            )
        self.image.add_row(features)