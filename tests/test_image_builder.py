import pytest

from chromakit.image_builder import ImageBuilder


class _Image:
    def __init__(self, num_columns):
        self.num_columns = num_columns
        self.rows = []

    def add_row(self, row):
        self.rows.append(list(row))


def test_rows_are_appended_in_order():
    image = _Image(3)
    builder = ImageBuilder(image)
    builder.consume([1.0, 2.0, 3.0])
    builder.consume([4.0, 5.0, 6.0])
    assert image.rows == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


def test_wrong_row_length_rejected():
    image = _Image(3)
    builder = ImageBuilder(image)
    with pytest.raises(ValueError):
        builder.consume([1.0, 2.0])
    assert image.rows == []


def test_consume_without_image_fails():
    builder = ImageBuilder()
    with pytest.raises(RuntimeError):
        builder.consume([1.0])


def test_reset_switches_target_image():
    first = _Image(2)
    second = _Image(2)
    builder = ImageBuilder(first)
    builder.consume([1.0, 1.0])
    builder.reset(second)
    builder.consume([2.0, 2.0])
    assert builder.image is second
    assert first.rows == [[1.0, 1.0]]
    assert second.rows == [[2.0, 2.0]]