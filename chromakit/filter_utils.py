"""Rectangle filters applied to an integral image."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Protocol


class IntegralImage(Protocol):
    def area(self, r1: int, c1: int, r2: int, c2: int) -> float:
        """Sum of rows ``r1``..``r2 - 1`` and columns ``c1``..``c2 - 1``."""


Comparator = Callable[[float, float], float]


def subtract(a: float, b: float) -> float:
    """Return ``a - b``."""
    return a - b


def subtract_log(a: float, b: float) -> float:
    """Return the log of the ratio of ``1 + a`` to ``1 + b``."""
    result = math.log((1.0 + a) / (1.0 + b))
    if math.isnan(result):
        raise ValueError("log ratio is not a number")
    return result


def _check_size(w: int, h: int) -> None:
    if w < 1 or h < 1:
        raise ValueError("filter width and height must be at least 1")


def filter0(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Whole rectangle against zero."""
    _check_size(w, h)
    a = image.area(x, y, x + w, y + h)
    return cmp(a, 0.0)


def filter1(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Upper half of the columns against the lower half."""
    _check_size(w, h)
    h_2 = h // 2
    a = image.area(x, y + h_2, x + w, y + h)
    b = image.area(x, y, x + w, y + h_2)
    return cmp(a, b)


def filter2(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Later half of the rows against the earlier half."""
    _check_size(w, h)
    w_2 = w // 2
    a = image.area(x + w_2, y, x + w, y + h)
    b = image.area(x, y, x + w_2, y + h)
    return cmp(a, b)


def filter3(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Checkerboard of four quadrants."""
    _check_size(w, h)
    w_2 = w // 2
    h_2 = h // 2
    a = image.area(x, y + h_2, x + w_2, y + h) + image.area(x + w_2, y, x + w, y + h_2)
    b = image.area(x, y, x + w_2, y + h_2) + image.area(x + w_2, y + h_2, x + w, y + h)
    return cmp(a, b)


def filter4(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Middle third of the columns against the outer thirds."""
    _check_size(w, h)
    h_3 = h // 3
    a = image.area(x, y + h_3, x + w, y + 2 * h_3)
    b = image.area(x, y, x + w, y + h_3) + image.area(x, y + 2 * h_3, x + w, y + h)
    return cmp(a, b)


def filter5(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Middle third of the rows against the outer thirds."""
    _check_size(w, h)
    w_3 = w // 3
    a = image.area(x + w_3, y, x + 2 * w_3, y + h)
    b = image.area(x, y, x + w_3, y + h) + image.area(x + 2 * w_3, y, x + w, y + h)
    return cmp(a, b)