"""Area formulas for simple plane figures."""

from __future__ import annotations

PI = 3.1415
"""The approximation of pi used for circle areas."""


def circle_area(radius: float) -> float:
    """Return the area of a circle with the given radius."""
    return PI * radius**2


def triangle_area(base: float, height: float) -> float:
    """Return the area of a triangle from its base and height."""
    return (base * height) / 2


def square_area(edge: float) -> float:
    """Return the area of a square with the given edge length."""
    return edge**2


def rectangle_area(base: float, height: float) -> float:
    """Return the area of a rectangle from its base and height."""
    return base * height