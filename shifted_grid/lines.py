"""Slope-intercept line helpers used by the inverse spiral lookup."""

from __future__ import annotations

import math

from .coords import NOT_INTERSECTING, NotIntersecting, Point2D, SlopeInterceptLine

# Tolerance for slope comparisons in cartesian space.
EPSILON = 1e-9


def get_line_intersection(
    a: SlopeInterceptLine, b: SlopeInterceptLine
) -> Point2D | NotIntersecting:
    """Solve ``a`` and ``b`` for their common point.

    Lines whose slopes differ by no more than :data:`EPSILON` are treated as
    parallel and yield :data:`NOT_INTERSECTING`.
    """
    slope_difference = a.slope - b.slope
    if abs(slope_difference) <= EPSILON:
        return NOT_INTERSECTING

    x = (b.intercept - a.intercept) / slope_difference
    return Point2D(x, a.y_at(x))


def cartesian_distance(a: Point2D, b: Point2D) -> float:
    """Euclidean distance between two cartesian points."""
    return math.hypot(b.x - a.x, b.y - a.y)
