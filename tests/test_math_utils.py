from fractions import Fraction

import numpy as np
import pytest

from netsplit.math_utils import (
    as_array,
    exact_squared_distance,
    exact_squared_segment_distance,
    point_distance,
    point_distances,
    point_segment_distance,
    point_segment_distances,
)
from netsplit.model import Point


def test_point_distance():
    assert point_distance(Point(1, 1), Point(4, 5)) == pytest.approx(5.0)


@pytest.mark.parametrize(
    'p, expected',
    [
        (Point(5, 3), 3.0),  # above the interior
        (Point(-3, 4), 5.0),  # beyond the start
        (Point(13, -4), 5.0),  # beyond the end
        (Point(7, 0), 0.0),  # on the segment
    ],
)
def test_point_segment_distance_clamps_to_endpoints(p, expected):
    assert point_segment_distance(p, Point(0, 0), Point(10, 0)) == pytest.approx(expected)


def test_zero_length_segment_is_a_point():
    assert point_segment_distance(Point(3, 4), Point(0, 0), Point(0, 0)) == pytest.approx(5.0)


def test_vectorised_distances_match_scalar():
    rng = np.random.default_rng(7)
    starts = [Point(*xy) for xy in rng.uniform(-50, 50, size=(20, 2))]
    ends = [Point(*xy) for xy in rng.uniform(-50, 50, size=(20, 2))]
    ends[3] = starts[3]
    p = Point(1.5, -2.25)

    vectorised = point_segment_distances(p, as_array(starts), as_array(ends))
    scalar = [point_segment_distance(p, a, b) for a, b in zip(starts, ends)]

    np.testing.assert_allclose(vectorised, scalar)
    np.testing.assert_allclose(point_distances(p, as_array(starts)), [point_distance(p, a) for a in starts])


def test_as_array_of_nothing_has_two_columns():
    assert as_array([]).shape == (0, 2)


def test_exact_segment_distance_has_no_rounding():
    assert exact_squared_segment_distance(Point(7, 4), Point(0, 0), Point(8, 6)) == 1
    assert exact_squared_distance(Point(7, 4), Point(7, 5)) == 1


@pytest.mark.parametrize(
    'p, expected',
    [(Point(-3, 4), 25), (Point(13, -4), 25), (Point(5, 3), 9), (Point(3, 4), Fraction(16))],
)
def test_exact_segment_distance_clamps_to_endpoints(p, expected):
    assert exact_squared_segment_distance(p, Point(0, 0), Point(10, 0)) == expected


def test_exact_distances_accept_numpy_scalars_and_floats():
    p = Point(np.int64(3), np.float64(0.5))

    assert exact_squared_distance(p, Point(0, 0)) == Fraction(37, 4)
    assert exact_squared_segment_distance(p, Point(1, 1), Point(1, 1)) == Fraction(17, 4)
