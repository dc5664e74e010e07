"""Attach every label to the nearest component."""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Dict, List, Mapping, Sequence

import numpy as np

from .logging_utils import apply_debug_logging
from .math_utils import (
    as_array,
    exact_squared_distance,
    exact_squared_segment_distance,
    point_distances,
    point_segment_distances,
)
from .model import Anchor, Identity, Label, Line, Point

logger = logging.getLogger(__name__)

# Float distances only shortlist candidates; anything within this relative
# band of the float minimum is re-measured exactly.
_RELATIVE_SLACK = 1e-9


class _Geometry:
    """Anchor positions and line endpoints of one segment, as arrays."""

    def __init__(self, anchors: Sequence[Anchor], lines: Sequence[Line], positions: Mapping[Identity, Point]):
        if not anchors:
            raise ValueError("cannot measure distance to a segment without anchors")
        self.anchor_points = [anchor.position for anchor in anchors]
        self.line_points = [(positions[line.start], positions[line.end]) for line in lines]
        self.points = as_array(self.anchor_points)
        self.starts = as_array([start for start, _ in self.line_points])
        self.ends = as_array([end for _, end in self.line_points])
        self.scale = float(np.abs(np.concatenate([self.points, self.starts, self.ends])).max())

    def distances(self, position: Point) -> np.ndarray:
        """Float distance to every anchor, then to every line."""

        return np.concatenate([
            point_distances(position, self.points),
            point_segment_distances(position, self.starts, self.ends),
        ])

    def distance(self, position: Point) -> float:
        return float(self.distances(position).min())

    def slack(self, position: Point) -> float:
        return _RELATIVE_SLACK * (1.0 + self.scale + abs(float(position.x)) + abs(float(position.y)))

    def exact_squared_distance(self, position: Point) -> Fraction:
        distances = self.distances(position)
        limit = distances.min() + self.slack(position)
        nearest = None
        for index in np.flatnonzero(distances <= limit):
            if index < len(self.anchor_points):
                value = exact_squared_distance(position, self.anchor_points[index])
            else:
                start, end = self.line_points[index - len(self.anchor_points)]
                value = exact_squared_segment_distance(position, start, end)
            if nearest is None or value < nearest:
                nearest = value
        return nearest


def distance_to_segment(
    position: Point,
    anchors: Sequence[Anchor],
    lines: Sequence[Line],
    positions: Mapping[Identity, Point],
) -> float:
    """Distance from ``position`` to the closest anchor or line of a segment.

    ``positions`` resolves the line endpoints; lines are measured as finite
    segments, not infinite lines.
    """

    return _Geometry(anchors, lines, positions).distance(position)


def exact_squared_distance_to_segment(
    position: Point,
    anchors: Sequence[Anchor],
    lines: Sequence[Line],
    positions: Mapping[Identity, Point],
) -> Fraction:
    """Unrounded form of :func:`distance_to_segment`, squared."""

    return _Geometry(anchors, lines, positions).exact_squared_distance(position)


def nearest_segment_index(distances: Sequence) -> int:
    """Index of the smallest distance; on a tie the earliest index wins.

    Works on floats as well as exact :class:`~fractions.Fraction` values.
    """

    if len(distances) == 0:
        raise ValueError("no candidate segments")
    # min() keeps the first of equal keys
    return min(range(len(distances)), key=distances.__getitem__)


def _nearest_geometry(position: Point, geometries: Sequence[_Geometry]) -> int:
    approx = np.array([geometry.distance(position) for geometry in geometries])
    slack = max(geometry.slack(position) for geometry in geometries)
    candidates = np.flatnonzero(approx <= approx.min() + slack)
    if len(candidates) == 1:
        return int(candidates[0])
    exact = [geometries[index].exact_squared_distance(position) for index in candidates]
    return int(candidates[nearest_segment_index(exact)])


def assign_labels(
    labels: Sequence[Label],
    components: Sequence,
    positions: Mapping[Identity, Point],
    *,
    warn_on_drop: bool = True,
) -> List[List[Label]]:
    """Return one label list per component.

    ``components`` are objects with ``anchors`` and ``lines``. Labels keep their
    input order inside each list. Without components every label is dropped.
    """

    assigned: List[List[Label]] = [[] for _ in components]
    if not components:
        if labels and warn_on_drop:
            logger.warning(
                "Dropping %d label(s): no anchors to attach them to (%s)",
                len(labels),
                ", ".join(repr(label.id) for label in labels),
            )
        return assigned

    geometries = [_Geometry(c.anchors, c.lines, positions) for c in components]
    for label in labels:
        index = _nearest_geometry(label.position, geometries)
        logger.debug("Label %r -> segment #%d", label.id, index)
        assigned[index].append(label)
    return assigned


def anchor_positions(anchors: Sequence[Anchor]) -> Dict[Identity, Point]:
    return {anchor.id: anchor.position for anchor in anchors}


apply_debug_logging(globals(), logger=logger)
