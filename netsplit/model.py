"""Value types shared by the splitter pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Tuple

Identity = Hashable


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class ElementKind(Enum):
    NET_POINT = "net_point"
    SYMBOL_PIN = "symbol_pin"
    NET_LINE = "net_line"
    NET_LABEL = "net_label"


@dataclass(frozen=True)
class ElementId:
    """Typed handle for a caller-side object.

    Two handles are equal only if both ``kind`` and ``raw`` match, so a net
    point and a pin sharing a raw id stay distinct anchors.
    """

    kind: ElementKind
    raw: Hashable

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.raw}"


@dataclass(frozen=True)
class Anchor:
    """Wire endpoint or pin. Equal and hashed by ``id`` alone."""

    id: Identity
    position: Point = field(compare=False)


@dataclass(frozen=True)
class Line:
    id: Identity
    start: Identity
    end: Identity

    def other_end(self, anchor_id: Identity) -> Identity:
        return self.end if self.start == anchor_id else self.start


@dataclass(frozen=True)
class Label:
    id: Identity
    position: Point


@dataclass(frozen=True)
class Segment:
    """One maximal connected piece of the net plus the labels attached to it."""

    anchors: Tuple[Anchor, ...] = ()
    lines: Tuple[Line, ...] = ()
    labels: Tuple[Label, ...] = ()

    def anchor_ids(self) -> Tuple[Identity, ...]:
        return tuple(anchor.id for anchor in self.anchors)

    def line_ids(self) -> Tuple[Identity, ...]:
        return tuple(line.id for line in self.lines)

    def label_ids(self) -> Tuple[Identity, ...]:
        return tuple(label.id for label in self.labels)

    def is_empty(self) -> bool:
        return not (self.anchors or self.lines or self.labels)


def as_point(value) -> Point:
    """Accept a :class:`Point` or any ``(x, y)`` pair."""

    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


__all__ = [
    "Identity",
    "Point",
    "ElementKind",
    "ElementId",
    "Anchor",
    "Line",
    "Label",
    "Segment",
    "as_point",
]
