"""Copy a selected part of a schematic net as independent net segments.

Only the selected lines and labels of one net are copied. The selection may
fall apart into several disconnected pieces; each piece becomes its own
:class:`CopiedNetSegment` carrying the original net name. Pins of symbols that
are not copied along are replaced by fresh net points at the same position.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, Collection, Dict, Hashable, Iterable, List, Optional, Tuple, Union

from .model import ElementId, ElementKind, Point, as_point
from .splitter import NetSegmentSplitter

logger = logging.getLogger(__name__)

PinRef = Tuple[Hashable, Hashable]


@dataclass(frozen=True)
class NetPoint:
    uuid: Hashable
    position: Point


@dataclass(frozen=True)
class SymbolPin:
    symbol: Hashable
    pin: Hashable
    position: Point

    @property
    def ref(self) -> PinRef:
        return (self.symbol, self.pin)


Junction = Union[NetPoint, SymbolPin]


@dataclass(frozen=True)
class NetLine:
    uuid: Hashable
    start: Junction
    end: Junction


@dataclass(frozen=True)
class NetLabel:
    uuid: Hashable
    position: Point
    rotation: float = 0.0  # degrees, counter-clockwise


@dataclass
class CopiedNetLine:
    uuid: Hashable
    start_point: Optional[Hashable] = None
    start_pin: Optional[PinRef] = None
    end_point: Optional[Hashable] = None
    end_pin: Optional[PinRef] = None


@dataclass
class CopiedNetSegment:
    net_name: str
    points: List[NetPoint] = field(default_factory=list)
    lines: List[CopiedNetLine] = field(default_factory=list)
    labels: List[NetLabel] = field(default_factory=list)


def junction_id(junction: Junction) -> ElementId:
    if isinstance(junction, NetPoint):
        return ElementId(ElementKind.NET_POINT, junction.uuid)
    if isinstance(junction, SymbolPin):
        return ElementId(ElementKind.SYMBOL_PIN, junction.ref)
    raise TypeError(f"unsupported junction {junction!r}")


def split_selection(
    net_name: str,
    net_lines: Iterable[NetLine],
    net_labels: Iterable[NetLabel] = (),
    copied_symbols: Collection[Hashable] = (),
    *,
    new_uuid: Callable[[], Hashable] = uuid.uuid4,
) -> List[CopiedNetSegment]:
    splitter = NetSegmentSplitter()
    junctions: Dict[ElementId, Junction] = {}
    lines: Dict[ElementId, NetLine] = {}
    labels: Dict[ElementId, NetLabel] = {}

    for line in net_lines:
        for junction in (line.start, line.end):
            key = junction_id(junction)
            junctions.setdefault(key, junction)
            splitter.add_anchor(key, as_point(junction.position))
        line_key = ElementId(ElementKind.NET_LINE, line.uuid)
        lines[line_key] = line
        splitter.add_line(line_key, junction_id(line.start), junction_id(line.end))
    for label in net_labels:
        label_key = ElementId(ElementKind.NET_LABEL, label.uuid)
        labels[label_key] = label
        splitter.add_label(label_key, as_point(label.position))

    result: List[CopiedNetSegment] = []
    for segment in splitter.split():
        copied = CopiedNetSegment(net_name)
        replaced_pins: Dict[PinRef, NetPoint] = {}
        for anchor in segment.anchors:
            junction = junctions[anchor.id]
            if isinstance(junction, NetPoint):
                copied.points.append(NetPoint(junction.uuid, as_point(junction.position)))
            elif junction.symbol not in copied_symbols:
                replacement = NetPoint(new_uuid(), as_point(junction.position))
                replaced_pins[junction.ref] = replacement
                copied.points.append(replacement)
        for line in segment.lines:
            source = lines[line.id]
            copy_line = CopiedNetLine(source.uuid)
            copy_line.start_point, copy_line.start_pin = _endpoint(source.start, replaced_pins)
            copy_line.end_point, copy_line.end_pin = _endpoint(source.end, replaced_pins)
            copied.lines.append(copy_line)
        for label in segment.labels:
            source_label = labels[label.id]
            copied.labels.append(
                NetLabel(source_label.uuid, as_point(source_label.position), source_label.rotation)
            )
        if replaced_pins:
            logger.debug("Segment of net %s: replaced %d pin(s) by net points", net_name, len(replaced_pins))
        result.append(copied)
    return result


def _endpoint(
    junction: Junction, replaced_pins: Dict[PinRef, NetPoint]
) -> Tuple[Optional[Hashable], Optional[PinRef]]:
    if isinstance(junction, NetPoint):
        return junction.uuid, None
    replacement = replaced_pins.get(junction.ref)
    if replacement is not None:
        return replacement.uuid, None
    return None, junction.ref


__all__ = [
    "NetPoint",
    "SymbolPin",
    "NetLine",
    "NetLabel",
    "CopiedNetLine",
    "CopiedNetSegment",
    "junction_id",
    "split_selection",
]
