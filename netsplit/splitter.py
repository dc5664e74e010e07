"""Net segment splitter façade: build the graph, then split it once."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .assign import anchor_positions, assign_labels
from .config import SplitterConfig, get_splitter_config
from .model import Anchor, Identity, Label, Line, Segment, as_point
from .partition import find_connected_components
from .validate import SplitterContractError, check_partition

logger = logging.getLogger(__name__)


class NetSegmentSplitter:
    """Splits one net into its connected pieces and redistributes its labels.

    Populate with :meth:`add_anchor`, :meth:`add_line` and :meth:`add_label`,
    then call :meth:`split` exactly once. Instances are not thread-safe.
    """

    def __init__(self, config: Optional[SplitterConfig] = None):
        self._config = config if config is not None else get_splitter_config()
        self._anchors: Dict[Identity, Anchor] = {}
        self._lines: List[Line] = []
        self._labels: List[Label] = []
        self._split_done = False

    @property
    def anchors(self) -> Tuple[Anchor, ...]:
        return tuple(self._anchors.values())

    @property
    def lines(self) -> Tuple[Line, ...]:
        return tuple(self._lines)

    @property
    def labels(self) -> Tuple[Label, ...]:
        return tuple(self._labels)

    def add_anchor(self, id: Identity, position) -> None:
        if id in self._anchors:
            return
        self._anchors[id] = Anchor(id, as_point(position))

    def add_line(self, id: Identity, start: Identity, end: Identity) -> None:
        self._lines.append(Line(id, start, end))

    def add_label(self, id: Identity, position) -> None:
        self._labels.append(Label(id, as_point(position)))

    def split(self) -> List[Segment]:
        if self._split_done:
            raise SplitterContractError("NetSegmentSplitter.split() may only be called once")
        self._split_done = True

        anchors = self.anchors
        components = find_connected_components(anchors, self._lines)
        labels = assign_labels(
            self._labels,
            components,
            anchor_positions(anchors),
            warn_on_drop=self._config.warn_on_dropped_labels,
        )
        segments = [
            Segment(tuple(component.anchors), tuple(component.lines), tuple(assigned))
            for component, assigned in zip(components, labels)
        ]
        if self._config.verify_partition:
            check_partition(anchors, self._lines, segments)

        logger.info(
            "Split %d anchor(s), %d line(s), %d label(s) into %d segment(s)",
            len(anchors),
            len(self._lines),
            len(self._labels),
            len(segments),
        )
        return segments


def split_net_segment(
    anchors: Iterable[Tuple[Identity, object]],
    lines: Iterable[Tuple[Identity, Identity, Identity]] = (),
    labels: Iterable[Tuple[Identity, object]] = (),
    *,
    config: Optional[SplitterConfig] = None,
) -> List[Segment]:
    """One-call form of :class:`NetSegmentSplitter` over plain tuples."""

    splitter = NetSegmentSplitter(config)
    for anchor_id, position in anchors:
        splitter.add_anchor(anchor_id, position)
    for line_id, start, end in lines:
        splitter.add_line(line_id, start, end)
    for label_id, position in labels:
        splitter.add_label(label_id, position)
    return splitter.split()
