"""Connected-component search over the anchor/line graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence, Tuple

from .logging_utils import apply_debug_logging
from .model import Anchor, Identity, Line
from .validate import SplitterContractError, check_line_endpoints

logger = logging.getLogger(__name__)


@dataclass
class Component:
    anchors: List[Anchor] = field(default_factory=list)
    lines: List[Line] = field(default_factory=list)


def build_incidence(lines: Sequence[Line]) -> Dict[Identity, List[int]]:
    """Map each anchor id to the positions of its lines, in insertion order.

    A self-loop is listed once.
    """

    incidence: Dict[Identity, List[int]] = {}
    for index, line in enumerate(lines):
        incidence.setdefault(line.start, []).append(index)
        if line.end != line.start:
            incidence.setdefault(line.end, []).append(index)
    return incidence


def find_connected_components(anchors: Sequence[Anchor], lines: Sequence[Line]) -> List[Component]:
    """Split the graph into maximal connected components.

    Components are emitted in the insertion order of their first anchor. Inside
    a component, anchors and lines appear in depth-first discovery order: each
    anchor scans its lines in insertion order, takes every line not yet taken,
    and descends as soon as a line leads to an unvisited anchor. A line that
    leads back to a visited anchor is still taken, it just closes a cycle.
    """

    by_id: Dict[Identity, Anchor] = {anchor.id: anchor for anchor in anchors}
    check_line_endpoints(by_id, lines)

    incidence = build_incidence(lines)
    visited = set()
    consumed = [False] * len(lines)
    components: List[Component] = []

    for seed in anchors:
        if seed.id in visited:
            continue
        component = Component(anchors=[seed])
        visited.add(seed.id)
        stack: List[Tuple[Identity, Iterator[int]]] = [(seed.id, iter(incidence.get(seed.id, ())))]
        while stack:
            current, pending = stack[-1]
            for index in pending:
                if consumed[index]:
                    continue
                consumed[index] = True
                line = lines[index]
                component.lines.append(line)
                other = line.other_end(current)
                if other not in visited:
                    visited.add(other)
                    component.anchors.append(by_id[other])
                    stack.append((other, iter(incidence.get(other, ()))))
                    break
            else:
                stack.pop()
        logger.debug(
            "Component #%d seeded at %r: %d anchor(s), %d line(s)",
            len(components),
            seed.id,
            len(component.anchors),
            len(component.lines),
        )
        components.append(component)

    leftover = [lines[index].id for index, taken in enumerate(consumed) if not taken]
    if leftover:
        raise SplitterContractError(f'lines not reached by any component: {leftover!r}')
    return components


apply_debug_logging(globals(), logger=logger)
