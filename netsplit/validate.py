from collections import Counter
from typing import Collection, Hashable, Iterable, Sequence

from .model import Anchor, Line, Segment


class SplitterContractError(Exception):
    """Raised when the caller breaks the splitter contract or an invariant fails."""


def check_line_endpoints(anchor_ids: Collection[Hashable], lines: Iterable[Line]) -> None:
    for index, line in enumerate(lines):
        for role, anchor_id in (("start", line.start), ("end", line.end)):
            if anchor_id not in anchor_ids:
                raise SplitterContractError(
                    f'line #{index} ({line.id!r}) references unknown {role} anchor {anchor_id!r}'
                )


def check_partition(
    anchors: Sequence[Anchor], lines: Sequence[Line], segments: Sequence[Segment]
) -> None:
    """Verify that ``segments`` partition the input graph exactly.

    Lines are compared by object identity so that two distinct lines sharing an
    id are still counted separately.
    """

    anchor_owner = {}
    for index, segment in enumerate(segments):
        for anchor in segment.anchors:
            if anchor.id in anchor_owner:
                raise SplitterContractError(
                    f'anchor {anchor.id!r} appears in segments #{anchor_owner[anchor.id]} and #{index}'
                )
            anchor_owner[anchor.id] = index

    expected_anchors = {anchor.id for anchor in anchors}
    missing = expected_anchors.difference(anchor_owner)
    if missing:
        raise SplitterContractError(f'anchors lost during split: {sorted(map(repr, missing))}')
    extra = set(anchor_owner).difference(expected_anchors)
    if extra:
        raise SplitterContractError(f'unknown anchors in split result: {sorted(map(repr, extra))}')

    seen_lines = Counter(id(line) for segment in segments for line in segment.lines)
    for line in lines:
        count = seen_lines.pop(id(line), 0)
        if count != 1:
            raise SplitterContractError(f'line {line.id!r} appears {count} times in split result')
    if seen_lines:
        raise SplitterContractError(f'{sum(seen_lines.values())} unknown line(s) in split result')

    for index, segment in enumerate(segments):
        for line in segment.lines:
            for anchor_id in (line.start, line.end):
                if anchor_owner.get(anchor_id) != index:
                    raise SplitterContractError(
                        f'line {line.id!r} in segment #{index} has endpoint {anchor_id!r} '
                        f'outside that segment'
                    )
