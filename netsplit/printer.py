from typing import Iterable, Sequence

from .model import ElementId, Segment


def id_str(identity: object) -> str:
    if isinstance(identity, (ElementId, str)):
        return str(identity)
    return repr(identity)


def _id_list(ids: Iterable[object]) -> str:
    return "[" + ", ".join(id_str(i) for i in ids) + "]"


def format_segment(segment: Segment, index: int) -> str:
    return (
        f"segment #{index}: anchors={_id_list(segment.anchor_ids())} "
        f"lines={_id_list(segment.line_ids())} labels={_id_list(segment.label_ids())}"
    )


def print_segments(segments: Sequence[Segment]) -> str:
    if not segments:
        return "(no segments)\n"
    return "".join(format_segment(segment, index) + "\n" for index, segment in enumerate(segments))
