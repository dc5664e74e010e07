from .model import Anchor, ElementId, ElementKind, Label, Line, Point, Segment
from .splitter import NetSegmentSplitter, split_net_segment
from .partition import Component, find_connected_components
from .assign import assign_labels, distance_to_segment, exact_squared_distance_to_segment, nearest_segment_index
from .math_utils import point_distance, point_segment_distance
from .validate import SplitterContractError, check_line_endpoints, check_partition
from .config import SplitterConfig, get_splitter_config, set_splitter_config
from .printer import format_segment, print_segments
from .selection import (
    CopiedNetLine,
    CopiedNetSegment,
    NetLabel,
    NetLine,
    NetPoint,
    SymbolPin,
    split_selection,
)

__all__ = [
    'Anchor',
    'ElementId',
    'ElementKind',
    'Label',
    'Line',
    'Point',
    'Segment',
    'NetSegmentSplitter',
    'split_net_segment',
    'Component',
    'find_connected_components',
    'assign_labels',
    'distance_to_segment',
    'exact_squared_distance_to_segment',
    'nearest_segment_index',
    'point_distance',
    'point_segment_distance',
    'SplitterContractError',
    'check_line_endpoints',
    'check_partition',
    'SplitterConfig',
    'get_splitter_config',
    'set_splitter_config',
    'format_segment',
    'print_segments',
    'CopiedNetLine',
    'CopiedNetSegment',
    'NetLabel',
    'NetLine',
    'NetPoint',
    'SymbolPin',
    'split_selection',
]
