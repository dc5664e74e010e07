"""Invariants checked over randomly generated nets."""

import numpy as np
import pytest

from netsplit import NetSegmentSplitter, SplitterConfig
from netsplit.assign import anchor_positions, exact_squared_distance_to_segment


def random_splitter(seed):
    rng = np.random.default_rng(seed)
    splitter = NetSegmentSplitter(SplitterConfig(verify_partition=False))
    anchor_count = int(rng.integers(1, 40))
    for i in range(anchor_count):
        splitter.add_anchor(f'A{i}', tuple(rng.integers(0, 50, size=2)))
    for i in range(int(rng.integers(0, anchor_count * 2))):
        start, end = rng.integers(0, anchor_count, size=2)
        splitter.add_line(f'L{i}', f'A{start}', f'A{end}')
    for i in range(int(rng.integers(0, 10))):
        splitter.add_label(f'N{i}', tuple(rng.uniform(-10, 60, size=2)))
    return splitter


@pytest.mark.parametrize('seed', range(12))
def test_split_partitions_graph_and_assigns_nearest(seed):
    splitter = random_splitter(seed)
    anchors, lines, labels = splitter.anchors, splitter.lines, splitter.labels

    segments = splitter.split()

    owner = {}
    for index, segment in enumerate(segments):
        for anchor in segment.anchors:
            assert anchor.id not in owner
            owner[anchor.id] = index
    assert set(owner) == {anchor.id for anchor in anchors}

    result_lines = [line for segment in segments for line in segment.lines]
    assert sorted(id(line) for line in result_lines) == sorted(id(line) for line in lines)
    for index, segment in enumerate(segments):
        for line in segment.lines:
            assert owner[line.start] == owner[line.end] == index
        if not segment.lines:
            assert len(segment.anchors) == 1

    assert sum(len(segment.labels) for segment in segments) == len(labels)
    positions = anchor_positions(anchors)
    for index, segment in enumerate(segments):
        for label in segment.labels:
            own = exact_squared_distance_to_segment(label.position, segment.anchors, segment.lines, positions)
            for other in segments:
                assert own <= exact_squared_distance_to_segment(label.position, other.anchors, other.lines, positions)


@pytest.mark.parametrize('seed', range(12))
def test_ties_on_integer_grid_go_to_earliest_segment(seed):
    rng = np.random.default_rng(100 + seed)
    splitter = NetSegmentSplitter()
    for i in range(12):
        splitter.add_anchor(f'A{i}', tuple(int(v) for v in rng.integers(0, 9, size=2)))
    for i in range(6):
        start, end = rng.integers(0, 12, size=2)
        splitter.add_line(f'L{i}', f'A{start}', f'A{end}')
    for x in range(9):
        for y in range(9):
            splitter.add_label(f'N{x}_{y}', (x, y))
    anchors = splitter.anchors

    segments = splitter.split()

    positions = anchor_positions(anchors)
    for index, segment in enumerate(segments):
        for label in segment.labels:
            distances = [
                exact_squared_distance_to_segment(label.position, other.anchors, other.lines, positions)
                for other in segments
            ]
            assert distances.index(min(distances)) == index
