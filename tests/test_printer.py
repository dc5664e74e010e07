from netsplit import split_net_segment
from netsplit.model import ElementId, ElementKind, Segment
from netsplit.printer import format_segment, print_segments


def test_print_segments_lists_ids_in_order():
    segments = split_net_segment(
        [('A1', (0, 0)), ('A2', (1, 0)), ('A3', (5, 5))],
        [('L1', 'A1', 'A2')],
        [('N1', (5, 5))],
    )

    assert print_segments(segments) == (
        'segment #0: anchors=[A1, A2] lines=[L1] labels=[]\n'
        'segment #1: anchors=[A3] lines=[] labels=[N1]\n'
    )


def test_element_ids_print_with_kind():
    segment = Segment(labels=())
    assert format_segment(segment, 3) == 'segment #3: anchors=[] lines=[] labels=[]'

    handle = ElementId(ElementKind.NET_POINT, 7)
    [only] = split_net_segment([(handle, (0, 0))])
    assert format_segment(only, 0) == 'segment #0: anchors=[net_point:7] lines=[] labels=[]'


def test_non_string_ids_use_repr():
    [only] = split_net_segment([((1, 2), (0, 0))])

    assert format_segment(only, 0) == 'segment #0: anchors=[(1, 2)] lines=[] labels=[]'


def test_empty_result():
    assert print_segments([]) == '(no segments)\n'
