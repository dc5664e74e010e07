import logging

import pytest

from netsplit import NetSegmentSplitter, SplitterConfig, get_splitter_config, set_splitter_config


@pytest.fixture
def restore_config():
    saved = get_splitter_config()
    yield
    set_splitter_config(saved)


def test_get_returns_copy(restore_config):
    config = get_splitter_config()
    config.verify_partition = False

    assert get_splitter_config().verify_partition is True


def test_global_config_silences_dropped_label_warning(restore_config, caplog):
    caplog.set_level(logging.WARNING, logger='netsplit')
    set_splitter_config(SplitterConfig(warn_on_dropped_labels=False))
    splitter = NetSegmentSplitter()
    splitter.add_label('N1', (0, 0))

    assert splitter.split() == []
    assert 'Dropping' not in caplog.text


def test_explicit_config_does_not_change_result():
    def build(config):
        splitter = NetSegmentSplitter(config)
        splitter.add_anchor('A', (0, 0))
        splitter.add_anchor('B', (3, 0))
        splitter.add_line('L', 'A', 'B')
        splitter.add_label('N', (1, 1))
        return splitter.split()

    assert build(SplitterConfig(verify_partition=False)) == build(SplitterConfig())
