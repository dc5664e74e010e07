"""Configuration helpers for the splitter diagnostics."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class SplitterConfig:
    """Diagnostic switches. Neither option changes the split result."""

    verify_partition: bool = True
    warn_on_dropped_labels: bool = True


_SPLITTER_CONFIG = SplitterConfig()


def get_splitter_config() -> SplitterConfig:
    return copy.deepcopy(_SPLITTER_CONFIG)


def set_splitter_config(config: SplitterConfig) -> None:
    global _SPLITTER_CONFIG
    _SPLITTER_CONFIG = copy.deepcopy(config)
