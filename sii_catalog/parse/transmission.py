"""
Transmission record builder.

The forward ratio range is taken from the first and the last
``ratios_forward[`` lines, so a transmission needs at least two forward gears
to be catalogued. Ratio line indices use None for "not seen", which keeps
line 0 usable as a real position.
"""

import logging
from dataclasses import dataclass, replace
from functools import reduce
from pathlib import Path

from sii_catalog.models.records import BuildResult, Complete, Incomplete, TransmissionRecord
from sii_catalog.parse.fields import (
    NAME_MARKER,
    RATIO_FORWARD_MARKER,
    RETARDER_MARKER,
    colon_value,
    object_name,
)
from sii_catalog.parse.lines import read_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransmissionState:
    """Accumulated transmission fields."""

    name: str | None = None
    speed_count: int = 0
    first_ratio_index: int | None = None
    last_ratio_index: int | None = None
    has_retarder: bool = False


def step(state: TransmissionState, indexed_line: tuple[int, str]) -> TransmissionState:
    """Apply one (index, line) pair to the transmission state."""
    index, line = indexed_line

    if NAME_MARKER in line and state.name is None:
        state = replace(state, name=object_name(line))

    if RATIO_FORWARD_MARKER in line:
        if state.first_ratio_index is None:
            state = replace(state, first_ratio_index=index)
        else:
            state = replace(state, last_ratio_index=index)
        state = replace(state, speed_count=state.speed_count + 1)

    if RETARDER_MARKER in line:
        state = replace(state, has_retarder=True)

    return state


def ratio_range(lines: list[str], first: int, last: int) -> str | None:
    """Format the ratios on two lines as ``"<first> - <last>"``."""
    first_ratio = colon_value(lines[first])
    last_ratio = colon_value(lines[last])
    if first_ratio is None or last_ratio is None:
        return None
    return f"{first_ratio} - {last_ratio}"


def finish(state: TransmissionState, lines: list[str], source_path: str) -> BuildResult:
    """Turn a final transmission state into a build result."""
    if state.first_ratio_index is None or state.last_ratio_index is None:
        return Incomplete(f"needs two forward ratios, found {state.speed_count}")

    ratio = ratio_range(lines, state.first_ratio_index, state.last_ratio_index)
    if ratio is None:
        return Incomplete("forward ratio value missing")

    if not state.name:
        return Incomplete("missing name")

    return Complete(
        TransmissionRecord(
            name=state.name,
            speed_count=state.speed_count,
            has_retarder=state.has_retarder,
            ratio_range=ratio,
            source_path=source_path,
        )
    )


def build_transmission(lines: list[str], source_path: str) -> BuildResult:
    """
    Build a transmission record from definition lines.

    Args:
        lines: Lines of one transmission definition file
        source_path: Synthetic identifier stored on the record

    Returns:
        Complete with a TransmissionRecord, or Incomplete with the reason
    """
    if not lines:
        return Incomplete("no lines")
    state = reduce(step, enumerate(lines), TransmissionState())
    return finish(state, lines, source_path)


def parse_transmission_file(path: Path, source_path: str) -> BuildResult:
    """Read a transmission definition file and build its record."""
    result = build_transmission(read_lines(path), source_path)
    if isinstance(result, Incomplete):
        logger.debug(f"No transmission record from {path}: {result.reason}")
    return result
