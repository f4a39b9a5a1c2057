"""
Engine record builder.

Folds an engine definition's lines into an ``EngineState`` and turns the
final state into a ``Complete`` record or an ``Incomplete`` reason.
"""

import logging
from dataclasses import dataclass, replace
from functools import reduce
from pathlib import Path

from sii_catalog.models.records import BuildResult, Complete, EngineRecord, Incomplete
from sii_catalog.parse.fields import (
    INFO_MARKER,
    NAME_MARKER,
    RPM_LIMIT_MARKER,
    TORQUE_MARKER,
    colon_value,
    engine_rated_power,
    object_name,
)
from sii_catalog.parse.lines import read_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineState:
    """Accumulated engine fields; None means not seen yet."""

    name: str | None = None
    rated_power: str | None = None
    torque: str | None = None
    rpm_limit: str | None = None


def step(state: EngineState, line: str) -> EngineState:
    """Apply one line to the engine state."""
    if NAME_MARKER in line and state.name is None:
        state = replace(state, name=object_name(line))

    if INFO_MARKER in line and state.rated_power is None:
        state = replace(state, rated_power=engine_rated_power(line))

    # torque and rpm limit: last occurrence wins
    if TORQUE_MARKER in line:
        torque = colon_value(line)
        if torque is not None:
            state = replace(state, torque=torque)

    if RPM_LIMIT_MARKER in line:
        rpm_limit = colon_value(line)
        if rpm_limit is not None:
            state = replace(state, rpm_limit=rpm_limit)

    return state


def finish(state: EngineState, source_path: str, require_rpm_limit: bool = False) -> BuildResult:
    """Turn a final engine state into a build result."""
    if not state.name:
        return Incomplete("missing name")
    if not state.rated_power:
        return Incomplete("missing rated power (info[])")
    if not state.torque:
        return Incomplete("missing torque")
    if require_rpm_limit and not state.rpm_limit:
        return Incomplete("missing rpm limit")

    return Complete(
        EngineRecord(
            name=state.name,
            rated_power=state.rated_power,
            torque=state.torque,
            rpm_limit=state.rpm_limit or None,
            source_path=source_path,
        )
    )


def build_engine(
    lines: list[str], source_path: str, require_rpm_limit: bool = False
) -> BuildResult:
    """
    Build an engine record from definition lines.

    Args:
        lines: Lines of one engine definition file
        source_path: Synthetic identifier stored on the record
        require_rpm_limit: Reject engines without an ``rpm_limit:`` line

    Returns:
        Complete with an EngineRecord, or Incomplete with the reason
    """
    if not lines:
        return Incomplete("no lines")
    state = reduce(step, lines, EngineState())
    return finish(state, source_path, require_rpm_limit)


def parse_engine_file(
    path: Path, source_path: str, require_rpm_limit: bool = False
) -> BuildResult:
    """Read an engine definition file and build its record."""
    result = build_engine(read_lines(path), source_path, require_rpm_limit)
    if isinstance(result, Incomplete):
        logger.debug(f"No engine record from {path}: {result.reason}")
    return result
