"""
Tree aggregation: brand.model folders to model entries.

Layout consumed::

    <root>/<brand>.<model>/engine/*.sii
    <root>/<brand>.<model>/transmission/*.sii

A folder becomes a ModelEntry only if its name splits into brand and model
and it yields at least one engine and one transmission record. Anything else
is skipped and noted on the ScanReport; per-item failures never raise.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from sii_catalog.config import CatalogConfig
from sii_catalog.models.records import (
    Complete,
    EngineRecord,
    ModelEntry,
    ScanReport,
    TransmissionRecord,
)
from sii_catalog.parse.engine import parse_engine_file
from sii_catalog.parse.fields import split_brand_model
from sii_catalog.parse.transmission import parse_transmission_file
from sii_catalog.util.files import list_files, list_subdirs

logger = logging.getLogger(__name__)


def build_source_path(prefix: str, folder_name: str, component_dir: str, file_name: str) -> str:
    """Build the synthetic identifier for a record, e.g. /def/vehicle/truck/x.y/engine/z.sii."""
    return f"{prefix}/{folder_name}/{component_dir}/{file_name}"


def collect_engines(
    folder: Path, config: CatalogConfig, report: ScanReport
) -> list[EngineRecord]:
    """Build every engine record in a model folder's engine subfolder."""
    engines = []
    for path in list_files(folder / config.engine_dir, config.extension):
        report.files_parsed += 1
        source_path = build_source_path(
            config.code_prefix, folder.name, config.engine_dir, path.name
        )
        result = parse_engine_file(path, source_path, config.require_rpm_limit)
        if isinstance(result, Complete):
            engines.append(result.record)
        else:
            report.skip(str(path), result.reason)
    return engines


def collect_transmissions(
    folder: Path, config: CatalogConfig, report: ScanReport
) -> list[TransmissionRecord]:
    """Build every transmission record in a model folder's transmission subfolder."""
    transmissions = []
    for path in list_files(folder / config.transmission_dir, config.extension):
        report.files_parsed += 1
        source_path = build_source_path(
            config.code_prefix, folder.name, config.transmission_dir, path.name
        )
        result = parse_transmission_file(path, source_path)
        if isinstance(result, Complete):
            transmissions.append(result.record)
        else:
            report.skip(str(path), result.reason)
    return transmissions


def build_model_entry(
    folder: Path, config: CatalogConfig, report: ScanReport
) -> ModelEntry | None:
    """
    Build the entry for one brand.model folder.

    Args:
        folder: The model-candidate folder
        config: Scan configuration
        report: Report that collects counters and skip reasons

    Returns:
        ModelEntry, or None if the folder contributes nothing
    """
    engines = collect_engines(folder, config, report)
    if not engines:
        report.skip(str(folder), "no engine records")
        logger.info(f"Skipping {folder.name}: no engine records")
        return None

    transmissions = collect_transmissions(folder, config, report)
    if not transmissions:
        report.skip(str(folder), "no transmission records")
        logger.info(f"Skipping {folder.name}: no transmission records")
        return None

    brand_model = split_brand_model(folder.name)
    if brand_model is None:
        report.skip(str(folder), "folder name is not brand.model")
        logger.info(f"Skipping {folder.name}: folder name is not brand.model")
        return None

    brand, model = brand_model
    report.engines_found += len(engines)
    report.transmissions_found += len(transmissions)
    return ModelEntry(brand=brand, model=model, engines=engines, transmissions=transmissions)


def scan_tree(
    config: CatalogConfig, on_folder: Callable[[Path], None] | None = None
) -> ScanReport:
    """
    Scan every model folder under ``config.root``.

    Folders are visited in name order. A missing or unreadable root yields an
    empty report.

    Args:
        config: Scan configuration
        on_folder: Optional callback invoked before each folder is scanned

    Returns:
        ScanReport with the model entries in folder order
    """
    report = ScanReport()
    for folder in list_subdirs(config.root):
        if on_folder is not None:
            on_folder(folder)
        report.folders_seen += 1
        entry = build_model_entry(folder, config, report)
        if entry is not None:
            report.entries.append(entry)

    logger.info(
        f"Scanned {report.folders_seen} folders: {len(report.entries)} models, "
        f"{len(report.skipped)} skipped items"
    )
    return report


def group_by_brand(entries: list[ModelEntry]) -> dict[str, list[ModelEntry]]:
    """Group model entries by brand, keeping first-seen order within each brand."""
    grouped: dict[str, list[ModelEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.brand, []).append(entry)
    return grouped
