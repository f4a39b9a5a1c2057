"""
Output document serialization.

Supports: JSON (default, pretty or compact) and YAML.

The document is an object keyed by brand; each value is a list of
``{"model", "engines", "transmissions"}`` objects. Writers report failure as
False instead of raising, so a scan always runs to completion.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from sii_catalog.aggregate import group_by_brand
from sii_catalog.models.records import EngineRecord, ModelEntry, TransmissionRecord
from sii_catalog.util.files import write_text

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "yaml")


def engine_to_dict(engine: EngineRecord) -> dict[str, Any]:
    data = {"name": engine.name, "cv": engine.rated_power, "nm": engine.torque}
    if engine.rpm_limit:
        data["rpm"] = engine.rpm_limit
    data["code"] = engine.source_path
    return data


def transmission_to_dict(transmission: TransmissionRecord) -> dict[str, Any]:
    return {
        "name": transmission.name,
        "speeds": str(transmission.speed_count),
        "retarder": transmission.has_retarder,
        "ratio": transmission.ratio_range,
        "code": transmission.source_path,
    }


def model_to_dict(entry: ModelEntry) -> dict[str, Any]:
    return {
        "model": entry.model,
        "engines": [engine_to_dict(e) for e in entry.engines],
        "transmissions": [transmission_to_dict(t) for t in entry.transmissions],
    }


def to_document(entries: list[ModelEntry]) -> dict[str, list[dict[str, Any]]]:
    """
    Build the output document from model entries.

    Args:
        entries: Model entries in scan order

    Returns:
        Mapping of brand to its serialized models, in first-seen order
    """
    return {
        brand: [model_to_dict(entry) for entry in models]
        for brand, models in group_by_brand(entries).items()
    }


def dumps_document(document: dict[str, Any], pretty: bool = True) -> str:
    """Serialize the document to JSON text (2-space indent, or compact)."""
    if pretty:
        return json.dumps(document, indent=2, ensure_ascii=False)
    return json.dumps(document, separators=(",", ":"), ensure_ascii=False)


def save_as_json(document: dict[str, Any], path: str | Path, pretty: bool = True) -> bool:
    """
    Write the document as JSON.

    Args:
        document: Output document
        path: Destination file (parent directories are created)
        pretty: Indented output when True, compact otherwise

    Returns:
        True if the file was written, False otherwise
    """
    try:
        content = dumps_document(document, pretty)
    except (TypeError, ValueError) as e:
        logger.warning(f"Failed to serialize document: {e}")
        return False

    try:
        write_text(path, content)
    except OSError as e:
        logger.warning(f"Failed to write {path}: {e}")
        return False
    return True


def save_as_yaml(document: dict[str, Any], path: str | Path) -> bool:
    """Write the document as YAML. Returns True if the file was written."""
    try:
        content = yaml.safe_dump(
            document, default_flow_style=False, sort_keys=False, allow_unicode=True
        )
    except yaml.YAMLError as e:
        logger.warning(f"Failed to serialize document: {e}")
        return False

    try:
        write_text(path, content)
    except OSError as e:
        logger.warning(f"Failed to write {path}: {e}")
        return False
    return True


def save_document(
    document: dict[str, Any], path: str | Path, fmt: str = "json", pretty: bool = True
) -> bool:
    """Write the document in the requested format."""
    if fmt == "yaml":
        return save_as_yaml(document, path)
    if fmt == "json":
        return save_as_json(document, path, pretty)
    logger.warning(f"Unsupported output format: {fmt}")
    return False
