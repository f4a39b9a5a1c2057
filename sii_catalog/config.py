"""
Configuration for sii-catalog.

Every path and switch used by a scan lives on ``CatalogConfig``; nothing is
read from module-level constants. Configurations can be loaded from a
``sii-catalog.yaml`` file validated against ``schema/config.schema.json``.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validate

from sii_catalog.exceptions import (
    ConfigAlreadyExistsError,
    ConfigNotFoundError,
    InvalidConfigError,
)
from sii_catalog.util.files import ensure_dir

CONFIG_FILENAME = "sii-catalog.yaml"
SCHEMA_FILE = Path(__file__).parent / "schema" / "config.schema.json"

DEFAULT_CONFIG = {
    "scan": {
        "root": "def/vehicle/truck",
        "extension": "sii",
        "engine_dir": "engine",
        "transmission_dir": "transmission",
        "code_prefix": "/def/vehicle/truck",
        "require_rpm_limit": False,
    },
    "output": {
        "path": "trucks.json",
        "format": "json",
        "pretty": True,
    },
}


@dataclass
class CatalogConfig:
    """Paths and switches for one scan."""

    root: Path = field(default_factory=lambda: Path(DEFAULT_CONFIG["scan"]["root"]))
    output: Path = field(default_factory=lambda: Path(DEFAULT_CONFIG["output"]["path"]))
    output_format: str = "json"
    pretty: bool = True
    extension: str = "sii"
    engine_dir: str = "engine"
    transmission_dir: str = "transmission"
    code_prefix: str = "/def/vehicle/truck"
    require_rpm_limit: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> "CatalogConfig":
        """
        Build a config from a parsed ``sii-catalog.yaml`` mapping.

        Args:
            data: Mapping with optional ``scan`` and ``output`` sections
            base_dir: Directory relative paths are resolved against

        Returns:
            CatalogConfig with defaults for anything not given
        """
        scan = {**DEFAULT_CONFIG["scan"], **(data.get("scan") or {})}
        output = {**DEFAULT_CONFIG["output"], **(data.get("output") or {})}

        def resolve(value: str) -> Path:
            path = Path(value).expanduser()
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            return path

        return cls(
            root=resolve(scan["root"]),
            output=resolve(output["path"]),
            output_format=output["format"],
            pretty=output["pretty"],
            extension=scan["extension"],
            engine_dir=scan["engine_dir"],
            transmission_dir=scan["transmission_dir"],
            code_prefix=scan["code_prefix"],
            require_rpm_limit=scan["require_rpm_limit"],
        )


def validate_config(config: dict) -> None:
    """Validate a config mapping against the JSON schema."""
    schema = json.loads(SCHEMA_FILE.read_text())
    try:
        validate(instance=config, schema=schema)
    except ValidationError as e:
        location = ".".join(str(p) for p in e.path) or "<root>"
        raise InvalidConfigError(f"{e.message} (at {location})") from e


def load_config(path: str | Path) -> CatalogConfig:
    """
    Load and validate a configuration file.

    Relative paths in the file are resolved against the file's directory.

    Raises:
        ConfigNotFoundError: If the file does not exist
        InvalidConfigError: If the file is empty, not a mapping, or fails validation
    """
    config_file = Path(path)
    if not config_file.exists():
        raise ConfigNotFoundError(str(config_file))

    try:
        with open(config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"{config_file}: {e}") from e

    if data is None:
        raise InvalidConfigError(f"{config_file} is empty")

    if not isinstance(data, dict):
        raise InvalidConfigError(f"expected a mapping, got {type(data).__name__}")

    validate_config(data)

    return CatalogConfig.from_dict(data, base_dir=config_file.resolve().parent)


def write_default_config(directory: str | Path, force: bool = False) -> Path:
    """
    Write ``sii-catalog.yaml`` with the default settings.

    Args:
        directory: Directory to write into (created if missing)
        force: Overwrite an existing file

    Returns:
        Path to the written file
    """
    target_dir = Path(directory)
    config_file = target_dir / CONFIG_FILENAME
    if config_file.exists() and not force:
        raise ConfigAlreadyExistsError(str(config_file))

    ensure_dir(target_dir)
    with open(config_file, "w", encoding="utf-8") as f:
        yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)
    return config_file
