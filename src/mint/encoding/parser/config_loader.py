"""Load encoder options from a JSON configuration file."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from jsonschema import Draft7Validator

from ..domain.models import SqidsOptions
from ..utils.constants import CONFIG_SECTION, SCHEMA_JSON_PATH
from ..utils.errors import ConfigFileNotFound, InvalidConfigurationError, SchemaValidationError
from ..utils.logging import get_logger

LOG = get_logger()


def load_json_file(json_path: Path) -> Dict:
    if not json_path.exists():
        raise ConfigFileNotFound(f"config not found: {json_path}")
    with json_path.open("r", encoding="utf-8") as f:
        try:
            config_json = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidConfigurationError(f"config is not valid JSON: {json_path} ({exc})") from exc
    LOG.info("loaded config: %s", json_path)
    return config_json


def load_schema_file(schema_path: Path) -> Dict:
    if not schema_path.exists():
        raise ConfigFileNotFound(f"schema not found: {schema_path}")
    with schema_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _format_json_path(path_iterable) -> str:
    parts: List[str] = ["root"]
    for p in path_iterable:
        if isinstance(p, int):
            parts[-1] = parts[-1] + f"[{p}]"
        else:
            parts.append(str(p))
    return ".".join(parts)


def validate_config(config_json: Dict, schema_json: Dict) -> None:
    validator = Draft7Validator(schema_json)
    errors = sorted(validator.iter_errors(config_json), key=lambda e: (list(e.path), list(e.schema_path)))
    if not errors:
        LOG.info("config validation: PASSED")
        return
    LOG.error("config validation: FAILED (count=%d)", len(errors))
    for i, err in enumerate(errors, start=1):
        LOG.error(
            "#%d path=%s | msg=%s | validator=%s",
            i,
            _format_json_path(err.path),
            err.message,
            err.validator,
        )
    raise SchemaValidationError(f"config validation failed with {len(errors)} error(s)")


def parse_options(config_json: Dict) -> SqidsOptions:
    section = config_json.get(CONFIG_SECTION)
    if section is None:
        LOG.info('no "%s" section; using default encoder options', CONFIG_SECTION)
        return SqidsOptions()
    blocklist = section.get("blocklist")
    return SqidsOptions(
        alphabet=section.get("alphabet"),
        min_length=section.get("min_length"),
        blocklist=tuple(blocklist) if blocklist is not None else None,
    )


def load_options(config_path: Path, schema_path: Path = SCHEMA_JSON_PATH) -> SqidsOptions:
    config_json = load_json_file(config_path)
    validate_config(config_json, load_schema_file(schema_path))
    return parse_options(config_json)
