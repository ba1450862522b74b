"""
Environment-based configuration.

Reads transformer options from environment variables (and a ``.env`` file):

- ES2TS_PROPERTY_MAPPING: path to a JSON object of field mappings
- ES2TS_TYPESENSE_SCHEMA: path to a Typesense collection schema (JSON)
- ES2TS_ELASTIC_SCHEMA: path to an Elasticsearch mapping (JSON)
- ES2TS_AUTO_MAP: "true" to derive the mapping from both schemas
- ES2TS_DEFAULT_SCORE_FIELD: sort expression used for ``_score``
- ES2TS_LOG_LEVEL: logging level for the package logger
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from elastic_to_typesense.core.exceptions import ConfigurationError
from elastic_to_typesense.core.models import TransformerOptions

PACKAGE_LOGGER = "elastic_to_typesense"
TRUE_VALUES = {"1", "true", "yes", "on"}


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the package logger at the given level."""
    level_name = (level or os.getenv("ES2TS_LOG_LEVEL") or "WARNING").upper()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        logger.addHandler(handler)


def _read_json(variable: str) -> Optional[Any]:
    path = os.getenv(variable)
    if not path:
        return None
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read {variable} from {path}: {e}") from e


def load_options_from_env(**overrides: Any) -> TransformerOptions:
    """
    Build TransformerOptions from environment variables.

    Args:
        **overrides: Option values that take precedence over the environment

    Returns:
        Validated TransformerOptions

    Raises:
        ConfigurationError: If a referenced file is unreadable or invalid
    """
    load_dotenv()

    data: dict = {}
    mapping = _read_json("ES2TS_PROPERTY_MAPPING")
    if mapping is not None:
        data["property_mapping"] = mapping

    typesense_schema = _read_json("ES2TS_TYPESENSE_SCHEMA")
    if typesense_schema is not None:
        data["typesense_schema"] = typesense_schema

    elastic_schema = _read_json("ES2TS_ELASTIC_SCHEMA")
    if isinstance(elastic_schema, dict):
        # accept a full index mapping as well as a bare properties block
        data["elastic_schema"] = elastic_schema.get("mappings", elastic_schema)
    elif elastic_schema is not None:
        raise ConfigurationError("ES2TS_ELASTIC_SCHEMA must contain a JSON object")

    auto_map = os.getenv("ES2TS_AUTO_MAP")
    if auto_map is not None:
        data["auto_map_properties"] = auto_map.strip().lower() in TRUE_VALUES

    default_score_field = os.getenv("ES2TS_DEFAULT_SCORE_FIELD")
    if default_score_field:
        data["default_score_field"] = default_score_field

    data.update(overrides)
    try:
        return TransformerOptions.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid transformer configuration: {e}") from e
