"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/config.py

Configuration schema for design validation and logging, plus strict YAML
parsing (duplicate keys fail, unknown keys fail).

Example:

    validation:
      case_sensitive_elements: false
      require_resolved_references: true
    logging:
      level: DEBUG
      logfile: logs/sbol3.log

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


# ---- Strict YAML loader (duplicate keys fail) ----
class _StrictLoader(yaml.SafeLoader):
    pass


def _construct_mapping(loader, node, deep: bool = False):
    mapping: Dict[Any, Any] = {}
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=deep)
        if key in mapping:
            raise KeyError(f"Duplicate key in YAML: {key!r}")
        mapping[key] = loader.construct_object(value_node, deep=deep)
    return mapping


_StrictLoader.add_constructor(yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_mapping)


class ConfigError(ValueError):
    pass


class ValidationConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    case_sensitive_elements: bool = False
    check_provenance: bool = True
    require_resolved_references: bool = False
    warn_on_alphabet: bool = True


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: str = "INFO"
    logfile: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _level_ok(cls, v: str):
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        lv = (v or "").upper()
        if lv not in allowed:
            raise ValueError(f"logging.level must be one of {sorted(allowed)}")
        return lv

    @field_validator("logfile")
    @classmethod
    def _logfile_nonempty(cls, v: Optional[str]):
        if v is not None and not str(v).strip():
            raise ValueError("logging.logfile must be a non-empty string or null")
        return v


class Sbol3Config(BaseModel):
    model_config = ConfigDict(extra="forbid")
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _expand_path(value: str | os.PathLike) -> Path:
    return Path(os.path.expanduser(os.path.expandvars(str(value))))


def load_config(path: str | os.PathLike) -> Sbol3Config:
    cfg_path = _expand_path(path)
    if not cfg_path.is_file():
        raise ConfigError(f"Config file not found: {cfg_path}")
    try:
        raw = yaml.load(cfg_path.read_text(encoding="utf-8"), Loader=_StrictLoader)
    except (yaml.YAMLError, KeyError) as e:
        raise ConfigError(f"Could not parse {cfg_path}: {e}") from e
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{cfg_path} must contain a YAML mapping at the top level")
    try:
        return Sbol3Config.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {cfg_path}:\n{e}") from e
