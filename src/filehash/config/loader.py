"""Config loading entry points for filehash."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .models import FileHashConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "defaults.yaml"


class ConfigError(RuntimeError):
    """Raised when configuration cannot be loaded or validated."""


def load_config(*, overrides: Mapping[str, Any] | None = None) -> FileHashConfig:
    """Load bundled defaults and apply per-invocation overrides.

    ``None`` values in `overrides` are ignored so unset CLI options keep the default.
    """

    merged: dict[str, Any] = _expect_mapping(_read_defaults(DEFAULT_CONFIG_PATH), DEFAULT_CONFIG_PATH)

    if overrides:
        present = {key: value for key, value in overrides.items() if value is not None}
        merged.update(present)

    try:
        return FileHashConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid filehash configuration: {exc}") from exc


def _read_defaults(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


__all__ = ["ConfigError", "DEFAULT_CONFIG_PATH", "load_config"]
