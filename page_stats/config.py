# === FILE: page_stats/config.py ===
"""
Loading and validation of the PageStats analyzer configuration.
The schema is a Pydantic model; files may be YAML or JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field


class AnalyzerConfig(BaseModel):
    """Settings for one batch of page analyses."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(30.0, gt=0, description="Total timeout for one request (seconds).")
    concurrency: Optional[int] = Field(
        None, ge=1, description="Max requests in flight; None launches every URL at once."
    )
    user_agent: Optional[str] = Field(
        None, min_length=1, description="User-Agent header; None keeps the aiohttp default."
    )


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> AnalyzerConfig:
    """
    Read a YAML or JSON file and return a validated AnalyzerConfig.
    Without a path the defaults are returned; a missing file raises FileNotFoundError.
    """
    if path is None:
        return AnalyzerConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return AnalyzerConfig(**data)
