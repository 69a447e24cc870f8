"""
Extraction config file: ``.toc_extract.json`` holding ExtractionConfig fields.

Lookup order: env TOC_EXTRACT_CONFIG, then the current directory and its parents.
A missing file means defaults. An unreadable or invalid file logs a warning and
also falls back to defaults; unknown keys are ignored.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from toc_extract.models import ExtractionConfig

log = logging.getLogger(__name__)

CONFIG_FILENAME = ".toc_extract.json"
CONFIG_ENV_VAR = "TOC_EXTRACT_CONFIG"


def get_config_path() -> Path:
    """Path to the config file. Env TOC_EXTRACT_CONFIG wins; else an existing file found upward; else cwd."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).resolve()
    found = _find_config_file()
    if found is not None:
        return found
    return (Path.cwd() / CONFIG_FILENAME).resolve()


def _find_config_file() -> Path | None:
    """Return path to an existing config file, or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path).resolve()
        return p if p.is_file() else None
    for d in [Path.cwd(), *Path.cwd().parents]:
        cf = (d / CONFIG_FILENAME).resolve()
        if cf.is_file():
            return cf
    return None


def load_config(path: Path | None = None) -> ExtractionConfig:
    """Load config from ``path`` (or the lookup order above); defaults on any problem."""
    path = Path(path) if path is not None else _find_config_file()
    if path is None:
        return ExtractionConfig()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Could not read config %s: %s; using defaults", path, e)
        return ExtractionConfig()
    if not isinstance(data, dict):
        log.warning("Config %s is not a JSON object; using defaults", path)
        return ExtractionConfig()
    try:
        return ExtractionConfig.model_validate(data)
    except ValidationError as e:
        log.warning("Invalid config %s: %s; using defaults", path, e)
        return ExtractionConfig()


def save_config(config: ExtractionConfig, path: Path | None = None) -> Path:
    """Write config as JSON. Returns the path written."""
    path = Path(path) if path is not None else get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.model_dump(), f, indent=2)
    return path
