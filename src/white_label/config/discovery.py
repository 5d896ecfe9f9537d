"""Manifest discovery and loading.

Walk-up finder locates white-label.toml, similar to how git finds .git/.
Supports WHITE_LABEL_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from white_label.config.models import WhiteLabelConfig

CONFIG_FILENAME = "white-label.toml"
CONFIG_ENV_VAR = "WHITE_LABEL_CONFIG"

logger = logging.getLogger(__name__)


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for white-label.toml.

    Returns the path to the manifest, or None if not found.
    Checks WHITE_LABEL_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> WhiteLabelConfig:
    """Load and validate a manifest from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns a default WhiteLabelConfig if no file is found. A top-level
    ``brand`` key is dropped: the brand only comes from the environment or
    the command line.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return WhiteLabelConfig()

    raw = path.read_text(encoding="utf-8")
    data: dict[str, Any] = tomllib.loads(raw)
    if data.pop("brand", None) is not None:
        logger.warning("Ignoring 'brand' in %s; set WHITE_LABEL_BRAND instead", path)
    return WhiteLabelConfig.model_validate(data)
