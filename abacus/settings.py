from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).parent.parent


def shared_templates_dir(root_dir: Path = ROOT_DIR) -> Path:
    env_path = os.getenv("ABACUS_SHARED_TEMPLATES")
    if env_path:
        return Path(env_path)
    return root_dir / "abacus" / "templates"


def modules_path(root_dir: Path = ROOT_DIR) -> Path:
    env_path = os.getenv("ABACUS_MODULES_PATH")
    if env_path:
        return Path(env_path)
    return root_dir / "modules"


def flow_base_url() -> str | None:
    value = os.getenv("ABACUS_FLOW_BASE_URL", "").strip()
    return value or None


def log_level(default: str = "INFO") -> int:
    raw = os.getenv("ABACUS_LOG_LEVEL", default).strip().upper()
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    logger.warning("Unknown ABACUS_LOG_LEVEL %r; falling back to %s.", raw, default)
    return logging.getLevelName(default)
