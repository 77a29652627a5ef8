from __future__ import annotations

import logging
from importlib import metadata
from pathlib import Path
from typing import Any, Dict

import yaml

from abacus.settings import modules_path

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "abacus.modules"


def _normalize_module(
    data: Dict[str, Any], *, source: str, **extra: Any
) -> Dict[str, Any] | None:
    name = data.get("name")
    if not name:
        return None

    slug = data.get("slug") or name.replace("_", "-")
    public = data.get("public")
    normalized = {
        **data,
        "name": name,
        "slug": slug,
        "mount": data.get("mount") or f"/{slug}",
        "public": True if public is None else bool(public),
        "source": source,
    }
    normalized.update({key: value for key, value in extra.items() if value is not None})
    return normalized


def load_filesystem_modules(root: Path | None = None) -> Dict[str, Dict[str, Any]]:
    root = root if root is not None else modules_path()
    modules: Dict[str, Dict[str, Any]] = {}
    if not root.exists():
        return modules

    for module_dir in sorted(root.iterdir()):
        if not module_dir.is_dir():
            continue
        manifest = module_dir / "module.yaml"
        if not manifest.exists():
            continue
        with open(manifest, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: manifest is not a mapping.", manifest)
            continue
        normalized = _normalize_module(data, source="filesystem", path=module_dir)
        if normalized:
            modules[normalized["name"]] = normalized
    return modules


def load_entrypoint_modules(
    group: str = ENTRYPOINT_GROUP,
) -> Dict[str, Dict[str, Any]]:
    modules: Dict[str, Dict[str, Any]] = {}

    for entry in metadata.entry_points(group=group):
        try:
            obj = entry.load()
        except Exception:
            logger.exception("Failed to load module entry point %s.", entry.name)
            continue

        data = obj() if callable(obj) else obj
        if not isinstance(data, dict):
            logger.warning("Entry point %s did not provide a manifest mapping.", entry.name)
            continue

        normalized = _normalize_module(data, source="entry_point", entry_point=entry.name)
        if normalized:
            modules[normalized["name"]] = normalized

    return modules


def load_modules(root: Path | None = None) -> Dict[str, Dict[str, Any]]:
    modules = load_filesystem_modules(root)
    entrypoint_modules = load_entrypoint_modules()

    for name, data in entrypoint_modules.items():
        if name not in modules:
            modules[name] = data

    return modules
