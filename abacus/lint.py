from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml

from abacus.engine import import_attr
from abacus.settings import modules_path

REQUIRED_FIELDS = ("name", "title", "version", "description", "public", "category")
PUBLIC_FIELDS = ("entrypoints", "mount")
PUBLIC_FILES = {
    "tool/app.py": "missing tool/app.py",
    "tool/templates/index.html": "missing tool/templates/index.html",
    "core": "missing core/",
}


def _read_manifest(path: Path, issues: List[str]) -> Dict[str, Any]:
    manifest_path = path / "module.yaml"
    if not manifest_path.exists():
        issues.append("missing module.yaml")
        return {}
    try:
        data = yaml.safe_load(manifest_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        issues.append(f"invalid module.yaml: {exc}")
        return {}
    if not isinstance(data, dict):
        issues.append("module.yaml must be a mapping")
        return {}
    return data


def _mount_issues(mount: Any) -> List[str]:
    if not isinstance(mount, str):
        return ["mount must be a string"]
    mount = mount.strip()
    issues: List[str] = []
    if not mount.startswith("/"):
        issues.append("mount must start with /")
    if mount != "/" and mount.endswith("/"):
        issues.append("mount must not end with /")
    if "://" in mount or mount.startswith("//") or "\\" in mount:
        issues.append("mount must be a path")
    return issues


def lint_module(meta: Dict[str, Any]) -> Dict[str, Any]:
    issues: List[str] = []

    path = meta.get("path")
    if path is None and meta.get("name"):
        path = modules_path() / meta["name"]
    path = Path(path) if path is not None else None

    manifest = _read_manifest(path, issues) if path is not None else {}
    if path is None:
        issues.append("missing module.yaml")

    public = manifest.get("public")
    if public is None:
        public = meta.get("public", True)

    fields = REQUIRED_FIELDS + (PUBLIC_FIELDS if public else ())
    for field in fields:
        value = manifest.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            issues.append(f"missing field: {field}")

    if public and manifest.get("mount") is not None:
        issues.extend(_mount_issues(manifest["mount"]))

    entrypoints = manifest.get("entrypoints")
    entrypoint = str(entrypoints.get("api") or "") if isinstance(entrypoints, dict) else ""
    entrypoint_error = ""
    if not entrypoint:
        if public:
            entrypoint_error = "missing entrypoints.api"
    else:
        try:
            import_attr(entrypoint)
        except Exception as exc:
            entrypoint_error = str(exc)

    if public and path is not None:
        for relative, message in PUBLIC_FILES.items():
            if not (path / relative).exists():
                issues.append(message)

    return {
        "ok": not issues and not entrypoint_error,
        "issues": issues,
        "entrypoint": entrypoint,
        "entrypoint_ok": not entrypoint_error,
        "entrypoint_error": entrypoint_error,
        "public": bool(public),
    }
