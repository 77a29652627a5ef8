from __future__ import annotations

import logging
from importlib import import_module
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from abacus.errors import ValidationNormalizeMiddleware
from abacus.registry import load_modules
from abacus.settings import log_level, shared_templates_dir

logger = logging.getLogger(__name__)

CATEGORY_DESCRIPTIONS = {
    "Numbers": "Exact fractions, reciprocals, GCD and LCM.",
    "Geometry": "Areas, perimeters and circumferences of plane shapes.",
    "Other": "Useful modules that do not fit a core category.",
}
DEFAULT_CATEGORY_DESCRIPTION = "Practical math helpers for quick checks."


def _slugify(value: str) -> str:
    return value.strip().lower().replace(" ", "-")


def _title(module: dict[str, Any]) -> str:
    return module.get("title") or module.get("name", "")


def build_categories(root: Path | None = None) -> list[dict[str, Any]]:
    grouped: dict[str, list[dict[str, Any]]] = {}
    for module in load_modules(root).values():
        if not module.get("public", True):
            continue
        category = str(module.get("category") or "Other")
        grouped.setdefault(category, []).append(module)

    categories: list[dict[str, Any]] = []
    for category, items in sorted(grouped.items(), key=lambda item: item[0].lower()):
        categories.append(
            {
                "name": category,
                "slug": _slugify(category),
                "description": CATEGORY_DESCRIPTIONS.get(
                    category, DEFAULT_CATEGORY_DESCRIPTION
                ),
                "modules": sorted(items, key=_title),
            }
        )
    return categories


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def build_app(root: Path | None = None) -> FastAPI:
    level = log_level()
    for name in ("abacus", "modules"):
        logging.getLogger(name).setLevel(level)

    app = FastAPI(title="Abacus")
    app.add_middleware(ValidationNormalizeMiddleware)

    templates = Jinja2Templates(directory=str(shared_templates_dir()))

    @app.get("/", response_class=HTMLResponse)
    def abacus_index(request: Request):
        base_path = request.scope.get("root_path", "").rstrip("/")
        return templates.TemplateResponse(
            request,
            "index.html",
            {"categories": build_categories(root), "base_path": base_path},
        )

    @app.get("/category/{slug}", response_class=HTMLResponse)
    def category_index(request: Request, slug: str):
        category = next(
            (item for item in build_categories(root) if item["slug"] == slug), None
        )
        if not category:
            raise HTTPException(status_code=404, detail="Category not found")
        base_path = request.scope.get("root_path", "").rstrip("/")
        return templates.TemplateResponse(
            request,
            "category.html",
            {"category": category, "base_path": base_path},
        )

    for meta in load_modules(root).values():
        api_entry = (meta.get("entrypoints") or {}).get("api")
        if not api_entry:
            continue

        try:
            subapp = import_attr(api_entry)
        except Exception:
            logger.exception("Could not load %s for module %s.", api_entry, meta["name"])
            continue

        mount_path = meta.get("mount") or f"/{meta['slug']}"
        app.mount(mount_path, subapp)
        logger.info("Mounted %s at %s.", meta["name"], mount_path)

    return app
