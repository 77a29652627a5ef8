"""Links from one calculator to the next, declared under ``flows`` in module.yaml.

    flows:
      after_success:
        - fraction_calc
        - target: geometry_calc
          label: Measure a shape
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from abacus.registry import load_modules


def _key(value: str) -> str:
    return "".join(char for char in value.lower() if char.isalnum())


def _flow_target(entry: Any) -> Tuple[str | None, str | None]:
    if isinstance(entry, dict):
        target = entry.get("target") or entry.get("module") or entry.get("name")
        return (str(target) if target else None), entry.get("label")
    return (str(entry) if entry else None), None


def resolve_flow_links(
    module_name: str,
    *,
    when: str = "after_success",
    base_url: str | None = None,
) -> List[Dict[str, str]]:
    modules = load_modules()
    by_key = {_key(name): meta for name, meta in modules.items()}
    module = by_key.get(_key(module_name))
    if module is None:
        return []

    links: List[Dict[str, str]] = []
    for entry in (module.get("flows") or {}).get(when) or []:
        target, label = _flow_target(entry)
        meta = by_key.get(_key(target)) if target else None
        if meta is None:
            continue

        href = meta.get("mount") or f"/{meta['slug']}"
        if base_url:
            href = base_url.rstrip("/") + href
        label = label or meta.get("flow_label") or meta.get("title") or meta["name"]
        links.append({"label": str(label), "href": str(href)})

    return links
