from __future__ import annotations

from abacus.engine import build_app

app = build_app()
