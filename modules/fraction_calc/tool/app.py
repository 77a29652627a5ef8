from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from abacus.errors import ValidationNormalizeMiddleware
from abacus.flows import resolve_flow_links
from abacus.settings import flow_base_url, shared_templates_dir
from modules.fraction_calc.core.calc import (
    calculate_fractions,
    compute_gcd_lcm,
    reciprocal_fraction,
    simplify_fraction,
)

app = FastAPI(title="Fraction Calculator")
app.add_middleware(ValidationNormalizeMiddleware)

BASE_DIR = Path(__file__).parent

templates = Jinja2Templates(
    directory=[str(BASE_DIR / "templates"), str(shared_templates_dir())]
)


def _respond(result, error):
    if error:
        return JSONResponse({"error": error}, status_code=400)
    return result


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.scope.get("root_path", "").rstrip("/")
    flow_links = resolve_flow_links("fraction_calc", base_url=flow_base_url())
    return templates.TemplateResponse(
        request,
        "index.html",
        {"flow_links": flow_links, "base_path": base_path},
    )


@app.post("/simplify")
def simplify(
    numerator: str | None = Form(None),
    denominator: str | None = Form(None),
):
    return _respond(*simplify_fraction(numerator, denominator))


@app.post("/reciprocal")
def reciprocal(
    numerator: str | None = Form(None),
    denominator: str | None = Form(None),
):
    return _respond(*reciprocal_fraction(numerator, denominator))


@app.post("/calc")
def calc(
    left_numerator: str | None = Form(None),
    left_denominator: str | None = Form(None),
    operator: str | None = Form(None),
    right_numerator: str | None = Form(None),
    right_denominator: str | None = Form(None),
    simplify: str | None = Form(None),
):
    return _respond(
        *calculate_fractions(
            left_numerator,
            left_denominator,
            operator,
            right_numerator,
            right_denominator,
            simplify=simplify,
        )
    )


@app.post("/gcd-lcm")
def gcd_lcm(
    a: str | None = Form(None),
    b: str | None = Form(None),
):
    return _respond(*compute_gcd_lcm(a, b))
