from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from abacus.errors import ValidationNormalizeMiddleware
from abacus.flows import resolve_flow_links
from abacus.settings import flow_base_url, shared_templates_dir
from modules.geometry_calc.core.calc import (
    AREA_SHAPES,
    PERIMETER_SHAPES,
    calculate_area,
    calculate_circumference,
    calculate_perimeter,
)

app = FastAPI(title="Geometry Calculator")
app.add_middleware(ValidationNormalizeMiddleware)

BASE_DIR = Path(__file__).parent

templates = Jinja2Templates(
    directory=[str(BASE_DIR / "templates"), str(shared_templates_dir())]
)


def _dimensions(**fields: str | None) -> dict[str, str | None]:
    return {name: value for name, value in fields.items() if value is not None}


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.scope.get("root_path", "").rstrip("/")
    flow_links = resolve_flow_links("geometry_calc", base_url=flow_base_url())
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "flow_links": flow_links,
            "base_path": base_path,
            "area_shapes": {name: fields for name, (_, fields) in AREA_SHAPES.items()},
            "perimeter_shapes": {
                name: fields for name, (_, fields) in PERIMETER_SHAPES.items()
            },
        },
    )


@app.post("/area")
def area(
    shape: str | None = Form(None),
    radius: str | None = Form(None),
    base: str | None = Form(None),
    height: str | None = Form(None),
    length: str | None = Form(None),
    width: str | None = Form(None),
    side: str | None = Form(None),
    base1: str | None = Form(None),
    base2: str | None = Form(None),
    leg1: str | None = Form(None),
    leg2: str | None = Form(None),
    decimals: int = Form(2),
):
    result, error = calculate_area(
        shape,
        _dimensions(
            radius=radius,
            base=base,
            height=height,
            length=length,
            width=width,
            side=side,
            base1=base1,
            base2=base2,
            leg1=leg1,
            leg2=leg2,
        ),
        decimals=decimals,
    )
    if error:
        return JSONResponse({"error": error}, status_code=400)
    return result


@app.post("/perimeter")
def perimeter(
    shape: str | None = Form(None),
    a: str | None = Form(None),
    b: str | None = Form(None),
    c: str | None = Form(None),
    length: str | None = Form(None),
    width: str | None = Form(None),
    side: str | None = Form(None),
    base1: str | None = Form(None),
    base2: str | None = Form(None),
    leg1: str | None = Form(None),
    leg2: str | None = Form(None),
    decimals: int = Form(2),
):
    result, error = calculate_perimeter(
        shape,
        _dimensions(
            a=a,
            b=b,
            c=c,
            length=length,
            width=width,
            side=side,
            base1=base1,
            base2=base2,
            leg1=leg1,
            leg2=leg2,
        ),
        decimals=decimals,
    )
    if error:
        return JSONResponse({"error": error}, status_code=400)
    return result


@app.post("/circumference")
def circle_circumference(
    radius: str | None = Form(None),
    decimals: int = Form(2),
):
    result, error = calculate_circumference(radius, decimals=decimals)
    if error:
        return JSONResponse({"error": error}, status_code=400)
    return result
