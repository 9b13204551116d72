"""
FastAPI server for the hollow-core slab selector.

Provides REST API endpoints and a simple HTML calculator page.
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from hollowcore import __version__
from hollowcore.calculator import InvalidInputError, SlabCalculator
from hollowcore.chart import build_series
from hollowcore.catalog.loader import CatalogLoadError, catalog_exists, catalog_path, fetch_catalog
from hollowcore.expressions import evaluate_expression, is_valid_number
from hollowcore.models.inputs import CalculationRequest, UnitSystem
from hollowcore.models.outputs import CalculationReport, ChartSeries

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Hollow-Core Slab Selector API",
    description="""
    Pick a precast hollow-core slab configuration (strand count, thickness)
    for a required span and superimposed load from precomputed catalogs.

    Capacities are catalog values; no structural computation is performed.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

calculator = SlabCalculator()


# HTML UI Template
HTML_UI = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Hollow-Core Slab Calculator</title>
    <style>
        * { box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            max-width: 720px;
            margin: 0 auto;
            padding: 20px;
            background: #f5f5f5;
            color: #333;
        }
        h1 { color: #2c3e50; border-bottom: 3px solid #2196F3; padding-bottom: 10px; }
        .panel { background: #fff; padding: 20px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
        label { display: block; margin-top: 12px; font-weight: 600; }
        input, select { width: 100%; padding: 8px; margin-top: 4px; border: 1px solid #ccc; border-radius: 4px; }
        button { margin-top: 16px; padding: 10px 20px; background: #2196F3; color: #fff; border: none; border-radius: 4px; cursor: pointer; }
        table { width: 100%; border-collapse: collapse; margin-top: 12px; }
        th, td { text-align: left; padding: 6px; border-bottom: 1px solid #eee; }
        #result { margin-top: 20px; }
    </style>
</head>
<body>
    <h1>Hollow-Core Slab Calculator</h1>
    <div class="panel">
        <label for="system">Unit System</label>
        <select id="system">
            <option value="Imperial">Imperial (ft / psf)</option>
            <option value="Metric">Metric (m / kPa)</option>
        </select>
        <label for="span">Span <span id="span-unit">(ft)</span></label>
        <input id="span" type="text" inputmode="decimal" placeholder="e.g. 24 or 24+4">
        <label for="load">Superimposed Load <span id="load-unit">(psf)</span></label>
        <input id="load" type="text" inputmode="decimal" placeholder="e.g. 120 or 100*1.2">
        <label for="thickness">Slab Thickness</label>
        <select id="thickness"></select>
        <button id="calc-btn">Calculate</button>
        <div id="result"></div>
    </div>
    <script>
        const el = id => document.getElementById(id);
        async function loadSystems() {
            const resp = await fetch('/unit-systems');
            return (await resp.json()).unit_systems;
        }
        let systems = {};
        function applySystem() {
            const sys = systems[el('system').value];
            el('span-unit').textContent = `(${sys.span_unit})`;
            el('load-unit').textContent = `(${sys.load_unit})`;
            el('thickness').innerHTML = sys.thicknesses
                .map(t => `<option value="${t}">${t}</option>`).join('');
            el('result').innerHTML = '';
        }
        async function calculate() {
            const sys = systems[el('system').value];
            const resp = await fetch('/calculate', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify({
                    system: el('system').value,
                    thickness: el('thickness').value,
                    span: el('span').value,
                    load: el('load').value,
                }),
            });
            const data = await resp.json();
            if (!resp.ok) {
                el('result').textContent = data.detail;
                return;
            }
            const r = data.result;
            if (r.kind === 'exact') {
                el('result').innerHTML = `<strong>${r.best.strands}</strong> strands<br>` +
                    `Capacity <strong>${r.best.capacity} ${sys.load_unit}</strong> at ${r.best.span} ${sys.span_unit}`;
            } else if (r.kind === 'infeasible') {
                el('result').textContent = `The requested load (${r.requested_load} ${sys.load_unit}) ` +
                    `exceeds maximum (${r.max_available_capacity}).`;
            } else {
                const rows = r.ranked.map(a =>
                    `<tr><td>${a.strands}</td><td>${a.span} ${sys.span_unit}</td><td>${a.capacity} ${sys.load_unit}</td></tr>`
                ).join('');
                el('result').innerHTML = 'No exact configuration found. Closest:' +
                    `<table><tr><th>Strands</th><th>Span</th><th>Capacity</th></tr>${rows}</table>`;
            }
        }
        el('system').addEventListener('change', applySystem);
        el('calc-btn').addEventListener('click', calculate);
        document.addEventListener('keydown', e => { if (e.key === 'Enter') calculate(); });
        loadSystems().then(s => { systems = s; applySystem(); });
    </script>
</body>
</html>
"""


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class EvaluateRequest(BaseModel):
    """Expression to evaluate."""
    expression: str


class EvaluateResponse(BaseModel):
    """Evaluation result; value is null when the expression is invalid."""
    expression: str
    valid: bool
    value: Optional[float] = None


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve the HTML UI."""
    return HTML_UI


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/unit-systems", tags=["Reference"])
async def list_unit_systems():
    """Get supported unit systems with their units and thickness options."""
    return {
        "unit_systems": {
            system.value: {
                "span_unit": system.span_unit,
                "load_unit": system.load_unit,
                "thicknesses": system.thickness_options,
            }
            for system in UnitSystem
        }
    }


@app.post("/evaluate", response_model=EvaluateResponse, tags=["Input"])
async def evaluate(body: EvaluateRequest):
    """Evaluate a calculator input expression (left to right, no precedence)."""
    value = evaluate_expression(body.expression)
    valid = is_valid_number(value)
    return EvaluateResponse(
        expression=body.expression,
        valid=valid,
        value=value if valid else None,
    )


@app.post("/calculate", response_model=CalculationReport, tags=["Selection"])
async def calculate(request: CalculationRequest):
    """
    Select a slab configuration.

    The result is one of: an exact match, an infeasible-load report, or up to
    three closest alternatives at the requested thickness.
    """
    try:
        return await calculator.calculate_async(request)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (FileNotFoundError, CatalogLoadError) as e:
        logger.error("Catalog load failed: %s", e)
        raise HTTPException(status_code=503, detail="Could not load data file.")
    except Exception as e:
        logger.exception("Calculation failed")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@app.get("/chart-points", response_model=ChartSeries, tags=["Selection"])
async def chart_points(
    thickness: str = Query(..., description="Thickness label"),
    system: UnitSystem = Query(default=UnitSystem.IMPERIAL, description="Unit system"),
    span: Optional[str] = Query(default=None, description="Requested span expression"),
    load: Optional[str] = Query(default=None, description="Requested load expression"),
):
    """Capacity curve points for a thickness, sorted by span."""
    try:
        catalog = await fetch_catalog(system)
    except (FileNotFoundError, CatalogLoadError) as e:
        logger.error("Catalog load failed: %s", e)
        raise HTTPException(status_code=503, detail="Could not load data file.")

    target_span = evaluate_expression(span) if span else None
    target_load = evaluate_expression(load) if load else None
    return build_series(
        catalog,
        thickness,
        system,
        target_span if is_valid_number(target_span) else None,
        target_load if is_valid_number(target_load) else None,
    )


@app.get("/catalog-status", tags=["Reference"])
async def catalog_status():
    """Check which unit-system catalogs are available."""
    status = {}
    for system in UnitSystem:
        exists = catalog_exists(system)
        count = 0
        error = None
        if exists:
            try:
                count = len(await fetch_catalog(system))
            except CatalogLoadError as e:
                error = str(e)
        status[system.value] = {
            "available": exists and error is None,
            "path": str(catalog_path(system)),
            "record_count": count,
            "error": error,
        }
    return {"catalogs": status}
