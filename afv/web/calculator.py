# afv/web/calculator.py
from pathlib import Path
from urllib.parse import urlencode

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.responses import RedirectResponse

from afv.core.config import settings
from afv.core.points import sanitize_points
from afv.core.tolerance_rules import LOYALTY_LEVELS, RISK_TIERS
from afv.services.allowance import EvaluationInput
from afv.services.message import build_summary_rows, release_status_label
from afv.services.release import evaluate_input

BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

router = APIRouter()


def render(request: Request, tpl: str, **ctx):
    return templates.TemplateResponse(request, tpl, {"app_title": settings.APP_TITLE, **ctx})


def _pick(value: str | None, allowed: tuple[str, ...], default: str) -> str:
    # Valor fuera del select -> el del formulario limpio
    return value if value in allowed else default


@router.get("/calculadora", response_class=HTMLResponse)
@router.get("/calculadora/", response_class=HTMLResponse, include_in_schema=False)
def calculator_page(
    request: Request,
    risk_tier: str | None = None,
    loyalty_level: str | None = None,
    base_points: str | None = None,
    used_points: str | None = None,
    order_points: str | None = None,
):
    inp = EvaluationInput(
        risk_tier=_pick(risk_tier, RISK_TIERS, settings.DEFAULT_RISK_TIER),
        loyalty_level=_pick(loyalty_level, LOYALTY_LEVELS, settings.DEFAULT_LOYALTY_LEVEL),
        base_points=sanitize_points(base_points),
        used_points=sanitize_points(used_points),
        order_points=sanitize_points(order_points),
    )
    result, message = evaluate_input(inp)

    return render(
        request,
        "calculator.html",
        risk_tiers=RISK_TIERS,
        loyalty_levels=LOYALTY_LEVELS,
        form=inp,
        result=result,
        rows=build_summary_rows(inp, result),
        status=release_status_label(result),
        message=message,
    )


@router.get("/calculadora/reset", include_in_schema=False)
def calculator_reset():
    query = urlencode(
        {
            "risk_tier": settings.DEFAULT_RISK_TIER,
            "loyalty_level": settings.DEFAULT_LOYALTY_LEVEL,
            "base_points": 0,
            "used_points": 0,
            "order_points": 0,
        }
    )
    return RedirectResponse(url=f"/calculadora?{query}", status_code=303)
