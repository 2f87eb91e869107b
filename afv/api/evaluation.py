from __future__ import annotations

import logging

from fastapi import APIRouter

from afv.core.config import settings
from afv.core.tolerance_rules import LOYALTY_LEVELS, RISK_TIERS, tolerance_matrix
from afv.schemas.evaluation import (
    EvaluationIn,
    EvaluationOut,
    FormOptionsOut,
    SummaryRowOut,
    ToleranceMatrixOut,
)
from afv.services.allowance import EvaluationInput
from afv.services.message import build_summary_rows, release_status_label
from afv.services.release import evaluate_input

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/evaluation", tags=["evaluation"])


@router.post("", response_model=EvaluationOut, include_in_schema=False)
@router.post("/", response_model=EvaluationOut)
def create_evaluation(payload: EvaluationIn) -> EvaluationOut:
    inp = EvaluationInput(
        risk_tier=payload.risk_tier,
        loyalty_level=payload.loyalty_level,
        base_points=payload.base_points,
        used_points=payload.used_points,
        order_points=payload.order_points,
    )
    result, message = evaluate_input(inp)
    logger.info(
        f"POST /evaluation {inp.risk_tier}/{inp.loyalty_level} can_release={result.can_release}"
    )

    return EvaluationOut(
        risk_tier=inp.risk_tier,
        loyalty_level=inp.loyalty_level,
        tolerance_percentage=result.tolerance_percentage,
        points_with_tolerance=float(result.points_with_tolerance),
        available_points=float(result.available_points),
        surplus=float(result.surplus),
        can_release=result.can_release,
        deficit=float(result.deficit),
        status=release_status_label(result),
        message=message,
        rows=[SummaryRowOut(label=r.label, value=r.value, tone=r.tone) for r in build_summary_rows(inp, result)],
    )


@router.get("/matrix", response_model=ToleranceMatrixOut)
def read_matrix() -> ToleranceMatrixOut:
    return ToleranceMatrixOut(
        risk_tiers=list(RISK_TIERS),
        loyalty_levels=list(LOYALTY_LEVELS),
        matrix=tolerance_matrix(),
    )


@router.get("/options", response_model=FormOptionsOut)
def read_options() -> FormOptionsOut:
    return FormOptionsOut(
        risk_tiers=list(RISK_TIERS),
        loyalty_levels=list(LOYALTY_LEVELS),
        default_risk_tier=settings.DEFAULT_RISK_TIER,
        default_loyalty_level=settings.DEFAULT_LOYALTY_LEVEL,
    )
