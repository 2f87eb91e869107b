from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from afv.services.allowance import EvaluationInput, EvaluationResult, evaluate_allowance
from afv.services.message import build_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReleaseReport:
    tolerance_percentage: int
    points_with_tolerance: Decimal
    available_points: Decimal
    surplus: Decimal
    can_release: bool
    deficit: Decimal
    message: str

    @classmethod
    def from_result(cls, result: EvaluationResult, message: str) -> "ReleaseReport":
        return cls(
            tolerance_percentage=result.tolerance_percentage,
            points_with_tolerance=result.points_with_tolerance,
            available_points=result.available_points,
            surplus=result.surplus,
            can_release=result.can_release,
            deficit=result.deficit,
            message=message,
        )


def evaluate_input(inp: EvaluationInput) -> tuple[EvaluationResult, str]:
    result = evaluate_allowance(inp)
    message = build_message(inp, result)
    logger.debug(
        f"evaluation risk_tier={inp.risk_tier} level={inp.loyalty_level} "
        f"pct={result.tolerance_percentage} available={result.available_points} "
        f"order={inp.order_points} can_release={result.can_release}"
    )
    return result, message


def evaluate(risk_tier: str, loyalty_level: str, base_points, used_points, order_points) -> ReleaseReport:
    """
    Punto de entrada para la capa de presentación.
    Los puntos deben llegar ya limpios (>= 0), ver afv.core.points.sanitize_points.
    """
    inp = EvaluationInput(
        risk_tier=risk_tier,
        loyalty_level=loyalty_level,
        base_points=base_points,
        used_points=used_points,
        order_points=order_points,
    )
    result, message = evaluate_input(inp)
    return ReleaseReport.from_result(result, message)
