from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from afv.core.tolerance_rules import resolve_tolerance

D = Decimal


def _d(x) -> Decimal:
    return x if isinstance(x, Decimal) else Decimal(str(x))


@dataclass(frozen=True)
class EvaluationInput:
    risk_tier: str
    loyalty_level: str
    base_points: Decimal
    used_points: Decimal
    order_points: Decimal

    def __post_init__(self):
        # Acepta int/float/str; internamente siempre Decimal
        for name in ("base_points", "used_points", "order_points"):
            object.__setattr__(self, name, _d(getattr(self, name)))


@dataclass(frozen=True)
class EvaluationResult:
    tolerance_percentage: int
    points_with_tolerance: Decimal
    available_points: Decimal
    surplus: Decimal
    can_release: bool
    deficit: Decimal


def _exact_prec(*values: Decimal) -> int:
    # Precisión desde el dígito mayor hasta el último decimal, más margen para pct/100
    finite = [v for v in values if v.is_finite()]
    if not finite:
        return 28
    top = max(v.adjusted() for v in finite)
    bottom = min(v.as_tuple().exponent for v in finite)
    return max(28, top - bottom + 8)


def evaluate_allowance(inp: EvaluationInput) -> EvaluationResult:
    """
    Puntos con tolerancia, disponibles, excedente y decisión de liberación.
    Sin redondeo: los valores se redondean solo al formatear.
    Disponibles y excedente pueden ser negativos.
    """
    pct = resolve_tolerance(inp.risk_tier, inp.loyalty_level)

    with localcontext() as ctx:
        ctx.prec = _exact_prec(inp.base_points, inp.used_points, inp.order_points)
        points_with_tolerance = inp.base_points + inp.base_points * D(pct) / D("100")
        available = points_with_tolerance - inp.used_points
        surplus = available - inp.order_points
        can_release = available >= inp.order_points
        deficit = inp.order_points - available if inp.order_points > available else D("0")

    return EvaluationResult(
        tolerance_percentage=pct,
        points_with_tolerance=points_with_tolerance,
        available_points=available,
        surplus=surplus,
        can_release=can_release,
        deficit=deficit,
    )
