import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

RISK_TIERS = ("TL A", "TL B", "TL C", "TL D", "R(Bajo)", "R(Medio)", "R(Alto)")
LOYALTY_LEVELS = ("Bronce", "Plata", "Oro", "Zafiro", "Diamante")


def _row(bronce: int, plata: int, oro: int, zafiro: int, diamante: int) -> Mapping[str, int]:
    return MappingProxyType(dict(zip(LOYALTY_LEVELS, (bronce, plata, oro, zafiro, diamante))))


@dataclass(frozen=True)
class ToleranceRules:
    # % extra sobre los puntos base, por (riesgo, nivel)
    matrix: Mapping[str, Mapping[str, int]] = field(
        default_factory=lambda: MappingProxyType(
            {
                "TL A": _row(30, 30, 40, 45, 60),
                "TL B": _row(25, 25, 35, 40, 50),
                "TL C": _row(20, 20, 30, 30, 40),
                "TL D": _row(20, 20, 30, 30, 40),
                "R(Bajo)": _row(30, 30, 40, 45, 60),
                "R(Medio)": _row(25, 25, 35, 40, 50),
                "R(Alto)": _row(20, 20, 30, 30, 40),
            }
        )
    )
    # Combinación inexistente -> 0%, no es error
    fallback_percent: int = 0


RULES = ToleranceRules()


def resolve_tolerance(risk_tier: str, loyalty_level: str, rules: ToleranceRules = RULES) -> int:
    row = rules.matrix.get(risk_tier)
    if row is None or loyalty_level not in row:
        logger.warning(
            f"No tolerance for risk_tier={risk_tier!r} loyalty_level={loyalty_level!r}, "
            f"using {rules.fallback_percent}%"
        )
        return rules.fallback_percent
    return int(row[loyalty_level])


def tolerance_matrix(rules: ToleranceRules = RULES) -> dict[str, dict[str, int]]:
    """Copia plana de la matriz (para mostrar / serializar)."""
    return {tier: dict(row) for tier, row in rules.matrix.items()}
