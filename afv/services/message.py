from __future__ import annotations

from dataclasses import dataclass

from afv.core.config import settings
from afv.services.allowance import EvaluationInput, EvaluationResult
from afv.services.formatting import format_points, format_rounded

MESSAGE_TEMPLATE = (
    "Informar que de acuerdo con las nuevas normativas que han sido planteadas por finanzas. "
    "Detallamos caso de su CB:\n"
    "\n"
    "Puntos base: {base_points}\n"
    "Porcentaje de tolerancia: {tolerance_percentage}%\n"
    "TL: {risk_tier}\n"
    "Nivel: {loyalty_level}\n"
    "Puntos con tolerancia: {points_with_tolerance}\n"
    "Puntos ya usados: {used_points}\n"
    "Puntos disponibles: {available_points}\n"
    "Puntos de pedido a captar: {order_points}\n"
    "\n"
    "{closing}"
)

REJECT_TEMPLATE = (
    "Por tal motivo, pedido no puede ser aprobado, debido que, excede el crédito otorgado en "
    "{deficit} pts. Recordar también que, {authority} no está autorizado a liberar pedidos."
)

APPROVE_TEXT = (
    "Por lo cual hemos solicitado liberar su pedido, el cual lo visualizará aprobado en unos minutos."
)

STATUS_RELEASE = "LIBERAR PEDIDO"
STATUS_HOLD = "NO SE LIBERA PEDIDO"


def risk_tier_label(risk_tier: str) -> str:
    # "TL A" -> "A"; "R(Alto)" queda igual
    if risk_tier.startswith("TL "):
        return risk_tier[len("TL "):]
    return risk_tier


def release_status_label(result: EvaluationResult) -> str:
    return STATUS_RELEASE if result.can_release else STATUS_HOLD


def build_message(inp: EvaluationInput, result: EvaluationResult, authority: str | None = None) -> str:
    """
    Texto de respuesta para el caso. El cierre depende de la decisión
    sin redondear (result.can_release), no de los valores mostrados.
    """
    if result.can_release:
        closing = APPROVE_TEXT
    else:
        closing = REJECT_TEMPLATE.format(
            deficit=format_rounded(result.deficit),
            authority=authority or settings.RELEASE_AUTHORITY,
        )

    return MESSAGE_TEMPLATE.format(
        base_points=format_points(inp.base_points),
        tolerance_percentage=result.tolerance_percentage,
        risk_tier=risk_tier_label(inp.risk_tier),
        loyalty_level=inp.loyalty_level,
        points_with_tolerance=format_rounded(result.points_with_tolerance),
        used_points=format_points(inp.used_points),
        available_points=format_rounded(result.available_points),
        order_points=format_points(inp.order_points),
        closing=closing,
    )


@dataclass(frozen=True)
class SummaryRow:
    label: str
    value: str
    tone: str = "neutral"  # neutral | ok | bad | info


def build_summary_rows(inp: EvaluationInput, result: EvaluationResult) -> list[SummaryRow]:
    """Filas de la tabla de resultados, en el orden del formulario."""
    surplus_tone = "ok" if result.surplus >= 0 else "bad"
    return [
        SummaryRow("Puntos Base", format_points(inp.base_points)),
        SummaryRow("Riesgo", inp.risk_tier),
        SummaryRow("Nivel", inp.loyalty_level),
        SummaryRow("Porcentaje de Tolerancia", f"{result.tolerance_percentage}%"),
        SummaryRow("Puntos con Tolerancia", format_rounded(result.points_with_tolerance)),
        SummaryRow("Puntos Ya Usados", format_points(inp.used_points)),
        SummaryRow("Puntos Disponibles", format_rounded(result.available_points), "ok"),
        SummaryRow("Puntos del Pedido", format_points(inp.order_points), "info"),
        SummaryRow("Excedente", format_rounded(result.surplus), surplus_tone),
    ]
