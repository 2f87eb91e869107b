from __future__ import annotations

from decimal import Decimal, InvalidOperation

from afv.core.config import settings

ZERO = Decimal("0")


def _to_decimal(raw) -> Decimal:
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, bool) or raw is None:
        return ZERO
    s = str(raw).strip().replace(" ", "")
    if not s:
        return ZERO
    try:
        return Decimal(s)
    except (InvalidOperation, ValueError):
        return ZERO


def sanitize_points(raw, max_points: float | None = None) -> Decimal:
    """
    Limpieza de entrada (responsabilidad del formulario / API, no del cálculo):
      - no numérico, vacío, NaN, infinito -> 0
      - negativo -> 0
      - mayor que MAX_POINTS -> MAX_POINTS
    """
    value = _to_decimal(raw)
    if not value.is_finite() or value < 0:
        return ZERO

    cap = Decimal(str(max_points if max_points is not None else settings.MAX_POINTS))
    if value > cap:
        return cap
    # -0 -> 0
    return value + ZERO
