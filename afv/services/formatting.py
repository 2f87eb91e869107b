from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext

from afv.core.config import settings


def _d(x) -> Decimal:
    return x if isinstance(x, Decimal) else Decimal(str(x))


def _quantize(d: Decimal, digits: int) -> Decimal:
    # Precisión local suficiente para cualquier magnitud (el contexto por defecto es 28)
    with localcontext() as ctx:
        ctx.prec = max(28, d.adjusted() + digits + 2)
        return d.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP) + Decimal("0")  # -0 -> 0


def round_points(x) -> Decimal:
    """Entero más cercano, .5 se aleja de cero (1.5 -> 2, -1.5 -> -2)."""
    return _quantize(_d(x), 0)


def _group(whole: str, sep: str) -> str:
    parts = []
    while whole:
        parts.append(whole[-3:])
        whole = whole[:-3]
    return sep.join(reversed(parts)) or "0"


def format_points(
    x,
    *,
    max_fraction_digits: int | None = None,
    thousands_sep: str | None = None,
    decimal_sep: str | None = None,
) -> str:
    """
    1234567 -> "1,234,567"
    1234.5  -> "1,234.5"
    Decimales recortados a max_fraction_digits, sin ceros a la derecha.
    """
    digits = settings.MAX_FRACTION_DIGITS if max_fraction_digits is None else max_fraction_digits
    tsep = settings.THOUSANDS_SEPARATOR if thousands_sep is None else thousands_sep
    dsep = settings.DECIMAL_SEPARATOR if decimal_sep is None else decimal_sep

    d = _quantize(_d(x), digits)
    sign = "-" if d < 0 else ""
    s = f"{d.copy_abs():.{digits}f}"
    whole, _, frac = s.partition(".")
    frac = frac.rstrip("0")

    out = sign + _group(whole, tsep)
    if frac:
        out += dsep + frac
    return out


def format_rounded(x, **kwargs) -> str:
    return format_points(round_points(x), **kwargs)
