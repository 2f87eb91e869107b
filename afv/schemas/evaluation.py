from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from afv.core.points import sanitize_points


RiskTier = Literal["TL A", "TL B", "TL C", "TL D", "R(Bajo)", "R(Medio)", "R(Alto)"]
LoyaltyLevel = Literal["Bronce", "Plata", "Oro", "Zafiro", "Diamante"]


class EvaluationIn(BaseModel):
    """
    Entrada del cálculo.
    Puntos negativos / no numéricos se convierten en 0 (igual que el formulario).
    """
    model_config = ConfigDict(extra="forbid")

    risk_tier: RiskTier = "TL A"
    loyalty_level: LoyaltyLevel = "Bronce"

    base_points: Decimal = Field(default=Decimal("0"), description="Puntos base (crédito otorgado)")
    used_points: Decimal = Field(default=Decimal("0"), description="Puntos ya usados")
    order_points: Decimal = Field(default=Decimal("0"), description="Puntos del pedido a captar")

    @field_validator("base_points", "used_points", "order_points", mode="before")
    @classmethod
    def clamp_points(cls, v):
        return sanitize_points(v)


class SummaryRowOut(BaseModel):
    label: str
    value: str
    tone: str


class EvaluationOut(BaseModel):
    risk_tier: str
    loyalty_level: str

    tolerance_percentage: int
    points_with_tolerance: float
    available_points: float
    surplus: float
    can_release: bool
    deficit: float

    status: str
    message: str
    rows: list[SummaryRowOut] = []


class ToleranceMatrixOut(BaseModel):
    risk_tiers: list[str]
    loyalty_levels: list[str]
    matrix: dict[str, dict[str, int]]


class FormOptionsOut(BaseModel):
    risk_tiers: list[str]
    loyalty_levels: list[str]
    default_risk_tier: str
    default_loyalty_level: str
