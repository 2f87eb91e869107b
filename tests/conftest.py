from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from afv.main import app
from afv.services.allowance import EvaluationInput


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def release_input():
    # TL A / Bronce (30%): 1300 con tolerancia, 1100 disponibles, pedido 1000
    return EvaluationInput(
        risk_tier="TL A",
        loyalty_level="Bronce",
        base_points=Decimal("1000"),
        used_points=Decimal("200"),
        order_points=Decimal("1000"),
    )


@pytest.fixture
def hold_input():
    # R(Alto) / Diamante (40%): 700 disponibles, pedido 800
    return EvaluationInput(
        risk_tier="R(Alto)",
        loyalty_level="Diamante",
        base_points=Decimal("500"),
        used_points=Decimal("0"),
        order_points=Decimal("800"),
    )
