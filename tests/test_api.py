def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_evaluate_release(client):
    payload = {
        "risk_tier": "TL A",
        "loyalty_level": "Bronce",
        "base_points": 1000,
        "used_points": 200,
        "order_points": 1000,
    }
    response = client.post("/api/evaluation/", json=payload)
    assert response.status_code == 200

    data = response.json()
    assert data["tolerance_percentage"] == 30
    assert data["points_with_tolerance"] == 1300
    assert data["available_points"] == 1100
    assert data["surplus"] == 100
    assert data["can_release"] is True
    assert data["deficit"] == 0
    assert data["status"] == "LIBERAR PEDIDO"
    assert "Puntos con tolerancia: 1,300" in data["message"]
    assert len(data["rows"]) == 9


def test_evaluate_hold(client):
    payload = {
        "risk_tier": "R(Alto)",
        "loyalty_level": "Diamante",
        "base_points": 500,
        "used_points": 0,
        "order_points": 800,
    }
    data = client.post("/api/evaluation/", json=payload).json()
    assert data["can_release"] is False
    assert data["deficit"] == 100
    assert data["surplus"] == -100
    assert data["status"] == "NO SE LIBERA PEDIDO"
    assert "excede el crédito otorgado en 100 pts." in data["message"]


def test_evaluate_clamps_bad_points(client):
    payload = {
        "risk_tier": "TL C",
        "loyalty_level": "Oro",
        "base_points": -50,
        "used_points": "abc",
        "order_points": None,
    }
    response = client.post("/api/evaluation/", json=payload)
    assert response.status_code == 200

    data = response.json()
    assert data["available_points"] == 0
    assert data["can_release"] is True


def test_evaluate_defaults(client):
    data = client.post("/api/evaluation/", json={}).json()
    assert data["risk_tier"] == "TL A"
    assert data["loyalty_level"] == "Bronce"
    assert data["can_release"] is True


def test_evaluate_rejects_unknown_tier(client):
    response = client.post("/api/evaluation/", json={"risk_tier": "TL Z", "loyalty_level": "Oro"})
    assert response.status_code == 422


def test_evaluate_rejects_extra_fields(client):
    response = client.post("/api/evaluation/", json={"dark_mode": True})
    assert response.status_code == 422


def test_matrix(client):
    data = client.get("/api/evaluation/matrix").json()
    assert data["risk_tiers"][0] == "TL A"
    assert data["loyalty_levels"][-1] == "Diamante"
    assert data["matrix"]["TL A"]["Diamante"] == 60
    assert data["matrix"]["R(Medio)"]["Oro"] == 35


def test_options(client):
    data = client.get("/api/evaluation/options").json()
    assert data["default_risk_tier"] == "TL A"
    assert data["default_loyalty_level"] == "Bronce"
    assert len(data["risk_tiers"]) == 7
    assert len(data["loyalty_levels"]) == 5


def test_evaluate_response_fields(client):
    data = client.post("/api/evaluation/", json={"base_points": 100}).json()
    assert set(data) == {
        "risk_tier",
        "loyalty_level",
        "tolerance_percentage",
        "points_with_tolerance",
        "available_points",
        "surplus",
        "can_release",
        "deficit",
        "status",
        "message",
        "rows",
    }
    assert [r["tone"] for r in data["rows"]][-3:] == ["ok", "info", "ok"]
