"""
HTTP tests for /api/calculate/* and /health.
"""

import pytest


def _sample_surface(**overrides):
    data = {
        "id": "w1",
        "name": "Lounge wall",
        "surface_type": "wall",
        "dimensions": {"height": 2.5, "length": 4.0},
        "paint_type_id": 5,
        "surface_type_id": 1,
        "paint_quality_id": 1,
        "surface_condition_id": 3,
        "coats": 1,
    }
    data.update(overrides)
    return data


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "renopilot"}


def test_area_endpoint(client):
    response = client.post("/api/calculate/area", json={
        "surface_type": "wall",
        "dimensions": {"height": 3.2, "length": 4.0, "door_count": 1, "window_count": 2},
    })
    assert response.status_code == 200
    area = response.json()["area"]
    assert area["net_area"] == pytest.approx(7.802)
    assert area["breakdown"]["doors"] == pytest.approx(1.8)


def test_area_endpoint_invalid_dimensions(client):
    response = client.post("/api/calculate/area", json={
        "surface_type": "ceiling", "dimensions": {},
    })
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["error"] == "Invalid dimensions"
    assert detail["details"] == ["Ceiling requires either area or width and length"]


def test_validate_dimensions_endpoint(client):
    response = client.post("/api/calculate/validate-dimensions", json={
        "surface_type": "linear", "dimensions": {"length": 0},
    })
    assert response.status_code == 200
    assert response.json()["validation"] == {
        "is_valid": False,
        "errors": ["Linear surface length must be positive"],
    }


def test_surface_cost_endpoint(seeded_client):
    response = seeded_client.post("/api/calculate/surface-cost", json={
        "area": 10.0, "coats": 1, "paint_type_id": 5, "surface_type_id": 1,
        "paint_quality_id": 1, "surface_condition_id": 3, "surface_category": "wall",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["cost_breakdown"]["total_cost"] == pytest.approx(72.612)
    assert body["inputs"]["labor_rate"]["total_rate"] == pytest.approx(70.0)


def test_surface_cost_unknown_combination(seeded_client):
    response = seeded_client.post("/api/calculate/surface-cost", json={
        "area": 10.0, "coats": 1, "paint_type_id": 10, "surface_type_id": 1,
        "paint_quality_id": 1, "surface_condition_id": 3, "surface_category": "wall",
    })
    assert response.status_code == 404


def test_surface_cost_bad_category(seeded_client):
    response = seeded_client.post("/api/calculate/surface-cost", json={
        "area": 10.0, "coats": 1, "paint_type_id": 5, "surface_type_id": 1,
        "paint_quality_id": 1, "surface_condition_id": 3, "surface_category": "floor",
    })
    assert response.status_code == 400
    assert "floor" in response.json()["detail"]


def test_project_cost_empty_is_bad_request(seeded_client):
    response = seeded_client.post("/api/calculate/project-cost", json={"surfaces": []})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing or invalid surfaces array"


def test_project_cost_endpoint(seeded_client):
    response = seeded_client.post("/api/calculate/project-cost", json={
        "surfaces": [
            {"id": 1, "name": "Wall", "area": 10.0, "coats": 1, "paint_type_id": 5,
             "surface_type_id": 1, "paint_quality_id": 1, "surface_condition_id": 3,
             "surface_category": "wall"},
        ],
        "region": "Sydney",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["labor_rate"]["region"] == "Sydney"
    assert len(body["project_costs"]["surfaces"]) == 1


def test_surface_endpoint(seeded_client):
    response = seeded_client.post("/api/calculate/surface", json=_sample_surface())
    assert response.status_code == 200
    assert response.json()["formatted"]["total_cost"] == "$72.61"


def test_surface_endpoint_invalid_dimensions(seeded_client):
    response = seeded_client.post(
        "/api/calculate/surface", json=_sample_surface(dimensions={"height": 2.5}),
    )
    assert response.status_code == 400
    assert "Wall length must be a positive number" in response.json()["detail"]


def test_project_endpoint(seeded_client):
    response = seeded_client.post("/api/calculate/project", json={
        "surfaces": [
            _sample_surface(),
            _sample_surface(id="d1", name="Front door", surface_type="door",
                            dimensions={"height": 2.0, "width": 0.9}, paint_type_id=8, coats=2),
        ],
    })
    assert response.status_code == 200
    body = response.json()
    totals = body["summary"]["totals"]
    assert totals["total_area"] == pytest.approx(11.8)
    assert body["surfaces"][1]["result"]["area"]["net_area"] == pytest.approx(1.8)


def test_quick_estimate_endpoint(seeded_client):
    response = seeded_client.post("/api/calculate/quick-estimate", json={
        "surface_type": "wall", "area": 20, "quality_level": "premium",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["material_cost"] == pytest.approx(20 * 3.826 * 2)
    assert body["cost_range"]["min"] < body["estimated_cost"] < body["cost_range"]["max"]


def test_quick_estimate_unknown_region(seeded_client):
    response = seeded_client.post("/api/calculate/quick-estimate", json={
        "surface_type": "wall", "area": 20, "quality_level": "standard", "region": "Perth",
    })
    assert response.status_code == 404


def test_reference_data_endpoint(seeded_client):
    response = seeded_client.get("/api/calculate/reference-data")
    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data["paint_types"]) == 10
    assert len(data["surface_conditions"]) == 5
    assert len(data["labor_rates"]) == 3


def test_form_options_endpoint(seeded_client):
    response = seeded_client.get("/api/calculate/form-options")
    assert response.status_code == 200
    assert {"value": 3, "label": "Fair"} in response.json()["surface_conditions"]


def test_paint_data_search_endpoint(seeded_client):
    response = seeded_client.get("/api/calculate/paint-data", params={
        "quality_level": "standard", "paint_type_name": "ceiling",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 4
    assert all(row["paint_type_id"] == 4 for row in body["data"])


def test_seed_endpoint(client):
    first = client.get("/api/calculate/seed").json()
    assert first["seeded"]["paint_data"] == 56
    second = client.get("/api/calculate/seed").json()
    assert second["seeded"]["paint_data"] == 0


def test_area_endpoint_nan_opening_is_bad_request(client):
    body = '{"surface_type": "wall", "dimensions": {"height": 3, "length": 4, "custom_window_area": NaN}}'
    response = client.post(
        "/api/calculate/area", content=body, headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "non-negative" in response.json()["detail"]


def test_surface_cost_uses_default_region(seeded_client, monkeypatch):
    from renopilot.config import settings

    monkeypatch.setattr(settings, "DEFAULT_REGION", "Melbourne")
    response = seeded_client.post("/api/calculate/surface-cost", json={
        "area": 10.0, "coats": 1, "paint_type_id": 5, "surface_type_id": 1,
        "paint_quality_id": 1, "surface_condition_id": 3, "surface_category": "wall",
    })
    assert response.status_code == 200
    assert response.json()["inputs"]["labor_rate"]["total_rate"] == pytest.approx(72.0)
