def test_list_business_types(client):
    response = client.get("/v1/business/types")
    assert response.status_code == 200
    types = response.json()
    assert len(types) == 8
    medical = next(option for option in types if option["value"] == "medical")
    assert medical["label"] == "Medical"
    assert medical["cleaning_frequency"] == "daily"
    assert medical["contract_type"] == "12-month"


def test_business_options(client):
    body = client.get("/v1/business/options").json()
    assert len(body["floor_types"]) == 6
    assert [priority["value"] for priority in body["priorities"]] == ["quality", "price", "reliability"]
    assert body["contracts"][1]["badge"] == "Save 10%"


def test_business_type_defaults(client):
    response = client.get("/v1/business/types/warehouse/defaults")
    assert response.status_code == 200
    body = response.json()
    assert body["cleaning_frequency"] == "monthly"
    assert body["floor_type"] == "concrete"


def test_unknown_business_type_defaults_fall_back(client):
    unknown = client.get("/v1/business/types/spaceship/defaults").json()
    other = client.get("/v1/business/types/other/defaults").json()
    assert unknown == other


def test_apply_defaults_endpoint(client):
    response = client.post(
        "/v1/business/defaults",
        json={"business_type": "gym", "current": {"cleaning_count": 5, "square_footage": 300}},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["business_type"] == "gym"
    assert body["cleaning_count"] == 5
    assert body["square_footage"] == 300
    assert body["cleaning_frequency"] == "daily"
    assert body["floor_type"] == "concrete"


def test_count_limits_endpoint(client):
    response = client.get("/v1/business/limits", params={"frequency": "weekly"})
    assert response.status_code == 200
    assert response.json() == {
        "visitor_count": {"min": 1, "max": 500, "step": 10},
        "cleaning_count": {"min": 1, "max": 14, "step": 1},
    }


def test_count_limits_rejects_unknown_frequency(client):
    response = client.get("/v1/business/limits", params={"frequency": "hourly"})
    assert response.status_code == 422


def test_validate_business_with_warning(client):
    response = client.post(
        "/v1/business/validate",
        json={
            "business_type": "other",
            "square_footage": 300,
            "cleaning_frequency": "monthly",
            "cleaning_count": 1,
            "floor_type": "carpet",
            "visitor_count": 100,
            "visitor_frequency": "daily",
            "priority": "price",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["is_valid"] is True
    assert body["errors"] == []
    assert body["warnings"][0].startswith("High daily visitor count (100)")


def test_validate_business_partial_form(client):
    response = client.post("/v1/business/validate", json={"business_type": "retail"})
    assert response.status_code == 200
    body = response.json()
    assert body["is_valid"] is False
    assert "Please select your business type" not in body["errors"]
    assert len(body["errors"]) == 7


def test_recommendation_for_medical(client):
    response = client.get(
        "/v1/business/recommendation",
        params={"visitor_count": 10, "visitor_frequency": "monthly", "business_type": "medical"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["recommended"] == "daily"
    assert body["confidence"] == "high"


def test_recommendation_defaults_to_traffic_rules(client):
    response = client.get("/v1/business/recommendation", params={"visitor_count": 210, "visitor_frequency": "weekly"})
    assert response.status_code == 200
    body = response.json()
    assert body["recommended"] == "weekly"
    assert body["reason"] == "Moderate daily traffic (30 visitors) is well-suited for weekly cleaning"


def test_recommendation_requires_visitors(client):
    response = client.get("/v1/business/recommendation", params={"visitor_count": 0, "visitor_frequency": "daily"})
    assert response.status_code == 422
