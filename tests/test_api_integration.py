import pytest
from fastapi.testclient import TestClient
from app import app

client = TestClient(app)

SCENE = {
    "viewport_width": 1000,
    "container": {"left": 0, "top": 0, "width": 30, "height": 30},
    "elements": [{"id": "only", "width": 14, "height": 14}],
}


def test_distribution_endpoint():
    response = client.post(
        "/distribution",
        json={"width": 30, "height": 30, "point_radius": 10, "target_count": 1},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert len(data["points"]) == 1
    assert "logs" in data
    assert "attempts" in data


def test_distribution_with_zone_covering_domain():
    response = client.post(
        "/distribution",
        json={
            "width": 100,
            "height": 100,
            "point_radius": 10,
            "target_count": 2,
            "exclusion_zones": [{"left": 0, "right": 100, "top": 0, "bottom": 100}],
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["points"] == []
    assert data["failure_reason"] == "COUNT_MISMATCH"


@pytest.mark.parametrize(
    "payload",
    [
        {"height": 30, "point_radius": 10, "target_count": 1},
        {"width": 30, "height": 30, "point_radius": 10, "target_count": -1},
        {"width": 30, "height": 30, "point_radius": 0, "target_count": 1},
    ],
)
def test_distribution_bad_request(payload):
    response = client.post("/distribution", json=payload)
    assert response.status_code == 400
    assert "error" in response.json()


def test_layout_endpoint():
    response = client.post("/layout", json=SCENE)
    assert response.status_code == 200
    data = response.json()
    assert data["scattered"] is True
    assert data["placements"][0]["element_id"] == "only"
    assert data["container_height"] == 30


def test_layout_missing_container():
    response = client.post("/layout", json={"elements": []})
    assert response.status_code == 400
    assert "error" in response.json()


def test_resize_to_zero_width_reverts():
    client.post("/layout", json=SCENE)
    response = client.post("/layout/resize", json={"viewport_width": 0})
    assert response.status_code == 200
    data = response.json()
    assert data["scattered"] is False
    assert data["failure_reason"] == "VIEWPORT_TOO_NARROW"


def test_stream_answers_only_latest_scene():
    with client.websocket_connect("/layout/stream") as ws:
        ws.send_json(dict(SCENE, request_id="first"))
        ws.send_json(dict(SCENE, request_id="second"))
        data = ws.receive_json()

    assert data["request_id"] == "second"
    assert data["scattered"] is True


def test_stream_rejects_invalid_json():
    with client.websocket_connect("/layout/stream") as ws:
        ws.send_text("not json")
        data = ws.receive_json()

    assert "error" in data


@pytest.mark.parametrize(
    "payload",
    [
        {"width": 30, "height": 30, "point_radius": 10, "target_count": 1.9},
        {"width": 30, "height": 30, "point_radius": 10, "target_count": "1"},
        {"width": 30, "height": 30, "point_radius": 10, "target_count": 1, "normalize": "false"},
    ],
)
def test_distribution_rejects_malformed_values(payload):
    response = client.post("/distribution", json=payload)
    assert response.status_code == 400
    assert "error" in response.json()


def test_distribution_accepts_integral_float_count():
    response = client.post(
        "/distribution",
        json={"width": 30, "height": 30, "point_radius": 10, "target_count": 1.0, "normalize": False},
    )
    assert response.status_code == 200
    assert len(response.json()["points"]) == 1


@pytest.mark.parametrize("literal", ["Infinity", "NaN"])
def test_distribution_rejects_non_finite_width(literal):
    body = '{"width": %s, "height": 100, "point_radius": 10, "target_count": 3}' % literal
    response = client.post(
        "/distribution",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "error" in response.json()


def test_layout_rejects_non_finite_container():
    body = '{"container": {"left": 0, "top": 0, "width": Infinity, "height": 30}, "elements": []}'
    response = client.post(
        "/layout",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
