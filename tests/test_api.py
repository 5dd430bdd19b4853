from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from streamcompare.interfaces.catalog_store import CatalogStore
from streamcompare.main import create_app


@pytest.fixture()
def client(catalog_data) -> TestClient:
    return TestClient(create_app(CatalogStore(data=catalog_data)))


COVERAGE_FIRST = {"price": 1, "coverage": 10, "features": 1}


def test_root_lists_endpoints(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "/api/recommendations" in response.json()["endpoints"]


def test_health_reports_catalog_counts(client: TestClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["catalog"] == {"services": 3, "channels": 4, "service_channels": 7}


def test_recommendations(client: TestClient) -> None:
    response = client.post(
        "/api/recommendations",
        json={"selected_channel_ids": [1, 2, 3, 4], "weights": COVERAGE_FIRST},
    )

    assert response.status_code == 200
    body = response.json()
    assert [s["name"] for s in body["recommendations"]] == ["Alpha", "Beta", "Gamma"]
    assert [s["selected_channels_count"] for s in body["recommendations"]] == [3, 3, 1]
    assert body["recommendations"][0]["missing_channels"] == ["Fox News"]
    assert body["has_full_coverage"] is False
    assert body["selected_count"] == 4
    assert body["bundle_status"] == "found"

    first_bundle = body["bundles"][0]
    assert [m["name"] for m in first_bundle["services"]] == ["Beta", "Gamma"]
    assert first_bundle["total_price"] == 23.0
    assert first_bundle["coverage_percentage"] == 1.0
    assert first_bundle["services"][1]["unique_channel_names"] == ["ESPN"]
    assert first_bundle["why_this"].startswith("Covers 100% of your selected channels (4 of 4)")


def test_default_weights_are_applied(client: TestClient) -> None:
    response = client.post("/api/recommendations", json={"selected_channel_ids": [1]})

    assert response.status_code == 200
    assert response.json()["weights"] == {"price": 5, "coverage": 8, "features": 3}


def test_empty_selection(client: TestClient) -> None:
    response = client.post("/api/recommendations", json={"selected_channel_ids": []})

    assert response.status_code == 200
    body = response.json()
    assert body["recommendations"] == []
    assert body["bundles"] == []
    assert body["bundle_status"] == "not_attempted"


@pytest.mark.parametrize("weights", [{"price": 0}, {"coverage": 11}, {"features": -3}])
def test_out_of_range_weights_are_rejected(client: TestClient, weights) -> None:
    response = client.post(
        "/api/recommendations",
        json={"selected_channel_ids": [1, 2], "weights": weights},
    )

    assert response.status_code == 422


def test_bundles_endpoint_reports_none_found(client: TestClient) -> None:
    # Only channel 1 is shared by two services; 1 of 4 is far below 80%
    response = client.post(
        "/api/recommendations/bundles",
        json={"selected_channel_ids": [1, 5, 6, 7]},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["bundles"] == []
    assert body["status"] == "none_found"


def test_catalog_listing(client: TestClient) -> None:
    services = client.get("/api/catalog/services").json()
    channels = client.get("/api/catalog/channels", params={"category": "News"}).json()
    categories = client.get("/api/catalog/categories").json()

    assert [s["name"] for s in services["services"]] == ["Beta", "Alpha", "Gamma"]
    assert [c["name"] for c in channels["channels"]] == ["Fox News", "CNN"]
    assert categories["categories"] == ["all", "Lifestyle", "News", "Sports"]


def test_unknown_service_is_404(client: TestClient) -> None:
    assert client.get("/api/catalog/services/42").status_code == 404
    assert client.get("/api/catalog/services/1").json()["name"] == "Alpha"


def test_service_listing_includes_channel_counts(client: TestClient) -> None:
    services = client.get("/api/catalog/services").json()["services"]

    assert [(s["name"], s["channel_count"]) for s in services] == [("Beta", 3), ("Alpha", 3), ("Gamma", 1)]


def test_service_channels(client: TestClient) -> None:
    response = client.get("/api/catalog/services/1/channels")

    assert response.status_code == 200
    body = response.json()
    assert body["service_id"] == 1
    assert body["total_count"] == 3
    assert [c["name"] for c in body["channels"]] == ["ESPN", "CNN", "HGTV"]
    assert {c["tier"] for c in body["channels"]} == {"standard"}
    assert client.get("/api/catalog/services/42/channels").status_code == 404


def test_related_services(client: TestClient) -> None:
    response = client.get("/api/catalog/services/1/related")

    assert response.status_code == 200
    assert [s["name"] for s in response.json()["services"]] == ["Beta", "Gamma"]
    assert client.get("/api/catalog/services/42/related").status_code == 404


def test_recommendations_carry_no_display_tags(client: TestClient) -> None:
    body = client.post("/api/recommendations", json={"selected_channel_ids": [1]}).json()

    assert "tags" not in body["recommendations"][0]
