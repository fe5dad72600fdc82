"""Integration tests for the REST API."""

from __future__ import annotations

import json
from typing import Any

import pytest
from fastapi.testclient import TestClient

from railquote.web.app import create_app
from railquote.web.schemas import ErrorResponseSchema


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def _body(**overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"sections": [{"length_feet": 10}]}
    body.update(overrides)
    return body


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestQuoteEndpoints:
    """Tests for /api/v1/quote."""

    def test_victorian_quote(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json=_body())
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["materials"]["picket_count"] == 26
        assert data["price"]["total"] == pytest.approx(1821.25)
        assert data["stanchion_positions_feet"] == [0.0, 5.0, 10.0]
        assert data["diagram_svg"].startswith("<svg")

    def test_cable_quote_without_diagram(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote",
            json=_body(
                style="rectangle",
                infill="cable",
                sections=[{"length_feet": 8}, {"length_feet": 8}],
                include_diagram=False,
            ),
        )
        assert response.status_code == 200
        data = response.json()
        assert data["materials"]["stanchion_count"] == 5
        assert data["price"]["total"] == pytest.approx(3186.4)
        assert data["diagram_svg"] is None

    def test_invalid_combination_is_422(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json=_body(infill="cable"))
        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "generation"
        assert "cable" in data["details"][0]["message"]

    def test_error_body_documented_in_openapi(self, client: TestClient) -> None:
        openapi = client.get("/openapi.json").json()
        error_ref = "#/components/schemas/ErrorResponseSchema"
        quote_422 = openapi["paths"]["/api/v1/quote"]["post"]["responses"]["422"]
        assert quote_422["content"]["application/json"]["schema"]["$ref"] == error_ref
        export_400 = openapi["paths"]["/api/v1/quote/export/{format_name}"]["post"][
            "responses"
        ]["400"]
        assert export_400["content"]["application/json"]["schema"]["$ref"] == error_ref

    def test_error_body_matches_error_schema(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json=_body(infill="cable"))
        body = ErrorResponseSchema.model_validate(response.json())
        assert body.error_type == "generation"

    def test_negative_length_rejected_by_schema(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json=_body(sections=[{"length_feet": -1}]))
        assert response.status_code == 422

    def test_unknown_style_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json=_body(style="gothic"))
        assert response.status_code == 422

    def test_from_config(self, client: TestClient) -> None:
        config = {
            "schema_version": "1.0",
            "railing": {"style": "rectangle", "infill": "slats"},
            "sections": [{"length_feet": 12}],
        }
        response = client.post("/api/v1/quote/from-config", json={"config": config})
        assert response.status_code == 200
        assert response.json()["materials"]["slat_feet"] == pytest.approx(12.0)

    def test_from_config_schema_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote/from-config", json={"config": {"sections": []}}
        )
        assert response.status_code == 422
        assert response.json()["detail"]["error_type"] == "validation"

    def test_diagram_endpoint(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote/diagram",
            json=_body(railing_end="foldDown", sections=[{"length_feet": 6, "type": "angled"}]),
        )
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert 'class="railing_end"' in response.text


class TestValidateEndpoint:
    """Tests for /api/v1/validate."""

    def test_valid_config(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"config": {"schema_version": "1.0", "sections": [{"length_feet": 10}]}},
        )
        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_combination_error(self, client: TestClient) -> None:
        config = {
            "schema_version": "1.0",
            "railing": {"style": "victorian", "infill": "slats"},
            "sections": [{"length_feet": 10}],
        }
        data = client.post("/api/v1/validate", json={"config": config}).json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "railing.infill"

    def test_schema_error_reported_as_result(self, client: TestClient) -> None:
        data = client.post(
            "/api/v1/validate",
            json={"config": {"schema_version": "1.0", "sections": [{"length_feet": "x"}]}},
        ).json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "sections[0].length_feet"


class TestOptionsEndpoint:
    def test_lists_style_options(self, client: TestClient) -> None:
        data = client.get("/api/v1/options").json()
        styles = {s["style"]: s for s in data["styles"]}
        assert styles["victorian"]["picket_styles"] == []
        assert "cable" in styles["rectangle"]["infills"]
        assert styles["rectangle"]["top_rail_rate"] == 2.8
        assert data["max_stanchion_spacing_cable_feet"] == 4.0
        assert data["pricing"]["materials_modifier"] == 1.5
        assert data["pricing"]["labor"]["railing_end"]["fold_back"] == 90.0


class TestExportEndpoints:
    """Tests for /api/v1/quote/export."""

    def test_list_formats(self, client: TestClient) -> None:
        response = client.get("/api/v1/quote/export/formats")
        assert response.json() == {"formats": ["dxf", "json", "svg", "text"]}

    def test_export_json(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote/export/json?embed_diagram=true",
            json=_body(customer={"name": "Jane", "contact": "555-0100", "zipcode": "02139"}),
        )
        assert response.status_code == 200
        assert response.headers["content-disposition"] == "attachment; filename=railing.json"
        data = json.loads(response.text)
        assert data["name"] == "Jane"
        assert data["diagramImage"].startswith("data:image/svg+xml;base64,")

    @pytest.mark.parametrize(
        ("format_name", "media_type"),
        [("svg", "image/svg+xml"), ("dxf", "application/dxf"), ("text", "text/plain")],
    )
    def test_export_media_types(
        self, client: TestClient, format_name: str, media_type: str
    ) -> None:
        response = client.post(f"/api/v1/quote/export/{format_name}", json=_body())
        assert response.status_code == 200
        assert response.headers["content-type"].startswith(media_type)

    def test_unsupported_format(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote/export/pdf", json=_body())
        assert response.status_code == 400
        data = response.json()
        assert data["error_type"] == "unsupported_format"
        assert data["details"]["available"] == ["dxf", "json", "svg", "text"]

    def test_export_invalid_quote(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote/export/svg", json=_body(infill="slats"))
        assert response.status_code == 422
