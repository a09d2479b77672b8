"""HTTP tests for /companies, /products, /health and cross-cutting behavior."""

from uuid import uuid4

from fastapi.testclient import TestClient


class TestCompanies:

    def test_list(self, client, refs):
        names = [c["name"] for c in client.get("/companies").json()]
        assert names == ["Blue Harbor Media", "Northwind Foods"]

    def test_search(self, client, refs):
        resp = client.get("/companies/search", params={"keyword": "North"})
        assert resp.status_code == 200
        assert [c["id"] for c in resp.json()] == [refs["other_company_id"]]

    def test_blank_search(self, client, refs):
        assert client.get("/companies/search", params={"keyword": "  "}).json() == []
        assert client.get("/companies/search").json() == []

    def test_get(self, client, refs):
        body = client.get(f"/companies/{refs['company_id']}").json()
        assert body["company_number"] == "123-45-67890"
        assert body["type"] == "AGENCY"

    def test_not_found(self, client):
        resp = client.get(f"/companies/{uuid4()}")
        assert resp.status_code == 404
        assert resp.json()["code"] == "COMPANY_NOT_FOUND"


class TestProducts:

    def test_list_and_get(self, client, refs):
        listed = client.get("/products").json()
        assert [p["name"] for p in listed] == ["Homepage Banner"]
        body = client.get(f"/products/{refs['product_id']}").json()
        assert body["description"] == "Top-of-page display banner"

    def test_not_found(self, client):
        resp = client.get(f"/products/{uuid4()}")
        assert resp.status_code == 404
        assert resp.json()["code"] == "PRODUCT_NOT_FOUND"


class TestHealth:

    def test_health(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["service"] == "contract_api"


class TestRequestId:

    def test_generated(self, client):
        assert client.get("/health").headers["X-Request-ID"]

    def test_echoed(self, client):
        resp = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert resp.headers["X-Request-ID"] == "abc-123"

    def test_bound_to_logs(self, client, refs, captured_logs):
        client.get(f"/companies/{uuid4()}", headers={"X-Request-ID": "req-42"})
        rejected = [r for r in captured_logs() if r["message"] == "request_rejected"]
        assert rejected[0]["request_id"] == "req-42"
        assert rejected[0]["error_code"] == "COMPANY_NOT_FOUND"


class TestInternalError:

    def test_unexpected_exception_is_masked(self, app, captured_logs):
        def boom():
            raise RuntimeError("database password is hunter2")

        app.add_api_route("/boom", boom)

        with TestClient(app, raise_server_exceptions=False) as client:
            resp = client.get("/boom")

        assert resp.status_code == 500
        body = resp.json()
        assert body["code"] == "INTERNAL_ERROR"
        assert body["message"] == "An internal server error occurred"
        assert "hunter2" not in resp.text
        assert any(
            r["message"] == "unhandled_exception" and r["exc_type"] == "RuntimeError"
            for r in captured_logs()
        )


class TestRoutingErrors:

    def test_unknown_route(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        body = resp.json()
        assert body["code"] == "NOT_FOUND"
        assert body["status"] == 404
        assert "timestamp" in body

    def test_wrong_method(self, client):
        resp = client.delete("/contracts")
        assert resp.status_code == 405
        body = resp.json()
        assert body["code"] == "METHOD_NOT_ALLOWED"
        assert body["status"] == 405
        assert "GET" in resp.headers["Allow"]

    def test_routing_rejection_logged(self, client, captured_logs):
        client.get("/nope", headers={"X-Request-ID": "req-404"})
        rejected = [r for r in captured_logs() if r["message"] == "request_rejected"]
        assert rejected[0]["error_code"] == "NOT_FOUND"
        assert rejected[0]["request_id"] == "req-404"
