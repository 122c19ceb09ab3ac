"""HTTP tests for the login, check and logout endpoints."""

from blogdesk.core.modules.session.store import DurableSessionStore


def login(client, password="secret"):
    return client.post("/api/auth/login", json={"password": password})


def check(client, session_id):
    return client.get("/api/auth/check", headers={"X-Session-Id": session_id})


class TestLoginEndpoint:
    def test_success(self, client):
        response = login(client)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert isinstance(body["sessionId"], str)
        assert isinstance(body["expiresAt"], int)

    def test_wrong_password(self, client):
        response = login(client, "guess")

        assert response.status_code == 401
        assert response.json() == {"error": "Wrong password", "type": "invalid_credentials"}

    def test_missing_password(self, client):
        response = client.post("/api/auth/login", json={})
        assert response.status_code == 401

    def test_malformed_json(self, client):
        response = client.post(
            "/api/auth/login", content=b'{"password": ', headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON", "type": "invalid_request_body"}

    def test_body_not_an_object(self, client):
        response = client.post("/api/auth/login", json=["secret"])

        assert response.status_code == 400
        assert response.json()["type"] == "invalid_request_body"


class TestCheckEndpoint:
    def test_without_header(self, client):
        response = client.get("/api/auth/check")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False}

    def test_unknown_session(self, client):
        assert check(client, "nope").json() == {"authenticated": False}

    def test_expired_session(self, client, app, session_id):
        clock = app._core.services.session.clock
        app._core.services.session.clock = lambda: clock() + 601

        assert check(client, session_id).json() == {"authenticated": False}

    def test_storage_fault(self, client, app, session_id, failing_collection):
        app._core.services.session.store = DurableSessionStore(failing_collection)

        response = check(client, session_id)
        assert response.status_code == 200
        assert response.json() == {"authenticated": False}


class TestLogoutEndpoint:
    def test_without_header(self, client):
        response = client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True}

    def test_twice(self, client, session_id):
        headers = {"X-Session-Id": session_id}
        assert client.post("/api/auth/logout", headers=headers).json() == {"success": True}
        assert client.post("/api/auth/logout", headers=headers).json() == {"success": True}

    def test_storage_fault(self, client, app, session_id, failing_collection):
        app._core.services.session.store = DurableSessionStore(failing_collection)

        response = client.post("/api/auth/logout", headers={"X-Session-Id": session_id})
        assert response.status_code == 200


def test_login_check_logout_round_trip(client):
    response = login(client)
    assert response.status_code == 200
    session_id = response.json()["sessionId"]

    assert check(client, session_id).json() == {"authenticated": True}

    response = client.post("/api/auth/logout", headers={"X-Session-Id": session_id})
    assert response.json() == {"success": True}

    assert check(client, session_id).json() == {"authenticated": False}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
