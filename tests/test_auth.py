from datetime import datetime, timezone

from leadhub.features.auth.utils.security import create_access_token, revoke_token


def parse_ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def make_token(**claims) -> str:
    claims.setdefault("sub", "user-42")
    return create_access_token(claims)


def test_login_creates_user_from_token_claims(client):
    token = make_token(
        email="ada@example.com",
        first_name="Ada",
        last_name="Lovelace",
        profile_image_url="https://example.com/ada.png",
    )

    response = client.post("/api/login", headers=bearer(token))

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "user-42"
    assert body["email"] == "ada@example.com"
    assert body["firstName"] == "Ada"
    assert body["lastName"] == "Lovelace"
    assert body["profileImageUrl"] == "https://example.com/ada.png"
    assert body["createdAt"] == body["updatedAt"]


def test_second_login_refreshes_profile(client):
    first = client.post("/api/login", headers=bearer(make_token(email="old@example.com"))).json()
    second = client.post("/api/login", headers=bearer(make_token(email="new@example.com"))).json()

    assert second["id"] == first["id"]
    assert second["email"] == "new@example.com"
    assert second["createdAt"] == first["createdAt"]
    assert parse_ts(second["updatedAt"]) > parse_ts(first["updatedAt"])


def test_second_login_keeps_fields_missing_from_token(client):
    client.post("/api/login", headers=bearer(make_token(email="ada@example.com", first_name="Ada")))
    refreshed = client.post("/api/login", headers=bearer(make_token(last_name="Lovelace"))).json()

    assert refreshed["email"] == "ada@example.com"
    assert refreshed["firstName"] == "Ada"
    assert refreshed["lastName"] == "Lovelace"


def test_get_auth_user_after_login(client):
    token = make_token(email="ada@example.com")
    login = client.post("/api/login", headers=bearer(token)).json()

    response = client.get("/api/auth/user", headers=bearer(token))

    assert response.status_code == 200
    assert response.json() == login


def test_get_auth_user_unknown_user_returns_404(client):
    response = client.get("/api/auth/user", headers=bearer(make_token(sub="ghost")))
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_logout_revokes_token(client):
    token = make_token()
    client.post("/api/login", headers=bearer(token))

    response = client.post("/api/logout", headers=bearer(token))
    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}

    after = client.get("/api/auth/user", headers=bearer(token))
    assert after.status_code == 401
    assert after.json()["message"] == "Token has been revoked. Please log in again."


def test_logout_without_token(client):
    response = client.post("/api/logout")
    assert response.status_code == 401


def test_login_with_invalid_token(client):
    response = client.post("/api/login", headers=bearer("garbage"))
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


def test_logout_drops_expired_revocations(client):
    revoked = client.app.state.revoked_tokens
    revoked["long-expired-token"] = datetime.now(timezone.utc).timestamp() - 60
    token = make_token()

    client.post("/api/logout", headers=bearer(token))

    assert "long-expired-token" not in revoked
    assert token in revoked
    assert revoked[token] > datetime.now(timezone.utc).timestamp()


def test_revoke_token_keeps_unexpired_entries():
    future = datetime.now(timezone.utc).timestamp() + 3600
    revoked = {"still-valid": future}

    revoke_token(revoked, "new-token", future)

    assert revoked == {"still-valid": future, "new-token": future}
