def test_register_returns_user_without_secrets(client):
    resp = client.post(
        "/api/auth/register",
        json={"email": "alice@example.com", "password": "password123", "full_name": "Alice Green"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "User registered successfully"
    user = body["user"]
    assert user["email"] == "alice@example.com"
    assert user["email_verified"] is True
    assert "password_hash" not in user
    assert "verification_token" not in user


def test_register_duplicate_email(client, register_user):
    register_user("alice@example.com")
    resp = client.post(
        "/api/auth/register",
        json={"email": "alice@example.com", "password": "other", "full_name": "Someone Else"},
    )
    assert resp.status_code == 409
    assert resp.json() == {"error": "Email already registered"}


def test_register_missing_fields_is_400(client):
    resp = client.post("/api/auth/register", json={"email": "alice@example.com"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_login(client, register_user):
    user = register_user("alice@example.com")
    resp = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "password123"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["token"]
    assert body["user"]["id"] == user["id"]


def test_login_wrong_password(client, register_user):
    register_user("alice@example.com")
    resp = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "Invalid credentials"


def test_login_unknown_email(client):
    resp = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "x"})
    assert resp.status_code == 401


def test_protected_route_requires_token(client):
    assert client.get("/api/trees").status_code == 401
    resp = client.get("/api/trees", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_admin_login(client):
    resp = client.post("/api/auth/admin-login", json={"username": "admin", "password": "admin-pass"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["token"]
    assert body["user"] == {"username": "admin", "isAdmin": True}


def test_admin_login_rejects_bad_password(client):
    resp = client.post("/api/auth/admin-login", json={"username": "admin", "password": "wrong"})
    assert resp.status_code == 401


def test_tokens_are_role_scoped(client, alice, admin_headers):
    assert client.get("/api/trees", headers=admin_headers).status_code == 403
    assert client.get("/api/trees/all", headers=alice).status_code == 403
    assert client.post("/api/care/notify-unwatered", headers=alice).status_code == 403


def test_password_reset_flow(client, register_user, outbox):
    register_user("alice@example.com")

    resp = client.post("/api/auth/reset-request", json={"email": "alice@example.com"})
    assert resp.status_code == 200
    assert len(outbox.sent) == 1
    mail = outbox.sent[0]
    assert mail["to"] == "alice@example.com"
    token = mail["body"].split("reset your password: ")[1].split()[0]
    assert len(token) == 48

    bad = client.post(
        "/api/auth/reset",
        json={"email": "alice@example.com", "token": "0" * 48, "new_password": "newpass456"},
    )
    assert bad.status_code == 401

    ok = client.post(
        "/api/auth/reset",
        json={"email": "alice@example.com", "token": token, "new_password": "newpass456"},
    )
    assert ok.status_code == 200

    login = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "newpass456"})
    assert login.status_code == 200

    # Token is single use
    again = client.post(
        "/api/auth/reset",
        json={"email": "alice@example.com", "token": token, "new_password": "third"},
    )
    assert again.status_code == 401


def test_reset_request_unknown_email(client, outbox):
    resp = client.post("/api/auth/reset-request", json={"email": "ghost@example.com"})
    assert resp.status_code == 404
    assert outbox.sent == []


def test_health_check(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
