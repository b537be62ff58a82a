from tests.conftest import COOP_EMAIL, COOP_PASSWORD, login
from models.session import Session
from store.enums import SessionKind


def test_successful_login_sets_session_cookie_and_redirects(client, db, cooperative):
    response = login(client, "/cooperative/login", COOP_EMAIL, COOP_PASSWORD)

    assert response.status_code == 303
    assert response.headers["location"] == "/cooperative/dashboard"
    cookie = response.headers["set-cookie"]
    assert cookie.startswith("coop_sid=")
    assert "HttpOnly" in cookie
    assert "Max-Age=86400" in cookie
    assert "SameSite=strict" in cookie
    assert "Path=/" in cookie

    session = db.query(Session).one()
    assert session.kind == SessionKind.COOPERATIVE
    assert session.data["cooperative_id"] == str(cooperative.id)
    assert "password" not in session.data


def test_wrong_password_sets_no_cookie(client, db, cooperative):
    response = login(client, "/cooperative/login", COOP_EMAIL, "wrong")

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid username or password."
    assert "set-cookie" not in response.headers
    assert db.query(Session).count() == 0


def test_unknown_email_looks_like_wrong_password(client, cooperative):
    unknown = login(client, "/cooperative/login", "nobody@example.com", COOP_PASSWORD)
    wrong = login(client, "/cooperative/login", COOP_EMAIL, "wrong")

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json()
    assert "set-cookie" not in unknown.headers


def test_missing_fields_are_rejected(client, cooperative):
    response = client.post("/cooperative/login", data={"email": COOP_EMAIL}, follow_redirects=False)

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid username or password."


def test_dashboard_requires_session(client, cooperative):
    response = client.get("/cooperative/dashboard")

    assert response.status_code == 401
    assert response.json()["message"] == "Authentication required"


def test_dashboard_after_login(coop_client, member):
    response = coop_client.get("/cooperative/dashboard")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["cooperative"]["name"] == "Bayanihan Cooperative"
    assert data["memberCount"] == 1


def test_expired_session_is_rejected_and_removed(coop_client, db):
    session = db.query(Session).one()
    session.expires_at = session.expires_at.replace(year=2000)
    db.commit()

    response = coop_client.get("/cooperative/dashboard")

    assert response.status_code == 401
    db.expire_all()
    assert db.query(Session).count() == 0


def test_logout_clears_cookie_and_session(coop_client, db):
    response = coop_client.post("/cooperative/logout", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/cooperative/login"
    db.expire_all()
    assert db.query(Session).count() == 0
    assert coop_client.get("/cooperative/dashboard").status_code == 401


def test_admin_session_does_not_open_cooperative_routes(admin_client, cooperative):
    assert admin_client.get("/admin/dashboard").status_code == 200
    assert admin_client.get("/cooperative/dashboard").status_code == 401


def test_admin_bootstrap_and_dashboard(admin_client, cooperative):
    response = admin_client.get("/admin/dashboard")

    data = response.json()["data"]
    assert data["admin"]["email"] == "admin@example.com"
    assert data["cooperativeCount"] == 1
    assert data["categoryCount"] == 1
