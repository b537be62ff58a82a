import uuid

from models.member import Member, MemberAccount
from models.session import Session
from tests.conftest import make_member


def registration_payload(**member):
    return {
        "email": "ana@example.com",
        "password": "s3cret-pass",
        "member": {
            "givenName": "Ana",
            "middleName": "Lopez",
            "surname": "Garcia",
            "birthday": "1995-08-02",
            **member,
        },
    }


def test_register_creates_member_account_and_token(client, db, cooperative):
    response = client.post(f"/api/cooperatives/{cooperative.id}/members", json=registration_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Account has been registered."
    token = body["data"]["token"]

    member = db.query(Member).filter(Member.given_name == "Ana").one()
    assert member.cooperative_id == cooperative.id
    assert member.gender == ""
    account = db.query(MemberAccount).filter(MemberAccount.member_id == member.id).one()
    assert account.email == "ana@example.com"
    assert account.password != "s3cret-pass"
    assert account.password.startswith("$2")

    lookup = client.get(f"/api/registrations/{token}")
    assert lookup.status_code == 200
    assert lookup.json()["data"]["fullName"] == "Ana Lopez Garcia"


def test_duplicate_record_is_rejected(client, db, cooperative):
    make_member(db, cooperative, given_name="Ana", surname="Garcia")
    # Same person with different capitalisation
    payload = registration_payload(givenName="ANA", surname="garcia", birthday="1990-05-17")

    response = client.post(f"/api/cooperatives/{cooperative.id}/members", json=payload)

    assert response.status_code == 400
    assert response.json()["message"] == (
        "Looks like you already have a record. Please contact the cooperative to resolve this issue."
    )
    db.expire_all()
    assert db.query(Member).count() == 1


def test_invalid_cooperative_id_creates_nothing(client, db, cooperative):
    response = client.post("/api/cooperatives/not-a-uuid/members", json=registration_payload())

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid coop id"
    assert db.query(Member).count() == 0
    assert db.query(MemberAccount).count() == 0


def test_unknown_cooperative_is_not_found(client, db, cooperative):
    response = client.post(f"/api/cooperatives/{uuid.uuid4()}/members", json=registration_payload())

    assert response.status_code == 404
    assert db.query(Member).count() == 0


def test_validation_failure_reports_first_message(client, db, cooperative):
    payload = registration_payload()
    payload["email"] = "nope"

    response = client.post(f"/api/cooperatives/{cooperative.id}/members", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid email format."
    assert body["errors"] == {"email": "Invalid email format."}
    assert db.query(Member).count() == 0


def test_missing_body_is_a_validation_failure(client, cooperative):
    response = client.post(f"/api/cooperatives/{cooperative.id}/members")

    assert response.status_code == 400
    assert response.json()["errors"]["email"] == "Email is required."


def test_expired_registration_token_is_gone(client, db, cooperative):
    response = client.post(f"/api/cooperatives/{cooperative.id}/members", json=registration_payload())
    token = response.json()["data"]["token"]

    session = db.get(Session, token)
    session.expires_at = session.expires_at.replace(year=2000)
    db.commit()

    assert client.get(f"/api/registrations/{token}").status_code == 404
