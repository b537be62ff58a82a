from models.member import Dependent
from tests.conftest import make_cooperative, make_member


def member_payload(**overrides):
    payload = {
        "givenName": "Rosa",
        "middleName": "Villanueva",
        "surname": "Mendoza",
        "birthday": "1988-11-30",
        "gender": "Female",
        "educationalAttainment": "High School",
        "civilStatus": "Married",
        "spouseName": "Carlos Mendoza",
        "presentAddress": "Pasig City",
        "account": {"email": "rosa@example.com", "mobileNumber": "09181234567"},
        "dependents": [
            {"name": "Lito Mendoza", "relationship": "Son", "birthday": "2012-04-10"},
        ],
    }
    payload.update(overrides)
    return payload


def test_create_member_with_account_and_dependents(coop_client, db):
    response = coop_client.post("/api/members", json=member_payload())

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["fullName"] == "Rosa Villanueva Mendoza"
    assert data["account"]["mobileNumber"] == "09181234567"
    assert data["account"]["registeredOnline"] is False
    assert [d["relationship"] for d in data["dependents"]] == ["Son"]


def test_create_member_validation_error(coop_client):
    response = coop_client.post("/api/members", json=member_payload(civilStatus=""))

    assert response.status_code == 400
    assert response.json()["errors"] == {"civilStatus": "Civil status is required."}


def test_duplicate_member_in_cooperative_conflicts(coop_client):
    coop_client.post("/api/members", json=member_payload())

    response = coop_client.post("/api/members", json=member_payload())

    assert response.status_code == 409


def test_update_replaces_dependents(coop_client, db):
    created = coop_client.post("/api/members", json=member_payload()).json()["data"]

    payload = member_payload(
        id=created["id"],
        registrationFee="150.50",
        dependents=[
            {"name": "Ana Mendoza", "relationship": "Daughter", "birthday": "2015-01-01"},
            {"name": "Ben Mendoza", "relationship": "Son", "birthday": "2017-02-02"},
        ],
    )
    response = coop_client.put(f"/api/members/{created['id']}", json=payload)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["registrationFee"] == 150.5
    assert sorted(d["name"] for d in data["dependents"]) == ["Ana Mendoza", "Ben Mendoza"]
    db.expire_all()
    assert db.query(Dependent).count() == 2


def test_update_with_mismatched_id(coop_client, member):
    payload = member_payload(id=member.id + 1)

    response = coop_client.put(f"/api/members/{member.id}", json=payload)

    assert response.status_code == 400


def test_invalid_registration_fee(coop_client, member):
    payload = member_payload(id=member.id, registrationFee="abc")

    response = coop_client.put(f"/api/members/{member.id}", json=payload)

    assert response.status_code == 400
    assert response.json()["errors"] == {"registrationFee": "Invalid fee value."}


def test_list_is_scoped_to_cooperative(coop_client, db, cooperative, category):
    make_member(db, cooperative, given_name="Juan")
    make_member(db, cooperative, given_name="Jose", surname="Rizal")
    other = make_cooperative(db, category, email="other@example.com", name="Other Cooperative")
    make_member(db, other, given_name="Pedro")

    data = coop_client.get("/api/members").json()["data"]
    assert data["total"] == 2

    data = coop_client.get("/api/members", params={"search": "riz"}).json()["data"]
    assert [m["givenName"] for m in data["members"]] == ["Jose"]


def test_member_of_other_cooperative_is_hidden(coop_client, db, category):
    other = make_cooperative(db, category, email="other@example.com", name="Other Cooperative")
    outsider = make_member(db, other, given_name="Pedro")

    response = coop_client.get(f"/api/members/{outsider.id}")

    assert response.status_code == 404
