import uuid

from models.cooperative import CooperativeAccount
from tests.conftest import COOP_EMAIL, login


def cooperative_payload(category_id, email="new.coop@example.com"):
    return {
        "name": "Kapatiran Cooperative",
        "registrationNumber": "REG-777",
        "registrationDate": "2018-06-15",
        "categoryId": str(category_id),
        "initials": "KC",
        "address": "Cebu City",
        "account": {
            "givenName": "Liza",
            "middleName": "Ramos",
            "surname": "Tan",
            "email": email,
        },
    }


def test_create_cooperative_returns_working_temporary_password(admin_client, category):
    response = admin_client.post("/api/cooperatives", json=cooperative_payload(category.id))

    assert response.status_code == 201
    data = response.json()["data"]
    password = data["temporaryPassword"]
    assert data["account"]["email"] == "new.coop@example.com"

    signin = login(admin_client, "/cooperative/login", "new.coop@example.com", password)
    assert signin.status_code == 303


def test_create_cooperative_with_taken_email(admin_client, category, cooperative):
    response = admin_client.post("/api/cooperatives", json=cooperative_payload(category.id, email=COOP_EMAIL))

    assert response.status_code == 409


def test_create_cooperative_with_unknown_category(admin_client, category):
    response = admin_client.post("/api/cooperatives", json=cooperative_payload(uuid.uuid4()))

    assert response.status_code == 404


def test_cooperative_routes_require_admin(coop_client, category):
    response = coop_client.post("/api/cooperatives", json=cooperative_payload(category.id))

    assert response.status_code == 401


def test_update_cooperative(admin_client, db, category, cooperative):
    payload = cooperative_payload(category.id, email="renamed@example.com")
    payload["id"] = str(cooperative.id)
    payload["account"]["id"] = str(cooperative.account.id)

    response = admin_client.put(f"/api/cooperatives/{cooperative.id}", json=payload)

    assert response.status_code == 200
    db.expire_all()
    assert db.query(CooperativeAccount).one().email == "renamed@example.com"


def test_criteria_fields_are_reconciled_on_edit(admin_client):
    created = admin_client.post(
        "/api/criteria",
        json={
            "name": "Standard",
            "financialPerformancePoints": 40,
            "organizationManagementPoints": 30,
            "criteriaFields": [
                {"name": "Audit", "maxPoints": 10},
                {"name": "Education", "maxPoints": 20},
            ],
        },
    ).json()["data"]
    audit, education = created["criteriaFields"]

    response = admin_client.put(
        f"/api/criteria/{created['id']}",
        json={
            "id": created["id"],
            "name": "Standard",
            "financialPerformancePoints": 40,
            "organizationManagementPoints": 30,
            "criteriaFields": [
                {"name": "Governance", "maxPoints": 5},
                {"id": education["id"], "name": "Member education", "maxPoints": 25},
            ],
        },
    )

    assert response.status_code == 200
    fields = response.json()["data"]["criteriaFields"]
    assert [f["name"] for f in fields] == ["Governance", "Member education"]
    assert fields[1]["id"] == education["id"]
    assert audit["id"] not in {f["id"] for f in fields}


def test_default_points_cannot_exceed_criteria(admin_client, cooperative, category):
    url = f"/api/cooperatives/{cooperative.id}/scores"
    payload = {
        "cooperativeId": str(cooperative.id),
        "categoryId": str(category.id),
        "financialPerformancePoints": 41,
        "organizationManagementPoints": 10,
    }

    assert admin_client.put(url, json=payload).status_code == 400

    payload["financialPerformancePoints"] = 40
    response = admin_client.put(url, json=payload)
    assert response.status_code == 200
    assert response.json()["data"]["totalPoints"] == 50


def test_field_points_and_score_totals(admin_client, cooperative, category, criteria):
    field = criteria.fields[1]
    url = f"/api/cooperatives/{cooperative.id}/criteria-fields/{field.id}/points"
    payload = {
        "cooperativeId": str(cooperative.id),
        "categoryId": str(category.id),
        "criteriaFieldId": str(field.id),
        "points": 21,
    }

    assert admin_client.put(url, json=payload).status_code == 400

    payload["points"] = 15
    assert admin_client.put(url, json=payload).status_code == 200

    scores = admin_client.get(f"/api/cooperatives/{cooperative.id}/scores").json()["data"]
    assert scores["totalPoints"] == 15
    assert scores["maxTotalPoints"] == 100
    assert [f["points"] for f in scores["criteriaFields"]] == [0, 15]


def test_give_reward(admin_client, cooperative):
    reward = admin_client.post(
        "/api/rewards",
        json={
            "name": "Most Improved",
            "description": "Largest growth in membership",
            "certificateType": "Plaque",
            "certificateDescription": "Awarded at the annual assembly",
        },
    ).json()["data"]

    response = admin_client.post(
        "/api/given-rewards",
        json={"cooperativeId": str(cooperative.id), "rewardId": reward["id"], "date": "2026-01-15"},
    )
    assert response.status_code == 201
    assert response.json()["data"]["cooperativeName"] == "Bayanihan Cooperative"

    missing = admin_client.post(
        "/api/given-rewards",
        json={"cooperativeId": str(uuid.uuid4()), "rewardId": reward["id"], "date": "2026-01-15"},
    )
    assert missing.status_code == 404


def test_category_requires_existing_criteria(admin_client):
    response = admin_client.post(
        "/api/categories",
        json={"name": "Small", "requiredAssets": 500000, "criteriaId": str(uuid.uuid4())},
    )

    assert response.status_code == 404


def criteria_payload(criteria, financial=40, organization=30, audit_max=10):
    audit, education = criteria.fields
    return {
        "id": str(criteria.id),
        "name": criteria.name,
        "financialPerformancePoints": financial,
        "organizationManagementPoints": organization,
        "criteriaFields": [
            {"id": str(audit.id), "name": audit.name, "maxPoints": audit_max},
            {"id": str(education.id), "name": education.name, "maxPoints": education.max_points},
        ],
    }


def test_field_max_points_cannot_drop_below_awarded_points(admin_client, cooperative, category, criteria):
    audit = criteria.fields[0]
    admin_client.put(
        f"/api/cooperatives/{cooperative.id}/criteria-fields/{audit.id}/points",
        json={
            "cooperativeId": str(cooperative.id),
            "categoryId": str(category.id),
            "criteriaFieldId": str(audit.id),
            "points": 10,
        },
    )

    response = admin_client.put(f"/api/criteria/{criteria.id}", json=criteria_payload(criteria, audit_max=3))

    assert response.status_code == 400
    assert response.json()["message"] == (
        "Max points of Audit compliance cannot be less than the 10 points already awarded."
    )
    scores = admin_client.get(f"/api/cooperatives/{cooperative.id}/scores").json()["data"]
    assert scores["criteriaFields"][0]["maxPoints"] == 10
    assert scores["criteriaFields"][0]["points"] == 10


def test_default_maxima_cannot_drop_below_awarded_points(admin_client, cooperative, category, criteria):
    admin_client.put(
        f"/api/cooperatives/{cooperative.id}/scores",
        json={
            "cooperativeId": str(cooperative.id),
            "categoryId": str(category.id),
            "financialPerformancePoints": 35,
            "organizationManagementPoints": 20,
        },
    )

    response = admin_client.put(f"/api/criteria/{criteria.id}", json=criteria_payload(criteria, financial=30))
    assert response.status_code == 400
    assert response.json()["message"] == (
        "Financial performance points cannot be less than the 35 points already awarded."
    )

    response = admin_client.put(
        f"/api/criteria/{criteria.id}", json=criteria_payload(criteria, financial=35, organization=20)
    )
    assert response.status_code == 200
