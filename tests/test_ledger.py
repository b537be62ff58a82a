import pytest

from models.transaction import ShareTransaction
from tests.conftest import make_cooperative, make_member


def deposit(client, member_id, amount, path="/api/shares"):
    return client.post(path, json={"memberId": member_id, "type": "Deposit", "amount": amount})


def withdraw(client, member_id, amount, path="/api/shares", **extra):
    return client.post(
        path, json={"memberId": member_id, "type": "Withdraw", "amount": amount, **extra}
    )


def test_deposit_then_history(coop_client, member):
    response = deposit(coop_client, member.id, 500)

    assert response.status_code == 201
    assert response.json()["data"]["balance"] == 500

    history = coop_client.get(f"/api/members/{member.id}/shares").json()["data"]
    assert history["balance"] == 500
    assert [entry["type"] for entry in history["transactions"]] == ["Deposit"]


def test_withdrawal_uses_server_side_balance(coop_client, db, member):
    deposit(coop_client, member.id, 100)

    # A client-supplied balance is ignored
    response = withdraw(coop_client, member.id, 150, share=1000)

    assert response.status_code == 400
    assert response.json()["message"] == "Insufficient share balance."
    assert db.query(ShareTransaction).count() == 1


def test_withdrawal_of_whole_balance_is_allowed(coop_client, member):
    deposit(coop_client, member.id, 100)

    response = withdraw(coop_client, member.id, 100)

    assert response.status_code == 201
    assert response.json()["data"]["balance"] == 0


@pytest.mark.parametrize("path,message", [
    ("/api/shares", "Insufficient share balance."),
    ("/api/savings", "Insufficient saving balance."),
])
def test_withdrawal_without_deposits(coop_client, member, path, message):
    response = withdraw(coop_client, member.id, 10, path=path)

    assert response.status_code == 400
    assert response.json()["message"] == message


def test_amount_below_minimum(coop_client, member):
    response = deposit(coop_client, member.id, 9.99)

    assert response.status_code == 400
    assert response.json()["errors"] == {"amount": "Amount should be at least 10."}


def test_amount_with_fractions_of_a_cent_is_not_rounded(coop_client, db, member):
    response = deposit(coop_client, member.id, "10.005")

    assert response.status_code == 400
    assert response.json()["errors"] == {"amount": "Amount should not have more than 2 decimal places."}
    assert db.query(ShareTransaction).count() == 0


def test_savings_withdrawal_of_whole_balance_is_allowed(coop_client, member):
    deposit(coop_client, member.id, "120.75", path="/api/savings")

    response = withdraw(coop_client, member.id, "120.75", path="/api/savings")

    assert response.status_code == 201
    assert response.json()["data"]["balance"] == 0

    response = withdraw(coop_client, member.id, 10, path="/api/savings")
    assert response.status_code == 400
    assert response.json()["message"] == "Insufficient saving balance."


def test_savings_and_shares_are_separate_ledgers(coop_client, member):
    deposit(coop_client, member.id, 300, path="/api/savings")

    assert withdraw(coop_client, member.id, 50).status_code == 400
    assert withdraw(coop_client, member.id, 50, path="/api/savings").status_code == 201

    savings = coop_client.get(f"/api/members/{member.id}/savings").json()["data"]
    assert savings["balance"] == 250


def test_member_of_another_cooperative_is_not_found(coop_client, db, category):
    other = make_cooperative(db, category, email="other@example.com", name="Other Cooperative")
    outsider = make_member(db, other, given_name="Pedro")

    response = deposit(coop_client, outsider.id, 100)

    assert response.status_code == 404
    assert response.json()["message"] == "Member not found"


def test_editing_withdrawal_excludes_the_edited_row(coop_client, member):
    deposit(coop_client, member.id, 100)
    entry = withdraw(coop_client, member.id, 80).json()["data"]["transaction"]

    response = coop_client.put(
        f"/api/shares/{entry['id']}",
        json={"id": entry["id"], "memberId": member.id, "type": "Withdraw", "amount": 100},
    )
    assert response.status_code == 200
    assert response.json()["data"]["balance"] == 0

    response = coop_client.put(
        f"/api/shares/{entry['id']}",
        json={"id": entry["id"], "memberId": member.id, "type": "Withdraw", "amount": 110},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Insufficient share balance."


def test_editing_deposit_cannot_make_balance_negative(coop_client, member):
    first = deposit(coop_client, member.id, 100).json()["data"]["transaction"]
    withdraw(coop_client, member.id, 90)

    response = coop_client.put(
        f"/api/shares/{first['id']}",
        json={"id": first["id"], "memberId": member.id, "type": "Deposit", "amount": 50},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Insufficient share balance."


def test_edit_id_mismatch(coop_client, member):
    entry = deposit(coop_client, member.id, 100).json()["data"]["transaction"]

    response = coop_client.put(
        f"/api/shares/{entry['id']}",
        json={"id": entry["id"] + 1, "memberId": member.id, "type": "Deposit", "amount": 50},
    )

    assert response.status_code == 400


def test_requires_cooperative_session(client, member):
    assert deposit(client, member.id, 100).status_code == 401
