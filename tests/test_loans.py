def create_loan(client, member_id, amount=1000, interest=10, tenure=12):
    return client.post(
        "/api/loans",
        json={"memberId": member_id, "amount": amount, "interest": interest, "tenure": tenure},
    )


def test_loan_total_payable_and_remaining_balance(coop_client, member):
    response = create_loan(coop_client, member.id)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["totalPayable"] == 1100
    assert data["remainingBalance"] == 1100


def test_repayment_reduces_remaining_balance(coop_client, member):
    loan = create_loan(coop_client, member.id).json()["data"]

    response = coop_client.post(
        f"/api/loans/{loan['id']}/repayments", json={"loanId": loan["id"], "amount": 100}
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["remainingBalance"] == 1000
    assert len(data["repayments"]) == 1


def test_repayment_cannot_exceed_remaining_balance(coop_client, member):
    loan = create_loan(coop_client, member.id).json()["data"]

    # The submitted remaining balance is replaced by the computed one
    response = coop_client.post(
        f"/api/loans/{loan['id']}/repayments",
        json={"loanId": loan["id"], "amount": 1100.01, "remainingBalance": 5000},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Amount cannot be greater than remaining balance."


def test_full_repayment_is_allowed(coop_client, member):
    loan = create_loan(coop_client, member.id).json()["data"]

    response = coop_client.post(f"/api/loans/{loan['id']}/repayments", json={"amount": 1100})

    assert response.status_code == 201
    assert response.json()["data"]["remainingBalance"] == 0


def test_edit_cannot_drop_below_amount_repaid(coop_client, member):
    loan = create_loan(coop_client, member.id).json()["data"]
    coop_client.post(f"/api/loans/{loan['id']}/repayments", json={"amount": 600})

    response = coop_client.put(
        f"/api/loans/{loan['id']}",
        json={"id": loan["id"], "memberId": member.id, "amount": 500, "interest": 10, "tenure": 6},
    )
    assert response.status_code == 400

    response = coop_client.put(
        f"/api/loans/{loan['id']}",
        json={"id": loan["id"], "memberId": member.id, "amount": 600, "interest": 5, "tenure": 6},
    )
    assert response.status_code == 200
    assert response.json()["data"]["remainingBalance"] == 30


def test_invalid_interest_is_rejected(coop_client, member):
    response = create_loan(coop_client, member.id, interest=0)

    assert response.status_code == 400
    assert response.json()["errors"] == {"interest": "Interest should be at least 1."}


def test_member_detail_includes_balances(coop_client, member):
    create_loan(coop_client, member.id)
    coop_client.post("/api/shares", json={"memberId": member.id, "type": "Deposit", "amount": 250})

    data = coop_client.get(f"/api/members/{member.id}").json()["data"]

    assert data["balances"] == {"share": 250, "saving": 0, "loan": 1100}
