from decimal import Decimal

from fastapi.testclient import TestClient


def create_account(client: TestClient, **overrides) -> dict:
    payload = {"customer_id": 1, "account_type": "SAVINGS", "balance": "100.00"}
    payload.update(overrides)
    response = client.post("/accounts", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_account_deposit_withdraw(client: TestClient) -> None:
    account = create_account(client, balance="0")
    assert len(account["account_number"]) == 12
    assert Decimal(account["balance"]) == Decimal("0")
    account_id = account["id"]

    deposit = client.put(f"/accounts/{account_id}/deposit", params={"amount": "1000.50"})
    assert deposit.status_code == 200
    assert Decimal(deposit.json()["balance"]) == Decimal("1000.50")

    withdraw = client.put(f"/accounts/{account_id}/withdraw", params={"amount": "400.25"})
    assert withdraw.status_code == 200
    assert Decimal(withdraw.json()["balance"]) == Decimal("600.25")

    snapshot = client.get(f"/accounts/{account_id}")
    assert snapshot.status_code == 200
    assert Decimal(snapshot.json()["balance"]) == Decimal("600.25")


def test_create_account_for_unknown_customer_returns_400(client: TestClient) -> None:
    response = client.post(
        "/accounts",
        json={"customer_id": 999, "account_type": "SAVINGS", "balance": "10"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Customer 999 does not exist."
    assert client.get("/accounts").json() == []


def test_create_account_rejects_invalid_payload(client: TestClient) -> None:
    response = client.post(
        "/accounts",
        json={"customer_id": 0, "account_type": "BROKERAGE", "balance": "-1"},
    )
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert set(detail) == {"customer_id", "account_type", "balance"}


def test_withdraw_beyond_savings_floor_returns_409(client: TestClient) -> None:
    account_id = create_account(client, balance="100")["id"]

    response = client.put(f"/accounts/{account_id}/withdraw", params={"amount": "150"})
    assert response.status_code == 409

    snapshot = client.get(f"/accounts/{account_id}").json()
    assert Decimal(snapshot["balance"]) == Decimal("100")


def test_checking_overdraft_via_api(client: TestClient) -> None:
    account_id = create_account(client, account_type="CHECKING", balance="0")["id"]

    first = client.put(f"/accounts/{account_id}/withdraw", params={"amount": "400"})
    assert first.status_code == 200
    assert Decimal(first.json()["balance"]) == Decimal("-400")

    second = client.put(f"/accounts/{account_id}/withdraw", params={"amount": "200"})
    assert second.status_code == 409


def test_non_positive_deposit_returns_400(client: TestClient) -> None:
    account_id = create_account(client)["id"]

    for amount in ("-10", "0"):
        response = client.put(f"/accounts/{account_id}/deposit", params={"amount": amount})
        assert response.status_code == 400
        assert response.json()["detail"] == "Amount must be positive."


def test_malformed_amount_returns_400(client: TestClient) -> None:
    account_id = create_account(client)["id"]

    response = client.put(f"/accounts/{account_id}/deposit", params={"amount": "ten"})
    assert response.status_code == 400

    response = client.put(f"/accounts/{account_id}/deposit", params={"amount": "1.001"})
    assert response.status_code == 400


def test_unknown_account_returns_404(client: TestClient) -> None:
    assert client.get("/accounts/12345").status_code == 404
    assert client.put("/accounts/12345/withdraw", params={"amount": "10"}).status_code == 404
    assert client.put("/accounts/12345/deposit", params={"amount": "10"}).status_code == 404


def test_update_account(client: TestClient) -> None:
    account_id = create_account(client, balance="50")["id"]

    response = client.put(
        f"/accounts/{account_id}",
        json={"customer_id": 2, "account_type": "CHECKING", "balance": "-20"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["account_type"] == "CHECKING"
    assert body["customer_id"] == 2
    assert Decimal(body["balance"]) == Decimal("-20")


def test_update_account_rejects_negative_savings_balance(client: TestClient) -> None:
    account = create_account(client, balance="50")

    response = client.put(
        f"/accounts/{account['id']}",
        json={"customer_id": 1, "account_type": "SAVINGS", "balance": "-1"},
    )
    assert response.status_code == 400

    snapshot = client.get(f"/accounts/{account['id']}").json()
    assert snapshot == account


def test_delete_account_is_idempotent(client: TestClient) -> None:
    account_id = create_account(client)["id"]

    assert client.delete(f"/accounts/{account_id}").status_code == 204
    assert client.get(f"/accounts/{account_id}").status_code == 404
    assert client.delete(f"/accounts/{account_id}").status_code == 204


def test_list_accounts_and_customer_queries(client: TestClient) -> None:
    first = create_account(client, customer_id=1)
    second = create_account(client, customer_id=1, account_type="CHECKING")
    create_account(client, customer_id=2)

    everything = client.get("/accounts")
    assert everything.status_code == 200
    assert len(everything.json()) == 3

    owned = client.get("/accounts/customer/1")
    assert owned.status_code == 200
    assert {item["id"] for item in owned.json()} == {first["id"], second["id"]}

    empty = client.get("/accounts/customer/3")
    assert empty.status_code == 404
    assert empty.content == b""

    unknown = client.get("/accounts/customer/999")
    assert unknown.status_code == 400

    status_1 = client.get("/accounts/customer/1/exists").json()
    assert status_1 == {"customer_id": 1, "has_accounts": True}
    status_3 = client.get("/accounts/customer/3/exists").json()
    assert status_3 == {"customer_id": 3, "has_accounts": False}
