from __future__ import annotations

from decimal import Decimal


def _rescue(**overrides) -> dict:
    body = {
        "owner": "alice",
        "type": "erc20",
        "contractAddress": "0xC1",
        "amount": "12.5",
        "timestamp": "1714557600000",
    }
    body.update(overrides)
    return body


def test_create_rescue_without_token_ids(client, pool) -> None:
    response = client.post("/rescues", json=_rescue())

    assert response.status_code == 201
    assert response.json() == {"message": "Rescate añadido"}
    row = pool.tables["rescues"][0]
    assert row["token_ids"] is None
    assert row["amount"] == Decimal("12.5")


def test_missing_token_ids_list_as_null(client) -> None:
    client.post("/rescues", json=_rescue())

    response = client.get("/rescues/alice")

    assert response.status_code == 200
    rescues = response.json()
    assert len(rescues) == 1
    assert rescues[0]["token_ids"] is None
    assert rescues[0]["contract_address"] == "0xC1"
    assert Decimal(str(rescues[0]["amount"])) == Decimal("12.5")


def test_token_ids_round_trip(client, pool) -> None:
    client.post("/rescues", json=_rescue(type="erc721", tokenIds=[1, 2, 3]))

    response = client.get("/rescues/alice")

    assert pool.tables["rescues"][0]["token_ids"] == "[1, 2, 3]"
    assert response.json()[0]["token_ids"] == [1, 2, 3]


def test_list_filters_by_owner(client) -> None:
    client.post("/rescues", json=_rescue(owner="alice"))
    client.post("/rescues", json=_rescue(owner="bob"))

    response = client.get("/rescues/bob")

    assert [r["owner"] for r in response.json()] == ["bob"]


def test_list_unknown_owner_is_empty(client) -> None:
    response = client.get("/rescues/nobody")

    assert response.status_code == 200
    assert response.json() == []


def test_create_rescue_database_failure(client, pool) -> None:
    pool.fail_on = "INSERT INTO rescues"

    response = client.post("/rescues", json=_rescue())

    assert response.status_code == 500
    assert response.json() == {"error": "Error al añadir rescate"}


def test_corrupt_token_ids_yield_generic_error(client, pool) -> None:
    pool.insert_row(
        "rescues",
        owner="alice",
        type="erc721",
        contract_address="0xC1",
        amount=Decimal("1"),
        token_ids="{broken",
        timestamp="0",
    )

    response = client.get("/rescues/alice")

    assert response.status_code == 500
    assert response.json() == {"error": "Error al obtener rescates"}


def test_unparseable_amount_yields_generic_error(client, pool) -> None:
    response = client.post("/rescues", json=_rescue(amount="abc"))

    assert response.status_code == 500
    assert response.json() == {"error": "Error al añadir rescate"}
    assert "abc" not in response.text
    assert pool.tables["rescues"] == []
