"""Condo Routes: HTTP contract for condo list, fetch, create and delete."""

import json

LAKESIDE = {
    "condoId": 3,
    "condoName": "Lakeside",
    "address": "1 Lake Rd",
    "city": "Laketown",
    "facilities": "Dock, Sauna",
    "description": "By the lake.",
    "types": [{"typeId": "LK1", "typeName": "Studio", "description": "Studio."}],
}


async def test_list_condos(client):
    res = await client.get("/condos")
    assert res.status_code == 200
    body = res.json()
    assert [c["condoName"] for c in body] == ["Sunset Plaza", "Ocean Breeze"]
    assert [t["typeId"] for t in body[0]["types"]] == ["SP1", "SP2"]


async def test_get_condo(client):
    res = await client.get("/condos/2")
    assert res.status_code == 200
    assert res.json()["facilities"] == "Pool, Sauna, Parking"


async def test_get_unknown_condo_404(client):
    res = await client.get("/condos/7")
    assert res.status_code == 404
    assert res.text == "Condo not found"


async def test_get_condo_bad_id_400(client):
    res = await client.get("/condos/seven")
    assert res.status_code == 400
    assert res.text == "Invalid Condo ID"


async def test_create_condo_then_listed_exactly_once(client):
    res = await client.post("/condos", json=LAKESIDE)
    assert res.status_code == 201
    assert res.json() == LAKESIDE

    condos = (await client.get("/condos")).json()
    assert condos.count(LAKESIDE) == 1
    assert len(condos) == 3


async def test_listing_can_target_new_condo_type(client):
    await client.post("/condos", json=LAKESIDE)
    res = await client.post(
        "/listings", json={"listingId": 10, "condoId": 3, "typeId": "LK1"},
    )
    assert res.status_code == 201


async def test_duplicate_condo_id_rejected(client):
    res = await client.post("/condos", json={**LAKESIDE, "condoId": 1})
    assert res.status_code == 400
    assert res.text == "Condo already exists"
    assert len((await client.get("/condos")).json()) == 2


async def test_duplicate_condo_name_rejected(client):
    res = await client.post("/condos", json={**LAKESIDE, "condoName": "Ocean Breeze"})
    assert res.status_code == 400
    assert res.text == "Condo already exists"


async def test_create_condo_invalid_payload(client):
    res = await client.post("/condos", json={**LAKESIDE, "types": "LK1"})
    assert res.status_code == 400
    assert res.text == "Invalid request payload"


async def test_delete_condo_keeps_its_listings(client):
    res = await client.delete("/condos/1")
    assert res.status_code == 200
    assert [c["condoId"] for c in res.json()] == [2]
    listings = (await client.get("/condos/1/listings")).json()
    assert [x["listingId"] for x in listings] == [1, 2]


async def test_delete_absent_condo_is_noop(client):
    res = await client.delete("/condos/42")
    assert res.status_code == 200
    assert len(res.json()) == 2


async def test_delete_condo_bad_id(client):
    res = await client.delete("/condos/x")
    assert res.status_code == 400
    assert res.text == "Invalid Condo ID"


async def test_create_condo_ignores_content_type(client):
    res = await client.post(
        "/condos",
        content=json.dumps(LAKESIDE).encode(),
        headers={"Content-Type": "text/plain"},
    )
    assert res.status_code == 201
    assert res.json() == LAKESIDE


async def test_signed_condo_id_parses(client):
    res = await client.get("/condos/+2")
    assert res.status_code == 200
    assert res.json()["condoName"] == "Ocean Breeze"
