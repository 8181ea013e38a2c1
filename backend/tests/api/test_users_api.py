"""User Endpoints: POST/GET /api/users over HTTP.

Invariants:
    - POST returns {_id, username}; 400 without username; 409 on duplicates
    - GET lists {username, _id} in creation order
    - JSON and form bodies are both accepted
"""


async def test_create_user_returns_id_and_username(client):
    res = await client.post("/api/users", json={"username": "alice"})
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"_id", "username"}
    assert body["username"] == "alice"
    assert body["_id"]


async def test_create_user_accepts_form_body(client):
    res = await client.post("/api/users", data={"username": "alice"})
    assert res.status_code == 200
    assert res.json()["username"] == "alice"


async def test_create_user_without_username_is_400(client):
    res = await client.post("/api/users", json={})
    assert res.status_code == 400
    assert res.json() == {"error": "Username is required"}


async def test_create_user_with_empty_username_is_400(client):
    res = await client.post("/api/users", data={"username": ""})
    assert res.status_code == 400


async def test_create_user_with_malformed_json_is_400(client):
    res = await client.post(
        "/api/users", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Username is required"}


async def test_duplicate_username_is_409_and_first_user_kept(client):
    first = (await client.post("/api/users", json={"username": "alice"})).json()
    res = await client.post("/api/users", json={"username": "alice"})
    assert res.status_code == 409
    assert res.json() == {"error": "Username already exists"}

    users = (await client.get("/api/users")).json()
    assert users == [{"username": "alice", "_id": first["_id"]}]


async def test_list_users_in_creation_order(client):
    created = []
    for name in ("u1", "u2", "u3"):
        created.append((await client.post("/api/users", json={"username": name})).json())

    res = await client.get("/api/users")
    assert res.status_code == 200
    assert res.json() == [{"_id": u["_id"], "username": u["username"]} for u in created]


async def test_list_users_empty(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    assert res.json() == []


async def test_user_ids_are_unique(client):
    ids = set()
    for n in range(20):
        ids.add((await client.post("/api/users", json={"username": f"user{n}"})).json()["_id"])
    assert len(ids) == 20
