"""Page API routes: envelope shape, status codes, and public view privacy.

Tests cover:
    - PUT /api creates and returns {ok, msg: "Saved", payload: {id, name}}
    - POST /api updates with the right id; 403 with a wrong one; 404 for unknown name
    - GET /api?id= returns the full page; unknown id → 404
    - GET /api/pages/{name} never exposes the id
    - validation failures → 400 with the field-specific message
"""


async def test_create_returns_saved_envelope(client):
    res = await client.put("/api", json={"title": "Hello World", "content": "text"})
    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True
    assert body["msg"] == "Saved"
    assert body["payload"]["name"].startswith("hello-world-")
    assert len(body["payload"]["id"]) == 16


async def test_create_with_empty_title_returns_400(client):
    res = await client.put("/api", json={"title": "!!!"})
    assert res.status_code == 400
    body = res.json()
    assert body["ok"] is False
    assert body["msg"] == "Provide a title"
    assert body["error"]["field"] == "title"


async def test_create_with_bad_twitter_handle_returns_message(client):
    res = await client.put("/api", json={"title": "ok", "twitter": "john doe"})
    assert res.status_code == 400
    assert res.json()["msg"] == (
        "Invalid Twitter Handle. Only letters, numbers, and underscore allowed."
    )


async def test_malformed_body_returns_400(client):
    res = await client.put("/api", json={"title": ["not", "a", "string"]})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_lookup_by_id_returns_full_page(client, created_page):
    res = await client.get("/api", params={"id": created_page["id"]})
    assert res.status_code == 200
    payload = res.json()["payload"]
    assert payload["id"] == created_page["id"]
    assert payload["name"] == created_page["name"]
    assert payload["content"] == "# Hi"
    assert payload["html"] == "<h1>Hi</h1>"


async def test_lookup_unknown_id_returns_404(client):
    res = await client.get("/api", params={"id": "nope"})
    assert res.status_code == 404
    assert res.json()["msg"] == "This page Id does not exist."


async def test_public_view_hides_id(client, created_page):
    res = await client.get(f"/api/pages/{created_page['name']}")
    assert res.status_code == 200
    payload = res.json()["payload"]
    assert payload["title"] == "Hello World"
    assert payload["twitter"] == "john_doe"
    assert "id" not in payload
    assert created_page["id"] not in res.text


async def test_public_view_unknown_name_returns_404(client):
    res = await client.get("/api/pages/no-such-page")
    assert res.status_code == 404
    assert res.json()["msg"] == "This page name does not exist."


async def test_update_with_correct_id(client, created_page):
    res = await client.post("/api", json={
        "id": created_page["id"], "name": created_page["name"],
        "title": "Edited", "content": "new body",
    })
    assert res.status_code == 200
    assert res.json()["payload"] == created_page

    view = await client.get(f"/api/pages/{created_page['name']}")
    assert view.json()["payload"]["title"] == "Edited"
    assert view.json()["payload"]["html"] == "<p>new body</p>"


async def test_update_with_wrong_id_returns_403(client, created_page):
    res = await client.post("/api", json={
        "id": "wrong", "name": created_page["name"], "title": "Hijacked",
    })
    assert res.status_code == 403
    assert res.json()["msg"] == "Permission denied."

    view = await client.get(f"/api/pages/{created_page['name']}")
    assert view.json()["payload"]["title"] == "Hello World"


async def test_update_unknown_name_returns_404(client):
    res = await client.post("/api", json={"id": "x", "name": "missing", "title": "t"})
    assert res.status_code == 404
    assert res.json()["msg"] == "This page name does not exist."
