def _create_item(client, user_id, title="Do Maths", tags=()):
    r = client.post("/work-items/", json={"title": title, "assigned_to_id": user_id, "tags": list(tags)})
    assert r.status_code == 201, r.text
    return r.json()["id"]


def _put(client, item_id, user_id, state, title="Do Maths", tags=()):
    return client.put(
        f"/work-items/{item_id}",
        json={"id": item_id, "title": title, "assigned_to_id": user_id, "tags": list(tags), "state": state},
    )


def test_create_and_find(client, create_user):
    user_id = create_user()
    item_id = _create_item(client, user_id, tags=["Easy"])

    r = client.get(f"/work-items/{item_id}")
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Do Maths"
    assert body["state"] == "New"
    assert body["assigned_to_name"] == "Sigurd"
    assert body["tags"] == ["Easy"]
    assert body["description"] == ""


def test_create_with_unknown_user_is_bad_request(client):
    r = client.post("/work-items/", json={"title": "Do Maths", "assigned_to_id": 42})
    assert r.status_code == 400


def test_closed_item_delete_conflicts(client, create_user):
    user_id = create_user()
    item_id = _create_item(client, user_id)

    assert _put(client, item_id, user_id, "Closed").status_code == 204
    assert client.delete(f"/work-items/{item_id}").status_code == 409
    assert client.get(f"/work-items/{item_id}").json()["state"] == "Closed"


def test_delete_active_lists_as_removed(client, create_user):
    user_id = create_user()
    item_id = _create_item(client, user_id)
    _put(client, item_id, user_id, "Active")

    assert client.delete(f"/work-items/{item_id}").status_code == 204
    removed = client.get("/work-items/removed").json()
    assert [i["id"] for i in removed] == [item_id]


def test_delete_new_then_not_found(client, create_user):
    user_id = create_user()
    item_id = _create_item(client, user_id)

    assert client.delete(f"/work-items/{item_id}").status_code == 204
    assert client.get(f"/work-items/{item_id}").status_code == 404
    assert client.delete(f"/work-items/{item_id}").status_code == 404


def test_list_filters(client, create_user):
    sigurd = create_user()
    billy = create_user("Billy", "billy@example.com")
    a = _create_item(client, sigurd, "a", tags=["Easy"])
    b = _create_item(client, billy, "b", tags=["Easy", "Hard"])
    c = _create_item(client, billy, "c")
    _put(client, c, billy, "Active", title="c")

    assert [i["id"] for i in client.get("/work-items/").json()] == [a, b, c]
    assert [i["id"] for i in client.get("/work-items/?tag=Easy").json()] == [a, b]
    assert [i["id"] for i in client.get(f"/work-items/?user_id={billy}").json()] == [b, c]
    assert [i["id"] for i in client.get("/work-items/?state=Active").json()] == [c]
    assert client.get("/work-items/?state=Active&tag=Easy").status_code == 400
    assert client.get("/work-items/?state=Bogus").status_code == 422


def test_update_unknown_item_not_found(client, create_user):
    user_id = create_user()
    assert _put(client, 999, user_id, "Active").status_code == 404
