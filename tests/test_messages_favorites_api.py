def test_conversation(client, signup):
    alice, alice_headers = signup("alice@ekrili.tn")
    bob, bob_headers = signup("bob@ekrili.tn")

    client.post("/api/messages", json={"receiver_id": bob["id"], "content": "Bonjour", "property_id": 1}, headers=alice_headers)
    client.post("/api/messages", json={"receiver_id": alice["id"], "content": "Salut"}, headers=bob_headers)

    seen_by_alice = client.get(f"/api/messages/{bob['id']}", headers=alice_headers).json()
    seen_by_bob = client.get(f"/api/messages/{alice['id']}", headers=bob_headers).json()
    assert [m["content"] for m in seen_by_alice] == ["Bonjour", "Salut"]
    assert seen_by_alice == seen_by_bob
    assert seen_by_alice[0]["is_read"] is False


def test_send_message_checks_recipient(client, signup):
    _, headers = signup("alice@ekrili.tn")
    assert client.post("/api/messages", json={"receiver_id": 999, "content": "?"}, headers=headers).status_code == 404
    assert client.post("/api/messages", json={"receiver_id": 1, "content": ""}, headers=headers).status_code == 422
    assert client.get("/api/messages/1").status_code == 401


def test_mark_as_read(client, signup):
    alice, alice_headers = signup("alice@ekrili.tn")
    bob, bob_headers = signup("bob@ekrili.tn")
    message = client.post("/api/messages", json={"receiver_id": bob["id"], "content": "Dispo ?"}, headers=alice_headers).json()

    assert client.post(f"/api/messages/{message['id']}/read", headers=alice_headers).status_code == 403
    response = client.post(f"/api/messages/{message['id']}/read", headers=bob_headers)
    assert response.json() == {"success": True}
    assert client.get(f"/api/messages/{alice['id']}", headers=bob_headers).json()[0]["is_read"] is True
    assert client.post("/api/messages/999/read", headers=bob_headers).status_code == 404


def test_favorites_flow(client, signup):
    user, headers = signup("fan@ekrili.tn")

    assert client.post("/api/favorites", json={"property_id": 3}, headers=headers).status_code == 201
    assert client.post("/api/favorites", json={"property_id": 3}, headers=headers).status_code == 201
    assert client.post("/api/favorites", json={"property_id": 999}, headers=headers).status_code == 404
    assert len(client.get(f"/api/favorites/{user['id']}").json()) == 2

    assert client.get("/api/favorites/check/3", headers=headers).json() == {"property_id": 3, "is_favorite": True}
    assert client.get("/api/properties/3", headers=headers).json()["is_favorite"] is True

    assert client.delete("/api/favorites/3", headers=headers).json() == {"success": True}
    assert len(client.get(f"/api/favorites/{user['id']}").json()) == 1
    assert client.delete("/api/favorites/3", headers=headers).json() == {"success": True}
    assert client.delete("/api/favorites/3", headers=headers).json() == {"success": False}
    assert client.get("/api/favorites/check/3", headers=headers).json()["is_favorite"] is False
