def test_list_actors_includes_templates(client, repo_actors_dir):
    r = client.get("/api/v1/actors")
    assert r.status_code == 200, r.text
    names = r.json()["actors"]
    assert {"duck", "robot", "spell", "parrot"} <= set(names)


def test_get_actor(client, actors_dir):
    r = client.get("/api/v1/actors/duck")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["name"] == "duck"
    assert body["script"]["quack"] == "Quack!"


def test_get_unknown_actor_404(client, actors_dir):
    r = client.get("/api/v1/actors/unicorn")
    assert r.status_code == 404


def test_send_messages_to_actor(client, repo_actors_dir):
    r = client.post("/api/v1/actors/parrot/messages", json={"messages": ["talk", "quack"]})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["actor"] == "parrot"
    assert body["replies"] == [
        {"message": "talk", "reply": "Polly wants a cracker."},
        {"message": "quack", "reply": "Squawk... quack?"},
    ]


def test_send_unscripted_message_is_400(client, actors_dir):
    r = client.post("/api/v1/actors/robot/messages", json={"messages": ["quack", "swim"]})
    assert r.status_code == 400, r.text
    assert r.json()["message"] == "swim"


def test_send_private_message_is_400(client, actors_dir):
    r = client.post("/api/v1/actors/duck/messages", json={"messages": ["__init__"]})
    assert r.status_code == 400
    assert "private" in r.json()["detail"]


def test_send_to_unknown_actor_404(client, actors_dir):
    r = client.post("/api/v1/actors/unicorn/messages", json={"messages": ["quack"]})
    assert r.status_code == 404


def test_actor_from_env_dir(client, actors_dir):
    (actors_dir / "cat.yaml").write_text("script:\n  meow: Meow.\n", encoding="utf-8")
    r = client.post("/api/v1/actors/cat/messages", json={"messages": ["meow"]})
    assert r.status_code == 200, r.text
    assert r.json()["replies"][0]["reply"] == "Meow."


def test_send_reserved_attribute_names_is_400(client, actors_dir):
    for reserved in ("name", "script", "messages"):
        r = client.post("/api/v1/actors/duck/messages", json={"messages": [reserved]})
        assert r.status_code == 400, r.text
        assert r.json()["message"] == reserved


def test_bad_bytes_actor_file_does_not_break_api(client, actors_dir):
    (actors_dir / "bad.yaml").write_bytes(b"script:\n  quack: \xff\xfe\n")
    r = client.get("/api/v1/actors")
    assert r.status_code == 200, r.text
    assert "bad" not in r.json()["actors"]
