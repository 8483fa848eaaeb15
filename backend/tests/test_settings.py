# tests/test_settings.py

BASE = "/api/v1/settings"


def test_upsert_updates_the_same_row(client):
    inserted = client.put(BASE, json={"key": "phone", "value": "+1"})
    assert inserted.status_code == 200
    first = inserted.get_json()
    assert first["value"] == "+1"

    updated = client.put(BASE, json={"key": "phone", "value": "+2"}).get_json()
    assert updated["id"] == first["id"]
    assert updated["value"] == "+2"

    assert len(client.get(BASE).get_json()) == 1


def test_post_rejects_existing_key(client):
    created = client.post(BASE, json={"key": "company_email", "value": "info@artroad.ae"})
    assert created.status_code == 201

    duplicate = client.post(BASE, json={"key": "company_email", "value": "other@artroad.ae"})
    assert duplicate.status_code == 400
    assert duplicate.get_json()["code"] == "DUPLICATE_KEY"


def test_key_and_value_are_required(client):
    no_key = client.put(BASE, json={"value": "x"})
    assert no_key.status_code == 400
    assert no_key.get_json()["code"] == "MISSING_KEY"

    blank_value = client.post(BASE, json={"key": "phone", "value": "   "})
    assert blank_value.status_code == 400
    assert blank_value.get_json()["code"] == "MISSING_VALUE"


def test_value_cannot_be_blanked_on_update(client):
    client.put(BASE, json={"key": "phone", "value": "+1"})

    response = client.put(BASE, json={"key": "phone", "value": ""})

    assert response.status_code == 400
    assert response.get_json()["code"] == "MISSING_VALUE"
    assert client.get(f"{BASE}?key=phone").get_json()["value"] == "+1"


def test_key_and_value_are_trimmed(client):
    setting = client.post(BASE, json={"key": "  about  ", "value": "  Art Road  "}).get_json()

    assert setting["key"] == "about"
    assert setting["value"] == "Art Road"


def test_get_by_key_and_not_found(client):
    client.post(BASE, json={"key": "company_phone", "value": "+971"})

    found = client.get(f"{BASE}?key=company_phone")
    assert found.status_code == 200
    assert found.get_json()["value"] == "+971"

    missing = client.get(f"{BASE}?key=unknown")
    assert missing.status_code == 404
    assert missing.get_json()["code"] == "SETTING_NOT_FOUND"


def test_get_many_keys(client):
    for key in ("a", "b", "c"):
        client.post(BASE, json={"key": key, "value": key.upper()})

    subset = client.get(BASE, query_string={"keys": "c, a ,missing"}).get_json()
    assert [s["key"] for s in subset] == ["a", "c"]

    empty = client.get(f"{BASE}?keys=,,")
    assert empty.status_code == 400
    assert empty.get_json()["code"] == "INVALID_KEYS"


def test_auxiliary_columns_are_written_piecemeal(client):
    created = client.put(
        BASE,
        json={
            "key": "branding",
            "value": "on",
            "description": "Brand assets",
            "heroBgUrl": "/img/hero.jpg",
            "logoDarkUrl": "/img/dark.svg",
        },
    ).get_json()
    assert created["themeMode"] == "dark"
    assert created["heroBgUrl"] == "/img/hero.jpg"

    updated = client.put(
        BASE,
        json={"key": "branding", "value": "on", "themeMode": " light ", "heroBgUrl": None},
    ).get_json()

    assert updated["themeMode"] == "light"
    assert updated["heroBgUrl"] is None
    # Absent columns stay untouched
    assert updated["logoDarkUrl"] == "/img/dark.svg"
    assert updated["description"] == "Brand assets"


def test_theme_mode_cannot_be_cleared(client):
    client.put(BASE, json={"key": "branding", "value": "on"})

    response = client.put(BASE, json={"key": "branding", "value": "on", "themeMode": ""})

    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_THEME_MODE"


def test_bulk_upsert(client):
    client.put(BASE, json={"key": "a", "value": "old"})

    response = client.put(
        BASE,
        json={"settings": [{"key": "a", "value": "new"}, {"key": "b", "value": "B"}]},
    )

    assert response.status_code == 200
    written = response.get_json()
    assert [(s["key"], s["value"]) for s in written] == [("a", "new"), ("b", "B")]


def test_bulk_failure_keeps_earlier_items(client):
    response = client.put(
        BASE,
        json={
            "settings": [
                {"key": "first", "value": "1"},
                {"key": "second", "value": ""},
                {"key": "third", "value": "3"},
            ]
        },
    )

    assert response.status_code == 400
    assert response.get_json()["code"] == "MISSING_VALUE"

    stored = [s["key"] for s in client.get(BASE).get_json()]
    assert stored == ["first"]


def test_bulk_requires_array(client):
    response = client.put(BASE, json={"settings": {"key": "a", "value": "b"}})

    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_BODY"


def test_delete_setting(client):
    client.post(BASE, json={"key": "temp", "value": "x"})

    deleted = client.delete(f"{BASE}?key=temp")
    assert deleted.status_code == 200
    assert deleted.get_json()["setting"]["key"] == "temp"

    assert client.delete(f"{BASE}?key=temp").get_json()["code"] == "SETTING_NOT_FOUND"
    assert client.delete(BASE).get_json()["code"] == "MISSING_KEY"
