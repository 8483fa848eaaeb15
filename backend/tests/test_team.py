# tests/test_team.py

BASE = "/api/v1/team"


def _create(client, payload):
    response = client.post(BASE, json=payload)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_delete_unknown_member_changes_nothing(client, team_payload):
    _create(client, team_payload())
    before = len(client.get(BASE).get_json())

    response = client.delete(f"{BASE}?id=99999")

    assert response.status_code == 404
    assert response.get_json()["code"] == "TEAM_MEMBER_NOT_FOUND"
    assert len(client.get(BASE).get_json()) == before


def test_all_locales_required_together(client, team_payload):
    payload = team_payload()
    del payload["nameAr"]

    response = client.post(BASE, json=payload)

    assert response.status_code == 400
    assert response.get_json()["code"] == "MISSING_REQUIRED_FIELD"


def test_order_index_filter(client, team_payload):
    _create(client, team_payload(nameEn="Lead designer", orderIndex=1))
    _create(client, team_payload(nameEn="Installer", orderIndex=2))

    first = client.get(f"{BASE}?orderIndex=1").get_json()
    assert [m["nameEn"] for m in first] == ["Lead designer"]

    # Non-integer filter values are ignored
    everyone = client.get(f"{BASE}?orderIndex=first").get_json()
    assert len(everyone) == 2

    # So are integers too large to store
    huge = client.get(f"{BASE}?orderIndex=99999999999999999999")
    assert huge.status_code == 200
    assert len(huge.get_json()) == 2


def test_sort_by_name_and_search(client, team_payload):
    _create(client, team_payload(nameEn="Yara", nameFr="Yara"))
    _create(client, team_payload(nameEn="Ali", nameFr="Ali"))

    by_name = client.get(f"{BASE}?sort=nameEn").get_json()
    assert [m["nameEn"] for m in by_name] == ["Ali", "Yara"]

    found = client.get(f"{BASE}?search=yar").get_json()
    assert [m["nameEn"] for m in found] == ["Yara"]


def test_update_photo(client, team_payload):
    member = _create(client, team_payload())

    response = client.put(
        f"{BASE}?id={member['id']}", json={"photoUrl": " /images/team/new.jpg "}
    )

    assert response.status_code == 200
    updated = response.get_json()
    assert updated["photoUrl"] == "/images/team/new.jpg"
    assert updated["nameEn"] == member["nameEn"]
