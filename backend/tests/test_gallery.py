# tests/test_gallery.py

BASE = "/api/v1/gallery"


def _create(client, payload):
    response = client.post(BASE, json=payload)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_category_must_be_in_enum(client, gallery_payload):
    rejected = client.post(BASE, json=gallery_payload(category="invalid"))
    assert rejected.status_code == 400
    assert rejected.get_json()["code"] == "INVALID_CATEGORY"

    accepted = client.post(BASE, json=gallery_payload(category="events"))
    assert accepted.status_code == 201
    assert accepted.get_json()["category"] == "events"


def test_category_is_required(client, gallery_payload):
    payload = gallery_payload()
    del payload["category"]

    response = client.post(BASE, json=payload)

    assert response.status_code == 400
    assert response.get_json()["code"] == "MISSING_REQUIRED_FIELD"


def test_category_update_is_enum_checked(client, gallery_payload):
    item = _create(client, gallery_payload())

    response = client.put(f"{BASE}?id={item['id']}", json={"category": "fireworks"})
    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_CATEGORY"

    response = client.put(f"{BASE}?id={item['id']}", json={"category": "led-panels"})
    assert response.status_code == 200
    assert response.get_json()["category"] == "led-panels"


def test_defaults(client, gallery_payload):
    item = _create(client, gallery_payload())

    assert item["orderIndex"] == 0
    assert item["isFeatured"] is False
    assert item["isActive"] is True
    assert item["showOnHomepage"] is False


def test_default_limit_is_twelve(client, gallery_payload):
    for index in range(14):
        _create(client, gallery_payload(orderIndex=index))

    assert len(client.get(BASE).get_json()) == 12


def test_category_filter(client, gallery_payload):
    _create(client, gallery_payload(titleEn="Gala", category="events"))
    _create(client, gallery_payload(titleEn="Wall", category="3d-decoration"))

    events = client.get(f"{BASE}?category=events").get_json()
    assert [i["titleEn"] for i in events] == ["Gala"]

    bad = client.get(f"{BASE}?category=unknown")
    assert bad.status_code == 400
    assert bad.get_json()["code"] == "INVALID_CATEGORY"


def test_featured_filter_and_alias(client, gallery_payload):
    _create(client, gallery_payload(titleEn="Star", isFeatured=True))
    _create(client, gallery_payload(titleEn="Regular"))

    featured = client.get(f"{BASE}?isFeatured=true").get_json()
    assert [i["titleEn"] for i in featured] == ["Star"]

    aliased = client.get(f"{BASE}?featured=true").get_json()
    assert [i["titleEn"] for i in aliased] == ["Star"]

    not_featured = client.get(f"{BASE}?featured=false").get_json()
    assert [i["titleEn"] for i in not_featured] == ["Regular"]


def test_homepage_filter(client, gallery_payload):
    _create(client, gallery_payload(titleEn="Home", showOnHomepage=True))
    _create(client, gallery_payload(titleEn="Archive"))

    listed = client.get(f"{BASE}?showOnHomepage=true").get_json()

    assert [i["titleEn"] for i in listed] == ["Home"]


def test_delete_and_not_found(client, gallery_payload):
    item = _create(client, gallery_payload())

    deleted = client.delete(f"{BASE}?id={item['id']}")
    assert deleted.status_code == 200
    assert deleted.get_json()["galleryItem"]["id"] == item["id"]

    again = client.delete(f"{BASE}?id={item['id']}")
    assert again.status_code == 404
    assert again.get_json()["code"] == "GALLERY_ITEM_NOT_FOUND"
