"""
Tests for gallery endpoints.
"""
from datetime import date, datetime
from portal.models import Event, GalleryPhoto


def make_event(db, author, title="Open day"):
    event = Event(
        title=title, description="Come along", date=date.today(), time="12:00",
        location="Campus", author_id=author.id, status="APPROVED", is_admin_post=True
    )
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


def test_upload_requires_admin(client, student_headers):
    response = client.post("/api/gallery", json={"image_url": "https://img/1.jpg"}, headers=student_headers)
    assert response.status_code == 403
    assert client.post("/api/gallery", json={"image_url": "https://img/1.jpg"}).status_code == 401


def test_upload_and_fetch(client, db, admin, admin_headers):
    event = make_event(db, admin)
    response = client.post(
        "/api/gallery",
        json={"image_url": "https://img/1.jpg", "caption": "Crowd", "event_id": event.id},
        headers=admin_headers
    )
    assert response.status_code == 201
    photo = response.json()["data"]["photo"]
    assert photo["event"] == {"id": event.id, "title": "Open day"}

    fetched = client.get(f"/api/gallery/{photo['id']}").json()["data"]["photo"]
    assert fetched["caption"] == "Crowd"


def test_upload_with_unknown_event(client, admin_headers):
    response = client.post(
        "/api/gallery",
        json={"image_url": "https://img/1.jpg", "event_id": 999},
        headers=admin_headers
    )
    assert response.status_code == 404


def test_upload_requires_image_url(client, admin_headers):
    assert client.post("/api/gallery", json={"caption": "x"}, headers=admin_headers).status_code == 400


def test_listing_filters(client, db, admin):
    event = make_event(db, admin)
    db.add_all([
        GalleryPhoto(image_url="a.jpg", event_id=event.id, uploaded_at=datetime(2024, 5, 1)),
        GalleryPhoto(image_url="b.jpg", uploaded_at=datetime(2025, 3, 1)),
        GalleryPhoto(image_url="c.jpg", uploaded_at=datetime(2025, 9, 1)),
    ])
    db.commit()

    data = client.get("/api/gallery").json()["data"]
    assert [p["image_url"] for p in data["photos"]] == ["c.jpg", "b.jpg", "a.jpg"]
    assert data["filters"]["years"] == [2025, 2024]
    assert data["filters"]["events"][0] == {"id": "All", "title": "All Events"}
    assert data["filters"]["events"][1]["id"] == event.id

    by_year = client.get("/api/gallery", params={"year": 2025}).json()["data"]
    assert by_year["pagination"]["total"] == 2

    by_event = client.get("/api/gallery", params={"event_id": str(event.id)}).json()["data"]
    assert [p["image_url"] for p in by_event["photos"]] == ["a.jpg"]

    everything = client.get("/api/gallery", params={"event_id": "All"}).json()["data"]
    assert everything["pagination"]["total"] == 3

    assert client.get("/api/gallery", params={"event_id": "abc"}).status_code == 400


def test_update_and_delete(client, admin_headers, student_headers):
    photo = client.post(
        "/api/gallery", json={"image_url": "https://img/1.jpg"}, headers=admin_headers
    ).json()["data"]["photo"]

    assert client.put(f"/api/gallery/{photo['id']}", json={"caption": "x"}, headers=student_headers).status_code == 403

    response = client.put(f"/api/gallery/{photo['id']}", json={"caption": "New caption"}, headers=admin_headers)
    assert response.json()["data"]["photo"]["caption"] == "New caption"

    assert client.delete(f"/api/gallery/{photo['id']}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/gallery/{photo['id']}").status_code == 404
    assert client.delete(f"/api/gallery/{photo['id']}", headers=admin_headers).status_code == 404


def test_deleting_event_detaches_photos(client, db, admin, admin_headers):
    event = make_event(db, admin)
    photo = client.post(
        "/api/gallery",
        json={"image_url": "https://img/1.jpg", "event_id": event.id},
        headers=admin_headers
    ).json()["data"]["photo"]

    assert client.delete(f"/api/events/{event.id}", headers=admin_headers).status_code == 200

    fetched = client.get(f"/api/gallery/{photo['id']}").json()["data"]["photo"]
    assert fetched["event_id"] is None
    assert fetched["event"] is None


def test_listing_last_representable_year(client, db):
    db.add_all([
        GalleryPhoto(image_url="old.jpg", uploaded_at=datetime(2024, 1, 1)),
        GalleryPhoto(image_url="far.jpg", uploaded_at=datetime(9999, 6, 1)),
    ])
    db.commit()

    response = client.get("/api/gallery", params={"year": 9999})
    assert response.status_code == 200
    assert [p["image_url"] for p in response.json()["data"]["photos"]] == ["far.jpg"]
    assert client.get("/api/gallery", params={"year": 10000}).status_code == 400
