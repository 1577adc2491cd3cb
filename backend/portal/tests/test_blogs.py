"""
Tests for blog endpoints and the approval workflow.
"""
from portal.models import BlogPost


def blog_payload(**overrides):
    payload = {
        "title": "Getting started with FastAPI",
        "content": "Routers, dependencies and schemas.",
        "excerpt": "A short intro",
        "category": "Web Dev"
    }
    payload.update(overrides)
    return payload


def create_blog(client, headers, **overrides):
    response = client.post("/api/blogs", json=blog_payload(**overrides), headers=headers)
    assert response.status_code == 201
    return response.json()["data"]["blog"]


def test_create_requires_auth(client):
    assert client.post("/api/blogs", json=blog_payload()).status_code == 401


def test_student_post_is_pending(client, student_headers):
    blog = create_blog(client, student_headers)
    assert blog["status"] == "PENDING"
    assert blog["is_admin_post"] is False


def test_admin_post_is_approved(client, admin_headers):
    response = client.post("/api/blogs", json=blog_payload(), headers=admin_headers)
    assert response.json()["message"] == "Blog published successfully"
    blog = response.json()["data"]["blog"]
    assert blog["status"] == "APPROVED"
    assert blog["is_admin_post"] is True


def test_create_validation(client, student_headers, db):
    response = client.post("/api/blogs", json=blog_payload(title="   "), headers=student_headers)
    assert response.status_code == 400
    assert db.query(BlogPost).count() == 0


def test_public_listing_excludes_unapproved(client, student_headers, admin_headers):
    pending = create_blog(client, student_headers, title="Pending FastAPI")
    rejected = create_blog(client, student_headers, title="Rejected FastAPI")
    client.post(f"/api/blogs/{rejected['id']}/reject", headers=admin_headers)
    approved = create_blog(client, admin_headers, title="Approved FastAPI")

    for params in ({}, {"search": "fastapi"}, {"category": "Web Dev"}):
        blogs = client.get("/api/blogs", params=params).json()["data"]["blogs"]
        ids = [b["id"] for b in blogs]
        assert ids == [approved["id"]]
        assert pending["id"] not in ids


def test_public_listing_search_and_category(client, admin_headers):
    create_blog(client, admin_headers, title="Docker basics", category="DevOps")
    create_blog(client, admin_headers, title="CSS grid", category="CSS", content="Layouts with DOCKER-free tooling")
    create_blog(client, admin_headers, title="React hooks", category="React")

    data = client.get("/api/blogs", params={"search": "docker"}).json()["data"]
    assert {b["title"] for b in data["blogs"]} == {"Docker basics", "CSS grid"}

    data = client.get("/api/blogs", params={"category": "React"}).json()["data"]
    assert [b["title"] for b in data["blogs"]] == ["React hooks"]

    data = client.get("/api/blogs", params={"category": "All"}).json()["data"]
    assert data["pagination"]["total"] == 3
    assert data["categories"] == ["All", "CSS", "DevOps", "React"]


def test_public_listing_pagination(client, admin_headers):
    for i in range(5):
        create_blog(client, admin_headers, title=f"Post {i}")

    data = client.get("/api/blogs", params={"page": 2, "limit": 2}).json()["data"]
    assert data["pagination"] == {"page": 2, "limit": 2, "total": 5, "pages": 3}
    assert [b["title"] for b in data["blogs"]] == ["Post 2", "Post 1"]


def test_invalid_page_rejected(client):
    assert client.get("/api/blogs", params={"page": 0}).status_code == 400


def test_get_pending_blog_by_id(client, student_headers):
    blog = create_blog(client, student_headers)
    response = client.get(f"/api/blogs/{blog['id']}")
    assert response.status_code == 200
    assert response.json()["data"]["blog"]["status"] == "PENDING"


def test_get_missing_blog(client):
    response = client.get("/api/blogs/999")
    assert response.status_code == 404
    assert response.json()["message"] == "Blog post not found"


def test_approve_reject_require_admin(client, student_headers, admin_headers):
    blog = create_blog(client, student_headers)

    assert client.post(f"/api/blogs/{blog['id']}/approve", headers=student_headers).status_code == 403
    assert client.post(f"/api/blogs/{blog['id']}/reject", headers=student_headers).status_code == 403
    assert client.post(f"/api/blogs/{blog['id']}/approve").status_code == 401

    response = client.post(f"/api/blogs/{blog['id']}/reject", headers=admin_headers)
    assert response.json()["data"]["blog"]["status"] == "REJECTED"
    response = client.post(f"/api/blogs/{blog['id']}/approve", headers=admin_headers)
    assert response.json()["data"]["blog"]["status"] == "APPROVED"


def test_approve_missing_blog(client, admin_headers):
    assert client.post("/api/blogs/999/approve", headers=admin_headers).status_code == 404


def test_approval_freeze(client, student_headers, admin_headers):
    blog = create_blog(client, student_headers)
    client.post(f"/api/blogs/{blog['id']}/approve", headers=admin_headers)

    response = client.put(f"/api/blogs/{blog['id']}", json={"title": "Changed"}, headers=student_headers)
    assert response.status_code == 403
    assert response.json()["message"] == "Cannot edit approved content"
    response = client.delete(f"/api/blogs/{blog['id']}", headers=student_headers)
    assert response.status_code == 403

    response = client.put(f"/api/blogs/{blog['id']}", json={"title": "Changed"}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["data"]["blog"]["title"] == "Changed"
    assert response.json()["data"]["blog"]["status"] == "APPROVED"


def test_author_edits_pending_post(client, student_headers):
    blog = create_blog(client, student_headers)
    response = client.put(
        f"/api/blogs/{blog['id']}",
        json={"excerpt": "Updated excerpt"},
        headers=student_headers
    )
    assert response.status_code == 200
    updated = response.json()["data"]["blog"]
    assert updated["excerpt"] == "Updated excerpt"
    assert updated["title"] == blog["title"]


def test_editing_rejected_post_keeps_status(client, student_headers, admin_headers):
    blog = create_blog(client, student_headers)
    client.post(f"/api/blogs/{blog['id']}/reject", headers=admin_headers)

    response = client.put(f"/api/blogs/{blog['id']}", json={"title": "Second try"}, headers=student_headers)
    assert response.status_code == 200
    assert response.json()["data"]["blog"]["status"] == "REJECTED"


def test_non_author_cannot_edit_or_delete(client, student_headers, other_headers):
    blog = create_blog(client, student_headers)
    assert client.put(f"/api/blogs/{blog['id']}", json={"title": "Mine"}, headers=other_headers).status_code == 403
    assert client.delete(f"/api/blogs/{blog['id']}", headers=other_headers).status_code == 403


def test_missing_blog_is_not_found_before_forbidden(client, other_headers):
    assert client.put("/api/blogs/999", json={"title": "x"}, headers=other_headers).status_code == 404
    assert client.delete("/api/blogs/999", headers=other_headers).status_code == 404


def test_author_deletes_pending_post(client, student_headers, db):
    blog = create_blog(client, student_headers)
    assert client.delete(f"/api/blogs/{blog['id']}", headers=student_headers).status_code == 200
    assert db.query(BlogPost).count() == 0


def test_pending_queue_oldest_first(client, student_headers, other_headers, admin_headers):
    first = create_blog(client, student_headers, title="t1")
    second = create_blog(client, other_headers, title="t2")
    third = create_blog(client, student_headers, title="t3")
    create_blog(client, admin_headers, title="already approved")

    response = client.get("/api/blogs/admin/pending", headers=admin_headers)
    assert response.status_code == 200
    ids = [b["id"] for b in response.json()["data"]["blogs"]]
    assert ids == [first["id"], second["id"], third["id"]]


def test_pending_queue_requires_admin(client, student_headers):
    assert client.get("/api/blogs/admin/pending", headers=student_headers).status_code == 403
    assert client.get("/api/blogs/admin/pending").status_code == 401


def test_my_blogs_lists_all_statuses(client, student_headers, other_headers, admin_headers):
    pending = create_blog(client, student_headers)
    rejected = create_blog(client, student_headers)
    client.post(f"/api/blogs/{rejected['id']}/reject", headers=admin_headers)
    create_blog(client, other_headers)

    data = client.get("/api/blogs/my-blogs", headers=student_headers).json()["data"]
    assert data["pagination"]["total"] == 2
    assert {b["id"] for b in data["blogs"]} == {pending["id"], rejected["id"]}


def test_alice_scenario(client, admin_headers):
    payload = {
        "full_name": "Alice",
        "email": "alice@example.com",
        "password": "secret123",
        "student_id": "S1",
        "course": "IT",
        "year_of_study": 1
    }
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 201
    assert response.json()["data"]["user"]["role"] == "STUDENT"
    alice = {"Authorization": f"Bearer {response.json()['data']['token']}"}

    assert client.post("/api/auth/register", json=payload).status_code == 409
    assert client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "wrong-password"}
    ).status_code == 401

    blog = create_blog(client, alice)
    assert blog["status"] == "PENDING"

    response = client.post(f"/api/blogs/{blog['id']}/approve", headers=admin_headers)
    assert response.json()["data"]["blog"]["status"] == "APPROVED"

    assert client.delete(f"/api/blogs/{blog['id']}", headers=alice).status_code == 403
    assert client.delete(f"/api/blogs/{blog['id']}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/blogs/{blog['id']}").status_code == 404
