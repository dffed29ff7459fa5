import pytest

from blog.models import Category


@pytest.mark.django_db
def test_list_categories_sorted_by_name(client):
    for name in ("Travel", "Food", "Tech"):
        Category.objects.create(name=name)

    resp = client.get("/api/categories")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [c["name"] for c in data["categories"]] == ["Food", "Tech", "Travel"]
    assert data["count"] == 3


@pytest.mark.django_db
def test_create_category(client):
    resp = client.post(
        "/api/categories",
        {"name": "Science", "description": "Papers and experiments"},
        content_type="application/json",
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["name"] == "Science"
    assert Category.objects.filter(name="Science").count() == 1


@pytest.mark.django_db
def test_duplicate_category_is_409_and_not_created(client):
    Category.objects.create(name="Science")

    resp = client.post("/api/categories", {"name": "Science"}, content_type="application/json")
    assert resp.status_code == 409
    assert resp.json() == {"success": False, "message": "Category already exists"}
    assert Category.objects.filter(name="Science").count() == 1


@pytest.mark.django_db
def test_create_category_validation(client):
    resp = client.post(
        "/api/categories",
        {"name": "x", "description": "d" * 201},
        content_type="application/json",
    )
    assert resp.status_code == 400
    assert resp.json()["errors"] == [
        {"field": "name", "message": "Category name must be between 2 and 50 characters"},
        {"field": "description", "message": "Description cannot exceed 200 characters"},
    ]
    assert not Category.objects.exists()
