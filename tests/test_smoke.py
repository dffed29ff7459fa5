from django.test import Client
import pytest


def test_schema_endpoint_ok():
    client = Client()
    resp = client.get("/api/schema/")
    assert resp.status_code == 200


def test_docs_endpoint_ok():
    client = Client()
    resp = client.get("/api/docs/")
    assert resp.status_code == 200


@pytest.mark.django_db
def test_frontend_shell_served():
    client = Client()
    resp = client.get("/")
    assert resp.status_code == 200
    assert b'id="app"' in resp.content


@pytest.mark.django_db
def test_api_status():
    client = Client()
    resp = client.get("/api/")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Blog API is running"}


@pytest.mark.django_db
def test_accounts_login_page():
    client = Client()
    resp = client.get("/accounts/login/")
    assert resp.status_code == 200
