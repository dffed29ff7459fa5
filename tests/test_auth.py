import pytest
from django.core import signing

from accounts.admin import UserCreationForm
from accounts.authentication import TOKEN_SALT
from accounts.models import User
from accounts.serializers import SignupSerializer


@pytest.mark.django_db
def test_signup_hashes_password_and_returns_token(client):
    resp = client.post(
        "/api/auth/signup",
        {"name": "Ada", "email": "Ada@Example.com", "password": "secret123"},
        content_type="application/json",
    )
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["user"]["email"] == "ada@example.com"
    assert data["user"]["role"] == "user"
    assert "password" not in data["user"]

    user = User.objects.get(email="ada@example.com")
    assert user.password != "secret123"
    assert user.check_password("secret123")

    me = client.get("/api/auth/me", HTTP_AUTHORIZATION=f"Bearer {data['token']}")
    assert me.status_code == 200
    assert me.json()["data"]["id"] == user.pk


@pytest.mark.django_db
def test_signup_rejects_duplicate_email_and_bad_fields(client, author):
    resp = client.post(
        "/api/auth/register",
        {"name": "A", "email": "AUTHOR@example.com", "password": "123"},
        content_type="application/json",
    )
    assert resp.status_code == 400
    fields = {e["field"] for e in resp.json()["errors"]}
    assert fields == {"name", "email", "password"}
    assert User.objects.count() == 1


@pytest.mark.django_db
def test_login_returns_token_for_valid_credentials(client, author):
    resp = client.post(
        "/api/auth/login",
        {"email": "author@example.com", "password": "secret123"},
        content_type="application/json",
    )
    assert resp.status_code == 200
    token = resp.json()["data"]["token"]
    assert signing.loads(token, salt=TOKEN_SALT) == {"user_id": author.pk}


@pytest.mark.django_db
def test_login_rejects_wrong_password(client, author):
    resp = client.post(
        "/api/auth/login",
        {"email": "author@example.com", "password": "wrong-password"},
        content_type="application/json",
    )
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "message": "Invalid email or password"}


@pytest.mark.django_db
def test_me_requires_token(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp["WWW-Authenticate"] == "Bearer"


@pytest.mark.django_db
def test_tampered_or_expired_token_is_rejected(client, author, bearer, settings):
    headers = bearer(author)
    resp = client.get("/api/auth/me", HTTP_AUTHORIZATION=headers["HTTP_AUTHORIZATION"] + "x")
    assert resp.status_code == 401
    assert resp.json()["message"] == "Not authorized, token failed"

    settings.AUTH_TOKEN_MAX_AGE = -1
    resp = client.get("/api/auth/me", **headers)
    assert resp.status_code == 401


@pytest.mark.django_db
def test_token_for_inactive_user_is_rejected(client, author, bearer):
    headers = bearer(author)
    author.is_active = False
    author.save()
    resp = client.get("/api/auth/me", **headers)
    assert resp.status_code == 401


@pytest.mark.django_db
def test_admin_created_user_with_mixed_case_email_can_log_in(client):
    form = UserCreationForm(
        data={
            "email": "Mixed@Example.com",
            "name": "Mixed",
            "password1": "Correct-Horse-42!",
            "password2": "Correct-Horse-42!",
        }
    )
    assert form.is_valid(), form.errors
    user = form.save()
    assert user.email == "mixed@example.com"

    resp = client.post(
        "/api/auth/login",
        {"email": "Mixed@Example.com", "password": "Correct-Horse-42!"},
        content_type="application/json",
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["user"]["id"] == user.pk


@pytest.mark.django_db
def test_signup_losing_email_race_is_400(client, monkeypatch):
    def register_first(self, value):
        # another request registers the address after the uniqueness check
        User.objects.create_user(email=value, password="secret123", name="Early")
        return value.lower()

    monkeypatch.setattr(SignupSerializer, "validate_email", register_first)
    resp = client.post(
        "/api/auth/signup",
        {"name": "Late", "email": "race@example.com", "password": "secret123"},
        content_type="application/json",
    )
    assert resp.status_code == 400
    assert resp.json()["errors"] == [{"field": "email", "message": "Email is already registered"}]
    assert User.objects.filter(email="race@example.com").count() == 1
