import pytest

from accounts.authentication import issue_token
from accounts.models import User
from blog.models import Category, Post


@pytest.fixture
def author(db):
    return User.objects.create_user(email="author@example.com", password="secret123", name="Author")


@pytest.fixture
def stranger(db):
    return User.objects.create_user(email="stranger@example.com", password="secret123", name="Stranger")


@pytest.fixture
def bearer():
    def _headers(user):
        return {"HTTP_AUTHORIZATION": f"Bearer {issue_token(user)}"}
    return _headers


@pytest.fixture
def category(db):
    return Category.objects.create(name="Tech", description="Software and gadgets")


@pytest.fixture
def make_post(author, category):
    def _make(**kwargs):
        fields = {
            "title": "Hello world",
            "content": "Welcome to the sample blog!",
            "author": author,
            "category": category,
        }
        fields.update(kwargs)
        return Post.objects.create(**fields)
    return _make
