import pytest

from blog.models import Post


@pytest.mark.django_db
def test_slug_falls_back_for_symbol_titles(make_post):
    assert make_post(title="!!!").slug == "post"
    assert make_post(title="???").slug == "post-2"


@pytest.mark.django_db
def test_slug_survives_title_change(make_post):
    post = make_post(title="First name")
    post.title = "Second name"
    post.save()
    post.refresh_from_db()
    assert post.slug == "first-name"


@pytest.mark.django_db
def test_increment_view_count(make_post):
    post = make_post()
    post.increment_view_count()
    post.increment_view_count()
    assert post.view_count == 2
    assert Post.objects.get(pk=post.pk).view_count == 2


@pytest.mark.django_db
def test_add_comment(make_post, stranger):
    post = make_post()
    comment = post.add_comment(stranger, "Nice post")
    assert list(post.comments.all()) == [comment]
    assert comment.user == stranger


@pytest.mark.django_db
def test_create_superuser_is_admin(django_user_model):
    admin = django_user_model.objects.create_superuser(email="root@example.com", password="pw", name="Root")
    assert admin.is_staff and admin.is_superuser
    assert admin.role == "admin"


@pytest.mark.django_db
def test_slug_taken_between_lookup_and_insert_is_retried(make_post, author, category, monkeypatch):
    make_post(title="Same title")
    lookup = Post._unique_slug
    calls = []

    def stale_then_fresh(self):
        calls.append(1)
        # the first lookup misses a row inserted by another request
        return "same-title" if len(calls) == 1 else lookup(self)

    monkeypatch.setattr(Post, "_unique_slug", stale_then_fresh)
    post = Post.objects.create(title="Same title", content="Another body text", author=author, category=category)
    assert post.slug == "same-title-2"
    assert len(calls) == 2
    assert Post.objects.filter(slug__startswith="same-title").count() == 2


@pytest.mark.django_db
def test_user_email_is_stored_lower_cased(django_user_model):
    user = django_user_model(email="Mixed@Example.COM", name="Mixed")
    user.set_password("secret123")
    user.save()
    user.refresh_from_db()
    assert user.email == "mixed@example.com"
