from django.urls import path
from . import views


app_name = "blog"

urlpatterns = [
    path("posts", views.post_list, name="post_list"),
    path("posts/search", views.search_posts, name="post_search"),
    path("posts/<str:pk>/comments", views.add_comment, name="post_comments"),
    path("posts/<str:id_or_slug>", views.post_detail, name="post_detail"),
    path("categories", views.category_list, name="category_list"),
]
