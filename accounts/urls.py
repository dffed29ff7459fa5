from django.urls import path
from . import views


app_name = "accounts"

urlpatterns = [
    path("signup", views.signup, name="signup"),
    path("register", views.signup, name="register"),
    path("login", views.login, name="login"),
    path("me", views.me, name="me"),
]
