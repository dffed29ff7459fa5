from django.conf import settings
from django.contrib import admin
from django.urls import path, include, re_path
from django.views.static import serve
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView
from . import views


urlpatterns = [
    path("admin/", admin.site.urls),
    # allauth
    path("accounts/", include("allauth.urls")),
    # Frontend shell & status
    path("", views.home, name="home"),
    path("api/", views.api_status, name="api-status"),
    # JSON API
    path("api/auth/", include("accounts.urls")),
    path("api/", include("blog.urls")),
    # Uploaded files
    re_path(r"^uploads/(?P<path>.*)$", serve, {"document_root": settings.MEDIA_ROOT}),
# OpenAPI schema and docs
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]

handler404 = "config.views.not_found"
handler500 = "config.views.server_error"
