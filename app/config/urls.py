"""
URL configuration for the Django application.

URL Structure:
    /                              - ReDoc API documentation
    /admin/                        - Django admin interface
    /health/                       - Health check endpoint (for load balancers, Docker)
    /schema/                       - OpenAPI schema (YAML)
    /api/v1/media/                 - Media endpoints
        bundles/                   - List media bundles
        bundles/add/               - Create media bundle
    /api/v1/entity-browser/        - Entity browser endpoints
        plugins/                   - List widget plugins
        widgets/                   - List/create widget configurations
        widgets/{id}/form/         - Widget form
        widgets/{id}/submit/       - Submit widget form
        widgets/{id}/configuration/ - Widget configuration form (GET/PUT)

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView

from core.views import health_check

# =============================================================================
# API v1 Routes
# =============================================================================
api_v1_patterns = [
    # Media
    path("media/", include("media.urls")),
    # Entity browser
    path("entity-browser/", include("entity_browser.urls")),
]

urlpatterns = [
    # Documentation
    path("", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    # Admin
    path("admin/", admin.site.urls),
    # Health check (Docker, Kubernetes, load balancers)
    path("health/", health_check, name="health_check"),
    # API v1
    path("api/v1/", include(api_v1_patterns)),
]

admin.site.site_header = "Media Browser Admin"
admin.site.site_title = "Media Browser"
