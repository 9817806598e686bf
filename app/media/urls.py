"""
URL configuration for media app.

Media - Bundles:
    GET /bundles/                                 - List media bundles
    POST /bundles/add/                            - Create media bundle
"""

from django.urls import path

from media.views import MediaBundleCreateView, MediaBundleListView

app_name = "media"

urlpatterns = [
    path("bundles/", MediaBundleListView.as_view(), name="bundle-list"),
    path("bundles/add/", MediaBundleCreateView.as_view(), name="bundle-add"),
]
