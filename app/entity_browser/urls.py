"""
URL configuration for entity browser app.

Entity Browser - Widgets:
    GET /plugins/                                  - List widget plugins
    GET /widgets/                                  - List widget configurations
    POST /widgets/                                 - Create widget configuration
    GET /widgets/{widget_id}/form/                 - Build widget form
    POST /widgets/{widget_id}/submit/              - Submit widget form

Entity Browser - Configuration:
    GET /widgets/{widget_id}/configuration/        - Configuration form
    PUT /widgets/{widget_id}/configuration/        - Save configuration
"""

from django.urls import path

from entity_browser.views import (
    WidgetConfigurationView,
    WidgetFormView,
    WidgetListCreateView,
    WidgetPluginListView,
    WidgetSubmitView,
)

app_name = "entity_browser"

urlpatterns = [
    path("plugins/", WidgetPluginListView.as_view(), name="plugin-list"),
    path("widgets/", WidgetListCreateView.as_view(), name="widget-list"),
    path("widgets/<uuid:widget_id>/form/", WidgetFormView.as_view(), name="widget-form"),
    path(
        "widgets/<uuid:widget_id>/submit/",
        WidgetSubmitView.as_view(),
        name="widget-submit",
    ),
    path(
        "widgets/<uuid:widget_id>/configuration/",
        WidgetConfigurationView.as_view(),
        name="widget-configuration",
    ),
]
