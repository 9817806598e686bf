"""
API views for the entity browser.

Provides:
- WidgetPluginListView: List registered widget plugins
- WidgetListCreateView: List/create stored widget configurations
- WidgetFormView: Build a widget's form
- WidgetSubmitView: Validate and submit a widget's form
- WidgetConfigurationView: Get/update a widget's configuration form
"""

from __future__ import annotations

from django.shortcuts import get_object_or_404
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import NotFoundError
from entity_browser.models import WidgetConfiguration
from entity_browser.registry import list_widgets
from entity_browser.serializers import (
    WidgetConfigurationSerializer,
    WidgetConfigurationUpdateSerializer,
    WidgetSubmitSerializer,
    serialize_entities,
)
from entity_browser.services import WidgetService


class WidgetPluginListView(APIView):
    """
    List registered widget plugins.

    GET /api/v1/entity-browser/plugins/
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="list_widget_plugins",
        summary="List widget plugins",
        responses={200: OpenApiTypes.OBJECT},
        tags=["Entity Browser - Widgets"],
    )
    def get(self, request):
        return Response(list_widgets())


class WidgetListCreateView(APIView):
    """
    List or create widget configurations.

    GET /api/v1/entity-browser/widgets/?browser=<name>
    POST /api/v1/entity-browser/widgets/   (admin only)
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsAdminUser()]
        return [IsAuthenticated()]

    @extend_schema(
        operation_id="list_widgets",
        summary="List widget configurations",
        parameters=[
            OpenApiParameter(
                name="browser",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Only widgets of this entity browser",
                required=False,
            ),
        ],
        responses={200: WidgetConfigurationSerializer(many=True)},
        tags=["Entity Browser - Widgets"],
    )
    def get(self, request):
        widgets = WidgetConfiguration.objects.all()
        browser = request.query_params.get("browser")
        if browser:
            widgets = widgets.filter(browser=browser)
        return Response(WidgetConfigurationSerializer(widgets, many=True).data)

    @extend_schema(
        operation_id="create_widget",
        summary="Create widget configuration",
        request=WidgetConfigurationSerializer,
        responses={201: WidgetConfigurationSerializer},
        tags=["Entity Browser - Widgets"],
    )
    def post(self, request):
        serializer = WidgetConfigurationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        config = serializer.save()
        return Response(
            WidgetConfigurationSerializer(config).data,
            status=status.HTTP_201_CREATED,
        )


class WidgetFormView(APIView):
    """
    Build the form of a widget.

    GET /api/v1/entity-browser/widgets/{widget_id}/form/
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="get_widget_form",
        summary="Get widget form",
        responses={
            200: OpenApiTypes.OBJECT,
            404: OpenApiResponse(description="Widget or plugin not found"),
        },
        tags=["Entity Browser - Widgets"],
    )
    def get(self, request, widget_id):
        config = get_object_or_404(WidgetConfiguration, pk=widget_id)
        try:
            form = WidgetService.build_form(config)
        except NotFoundError as e:
            return Response(e.to_dict(), status=status.HTTP_404_NOT_FOUND)
        return Response({"widget": str(config.pk), "form": form.to_dict()})


class WidgetSubmitView(APIView):
    """
    Submit a widget form.

    POST /api/v1/entity-browser/widgets/{widget_id}/submit/

    Request:
        - values: form values, e.g. {"upload": ["<file id>", ...]}
        - trigger (optional): submitting button, default "actions"

    Response:
        200 OK: Selected entities
        400 Bad Request: Validation errors
        404 Not Found: Unknown widget or plugin
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="submit_widget",
        summary="Submit widget form",
        request=WidgetSubmitSerializer,
        responses={
            200: OpenApiTypes.OBJECT,
            400: OpenApiResponse(description="Validation failed"),
            404: OpenApiResponse(description="Widget or plugin not found"),
        },
        tags=["Entity Browser - Widgets"],
    )
    def post(self, request, widget_id):
        config = get_object_or_404(WidgetConfiguration, pk=widget_id)
        serializer = WidgetSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result = WidgetService.submit(
                config,
                values=serializer.validated_data["values"],
                trigger=serializer.validated_data["trigger"],
            )
        except NotFoundError as e:
            return Response(e.to_dict(), status=status.HTTP_404_NOT_FOUND)

        if not result.success:
            return Response(result.to_response(), status=status.HTTP_400_BAD_REQUEST)
        return Response({"entities": serialize_entities(result.data)})


class WidgetConfigurationView(APIView):
    """
    Widget configuration form.

    GET /api/v1/entity-browser/widgets/{widget_id}/configuration/
    PUT /api/v1/entity-browser/widgets/{widget_id}/configuration/
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="get_widget_configuration",
        summary="Get widget configuration form",
        responses={200: OpenApiTypes.OBJECT},
        tags=["Entity Browser - Configuration"],
    )
    def get(self, request, widget_id):
        config = get_object_or_404(WidgetConfiguration, pk=widget_id)
        try:
            form = WidgetService.build_configuration_form(config)
        except NotFoundError as e:
            return Response(e.to_dict(), status=status.HTTP_404_NOT_FOUND)
        return Response({"widget": str(config.pk), "form": form.to_dict()})

    @extend_schema(
        operation_id="update_widget_configuration",
        summary="Update widget configuration",
        request=WidgetConfigurationUpdateSerializer,
        responses={
            200: WidgetConfigurationSerializer,
            400: OpenApiResponse(description="Validation failed"),
        },
        tags=["Entity Browser - Configuration"],
    )
    def put(self, request, widget_id):
        config = get_object_or_404(WidgetConfiguration, pk=widget_id)
        serializer = WidgetConfigurationUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result = WidgetService.save_configuration(
                config, serializer.validated_data["values"]
            )
        except NotFoundError as e:
            return Response(e.to_dict(), status=status.HTTP_404_NOT_FOUND)

        if not result.success:
            return Response(result.to_response(), status=status.HTTP_400_BAD_REQUEST)
        return Response(WidgetConfigurationSerializer(result.data).data)
