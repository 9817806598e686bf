"""
API views for media bundles.

Provides:
- MediaBundleListView: List bundles, optionally filtered by source
- MediaBundleCreateView: Create a bundle (target of "create one" links)
"""

from __future__ import annotations

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from media.models import MediaBundle
from media.serializers import MediaBundleSerializer

logger = logging.getLogger(__name__)


class MediaBundleListView(APIView):
    """
    List media bundles.

    GET /api/v1/media/bundles/?source=audio
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="list_media_bundles",
        summary="List media bundles",
        parameters=[
            OpenApiParameter(
                name="source",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Only bundles using this source plugin",
                required=False,
                enum=MediaBundle.Source.values,
            ),
        ],
        responses={200: MediaBundleSerializer(many=True)},
        tags=["Media - Bundles"],
    )
    def get(self, request):
        bundles = MediaBundle.objects.all()
        source = request.query_params.get("source")
        if source:
            bundles = bundles.filter(source=source)
        return Response(MediaBundleSerializer(bundles, many=True).data)


class MediaBundleCreateView(APIView):
    """
    Create a media bundle.

    POST /api/v1/media/bundles/add/

    Response:
        201 Created: Bundle created
        400 Bad Request: Validation error (duplicate id, unknown source)
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="create_media_bundle",
        summary="Create media bundle",
        request=MediaBundleSerializer,
        responses={201: MediaBundleSerializer},
        tags=["Media - Bundles"],
    )
    def post(self, request):
        serializer = MediaBundleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        bundle = serializer.save()
        logger.info(f"Media bundle {bundle.id} created with source {bundle.source}")
        return Response(MediaBundleSerializer(bundle).data, status=status.HTTP_201_CREATED)
