"""Read-only brand API using MongoEngine."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets

from apps.car_models.mongo_models import Model
from apps.utils import api_error, api_success

from .mongo_models import Brand
from .mongo_serializers import BrandSerializer, ModelSummarySerializer
from .services import find_brand


class BrandViewSet(viewsets.ViewSet):
    """ViewSet for Brand."""

    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def list(self, request):
        """List all brands sorted by name."""
        brands = Brand.objects.all().order_by("name")
        serializer = BrandSerializer(brands, many=True)
        return api_success(
            "Brands retrieved successfully",
            {
                "brands": serializer.data,
                "count": len(serializer.data),
            },
        )

    def retrieve(self, request, pk=None):
        """Get brand by id, with its models."""
        brand = find_brand(pk)
        if brand is None:
            return api_error(
                "Brand does not exist.",
                data=None,
                status_code=status.HTTP_404_NOT_FOUND,
            )
        models = Model.objects(brand=brand.id).order_by("name")
        return api_success(
            "Brand retrieved successfully",
            {
                "brand": BrandSerializer(brand).data,
                "models": ModelSummarySerializer(models, many=True).data,
            },
        )
