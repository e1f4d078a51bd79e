"""Catalog home page."""

from __future__ import annotations

import logging

from django.shortcuts import render

from apps.brands.mongo_models import Brand
from apps.car_models.mongo_models import Feature, Model
from apps.utils import fetch_parallel
from apps.utils.middleware import STORE_ERRORS

logger = logging.getLogger(__name__)


def index(request):
    """Show how many brands, models and features the catalog holds."""
    error = None
    data = {}
    try:
        data = fetch_parallel(
            brand_count=Brand.objects.count,
            model_count=Model.objects.count,
            feature_count=Feature.objects.count,
        )
    except STORE_ERRORS as exc:
        logger.error("Could not count catalog documents: %s", exc)
        error = exc
    return render(request, "catalog/index.html", {"title": "Home", "error": error, "data": data})
