"""Custom middleware for the car catalog project."""

from __future__ import annotations

import logging

from django.shortcuts import render
from mongoengine.errors import OperationError
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

STORE_ERRORS = (PyMongoError, OperationError)


def render_store_failure(request, cause: Exception):
    """Render the generic failure page for a data store error."""
    return render(
        request,
        "catalog/error.html",
        {"title": "Error", "message": "The catalog database is unavailable.", "error": cause},
        status=500,
    )


class StoreErrorMiddleware:
    """
    Turn uncaught data store errors into the failure page.

    Brand workflow errors are already returned as results by the service;
    this catches the ones raised anywhere else.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not isinstance(exception, STORE_ERRORS):
            return None
        logger.error("Unhandled data store error on %s: %s", request.path, exception)
        return render_store_failure(request, exception)
