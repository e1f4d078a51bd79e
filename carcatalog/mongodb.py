"""MongoDB connection setup with mongoengine."""

from __future__ import annotations

import logging

import mongoengine
from django.conf import settings

logger = logging.getLogger(__name__)


def connect_mongodb() -> None:
    """Open the default mongoengine connection."""
    mongo_uri = getattr(settings, "MONGO_URI", "mongodb://localhost:27017/carcatalog")
    db_name = getattr(settings, "MONGODB_DB_NAME", "carcatalog")

    try:
        mongoengine.connect(
            db=db_name,
            host=mongo_uri,
            alias="default",
        )
        logger.info("Connected to MongoDB database %s", db_name)
    except Exception as e:
        logger.error("MongoDB connection failed: %s", e)
        raise
