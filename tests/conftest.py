"""
Pytest configuration and shared fixtures.

Every test runs against a fresh in-memory MongoDB provided by mongomock.
"""

from datetime import datetime

import mongoengine
import mongomock
import pytest

from apps.brands.mongo_models import Brand
from apps.car_models.mongo_models import Feature, Model

TEST_DB_NAME = "carcatalog_test"

PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture(autouse=True)
def mongo_db():
    """Point mongoengine at a clean mongomock database."""
    mongoengine.disconnect(alias="default")
    connection = mongoengine.connect(
        TEST_DB_NAME,
        alias="default",
        mongo_client_class=mongomock.MongoClient,
    )
    yield connection
    connection.drop_database(TEST_DB_NAME)
    mongoengine.disconnect(alias="default")


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Send uploads to a temporary directory."""
    settings.MEDIA_ROOT = tmp_path
    settings.BRAND_LOGO_ROOT = tmp_path / "brand"
    return tmp_path


@pytest.fixture
def make_brand():
    """Factory for saved Brand documents."""

    def _make(name="Acme", founded=None, logo=None):
        return Brand(name=name, founded=founded, logo=logo).save()

    return _make


@pytest.fixture
def make_model():
    """Factory for saved Model documents attached to a brand."""

    def _make(brand, name="Roadster", features=None):
        return Model(name=name, brand=brand.id, features=features or []).save()

    return _make


@pytest.fixture
def acme(make_brand):
    """A saved brand founded on 1980-01-01."""
    return make_brand(name="Acme", founded=datetime(1980, 1, 1))


@pytest.fixture
def feature():
    """A saved Feature document."""
    return Feature(name="Turbo").save()


@pytest.fixture
def png_upload():
    """A small PNG posted as the logo field."""
    from django.core.files.uploadedfile import SimpleUploadedFile

    return SimpleUploadedFile("acme.png", PNG_BYTES, content_type="image/png")


@pytest.fixture
def text_upload():
    """A plain text file posted as the logo field."""
    from django.core.files.uploadedfile import SimpleUploadedFile

    return SimpleUploadedFile("notes.txt", b"not an image", content_type="text/plain")
