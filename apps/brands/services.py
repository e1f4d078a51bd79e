"""Brand workflow: list, detail, create, update, delete and logo upload."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from bson import ObjectId

from apps.car_models.mongo_models import Model
from apps.utils import fetch_parallel
from apps.utils.middleware import STORE_ERRORS

from .mongo_models import Brand
from .mongo_serializers import BrandForm, FieldError, validate_brand_form
from .uploads import LogoUploadHandler, UploadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok:
    value: Any = None


@dataclass(frozen=True)
class NotFound:
    id: str


@dataclass(frozen=True)
class ValidationFailed:
    form: BrandForm
    errors: list[FieldError]


@dataclass(frozen=True)
class DeleteBlocked:
    brand: Brand
    models: list[Model]


@dataclass(frozen=True)
class UploadRejected:
    brand: Brand
    message: str


@dataclass(frozen=True)
class StoreError:
    cause: Exception


BrandResult = Union[Ok, NotFound, ValidationFailed, DeleteBlocked, UploadRejected, StoreError]


@dataclass(frozen=True)
class BrandDetail:
    brand: Brand
    models: list[Model] = field(default_factory=list)


def _store_guarded(method):
    """Return StoreError instead of letting a database failure escape."""

    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except STORE_ERRORS as exc:
            logger.exception("Data store failure in %s", method.__name__)
            return StoreError(exc)

    return wrapper


def _object_id(pk) -> Optional[ObjectId]:
    if isinstance(pk, ObjectId):
        return pk
    if pk is None or not ObjectId.is_valid(str(pk)):
        return None
    return ObjectId(str(pk))


def find_brand(pk) -> Optional[Brand]:
    oid = _object_id(pk)
    if oid is None:
        return None
    return Brand.objects(id=oid).first()


def find_brand_models(pk) -> list[Model]:
    oid = _object_id(pk)
    if oid is None:
        return []
    return list(Model.objects(brand=oid).order_by("name"))


class BrandService:
    """Composes validation, persistence and uploads for brands.

    Every public method returns one of the result dataclasses above; none
    of them raise for store failures.
    """

    def __init__(self, upload_handler: Optional[LogoUploadHandler] = None) -> None:
        self.upload_handler = upload_handler

    @_store_guarded
    def list_brands(self) -> BrandResult:
        brands = Brand.objects.only("name", "founded", "logo").order_by("name")
        return Ok(list(brands))

    @_store_guarded
    def get_brand(self, pk) -> BrandResult:
        brand = find_brand(pk)
        if brand is None:
            return NotFound(str(pk))
        return Ok(brand)

    @_store_guarded
    def brand_detail(self, pk) -> BrandResult:
        results = fetch_parallel(
            brand=lambda: find_brand(pk),
            models=lambda: find_brand_models(pk),
        )
        if results["brand"] is None:
            return NotFound(str(pk))
        return Ok(BrandDetail(brand=results["brand"], models=results["models"]))

    @_store_guarded
    def create_brand(self, data) -> BrandResult:
        form, errors = validate_brand_form(data)
        if errors:
            return ValidationFailed(form=form, errors=errors)

        # Not atomic: two concurrent creates with one name can both insert.
        existing = Brand.objects(name=form.name).first()
        if existing is not None:
            logger.info("Brand %s already exists as %s", form.name, existing.id)
            return Ok(existing)

        brand = Brand(name=form.name, founded=form.founded_datetime).save()
        logger.info("Created brand %s (%s)", brand.name, brand.id)
        return Ok(brand)

    @_store_guarded
    def update_brand(self, pk, data) -> BrandResult:
        form, errors = validate_brand_form(data)
        if errors:
            return ValidationFailed(form=form, errors=errors)

        oid = _object_id(pk)
        if oid is None:
            return NotFound(str(pk))

        updates = {"set__name": form.name}
        if form.founded_datetime is None:
            updates["unset__founded"] = True
        else:
            updates["set__founded"] = form.founded_datetime

        brand = Brand.objects(id=oid).modify(new=True, **updates)
        if brand is None:
            return NotFound(str(pk))
        logger.info("Updated brand %s (%s)", brand.name, brand.id)
        return Ok(brand)

    @_store_guarded
    def delete_brand(self, pk) -> BrandResult:
        results = fetch_parallel(
            brand=lambda: find_brand(pk),
            models=lambda: find_brand_models(pk),
        )
        brand = results["brand"]
        if brand is None:
            return NotFound(str(pk))
        if results["models"]:
            logger.info(
                "Refusing to delete brand %s: %d dependent models", brand.id, len(results["models"])
            )
            return DeleteBlocked(brand=brand, models=results["models"])

        # A model created between the check above and this delete is left dangling.
        brand.delete()
        logger.info("Deleted brand %s (%s)", brand.name, brand.id)
        return Ok(brand)

    @_store_guarded
    def upload_logo(self, pk, files) -> BrandResult:
        if self.upload_handler is None:
            raise RuntimeError("BrandService was built without an upload handler")

        brand = find_brand(pk)
        if brand is None:
            return NotFound(str(pk))

        try:
            filename = self.upload_handler.save(files)
        except UploadError as exc:
            logger.warning("Rejected logo upload for brand %s: %s", brand.id, exc)
            return UploadRejected(brand=brand, message=str(exc))

        try:
            matched = Brand.objects(id=brand.id).update_one(set__logo=filename)
        except STORE_ERRORS:
            self.upload_handler.discard(filename)
            raise
        if not matched:
            # Deleted while the file was being written.
            self.upload_handler.discard(filename)
            return NotFound(str(pk))

        brand.logo = filename
        logger.info("Set logo %s on brand %s", filename, brand.id)
        return Ok(brand)
