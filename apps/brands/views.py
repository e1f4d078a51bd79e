"""Server-rendered brand pages."""

from __future__ import annotations

from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from apps.utils.middleware import render_store_failure

from .mongo_serializers import BrandForm
from .services import (
    BrandService,
    DeleteBlocked,
    NotFound,
    StoreError,
    UploadRejected,
    ValidationFailed,
)
from .uploads import LogoUploadHandler, UploadConfig


def get_brand_service() -> BrandService:
    """Build a service wired to the current logo upload settings."""
    return BrandService(upload_handler=LogoUploadHandler(UploadConfig.for_brand_logos()))


def _form_from_brand(brand) -> BrandForm:
    return BrandForm(name=brand.name, founded=brand.founded_yyyy_mm_dd)


@require_http_methods(["GET"])
def brand_list(request):
    """Show all brands sorted by name."""
    result = get_brand_service().list_brands()
    if isinstance(result, StoreError):
        return render_store_failure(request, result.cause)
    return render(request, "brands/brand_list.html", {"title": "Brand List", "brand_list": result.value})


@require_http_methods(["GET"])
def brand_detail(request, pk):
    """Show a brand with its models."""
    result = get_brand_service().brand_detail(pk)
    if isinstance(result, StoreError):
        return render_store_failure(request, result.cause)
    if isinstance(result, NotFound):
        raise Http404("Brand not found")
    return render(
        request,
        "brands/brand_detail.html",
        {"title": "Brand Detail", "brand": result.value.brand, "brand_models": result.value.models},
    )


@require_http_methods(["GET", "POST"])
def brand_create(request):
    """Show or submit the new brand form."""
    if request.method == "GET":
        return render(request, "brands/brand_form.html", {"title": "Create Brand", "form": BrandForm()})

    result = get_brand_service().create_brand(request.POST)
    if isinstance(result, StoreError):
        return render_store_failure(request, result.cause)
    if isinstance(result, ValidationFailed):
        return render(
            request,
            "brands/brand_form.html",
            {"title": "Create Brand", "form": result.form, "errors": result.errors},
        )
    return redirect(result.value.url)


@require_http_methods(["GET", "POST"])
def brand_update(request, pk):
    """Show or submit the edit form for a brand."""
    service = get_brand_service()
    if request.method == "GET":
        result = service.get_brand(pk)
        if isinstance(result, StoreError):
            return render_store_failure(request, result.cause)
        if isinstance(result, NotFound):
            return redirect("brand-list")
        return render(
            request,
            "brands/brand_form.html",
            {"title": "Update Brand", "form": _form_from_brand(result.value), "brand": result.value},
        )

    result = service.update_brand(pk, request.POST)
    if isinstance(result, StoreError):
        return render_store_failure(request, result.cause)
    if isinstance(result, NotFound):
        return redirect("brand-list")
    if isinstance(result, ValidationFailed):
        return render(
            request,
            "brands/brand_form.html",
            {"title": "Update Brand", "form": result.form, "errors": result.errors},
        )
    return redirect(result.value.url)


@require_http_methods(["GET", "POST"])
def brand_delete(request, pk):
    """Confirm and delete a brand that has no models."""
    service = get_brand_service()
    if request.method == "GET":
        result = service.brand_detail(pk)
        if isinstance(result, StoreError):
            return render_store_failure(request, result.cause)
        if isinstance(result, NotFound):
            return redirect("brand-list")
        return render(
            request,
            "brands/brand_delete.html",
            {"title": "Delete Brand", "brand": result.value.brand, "brand_models": result.value.models},
        )

    result = service.delete_brand(pk)
    if isinstance(result, StoreError):
        return render_store_failure(request, result.cause)
    if isinstance(result, DeleteBlocked):
        return render(
            request,
            "brands/brand_delete.html",
            {"title": "Delete Brand", "brand": result.brand, "brand_models": result.models},
        )
    return redirect("brand-list")


@require_http_methods(["GET", "POST"])
def brand_upload_logo(request, pk):
    """Show or submit the logo upload form for a brand."""
    service = get_brand_service()
    if request.method == "GET":
        result = service.get_brand(pk)
    else:
        result = service.upload_logo(pk, request.FILES)

    if isinstance(result, StoreError):
        return render_store_failure(request, result.cause)
    if isinstance(result, NotFound):
        return redirect("brand-list")
    if isinstance(result, UploadRejected):
        return render(
            request,
            "brands/brand_logo_form.html",
            {"title": "Upload Brand Logo", "brand": result.brand, "error": result.message},
        )
    if request.method == "GET":
        return render(request, "brands/brand_logo_form.html", {"title": "Upload Brand Logo", "brand": result.value})
    return redirect(result.value.url)
