"""Brand page routes and the brand API router."""

from django.urls import path
from rest_framework import routers

from . import views
from .mongo_views import BrandViewSet


router = routers.DefaultRouter(trailing_slash=False)
router.register(r"brands", BrandViewSet, basename="brand-api")

urlpatterns = [
    path("brands", views.brand_list, name="brand-list"),
    path("brand/create", views.brand_create, name="brand-create"),
    path("brand/<str:pk>", views.brand_detail, name="brand-detail"),
    path("brand/<str:pk>/update", views.brand_update, name="brand-update"),
    path("brand/<str:pk>/delete", views.brand_delete, name="brand-delete"),
    path("brand/<str:pk>/logo", views.brand_upload_logo, name="brand-upload-logo"),
]
