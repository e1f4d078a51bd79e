"""URL configuration for the car catalog."""

from django.conf import settings
from django.conf.urls.static import static
from django.urls import include, path
from django.views.generic import RedirectView

from apps.brands.urls import router as brand_router


urlpatterns = [
    path("", RedirectView.as_view(url="/catalog/", permanent=False)),
    path("catalog/", include("apps.catalog.urls")),
    path("catalog/", include("apps.brands.urls")),
    path("api/v1/", include(brand_router.urls)),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
