"""Catalog home app configuration."""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.catalog"
    verbose_name = "Catalog"

    def ready(self) -> None:
        from carcatalog.mongodb import connect_mongodb

        connect_mongodb()
