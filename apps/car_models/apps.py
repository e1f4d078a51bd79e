"""Car model and feature app configuration."""

from django.apps import AppConfig


class CarModelsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.car_models"
    verbose_name = "Models and features"
