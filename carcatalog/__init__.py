"""Main configuration package for the car catalog Django project."""
