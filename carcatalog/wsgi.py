"""WSGI config for the car catalog."""

import os

from django.core.wsgi import get_wsgi_application


os.environ.setdefault("DJANGO_SETTINGS_MODULE", "carcatalog.settings")

application = get_wsgi_application()
