"""WSGI entrypoint for the contact site."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "contactsite.settings")

application = get_wsgi_application()
