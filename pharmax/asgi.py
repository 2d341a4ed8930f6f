"""
ASGI config for the PharmaX project.

HTTP only; each request runs its own sequence of ORM calls.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pharmax.settings")

application = get_asgi_application()
