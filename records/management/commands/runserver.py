from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as StaticRunserverCommand


class Command(StaticRunserverCommand):
    """``runserver`` bound to all interfaces on ``$PORT`` unless told otherwise."""
    default_addr = "0.0.0.0"
    default_port = str(settings.PORT)
