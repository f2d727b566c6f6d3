"""ASGI entrypoint for Studyhub (HTTP only; served by Daphne)."""
import os
from django.core.asgi import get_asgi_application
from channels.routing import ProtocolTypeRouter

# Default to development settings for local runs; override in deployment.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

django_asgi_app = get_asgi_application()

application = ProtocolTypeRouter(
    {
        "http": django_asgi_app,
    }
)
