"""ASGI entry point for the CondoSystem API.

Serves the same HTTP routes as ``config.wsgi`` for ASGI servers such as
uvicorn or daphne.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
