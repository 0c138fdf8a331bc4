"""ASGI entrypoint."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_asgi_application()

from modules.products.bootstrap import seed_on_startup  # noqa: E402

seed_on_startup()
