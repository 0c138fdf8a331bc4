"""WSGI entrypoint.

Seeds the sample catalog once the application is loaded, mirroring what
happens under ASGI.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.products.bootstrap import seed_on_startup  # noqa: E402

seed_on_startup()
