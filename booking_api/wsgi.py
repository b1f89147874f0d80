import os

from django.core.wsgi import get_wsgi_application


os.environ.setdefault("DJANGO_SETTINGS_MODULE", "booking_api.settings.base")

application = get_wsgi_application()
