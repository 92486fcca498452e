"""
WSGI config para el proyecto PetStore.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'PetStore.settings')

application = get_wsgi_application()
