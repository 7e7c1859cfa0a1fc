"""
ASGI config for beyondtrips project.

It exposes the ASGI callable as a module-level variable named ``application``.

For more information on this file, see
https://docs.djangoproject.com/en/5.2/howto/deployment/asgi/
"""

import os
from pathlib import Path
from dotenv import load_dotenv
from django.core.asgi import get_asgi_application

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

django_env = os.getenv('DJANGO_ENV', 'development')

os.environ.setdefault('DJANGO_SETTINGS_MODULE', f"beyondtrips.settings.{django_env}")

application = get_asgi_application()
