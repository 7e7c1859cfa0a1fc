# settings/__init__.py
# The concrete module is picked through DJANGO_SETTINGS_MODULE, e.g.
# beyondtrips.settings.development or beyondtrips.settings.production,
# based on DJANGO_ENV (see manage.py, wsgi.py, asgi.py and celery.py).
