from .base import *
import os
import dj_database_url

DEBUG = False
DOMAIN_NAME = os.getenv('DOMAIN_NAME', None)
IP = os.getenv('IP', None)
DOMAIN = os.getenv('DOMAIN', None)
ALT_DOMAIN = os.getenv('ALT_DOMAIN', None)
CSRF_COOKIE = os.getenv("CSRF_COOKIE_DOMAIN", None)

ALLOWED_HOSTS = [host for host in (DOMAIN_NAME, IP, DOMAIN, ALT_DOMAIN) if host] + ['localhost']

SESSION_COOKIE_DOMAIN = CSRF_COOKIE
CSRF_COOKIE_DOMAIN = CSRF_COOKIE

# The public scan endpoint is hit from any origin that renders the QR landing page.
CORS_ALLOW_ALL_ORIGINS = True


CELERY_BEAT_SCHEDULE = {
    'expire-qr-codes': {
        'task': 'qrcodes.tasks.expire_qr_codes',
        'schedule': 3600,
    },
}


SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

# Logging configuration optimized for production
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}


# Database configuration for production
if os.getenv('DATABASE_URL'):
    DATABASES = {
        'default': dj_database_url.config(
            default=os.environ.get('DATABASE_URL'),
        )
    }
else:
    raise Exception("DATABASE_URL must be set in production")

# Redis configuration
CELERY_BROKER_URL = os.getenv("REDIS_URL", None)
CELERY_RESULT_BACKEND = os.getenv("REDIS_URL")
CELERY_ACCEPT_CONTENT = ['json']
CELERY_TASK_SERIALIZER = 'json'
CELERY_RESULT_SERIALIZER = 'json'
CELERY_TIMEZONE = 'UTC'
CELERY_RESULT_EXPIRES = 86400

SESSION_ENGINE = 'django.contrib.sessions.backends.cache'
SESSION_CACHE_ALIAS = 'default'

CACHES = {
    "default": {
        "BACKEND": "django_redis.cache.RedisCache",
        "LOCATION": os.getenv("REDIS_URL", None),
        "OPTIONS": {
            "CLIENT_CLASS": "django_redis.client.DefaultClient",
        }
    }
}
