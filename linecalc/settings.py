"""
Django settings for the linecalc project.
"""
import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "linecalc-insecure-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ["1", "true", "t", "yes", "y"]

ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "rest_framework",
    "expressions",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "linecalc.urls"

WSGI_APPLICATION = "linecalc.wsgi.application"

DATABASES = {}

USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
}

# Expression compiler
LINECALC_MAX_DOCUMENT_LENGTH = int(os.environ.get("LINECALC_MAX_DOCUMENT_LENGTH", "100000"))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "expressions": {
            "handlers": ["console"],
            "level": os.environ.get("LINECALC_LOG_LEVEL", "INFO"),
        },
    },
}
