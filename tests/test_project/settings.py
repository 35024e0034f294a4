"""Django settings for test project."""

from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = "django-insecure-test-key-for-development-only"  # noqa: S105

DEBUG = True

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

USE_TZ = True

# Logging Configuration
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "mailchimp_lists": {
            "handlers": ["console"],
            "level": "DEBUG",
        },
    },
}

# Test variables
MAILCHIMP_LISTS = {
    "CLIENT": "mailchimp_lists.clients.dummy.DummyClient",
}

CELERY_TASK_ALWAYS_EAGER = True
