"""Django settings for the venue timetable project."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-only-insecure-secret-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "timetable.apps.TimetableConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("TIMETABLE_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
# Event times are local wall-clock values; no time zone handling.
USE_TZ = False

STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

TIMETABLE = {
    "SLOT_MINUTES": 15,
    "SLOT_HEIGHT": 80,
    "VENUE_WIDTH": 250,
    "DEFAULT_COLOR": "#3b82f6",
    "INITIAL_SCROLL_MARGIN": 100,
    "DEFAULT_VENUES": [
        {"id": "venue_001", "name": "Grand Hall", "color": "#FF6B6B", "capacity": 500},
        {"id": "venue_002", "name": "Skyline Arena", "color": "#4ECDC4", "capacity": 1200},
        {
            "id": "venue_003",
            "name": "Royal Conference Center",
            "color": "#556270",
            "capacity": 300,
        },
        {"id": "venue_004", "name": "Open Garden Stage", "color": "#C7F464", "capacity": 800},
        {"id": "venue_005", "name": "Crystal Ballroom", "color": "#C44DFF", "capacity": 250},
        {"id": "venue_006", "name": "Harbor View Lounge", "color": "#45AAB8", "capacity": 150},
    ],
}

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
        "timetable": {
            "handlers": ["console"],
            "level": os.environ.get("TIMETABLE_LOG_LEVEL", "INFO"),
        },
    },
}
