"""Django settings for the boxoffice backend.

Values come from config.env; see that module for the environment variables.
"""

from config.env import BASE_DIR, env

SECRET_KEY = env.SECRET_KEY.get_secret_value()
DEBUG = env.DEBUG
ALLOWED_HOSTS = env.allowed_hosts

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "boxoffice.apps.BoxofficeConfig",
]

MIDDLEWARE = [
    "boxoffice.middleware.RequestIdMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

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

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": env.DATABASE_PATH,
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "boxoffice",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "Asia/Kolkata"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "boxoffice.handlers.exceptions.boxoffice_exception_handler",
    "COERCE_DECIMAL_TO_STRING": False,
}

BOXOFFICE = {
    "ADMIN_TOKEN": env.ADMIN_TOKEN.get_secret_value() if env.ADMIN_TOKEN else None,
    "THEATER_NAME": env.THEATER_NAME,
    "THEATER_LOCATION": env.THEATER_LOCATION,
    "THEATER_GSTIN": env.THEATER_GSTIN,
    "SCREEN": env.SCREEN,
    "CGST_RATE": env.CGST_RATE,
    "SGST_RATE": env.SGST_RATE,
    "MAINTENANCE_CHARGE": env.MAINTENANCE_CHARGE,
    "TICKET_ID_PREFIX": env.TICKET_ID_PREFIX,
    "TICKET_ID_PADDING": env.TICKET_ID_PADDING,
    "SEAT_HOLD_TTL": env.SEAT_HOLD_TTL,
    "DEFAULT_PRICES": dict(env.DEFAULT_PRICES),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "standard"},
    },
    "loggers": {
        "boxoffice": {"handlers": ["console"], "level": env.LOG_LEVEL, "propagate": False},
        "django": {"handlers": ["console"], "level": "WARNING", "propagate": False},
    },
}

if env.AUDIT_LOG_PATH:
    LOGGING["handlers"]["audit_file"] = {
        "class": "logging.handlers.RotatingFileHandler",
        "filename": env.AUDIT_LOG_PATH,
        "maxBytes": 10 * 1024 * 1024,
        "backupCount": 5,
        "formatter": "standard",
    }
    LOGGING["loggers"]["boxoffice.audit"] = {
        "handlers": ["console", "audit_file"],
        "level": "INFO",
        "propagate": False,
    }
