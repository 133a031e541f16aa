"""
Base settings to build other settings files upon.
https://docs.djangoproject.com/en/dev/ref/settings
"""

import os
import re

from dotenv import load_dotenv

from config.sentry import sentry_init
from fodselsnr.enums import FodselsnrEnvironment


load_dotenv()

# Django settings
# ---------------

_current_dir = os.path.dirname(os.path.realpath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(_current_dir, "../.."))

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY")

DEBUG = False

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "fodselsnr",
]

# No persisted state.
DATABASES = {}

LANGUAGE_CODE = "nb"

TIME_ZONE = "Europe/Oslo"

USE_I18N = True

USE_TZ = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "fodselsnummer_filter": {"()": "fodselsnr.utils.logging.FodselsnummerFilter"},
    },
    "formatters": {
        "json": {"()": "fodselsnr.utils.logging.FodselsnrDataDogJSONFormatter"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "json", "filters": ["fodselsnummer_filter"]},
        "null": {"class": "logging.NullHandler"},
    },
    "loggers": {
        "": {"handlers": ["console"], "level": "INFO"},
        "django": {
            "level": os.getenv("DJANGO_LOG_LEVEL", "INFO"),
        },
        "fodselsnr": {
            "level": os.getenv("FODSELSNR_LOG_LEVEL", "INFO"),
        },
    },
}

DJANGO_DATADOG_LOGGER_EXTRA_INCLUDE = re.compile(
    r"""
    ^(
        fodselsnr(\..+)?  # Project root logger and children.
    )$""",
    re.VERBOSE,
)

# Fødselsnummer settings
# ----------------------

FODSELSNR_ENVIRONMENT = FodselsnrEnvironment(os.getenv("FODSELSNR_ENVIRONMENT", FodselsnrEnvironment.PROD))

# Sentry
SENTRY_DSN = os.getenv("SENTRY_DSN")
sentry_init(environment=FODSELSNR_ENVIRONMENT)
