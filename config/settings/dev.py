import os

from fodselsnr.enums import FodselsnrEnvironment


FODSELSNR_ENVIRONMENT = FodselsnrEnvironment.DEV
os.environ["FODSELSNR_ENVIRONMENT"] = FODSELSNR_ENVIRONMENT

from .test import *  # noqa: E402,F403


# Django settings
# ---------------
DEBUG = True

LOGGING["loggers"]["fodselsnr"]["level"] = os.getenv("FODSELSNR_LOG_LEVEL", "DEBUG")  # noqa: F405
