import os

from fodselsnr.enums import FodselsnrEnvironment


FODSELSNR_ENVIRONMENT = FodselsnrEnvironment.TEST
os.environ["FODSELSNR_ENVIRONMENT"] = FODSELSNR_ENVIRONMENT

from config.settings.base import *  # noqa: E402,F403


SECRET_KEY = "foobar"
ALLOWED_HOSTS = []
