from django.apps import AppConfig


class FodselsnrConfig(AppConfig):
    name = "fodselsnr"
    verbose_name = "Fødselsnummer"
