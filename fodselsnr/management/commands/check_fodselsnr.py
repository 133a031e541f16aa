import datetime

from django.core.management.base import CommandError

from fodselsnr.norway_standards import REQUIRED_LENGTH, Fodselsnummer, InvalidFodselsnummer
from fodselsnr.utils.command import BaseCommand


class Command(BaseCommand):
    help = "Check if a Norwegian national identity number (fødselsnummer) is legal."

    def add_arguments(self, parser):
        parser.add_argument("fodselsnummer", help="The number to check, regular, S-, D- or FS-number")
        parser.add_argument(
            "--today",
            type=datetime.date.fromisoformat,
            help="Reference date (YYYY-MM-DD) used to resolve the century of the birth year",
        )

    def handle(self, fodselsnummer, *, today, verbosity, **options):
        value = fodselsnummer.strip()
        if not value:
            raise CommandError("fødselsnummer is empty")
        if not REQUIRED_LENGTH - 1 <= len(value) <= REQUIRED_LENGTH:
            raise CommandError("fødselsnummer has incorrect length")

        try:
            kind = Fodselsnummer(value).validate(today)
        except InvalidFodselsnummer as e:
            self.run.reason = e.reason.value
            if verbosity > 1:
                self.stdout.write(f"reason: {e.reason}")
            raise CommandError(f"fødselsnummer {value} is not legal") from e

        self.run.kind = kind.value
        if verbosity > 1:
            self.stdout.write(f"kind: {kind}")
        self.stdout.write(f"fødselsnummer {value} is legal")
