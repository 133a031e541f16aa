import datetime

from django.utils import timezone
from faker.providers import BaseProvider

from fodselsnr.enums import NINKind, Sex
from fodselsnr.norway_standards import (
    InvalidFodselsnummer,
    compute_control_digits,
    individual_numbers_for_year,
)


class NorwegianIdentityProvider(BaseProvider):
    def fodselsnummer_birth_date(self) -> datetime.date:
        # Stay within the last century so the two digit year is not ambiguous.
        today = timezone.localdate()
        return self.generator.date_between_dates(today - datetime.timedelta(days=99 * 365), today)

    def _individual_number(self, kind, birth_date, gender):
        match kind:
            case NINKind.S_NUMBER:
                individual_number = self.random_int(100, 149)
            case NINKind.D_NUMBER:
                individual_number = self.random_int(0, 99)
            case NINKind.FS_NUMBER:
                individual_number = self.random_int(900, 999)
            case _:
                ranges = individual_numbers_for_year(birth_date.year) or ((0, 999),)
                low, high = self.random_element(ranges)
                individual_number = self.random_int(low, high)
        if gender is not None and (individual_number % 2 == 1) != (gender == Sex.MALE):
            # Flip the gender digit, staying in the same tens.
            individual_number += -1 if individual_number % 2 else 1
        return individual_number

    def fodselsnummer(self, kind=NINKind.REGULAR, birth_date: datetime.date = None, gender: Sex = None) -> str:
        kind = NINKind(kind)
        if birth_date is None:
            birth_date = self.fodselsnummer_birth_date()
        day, month = birth_date.day, birth_date.month
        if kind == NINKind.D_NUMBER:
            day += 40
        elif kind in (NINKind.S_NUMBER, NINKind.FS_NUMBER):
            month += 50
        while True:
            individual_number = self._individual_number(kind, birth_date, gender)
            prefix = f"{day:02d}{month:02d}{birth_date:%y}{individual_number:03d}"
            try:
                first, second = compute_control_digits(prefix)
            except InvalidFodselsnummer:
                # No control digits exist for this combination, try another individual number.
                continue
            return f"{prefix}{first}{second}"
