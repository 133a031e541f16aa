"""
Norwegian national identity numbers (fødselsnummer).

The number has the format DDMMYYIIICC: a birth date, a three digit
individual number (its last digit gives the gender) and two modulo 11
control digits. Besides regular numbers, the following variants share the
same control digits:

- D-numbers (temporary residents): 40 is added to the day,
- S-numbers (seasonal workers): 50 is added to the month,
- FS-numbers (education sector): 50 is added to the month.

Ref. https://no.wikipedia.org/wiki/F%C3%B8dselsnummer (in Norwegian).
"""

import collections
import datetime
import functools
import re

from django.utils import timezone

from fodselsnr.enums import FailureReason, NINKind, Sex


REQUIRED_LENGTH = 11

# Modulo 11 weights, the second series also weighs the first control digit.
FIRST_CONTROL_WEIGHTS = (3, 7, 6, 1, 8, 9, 4, 5, 2)
SECOND_CONTROL_WEIGHTS = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)

ILLEGAL_CONTROL_SUM = 10
ZERO_CONTROL_SUM = 11


class InvalidFodselsnummer(ValueError):
    def __init__(self, reason, message=None):
        self.reason = FailureReason(reason)
        super().__init__(message or self.reason.value)


Encoding = collections.namedtuple("Encoding", ["kind", "day_offset", "month_offset", "accepts_individual_part"])

# Order matters: the first accepting encoding gives the kind of the number.
ENCODINGS = (
    Encoding(NINKind.REGULAR, 0, 0, lambda value: True),
    Encoding(NINKind.S_NUMBER, 0, 50, lambda value: 10 <= int(value[6:8]) <= 14),
    Encoding(NINKind.D_NUMBER, 40, 0, lambda value: value[6] == "0"),
    Encoding(NINKind.FS_NUMBER, 0, 50, lambda value: int(value[6:]) >= 90000),
)

# Individual numbers allocated to each birth year range, inclusive bounds.
INDIVIDUAL_NUMBER_RANGES = (
    ((1854, 1899), ((500, 749),)),
    ((1900, 1999), ((0, 499), (900, 999))),
    ((2000, 2039), ((500, 999),)),
)


def _control_digit(digits, weights):
    control = 11 - sum(digit * weight for digit, weight in zip(digits, weights, strict=True)) % 11
    if control == ILLEGAL_CONTROL_SUM:
        raise InvalidFodselsnummer(FailureReason.ILLEGAL_CONTROL_SUM)
    if control == ZERO_CONTROL_SUM:
        return 0
    return control


def compute_control_digits(digits) -> tuple[int, int]:
    """Compute both control digits from the nine leading digits."""
    digits = [int(digit) for digit in digits]
    first = _control_digit(digits, FIRST_CONTROL_WEIGHTS)
    second = _control_digit([*digits, first], SECOND_CONTROL_WEIGHTS)
    return first, second


def resolve_birth_year(two_digit_year: int, month: int, day: int, today: datetime.date) -> int:
    """
    Expand a two digit year, picking the century which does not place
    the birth date after `today`.
    """
    year = today.year - today.year % 100 + two_digit_year
    # Compare tuples since the date itself may not exist.
    if (year, month, day) > (today.year, today.month, today.day):
        year -= 100
    return year


def individual_numbers_for_year(year: int) -> tuple:
    for (first_year, last_year), ranges in INDIVIDUAL_NUMBER_RANGES:
        if first_year <= year <= last_year:
            return ranges
    return ()


@functools.total_ordering
class Fodselsnummer:
    LENGTH = REQUIRED_LENGTH
    FORMAT_RE = re.compile(
        r"""
        ^
        (?P<day>[0-9]{2})
        (?P<month>[0-9]{2})
        (?P<year>[0-9]{2})
        (?P<individual_number>[0-9]{3})
        (?P<control_digits>[0-9]{2})
        $
        """,
        re.VERBOSE,
    )

    def __init__(self, value: str):
        self._match = None
        if not value:
            self.value = None
            return
        self.value = str(value)
        # A leading zero in the day is easily lost, e.g. when stored as an integer.
        if len(self.value) == self.LENGTH - 1:
            self.value = f"0{self.value}"
        self._match = self.FORMAT_RE.fullmatch(self.value)

    def __str__(self):
        return self.value or ""

    def __repr__(self):
        return f"Fodselsnummer({self.value})"

    def __hash__(self):
        return hash(self.value)

    def __bool__(self):
        return bool(self.value)

    def __len__(self):
        return len(self.value or "")

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, self.__class__):
            return str(self) < str(other)
        if isinstance(other, str):
            return str(self) < other
        return NotImplemented

    @property
    def day(self) -> int:
        return int(self._match["day"])

    @property
    def month(self) -> int:
        return int(self._match["month"])

    @property
    def year(self) -> int:
        return int(self._match["year"])

    @property
    def individual_number(self) -> int:
        return int(self._match["individual_number"])

    @property
    def control_digits(self) -> tuple[int, int]:
        first, second = self._match["control_digits"]
        return int(first), int(second)

    @property
    def digits(self) -> tuple:
        return tuple(int(digit) for digit in self.value)

    @property
    def gender(self) -> Sex:
        return Sex.MALE if self.individual_number % 2 else Sex.FEMALE

    def has_valid_format(self) -> bool:
        return self._match is not None

    def _birth_date_for(self, encoding, today):
        day = self.day - encoding.day_offset
        month = self.month - encoding.month_offset
        if not (1 <= day <= 31 and 1 <= month <= 12):
            return None
        if not encoding.accepts_individual_part(self.value):
            return None
        try:
            return datetime.date(resolve_birth_year(self.year, month, day, today), month, day)
        except ValueError:
            return None

    def _classify(self, today):
        if not self.has_valid_format():
            return None, None
        today = today or timezone.localdate()
        for encoding in ENCODINGS:
            if birth_date := self._birth_date_for(encoding, today):
                return encoding.kind, birth_date
        return None, None

    def kind(self, today: datetime.date = None) -> NINKind | None:
        return self._classify(today)[0]

    def birth_date(self, today: datetime.date = None) -> datetime.date | None:
        return self._classify(today)[1]

    def compute_control_digits(self) -> tuple[int, int]:
        return compute_control_digits(self.digits[:9])

    def has_valid_control_digits(self) -> bool:
        if not self.has_valid_format():
            return False
        try:
            return self.compute_control_digits() == self.control_digits
        except InvalidFodselsnummer:
            return False

    def has_consistent_individual_number(self, today: datetime.date = None) -> bool:
        """
        Whether the individual number belongs to the range allocated to the birth year.

        Informative only: numbers outside the allocation table are still valid.
        """
        birth_date = self.birth_date(today)
        if birth_date is None:
            return False
        return any(
            low <= self.individual_number <= high for low, high in individual_numbers_for_year(birth_date.year)
        )

    def validate(self, today: datetime.date = None) -> NINKind:
        if not self.has_valid_format():
            raise InvalidFodselsnummer(FailureReason.INVALID_FORMAT)
        kind = self.kind(today)
        if kind is None:
            raise InvalidFodselsnummer(FailureReason.IMPLAUSIBLE_DATE)
        if self.compute_control_digits() != self.control_digits:
            raise InvalidFodselsnummer(FailureReason.CHECKSUM_MISMATCH)
        return kind

    def is_valid(self, today: datetime.date = None) -> bool:
        try:
            self.validate(today)
        except InvalidFodselsnummer:
            return False
        return True


def check(value, *, today: datetime.date = None) -> bool:
    """
    Check if `value` is a legal Norwegian national identity number.

    Regular numbers as well as S-, D- and FS-numbers are accepted.
    Never raises for malformed input.
    """
    return Fodselsnummer(value).is_valid(today)
