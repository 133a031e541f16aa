from django.core.exceptions import ValidationError

from fodselsnr.enums import FailureReason
from fodselsnr.norway_standards import Fodselsnummer, InvalidFodselsnummer


FAILURE_MESSAGES = {
    FailureReason.INVALID_FORMAT: "Fødselsnummeret kan bare inneholde sifre.",
    FailureReason.IMPLAUSIBLE_DATE: "Fødselsnummeret inneholder ikke en gyldig fødselsdato.",
    FailureReason.ILLEGAL_CONTROL_SUM: "Fødselsnummeret har ugyldige kontrollsifre.",
    FailureReason.CHECKSUM_MISMATCH: "Fødselsnummeret har ugyldige kontrollsifre.",
}


def validate_fodselsnummer(value):
    fodselsnummer = Fodselsnummer(value)
    if len(fodselsnummer) > Fodselsnummer.LENGTH:
        raise ValidationError("Fødselsnummeret er for langt (11 sifre).", code=FailureReason.INVALID_FORMAT.value)
    if len(fodselsnummer) < Fodselsnummer.LENGTH:
        raise ValidationError("Fødselsnummeret er for kort (11 sifre).", code=FailureReason.INVALID_FORMAT.value)
    try:
        fodselsnummer.validate()
    except InvalidFodselsnummer as e:
        raise ValidationError(FAILURE_MESSAGES[e.reason], code=e.reason.value) from e
