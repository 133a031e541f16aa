import re


REDACTED = "_REDACTED_"

# Ten digits cover numbers which lost the leading zero of their day.
FODSELSNUMMER_RE = re.compile(r"(?<![0-9])[0-9]{10,11}(?![0-9])")


def redact_fodselsnummer(text):
    return FODSELSNUMMER_RE.sub(REDACTED, text)
