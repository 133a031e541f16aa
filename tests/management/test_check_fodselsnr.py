import datetime
import io
import logging

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from freezegun import freeze_time


def test_legal_number():
    stdout = io.StringIO()
    call_command("check_fodselsnr", "01019012480", stdout=stdout)
    assert stdout.getvalue() == "fødselsnummer 01019012480 is legal\n"


def test_argument_is_trimmed():
    stdout = io.StringIO()
    call_command("check_fodselsnr", "  1019012480\n", stdout=stdout)
    assert stdout.getvalue() == "fødselsnummer 1019012480 is legal\n"


def test_empty_argument():
    with pytest.raises(CommandError, match="fødselsnummer is empty"):
        call_command("check_fodselsnr", "   ")


@pytest.mark.parametrize("value", ["123456789", "010190124800"])
def test_incorrect_length(value):
    with pytest.raises(CommandError, match="fødselsnummer has incorrect length"):
        call_command("check_fodselsnr", value)


def test_illegal_number():
    stdout = io.StringIO()
    with pytest.raises(CommandError, match="fødselsnummer 01019012481 is not legal") as exc_info:
        call_command("check_fodselsnr", "01019012481", stdout=stdout)
    assert exc_info.value.returncode == 1
    assert stdout.getvalue() == ""


def test_reason_with_verbosity():
    stdout = io.StringIO()
    with pytest.raises(CommandError):
        call_command("check_fodselsnr", "01019012481", verbosity=2, stdout=stdout)
    assert stdout.getvalue() == "reason: checksum_mismatch\n"

    stdout = io.StringIO()
    call_command("check_fodselsnr", "41019002401", verbosity=2, stdout=stdout)
    assert stdout.getvalue() == "kind: d_number\nfødselsnummer 41019002401 is legal\n"


def test_today():
    stdout = io.StringIO()
    call_command("check_fodselsnr", "29020050088", "--today=2026-10-19", stdout=stdout)
    assert stdout.getvalue() == "fødselsnummer 29020050088 is legal\n"

    # 29 February 1900 does not exist.
    with pytest.raises(CommandError, match="is not legal"):
        call_command("check_fodselsnr", "29020050088", today=datetime.date(1999, 6, 1))


@freeze_time("1999-06-01")
def test_today_defaults_to_the_current_date():
    with pytest.raises(CommandError, match="is not legal"):
        call_command("check_fodselsnr", "29020050088")


def test_logs(caplog):
    call_command("check_fodselsnr", "01019012480", stdout=io.StringIO())
    with pytest.raises(CommandError):
        call_command("check_fodselsnr", "01019012481", stdout=io.StringIO())

    records = [record for record in caplog.records if record.name.startswith("fodselsnr")]
    assert [record.getMessage().rsplit(" in ", 1)[0] for record in records] == [
        "Management command fodselsnr.management.commands.check_fodselsnr succeeded",
        "Management command fodselsnr.management.commands.check_fodselsnr failed",
    ]
    assert records[0].kind == "regular"
    assert not hasattr(records[0], "reason")
    assert records[1].reason == "checksum_mismatch"
    assert not hasattr(records[1], "kind")
    assert all(record.levelno < logging.ERROR for record in records)
