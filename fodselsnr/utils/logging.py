import logging

from django_datadog_logger.formatters.datadog import DataDogJSONFormatter

from fodselsnr.norway_standards import Fodselsnummer
from fodselsnr.utils.command import get_current_command_run
from fodselsnr.utils.pii import REDACTED, redact_fodselsnummer


def _redact_arg(arg):
    if isinstance(arg, Fodselsnummer):
        return REDACTED
    if isinstance(arg, str):
        return redact_fodselsnummer(arg)
    return arg


class FodselsnrDataDogJSONFormatter(DataDogJSONFormatter):
    def json_record(self, message, extra, record):
        log_entry_dict = super().json_record(message, extra, record)
        if run := get_current_command_run():
            log_entry_dict["command.run_uid"] = run.run_uid
            log_entry_dict["command.name"] = run.name
            for key, value in run.outcome().items():
                log_entry_dict[f"command.{key}"] = value
        return log_entry_dict


class FodselsnummerFilter(logging.Filter):
    """Identity numbers are personal data: keep them out of the logs."""

    def filter(self, record):
        if isinstance(record.msg, str):
            record.msg = redact_fodselsnummer(record.msg)
        if isinstance(record.args, dict):
            record.args = {key: _redact_arg(value) for key, value in record.args.items()}
        elif record.args:
            record.args = tuple(_redact_arg(arg) for arg in record.args)
        return super().filter(record)
