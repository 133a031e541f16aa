import logging
import os

import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration
from sentry_sdk.integrations.logging import LoggingIntegration, ignore_logger

from fodselsnr.utils.pii import redact_fodselsnummer


def strip_sentry_sensitive_data(event, _hint):
    """
    Be very cautious about not raising any exception in this method,
    because when this happens, the initial error
    never reaches the sentry servers... and it could take
    months before we realize a real error was silenced.
    Also, you cannot use the debugger here.
    """
    if "user" in event:
        keys_to_delete_if_present = ["email", "username", "ip_address"]
        for key in keys_to_delete_if_present:
            if key in event["user"]:
                del event["user"][key]
    # Identity numbers end up in messages and exception values.
    logentry = event.get("logentry") or {}
    for key in ["message", "formatted"]:
        if isinstance(logentry.get(key), str):
            logentry[key] = redact_fodselsnummer(logentry[key])
    for exception in (event.get("exception") or {}).get("values", []):
        if isinstance(exception.get("value"), str):
            exception["value"] = redact_fodselsnummer(exception["value"])
    return event


sentry_logging = LoggingIntegration(
    level=logging.INFO,  # Capture info and above as breadcrumbs.
    event_level=logging.ERROR,  # Send errors as events.
)


def sentry_init(environment=None):
    try:
        traces_sample_rate = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", ""))
    except ValueError:
        traces_sample_rate = 0

    sentry_sdk.init(
        # DSN is read from the SENTRY_DSN environment variable.
        integrations=[
            sentry_logging,
            DjangoIntegration(),
        ],
        environment=environment,
        traces_sample_rate=traces_sample_rate,
        # Identity numbers are personal data.
        send_default_pii=False,
        before_send=strip_sentry_sensitive_data,
    )
    ignore_logger("django.security.DisallowedHost")
