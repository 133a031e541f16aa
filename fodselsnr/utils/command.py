import contextlib
import dataclasses
import logging
import time
import uuid

from asgiref.local import Local  # NOQA
from django.core.management import base


local = Local()


@dataclasses.dataclass
class CommandRun:
    """State of the running management command, attached to its log entries."""

    name: str
    run_uid: str = dataclasses.field(default_factory=lambda: str(uuid.uuid4()))
    started_at_ns: int = dataclasses.field(default_factory=time.perf_counter_ns)
    # Outcome of the checked number, set by the command.
    kind: str | None = None
    reason: str | None = None

    @property
    def duration_in_ns(self) -> int:
        return time.perf_counter_ns() - self.started_at_ns

    def outcome(self) -> dict:
        return {key: value for key, value in [("kind", self.kind), ("reason", self.reason)] if value is not None}


def get_current_command_run():
    return getattr(local, "command_run", None)


@contextlib.contextmanager
def command_run(name):
    parent = get_current_command_run()
    # Nested commands (call_command from a command) share the run uid of their caller.
    run = CommandRun(name, run_uid=parent.run_uid) if parent else CommandRun(name)
    local.command_run = run
    try:
        yield run
    finally:
        local.command_run = parent


class BaseCommand(base.BaseCommand):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.logger = logging.getLogger(self.__class__.__module__)

    @property
    def run(self) -> CommandRun | None:
        return get_current_command_run()

    def _log_result(self, run, result):
        self.logger.info(
            "Management command %s %s in %0.2f seconds",
            run.name,
            result,
            run.duration_in_ns / 1_000_000_000,
            extra={
                "command": run.name,
                # Datadog expects duration in ns
                "duration": run.duration_in_ns,
                **run.outcome(),
            },
        )

    def execute(self, *args, **kwargs):
        with command_run(self.__class__.__module__) as run:
            try:
                output = super().execute(*args, **kwargs)
            except base.CommandError:
                # Reported to the user by Django.
                self._log_result(run, "failed")
                raise
            except Exception:
                self.logger.exception("Error when executing %s", run.name, extra={"command": run.name})
                self._log_result(run, "failed")
                raise
            self._log_result(run, "succeeded")
            return output

    def handle(self, *args, **options):
        raise NotImplementedError()
