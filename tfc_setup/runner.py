"""Subprocess execution behind a small injectable interface."""
import logging
from typing import NamedTuple, Protocol, Sequence

import sh

from tfc_setup.errors import MissingTool

logger = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    exit_code: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    def run(self, args: Sequence[str], foreground: bool = False) -> CommandResult:
        ...


class ShCommandRunner:
    """Run commands with ``sh``.

    Captured runs collect stdout/stderr. Foreground runs inherit this
    process's terminal so interactive tools behave normally; their output is
    not captured.
    """

    def __init__(self, cwd=None):
        self.cwd = cwd

    def run(self, args: Sequence[str], foreground: bool = False) -> CommandResult:
        program, *rest = args
        logger.debug("running %s", " ".join(args))
        try:
            command = sh.Command(program)
        except sh.CommandNotFound:
            raise MissingTool(program)

        try:
            if foreground:
                command(*rest, _fg=True, _cwd=self.cwd)
                return CommandResult(0, "", "")
            result = command(*rest, _return_cmd=True, _cwd=self.cwd)
        except sh.ErrorReturnCode as e:
            return CommandResult(e.exit_code, _decode(e.stdout), _decode(e.stderr))
        return CommandResult(result.exit_code, _decode(result.stdout), _decode(result.stderr))


def _decode(output) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode(errors='replace')
    return str(output)
