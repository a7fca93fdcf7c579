"""Errors raised by the setup workflow.

Every error is terminal: it is raised where the problem is detected and
reported once by the CLI, which exits with ``exit_code``.
"""


class SetupError(RuntimeError):
    exit_code = 1


class MissingTool(SetupError):
    def __init__(self, tool: str):
        super().__init__(
            f"It looks like '{tool}' is not installed; please install it "
            "and run this setup script again."
        )
        self.tool = tool


class MissingCredentials(SetupError):
    pass


class TransportError(SetupError):
    pass


class ApiError(SetupError):
    pass


class UnknownError(SetupError):
    pass


class RewriteError(SetupError):
    pass


class SubprocessFailure(SetupError):
    def __init__(self, command: str, exit_code: int):
        super().__init__(f"'{command}' failed with exit code {exit_code}")
        self.command = command
        self.exit_code = exit_code or 1
