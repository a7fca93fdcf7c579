"""Setup workflow steps."""
import signal
from typing import Callable, Optional

import requests
import typer

from tfc_setup import errors, messages
from tfc_setup.config import Settings
from tfc_setup.credentials import find_token
from tfc_setup.provisioning import (
    ApiError,
    InfoMessage,
    ProvisioningResult,
    Success,
    UnknownError,
    request_setup,
)
from tfc_setup.rewriter import rewrite_config
from tfc_setup.runner import CommandRunner, ShCommandRunner
from tfc_setup.state import has_prior_run, reset_state
from tfc_setup.utils import command_exists, divider, fail, info, log_action, log_info, success

TERRAFORM_INIT = ("terraform", "init")
TERRAFORM_PLAN = ("terraform", "plan")
TERRAFORM_APPLY = ("terraform", "apply", "-auto-approve")


class Orchestrator:
    """One interactive setup run.

    Holds the per-run state: the interrupt counter and the working tree the
    commands are run against.
    """

    def __init__(
        self,
        settings: Settings,
        runner: Optional[CommandRunner] = None,
        read_key: Callable[[], str] = typer.getchar,
        session: Optional[requests.Session] = None,
    ):
        self.settings = settings
        self.runner = runner or ShCommandRunner(cwd=str(settings.workdir))
        self.read_key = read_key
        self.session = session
        self.interrupt_count = 0

    def pause_for_confirmation(self) -> None:
        """Block until a key is pressed; a second interrupt quits."""
        typer.echo(messages.PAUSE_PROMPT)
        while True:
            try:
                self.read_key()
                return
            except KeyboardInterrupt:
                self.handle_interrupt()

    def handle_interrupt(self) -> None:
        """Warn on the first interrupt, quit on the second."""
        self.interrupt_count += 1
        typer.echo("")
        if self.interrupt_count == 1:
            fail(messages.INTERRUPT_WARNING)
            return
        typer.echo(messages.GOODBYE)
        raise typer.Exit(130)

    def check_tools(self) -> None:
        """Fail if a required command is missing from PATH."""
        for tool in self.settings.required_tools:
            if not command_exists(tool):
                raise errors.MissingTool(tool)

    def check_credentials(self) -> str:
        """Return the stored API token for the target host."""
        return find_token(self.settings.host, self.settings.credentials_file)

    def reset_if_needed(self) -> bool:
        """Reset the working tree if a previous run modified it."""
        config_file = self.settings.config_file
        # git runs inside the config file's directory
        if not has_prior_run(self.runner, config_file.name):
            return False

        typer.echo(messages.PRIOR_RUN_WARNING.format(config_file=config_file.name))
        typer.echo("")
        self.pause_for_confirmation()
        reset_state(self.runner, config_file.name, self.settings.artifact_patterns, self.settings.workdir)
        log_info("Working tree reset to its original state.")
        return True

    def welcome(self) -> None:
        """Show the banner and introduction, then wait for a key."""
        typer.echo("")
        typer.secho(messages.BANNER, fg=typer.colors.MAGENTA, bold=True)
        typer.echo(messages.INTRODUCTION)
        typer.echo("")
        info(messages.GETTING_STARTED)
        typer.echo("")
        info("First, we'll do some setup and configure Terraform to use Terraform Cloud.")
        typer.echo("")
        self.pause_for_confirmation()

    def provision(self, token: str) -> ProvisioningResult:
        """Create the organization and workspace, raising on fatal answers."""
        typer.echo("")
        log_action("Creating an organization and workspace...")
        result = request_setup(self.settings.host, token, session=self.session)

        if isinstance(result, UnknownError):
            raise errors.UnknownError(f"An unknown error occurred: {result.raw}")
        if isinstance(result, ApiError):
            raise errors.ApiError(result.text)
        return result

    def rewrite(self, result: Success) -> None:
        """Point the config file at the new organization and workspace."""
        config_file = self.settings.config_file
        typer.echo("")
        log_action(f"Writing remote backend configuration to {config_file.name}...")
        rewrite_config(
            config_file,
            self.settings.host,
            result.organization_name,
            result.workspace_name,
            self.settings.anchor,
        )

        url = messages.workspace_url(self.settings.host, result.organization_name, result.workspace_name)
        typer.echo("")
        divider()
        typer.echo("")
        success("Ready to go; the example configuration is set up to use Terraform Cloud!")
        typer.echo("")
        typer.echo(f"An example workspace named '{result.workspace_name}' was created for you.")
        typer.echo("You can view this workspace in the Terraform Cloud UI here:")
        typer.echo(url)

    def run_terraform(self, args, introduction: str) -> int:
        """Explain, confirm, then run a terraform command in the foreground."""
        command = " ".join(args)
        typer.echo("")
        info(introduction)
        typer.echo("")
        typer.echo(f"$ {command}")
        typer.echo("")
        self.pause_for_confirmation()
        typer.echo("")

        result = self.runner.run(list(args), foreground=True)
        if result.exit_code != 0:
            raise errors.SubprocessFailure(command, result.exit_code)
        return result.exit_code

    def summary(self, result: Success) -> None:
        """Print what was set up and where to look next."""
        host = self.settings.host
        url = messages.workspace_url(host, result.organization_name, result.workspace_name)
        typer.echo("")
        divider()
        typer.echo("")
        success("You did it! You just provisioned infrastructure with Terraform Cloud!")
        typer.echo("")
        info(messages.TRIAL_NOTE)
        typer.echo("")
        typer.echo(messages.SUMMARY.format(workspace_url=url))
        typer.echo("")
        info(
            "To see the mock infrastructure you just provisioned and continue exploring\n"
            f"Terraform Cloud, visit:\n{messages.fake_services_url(host)}"
        )

    def run(self) -> int:
        """Main setup workflow; returns the process exit code."""
        self.check_tools()
        token = self.check_credentials()
        self.reset_if_needed()
        self.welcome()

        result = self.provision(token)
        if isinstance(result, InfoMessage):
            typer.echo("")
            info(result.text)
            return 0

        self.rewrite(result)
        self.run_terraform(
            TERRAFORM_INIT,
            "Next, we'll run 'terraform init' to initialize the backend and providers:",
        )
        typer.echo("")
        divider()
        self.run_terraform(
            TERRAFORM_PLAN,
            "Now it's time for 'terraform plan', to see what changes Terraform will perform:",
        )
        typer.echo("")
        divider()
        typer.echo("")
        success("The plan is complete!")
        typer.echo("")
        typer.echo(messages.REMOTE_PLAN_NOTE)
        exit_code = self.run_terraform(
            TERRAFORM_APPLY,
            "To actually make changes, we'll run 'terraform apply'. We'll also auto-approve\n"
            "the result, since this is an example:",
        )
        self.summary(result)
        return exit_code


def _raise_interrupt(signum, frame):
    raise KeyboardInterrupt


def run_setup(settings: Settings) -> int:
    """Run the interactive setup; SIGTERM is treated like ctrl-c."""
    signal.signal(signal.SIGTERM, _raise_interrupt)
    return Orchestrator(settings).run()
