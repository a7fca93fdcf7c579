"""CLI interface for the setup tool."""
from pathlib import Path
from typing import Optional

import typer

from . import utils
from . import steps
from .config import DEFAULT_HOST, Settings
from .errors import SetupError


def setup(
    host: str = typer.Argument(DEFAULT_HOST, help="Terraform Cloud or Enterprise hostname"),
    config_file: Optional[Path] = typer.Option(
        None, "--config-file", help="Configuration file to point at the new workspace [default: main.tf]"
    ),
    credentials_file: Optional[Path] = typer.Option(
        None, "--credentials-file", help="Terraform credentials file holding the API token"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """Set up an example Terraform Cloud workspace and run init, plan and apply against it."""
    utils.setup_logging(verbose)

    settings = Settings.from_env().override(
        host=host, config_file=config_file, credentials_file=credentials_file
    )
    try:
        exit_code = steps.run_setup(settings)
    except SetupError as e:
        utils.fail(str(e))
        raise typer.Exit(e.exit_code)
    except KeyboardInterrupt:
        typer.echo("")
        typer.echo("Goodbye!")
        raise typer.Exit(130)
    raise typer.Exit(exit_code)


app = typer.Typer(
    name="tfc-setup",
    help="Interactive Terraform Cloud getting-started setup.",
    add_completion=False,
)
app.command()(setup)


if __name__ == "__main__":
    app()
