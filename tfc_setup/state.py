"""Detection and reset of a previous setup run in the working tree."""
import logging
import shutil
from pathlib import Path
from typing import Iterable, List, Union

from tfc_setup.errors import SubprocessFailure
from tfc_setup.runner import CommandRunner
from tfc_setup.utils import log_action

logger = logging.getLogger(__name__)


def has_prior_run(runner: CommandRunner, config_file: Union[str, Path]) -> bool:
    """Check whether the tracked config file differs from its committed version."""
    result = runner.run(["git", "diff", "--stat", "--", str(config_file)])
    if result.exit_code != 0:
        logger.debug("git diff failed (%s): %s", result.exit_code, result.stderr.strip())
        return False
    return result.stdout.strip() != ""


def find_artifacts(workdir: Union[str, Path], patterns: Iterable[str]) -> List[Path]:
    """List generated files and directories in ``workdir`` matching ``patterns``."""
    found = []
    for pattern in patterns:
        for path in sorted(Path(workdir).glob(pattern)):
            if path not in found:
                found.append(path)
    return found


def reset_state(
    runner: CommandRunner,
    config_file: Union[str, Path],
    artifact_patterns: Iterable[str],
    workdir: Union[str, Path] = ".",
) -> None:
    """Restore the config file from HEAD, then delete generated artifacts.

    Artifacts are only deleted once the restore succeeded.
    """
    args = ["git", "checkout", "HEAD", "--", str(config_file)]
    log_action(f"Restoring {config_file} from the last commit...")
    result = runner.run(args)
    if result.exit_code != 0:
        raise SubprocessFailure(" ".join(args), result.exit_code)

    for path in find_artifacts(workdir, artifact_patterns):
        log_action(f"Removing {path}")
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
