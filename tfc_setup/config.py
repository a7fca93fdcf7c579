"""Settings for the setup workflow."""
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Tuple

from tfc_setup.utils import get_real_home

DEFAULT_HOST = "app.terraform.io"
DEFAULT_CONFIG_FILE = "main.tf"
DEFAULT_REQUIRED_TOOLS = ("terraform", "git")
DEFAULT_ARTIFACT_PATTERNS = (".terraform", "*.lock.hcl")


def default_credentials_file() -> Path:
    """Static credentials file written by ``terraform login``."""
    return Path(get_real_home()) / ".terraform.d" / "credentials.tfrc.json"


@dataclass(frozen=True)
class Anchor:
    """Insertion point: the ``offset``-th line inside the first block whose
    header matches ``block_pattern`` (the header itself is line 0)."""

    block_pattern: str = r'^\s*(backend\s+"remote"|cloud)\s*\{'
    offset: int = 1


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    config_file: Path = Path(DEFAULT_CONFIG_FILE)
    credentials_file: Optional[Path] = None
    required_tools: Tuple[str, ...] = DEFAULT_REQUIRED_TOOLS
    artifact_patterns: Tuple[str, ...] = DEFAULT_ARTIFACT_PATTERNS
    anchor: Anchor = Anchor()

    def __post_init__(self):
        if self.credentials_file is None:
            object.__setattr__(self, "credentials_file", default_credentials_file())

    @property
    def workdir(self) -> Path:
        return self.config_file.parent

    @staticmethod
    def from_env() -> "Settings":
        config_file = os.getenv("TFC_SETUP_CONFIG_FILE", DEFAULT_CONFIG_FILE).strip()
        credentials_file = os.getenv("TFC_SETUP_CREDENTIALS_FILE", "").strip()
        return Settings(
            config_file=Path(config_file),
            credentials_file=Path(credentials_file) if credentials_file else None,
            required_tools=_split(os.getenv("TFC_SETUP_REQUIRED_TOOLS"), DEFAULT_REQUIRED_TOOLS),
            artifact_patterns=_split(os.getenv("TFC_SETUP_ARTIFACTS"), DEFAULT_ARTIFACT_PATTERNS),
        )

    def override(
        self,
        host: Optional[str] = None,
        config_file: Optional[Path] = None,
        credentials_file: Optional[Path] = None,
    ) -> "Settings":
        """Apply CLI values on top of these settings, ignoring unset ones."""
        changes = {
            "host": host,
            "config_file": config_file,
            "credentials_file": credentials_file,
        }
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _split(raw: Optional[str], default: Tuple[str, ...]) -> Tuple[str, ...]:
    if not raw:
        return default
    values = tuple(item.strip() for item in raw.split(",") if item.strip())
    return values or default
