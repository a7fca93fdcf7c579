"""Token lookup in the static Terraform credentials file."""
import json
from pathlib import Path
from typing import Optional, Union

from tfc_setup.config import DEFAULT_HOST, default_credentials_file
from tfc_setup.errors import MissingCredentials


def find_token(host: str = DEFAULT_HOST, credentials_file: Optional[Union[str, Path]] = None) -> str:
    """Return the API token stored for ``host``.

    Only the static file written by ``terraform login`` is consulted; tokens
    configured through a credentials helper are not seen.
    """
    path = Path(credentials_file) if credentials_file else default_credentials_file()
    missing = MissingCredentials(
        f"We couldn't find a token in the Terraform credentials file at {path}.\n"
        "Please run 'terraform login', then run this setup script again."
    )

    if not path.is_file():
        raise missing

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise missing from e

    credentials = data.get('credentials') if isinstance(data, dict) else None
    entry = credentials.get(host) if isinstance(credentials, dict) else None
    token = entry.get('token') if isinstance(entry, dict) else None
    if not isinstance(token, str) or not token:
        raise missing
    return token
