"""Rewrite of the example configuration to use the provisioned workspace."""
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import List, Union

from tfc_setup.config import DEFAULT_HOST, Anchor
from tfc_setup.errors import RewriteError

logger = logging.getLogger(__name__)

ORGANIZATION_PLACEHOLDER = "{{ORGANIZATION_NAME}}"
WORKSPACE_PLACEHOLDER = "{{WORKSPACE_NAME}}"


def find_anchor_line(lines: List[str], anchor: Anchor) -> int:
    """Return the index of the line the hostname goes after."""
    header = re.compile(anchor.block_pattern)
    for index, line in enumerate(lines):
        if header.search(line):
            target = index + anchor.offset
            if target >= len(lines):
                break
            return target
    raise RewriteError(
        f"Could not find a configuration block matching {anchor.block_pattern!r} "
        f"with at least {anchor.offset} line(s) to anchor the hostname."
    )


def render_config(
    text: str,
    host: str,
    organization_name: str,
    workspace_name: str,
    anchor: Anchor = Anchor(),
) -> str:
    """Return ``text`` pointed at the given host, organization and workspace."""
    lines = text.splitlines(keepends=True)

    if host != DEFAULT_HOST:
        position = find_anchor_line(lines, anchor)
        anchor_line = lines[position]
        indent = anchor_line[:len(anchor_line) - len(anchor_line.lstrip())]
        newline = "\r\n" if anchor_line.endswith("\r\n") else "\n"
        if not anchor_line.endswith("\n"):
            lines[position] = anchor_line + newline
        lines.insert(position + 1, f'{indent}hostname = "{host}"{newline}')

    rendered = "".join(lines)
    rendered = rendered.replace(ORGANIZATION_PLACEHOLDER, organization_name)
    return rendered.replace(WORKSPACE_PLACEHOLDER, workspace_name)


def rewrite_config(
    path: Union[str, Path],
    host: str,
    organization_name: str,
    workspace_name: str,
    anchor: Anchor = Anchor(),
) -> None:
    """Rewrite ``path`` through a temporary file moved over the original.

    The original is left untouched if anything fails before the move.
    """
    path = Path(path)
    try:
        with open(path, 'r', newline='') as f:
            original = f.read()
    except OSError as e:
        raise RewriteError(f"Could not read {path}: {e}") from e

    rendered = render_config(original, host, organization_name, workspace_name, anchor)

    temp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            'w', dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False, newline=''
        ) as temp:
            temp_name = temp.name
            temp.write(rendered)
            temp.flush()
            os.fsync(temp.fileno())
        os.chmod(temp_name, path.stat().st_mode & 0o7777)
        os.replace(temp_name, path)
    except OSError as e:
        if temp_name and os.path.exists(temp_name):
            os.unlink(temp_name)
        raise RewriteError(f"Could not write {path}: {e}") from e

    logger.debug("rewrote %s for %s/%s", path, organization_name, workspace_name)
