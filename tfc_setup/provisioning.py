"""Client for the Terraform Cloud getting-started setup endpoint."""
import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

import requests

from tfc_setup.errors import TransportError

logger = logging.getLogger(__name__)

SETUP_PATH = "/api/getting-started/setup"
USER_AGENT = "tfc-getting-started"
REQUEST_BODY = {"workflow": "remote-operations"}


@dataclass(frozen=True)
class Success:
    organization_name: str
    workspace_name: str


@dataclass(frozen=True)
class InfoMessage:
    text: str


@dataclass(frozen=True)
class ApiError:
    text: str


@dataclass(frozen=True)
class UnknownError:
    raw: str


ProvisioningResult = Union[Success, InfoMessage, ApiError, UnknownError]


def setup_url(host: str) -> str:
    return f"https://{host}{SETUP_PATH}"


def request_setup(host: str, token: str, session: Optional[requests.Session] = None) -> ProvisioningResult:
    """Ask ``host`` to create a trial organization and workspace.

    A single attempt is made with no timeout. Connection problems raise
    ``TransportError``; everything the server answers is classified.
    """
    if session is None:
        with requests.Session() as owned:
            return request_setup(host, token, session=owned)

    headers = {
        "Content-Type": "application/vnd.api+json",
        "Authorization": f"Bearer {token}",
        "User-Agent": USER_AGENT,
    }
    url = setup_url(host)
    logger.debug("POST %s", url)
    try:
        response = session.post(url, headers=headers, data=json.dumps(REQUEST_BODY))
    except requests.RequestException as e:
        raise TransportError(f"Could not reach {host}: {e}") from e

    logger.debug("setup endpoint answered HTTP %s", response.status_code)
    raw = response.text
    try:
        body = json.loads(raw)
    except ValueError:
        return UnknownError(raw)
    return classify_response(body, raw)


def classify_response(body: Any, raw: Optional[str] = None) -> ProvisioningResult:
    """Classify a decoded response body.

    ``errors`` wins over ``error``, which wins over ``info``; only when none
    of them is set are the organization and workspace names read.
    """
    if raw is None:
        raw = json.dumps(body)
    if not isinstance(body, dict):
        return UnknownError(raw)

    if body.get("errors") is not None:
        return UnknownError(raw)
    if body.get("error") is not None:
        return ApiError(_as_text(body["error"]))
    if body.get("info") is not None:
        return InfoMessage(_as_text(body["info"]))

    data = body.get("data")
    if not isinstance(data, dict):
        return UnknownError(raw)
    organization_name = data.get("organization-name")
    workspace_name = data.get("workspace-name")
    if not organization_name or not workspace_name:
        return UnknownError(raw)
    return Success(str(organization_name), str(workspace_name))


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)
