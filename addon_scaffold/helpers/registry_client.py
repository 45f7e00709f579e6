"""npm registry client.

Fetches a package document (``GET <registry>/<package>``) and exposes the
published version identifiers. One request per call, no retries.
"""

from __future__ import annotations

from typing import Any, cast

import httpx

from addon_scaffold.helpers.settings import registry_timeout, registry_url

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class RegistryError(Exception):
    """Base exception for registry operations."""

    def __init__(self, package_name: str, message: str) -> None:
        super().__init__(message)
        self.package_name = package_name


class NetworkFailure(RegistryError):
    """Connection error, DNS failure or non-success HTTP status."""


class MalformedResponse(RegistryError):
    """Registry body is not JSON or has no ``versions`` mapping."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def package_url(package_name: str) -> str:
    """Return the registry document URL for a package."""
    return f"{registry_url()}/{package_name}"


def fetch_package_document(
    package_name: str,
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """Fetch and parse the registry document of a package.

    Args:
        package_name: npm package name, scoped names included
            (e.g. ``@minecraft/server``).
        client: Optional pre-configured ``httpx.Client``. When omitted a
            client is created for this call and closed afterwards.

    Returns:
        The parsed JSON document. Its ``versions`` field is guaranteed to
        be a mapping.

    Raises:
        NetworkFailure: On transport errors or a non-2xx status.
        MalformedResponse: On a body that is not the expected JSON shape.
    """
    url = package_url(package_name)
    if client is None:
        with httpx.Client(timeout=registry_timeout(), follow_redirects=True) as own_client:
            return _fetch(own_client, package_name, url)
    return _fetch(client, package_name, url)


def _fetch(client: httpx.Client, package_name: str, url: str) -> dict[str, Any]:
    try:
        response = client.get(url, headers={"Accept": "application/json"})
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise NetworkFailure(
            package_name, f"Failed to fetch {package_name} from {url}: {e}"
        ) from e

    try:
        document: object = response.json()
    except ValueError as e:
        raise MalformedResponse(
            package_name, f"Invalid JSON in registry response for {package_name}: {e}"
        ) from e

    if not isinstance(document, dict):
        raise MalformedResponse(
            package_name, f"Registry response for {package_name} is not a JSON object"
        )
    document = cast(dict[str, Any], document)
    if not isinstance(document.get("versions"), dict):
        raise MalformedResponse(
            package_name, f"Registry response for {package_name} has no 'versions' mapping"
        )
    return document


def package_versions(document: dict[str, Any]) -> list[str]:
    """Return every published version identifier of a package document."""
    versions = cast(dict[str, object], document["versions"])
    return [str(key) for key in versions]
