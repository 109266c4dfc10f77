"""
URL helpers
===========

• Map a file under the document root to its public URL
• Check whether a URL answers with a non-error status

Public API:
    url_from_path(path, server_vars=None, base_path=None) -> Optional[str]
    url_exists(url, timeout=12) -> bool
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional, Union

import requests

from data_utilities.logger import CustomLoggerAdapter, get_logger

# ============================================================
# CONFIGURATION
# ============================================================

REQUIRED_SERVER_VARS = ("SERVER_NAME", "CONTEXT_PREFIX", "CONTEXT_DOCUMENT_ROOT")

DEFAULT_TIMEOUT = 12

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/124.0.0.0 Safari/537.36"
    ),
}

# Anything below this counts as existing
ERROR_STATUS = 400


# ============================================================
# URL FROM PATH
# ============================================================


def _request_vars() -> Optional[Mapping[str, str]]:
    """
    Server variables of the current CGI request, None outside one.
    """
    if "GATEWAY_INTERFACE" not in os.environ:
        return None
    return os.environ


def url_from_path(
    path: Union[str, Path],
    server_vars: Optional[Mapping[str, str]] = None,
    base_path: Union[str, Path, None] = None,
) -> Optional[str]:
    """
    Generate a URL from a path.

    :param path: A file or directory path
    :param server_vars: Must hold SERVER_NAME, CONTEXT_PREFIX and
        CONTEXT_DOCUMENT_ROOT, optionally HTTPS. Defaults to the CGI
        environment; without one the URL cannot be computed.
    :param base_path: Directory that relative paths are taken from
    :return: The URL, or None if it cannot be computed
    """
    if server_vars is None:
        server_vars = _request_vars()
        if server_vars is None:
            return None

    if any(server_vars.get(key) is None for key in REQUIRED_SERVER_VARS):
        return None

    path = Path(path)
    if base_path is not None and not path.is_absolute():
        path = Path(base_path) / path

    try:
        resolved = str(path.resolve(strict=True))
    except (OSError, RuntimeError):
        return None

    scheme = "https://" if server_vars.get("HTTPS") == "on" else "http://"

    # Strip the root only on a path-component boundary
    document_root = server_vars["CONTEXT_DOCUMENT_ROOT"].rstrip("/")
    if document_root and (resolved == document_root or resolved.startswith(document_root + "/")):
        resolved = resolved[len(document_root):]

    return scheme + server_vars["SERVER_NAME"] + server_vars["CONTEXT_PREFIX"] + resolved


# ============================================================
# URL EXISTS
# ============================================================


def url_exists(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    logger: Optional[CustomLoggerAdapter] = None,
) -> bool:
    """
    Does a URL "exist"?

    Any status below 400 on the first response counts, redirects included.
    """
    logger = logger or get_logger()

    try:
        response = requests.head(
            url,
            allow_redirects=False,
            timeout=timeout,
            headers=DEFAULT_HEADERS,
        )
    except requests.exceptions.SSLError as e:
        logger.warning(f"SSL error while checking {url}: {e}")
        return False
    except requests.exceptions.RequestException as e:
        logger.warning(f"Could not reach {url}: {e}")
        return False

    return response.status_code < ERROR_STATUS
