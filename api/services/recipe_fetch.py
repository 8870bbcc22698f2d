import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlsplit

import requests

from api import config
from processing.jsonld import extract_recipe_from_html

logger = logging.getLogger(__name__)


class RecipeFetchError(Exception):
    """Base error of the fetch pipeline, carries the HTTP status to answer with."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingUrlError(RecipeFetchError):
    status_code = 400

    def __init__(self):
        super().__init__("Missing url parameter.")


class InvalidUrlError(RecipeFetchError):
    status_code = 400

    def __init__(self):
        super().__init__("Invalid url parameter.")


class HostNotAllowedError(RecipeFetchError):
    status_code = 400

    def __init__(self, hostname: Optional[str]):
        super().__init__("Only bonappetit.com URLs are allowed.")
        self.hostname = hostname


class UpstreamError(RecipeFetchError):
    status_code = 502

    def __init__(self, upstream_status: Optional[int]):
        label = upstream_status if upstream_status is not None else "unreachable"
        super().__init__(f"Upstream request failed ({label}).")
        self.upstream_status = upstream_status


class RecipeNotFoundError(RecipeFetchError):
    status_code = 422

    def __init__(self):
        super().__init__("No Recipe JSON-LD found on that page.")


def validate_target_url(target: Optional[str]) -> str:
    """
    Check a requested URL against the publisher allow-list.

    Args:
        target: Raw value of the `url` query parameter.
    Returns:
        str: The absolute URL to fetch.
    Raises:
        MissingUrlError, InvalidUrlError, HostNotAllowedError
    """
    if not target:
        raise MissingUrlError()
    try:
        parts = urlsplit(target)
        hostname = parts.hostname
    except ValueError:
        raise InvalidUrlError()
    if not parts.scheme or not hostname:
        raise InvalidUrlError()
    if hostname not in config.ALLOWED_HOSTS:
        raise HostNotAllowedError(hostname)
    return parts.geturl()


def fetch_recipe_html(target_url: str) -> Tuple[int, str]:
    """
    Perform the single outbound GET for a validated URL.

    Returns:
        tuple: (upstream status code, page HTML).
    Raises:
        UpstreamError: On a transport failure or a non-success status.
    """
    try:
        response = requests.get(
            target_url,
            headers={"user-agent": config.USER_AGENT, "accept": config.ACCEPT_HEADER},
            timeout=config.FETCH_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.warning(f"Request failed for {target_url}: {e}")
        raise UpstreamError(None) from e
    if not 200 <= response.status_code < 300:
        raise UpstreamError(response.status_code)
    return response.status_code, response.text


def get_recipe(target: Optional[str]) -> Tuple[str, int, Optional[Dict[str, Any]]]:
    """
    Validate, fetch and extract the recipe published at `target`.

    Returns:
        tuple: (fetched URL, upstream status, recipe dict or None when the page has none).
    Raises:
        RecipeFetchError: On a rejected URL or a failed upstream request.
    """
    target_url = validate_target_url(target)
    upstream_status, html = fetch_recipe_html(target_url)
    return target_url, upstream_status, extract_recipe_from_html(html)


def log_fetch_result(target_url: str, upstream_status: int, recipe_found: bool) -> None:
    """Post-response log record. Never raises, the response is already sent."""
    try:
        logger.info(f"Fetched recipe HTML target={target_url} status={upstream_status} recipeFound={recipe_found}")
    except Exception:
        pass
