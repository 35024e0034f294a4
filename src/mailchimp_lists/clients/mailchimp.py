"""Mailchimp Marketing API v3 client."""

import logging
import re

import requests
from django.core.exceptions import ImproperlyConfigured

from mailchimp_lists.clients import ApiResult

from .base import BaseClient

logger = logging.getLogger(__name__)

DATACENTER_PATTERN = re.compile(r"^[a-z]+[0-9]+$")


class MailchimpClient(BaseClient):
    """
    Mailchimp Marketing API v3 client.

    The datacenter hosting the account is the suffix of the API key
    (`xxxxxxxx-us6` is served by `https://us6.api.mailchimp.com/3.0/`).
    """

    def __init__(self, api_key: str, timeout: int = 10, verify_ssl: bool = True, proxies: dict | None = None):
        """Configure the Mailchimp client."""
        super().__init__()
        datacenter = (api_key or "").rpartition("-")[2]
        if not api_key or "-" not in api_key or not DATACENTER_PATTERN.match(datacenter):
            raise ImproperlyConfigured(
                f"Could not instantiate {self.__class__.__name__}, the API key must end with its datacenter."
            )
        self._api_key = api_key
        self.datacenter = datacenter
        self.api_endpoint = f"https://{self.datacenter}.api.mailchimp.com/3.0/"
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._proxies = proxies

    @staticmethod
    def _format_error(response):
        """Extract a readable message from a Mailchimp problem response."""
        try:
            problem = response.json()
        except ValueError:
            problem = {}
        if isinstance(problem, dict) and "detail" in problem:
            return f"{problem.get('status', response.status_code)}: {problem['detail']}"
        return f"{response.status_code}: {response.reason}"

    def send(self, method: str, path: str, data: dict | None = None) -> ApiResult:
        """Send a request to the Mailchimp API."""
        url = f"{self.api_endpoint}{path}"
        logger.debug("Mailchimp request %s %s", method, url)
        try:
            response = requests.request(
                method,
                url,
                params=data if method == "GET" else None,
                json=data if method != "GET" else None,
                auth=("apikey", self._api_key),
                headers={"Accept": "application/json"},
                timeout=self._timeout,
                verify=self._verify_ssl,
                proxies=self._proxies,
            )
        except requests.RequestException as err:
            return ApiResult.failure(str(err))

        if not response.ok:
            return ApiResult.failure(self._format_error(response))

        if response.status_code == requests.codes.no_content or not response.content:
            return ApiResult.ok()
        try:
            return ApiResult.ok(response.json())
        except ValueError:
            return ApiResult.failure(f"{response.status_code}: invalid JSON response")
