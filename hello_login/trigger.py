"""
Login trigger: send one Basic-authenticated GET to /api/hello and show the reply
"""

import sys
import logging
from typing import Callable, Dict, Optional

import requests

from .credentials import Credentials

HELLO_PATH = "/api/hello"
DEFAULT_BASE_URL = "http://127.0.0.1:8000"


def alert(message: str):
    """Default display: write the response text verbatim to stdout, no newline added"""
    sys.stdout.write(message)
    sys.stdout.flush()


class HelloLogin:
    """Builds credentials, calls GET /api/hello and hands the body text to a display"""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        credentials: Optional[Credentials] = None,
        display: Optional[Callable[[str], None]] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.credentials = credentials if credentials is not None else Credentials()
        self.display = display if display is not None else alert
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    @property
    def url(self) -> str:
        """Absolute URL of the hello endpoint"""
        return f"{self.base_url}{HELLO_PATH}"

    def build_headers(self) -> Dict[str, str]:
        """Fresh header dict for every request"""
        return {"Authorization": self.credentials.basic_auth_header()}

    def send(self) -> requests.Response:
        """Issue the single GET request. Network errors propagate to the caller."""
        if self.credentials.is_default:
            self.logger.warning("Using built-in demo credentials; do not rely on them for access control")

        self.logger.info(f"Making request: GET {self.url}")
        try:
            response = requests.get(self.url, headers=self.build_headers(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            self.logger.error(f"HTTP request failed: {e}")
            raise

        self.logger.debug(f"Received {response.status_code} {response.reason} ({len(response.content)} bytes)")
        return response

    def run(self) -> None:
        """encode -> send -> read text -> display"""
        response = self.send()
        # Body is always UTF-8 whatever the Content-Type says; non-2xx bodies are shown as-is
        self.display(response.content.decode("utf-8-sig", errors="replace"))


def login(base_url: str = DEFAULT_BASE_URL, display: Optional[Callable[[str], None]] = None):
    """Run the login trigger once with the default credentials"""
    HelloLogin(base_url=base_url, display=display).run()
