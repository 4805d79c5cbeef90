"""
Credentials and HTTP Basic Authorization header encoding
"""

import base64

DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "password"


class Credentials:
    """Username/password pair sent with HTTP Basic auth"""

    def __init__(self, username: str = DEFAULT_USERNAME, password: str = DEFAULT_PASSWORD):
        self.username = username
        self.password = password

    @property
    def is_default(self) -> bool:
        """True when the built-in demo credentials are in use"""
        return self.username == DEFAULT_USERNAME and self.password == DEFAULT_PASSWORD

    def encode(self) -> str:
        """Base64 of 'username:password'"""
        raw = f"{self.username}:{self.password}".encode('utf-8')
        return base64.b64encode(raw).decode('utf-8')

    def basic_auth_header(self) -> str:
        """Value for the Authorization header"""
        return f"Basic {self.encode()}"

    def __repr__(self):
        # Keep the password out of logs and tracebacks
        return f"Credentials(username={self.username!r}, password='***')"
