"""
Hello Login - HTTP Basic Auth client for the /api/hello endpoint

Sends one authenticated GET request to /api/hello and displays the raw
response text.
"""

__version__ = "1.0.0"

from .credentials import Credentials
from .trigger import HelloLogin, alert, login

__all__ = [
    "Credentials",
    "HelloLogin",
    "alert",
    "login"
]
