"""
Service layer for the Deploy Test Application.

Builds the response payloads so routes only handle the HTTP layer:
- application metadata for /api/info
- greeting text for /api/greet/{name}
"""

from .greeting_service import build_greeting, greeting_message
from .info_service import build_app_info, runtime_version

__all__ = [
    "build_app_info",
    "runtime_version",
    "build_greeting",
    "greeting_message",
]
