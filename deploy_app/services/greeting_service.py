"""
Greeting service.

The name is embedded exactly as received. It is not escaped for HTML or any
other rendering context; clients that render it must escape it themselves.
"""

from datetime import datetime
from typing import Optional

from deploy_app.schemas.greet import GreetResponse
from deploy_app.utils.time import utc_timestamp


def greeting_message(name: str) -> str:
    return f"Hello, {name}! Welcome."


def build_greeting(name: str, now: Optional[datetime] = None) -> GreetResponse:
    """
    Build the greeting response for ``name``.

    Args:
        name: URL-decoded path segment
        now: Moment to report as the timestamp (defaults to current time)
    """
    return GreetResponse(message=greeting_message(name), timestamp=utc_timestamp(now))
