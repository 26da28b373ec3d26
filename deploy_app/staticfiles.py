"""
Static file serving for the public directory.
"""

from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope


class PublicFiles(StaticFiles):
    """
    StaticFiles mounted at the root, behind every explicit route.

    Only GET and HEAD can read a file. Any other method reaching the mount
    means no route matched, so it is reported as not found rather than 405.
    """

    async def get_response(self, path: str, scope: Scope) -> Response:
        if scope["method"] not in ("GET", "HEAD"):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)
