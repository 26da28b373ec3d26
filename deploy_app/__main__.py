"""
Start command for the Deploy Test Application.

Usage:
    python -m deploy_app

Listens on 0.0.0.0:$PORT (default 3000).
"""

import uvicorn

from deploy_app.config import Settings


def main() -> None:
    settings = Settings.from_env()

    uvicorn.run(
        "deploy_app.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
