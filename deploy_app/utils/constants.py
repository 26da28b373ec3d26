"""
Fixed application constants.

Values reported by /api/info and the defaults used when the environment
does not override them.
"""
from pathlib import Path

APP_NAME = "Deploy Test Application"
APP_VERSION = "1.0.0"

DEFAULT_PORT = 3000
DEFAULT_ENVIRONMENT = "development"
DEFAULT_LOG_LEVEL = "INFO"

# Static assets shipped inside the package
PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"
INDEX_PAGE = "index.html"
NOT_FOUND_PAGE = "404.html"
