"""
Deploy Test Application.

Minimal FastAPI service used to verify a cloud deployment: static pages
plus a few JSON endpoints.
"""

from deploy_app.utils.constants import APP_VERSION

__version__ = APP_VERSION
