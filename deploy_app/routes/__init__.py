"""
FastAPI routers for all endpoints.

Each module defines a router for one area: HTML pages or the JSON API.
Routers are registered in deploy_app.main.
"""
