"""
Pydantic schemas for API responses.

Every JSON endpoint declares an explicit response model. The only loosely
typed field is the echoed body, which is a generic JSON value.
"""
