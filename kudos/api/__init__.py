"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Routes: FastAPI route handlers per resource
- Dependencies: Use case and actor resolution
- Errors: Domain error to HTTP status translation
"""
