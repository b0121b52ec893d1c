"""
Application Layer
=================

Use cases and DTOs.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create team, add reaction, search users, etc.)
- DTOs: Pydantic models for use case requests and responses
"""
