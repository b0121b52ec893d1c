"""
API v1 Package
===============

Version 1 API controllers.
"""
from .admin_controller import router as admin_router
from .analytics_controller import router as analytics_router
from .comment_controller import router as comment_router
from .reaction_controller import router as reaction_router
from .team_controller import router as team_router

__all__ = ["admin_router", "analytics_router", "comment_router", "reaction_router", "team_router"]
