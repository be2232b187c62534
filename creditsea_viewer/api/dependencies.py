"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from creditsea_viewer.config import settings
from creditsea_viewer.domain.state import ViewerState


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_viewer_state(request: Request) -> ViewerState:
    """Provide the viewer state container owned by the application"""
    return request.app.state.viewer


def get_accepted_extension() -> str:
    """File picker extension hint"""
    return settings.accepted_upload_extension
