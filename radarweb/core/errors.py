"""
radarweb exception hierarchy.

Geometry functions never raise; these exceptions cover failures coming
back from a host renderer.
"""

from typing import Any, Dict, Optional


class RadarWebError(Exception):
    """Base exception for radarweb errors.

    Attributes:
        user_message: Safe, user-facing error message.
        context: Dictionary of debug information.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.user_message = user_message or message
        self.context = context or {}


class RenderError(RadarWebError):
    """A host renderer failed while drawing a chart."""

    pass
