"""Models module for configuration."""

from responder.models.config import ResponderConfig

__all__ = ["ResponderConfig"]
