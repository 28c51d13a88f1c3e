"""Endpoint functions, one module per API category."""

from . import anime, info, list, manga, media, messenger, notification, ucp, user

__all__ = ["anime", "info", "list", "manga", "media", "messenger", "notification", "ucp", "user"]
