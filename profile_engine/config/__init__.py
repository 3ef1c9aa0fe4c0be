"""Configuration management module."""

from .settings import Settings, get_settings
from .container import Container, get_container

__all__ = [
    "Settings",
    "get_settings",
    "Container",
    "get_container",
]
