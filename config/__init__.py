"""Configuration module."""
from .settings import settings, Settings, ClientConfig

__all__ = [
    'settings',
    'Settings',
    'ClientConfig',
]
