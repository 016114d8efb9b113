"""Configuration module for the zero2prod project."""

from .db_settings import DBSettings
from .settings import Settings, load_settings
from .zero2prod_settings import Zero2ProdSettings

__all__ = [
    "DBSettings",
    "Settings",
    "Zero2ProdSettings",
    "load_settings",
]
