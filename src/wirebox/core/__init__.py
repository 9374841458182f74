"""Wirebox Core: configuration."""

from wirebox.core.config import Config, config_properties

__all__ = ["Config", "config_properties"]
