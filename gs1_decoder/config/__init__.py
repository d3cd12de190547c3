"""
Configuration management for the GS1 decoder tools.
"""

from gs1_decoder.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
