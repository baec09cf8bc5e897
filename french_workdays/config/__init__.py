"""
Configuration loading for the French workday calculator.
"""

from french_workdays.config.manager import ConfigManager

__all__ = ["ConfigManager"]
