#!/usr/bin/env python3
"""
Configuration module for the hold'em bot.

Public API:
    - Settings: Hierarchical dot-notation settings with optional JSON persistence
"""

from holdem_bot.config.settings import Settings

__all__ = ['Settings']
