# -*- coding: utf-8 -*-
"""
Save a Turtle application core module
"""

from .config import Config

__all__ = ["Config"]
