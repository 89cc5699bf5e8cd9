"""
Utilities module for docker-container.

This module provides common utilities like logging configuration.
"""

from __future__ import annotations

from docker_container.utils.logger import get_logger, logger

__all__ = ["get_logger", "logger"]
