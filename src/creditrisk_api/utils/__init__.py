"""Shared helpers for creditrisk_api."""

from .logging import get_logger, json_log

__all__ = ['get_logger', 'json_log']
