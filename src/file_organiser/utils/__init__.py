"""Utility modules for File Organiser."""

from .logger import get_logger, OrganiserLogger

__all__ = ['get_logger', 'OrganiserLogger']
