"""
Internal diagnostics logger.

This is the logger the facility uses to talk about itself. Handlers are
attached by configuration/logger_setup.py when the shared Logger is first
created.

Usage:
    from core.logger import logger
    logger.warning("Your message here")
"""
import logging

from configuration.definitions import DIAGNOSTICS_LOGGER_NAME

# Modules under linelog use logging.getLogger(__name__), which lands in this hierarchy
logger = logging.getLogger(DIAGNOSTICS_LOGGER_NAME)
