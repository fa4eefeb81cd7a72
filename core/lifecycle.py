"""
Process teardown utilities.

This module runs registered cleanup callbacks when the interpreter exits,
so the shared Logger can flush and close its log file. No signal handlers
are installed; the host application owns those.
"""
import atexit
from typing import Callable, List, Optional, Tuple

from core.logger import logger as base_logger

logger = base_logger.getChild("lifecycle")


class TeardownHandler:
    """
    Manages cleanup at interpreter exit.

    Callbacks run once, in reverse registration order, from an atexit hook.
    """

    _instance: Optional['TeardownHandler'] = None

    def __new__(cls) -> 'TeardownHandler':
        """Singleton pattern to ensure only one handler exists."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        """Initialize the teardown handler."""
        if self._initialized:
            return

        self._cleanup_callbacks: List[Tuple[Callable[[], None], str]] = []
        self._teardown_in_progress: bool = False
        self._initialized = True

        atexit.register(self._atexit_handler)

        logger.debug("[TEARDOWN] TeardownHandler initialized")

    def register_cleanup(self, callback: Callable[[], None], name: str = "") -> None:
        """
        Register a cleanup callback to be called at exit.

        Args:
            callback: Function to call during teardown
            name: Optional name for logging purposes
        """
        self._cleanup_callbacks.append((callback, name))
        logger.debug(f"[TEARDOWN] Registered cleanup callback: {name or callback.__name__}")

    def _atexit_handler(self) -> None:
        """Handle normal interpreter exit."""
        if not self._teardown_in_progress:
            self._execute_cleanup()

    def _execute_cleanup(self) -> None:
        """Execute all registered cleanup callbacks."""
        if self._teardown_in_progress:
            return

        self._teardown_in_progress = True
        logger.debug(f"[TEARDOWN] Executing {len(self._cleanup_callbacks)} cleanup callbacks...")

        for callback, name in reversed(self._cleanup_callbacks):
            callback_name = name or callback.__name__
            try:
                callback()
                logger.debug(f"[TEARDOWN] Cleanup completed: {callback_name}")
            except Exception as e:
                logger.error(f"[TEARDOWN] Cleanup failed: {callback_name}: {e}", exc_info=True)
