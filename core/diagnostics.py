"""
Health check utilities for the logging facility.

Reports whether the configuration loaded, whether the log file is still
being written, and whether the runtime dependencies import.
"""
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from core.logger import logger as base_logger

logger = base_logger.getChild("diagnostics")


def check_diagnostics(log_manager=None) -> Dict[str, Any]:
    """
    Perform a diagnostics check of the logging facility.

    Args:
        log_manager: Logger to inspect, defaults to the shared instance

    Returns:
        Dict with overall status and per-component information
    """
    diagnostics_status = {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "components": {}
    }

    # Check parameters
    try:
        from configuration.parameters import parameters
        diagnostics_status["components"]["parameters"] = {
            "status": "ok",
            "log_level": parameters.LOG_LEVEL,
            "log_file_encoding": parameters.LOG_FILE_ENCODING,
        }
    except Exception as e:
        diagnostics_status["components"]["parameters"] = {
            "status": "error",
            "error": str(e)
        }
        diagnostics_status["status"] = "degraded"

    # Check the file sink
    try:
        if log_manager is None:
            from linelog.manager import Logger
            log_manager = Logger.get()
        sink = log_manager.file_sink
        path = Path(sink.path)
        diagnostics_status["components"]["file_sink"] = {
            "status": "ok" if log_manager.file_enabled else "disabled",
            "path": str(path.resolve()),
            "path_exists": path.exists(),
            "is_open": sink.is_open,
        }
        if not log_manager.file_enabled:
            diagnostics_status["status"] = "degraded"
    except Exception as e:
        diagnostics_status["components"]["file_sink"] = {
            "status": "error",
            "error": str(e)
        }
        diagnostics_status["status"] = "degraded"

    # Check if required packages are importable
    required_packages = [
        "pydantic",
        "pydantic_settings",
    ]

    packages_status = {}
    for package in required_packages:
        try:
            __import__(package)
            packages_status[package] = "ok"
        except ImportError as e:
            packages_status[package] = f"missing: {e}"
            diagnostics_status["status"] = "degraded"

    diagnostics_status["components"]["packages"] = packages_status

    if diagnostics_status["status"] != "healthy":
        logger.warning(f"[DIAGNOSTICS] Status {diagnostics_status['status']}")

    return diagnostics_status


if __name__ == "__main__":
    # Run diagnostics check when executed directly
    import json
    print(json.dumps(check_diagnostics(), indent=2))
