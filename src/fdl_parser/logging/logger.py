"""
Centralized logging configuration for the FDL parser.

Key behaviors
-------------
* Single entry point via ``get_logger`` so handlers/formatters stay consistent.
* Console logging that respects the configured debug flag.
* File logging only when ``logging.file`` is set in ``config/fdl_parser.yml``
  (or a config passed to ``configure_logging``): a master log file, optional
  rotation and optional per-module logs. Without it nothing touches the disk.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from fdl_parser.config import CONFIG_PATH, FDLConfig, get_config

BASE_LOGGER_NAME = "fdl_parser"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_log_dir: Optional[Path] = None
_rotate_logs: bool = False
_module_files: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _resolve_log_dir(cfg: FDLConfig) -> Path:
    """
    Relative ``logging.dir`` values resolve against the project root when
    running from a checkout (``config/`` exists), else the working directory.
    """
    log_dir = Path(cfg.logging.get("dir") or "logs")
    if log_dir.is_absolute():
        return log_dir

    project_root = CONFIG_PATH.parent.parent
    base = project_root if CONFIG_PATH.parent.is_dir() else Path.cwd()
    return base / log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)

    if _rotate_logs:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _tag(handler: logging.Handler) -> logging.Handler:
    handler.is_fdl_handler = True  # type: ignore[attr-defined]
    return handler


def _drop_handlers(logger: Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, "is_fdl_handler", False):
            logger.removeHandler(handler)
            handler.close()


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    if _log_dir is None:
        return
    if any(getattr(h, "is_fdl_handler", False) for h in logger.handlers):
        return

    path = _log_dir / f"{module_name.replace('.', '_')}.log"
    logger.addHandler(_tag(_build_file_handler(path, _effective_level)))


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def configure_logging(config: Optional[FDLConfig] = None) -> Logger:
    """
    (Re)build the handlers of the ``fdl_parser`` base logger from ``config``.

    Handlers attached by a previous call are closed and replaced; loggers
    obtained earlier keep working since they propagate to the base logger.
    """
    global _base_configured, _effective_level, _log_dir, _rotate_logs, _module_files

    cfg = config if config is not None else get_config()
    base_logger = logging.getLogger(BASE_LOGGER_NAME)

    _drop_handlers(base_logger)
    for name in _logger_cache:
        if name != BASE_LOGGER_NAME:
            _drop_handlers(logging.getLogger(name))

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    _effective_level = logging.DEBUG if cfg.debug else base_level
    _rotate_logs = bool(cfg.logging.get("rotate", False))

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    console = StreamHandler()
    console.setLevel(logging.DEBUG if cfg.debug else logging.WARNING)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(_tag(console))

    master_name = cfg.logging.get("file")
    if master_name:
        _log_dir = _resolve_log_dir(cfg)
        _module_files = bool(cfg.logging.get("module_files", False))
        base_logger.addHandler(
            _tag(_build_file_handler(_log_dir / master_name, _effective_level))
        )
    else:
        _log_dir = None
        _module_files = False

    for name in _logger_cache:
        if name != BASE_LOGGER_NAME:
            child = logging.getLogger(name)
            child.setLevel(_effective_level)
            if _module_files:
                _attach_module_handler(child, name)

    _base_configured = True
    return base_logger


def get_logger(name: Optional[str] = None) -> Logger:
    """Return a logger wired to the project-wide handlers.

    Names outside the ``fdl_parser`` namespace are nested under it, so
    ``get_logger("builder")`` yields ``fdl_parser.builder``. With
    ``logging.file`` and ``logging.module_files`` set, each module also
    writes ``<logging.dir>/<module>.log``.
    """
    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if not _base_configured:
        base_logger = configure_logging()

    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    if logger_name == BASE_LOGGER_NAME:
        logger = base_logger
    else:
        logger = logging.getLogger(logger_name)
        logger.setLevel(_effective_level)
        logger.propagate = True
        if _module_files:
            _attach_module_handler(logger, logger_name)

    _logger_cache[logger_name] = logger
    return logger


def log_debug(message: str, *args, **kwargs) -> None:
    get_logger().debug(message, *args, **kwargs)


def log_info(message: str, *args, **kwargs) -> None:
    get_logger().info(message, *args, **kwargs)


def log_warning(message: str, *args, **kwargs) -> None:
    get_logger().warning(message, *args, **kwargs)


def log_error(message: str, *args, **kwargs) -> None:
    get_logger().error(message, *args, **kwargs)


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
