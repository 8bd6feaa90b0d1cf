"""Unified logging configuration for the clip runner and library users.

Provides:
    - Console and optional file handler
    - JSON output mode for ingestion
    - Contextual fields (app, job, window) via contextvars
    - Warning capture (Python warnings → logging)

Public API:
    setup_logging(log_level="INFO", context={"app": "run_clip"})
    get_logger(name)
    push_context(job="demo")
    pop_context(keys=["job"])

Format examples:
    Human: 2026-10-16T09:12:44.102Z | INFO     | app=run_clip | Loaded 7 segments
    JSON: {"t":"2026-10-16T09:12:44.102000+00:00","lvl":"INFO","app":"run_clip","msg":"..."}

Library modules only call logging.getLogger(__name__); handlers are
installed by entrypoints.  Repeated setup_logging() calls replace the
handlers it installed instead of stacking them.
"""

import contextvars
import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


_context_var = contextvars.ContextVar('logging_context', default={})

_configured = False
_installed_handlers: List[logging.Handler] = []

_LEVEL_COLORS = {
    'DEBUG': '\033[36m',
    'INFO': '\033[32m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[35m',
}
_RESET = '\033[0m'


class ContextFormatter(logging.Formatter):
    """Formatter that appends fields from push_context().

    Parameters
    ----------
    fmt_mode : str
        "human" or "json"
    use_color : bool
        Colorize level names (only when the stream is a TTY)
    """

    def __init__(self, fmt_mode: str = "human", use_color: bool = True):
        super().__init__()
        if fmt_mode not in ("human", "json"):
            raise ValueError(f"Unknown format mode: {fmt_mode}. Use 'human' or 'json'.")
        self.fmt_mode = fmt_mode
        self.use_color = use_color and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        context = _context_var.get({})
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)

        if self.fmt_mode == "json":
            log_dict = {
                't': ts.isoformat(),
                'lvl': record.levelname,
                'name': record.name,
                'pid': os.getpid(),
                'msg': record.getMessage(),
            }
            log_dict.update(context)
            if record.exc_info:
                log_dict['exc'] = self.formatException(record.exc_info)
            return json.dumps(log_dict, default=str)

        ts_str = ts.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'
        level = f"{record.levelname:8s}"
        if self.use_color:
            level = f"{_LEVEL_COLORS.get(record.levelname, '')}{level}{_RESET}"

        parts = [ts_str, '|', level, '|']
        context_str = ' '.join(f"{k}={v}" for k, v in context.items())
        if context_str:
            parts.extend([context_str, '|'])
        parts.append(record.getMessage())

        line = ' '.join(parts)
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    json: bool = False,
    color: bool = True,
    to_stderr: bool = True,
    capture_warnings: bool = True,
    context: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Configure the root logger (idempotent).

    Parameters
    ----------
    log_level : str
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
    log_file : str, optional
        Also write to this file (parent directories are created)
    json : bool
        Emit JSON lines instead of human-readable lines, default False
    color : bool
        ANSI colors on the console, default True
    to_stderr : bool
        Log to stderr, default True
    capture_warnings : bool
        Route Python warnings into logging, default True
    context : dict, optional
        Initial contextual fields (e.g. {"app": "run_clip"})

    Returns
    -------
    dict
        {"handlers": [...]} for the handlers that were installed

    Raises
    ------
    ValueError
        If log_level is not a known level name
    """
    global _configured, _installed_handlers

    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    root = logging.getLogger()
    if _configured:
        for handler in _installed_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)

    fmt_mode = "json" if json else "human"
    handlers = []

    if to_stderr:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ContextFormatter(fmt_mode, use_color=color))
        root.addHandler(console_handler)
        handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(ContextFormatter(fmt_mode, use_color=False))
        root.addHandler(file_handler)
        handlers.append(file_handler)

    if context:
        push_context(**context)

    if capture_warnings:
        logging.captureWarnings(True)

    _configured = True
    _installed_handlers = handlers
    return {'handlers': handlers}


def get_logger(name: str) -> logging.Logger:
    """Get logger by name (typically __name__)."""
    return logging.getLogger(name)


def set_level(level: str) -> None:
    """Update root logger level at runtime."""
    logging.getLogger().setLevel(getattr(logging, level.upper()))


def push_context(**kwargs) -> None:
    """Add contextual fields to all subsequent log records.

    Examples
    --------
    >>> push_context(app="run_clip")
    >>> push_context(job="demo")
    >>> logger.info("Clipping")  # → "... | app=run_clip job=demo | Clipping"
    """
    current = _context_var.get({})
    _context_var.set({**current, **kwargs})


def pop_context(keys: Optional[List[str]] = None) -> None:
    """Remove contextual fields; all of them if keys is None."""
    if keys is None:
        _context_var.set({})
        return
    current = dict(_context_var.get({}))
    for key in keys:
        current.pop(key, None)
    _context_var.set(current)


def get_context() -> Dict[str, Any]:
    """Return a copy of the current contextual fields."""
    return dict(_context_var.get({}))
