# -*- coding: utf-8 -*-
"""Root logging setup for console and per-session file logging."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def setup_session_logging(
    base_dir: str | Path | None,
    app_name: str,
    level: str | int = logging.INFO,
) -> Path | None:
    """Configure root logging once per process.

    With ``base_dir`` set, a timestamped session log is written to
    ``<base_dir>/logs``. Returns the session log path, if any.
    """
    root = logging.getLogger()
    if getattr(root, "_demobrowser_logging_configured", False):
        return getattr(root, "_demobrowser_session_log", None)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root.setLevel(level)
    formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)

    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    session_log_path: Path | None = None
    if base_dir is not None:
        logs_dir = Path(base_dir) / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        safe_app_name = app_name.lower().replace(" ", "-")
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        session_log_path = logs_dir / f"{safe_app_name}-{timestamp}.log"
        file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root.info("Session log file established: %s", session_log_path)
        root.debug("System info: OS=%s", os.name)

    root._demobrowser_logging_configured = True  # type: ignore[attr-defined]
    root._demobrowser_session_log = session_log_path  # type: ignore[attr-defined]
    return session_log_path
