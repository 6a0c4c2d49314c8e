"""
Logging setup for the Apollo MCP server.

Defaults to stderr-only output, since stdout carries the MCP stdio stream.
Env options (optional):
- APOLLO_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR (default INFO)
- APOLLO_LOG_JSON=1 (JSON formatting)
- APOLLO_LOG_FILE=/path/to/file.log (RotatingFileHandler)
- APOLLO_LOG_DIR=/path/to/dir (uses <service>.log when APOLLO_LOG_FILE unset)
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Iterable, Optional

_INITIALIZED = False
_TRUTHY = ('1', 'true', 'yes', 'on')
_MASK = '***'


class _ServiceFilter(logging.Filter):
    def __init__(self, service: str):
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'service'):
            record.service = self.service
        return True


class _RedactFilter(logging.Filter):
    """Mask secrets in the rendered message and its arguments."""

    def __init__(self, secrets: Iterable[str]):
        super().__init__()
        self.secrets = [s for s in secrets if s]

    def _scrub(self, text: str) -> str:
        for secret in self.secrets:
            text = text.replace(secret, _MASK)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.secrets:
            return True
        message = record.getMessage()
        scrubbed = self._scrub(message)
        if scrubbed != message:
            record.msg = scrubbed
            record.args = None
        return True


class _JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'ts': self.formatTime(record, datefmt='%Y-%m-%dT%H:%M:%S'),
            'level': record.levelname,
            'name': record.name,
            'service': getattr(record, 'service', ''),
            'message': record.getMessage(),
        }
        if record.exc_info:
            payload['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _get_level(default: str = 'INFO') -> int:
    level = os.getenv('APOLLO_LOG_LEVEL', default).upper()
    return getattr(logging, level, logging.INFO)


def _resolve_log_path(service: str) -> Optional[str]:
    log_path = os.getenv('APOLLO_LOG_FILE')
    if not log_path:
        log_dir = os.getenv('APOLLO_LOG_DIR')
        if log_dir:
            log_path = str(Path(log_dir) / f'{service}.log')
    return log_path


def setup_logging(
    service: str,
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    secrets: Iterable[str] = (),
) -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO) if level else _get_level())

    use_json = bool(json_format) if json_format is not None \
        else os.getenv('APOLLO_LOG_JSON', '').lower() in _TRUTHY
    if use_json:
        formatter = _JSONFormatter()
    else:
        formatter = logging.Formatter('%(asctime)s %(levelname)s %(name)s [%(service)s] %(message)s')

    filters = [_ServiceFilter(service), _RedactFilter(secrets)]

    handlers = [logging.StreamHandler(stream=sys.stderr)]

    log_path = _resolve_log_path(service)
    if log_path:
        try:
            Path(log_path).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                log_path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding='utf-8'))
        except OSError:
            root.warning(f'Could not open log file {log_path}, using stderr only')

    for handler in handlers:
        handler.setFormatter(formatter)
        for log_filter in filters:
            handler.addFilter(log_filter)
        root.addHandler(handler)

    _INITIALIZED = True


__all__ = ["setup_logging"]
