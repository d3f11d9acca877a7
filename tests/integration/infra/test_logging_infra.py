from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
and log file output.
"""

import logging
from pathlib import Path

import pytest

from shelltree.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """Repeated configuration does not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial


def test_force_reconfigures() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_queue_listener_architecture() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is True
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_file_output_is_flushed_on_shutdown(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "shelltree.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("shelltree.test").debug("parsed 4 directories")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG | shelltree.test | parsed 4 directories" in content


def test_unknown_level_defaults_to_info() -> None:
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.INFO
