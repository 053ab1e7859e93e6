"""
Unit tests for logging setup.
"""
import logging

import pytest

from atomsim.logging_config import setup_logging


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("atomsim")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_from_string(self) -> None:
        setup_logging("debug")
        assert logging.getLogger("atomsim").level == logging.DEBUG

    def test_no_duplicate_handlers(self) -> None:
        setup_logging(logging.INFO)
        setup_logging(logging.INFO)
        assert len(logging.getLogger("atomsim").handlers) == 1

    def test_debug_records_reach_stderr(self, capsys) -> None:
        from atomsim.core import AtomSimulation

        setup_logging("debug")
        AtomSimulation("Carbon", 6, 6, [2, 4])
        captured = capsys.readouterr()
        assert "Initialized Carbon with 6 electrons on 2 shells" in captured.err
        assert captured.out == ""
