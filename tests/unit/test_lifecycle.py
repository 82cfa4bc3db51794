"""Tests for initialize/shutdown and the public operations."""

from __future__ import annotations

import logging

import pytest

import dolc
from dolc.core.config import DolConfig


def _dolc_handlers() -> int:
    return len(logging.getLogger("dolc").handlers)


class TestLifecycle:
    def test_initialize_is_idempotent(self) -> None:
        before = _dolc_handlers()
        dolc.initialize()
        dolc.initialize()
        assert dolc.is_initialized()
        assert _dolc_handlers() == before + 1

    def test_shutdown_removes_handler(self) -> None:
        before = _dolc_handlers()
        dolc.initialize()
        dolc.shutdown()
        dolc.shutdown()
        assert not dolc.is_initialized()
        assert _dolc_handlers() == before

    def test_initialize_uses_config_level(self) -> None:
        dolc.initialize(DolConfig(log_level="DEBUG"))
        assert logging.getLogger("dolc").level == logging.DEBUG

    def test_invalid_level_attaches_nothing(self) -> None:
        before = _dolc_handlers()
        for _ in range(3):
            with pytest.raises(ValueError, match="Invalid log level: 'VERBOSE'"):
                dolc.initialize(DolConfig(log_level="VERBOSE"))
        assert _dolc_handlers() == before
        assert not dolc.is_initialized()

    def test_initialize_succeeds_after_invalid_level(self) -> None:
        before = _dolc_handlers()
        with pytest.raises(ValueError):
            dolc.initialize(DolConfig(log_level="VERBOSE"))
        dolc.initialize(DolConfig(log_level="INFO"))
        assert dolc.is_initialized()
        assert _dolc_handlers() == before + 1
        dolc.shutdown()
        assert _dolc_handlers() == before

    def test_results_do_not_depend_on_initialization(self, counter_source: str) -> None:
        before = dolc.compile_source(counter_source)
        dolc.initialize()
        after = dolc.compile_source(counter_source)
        assert before == after


class TestOperations:
    def test_validate_matches_compile(self, sample_sources: list[str]) -> None:
        for source in sample_sources:
            assert dolc.validate_source(source) == dolc.compile_source(source).success

    def test_get_version(self) -> None:
        assert dolc.get_version() == "0.1.0"
        assert dolc.__version__ == dolc.get_version()

    def test_format_is_identity(self, counter_source: str) -> None:
        assert dolc.format_source(counter_source) == counter_source
        assert dolc.format_source("") == ""
