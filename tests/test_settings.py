"""Tests for reading showcase settings and logging configuration."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path

import pytest


def test_defaults_when_secrets_are_missing() -> None:
    settings = importlib.import_module("view_components.settings")
    scripts = importlib.import_module("view_components.scripts")

    resolved = settings.settings_from_mapping()

    assert resolved.log_level == "INFO"
    assert resolved.faq_path == settings.DEFAULT_FAQ_PATH
    assert resolved.script_sources == scripts.DEFAULT_SCRIPT_SOURCES
    assert resolved.github is None


def test_component_table_overrides(tmp_path: Path) -> None:
    settings = importlib.import_module("view_components.settings")

    resolved = settings.settings_from_mapping(
        {
            "log_level": "debug",
            "faq_path": str(tmp_path / "faq.json"),
            "jquery_url": " /static/jquery.js ",
        }
    )

    assert resolved.log_level == "DEBUG"
    assert resolved.faq_path == tmp_path / "faq.json"
    assert resolved.script_sources["jQuery"] == "/static/jquery.js"
    assert resolved.script_sources["Ajax"].endswith("prototype.js")


def test_relative_faq_path_is_resolved_from_project_root() -> None:
    settings = importlib.import_module("view_components.settings")

    resolved = settings.settings_from_mapping({"faq_path": "faq/other.json"})

    assert resolved.faq_path == settings.PROJECT_ROOT / "faq" / "other.json"


def test_github_table_needs_repo_and_path() -> None:
    settings = importlib.import_module("view_components.settings")

    assert settings.settings_from_mapping(github={"repo": "example/repo"}).github is None

    backend = settings.settings_from_mapping(
        github={"repo": "example/repo", "path": "faq.json", "token": "t"}
    ).github

    assert backend is not None
    assert (backend.repo, backend.path, backend.token, backend.branch) == (
        "example/repo",
        "faq.json",
        "t",
        "main",
    )


def test_parse_level() -> None:
    log = importlib.import_module("view_components.log")

    assert log.parse_level("debug") == logging.DEBUG
    assert log.parse_level(" Warning ") == logging.WARNING
    with pytest.raises(ValueError):
        log.parse_level("chatty")


def test_unknown_log_level_falls_back_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    settings = importlib.import_module("view_components.settings")
    log = importlib.import_module("view_components.log")

    with caplog.at_level(logging.WARNING, logger="view_components.settings"):
        resolved = settings.settings_from_mapping({"log_level": "verbose"})

    assert resolved.log_level == "INFO"
    assert "Unknown log level 'verbose'" in caplog.text
    assert log.parse_level(resolved.log_level) == logging.INFO


def test_setup_logging_configures_package_logger_once() -> None:
    log = importlib.import_module("view_components.log")
    package_logger = logging.getLogger(log.PACKAGE_LOGGER)
    previous_level = package_logger.level
    previous_handlers = list(package_logger.handlers)

    try:
        returned = log.setup_logging("debug")
        log.setup_logging("warning")

        added = [handler for handler in package_logger.handlers if handler not in previous_handlers]
        assert returned is package_logger
        assert package_logger.level == logging.WARNING
        assert len(added) == 1
        assert added[0].formatter._fmt == log.LOG_FORMAT
    finally:
        for handler in package_logger.handlers[:]:
            if handler not in previous_handlers:
                package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


def test_setup_logging_rejects_unknown_level() -> None:
    log = importlib.import_module("view_components.log")

    with pytest.raises(ValueError, match="Unknown log level"):
        log.setup_logging("verbose")
