"""Pytest configuration and shared fixtures for the lex2html test suite.

This module provides shared fixtures and test configuration used across the
test suite.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import block, state, text

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def sample_state() -> dict[str, Any]:
    """Provide a small article covering the common node kinds."""
    return state(
        block("heading", text("Release notes"), tag="h2"),
        block("paragraph", text("Read the "), block("link", text("changelog"), url="https://example.com/log")),
        block(
            "list",
            block("listitem", text("Faster startup")),
            block("listitem", text("Fewer bugs", 1)),
            listType="bullet",
        ),
        block(
            "table",
            block("tablerow", block("tablecell", block("paragraph", text("Name")))),
            block("tablerow", block("tablecell", block("paragraph", text("lex2html")))),
        ),
        {"type": "image", "src": "/media/chart.png", "altText": "Chart", "maxWidth": 600},
    )


@pytest.fixture
def sample_state_file(tmp_path: Path, sample_state: dict[str, Any]) -> Path:
    """Write the sample article to a JSON file."""
    path = tmp_path / "article.json"
    path.write_text(json.dumps(sample_state), encoding="utf-8")
    return path


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
