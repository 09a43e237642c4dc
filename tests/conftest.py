"""Pytest configuration and shared fixtures for the codediffs test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from codediffs.constants import LINE_NUMBERS_ENV_VAR

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
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests generated with Hypothesis")


@pytest.fixture(autouse=True)
def clean_line_numbers_env(monkeypatch):
    """Keep the line numbers environment variable of the developer out of tests."""
    monkeypatch.delenv(LINE_NUMBERS_ENV_VAR, raising=False)


@pytest.fixture
def llvm_before() -> str:
    """LLVM IR of ``f1(x::Int64) = x + 1``."""
    return """define i64 @julia_f1_2007(i64 signext %0) #0 {
top:
  %1 = add i64 %0, 1
  ret i64 %1
}"""


@pytest.fixture
def llvm_after() -> str:
    """LLVM IR of ``f1(x::Int8) = x + 1``."""
    return """define i64 @julia_f1_2019(i8 signext %0) #0 {
top:
  %1 = sext i8 %0 to i64
  %2 = add nsw i64 %1, 1
  ret i64 %2
}"""


@pytest.fixture
def code_files(tmp_path: Path, llvm_before: str, llvm_after: str) -> tuple[Path, Path]:
    """Write both LLVM listings to files.

    Returns
    -------
    tuple of Path
        Paths of the original and modified listing

    """
    before = tmp_path / "before.ll"
    after = tmp_path / "after.ll"
    before.write_text(llvm_before, encoding="utf-8")
    after.write_text(llvm_after, encoding="utf-8")
    return before, after
