"""Shared pytest fixtures and Hypothesis configuration.

This module provides a frozen clock, a validator registry wired to it, and
the Hypothesis profiles for the test suite.
"""

from __future__ import annotations

from datetime import datetime

import pytest
from hypothesis import Verbosity, settings

from ryandata_widget_validation import ValidatorRegistry, build_registry

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)

# Date defaults depend on "now"; tests pin it here
FIXED_NOW = datetime(2024, 5, 17, 14, 30, 45, 123456)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def registry() -> ValidatorRegistry:
    """Validator table with a frozen clock."""
    return build_registry(clock=fixed_clock)
