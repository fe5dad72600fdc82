"""Pytest configuration and shared fixtures for railing quote tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from railquote.domain.value_objects import SectionConfig, SectionType

if TYPE_CHECKING:
    from railquote.application.commands import GenerateQuoteCommand


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def generate_command() -> "GenerateQuoteCommand":
    """Create a GenerateQuoteCommand instance using the factory."""
    from railquote.application.factory import get_factory

    return get_factory().create_generate_command()


@pytest.fixture
def flat_ten() -> list[SectionConfig]:
    """A single flat 10 ft section."""
    return [SectionConfig(id="s1", length_feet=10.0)]


@pytest.fixture
def two_flat_eights() -> list[SectionConfig]:
    """Two consecutive flat 8 ft sections."""
    return [
        SectionConfig(id="s1", length_feet=8.0),
        SectionConfig(id="s2", length_feet=8.0),
    ]


@pytest.fixture
def angled_ten() -> list[SectionConfig]:
    """A single angled 10 ft section."""
    return [SectionConfig(id="s1", length_feet=10.0, type=SectionType.ANGLED)]
