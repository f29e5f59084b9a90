"""
Unit tests for core value objects.
"""
import dataclasses

import pytest

from core.domain.value_objects import AboutData


class TestAboutData:
    """Tests for AboutData value object."""

    def test_valid_about_data(self):
        """Test about data creation."""
        about = AboutData(name="CPanel", description="Resell CPanel licenses")

        assert str(about) == "CPanel"
        assert about.logo_url is None

    def test_compared_by_value(self):
        """Test equal attributes mean equal objects."""
        first = AboutData(name="CPanel", description="d", logo_url="https://x/logo.png")
        second = AboutData(name="CPanel", description="d", logo_url="https://x/logo.png")

        assert first == second
        assert hash(first) == hash(second)

    def test_immutable(self):
        """Test about data cannot be changed."""
        about = AboutData(name="CPanel", description="d")

        with pytest.raises(dataclasses.FrozenInstanceError):
            about.name = "Other"

    def test_invalid_empty_name(self):
        """Test invalid empty name."""
        with pytest.raises(ValueError, match="cannot be empty"):
            AboutData(name=" ", description="d")
