"""Tests for GenericProvider."""

import pytest

from panequal.errors import FetchError
from panequal.providers import GenericProvider


class TestGenericProvider:
    """Tests for GenericProvider class."""

    def test_available(self):
        provider = GenericProvider()

        assert provider.name == "generic"
        assert provider.is_available()

    def test_get_layout(self):
        provider = GenericProvider("b262,80x24,0,0,5")

        assert provider.get_layout() == "b262,80x24,0,0,5"

    def test_get_layout_unset(self):
        with pytest.raises(FetchError):
            GenericProvider().get_layout()

    def test_set_layout(self):
        provider = GenericProvider()
        provider.set_layout("b262,80x24,0,0,5")

        assert provider.get_layout() == "b262,80x24,0,0,5"

    def test_apply_layout_records(self):
        seen = []
        provider = GenericProvider("b262,80x24,0,0,5", on_layout_applied=seen.append)

        provider.apply_layout("1234,80x24,0,0,6")

        assert provider.applied == ["1234,80x24,0,0,6"]
        assert provider.get_layout() == "1234,80x24,0,0,6"
        assert seen == ["1234,80x24,0,0,6"]
