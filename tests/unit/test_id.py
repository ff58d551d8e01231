"""Tests for dispatch ID generation."""

from widgetlink.core.id import (
    Prefix,
    is_dispatch_id,
    is_valid,
    new_dispatch_id,
)


class TestGeneration:
    """Test dispatch ID generation."""

    def test_dispatch_id_format(self):
        """Dispatch IDs should have the dsp prefix."""
        id_str = new_dispatch_id()
        assert id_str.startswith(f"{Prefix.DISPATCH}_")
        assert len(id_str) == len("dsp_") + 26
        assert is_dispatch_id(id_str)

    def test_unique(self):
        ids = {new_dispatch_id() for _ in range(100)}
        assert len(ids) == 100


class TestValidation:
    """Test ID validation."""

    def test_invalid_ids(self):
        """Invalid IDs should fail validation."""
        assert not is_valid("")
        assert not is_valid("invalid")
        assert not is_valid("dsp_INVALID")
        assert not is_valid("dsp_")
        assert not is_valid("_")

    def test_wrong_prefix(self):
        id_str = new_dispatch_id().replace("dsp_", "req_")
        assert is_valid(id_str)
        assert not is_dispatch_id(id_str)

