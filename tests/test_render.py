"""
Tests for the renderer configuration surface.
"""

import pytest

from dynamic_lighting.core.render import (
    ConfigBlock,
    RenderProfile,
    RenderView,
    LIT_PROFILE,
    DEFAULT_PROFILE,
)


class TestConfigBlock:
    """Test named configuration blocks."""

    def test_child_blocks_created_on_demand(self):
        root = ConfigBlock("Render")
        bloom = root.get_config("RenderMainView").get_config("Bloom")

        assert bloom.name == "Bloom"
        assert root.get_config("RenderMainView").get_config("Bloom") is bloom

    def test_attribute_values(self):
        block = ConfigBlock("ToneMapping", curve=1)
        block.exposure = 0.25

        assert block.curve == 1
        assert block.exposure == 0.25
        assert block.to_dict() == {"curve": 1, "exposure": 0.25}

    def test_missing_value_raises_attribute_error(self):
        block = ConfigBlock("Bloom")
        with pytest.raises(AttributeError):
            block.intensity


class TestRenderView:
    """Test the main view wrapper."""

    def test_fresh_view_starts_at_zero_exposure(self):
        view = RenderView()
        assert view.exposure == 0.0

    def test_wraps_existing_tree(self):
        """Test an existing renderer tree keeps its exposure."""
        root = ConfigBlock("Render")
        root.get_config("RenderMainView").get_config("ToneMapping").exposure = 0.7

        view = RenderView(root)
        assert view.exposure == 0.7

        view.exposure = 0.3
        assert root.get_config("RenderMainView").get_config("ToneMapping").exposure == 0.3

    def test_apply_lit_profile_keeps_exposure(self):
        view = RenderView()
        view.exposure = 0.4

        view.apply_profile(LIT_PROFILE)

        snapshot = view.snapshot()
        assert snapshot["Bloom"] == {"enabled": True, "intensity": 1.0, "size": 0.7}
        assert snapshot["BloomThreshold"] == {"threshold": 0.0}
        assert snapshot["ToneMapping"]["enable"] is True
        assert snapshot["ToneMapping"]["curve"] == 1
        assert view.exposure == 0.4

    def test_apply_default_profile_resets_exposure(self):
        view = RenderView()
        view.exposure = 0.4

        view.apply_profile(DEFAULT_PROFILE)

        snapshot = view.snapshot()
        assert snapshot["Bloom"] == {"enabled": False, "intensity": 0.0, "size": 0.25}
        assert snapshot["BloomThreshold"] == {"threshold": 1.0}
        assert view.exposure == 0.0


class TestRenderProfile:
    """Test profile serialization."""

    def test_from_dict_fills_from_base(self):
        profile = RenderProfile.from_dict({"bloom_size": 0.9}, LIT_PROFILE)

        assert profile.bloom_size == 0.9
        assert profile.bloom_enabled is True
        assert profile.exposure is None

    def test_to_dict_from_dict(self):
        assert RenderProfile.from_dict(DEFAULT_PROFILE.to_dict()) == DEFAULT_PROFILE
