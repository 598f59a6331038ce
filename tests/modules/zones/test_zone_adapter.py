"""
Tests for the zone entity adapter.
"""

from unittest.mock import Mock

import pytest

from dynamic_lighting.modules.zones import DynamicLightingZone, Vec3, ZoneBounds


def make_platform(position, dimensions, user_data, avatar):
    """Mock platform adapter serving one entity."""
    properties = {
        "position": position,
        "dimensions": dimensions,
        "userData": user_data,
    }
    platform = Mock()
    platform.get_entity_properties = Mock(
        side_effect=lambda entity_id, names: {n: properties[n] for n in names}
    )
    platform.get_avatar_position = Mock(return_value=avatar)
    return platform


@pytest.fixture
def lighting():
    """Mock lighting module."""
    return Mock()


@pytest.fixture
def outside_platform():
    """Zone at the origin, avatar far away."""
    return make_platform(
        position={"x": 0, "y": 0, "z": 0},
        dimensions={"x": 4, "y": 2, "z": 6},
        user_data='{"lighting": {"exposure": 0.5}}',
        avatar=Vec3(100, 0, 0),
    )


class TestZoneBounds:
    """Containment and size."""

    def test_size_is_sum_of_dimensions(self):
        bounds = ZoneBounds(Vec3(0, 0, 0), Vec3(1, 2, 3))
        assert bounds.size == 6

    def test_contains(self):
        bounds = ZoneBounds(Vec3(10, 0, 0), Vec3(4, 4, 4))

        assert bounds.contains(Vec3(10, 0, 0))
        assert bounds.contains(Vec3(11.9, 1.9, -1.9))
        assert not bounds.contains(Vec3(12, 0, 0))
        assert not bounds.contains(Vec3(0, 0, 0))


class TestPreload:
    """Entity load."""

    def test_preload_outside_does_not_enter(self, outside_platform, lighting):
        zone = DynamicLightingZone(outside_platform, lighting)

        zone.preload("zone-1")

        assert zone.id == "zone-1"
        lighting.entered_zone.assert_not_called()

    def test_preload_inside_fires_synthetic_enter(self, lighting):
        platform = make_platform(
            position=[0, 0, 0],
            dimensions=[4, 2, 6],
            user_data='{"lighting": {"exposure": 0.5}}',
            avatar=Vec3(1, 0.5, -2),
        )
        zone = DynamicLightingZone(platform, lighting)

        zone.preload("zone-1")

        lighting.entered_zone.assert_called_once_with("zone-1", 12.0, {"exposure": 0.5})

    def test_empty_id_is_fatal(self, outside_platform, lighting):
        zone = DynamicLightingZone(outside_platform, lighting)
        with pytest.raises(ValueError):
            zone.preload("")


class TestLifecycle:
    """Enter, leave and unload."""

    @pytest.fixture
    def zone(self, outside_platform, lighting):
        zone = DynamicLightingZone(outside_platform, lighting)
        zone.preload("zone-1")
        return zone

    def test_enter_entity(self, zone, lighting):
        zone.enter_entity("zone-1")
        lighting.entered_zone.assert_called_once_with("zone-1", 12.0, {"exposure": 0.5})

    def test_leave_entity(self, zone, lighting):
        zone.leave_entity("zone-1")
        lighting.exited_zone.assert_called_once_with("zone-1")

    def test_unload(self, zone, lighting):
        zone.unload("zone-1")
        lighting.exited_zone.assert_called_once_with("zone-1")

    def test_foreign_ids_ignored(self, zone, lighting):
        zone.enter_entity("other")
        zone.leave_entity("other")
        zone.unload("other")

        lighting.entered_zone.assert_not_called()
        lighting.exited_zone.assert_not_called()

    def test_broken_user_data_enters_without_overrides(self, lighting):
        """Test malformed metadata still registers the zone, with no overrides."""
        platform = make_platform(
            position={"x": 0, "y": 0, "z": 0},
            dimensions={"x": 1, "y": 1, "z": 1},
            user_data="{oops",
            avatar=Vec3(50, 50, 50),
        )
        zone = DynamicLightingZone(platform, lighting)
        zone.preload("zone-2")

        zone.enter_entity("zone-2")

        lighting.entered_zone.assert_called_once_with("zone-2", 3.0, {})


class TestWithLightingModule:
    """Adapter wired to a real lighting module."""

    def test_nested_zones(self):
        from dynamic_lighting import DynamicLightingModule, ManualScheduler, RenderView

        scheduler = ManualScheduler()
        render = RenderView()
        lighting = DynamicLightingModule(scheduler, render)

        outer = DynamicLightingZone(
            make_platform([0, 0, 0], [20, 20, 20], '{"lighting": {"exposure": 0.5}}', Vec3(0, 0, 0)),
            lighting,
        )
        inner = DynamicLightingZone(
            make_platform([0, 0, 0], [2, 2, 2], '{"other": 1}', Vec3(0, 0, 0)),
            lighting,
        )

        outer.preload("outer")
        inner.preload("inner")

        assert [z.id for z in lighting.zones] == ["inner", "outer"]
        scheduler.run_ticks(1000)
        assert render.exposure == 0.5

        inner.leave_entity("inner")
        outer.unload("outer")
        assert not lighting.is_lit
        assert render.exposure == 0.0


class TestHostileUserData:
    """User data that would blow the parser's stack."""

    def test_deeply_nested_user_data_enters_without_overrides(self, lighting):
        platform = make_platform(
            position=[0, 0, 0],
            dimensions=[2, 2, 2],
            user_data="[" * 100000 + "]" * 100000,
            avatar=Vec3(0, 0, 0),
        )
        zone = DynamicLightingZone(platform, lighting)

        zone.preload("zone-3")

        lighting.entered_zone.assert_called_once_with("zone-3", 6.0, {})
