#!/usr/bin/env python3
"""
Quick example demonstrating dynamic-lighting basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

from dynamic_lighting.core.bus import EventBus, Event, EventFilter
from dynamic_lighting.core.render import RenderView
from dynamic_lighting.core.timers import ManualScheduler
from dynamic_lighting.modules.lighting import DynamicLightingModule
from dynamic_lighting.modules.zones import DynamicLightingZone, EntityPlatform, Vec3

print("=" * 60)
print("dynamic-lighting Example")
print("=" * 60)


class DemoPlatform(EntityPlatform):
    """Two nested zones around an avatar standing at the origin."""

    ENTITIES = {
        "courtyard": {
            "position": Vec3(0, 0, 0),
            "dimensions": Vec3(40, 10, 40),
            "userData": '{"lighting": {"exposure": 0.6}}',
        },
        "crypt": {
            "position": Vec3(0, 0, 0),
            "dimensions": Vec3(4, 3, 4),
            "userData": '{"lighting": {"exposure": -0.8}}',
        },
    }

    def get_entity_properties(self, entity_id, names):
        entity = self.ENTITIES[entity_id]
        return {name: entity[name] for name in names}

    def get_avatar_position(self):
        return Vec3(0, 0, 0)


# 1. Kernel components
print("\n1. Creating kernel components...")
scheduler = ManualScheduler()
render = RenderView()
bus = EventBus()
print("   ✓ Scheduler, RenderView and EventBus created")

# 2. Attach the lighting module
print("\n2. Attaching lighting module...")
lighting = DynamicLightingModule(scheduler, render)
lighting.attach(bus)
bus.subscribe(
    lambda e: print(f"   → {e.type}: {e.payload}"),
    EventFilter(event_type="lighting.target_changed"),
)
print(f"   ✓ Module '{lighting.id}' attached")

# 3. Load zone entities (avatar already inside both)
print("\n3. Loading zone entities...")
platform = DemoPlatform()
zones = {}
for entity_id in ("courtyard", "crypt"):
    zones[entity_id] = DynamicLightingZone(platform, lighting)
    zones[entity_id].preload(entity_id)
print(f"   ✓ Active zones: {[z.id for z in lighting.zones]}")

# 4. Let the animation run for one second
print("\n4. Animating exposure...")
scheduler.advance(1000)
print(f"   ✓ Exposure after 1s: {render.exposure:.2f}")

# 5. Leave the crypt through the bus
print("\n5. Leaving the crypt...")
bus.publish(Event(type="zone.exited", source="example", zone_id="crypt"))
scheduler.advance(1000)
print(f"   ✓ Exposure after 1s: {render.exposure:.2f}")

# 6. Unload the courtyard
print("\n6. Unloading the courtyard...")
zones["courtyard"].unload("courtyard")
print(f"   ✓ Lit: {lighting.is_lit}, exposure: {render.exposure:.2f}")

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)
