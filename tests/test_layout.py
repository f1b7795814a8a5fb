import math
import random
import unittest

from prettyscatter.config import ScatterConfig
from prettyscatter.core.models import ElementBox, FailureReason
from prettyscatter.layout import (
    ScatterElement,
    ScatterScene,
    element_radius,
    placement_offset,
    plan_layout,
)


def _scene(num_elements=8, viewport_width=1200.0, zones=None):
    return ScatterScene(
        container=ElementBox(left=50.0, top=80.0, width=400.0, height=400.0),
        elements=[ScatterElement(id=f"el-{i}", width=20.0, height=20.0) for i in range(num_elements)],
        exclusion_zones=zones or [],
        viewport_width=viewport_width,
    )


class TestElementGeometry(unittest.TestCase):

    def test_radius_uses_larger_side(self):
        self.assertAlmostEqual(element_radius(20.0, 10.0), math.sqrt(200.0))
        self.assertAlmostEqual(element_radius(10.0, 20.0), math.sqrt(200.0))

    def test_offset_recovers_half_side(self):
        self.assertAlmostEqual(placement_offset(element_radius(20.0, 20.0)), 10.0)


class TestPlanLayout(unittest.TestCase):

    def test_narrow_viewport_falls_back(self):
        config = ScatterConfig(min_viewport_width=600)
        for width in (500.0, 600.0):
            plan = plan_layout(_scene(viewport_width=width), config=config)
            self.assertFalse(plan.scattered)
            self.assertEqual(plan.placements, [])
            self.assertEqual(plan.failure_reason, FailureReason.VIEWPORT_TOO_NARROW)
            self.assertIsNone(plan.distribution)

    def test_no_elements_falls_back(self):
        plan = plan_layout(_scene(num_elements=0))
        self.assertFalse(plan.scattered)
        self.assertEqual(plan.failure_reason, FailureReason.NO_ELEMENTS)

    def test_scattered_plan_places_every_element(self):
        # Zone measured in the same ancestor frame as the container.
        zone = ElementBox(left=200.0, top=230.0, width=100.0, height=100.0)
        plan = None
        for seed in range(10):
            plan = plan_layout(_scene(zones=[zone]), rng=random.Random(seed))
            if plan.scattered:
                break

        self.assertTrue(plan.scattered)
        self.assertEqual([p.element_id for p in plan.placements], [f"el-{i}" for i in range(8)])
        self.assertEqual(plan.container_height, 400.0)
        self.assertEqual(len(plan.exclusion_zones), 1)

        local_zone = plan.exclusion_zones[0]
        self.assertEqual((local_zone.left, local_zone.top), (150.0, 150.0))

        for p in plan.placements:
            self.assertAlmostEqual(p.left, p.center_x - 10.0)
            self.assertAlmostEqual(p.top, p.center_y - 10.0)
            self.assertFalse(local_zone.contains(p.center_x, p.center_y))

    def test_unreachable_target_falls_back_with_reason(self):
        zone = ElementBox(left=50.0, top=80.0, width=400.0, height=400.0)
        config = ScatterConfig(iteration_limit=3)
        plan = plan_layout(_scene(zones=[zone]), config=config, rng=random.Random(1))

        self.assertFalse(plan.scattered)
        self.assertEqual(plan.placements, [])
        self.assertEqual(plan.failure_reason, FailureReason.COUNT_MISMATCH)
        self.assertEqual(plan.distribution.iterations, 3)


if __name__ == "__main__":
    unittest.main()
