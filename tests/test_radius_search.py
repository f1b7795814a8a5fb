import itertools
import math
import random
import unittest

from prettyscatter.config import ScatterConfig
from prettyscatter.core.models import FailureReason, Rect
from prettyscatter.sampling.radius_search import adjust_radius, find_distribution


class TestAdjustRadius(unittest.TestCase):

    def test_overshoot_grows_radius(self):
        self.assertAlmostEqual(adjust_radius(10.0, 30, 20, 0.05), 10.25)

    def test_undershoot_shrinks_radius(self):
        self.assertAlmostEqual(adjust_radius(10.0, 10, 20, 0.05), 9.75)
        self.assertAlmostEqual(adjust_radius(10.0, 0, 20, 0.05), 9.5)


class TestFindDistribution(unittest.TestCase):

    def test_converges_for_modest_target(self):
        successes = 0
        for seed in range(10):
            result = find_distribution(400.0, 400.0, 10.0, 20, rng=random.Random(seed))
            if not result.success:
                continue
            successes += 1

            self.assertEqual(len(result.points), 20)
            self.assertIsNone(result.failure_reason)
            self.assertGreaterEqual(result.radius, 1.3 * 10.0)
            self.assertLessEqual(result.iterations, 50)
            for a, b in itertools.combinations(result.points, 2):
                self.assertGreaterEqual(math.hypot(a.x - b.x, a.y - b.y), result.radius - 1e-9)

        self.assertGreaterEqual(successes, 6)

    def test_impossible_target_exhausts_budget(self):
        result = find_distribution(100.0, 100.0, 10.0, 10000, rng=random.Random(7))

        self.assertFalse(result.success)
        self.assertEqual(result.points, [])
        self.assertEqual(result.iterations, 50)
        self.assertEqual(result.failure_reason, FailureReason.COUNT_MISMATCH)

    def test_convergence_below_min_radius_is_rejected(self):
        config = ScatterConfig(min_allowed_radius_multiple=2.0)
        result = find_distribution(30.0, 30.0, 10.0, 1, config=config, rng=random.Random(8))

        self.assertFalse(result.success)
        self.assertEqual(result.points, [])
        self.assertEqual(result.iterations, 1)
        self.assertEqual(result.failure_reason, FailureReason.RADIUS_TOO_SMALL)
        self.assertAlmostEqual(result.radius, 18.0)

    def test_first_attempt_success(self):
        result = find_distribution(30.0, 30.0, 10.0, 1, rng=random.Random(9))

        self.assertTrue(result.success)
        self.assertEqual(len(result.points), 1)
        self.assertEqual(result.iterations, 1)
        self.assertAlmostEqual(result.attempts[0].radius, 18.0)

    def test_fully_excluded_domain_fails(self):
        zones = [Rect(left=0.0, right=200.0, top=0.0, bottom=200.0)]
        config = ScatterConfig(iteration_limit=10)
        result = find_distribution(200.0, 200.0, 10.0, 5, zones, config=config, rng=random.Random(10))

        self.assertFalse(result.success)
        self.assertEqual(result.failure_reason, FailureReason.COUNT_MISMATCH)
        self.assertEqual(result.iterations, 10)
        self.assertTrue(all(a.seed_failed for a in result.attempts))

    def test_zero_target_is_trivial(self):
        result = find_distribution(100.0, 100.0, 10.0, 0)
        self.assertTrue(result.success)
        self.assertEqual(result.points, [])
        self.assertEqual(result.iterations, 0)

    def test_contract_violations_raise(self):
        with self.assertRaises(ValueError):
            find_distribution(0.0, 100.0, 10.0, 5)
        with self.assertRaises(ValueError):
            find_distribution(100.0, 100.0, -1.0, 5)
        with self.assertRaises(ValueError):
            find_distribution(100.0, 100.0, 10.0, -1)
        with self.assertRaises(ValueError):
            find_distribution(100.0, 100.0, 10.0, 2.5)

    def test_non_finite_inputs_raise(self):
        for bad in (math.inf, -math.inf, math.nan):
            with self.assertRaises(ValueError):
                find_distribution(bad, 100.0, 10.0, 3)
            with self.assertRaises(ValueError):
                find_distribution(100.0, bad, 10.0, 3)
            with self.assertRaises(ValueError):
                find_distribution(100.0, 100.0, bad, 3)

    def test_seeded_config_is_reproducible(self):
        config = ScatterConfig(random_seed=11)
        a = find_distribution(200.0, 200.0, 10.0, 8, config=config)
        b = find_distribution(200.0, 200.0, 10.0, 8, config=config)
        self.assertEqual(a.points, b.points)
        self.assertEqual([x.count for x in a.attempts], [x.count for x in b.attempts])


if __name__ == "__main__":
    unittest.main()
