import math
import unittest

import numpy as np

from tensorcheck.domain import DifferenceType
from tensorcheck.infrastructure.compare import (
    DifferencePolicy,
    element_differences,
    working_dtype,
)


class TestElementDifferences(unittest.TestCase):
    def test_absolute_and_relative(self):
        absolute, relative = element_differences(1.0, 2.0)
        self.assertEqual(absolute, 1.0)
        self.assertEqual(relative, 0.5)

    def test_relative_uses_larger_magnitude(self):
        absolute, relative = element_differences(-4.0, 2.0)
        self.assertEqual(absolute, 6.0)
        self.assertEqual(relative, 1.5)

    def test_both_zero_is_zero_difference(self):
        self.assertEqual(element_differences(0.0, 0.0), (0.0, 0.0))
        self.assertEqual(element_differences(0.0, -0.0), (0.0, 0.0))

    def test_one_zero_is_full_relative_difference(self):
        self.assertEqual(element_differences(0.0, 3.0), (3.0, 1.0))

    def test_nan_propagates(self):
        absolute, relative = element_differences(float("nan"), 1.0)
        self.assertTrue(math.isnan(absolute))
        self.assertTrue(math.isnan(relative))

    def test_computed_in_requested_dtype(self):
        absolute, relative = element_differences(
            np.float32(0.0), np.float32(0.1), np.dtype(np.float32)
        )
        self.assertIsInstance(absolute, np.float32)
        self.assertEqual(absolute, np.float32(0.1))
        self.assertFalse(absolute > np.float32(0.1))
        self.assertEqual(relative, np.float32(1.0))


class TestWorkingDtype(unittest.TestCase):
    def test_floats_keep_common_float_type(self):
        self.assertEqual(working_dtype(np.float32, np.float32), np.float32)
        self.assertEqual(working_dtype(np.float16, np.float32), np.float32)
        self.assertEqual(working_dtype(np.float32, np.float64), np.float64)

    def test_integers_widen_to_float64(self):
        self.assertEqual(working_dtype(np.int32, np.int32), np.float64)
        self.assertEqual(working_dtype(np.uint8, np.int8), np.float64)
        self.assertEqual(working_dtype(np.bool_, np.bool_), np.float64)


class TestDifferencePolicyRegistry(unittest.TestCase):
    def test_all_types_registered(self):
        self.assertEqual(DifferencePolicy.available(), tuple(DifferenceType))

    def test_accepts_string(self):
        policy = DifferencePolicy("both")
        self.assertIs(policy.difference_type, DifferenceType.BOTH)
        self.assertEqual(repr(policy), "DifferencePolicy('both')")

    def test_unknown_type_raises(self):
        with self.assertRaises(ValueError):
            DifferencePolicy("median")

    def test_duplicate_registration_raises(self):
        with self.assertRaises(ValueError):

            @DifferencePolicy.register_policy(DifferenceType.ANY)
            def other_any(absolute, relative, threshold):
                return False

    def test_register_requires_enum_member(self):
        with self.assertRaises(ValueError):
            DifferencePolicy.register_policy("any")

    def test_overwrite_replaces_classifier(self):
        saved = DifferencePolicy.POLICIES[DifferenceType.RELATIVE]
        try:

            @DifferencePolicy.register_policy(DifferenceType.RELATIVE, overwrite=True)
            def always(absolute, relative, threshold):
                return True

            self.assertTrue(DifferencePolicy(DifferenceType.RELATIVE)(0.0, 0.0, 1.0))
        finally:
            DifferencePolicy.POLICIES[DifferenceType.RELATIVE] = saved


class TestClassificationTable(unittest.TestCase):
    # (absolute, relative) -> expected error flag per policy, threshold 0.5
    CASES = [
        ((0.0, 0.0), {"absolute": False, "relative": False, "both": False, "any": False}),
        ((1.0, 0.5), {"absolute": True, "relative": False, "both": False, "any": True}),
        ((0.4, 0.04), {"absolute": False, "relative": False, "both": False, "any": False}),
        ((0.6, 0.6), {"absolute": True, "relative": True, "both": True, "any": True}),
        ((0.1, 0.9), {"absolute": False, "relative": True, "both": False, "any": True}),
    ]

    def test_table(self):
        for (absolute, relative), expected in self.CASES:
            for name, flag in expected.items():
                with self.subTest(absolute=absolute, relative=relative, policy=name):
                    self.assertIs(DifferencePolicy(name)(absolute, relative, 0.5), flag)


if __name__ == "__main__":
    unittest.main()
