import os
import tempfile
import unittest

import numpy as np

from tensorcheck.domain import DifferenceType
from tensorcheck.infrastructure.compare import CompareConfig
from tensorcheck.infrastructure.tensor import Tensor32f


class RecordingSink:
    def __init__(self):
        self.calls = []

    def __call__(self, level, message):
        self.calls.append((level, message))


class TestCompareConfig(unittest.TestCase):
    def test_defaults(self):
        cfg = CompareConfig(difference_max=1e-3)
        self.assertTrue(cfg.print_errors)
        self.assertEqual(cfg.error_count_max, 32)
        self.assertIs(cfg.difference_type, DifferenceType.ANY)
        self.assertEqual(cfg.description, "")

    def test_string_difference_type_coerced(self):
        cfg = CompareConfig(difference_max=0.1, difference_type="relative")
        self.assertIs(cfg.difference_type, DifferenceType.RELATIVE)

    def test_invalid_values_rejected(self):
        with self.assertRaises(ValueError):
            CompareConfig(difference_max=-1.0)
        with self.assertRaises(ValueError):
            CompareConfig(difference_max=0.1, error_count_max=0)
        with self.assertRaises(ValueError):
            CompareConfig(difference_max=0.1, difference_type="nearest")
        with self.assertRaises(ValueError):
            CompareConfig(difference_max="0.1")

    def test_numpy_integer_cap_accepted(self):
        cfg = CompareConfig(difference_max=0.1, error_count_max=np.int64(5))
        self.assertEqual(cfg.error_count_max, 5)
        self.assertIs(type(cfg.error_count_max), int)
        with self.assertRaises(ValueError):
            CompareConfig(difference_max=0.1, error_count_max=5.0)

    def test_compare_uses_settings(self):
        cfg = CompareConfig(
            difference_max=0.5,
            error_count_max=1,
            difference_type="absolute",
            description="configured",
        )
        a = Tensor32f([4], 0.0)
        b = Tensor32f([4], 1.0)
        sink = RecordingSink()
        self.assertEqual(cfg.compare(a, b, sink=sink), (False, 1))
        self.assertIn("Fail comparison: configured", sink.calls[0][1])

    def test_compare_description_override(self):
        cfg = CompareConfig(difference_max=0.5, description="configured")
        sink = RecordingSink()
        cfg.compare(Tensor32f([1], 0.0), Tensor32f([1], 1.0), description="call", sink=sink)
        self.assertIn("Fail comparison: call", sink.calls[0][1])


class TestCompareConfigLoad(unittest.TestCase):
    def _write(self, text):
        fd, path = tempfile.mkstemp(suffix=".toml")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        self.addCleanup(os.remove, path)
        return path

    def test_load_compare_table(self):
        path = self._write(
            "[compare]\n"
            "difference_max = 0.001\n"
            "print_errors = false\n"
            "error_count_max = 8\n"
            'difference_type = "both"\n'
            'description = "resize bilinear"\n'
        )
        cfg = CompareConfig.load(path)
        self.assertEqual(cfg.difference_max, 0.001)
        self.assertFalse(cfg.print_errors)
        self.assertEqual(cfg.error_count_max, 8)
        self.assertIs(cfg.difference_type, DifferenceType.BOTH)
        self.assertEqual(cfg.description, "resize bilinear")

    def test_load_named_section(self):
        path = self._write("[strict]\ndifference_max = 0\n")
        cfg = CompareConfig.load(path, section="strict")
        self.assertEqual(cfg.difference_max, 0)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            CompareConfig.load("/nonexistent/tensorcheck.toml")

    def test_missing_section(self):
        path = self._write("[other]\nx = 1\n")
        with self.assertRaises(KeyError):
            CompareConfig.load(path)


if __name__ == "__main__":
    unittest.main()
