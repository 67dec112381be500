import logging
import math
import unittest

from vecmetrics import metric
from vecmetrics import vectors
from vecmetrics.__main__ import main
from vecmetrics.utils import constants


class TestMetric(unittest.TestCase):
    def setUp(self) -> None:
        self.x = [2.0, 4.0, 1.0]
        self.y = [5.0, 5.0, 3.0]

    def test_init(self):
        for name in ("chebyshev", "euclidean", "manhattan", "pearson"):
            m = metric.get(name)
            self.assertIsInstance(m, metric.Metric)
            self.assertEqual(str(m), name)
            self.assertEqual(repr(m), name)
            self.assertIsNone(m.r)

    def test_errors(self):
        self.assertRaises(ValueError, metric.VectorMetric, "cosine")
        self.assertRaises(ValueError, metric.get, "cityblock")
        self.assertRaises(ValueError, metric.get, "euclidean", 2.0)

    def test_call(self):
        pairs = [
            ("chebyshev", vectors.chebyshev),
            ("euclidean", vectors.euclidean),
            ("manhattan", vectors.manhattan),
            ("pearson", vectors.pearson),
        ]
        for name, function in pairs:
            m = metric.get(name)
            self.assertEqual(m(self.x, self.y), function(self.x, self.y))
            self.assertEqual(m.one_to_one(self.x, self.y), m(self.x, self.y))

    def test_minkowski(self):
        m = metric.get("minkowski")
        self.assertEqual(m.r, constants.DEFAULT_MINKOWSKI_ORDER)
        self.assertEqual(str(m), f"minkowski-{constants.DEFAULT_MINKOWSKI_ORDER}")

        m = metric.get("minkowski", 3)
        self.assertEqual(str(m), "minkowski-3.0")
        self.assertEqual(m(self.x, self.y), vectors.minkowski(self.x, self.y, 3.0))

        m1 = metric.get("minkowski", 1.0)
        self.assertTrue(math.isclose(m1(self.x, self.y), vectors.manhattan(self.x, self.y)))

    def test_equality(self):
        self.assertEqual(metric.get("euclidean"), metric.VectorMetric("euclidean"))
        self.assertNotEqual(metric.get("euclidean"), metric.get("manhattan"))
        self.assertNotEqual(metric.get("minkowski", 3.0), metric.get("minkowski", 4.0))
        self.assertEqual(len({metric.get("pearson"), metric.get("pearson")}), 1)
        self.assertNotEqual(metric.get("euclidean"), "euclidean")
        self.assertNotIn("manhattan", [metric.get("manhattan")])

    def test_main(self):
        with self.assertLogs("vecmetrics", level=logging.INFO) as logs:
            main()
        self.assertTrue(any("pearson" in line for line in logs.output))
        self.assertTrue(any("manhattan([2.0, 4.0], [5.0, 5.0]) = 4.0" in line for line in logs.output))
