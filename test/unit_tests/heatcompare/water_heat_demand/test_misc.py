#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the misc module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from heatcompare.water_heat_demand.misc import water_flow_to_kW

class TestMisc(unittest.TestCase):
    """ Unit tests for functions in the misc.py file """

    def test_water_flow_to_kW(self):
        # 12 l/min raised by 35 K
        self.assertAlmostEqual(
            water_flow_to_kW(12.0, 45.0, 10.0),
            12.0 * 4186 * 35 / 60 / 1000,
            msg="incorrect heat rate returned",
            )
        self.assertAlmostEqual(water_flow_to_kW(12.0, 45.0, 10.0), 29.302, 3)
        self.assertEqual(water_flow_to_kW(0.0, 45.0, 10.0), 0.0)
        self.assertEqual(water_flow_to_kW(5.0, 10.0, 10.0), 0.0)
