#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the units module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
import heatcompare.units as units

class TestUnits(unittest.TestCase):
    """ Unit tests for unit conversions """

    def test_constants(self):
        self.assertEqual(units.minutes_per_day, units.hours_per_day * units.minutes_per_hour)
        self.assertEqual(units.J_per_kWh, units.seconds_per_hour * units.W_per_kW)

    def test_kW_kWh(self):
        self.assertEqual(units.kW_to_kWh(8.0, 0.25), 2.0, "incorrect energy returned")
        self.assertEqual(units.kWh_to_kW(2.0, 0.25), 8.0, "incorrect power returned")
        self.assertEqual(units.minutes_to_hours(15), 0.25, "incorrect hours returned")
