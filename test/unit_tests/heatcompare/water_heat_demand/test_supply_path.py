#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the supply_path module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from heatcompare.water_heat_demand.hot_water_events import EventKind
from heatcompare.water_heat_demand.supply_path import DeliveryMode, SupplyPath

class TestDeliveryMode(unittest.TestCase):
    """ Unit tests for DeliveryMode normalisation """

    def test_canonical_and_aliases(self):
        cases = {
            'gravity': DeliveryMode.GRAVITY,
            'pumped_from_tank': DeliveryMode.PUMPED_FROM_TANK,
            'pumped': DeliveryMode.PUMPED_FROM_TANK,
            'tank_pumped': DeliveryMode.PUMPED_FROM_TANK,
            'mains_mixer': DeliveryMode.MAINS_MIXER,
            'mixer_pump': DeliveryMode.MAINS_MIXER,
            'accumulator_supported': DeliveryMode.ACCUMULATOR_SUPPORTED,
            'break_tank_booster': DeliveryMode.BREAK_TANK_BOOSTER,
            'electric_cold_only': DeliveryMode.ELECTRIC_COLD_ONLY,
            'Electric': DeliveryMode.ELECTRIC_COLD_ONLY,
            ' electric_shower ': DeliveryMode.ELECTRIC_COLD_ONLY,
            'unknown': DeliveryMode.UNKNOWN,
            None: DeliveryMode.UNKNOWN,
            }
        for strval, expected in cases.items():
            with self.subTest(strval=strval):
                self.assertEqual(DeliveryMode.from_string(strval), expected)

    def test_unrecognised_is_unknown(self):
        with self.assertLogs('heatcompare.water_heat_demand.supply_path', level='WARNING'):
            self.assertEqual(DeliveryMode.from_string('siphon'), DeliveryMode.UNKNOWN)


class TestSupplyPath(unittest.TestCase):
    """ Unit tests for SupplyPath class """

    def test_for_delivery_mode(self):
        self.assertEqual(SupplyPath.for_delivery_mode('electric_shower'), SupplyPath.MIXED)
        self.assertEqual(SupplyPath.for_delivery_mode(DeliveryMode.GRAVITY), SupplyPath.FULL)
        self.assertEqual(SupplyPath.for_delivery_mode(None), SupplyPath.FULL)
        self.assertEqual(SupplyPath.for_delivery_mode('gravity', cold_only=True), SupplyPath.COLD_ONLY)

    def test_from_string(self):
        self.assertEqual(SupplyPath.from_string('mixed'), SupplyPath.MIXED)
        with self.assertRaises(SystemExit):
            SupplyPath.from_string('partial')

    def test_permits(self):
        self.assertTrue(SupplyPath.FULL.permits(EventKind.SHOWER))
        self.assertFalse(SupplyPath.FULL.permits(EventKind.DISHWASHER))
        self.assertFalse(SupplyPath.MIXED.permits(EventKind.SHOWER))
        self.assertTrue(SupplyPath.MIXED.permits(EventKind.BATH))
        self.assertTrue(SupplyPath.MIXED.permits(EventKind.SINK))
        self.assertFalse(SupplyPath.COLD_ONLY.permits(EventKind.BATH))
