#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the heat_source module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from heatcompare.heating_systems.heat_pump import FlowTempBand
from heatcompare.heating_systems.heat_source import SystemType, build_system_config

class TestSystemType(unittest.TestCase):
    """ Unit tests for SystemType class """

    def test_from_string(self):
        self.assertEqual(SystemType.from_string('on_demand'), SystemType.ON_DEMAND)
        self.assertEqual(SystemType.from_string('combi'), SystemType.ON_DEMAND)
        self.assertEqual(SystemType.from_string('system_unvented'), SystemType.SYSTEM_UNVENTED)
        with self.assertRaises(SystemExit):
            SystemType.from_string('gshp')

    def test_resolve_current(self):
        self.assertEqual(SystemType.resolve_current('ashp'), SystemType.ASHP)
        self.assertEqual(SystemType.resolve_current('system'), SystemType.STORED_VENTED)
        self.assertEqual(SystemType.resolve_current('regular'), SystemType.STORED_VENTED)
        self.assertEqual(SystemType.resolve_current('combi'), SystemType.ON_DEMAND)
        self.assertEqual(SystemType.resolve_current(None), SystemType.ON_DEMAND)

    def test_labels(self):
        self.assertEqual(SystemType.ON_DEMAND.label(), 'Combi Boiler')
        self.assertEqual(SystemType.ASHP.label(), 'Air Source Heat Pump')
        for system_type in SystemType:
            self.assertTrue(system_type.label())

    def test_families(self):
        self.assertTrue(SystemType.ON_DEMAND.is_combi())
        self.assertFalse(SystemType.ON_DEMAND.has_cylinder())
        self.assertTrue(SystemType.ASHP.is_heat_pump())
        self.assertTrue(SystemType.REGULAR_VENTED.has_cylinder())


class TestBuildSystemConfig(unittest.TestCase):
    """ Unit tests for build_system_config function """

    def test_defaults(self):
        combi = build_system_config('on_demand', 8.0)
        self.assertEqual(combi.max_output(), 24.0)
        self.assertEqual(combi.min_output(), 4.0)
        self.assertEqual(combi.base_efficiency(), 0.85)
        self.assertIsNone(combi.flow_temp_band(), "boilers have no design flow band")
        self.assertEqual(combi.label(), 'Combi Boiler')

        stored = build_system_config('stored_unvented', 8.0)
        self.assertEqual(stored.max_output(), 18.0)

    def test_heat_pump_sized_to_heat_loss(self):
        ashp = build_system_config('ashp', 8.0, flow_temp_band=35)
        self.assertAlmostEqual(ashp.max_output(), 8.8)
        self.assertEqual(ashp.flow_temp_band(), FlowTempBand.FLOW_35)
        self.assertIsNone(ashp.base_efficiency(), "heat pumps use COP, not efficiency")

        ashp = build_system_config('ashp', 8.0, base_efficiency=0.9)
        self.assertEqual(ashp.flow_temp_band(), FlowTempBand.FLOW_50)
        self.assertIsNone(ashp.base_efficiency())

    def test_overrides(self):
        config = build_system_config('regular_vented', 8.0, 12.0, 3.0, 0.8)
        self.assertEqual(config.max_output(), 12.0)
        self.assertEqual(config.min_output(), 3.0)
        self.assertEqual(config.base_efficiency(), 0.8)
        config = build_system_config('regular_vented', 8.0, flow_temp_band=45)
        self.assertIsNone(config.flow_temp_band())

    def test_current_alias(self):
        config = build_system_config('current', 8.0, current_heat_source_type='regular')
        self.assertEqual(config.system_type(), SystemType.STORED_VENTED)
        self.assertEqual(config.label(), 'Current Stored - Vented Cylinder')
        config = build_system_config('current', 8.0, current_heat_source_type='ashp')
        self.assertEqual(config.system_type(), SystemType.ASHP)
        config = build_system_config('current', 8.0)
        self.assertEqual(config.system_type(), SystemType.ON_DEMAND)
        self.assertEqual(config.max_output(), 24.0)
