#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the boiler module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from heatcompare.heating_systems.boiler import BoilerCombiDispatch, BoilerStoredDispatch
from heatcompare.heating_systems.heat_source import HeatSourceConfig, SystemType

BATH_HIGH_KW = 12.0 * 4186 * 35 / 60 / 1000

class TestBoilerCombiDispatch(unittest.TestCase):
    """ Unit tests for BoilerCombiDispatch class """

    def setUp(self):
        self.config = HeatSourceConfig(SystemType.ON_DEMAND, 24.0)
        self.dispatch = BoilerCombiDispatch(self.config, 0.25)

    def test_hot_water_priority(self):
        heat_delivered, space_heat_delivered, dhw_state, dhw_shortfall \
            = self.dispatch.dispatch(6.0, BATH_HIGH_KW)
        self.assertEqual(heat_delivered, 24.0)
        self.assertEqual(space_heat_delivered, 0.0, "space heating should be suspended")
        self.assertAlmostEqual(dhw_state, 24.0 / BATH_HIGH_KW * 100.0)
        self.assertAlmostEqual(dhw_shortfall, BATH_HIGH_KW - 24.0)

    def test_small_draw_fully_served(self):
        heat_delivered, space_heat_delivered, dhw_state, dhw_shortfall \
            = self.dispatch.dispatch(6.0, 9.0)
        self.assertEqual(heat_delivered, 9.0)
        self.assertEqual(space_heat_delivered, 0.0)
        self.assertEqual(dhw_state, 100.0)
        self.assertEqual(dhw_shortfall, 0.0)

    def test_space_heating_only(self):
        self.assertEqual(self.dispatch.dispatch(6.0, 0.0), (6.0, 6.0, 100.0, 0.0))
        self.assertEqual(self.dispatch.dispatch(30.0, 0.0), (24.0, 24.0, 100.0, 0.0))

    def test_cycling_penalty(self):
        self.assertAlmostEqual(self.dispatch.efficiency(0, 0, 2.0), 0.78)
        self.assertEqual(self.dispatch.efficiency(0, 0, 10.0), 0.85)
        self.assertEqual(self.dispatch.efficiency(0, 0, 0.0), 0.85)

    def test_cycling_penalty_floor(self):
        dispatch = BoilerCombiDispatch(self.config, 0.25, [0.62] * 96)
        self.assertEqual(dispatch.efficiency(5, 1, 2.0), 0.60)
        self.assertEqual(dispatch.efficiency(5, 1, 10.0), 0.62)

    def test_cycling_penalty_never_raises_efficiency(self):
        dispatch = BoilerCombiDispatch(self.config, 0.25, [0.56] * 96)
        self.assertEqual(dispatch.efficiency(0, 12, 10.0), 0.56)
        self.assertLessEqual(dispatch.efficiency(0, 12, 2.0), 0.56)
        self.assertEqual(dispatch.efficiency(0, 12, 2.0), 0.56)

    def test_efficiency_clamped(self):
        dispatch = BoilerCombiDispatch(self.config, 0.25, [0.99] * 48 + [0.3] * 48)
        self.assertEqual(dispatch.efficiency(0, 0, 10.0), 0.95)
        self.assertEqual(dispatch.efficiency(50, 12, 10.0), 0.55)

    def test_input_power(self):
        self.assertAlmostEqual(self.dispatch.input_power(8.5, 0.85), 10.0)
        self.assertEqual(self.dispatch.input_power(8.5, 0.0), 0.0)


class TestBoilerStoredDispatch(unittest.TestCase):
    """ Unit tests for BoilerStoredDispatch class """

    def setUp(self):
        self.config = HeatSourceConfig(SystemType.STORED_VENTED, 18.0)
        self.dispatch = BoilerStoredDispatch(self.config, 0.25)

    def test_space_heating_served_during_draw(self):
        heat_delivered, space_heat_delivered, dhw_state, dhw_shortfall \
            = self.dispatch.dispatch(10.0, BATH_HIGH_KW)
        self.assertEqual(space_heat_delivered, 10.0, "space heating should continue")
        # Draw of ~7.33 kWh against 5 kWh stored
        self.assertAlmostEqual(dhw_shortfall, (BATH_HIGH_KW * 0.25 - 5.0) / 0.25)
        # Remaining 8 kW of output recharges 2 kWh
        self.assertEqual(heat_delivered, 18.0)
        self.assertAlmostEqual(dhw_state, 40.0)

    def test_reheat_limited_to_deficit(self):
        heat_delivered, space_heat_delivered, dhw_state, dhw_shortfall \
            = self.dispatch.dispatch(5.0, 2.0)
        self.assertEqual(space_heat_delivered, 5.0)
        self.assertAlmostEqual(heat_delivered, 7.0)
        self.assertAlmostEqual(dhw_state, 100.0)
        self.assertEqual(dhw_shortfall, 0.0)

    def test_no_draw_no_reheat(self):
        self.assertEqual(self.dispatch.dispatch(5.0, 0.0), (5.0, 5.0, 100.0, 0.0))

    def test_output_limited(self):
        heat_delivered, space_heat_delivered, dhw_state, dhw_shortfall \
            = self.dispatch.dispatch(25.0, 4.0)
        self.assertEqual(space_heat_delivered, 18.0)
        self.assertEqual(heat_delivered, 18.0)
        self.assertAlmostEqual(dhw_state, 80.0)
