#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the building module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from heatcompare.space_heat_demand.building import BuildingThermalParameters

class TestBuildingThermalParameters(unittest.TestCase):
    """ Unit tests for BuildingThermalParameters class """

    def setUp(self):
        self.building = BuildingThermalParameters(8.0, 35.0, 5.0, 21.0, 17.0)

    def test_derived_parameters(self):
        self.assertEqual(self.building.heat_transfer_coeff(), 0.5, "incorrect heat transfer coeff")
        self.assertEqual(self.building.thermal_capacitance(), 17.5, "incorrect capacitance")
        self.assertEqual(self.building.heat_loss(21.0), 8.0, "incorrect heat loss at design")

    def test_temp_room_next(self):
        self.assertAlmostEqual(
            self.building.temp_room_next(17.0, 0.0, 0.25),
            17.0 - 6.0 * 0.25 / 17.5,
            )
        # Heat input balancing loss holds temperature
        self.assertAlmostEqual(self.building.temp_room_next(21.0, 8.0, 0.25), 21.0)

    def test_temp_floor(self):
        building = BuildingThermalParameters(8.0, 0.1, 5.0)
        self.assertEqual(building.temp_room_next(6.0, 0.0, 0.25), 5.0)

    def test_can_simulate(self):
        self.assertTrue(self.building.can_simulate())
        self.assertFalse(BuildingThermalParameters(None).can_simulate())
        self.assertFalse(BuildingThermalParameters(0.0).can_simulate())
        self.assertFalse(BuildingThermalParameters(8.0, 0.0).can_simulate())

    def test_from_dict_defaults(self):
        building, disclosures = BuildingThermalParameters.from_dict({'peak_heat_loss_kW': 6.0})
        self.assertEqual(building.tau_hours(), 35.0)
        self.assertEqual(building.temp_outdoor(), 5.0)
        self.assertEqual(building.setpoint_home(), 21.0)
        self.assertEqual(building.setpoint_away(), 17.0)
        self.assertEqual(len(disclosures), 2)

    def test_from_dict_measured(self):
        building, disclosures = BuildingThermalParameters.from_dict({
            'peak_heat_loss_kW': 6.0,
            'tau_hours': 50.0,
            'tau_source': 'measured',
            'outdoor_temp_C': -2.0,
            })
        self.assertEqual(building.tau_hours(), 50.0)
        self.assertEqual(building.temp_outdoor(), -2.0)
        self.assertEqual(disclosures, [])

        _, disclosures = BuildingThermalParameters.from_dict({
            'peak_heat_loss_kW': 6.0,
            'tau_hours': 20.0,
            'tau_source': 'slider',
            'outdoor_temp_C': 0.0,
            })
        self.assertEqual(len(disclosures), 1)
