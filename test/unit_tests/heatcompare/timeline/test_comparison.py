#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains unit tests for the comparison module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from heatcompare.heating_systems.heat_source import build_system_config
from heatcompare.space_heat_demand.building import BuildingThermalParameters
from heatcompare.space_heat_demand.demand_profile import \
    OccupancySignature, space_heat_demand_series
from heatcompare.timeline.comparison import assert_shared_demand, compare_systems
from heatcompare.timeline.demand_timeline import build_demand_timeline
from heatcompare.timeline.solver_24h import solve_system_timeline
from heatcompare.water_heat_demand.hot_water_events import default_event_schedule

class TestComparison(unittest.TestCase):
    """ Unit tests for compare_systems and assert_shared_demand functions """

    def setUp(self):
        self.building = BuildingThermalParameters(8.0, 35.0, 5.0)
        self.demand = build_demand_timeline(
            default_event_schedule(),
            space_heat_demand=space_heat_demand_series(
                8.0,
                OccupancySignature.STEADY_HOME.hourly_fractions(),
                ),
            disclosures=['Default hot water schedule'],
            )
        self.combi = build_system_config('on_demand', 8.0)
        self.ashp = build_system_config('ashp', 8.0)

    def test_fairness_both_orders(self):
        forward = compare_systems(self.building, self.combi, self.ashp, self.demand)
        reverse = compare_systems(self.building, self.ashp, self.combi, self.demand)
        for result in (forward.result_a(), forward.result_b(), reverse.result_a(), reverse.result_b()):
            with self.subTest(label=result.label()):
                self.assertEqual(result.space_heat_demand(), self.demand.space_heat_demand())
                self.assertEqual(result.dhw_demand(), self.demand.dhw_demand())
                self.assertEqual(result.cold_flow(), self.demand.cold_flow())

        # Runs in either order see the same demand as each other
        for forward_result, reverse_result in (
                (forward.result_a(), reverse.result_b()),
                (forward.result_b(), reverse.result_a()),
                ):
            with self.subTest(label=forward_result.label()):
                self.assertEqual(forward_result.space_heat_demand(), reverse_result.space_heat_demand())
                self.assertEqual(forward_result.dhw_demand(), reverse_result.dhw_demand())
                self.assertEqual(forward_result.cold_flow(), reverse_result.cold_flow())
        self.assertEqual(forward.result_a().space_heat_demand(), reverse.result_a().space_heat_demand())
        self.assertIsNone(assert_shared_demand(reverse.result_a(), reverse.result_b()))
        self.assertIsNone(assert_shared_demand(forward.result_a(), reverse.result_a()))

        self.assertEqual(
            forward.result_a().series('heat_delivered'),
            reverse.result_b().series('heat_delivered'),
            )

    def test_results_differ_between_systems(self):
        comparison = compare_systems(self.building, self.combi, self.ashp, self.demand)
        self.assertNotEqual(
            comparison.result_a().series('efficiency'),
            comparison.result_b().series('efficiency'),
            )
        self.assertEqual(comparison.result_a().label(), 'Combi Boiler')
        self.assertEqual(comparison.result_b().label(), 'Air Source Heat Pump')

    def test_mismatch_fails_loudly(self):
        other_demand = build_demand_timeline(
            [],
            space_heat_demand=self.demand.space_heat_demand(),
            )
        result_a = solve_system_timeline(self.building, self.combi, self.demand)
        result_b = solve_system_timeline(self.building, self.ashp, other_demand)
        with self.assertRaises(SystemExit) as cm:
            assert_shared_demand(result_a, result_b)
        self.assertIn('hot water demand', str(cm.exception))
        self.assertIn('timestep 28', str(cm.exception))

    def test_mismatch_missing_space_heat_demand(self):
        other_demand = build_demand_timeline(default_event_schedule())
        result_a = solve_system_timeline(self.building, self.combi, self.demand)
        result_b = solve_system_timeline(self.building, self.combi, other_demand)
        with self.assertRaises(SystemExit) as cm:
            assert_shared_demand(result_a, result_b)
        self.assertIn('space heat demand', str(cm.exception))

    def test_disclosures_collected(self):
        building = BuildingThermalParameters(None)
        comparison = compare_systems(
            building, self.combi, self.ashp, self.demand,
            disclosures=['Outdoor temperature assumed'],
            )
        disclosures = comparison.disclosures()
        self.assertEqual(disclosures[0], 'Default hot water schedule')
        self.assertEqual(disclosures[1], 'Outdoor temperature assumed')
        # Both skipped runs give the same reason, reported once
        self.assertEqual(len(disclosures), 3)
        self.assertFalse(comparison.result_a().simulated())
