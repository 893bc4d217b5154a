#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the comparison of two heating systems against the same
demand timeline, and the check that both were in fact given the same demand.
"""

# Standard library imports
import logging
import sys

# Local imports
from heatcompare.timeline.solver_24h import solve_system_timeline

logger = logging.getLogger(__name__)


class ComparisonResult:
    """ An object to represent the simulated day of two heating systems """

    def __init__(self, result_a, result_b, disclosures=()):
        self.__result_a = result_a
        self.__result_b = result_b
        self.__disclosures = tuple(disclosures)

    def result_a(self):
        return self.__result_a

    def result_b(self):
        return self.__result_b

    def disclosures(self):
        """ Return all assumptions made, without duplicates, in the order first seen """
        seen = []
        for disclosure in self.__disclosures \
                + self.__result_a.disclosures() + self.__result_b.disclosures():
            if disclosure not in seen:
                seen.append(disclosure)
        return seen


def _first_mismatch(series_a, series_b):
    """ Return the index of the first differing value, or None if the series match """
    if series_a is None or series_b is None:
        if series_a is series_b:
            return None
        return 0
    if len(series_a) != len(series_b):
        return min(len(series_a), len(series_b))
    for idx, (value_a, value_b) in enumerate(zip(series_a, series_b)):
        if value_a != value_b:
            return idx
    return None

def assert_shared_demand(result_a, result_b):
    """ Exit if two results were not simulated against identical demand

    Every per-timestep value of space heating demand, hot water demand and
    cold mains flow must be identical between the two runs.
    """
    for name, series_a, series_b in (
            ('space heat demand', result_a.space_heat_demand(), result_b.space_heat_demand()),
            ('hot water demand', result_a.dhw_demand(), result_b.dhw_demand()),
            ('cold mains flow', result_a.cold_flow(), result_b.cold_flow()),
            ):
        idx = _first_mismatch(series_a, series_b)
        if idx is not None:
            value_a = None if series_a is None or idx >= len(series_a) else series_a[idx]
            value_b = None if series_b is None or idx >= len(series_b) else series_b[idx]
            sys.exit(
                'Shared demand mismatch between ' + result_a.label() + ' and '
                + result_b.label() + ': ' + name + ' differs at timestep ' + str(idx)
                + ' (' + str(value_a) + ' vs ' + str(value_b) + ')'
                )

def compare_systems(
        building,
        config_a,
        config_b,
        demand,
        efficiency_series_a=None,
        efficiency_series_b=None,
        disclosures=(),
        ):
    """ Simulate two heating systems against the same demand timeline

    Arguments:
    building            -- reference to BuildingThermalParameters object
    config_a            -- reference to HeatSourceConfig object for system A
    config_b            -- reference to HeatSourceConfig object for system B
    demand              -- reference to DemandTimeline object shared by both runs
    efficiency_series_a -- optional boiler efficiency series for system A
    efficiency_series_b -- optional boiler efficiency series for system B
    disclosures         -- assumptions made in arriving at the inputs
    """
    result_a = solve_system_timeline(building, config_a, demand, efficiency_series_a)
    result_b = solve_system_timeline(building, config_b, demand, efficiency_series_b)
    assert_shared_demand(result_a, result_b)

    logger.debug("Compared %s with %s", result_a.label(), result_b.label())
    return ComparisonResult(result_a, result_b, tuple(demand.disclosures()) + tuple(disclosures))
