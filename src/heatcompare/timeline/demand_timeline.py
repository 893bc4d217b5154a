#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the demand timeline for the simulated day: the
per-timestep space heating demand, hot water demand and cold mains flow that
every compared system is simulated against.
"""

# Standard library imports
import logging

# Local imports
import heatcompare.units as units
from heatcompare.water_heat_demand.hot_water_events import \
    TEMP_COLD_WATER, active_draw_kW, cold_flow_series, detect_purge_pulses
from heatcompare.water_heat_demand.supply_path import SupplyPath

logger = logging.getLogger(__name__)

STEP_MINS = 15


class DemandTimeline:
    """ An object to represent the demand placed on a heating system over one day

    All series are stored as tuples so that a timeline shared between
    several simulation runs cannot be altered by any of them.
    """

    def __init__(
            self,
            space_heat_demand,
            dhw_demand,
            cold_flow,
            events,
            supply_path,
            step_mins=STEP_MINS,
            disclosures=(),
            ):
        """ Construct a DemandTimeline object

        Arguments:
        space_heat_demand -- space heating demand at each timestep, in kW, or
                             None if heating is governed by the thermostat alone
        dhw_demand        -- hot water heat demand at each timestep, in kW
        cold_flow         -- cold mains flow at each timestep, in litres / minute
        events            -- list of HotWaterEvent objects the demand was built from
        supply_path       -- SupplyPath applied to the events
        step_mins         -- length of each timestep, in minutes
        disclosures       -- assumptions made while building the timeline
        """
        total_steps = units.minutes_per_day // step_mins
        for name, series in (('dhw_demand', dhw_demand), ('cold_flow', cold_flow)):
            assert len(series) == total_steps, name + ' has wrong number of timesteps'
        if space_heat_demand is not None:
            assert len(space_heat_demand) == total_steps, 'space_heat_demand has wrong number of timesteps'
            space_heat_demand = tuple(space_heat_demand)

        self.__step_mins = step_mins
        self.__space_heat_demand = space_heat_demand
        self.__dhw_demand = tuple(dhw_demand)
        self.__cold_flow = tuple(cold_flow)
        self.__purge_pulses = tuple(detect_purge_pulses(self.__dhw_demand))
        self.__events = tuple(events)
        self.__supply_path = supply_path
        self.__disclosures = tuple(disclosures)

    def step_mins(self):
        return self.__step_mins

    def total_steps(self):
        return len(self.__dhw_demand)

    def time_minutes(self):
        return tuple(idx * self.__step_mins for idx in range(self.total_steps()))

    def space_heat_demand(self):
        return self.__space_heat_demand

    def dhw_demand(self):
        return self.__dhw_demand

    def cold_flow(self):
        return self.__cold_flow

    def purge_pulses(self):
        return self.__purge_pulses

    def events(self):
        return self.__events

    def supply_path(self):
        return self.__supply_path

    def disclosures(self):
        return self.__disclosures


def build_demand_timeline(
        events,
        supply_path=SupplyPath.FULL,
        space_heat_demand=None,
        cold_flow_extra=None,
        step_mins=STEP_MINS,
        temp_cold=TEMP_COLD_WATER,
        disclosures=(),
        ):
    """ Build the demand timeline for a set of water events

    Arguments:
    events            -- list of HotWaterEvent objects
    supply_path       -- SupplyPath deciding which draws the heat source meets
    space_heat_demand -- space heating demand at each timestep, in kW (optional)
    cold_flow_extra   -- additional cold mains flow at each timestep (e.g. from a
                         painted profile), in litres / minute (optional)
    step_mins         -- length of each timestep, in minutes
    temp_cold         -- cold mains temperature, in deg C
    disclosures       -- assumptions made in arriving at the inputs
    """
    total_steps = units.minutes_per_day // step_mins
    dhw_demand = [
        active_draw_kW(events, idx * step_mins, (idx + 1) * step_mins, supply_path, temp_cold)
        for idx in range(total_steps)
        ]
    cold_flow = cold_flow_series(events, total_steps, step_mins)
    if cold_flow_extra is not None:
        cold_flow = [a + b for a, b in zip(cold_flow, cold_flow_extra)]

    logger.debug(
        "Demand timeline: %d events, %.2f kWh hot water, supply path %s",
        len(events),
        sum(dhw_demand) * step_mins / units.minutes_per_hour,
        supply_path.name,
        )
    return DemandTimeline(
        space_heat_demand,
        dhw_demand,
        cold_flow,
        events,
        supply_path,
        step_mins,
        disclosures,
        )
