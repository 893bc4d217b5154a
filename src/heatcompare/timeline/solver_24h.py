#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the 24 hour solver, which steps a single-node building
model and one heating system through the simulated day against a demand
timeline, and the record of the results.
"""

# Standard library imports
import logging
import sys

# Local imports
from heatcompare.controls.time_control import OccupancySetpointControl
from heatcompare.heating_systems.boiler import BoilerCombiDispatch, BoilerStoredDispatch
from heatcompare.heating_systems.heat_pump import HeatPumpDispatch
from heatcompare.heating_systems.storage_tank import HotWaterCylinder
from heatcompare.simulation_time import SimulationTime
import heatcompare.units as units

logger = logging.getLogger(__name__)

# Multiple of the heat loss coefficient applied to the setpoint deficit when recovering
RECOVERY_URGENCY = 4.0


class SystemTimeline:
    """ An object to represent the simulated day of one heating system """

    SERIES_NAMES = (
        'temp_room',
        'heat_delivered',
        'space_heat_required',
        'space_heat_delivered',
        'efficiency',
        'input_power',
        'dhw_state',
        'dhw_shortfall',
        )

    def __init__(self, config, demand, series=None, disclosures=()):
        """ Construct a SystemTimeline object

        Arguments:
        config      -- reference to the HeatSourceConfig simulated
        demand      -- reference to the DemandTimeline simulated against
        series      -- dictionary of per-timestep results keyed by SERIES_NAMES,
                       or None if the system was not simulated
        disclosures -- assumptions and limitations of this run
        """
        self.__config = config
        self.__demand = demand
        self.__simulated = series is not None
        if series is None:
            series = {name: () for name in self.SERIES_NAMES}
        self.__series = {name: tuple(series[name]) for name in self.SERIES_NAMES}
        self.__disclosures = tuple(disclosures)

        # Snapshot of the demand as seen by this run, for fairness checks
        self.__space_heat_demand = demand.space_heat_demand()
        self.__dhw_demand = demand.dhw_demand()
        self.__cold_flow = demand.cold_flow()

    def simulated(self):
        """ Return False if the run was skipped for lack of building data """
        return self.__simulated

    def config(self):
        return self.__config

    def label(self):
        return self.__config.label()

    def demand(self):
        return self.__demand

    def disclosures(self):
        return self.__disclosures

    def series(self, name):
        return self.__series[name]

    def time_minutes(self):
        return self.__demand.time_minutes()

    def space_heat_demand(self):
        return self.__space_heat_demand

    def dhw_demand(self):
        return self.__dhw_demand

    def cold_flow(self):
        return self.__cold_flow

    def __total_kWh(self, name):
        step_hours = self.__demand.step_mins() / units.minutes_per_hour
        return sum(self.__series[name]) * step_hours

    def total_heat_delivered(self):
        """ Return the heat delivered over the day, in kWh """
        return self.__total_kWh('heat_delivered')

    def total_input_energy(self):
        """ Return the fuel or electricity used over the day, in kWh """
        return self.__total_kWh('input_power')

    def total_dhw_shortfall(self):
        """ Return the hot water demand not met over the day, in kWh """
        return self.__total_kWh('dhw_shortfall')

    def min_temp_room(self):
        if not self.__simulated:
            return None
        return min(self.__series['temp_room'])


def create_dispatch(config, timestep, temp_outdoor, efficiency_series=None,
                    cylinder_capacity=HotWaterCylinder.NOMINAL_CAPACITY):
    """ Return a new dispatch strategy object for the system type of config """
    system_type = config.system_type()
    if system_type.is_heat_pump():
        return HeatPumpDispatch(config, timestep, temp_outdoor, cylinder_capacity)
    elif system_type.is_combi():
        return BoilerCombiDispatch(config, timestep, efficiency_series)
    else:
        return BoilerStoredDispatch(config, timestep, efficiency_series, cylinder_capacity)

def solve_system_timeline(
        building,
        config,
        demand,
        efficiency_series=None,
        cylinder_capacity=HotWaterCylinder.NOMINAL_CAPACITY,
        home_start_hour=6,
        home_end_hour=23,
        ):
    """ Simulate one heating system over the day

    Arguments:
    building          -- reference to BuildingThermalParameters object
    config            -- reference to HeatSourceConfig object
    demand            -- reference to DemandTimeline object
    efficiency_series -- optional boiler efficiency at each timestep
    cylinder_capacity -- usable energy of the hot water cylinder, in kWh
    home_start_hour   -- hour of day the home setpoint starts
    home_end_hour     -- hour of day the home setpoint ends
    """
    if not building.can_simulate():
        logger.info("Skipping simulation of %s: heat loss or time constant missing", config.label())
        return SystemTimeline(
            config,
            demand,
            None,
            ['Not simulated: a heat loss figure and time constant are needed for the 24 hour model'],
            )

    simtime = SimulationTime(0, units.hours_per_day, demand.step_mins() / units.minutes_per_hour)
    if efficiency_series is not None and len(efficiency_series) != simtime.total_steps():
        sys.exit(
            'Efficiency series length mismatch: expected ' + str(simtime.total_steps())
            + ', got ' + str(len(efficiency_series))
            )

    control = OccupancySetpointControl(
        simtime,
        building.setpoint_home(),
        building.setpoint_away(),
        home_start_hour,
        home_end_hour,
        )
    strategy = create_dispatch(
        config,
        simtime.timestep(),
        building.temp_outdoor(),
        efficiency_series,
        cylinder_capacity,
        )
    heat_transfer_coeff = building.heat_transfer_coeff()
    space_heat_demand = demand.space_heat_demand()
    dhw_demand = demand.dhw_demand()

    series = {name: [] for name in SystemTimeline.SERIES_NAMES}
    temp_room = control.initial_setpnt()

    for t_idx, t_current, timestep in simtime:
        heat_loss = building.heat_loss(temp_room)
        recovery = max(0.0, control.setpnt() - temp_room) * heat_transfer_coeff * RECOVERY_URGENCY
        space_heat_required = max(0.0, heat_loss + recovery)
        if space_heat_demand is not None and space_heat_demand[t_idx] <= 0.0:
            # Heating is off for this timestep
            space_heat_required = 0.0

        heat_delivered, space_heat_delivered, dhw_state, dhw_shortfall \
            = strategy.dispatch(space_heat_required, dhw_demand[t_idx])
        efficiency = strategy.efficiency(t_idx, simtime.hour_of_day(), heat_delivered)

        series['temp_room'].append(temp_room)
        series['heat_delivered'].append(heat_delivered)
        series['space_heat_required'].append(space_heat_required)
        series['space_heat_delivered'].append(space_heat_delivered)
        series['efficiency'].append(efficiency)
        series['input_power'].append(strategy.input_power(heat_delivered, efficiency))
        series['dhw_state'].append(dhw_state)
        series['dhw_shortfall'].append(dhw_shortfall)

        temp_room = building.temp_room_next(temp_room, space_heat_delivered, timestep)

    result = SystemTimeline(config, demand, series)
    logger.debug(
        "%s: %.2f kWh delivered, %.2f kWh input, %.2f kWh hot water shortfall",
        config.label(),
        result.total_heat_delivered(),
        result.total_input_energy(),
        result.total_dhw_shortfall(),
        )
    return result
