#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides objects to represent the control of boilers over the
simulated day: combi boilers, which heat hot water on demand, and boilers
serving a hot water cylinder (regular, system and stored-water boilers).
"""

# Local imports
from heatcompare.heating_systems.boiler_efficiency import clamp_efficiency
from heatcompare.heating_systems.dispatch import DispatchStrategy
from heatcompare.heating_systems.storage_tank import HotWaterCylinder
import heatcompare.units as units


class BoilerDispatch(DispatchStrategy):
    """ A base class for boiler dispatch, handling efficiency at part load """

    # Efficiency lost when the boiler cycles on and off below its minimum output
    CYCLING_PENALTY = 0.07
    CYCLING_EFFICIENCY_MIN = 0.60

    def __init__(self, config, timestep, efficiency_series=None):
        """ Construct a BoilerDispatch object

        Arguments:
        config            -- reference to HeatSourceConfig object
        timestep          -- length of each timestep, in hours
        efficiency_series -- optional efficiency at each timestep (e.g. from
                             BoilerEfficiencyModel); if None, the base
                             efficiency of the config is used throughout
        """
        super().__init__(config, timestep)
        self.__efficiency_series = efficiency_series

    def efficiency(self, idx, hour, heat_delivered):
        if self.__efficiency_series is not None:
            efficiency = self.__efficiency_series[idx]
        else:
            efficiency = self._config.base_efficiency()

        if 0.0 < heat_delivered < self._config.min_output():
            # The floor limits the penalty; it never lifts an efficiency already below it
            efficiency = min(
                efficiency,
                max(self.CYCLING_EFFICIENCY_MIN, efficiency - self.CYCLING_PENALTY),
                )
        return clamp_efficiency(efficiency)


class BoilerCombiDispatch(BoilerDispatch):
    """ An object to represent dispatch of a combi boiler

    Hot water takes absolute priority: while there is a draw, the whole
    output goes to hot water and space heating is suspended.
    """

    def dispatch(self, space_heat_required, dhw_required):
        max_output = self._config.max_output()
        if dhw_required > 0.0:
            heat_delivered = min(max_output, dhw_required)
            dhw_shortfall = dhw_required - heat_delivered
            # Proportion of the draw delivered at temperature
            dhw_state = heat_delivered / dhw_required * 100.0
            return heat_delivered, 0.0, dhw_state, dhw_shortfall

        heat_delivered = min(max_output, space_heat_required)
        return heat_delivered, heat_delivered, 100.0, 0.0


class BoilerStoredDispatch(BoilerDispatch):
    """ An object to represent dispatch of a boiler with a hot water cylinder

    Space heating and hot water are served independently: draws come from
    the cylinder, and output not needed for space heating recharges it.
    """

    def __init__(self, config, timestep, efficiency_series=None,
                 cylinder_capacity=HotWaterCylinder.NOMINAL_CAPACITY):
        super().__init__(config, timestep, efficiency_series)
        self.__cylinder = HotWaterCylinder(cylinder_capacity)

    def cylinder(self):
        return self.__cylinder

    def dispatch(self, space_heat_required, dhw_required):
        max_output = self._config.max_output()
        space_heat_delivered = min(space_heat_required, max_output)

        dhw_shortfall = self.__cylinder.draw_power(dhw_required, self._timestep)

        headroom_kW = max_output - space_heat_delivered
        reheat = min(headroom_kW, units.kWh_to_kW(self.__cylinder.headroom(), self._timestep))
        self.__cylinder.charge_energy(units.kW_to_kWh(reheat, self._timestep))

        heat_delivered = space_heat_delivered + reheat
        return heat_delivered, space_heat_delivered, self.__cylinder.state_of_charge(), dhw_shortfall
