#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides objects to represent air source heat pumps: a lookup of
coefficient of performance by design flow temperature and outdoor conditions,
and dispatch of a heat pump serving space heating and a hot water cylinder.
"""

# Standard library imports
import sys
from enum import Enum, auto

# Local imports
from heatcompare.heating_systems.dispatch import DispatchStrategy
from heatcompare.heating_systems.storage_tank import HotWaterCylinder
import heatcompare.units as units


class FlowTempBand(Enum):
    FLOW_35 = auto()
    FLOW_45 = auto()
    FLOW_50 = auto()

    @classmethod
    def from_value(cls, value):
        if value == 35:
            return cls.FLOW_35
        elif value == 45:
            return cls.FLOW_45
        elif value == 50:
            return cls.FLOW_50
        else:
            sys.exit('FlowTempBand (' + str(value) + ') not valid.')


class OutdoorCondition(Enum):
    COLD = auto()
    MILD = auto()
    WARM = auto()

    @classmethod
    def from_temperature(cls, temp_outdoor):
        if temp_outdoor <= 2.0:
            return cls.COLD
        elif temp_outdoor <= 7.0:
            return cls.MILD
        else:
            return cls.WARM


COP_TABLE = {
    FlowTempBand.FLOW_35: {
        OutdoorCondition.COLD: 3.2,
        OutdoorCondition.MILD: 3.8,
        OutdoorCondition.WARM: 4.5,
        },
    FlowTempBand.FLOW_45: {
        OutdoorCondition.COLD: 2.5,
        OutdoorCondition.MILD: 3.0,
        OutdoorCondition.WARM: 3.6,
        },
    FlowTempBand.FLOW_50: {
        OutdoorCondition.COLD: 2.1,
        OutdoorCondition.MILD: 2.6,
        OutdoorCondition.WARM: 3.2,
        },
    }

COP_MIN = 1.5
# Reduction in COP before this hour, for defrost cycles and low overnight air temperatures
COLD_MORNING_HOUR = 7
COLD_MORNING_DIP = 0.3

def cop(flow_temp_band, temp_outdoor, hour):
    """ Return the coefficient of performance for the given conditions

    Arguments:
    flow_temp_band -- FlowTempBand of the emitter system
    temp_outdoor   -- outdoor air temperature, in deg C
    hour           -- hour of day (0 to 23)
    """
    value = COP_TABLE[flow_temp_band][OutdoorCondition.from_temperature(temp_outdoor)]
    if hour < COLD_MORNING_HOUR:
        value -= COLD_MORNING_DIP
    return max(COP_MIN, value)


class HeatPumpDispatch(DispatchStrategy):
    """ An object to represent dispatch of an air source heat pump with a cylinder

    Output is sized to meet space heating and hot water together up to the
    maximum output; space heating is served first and the remainder recharges
    the cylinder the draws are taken from.
    """

    def __init__(self, config, timestep, temp_outdoor,
                 cylinder_capacity=HotWaterCylinder.NOMINAL_CAPACITY):
        super().__init__(config, timestep)
        self.__temp_outdoor = temp_outdoor
        self.__cylinder = HotWaterCylinder(cylinder_capacity)

    def cylinder(self):
        return self.__cylinder

    def efficiency(self, idx, hour, heat_delivered):
        return cop(self._config.flow_temp_band(), self.__temp_outdoor, hour)

    def dispatch(self, space_heat_required, dhw_required):
        heat_delivered = min(space_heat_required + dhw_required, self._config.max_output())
        space_heat_delivered = min(heat_delivered, space_heat_required)
        heat_to_dhw = heat_delivered - space_heat_delivered

        dhw_shortfall = self.__cylinder.draw_power(dhw_required, self._timestep)
        self.__cylinder.charge_energy(units.kW_to_kWh(heat_to_dhw, self._timestep))

        return heat_delivered, space_heat_delivered, self.__cylinder.state_of_charge(), dhw_shortfall
