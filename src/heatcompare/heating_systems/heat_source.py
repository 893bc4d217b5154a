#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the types of heating system that can be compared, and
the construction of their operating parameters.
"""

# Standard library imports
import logging
import sys
from enum import Enum, auto

# Local imports
from heatcompare.heating_systems.heat_pump import FlowTempBand

logger = logging.getLogger(__name__)


class SystemType(Enum):
    ON_DEMAND = auto()
    STORED_VENTED = auto()
    STORED_UNVENTED = auto()
    ASHP = auto()
    REGULAR_VENTED = auto()
    SYSTEM_UNVENTED = auto()

    @classmethod
    def from_string(cls, strval):
        if strval in ('on_demand', 'combi'):
            return cls.ON_DEMAND
        elif strval == 'stored_vented':
            return cls.STORED_VENTED
        elif strval == 'stored_unvented':
            return cls.STORED_UNVENTED
        elif strval == 'ashp':
            return cls.ASHP
        elif strval == 'regular_vented':
            return cls.REGULAR_VENTED
        elif strval == 'system_unvented':
            return cls.SYSTEM_UNVENTED
        else:
            sys.exit('SystemType (' + str(strval) + ') not valid.')

    @classmethod
    def resolve_current(cls, current_heat_source_type):
        """ Map the dwelling's existing heat source onto a system type

        Arguments:
        current_heat_source_type -- 'ashp', 'system', 'regular', 'combi' or None
        """
        if current_heat_source_type == 'ashp':
            return cls.ASHP
        elif current_heat_source_type in ('system', 'regular'):
            return cls.STORED_VENTED
        else:
            return cls.ON_DEMAND

    def label(self):
        return {
            SystemType.ON_DEMAND: 'Combi Boiler',
            SystemType.STORED_VENTED: 'Stored - Vented Cylinder',
            SystemType.STORED_UNVENTED: 'Stored - Unvented Cylinder',
            SystemType.ASHP: 'Air Source Heat Pump',
            SystemType.REGULAR_VENTED: 'Regular Vented Boiler',
            SystemType.SYSTEM_UNVENTED: 'System Unvented Boiler',
            }[self]

    def is_heat_pump(self):
        return self == SystemType.ASHP

    def is_combi(self):
        return self == SystemType.ON_DEMAND

    def has_cylinder(self):
        return not self.is_combi()


class HeatSourceConfig:
    """ An object to represent the operating parameters of one heating system """

    DEFAULT_MAX_OUTPUT_COMBI = 24.0
    DEFAULT_MAX_OUTPUT_BOILER = 18.0
    DEFAULT_MIN_OUTPUT = 4.0
    DEFAULT_BASE_EFFICIENCY = 0.85
    HEAT_PUMP_SIZING_FACTOR = 1.1

    def __init__(
            self,
            system_type,
            max_output,
            min_output=DEFAULT_MIN_OUTPUT,
            base_efficiency=None,
            flow_temp_band=None,
            label=None,
            ):
        """ Construct a HeatSourceConfig object

        Arguments:
        system_type     -- SystemType
        max_output      -- maximum heat output, in kW
        min_output      -- minimum modulating output (boilers), in kW
        base_efficiency -- efficiency used when no per-timestep series is given
                           (boilers only; None for heat pumps)
        flow_temp_band  -- FlowTempBand for emitter design flow temperature
                           (heat pumps only; None for boilers)
        label           -- display name; defaults to the label of the system type
        """
        self.__system_type = system_type
        self.__max_output = max_output
        self.__min_output = min_output
        if system_type.is_heat_pump():
            self.__base_efficiency = None
            self.__flow_temp_band \
                = FlowTempBand.FLOW_50 if flow_temp_band is None else flow_temp_band
        else:
            self.__base_efficiency \
                = self.DEFAULT_BASE_EFFICIENCY if base_efficiency is None else base_efficiency
            self.__flow_temp_band = None
        self.__label = label if label is not None else system_type.label()

    def system_type(self):
        return self.__system_type

    def max_output(self):
        return self.__max_output

    def min_output(self):
        return self.__min_output

    def base_efficiency(self):
        return self.__base_efficiency

    def flow_temp_band(self):
        return self.__flow_temp_band

    def label(self):
        return self.__label


def build_system_config(
        system_id,
        peak_heat_loss,
        max_output=None,
        min_output=None,
        base_efficiency=None,
        flow_temp_band=None,
        current_heat_source_type=None,
        ):
    """ Build the operating parameters of a system from its identifier

    Arguments:
    system_id                -- system type name, or 'current' for the existing system
    peak_heat_loss           -- design heat loss of the dwelling, in kW (None if unknown)
    max_output               -- maximum output, in kW; defaults by system type
    min_output               -- minimum modulating output, in kW
    base_efficiency          -- boiler efficiency without a per-timestep series
    flow_temp_band           -- design flow temperature, in deg C (35, 45 or 50)
    current_heat_source_type -- existing heat source, used to resolve 'current'
    """
    label = None
    if system_id == 'current':
        system_type = SystemType.resolve_current(current_heat_source_type)
        label = 'Current ' + system_type.label()
    else:
        system_type = SystemType.from_string(system_id)

    if max_output is None:
        if system_type.is_heat_pump() and peak_heat_loss is not None and peak_heat_loss > 0.0:
            max_output = peak_heat_loss * HeatSourceConfig.HEAT_PUMP_SIZING_FACTOR
        elif system_type.is_combi():
            max_output = HeatSourceConfig.DEFAULT_MAX_OUTPUT_COMBI
        else:
            max_output = HeatSourceConfig.DEFAULT_MAX_OUTPUT_BOILER

    if flow_temp_band is not None and not isinstance(flow_temp_band, FlowTempBand):
        flow_temp_band = FlowTempBand.from_value(flow_temp_band)

    logger.debug("System %s resolved to %s, max output %.1f kW", system_id, system_type.name, max_output)

    return HeatSourceConfig(
        system_type,
        max_output,
        HeatSourceConfig.DEFAULT_MIN_OUTPUT if min_output is None else min_output,
        base_efficiency,
        flow_temp_band,
        label,
        )
