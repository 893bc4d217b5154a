#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains miscellaneous free functions related to water heat demand.
"""

# Local imports
from heatcompare.material_properties import WATER


def water_flow_to_kW(flow_lpm, temp_target, temp_cold):
    """ Calculate the heat rate needed to raise a water flow to a target temperature

    This is the single conversion from volumetric draw to thermal demand used
    throughout the package.

    Arguments:
    flow_lpm    -- water flow rate, in litres / minute
    temp_target -- temperature the water is delivered at, in deg C
    temp_cold   -- temperature of the incoming cold water, in deg C
    """
    if flow_lpm <= 0.0 or temp_target <= temp_cold:
        return 0.0
    return flow_lpm * WATER.volumetric_power_kW_per_lpm(temp_target, temp_cold)
