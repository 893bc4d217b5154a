#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains common unit conversions for use by other modules.
"""

J_per_kWh = 3600000
W_per_kW = 1000
seconds_per_minute = 60
minutes_per_hour = 60
seconds_per_hour = 3600
hours_per_day = 24
minutes_per_day = 1440

def minutes_to_hours(minutes):
    return minutes / minutes_per_hour

def kW_to_kWh(power_kW, timestep_hours):
    """ Convert average power over a timestep to energy """
    assert timestep_hours >= 0
    return power_kW * timestep_hours

def kWh_to_kW(energy_kWh, timestep_hours):
    """ Convert energy over a timestep to average power """
    assert timestep_hours > 0
    return energy_kWh / timestep_hours
