#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the hourly physics of a painted scenario profile: how
each type of heating system would serve the painted heating and hot water
demand hour by hour, including the energy combi boilers waste purging cold
water at the start of each draw.
"""

# Standard library imports
import logging

# Local imports
import heatcompare.units as units
from heatcompare.heating_systems.heat_source import SystemType
from heatcompare.space_heat_demand.demand_profile import resample_profile
from heatcompare.water_heat_demand.hot_water_events import \
    TEMP_COLD_WATER, TEMP_HOT_WATER, detect_purge_pulses
from heatcompare.water_heat_demand.misc import water_flow_to_kW

logger = logging.getLogger(__name__)

# Output cap of a domestic boiler, in kW
BOILER_OUTPUT_CAP = 30.0
BOILER_EFFICIENCY_PCT = 92.0
# Drop in combi efficiency while serving hot water (short firing, high return temperature)
COMBI_DHW_PENALTY_PCT = 20.0
# Additional drop on the first hour of a draw, while the pipework is purged of cold water
COMBI_PURGE_PENALTY_PCT = 18.0
COLD_MORNING_HOUR = 7
COLD_MORNING_DIP = 0.3
COP_MIN = 1.5


def _combi_hour(ch_demand, dhw_demand, purge):
    if dhw_demand > 0.0:
        q_to_dhw = min(dhw_demand, BOILER_OUTPUT_CAP)
        if purge:
            # Left unclamped, so that a negative efficiency flags heat dumped
            eta_pct = BOILER_EFFICIENCY_PCT - (BOILER_EFFICIENCY_PCT + COMBI_PURGE_PENALTY_PCT)
        else:
            eta_pct = min(99.0, max(50.0, BOILER_EFFICIENCY_PCT - COMBI_DHW_PENALTY_PCT))
        eta = eta_pct / 100.0
        return {
            'q_to_ch_kW': 0.0,
            'q_to_dhw_kW': q_to_dhw,
            'eta_or_cop': eta,
            'q_dump_kW': max(0.0, -eta * q_to_dhw),
            }
    return {
        'q_to_ch_kW': min(ch_demand, BOILER_OUTPUT_CAP),
        'q_to_dhw_kW': 0.0,
        'eta_or_cop': BOILER_EFFICIENCY_PCT / 100.0,
        'q_dump_kW': 0.0,
        }

def _stored_hour(ch_demand, dhw_demand):
    return {
        'q_to_ch_kW': min(ch_demand, BOILER_OUTPUT_CAP),
        'q_to_dhw_kW': min(dhw_demand, BOILER_OUTPUT_CAP),
        'eta_or_cop': BOILER_EFFICIENCY_PCT / 100.0,
        'q_dump_kW': 0.0,
        }

def _heat_pump_hour(ch_demand, dhw_demand, hour, spf_midpoint):
    cop = spf_midpoint
    if hour < COLD_MORNING_HOUR:
        cop -= COLD_MORNING_DIP
    return {
        'q_to_ch_kW': ch_demand,
        'q_to_dhw_kW': dhw_demand,
        'eta_or_cop': max(COP_MIN, cop),
        'q_dump_kW': 0.0,
        }

def system_hour(system_type, ch_demand, dhw_demand, purge, hour, spf_midpoint):
    """ Return how a system type serves one hour of the painted demand """
    if system_type.is_heat_pump():
        return _heat_pump_hour(ch_demand, dhw_demand, hour, spf_midpoint)
    elif system_type.is_combi():
        return _combi_hour(ch_demand, dhw_demand, purge)
    else:
        return _stored_hour(ch_demand, dhw_demand)

def apply_scenario_overrides(
        peak_heat_loss,
        profile,
        system_a,
        system_b,
        spf_midpoint=3.0,
        temp_cold=TEMP_COLD_WATER,
        ):
    """ Return the hour-by-hour service of a painted profile by two systems

    Arguments:
    peak_heat_loss -- design heat loss of the dwelling, in kW
    profile        -- reference to ScenarioProfile object (validated on construction)
    system_a       -- SystemType (or its string name) of system A
    system_b       -- SystemType (or its string name) of system B
    spf_midpoint   -- seasonal performance factor assumed for heat pumps
    temp_cold      -- cold mains temperature, in deg C

    Returns a list of 24 dictionaries, one per hour.
    """
    if not isinstance(system_a, SystemType):
        system_a = SystemType.from_string(system_a)
    if not isinstance(system_b, SystemType):
        system_b = SystemType.from_string(system_b)

    resolution_mins = profile.resolution_mins()
    heat_fractions = profile.hourly_heat_fractions()
    dhw_lpm = resample_profile(profile.dhw_lpm(), resolution_mins, units.minutes_per_hour)
    cold_lpm = resample_profile(profile.cold_lpm(), resolution_mins, units.minutes_per_hour)
    dhw_demand = [water_flow_to_kW(lpm, TEMP_HOT_WATER, temp_cold) for lpm in dhw_lpm]
    purge_pulses = detect_purge_pulses(dhw_demand)

    records = []
    for hour in range(units.hours_per_day):
        ch_demand = peak_heat_loss * heat_fractions[hour]
        records.append({
            'hour': hour,
            'ch_demand_kW': ch_demand,
            'dhw_demand_kW': dhw_demand[hour],
            'cold_lpm': cold_lpm[hour],
            'purge': purge_pulses[hour],
            'A': system_hour(system_a, ch_demand, dhw_demand[hour], purge_pulses[hour], hour, spf_midpoint),
            'B': system_hour(system_b, ch_demand, dhw_demand[hour], purge_pulses[hour], hour, spf_midpoint),
            })

    logger.debug(
        "Scenario (%s profile): %d purge pulses",
        profile.source(),
        sum(1 for pulse in purge_pulses if pulse),
        )
    return records
