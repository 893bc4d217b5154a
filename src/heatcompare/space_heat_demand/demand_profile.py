#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides hourly space heating demand profiles (from occupancy
signatures or a painted scenario profile) and their expansion onto the
simulation timeline.
"""

# Standard library imports
import sys
from enum import Enum, auto

# Third-party imports
import numpy as np

# Local imports
import heatcompare.units as units


class OccupancySignature(Enum):
    PROFESSIONAL = auto()
    STEADY_HOME = auto()
    SHIFT_WORKER = auto()

    @classmethod
    def from_string(cls, strval):
        if strval == 'professional':
            return cls.PROFESSIONAL
        elif strval == 'steady_home':
            return cls.STEADY_HOME
        elif strval == 'shift_worker':
            return cls.SHIFT_WORKER
        else:
            sys.exit('OccupancySignature (' + str(strval) + ') not valid.')

    def demand_fraction(self, hour):
        """ Return the fraction of design heat loss demanded in the given hour """
        if self == OccupancySignature.PROFESSIONAL:
            if 6 <= hour <= 8:
                return 0.9
            if 17 <= hour <= 22:
                return 0.85
            if 9 <= hour <= 16:
                return 0.05
            return 0.1
        elif self == OccupancySignature.STEADY_HOME:
            if hour >= 23 or hour <= 5:
                return 0.4
            return 0.65
        else:
            if 10 <= hour <= 12:
                return 0.9
            if 21 <= hour <= 23:
                return 0.8
            if 0 <= hour <= 2:
                return 0.7
            return 0.2

    def hourly_fractions(self):
        return [self.demand_fraction(hour) for hour in range(units.hours_per_day)]


# Fraction of design heat loss for each heat intent level (off, setback, comfort)
HEAT_INTENT_FRACTION = {0: 0.0, 1: 0.40, 2: 1.00}

def heat_intent_fraction(intent):
    if intent not in HEAT_INTENT_FRACTION:
        sys.exit('Heat intent (' + str(intent) + ') not valid, expected 0, 1 or 2')
    return HEAT_INTENT_FRACTION[intent]

def interpolate_hourly(hourly_values, step_mins=15):
    """ Interpolate 24 hourly values onto a sub-hourly timeline

    Values are linearly interpolated between the start of hour h and the
    start of hour h+1, with hour 23 wrapping round to hour 0. Results are
    clamped at zero.

    Arguments:
    hourly_values -- 24 values, one per hour starting at midnight
    step_mins     -- length of each output timestep, in minutes
    """
    if len(hourly_values) != units.hours_per_day:
        sys.exit(
            'Hourly profile length mismatch: expected ' + str(units.hours_per_day)
            + ', got ' + str(len(hourly_values))
            )
    step_hours = np.arange(0, units.minutes_per_day, step_mins) / units.minutes_per_hour
    values = np.interp(
        step_hours,
        np.arange(units.hours_per_day),
        np.asarray(hourly_values, dtype=float),
        period=units.hours_per_day,
        )
    return [max(0.0, float(v)) for v in values]

def resample_profile(values, resolution_mins, step_mins):
    """ Map a per-slice profile onto windows of step_mins, by clock time

    Where a slice spans whole windows, its value is held; where a window
    holds whole slices, they are averaged. Otherwise each window takes the
    mean of the slices overlapping it, weighted by minutes of overlap.

    Arguments:
    values          -- one value per slice, starting at midnight
    resolution_mins -- length of each slice, in minutes
    step_mins       -- length of each output window, in minutes
    """
    values = np.asarray(values, dtype=float)
    total_steps = units.minutes_per_day // step_mins
    if resolution_mins % step_mins == 0:
        return [
            float(values[(idx * step_mins) // resolution_mins])
            for idx in range(total_steps)
            ]
    if step_mins % resolution_mins == 0:
        slices_per_step = step_mins // resolution_mins
        return [
            float(np.mean(values[idx * slices_per_step:(idx + 1) * slices_per_step]))
            for idx in range(total_steps)
            ]

    slice_starts = np.arange(len(values)) * resolution_mins
    slice_ends = slice_starts + resolution_mins
    resampled = []
    for idx in range(total_steps):
        window_start = idx * step_mins
        window_end = window_start + step_mins
        overlap = np.clip(
            np.minimum(slice_ends, window_end) - np.maximum(slice_starts, window_start),
            0,
            None,
            )
        resampled.append(float(np.dot(values, overlap) / overlap.sum()))
    return resampled

def expand_profile(values, resolution_mins, step_mins=15):
    """ Expand a coarse per-slice profile onto the simulation timeline

    Arguments:
    values          -- one value per slice, starting at midnight
    resolution_mins -- length of each slice, in minutes
    step_mins       -- length of each output timestep, in minutes
    """
    return resample_profile(values, resolution_mins, step_mins)

def space_heat_demand_series(peak_heat_loss, hourly_fractions, step_mins=15):
    """ Return the space heating demand in each timestep, in kW

    Arguments:
    peak_heat_loss   -- design heat loss of the dwelling, in kW
    hourly_fractions -- 24 fractions of design heat loss, one per hour
    step_mins        -- length of each output timestep, in minutes
    """
    hourly_kW = [peak_heat_loss * frac for frac in hourly_fractions]
    return interpolate_hourly(hourly_kW, step_mins)


class ScenarioProfile:
    """ An object to represent a painted 24 hour usage profile

    Each channel holds one value per slice of the day:
    heat_intent -- 0 (off), 1 (setback) or 2 (comfort)
    dhw_lpm     -- hot water flow, in litres / minute
    cold_lpm    -- cold mains flow, in litres / minute
    """

    def __init__(self, heat_intent, dhw_lpm, cold_lpm, resolution_mins=60, source='measured'):
        """ Construct a ScenarioProfile object, checking its structure

        Arguments:
        heat_intent     -- list of heat intent levels, one per slice
        dhw_lpm         -- list of hot water flows, one per slice
        cold_lpm        -- list of cold mains flows, one per slice
        resolution_mins -- length of each slice, in minutes; must divide 1440
        source          -- where the profile came from (e.g. 'measured', 'default')
        """
        if resolution_mins <= 0 or units.minutes_per_day % resolution_mins != 0:
            sys.exit(
                'ScenarioProfile resolution (' + str(resolution_mins)
                + ' mins) must divide ' + str(units.minutes_per_day)
                )
        expected = units.minutes_per_day // resolution_mins
        for name, channel in (
                ('heat_intent', heat_intent),
                ('dhw_lpm', dhw_lpm),
                ('cold_lpm', cold_lpm),
                ):
            if len(channel) != expected:
                sys.exit(
                    'ScenarioProfile ' + name + ' length mismatch: expected '
                    + str(expected) + ' slices at ' + str(resolution_mins)
                    + ' min resolution, got ' + str(len(channel))
                    )
        for intent in heat_intent:
            heat_intent_fraction(intent)

        self.__heat_intent = list(heat_intent)
        self.__dhw_lpm = [float(v) for v in dhw_lpm]
        self.__cold_lpm = [float(v) for v in cold_lpm]
        self.__resolution_mins = resolution_mins
        self.__source = source

    @classmethod
    def from_dict(cls, profile_dict):
        return cls(
            profile_dict['heat_intent'],
            profile_dict['dhw_lpm'],
            profile_dict['cold_lpm'],
            profile_dict.get('resolution_mins', 60),
            profile_dict.get('source', 'measured'),
            )

    def heat_intent(self):
        return list(self.__heat_intent)

    def dhw_lpm(self):
        return list(self.__dhw_lpm)

    def cold_lpm(self):
        return list(self.__cold_lpm)

    def resolution_mins(self):
        return self.__resolution_mins

    def source(self):
        return self.__source

    def slices(self):
        return len(self.__heat_intent)

    def hourly_heat_fractions(self):
        """ Return the heat demand fraction for each hour of the day

        Slices within an hour are averaged, weighted by the minutes of the
        hour they cover; an hourly or longer slice is used as is.
        """
        fractions = [heat_intent_fraction(intent) for intent in self.__heat_intent]
        return resample_profile(fractions, self.__resolution_mins, units.minutes_per_hour)


def default_scenario_profile(bathroom_count=1):
    """ Return the profile used when the occupant has not painted one

    Comfort heating in the morning (06-08) and evening (17-21), setback
    otherwise. Hot water draws during the morning and, at half the rate,
    in the evening.
    """
    morning_lpm = min(bathroom_count * 1.5, 9.0)
    heat_intent = []
    dhw_lpm = []
    for hour in range(units.hours_per_day):
        heat_intent.append(2 if (6 <= hour <= 8 or 17 <= hour <= 21) else 1)
        if 6 <= hour <= 8:
            dhw_lpm.append(morning_lpm)
        elif 19 <= hour <= 21:
            dhw_lpm.append(morning_lpm * 0.5)
        else:
            dhw_lpm.append(0.0)
    return ScenarioProfile(heat_intent, dhw_lpm, [0.0] * units.hours_per_day, 60, 'measured')
