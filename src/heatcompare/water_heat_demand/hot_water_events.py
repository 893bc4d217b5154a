#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides objects to represent hot and cold water events over a
24 hour day, and functions to build event schedules and the per-timestep
demand series derived from them.

Thermal draws are converted to heat rates from their flow rate, assuming
water is delivered at a fixed temperature from the cold mains. Appliance
fills (dishwasher, washing machine) take cold mains water only and place no
demand on the heat source.
"""

# Standard library imports
import math
import sys
from enum import Enum, auto

# Local imports
import heatcompare.units as units
from heatcompare.water_heat_demand.misc import water_flow_to_kW


class EventKind(Enum):
    BATH = auto()
    SINK = auto()
    SHOWER = auto()
    DISHWASHER = auto()
    WASHING_MACHINE = auto()
    COLD_ONLY = auto()

    @classmethod
    def from_string(cls, strval):
        if strval == 'bath':
            return cls.BATH
        elif strval == 'sink':
            return cls.SINK
        elif strval == 'shower':
            return cls.SHOWER
        elif strval == 'dishwasher':
            return cls.DISHWASHER
        elif strval == 'washing_machine':
            return cls.WASHING_MACHINE
        elif strval == 'cold_only':
            return cls.COLD_ONLY
        else:
            sys.exit('EventKind (' + str(strval) + ') not valid.')

    def is_thermal(self):
        return self in (EventKind.BATH, EventKind.SINK, EventKind.SHOWER)

    def is_shower(self):
        return self == EventKind.SHOWER


class Intensity(Enum):
    LOW = auto()
    MED = auto()
    HIGH = auto()

    @classmethod
    def from_string(cls, strval):
        if strval == 'low':
            return cls.LOW
        elif strval == 'med':
            return cls.MED
        elif strval == 'high':
            return cls.HIGH
        else:
            sys.exit('Intensity (' + str(strval) + ') not valid.')


# Temperature hot water is delivered at, in deg C
TEMP_HOT_WATER = 45.0
# Design cold mains temperature, in deg C
TEMP_COLD_WATER = 10.0

# Hot water flow rates of thermal draws, in litres / minute
DRAW_FLOW_LPM = {
    EventKind.BATH:   {Intensity.LOW: 6.0, Intensity.MED: 9.0, Intensity.HIGH: 12.0},
    EventKind.SINK:   {Intensity.LOW: 2.0, Intensity.MED: 4.0, Intensity.HIGH: 6.0},
    EventKind.SHOWER: {Intensity.LOW: 6.0, Intensity.MED: 8.0, Intensity.HIGH: 10.0},
    }

# Cold mains flow rates of appliance fills, in litres / minute
COLD_FILL_LPM = {
    EventKind.DISHWASHER: 10.0,
    EventKind.WASHING_MACHINE: 7.0,
    }


class HotWaterEvent:
    """ An object to represent a single water use event within the simulated day """

    def __init__(self, kind, intensity, start_min, end_min, flow_lpm=None):
        """ Construct a HotWaterEvent object

        Arguments:
        kind      -- EventKind (or its string name)
        intensity -- Intensity (or its string name)
        start_min -- start of the event, in minutes from midnight
        end_min   -- end of the event (exclusive), in minutes from midnight
        flow_lpm  -- explicit flow rate, in litres / minute; if None, the
                     flow rate for the kind and intensity is used
        """
        if not isinstance(kind, EventKind):
            kind = EventKind.from_string(kind)
        if not isinstance(intensity, Intensity):
            intensity = Intensity.from_string(intensity)
        if not (0 <= start_min < end_min <= units.minutes_per_day):
            sys.exit(
                'HotWaterEvent (' + kind.name.lower() + ') has invalid time range: expected '
                '0 <= start_min < end_min <= ' + str(units.minutes_per_day)
                + ', got ' + str(start_min) + ' to ' + str(end_min)
                )
        if flow_lpm is not None and flow_lpm < 0.0:
            sys.exit('HotWaterEvent flow rate (' + str(flow_lpm) + ') must not be negative')

        self.__kind = kind
        self.__intensity = intensity
        self.__start_min = start_min
        self.__end_min = end_min
        self.__flow_lpm = flow_lpm

    @classmethod
    def from_dict(cls, event_dict):
        return cls(
            event_dict['kind'],
            event_dict.get('intensity', 'med'),
            event_dict['start_min'],
            event_dict['end_min'],
            event_dict.get('flow_lpm'),
            )

    def __repr__(self):
        return 'HotWaterEvent(%s, %s, %d, %d)' % (
            self.__kind.name.lower(),
            self.__intensity.name.lower(),
            self.__start_min,
            self.__end_min,
            )

    def kind(self):
        return self.__kind

    def intensity(self):
        return self.__intensity

    def start_min(self):
        return self.__start_min

    def end_min(self):
        return self.__end_min

    def duration_mins(self):
        return self.__end_min - self.__start_min

    def hot_flow_lpm(self):
        """ Return the hot water flow rate of the event, in litres / minute """
        if not self.__kind.is_thermal():
            return 0.0
        if self.__flow_lpm is not None:
            return self.__flow_lpm
        return DRAW_FLOW_LPM[self.__kind][self.__intensity]

    def cold_flow_lpm(self):
        """ Return the cold mains fill flow rate of the event, in litres / minute """
        if self.__kind.is_thermal():
            return 0.0
        if self.__flow_lpm is not None:
            return self.__flow_lpm
        return COLD_FILL_LPM.get(self.__kind, 0.0)

    def draw_kW(self, temp_cold=TEMP_COLD_WATER):
        """ Return the heat rate needed to meet the event, in kW """
        return water_flow_to_kW(self.hot_flow_lpm(), TEMP_HOT_WATER, temp_cold)

    def is_active(self, step_start_min, step_end_min):
        """ Return True if the event overlaps the timestep [step_start_min, step_end_min) """
        return self.__start_min < step_end_min and self.__end_min > step_start_min


def default_event_schedule():
    """ Return the fixed schedule used when no lifestyle information is given """
    return [
        HotWaterEvent(EventKind.SINK, Intensity.MED, 420, 435),
        HotWaterEvent(EventKind.BATH, Intensity.HIGH, 1140, 1170),
        HotWaterEvent(EventKind.DISHWASHER, Intensity.LOW, 1200, 1245),
        ]

def events_from_lifestyle(lifestyle):
    """ Build a deterministic event schedule from household lifestyle flags

    Arguments:
    lifestyle -- dictionary with the optional boolean keys:
                 morning_peak, evening_peak, has_bath, has_dishwasher,
                 has_washing_machine, two_bathrooms
    """
    has_bath = bool(lifestyle.get('has_bath', False))
    two_bathrooms = bool(lifestyle.get('two_bathrooms', False))
    has_dishwasher = bool(lifestyle.get('has_dishwasher', False))
    evening_peak = bool(lifestyle.get('evening_peak', False))

    events = []
    if lifestyle.get('morning_peak', False):
        if has_bath:
            events.append(HotWaterEvent(EventKind.BATH, Intensity.HIGH, 420, 450))
        else:
            events.append(HotWaterEvent(EventKind.SINK, Intensity.MED, 420, 435))
        if two_bathrooms:
            events.append(HotWaterEvent(EventKind.SINK, Intensity.MED, 425, 445))

    if evening_peak:
        if has_bath:
            events.append(HotWaterEvent(EventKind.BATH, Intensity.HIGH, 1140, 1170))
        else:
            events.append(HotWaterEvent(EventKind.SINK, Intensity.MED, 1140, 1155))
        if two_bathrooms:
            events.append(HotWaterEvent(EventKind.SINK, Intensity.MED, 1145, 1165))
        if has_dishwasher:
            events.append(HotWaterEvent(EventKind.DISHWASHER, Intensity.LOW, 1200, 1245))
    elif has_dishwasher:
        events.append(HotWaterEvent(EventKind.DISHWASHER, Intensity.LOW, 780, 825))

    if lifestyle.get('has_washing_machine', False):
        events.append(HotWaterEvent(EventKind.WASHING_MACHINE, Intensity.LOW, 540, 550))
        events.append(HotWaterEvent(EventKind.WASHING_MACHINE, Intensity.LOW, 595, 605))

    return events

def events_from_flow_profile(dhw_lpm, resolution_mins):
    """ Convert a painted hot water flow profile into shower events

    One event is created per contiguous run of slices with the same non-zero
    flow rate, carrying that flow rate.

    Arguments:
    dhw_lpm         -- hot water flow per slice, in litres / minute
    resolution_mins -- length of each slice, in minutes
    """
    events = []
    run_start = None
    run_flow = 0.0
    for idx, flow in enumerate(list(dhw_lpm) + [0.0]):
        if run_start is not None and flow != run_flow:
            events.append(HotWaterEvent(
                EventKind.SHOWER,
                Intensity.MED,
                run_start * resolution_mins,
                idx * resolution_mins,
                flow_lpm=run_flow,
                ))
            run_start = None
        if run_start is None and flow > 0.0:
            run_start = idx
            run_flow = flow
    return events

def active_draw_kW(events, step_start_min, step_end_min, supply_path,
                   temp_cold=TEMP_COLD_WATER):
    """ Return the total hot water heat rate demanded during a timestep, in kW

    Concurrent thermal draws are summed. Draws the supply path does not route
    through the heat source are excluded.
    """
    return sum(
        event.draw_kW(temp_cold)
        for event in events
        if supply_path.permits(event.kind()) and event.is_active(step_start_min, step_end_min)
        )

def cold_flow_series(events, total_steps, step_mins):
    """ Return the cold mains fill flow in each timestep, in litres / minute

    Each appliance fill occupies every timestep from the one containing its
    start to the one containing its end. Overlapping fills take the maximum.
    """
    series = [0.0] * total_steps
    for event in events:
        flow = event.cold_flow_lpm()
        if flow <= 0.0:
            continue
        first = int(math.floor(event.start_min() / step_mins))
        last = min(int(math.ceil(event.end_min() / step_mins)), total_steps)
        for idx in range(first, last):
            series[idx] = max(series[idx], flow)
    return series

def detect_purge_pulses(draws):
    """ Return a flag per timestep marking the first step of each draw

    A purge pulse is a step with a non-zero draw following a step with no
    draw (the step before the first is taken as no draw).
    """
    pulses = []
    previous = 0.0
    for draw in draws:
        pulses.append(draw > 0.0 and previous == 0.0)
        previous = draw
    return pulses
