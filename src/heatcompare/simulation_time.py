#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains object(s) to track and control information on the
simulation timestep.
"""

# Standard library imports
import math

# Local imports
import heatcompare.units as units


class SimulationTime:
    """ An iterator object to track properties relating to the simulation timestep

    This object is a "single source of truth" for information on timesteps, and it controls
    incrementing the timestep. It can be queried by other objects that have references to it.
    Time zero is taken to be midnight at the start of the simulated day.
    """

    def __init__(self, starttime, endtime, step):
        """ Construct a SimulationTime object

        Arguments:
        starttime -- The start time of the simulation, in hours from midnight
        endtime   -- The end time of the simulation, in hours from midnight
        step      -- The time increment for each step of the calculation, in hours

        Other variables:
        current   -- The current simulation time, in hours from midnight
        total     -- Number of timesteps in simulation
        idx       -- Number of timesteps already run (i.e. zero-based ordinal
                     enumeration of current timestep)
        first     -- True if there have been no iterations yet, False otherwise
        """
        self.__step    = step
        self.__start   = starttime
        self.__end     = endtime
        self.__current = starttime

        self.__total   = math.ceil((endtime - starttime) / step)
        self.__idx     = 0

        self.__first   = True

    def __iter__(self):
        """ Return a reference to this object when an iterator is required """
        return self

    def __next__(self):
        """ Increment simulation timestep """
        if self.__first:
            self.__first = False
        else:
            # Recalculate from the index rather than accumulating, so that
            # fractional steps do not drift
            self.__idx     = self.__idx + 1
            self.__current = self.__start + self.__idx * self.__step

        if self.__idx >= self.__total:
            raise StopIteration

        return self.__idx, self.__current, self.timestep()

    def hour_of_day(self):
        """ Return hour of day (00:00-01:00 is hour zero) """
        time_of_day = self.__current % units.hours_per_day
        return int(math.floor(time_of_day))

    def minute_of_day(self):
        """ Return the start of the current timestep in minutes since midnight """
        time_of_day = self.__current % units.hours_per_day
        return int(round(time_of_day * units.minutes_per_hour))

    def total_steps(self):
        """ Return the total number of timesteps in simulation """
        return self.__total

    def timestep(self):
        """ Return the length of the current timestep, in hours """
        return self.__step

    def time_axis_minutes(self):
        """ Return the start minute of every timestep in the simulation """
        return [
            int(round((self.__start + idx * self.__step) * units.minutes_per_hour))
            for idx in range(self.__total)
            ]
