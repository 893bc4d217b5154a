#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides objects to model time controls.
"""

# Local imports
import heatcompare.units as units


class OccupancySetpointControl:
    """ An object to model a two-level room thermostat driven by an occupancy window

    The "home" setpoint applies from the start of the window (inclusive) to
    the end of the window (exclusive); the "away" setpoint applies otherwise.
    """

    def __init__(
            self,
            simulation_time,
            setpoint_home=21.0,
            setpoint_away=17.0,
            home_start_hour=6,
            home_end_hour=23,
            ):
        """ Construct an OccupancySetpointControl object

        Arguments:
        simulation_time -- reference to SimulationTime object
        setpoint_home   -- room temperature setpoint while occupied, in deg C
        setpoint_away   -- room temperature setpoint while unoccupied / asleep, in deg C
        home_start_hour -- hour of day at which the home setpoint starts
        home_end_hour   -- hour of day at which the home setpoint ends
        """
        self.__simulation_time = simulation_time
        self.__setpoint_home = setpoint_home
        self.__setpoint_away = setpoint_away
        self.__home_start_mins = home_start_hour * units.minutes_per_hour
        self.__home_end_mins = home_end_hour * units.minutes_per_hour

    def is_home(self, minute_of_day=None):
        if minute_of_day is None:
            minute_of_day = self.__simulation_time.minute_of_day()
        return self.__home_start_mins <= minute_of_day < self.__home_end_mins

    def setpnt(self, minute_of_day=None):
        """ Return the setpoint in force for the current timestep (or given minute) """
        if self.is_home(minute_of_day):
            return self.__setpoint_home
        return self.__setpoint_away

    def initial_setpnt(self):
        """ Return the setpoint in force at the start of the simulation """
        return self.setpnt(self.__simulation_time.time_axis_minutes()[0])
