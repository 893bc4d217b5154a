#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides a single-node (lumped RC) thermal model of a dwelling.

The heat transfer coefficient is derived from the design heat loss at the
design temperature difference, and the thermal capacitance from the time
constant, so that only two figures about the building are needed.
"""

# Standard library imports
import logging

logger = logging.getLogger(__name__)


class BuildingThermalParameters:
    """ An object to represent the thermal parameters of a whole dwelling """

    # Temperature difference at which the design heat loss applies, in K
    DELTA_T_DESIGN = 16.0
    DEFAULT_TAU_HOURS = 35.0
    DEFAULT_TEMP_OUTDOOR = 5.0
    DEFAULT_SETPOINT_HOME = 21.0
    DEFAULT_SETPOINT_AWAY = 17.0

    def __init__(
            self,
            peak_heat_loss,
            tau_hours=DEFAULT_TAU_HOURS,
            temp_outdoor=DEFAULT_TEMP_OUTDOOR,
            setpoint_home=DEFAULT_SETPOINT_HOME,
            setpoint_away=DEFAULT_SETPOINT_AWAY,
            ):
        """ Construct a BuildingThermalParameters object

        Arguments:
        peak_heat_loss -- design heat loss of the dwelling, in kW (None if unknown)
        tau_hours      -- thermal time constant of the dwelling, in hours
        temp_outdoor   -- outdoor air temperature for the design day, in deg C
        setpoint_home  -- room setpoint while occupied, in deg C
        setpoint_away  -- room setpoint while unoccupied / asleep, in deg C
        """
        self.__peak_heat_loss = peak_heat_loss
        self.__tau_hours = tau_hours
        self.__temp_outdoor = temp_outdoor
        self.__setpoint_home = setpoint_home
        self.__setpoint_away = setpoint_away

    @classmethod
    def from_dict(cls, building_dict):
        """ Construct from a project input dictionary, returning any assumptions made

        Returns a tuple of the object and a list of disclosure strings.
        """
        disclosures = []
        tau_hours = building_dict.get('tau_hours')
        tau_source = building_dict.get('tau_source')
        if tau_hours is None:
            tau_hours = cls.DEFAULT_TAU_HOURS
            tau_source = 'default'
            logger.info("Time constant not given, using default of %s hours", cls.DEFAULT_TAU_HOURS)
        if tau_source == 'default':
            disclosures.append(
                'Building time constant not measured: assumed '
                + str(cls.DEFAULT_TAU_HOURS) + ' h (typical masonry dwelling)'
                )
        elif tau_source == 'slider':
            disclosures.append(
                'Building time constant (' + str(tau_hours) + ' h) estimated from construction type'
                )

        temp_outdoor = building_dict.get('outdoor_temp_C')
        if temp_outdoor is None:
            temp_outdoor = cls.DEFAULT_TEMP_OUTDOOR
            logger.info("Outdoor temperature not given, using default of %s deg C", temp_outdoor)
            disclosures.append(
                'Outdoor temperature not given: assumed '
                + str(cls.DEFAULT_TEMP_OUTDOOR) + ' deg C design day'
                )

        building = cls(
            building_dict.get('peak_heat_loss_kW'),
            tau_hours,
            temp_outdoor,
            building_dict.get('setpoint_home_C', cls.DEFAULT_SETPOINT_HOME),
            building_dict.get('setpoint_away_C', cls.DEFAULT_SETPOINT_AWAY),
            )
        return building, disclosures

    def peak_heat_loss(self):
        return self.__peak_heat_loss

    def tau_hours(self):
        return self.__tau_hours

    def temp_outdoor(self):
        return self.__temp_outdoor

    def setpoint_home(self):
        return self.__setpoint_home

    def setpoint_away(self):
        return self.__setpoint_away

    def can_simulate(self):
        """ Return True if both the heat loss and time constant are usable """
        return self.__peak_heat_loss is not None and self.__peak_heat_loss > 0.0 \
            and self.__tau_hours is not None and self.__tau_hours > 0.0

    def heat_transfer_coeff(self):
        """ Return the whole-dwelling heat transfer coefficient, in kW / K """
        return self.__peak_heat_loss / self.DELTA_T_DESIGN

    def thermal_capacitance(self):
        """ Return the thermal capacitance of the dwelling, in kWh / K """
        return self.heat_transfer_coeff() * self.__tau_hours

    def heat_loss(self, temp_room):
        """ Return the rate of heat loss at the given room temperature, in kW """
        return self.heat_transfer_coeff() * (temp_room - self.__temp_outdoor)

    def temp_room_next(self, temp_room, space_heat_delivered, timestep):
        """ Return the room temperature at the end of a timestep, in deg C

        The building never cools below the outdoor temperature.

        Arguments:
        temp_room            -- room temperature at the start of the timestep, in deg C
        space_heat_delivered -- heat delivered to the room during the timestep, in kW
        timestep             -- length of the timestep, in hours
        """
        net_heat = space_heat_delivered - self.heat_loss(temp_room)
        temp_next = temp_room + net_heat * timestep / self.thermal_capacitance()
        return max(self.__temp_outdoor, temp_next)
