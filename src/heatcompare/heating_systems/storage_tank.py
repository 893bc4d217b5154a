#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides an object to model a hot water cylinder as a single
store of usable energy.
"""

# Local imports
import heatcompare.units as units


class HotWaterCylinder:
    """ An object to represent a hot water storage cylinder

    The cylinder is modelled as a bounded energy store: draws remove energy
    (and any draw the store cannot cover is reported as unmet), and surplus
    heat source output recharges it up to its capacity. Standing losses are
    not modelled over a single day.
    """

    # Usable energy of a typical 150 litre cylinder, in kWh
    NOMINAL_CAPACITY = 5.0

    def __init__(self, capacity=NOMINAL_CAPACITY):
        """ Construct a HotWaterCylinder object, fully charged

        Arguments:
        capacity -- usable energy content when fully charged, in kWh
        """
        assert capacity > 0.0
        self.__capacity = capacity
        self.__energy_stored = capacity

    def capacity(self):
        return self.__capacity

    def energy_stored(self):
        return self.__energy_stored

    def headroom(self):
        """ Return the energy needed to fully recharge the cylinder, in kWh """
        return self.__capacity - self.__energy_stored

    def state_of_charge(self):
        """ Return the state of charge, in % """
        return self.__energy_stored / self.__capacity * 100.0

    def draw_energy(self, energy_demanded):
        """ Draw energy from the cylinder and return the energy it could not supply, in kWh """
        energy_supplied = min(energy_demanded, self.__energy_stored)
        self.__energy_stored = max(0.0, self.__energy_stored - energy_supplied)
        return energy_demanded - energy_supplied

    def charge_energy(self, energy_available):
        """ Charge the cylinder and return the energy it accepted, in kWh """
        energy_accepted = min(max(0.0, energy_available), self.headroom())
        self.__energy_stored = min(self.__capacity, self.__energy_stored + energy_accepted)
        return energy_accepted

    def draw_power(self, power_demanded, timestep):
        """ Draw a heat rate for one timestep and return the unmet heat rate, in kW

        Arguments:
        power_demanded -- hot water heat rate demanded, in kW
        timestep       -- length of the timestep, in hours
        """
        unmet_energy = self.draw_energy(units.kW_to_kWh(power_demanded, timestep))
        return units.kWh_to_kW(unmet_energy, timestep)
