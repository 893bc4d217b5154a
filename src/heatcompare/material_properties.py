#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains data on the properties of materials used to carry heat.
"""

# Local imports
import heatcompare.units as units


class MaterialProperties:
    """ An object to store material properties """

    def __init__(self, density, specific_heat_capacity):
        """ Construct a MaterialProperties object

        Arguments:
        density                -- density of the material, in kg / litre
        specific_heat_capacity -- specific heat capacity of the material, in J / (kg.K)
        """
        self.__density = density
        self.__specific_heat_capacity = specific_heat_capacity

    def density(self):
        """ Return density, in kg / litre """
        return self.__density

    def specific_heat_capacity(self):
        """ Return specific heat capacity, in J / (kg.K) """
        return self.__specific_heat_capacity

    def volumetric_heat_capacity(self):
        """ Return volumetric heat capacity, in J / (litre.K) """
        return self.__density * self.__specific_heat_capacity

    def volumetric_power_kW_per_lpm(self, temp_freshwater, temp_cold):
        """ Return heating power per litre/minute of flow heated from temp_cold, in kW """
        return self.volumetric_heat_capacity() * (temp_freshwater - temp_cold) \
            / units.seconds_per_minute / units.W_per_kW


WATER = MaterialProperties(1.0, 4186)
