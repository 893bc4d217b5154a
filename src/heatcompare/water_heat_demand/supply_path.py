#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the hot water delivery modes of a dwelling and the
supply path they imply, i.e. which hot water draws the heat source must meet.
"""

# Standard library imports
import logging
import sys
from enum import Enum, auto

logger = logging.getLogger(__name__)


class DeliveryMode(Enum):
    UNKNOWN = auto()
    GRAVITY = auto()
    PUMPED_FROM_TANK = auto()
    MAINS_MIXER = auto()
    ACCUMULATOR_SUPPORTED = auto()
    BREAK_TANK_BOOSTER = auto()
    ELECTRIC_COLD_ONLY = auto()

    @classmethod
    def from_string(cls, strval):
        """ Normalise a delivery mode string, including legacy aliases

        Unrecognised values are treated as unknown rather than rejected, as
        the delivery mode is often not surveyed.
        """
        if strval is None:
            return cls.UNKNOWN
        key = str(strval).strip().lower()
        if key in ('unknown', ''):
            return cls.UNKNOWN
        elif key == 'gravity':
            return cls.GRAVITY
        elif key in ('pumped_from_tank', 'pumped', 'tank_pumped'):
            return cls.PUMPED_FROM_TANK
        elif key in ('mains_mixer', 'mixer_pump'):
            return cls.MAINS_MIXER
        elif key == 'accumulator_supported':
            return cls.ACCUMULATOR_SUPPORTED
        elif key == 'break_tank_booster':
            return cls.BREAK_TANK_BOOSTER
        elif key in ('electric_cold_only', 'electric', 'electric_shower'):
            return cls.ELECTRIC_COLD_ONLY
        else:
            logger.warning("Delivery mode (%s) not recognised, treating as unknown", strval)
            return cls.UNKNOWN


class SupplyPath(Enum):
    FULL = auto()
    MIXED = auto()
    COLD_ONLY = auto()

    @classmethod
    def from_string(cls, strval):
        if strval == 'full':
            return cls.FULL
        elif strval == 'mixed':
            return cls.MIXED
        elif strval == 'cold_only':
            return cls.COLD_ONLY
        else:
            sys.exit('SupplyPath (' + str(strval) + ') not valid.')

    @classmethod
    def for_delivery_mode(cls, delivery_mode, cold_only=False):
        """ Return the supply path implied by a delivery mode

        Arguments:
        delivery_mode -- DeliveryMode (or string to be normalised)
        cold_only     -- True if the outlets are explicitly served by cold mains only
        """
        if cold_only:
            return cls.COLD_ONLY
        if not isinstance(delivery_mode, DeliveryMode):
            delivery_mode = DeliveryMode.from_string(delivery_mode)
        if delivery_mode == DeliveryMode.ELECTRIC_COLD_ONLY:
            # Electric shower heats its own water; baths and sinks still draw
            return cls.MIXED
        return cls.FULL

    def permits(self, event_kind):
        """ Return True if a hot water event of this kind is met by the heat source """
        if not event_kind.is_thermal():
            return False
        if self == SupplyPath.COLD_ONLY:
            return False
        if self == SupplyPath.MIXED:
            return not event_kind.is_shower()
        return True
