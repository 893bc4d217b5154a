#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the base class for dispatch strategies, which decide how
a heating system shares its output between space heating and hot water in
each timestep.
"""


class DispatchStrategy:
    """ A base class for objects representing the control of a heating system.

    A new object is created for each simulation run, so any state it holds
    (e.g. hot water stored in a cylinder) starts afresh.

    Subclasses must implement the following functions:
    - efficiency(self, idx, hour, heat_delivered)
    - dispatch(self, space_heat_required, dhw_required)
      returning a tuple of (heat_delivered, space_heat_delivered, dhw_state, dhw_shortfall)
    """

    def __init__(self, config, timestep):
        """ Construct a DispatchStrategy object

        Arguments:
        config   -- reference to HeatSourceConfig object
        timestep -- length of each timestep, in hours
        """
        self._config = config
        self._timestep = timestep

    def config(self):
        return self._config

    def input_power(self, heat_delivered, efficiency):
        """ Return the fuel or electricity input needed for the heat delivered, in kW """
        if efficiency <= 0.0:
            return 0.0
        return heat_delivered / efficiency
