#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides a model of in-use boiler efficiency, degraded from its
nominal (seasonal) efficiency by age, by oversizing relative to the dwelling's
heat loss and by cycling at low load.
"""

# Standard library imports
import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)

DEFAULT_NOMINAL_EFFICIENCY_PCT = 92.0
NOMINAL_EFFICIENCY_PCT_MIN = 50.0
NOMINAL_EFFICIENCY_PCT_MAX = 99.0
DEFAULT_RATED_OUTPUT = 24.0

EFFICIENCY_MIN = 0.55
EFFICIENCY_MAX = 0.95

# Loads below this fraction of rated output are treated as low-load (cycling)
LOW_LOAD_THRESHOLD_FRAC = 0.2
CYCLING_COEFF = 0.15
LOW_LOAD_STEP_PENALTY = 0.03
COMBINED_PENALTY_CAP = 0.12

AGE_YEARS_MAX_REALISTIC = 100


def clamp_efficiency(efficiency):
    return min(EFFICIENCY_MAX, max(EFFICIENCY_MIN, efficiency))

def is_realistic_age(age_years):
    return age_years is not None and 0 <= age_years <= AGE_YEARS_MAX_REALISTIC

def age_factor(age_years):
    """ Return the multiplier applied to nominal efficiency for boiler age

    Arguments:
    age_years -- age of the boiler, in years (None if unknown)
    """
    if not is_realistic_age(age_years):
        return 1.0
    if age_years <= 5:
        return 1.00
    if age_years <= 10:
        return 0.98
    if age_years <= 15:
        return 0.95
    if age_years <= 20:
        return 0.92
    return 0.88


class OversizeBand(Enum):
    WELL_MATCHED = auto()
    MILD = auto()
    OVERSIZED = auto()
    AGGRESSIVE = auto()

    @classmethod
    def from_ratio(cls, ratio):
        """ Return the band for a ratio of rated output to design heat loss """
        if ratio <= 1.3:
            return cls.WELL_MATCHED
        elif ratio <= 1.8:
            return cls.MILD
        elif ratio <= 2.5:
            return cls.OVERSIZED
        else:
            return cls.AGGRESSIVE

    def penalty(self):
        if self == OversizeBand.WELL_MATCHED:
            return 0.0
        elif self == OversizeBand.MILD:
            return 0.03
        elif self == OversizeBand.OVERSIZED:
            return 0.06
        else:
            return 0.09


def oversize_ratio(rated_output, peak_heat_loss):
    """ Return rated output / design heat loss, or None if heat loss is unknown """
    if peak_heat_loss is None or peak_heat_loss <= 0.0 or rated_output is None:
        return None
    return rated_output / peak_heat_loss

def is_low_load(demand, rated_output):
    return 0.0 < demand < LOW_LOAD_THRESHOLD_FRAC * rated_output

def low_load_fraction(demand_series, rated_output):
    """ Return the fraction of timesteps with a non-zero demand below the low-load threshold """
    if len(demand_series) == 0:
        return 0.0
    count = sum(1 for demand in demand_series if is_low_load(demand, rated_output))
    return count / len(demand_series)

def combined_penalty(oversize_penalty, low_load_frac):
    return min(COMBINED_PENALTY_CAP, oversize_penalty + low_load_frac * CYCLING_COEFF)

def nominal_efficiency(nominal_efficiency_pct):
    """ Return nominal efficiency as a fraction, and whether the fallback was used """
    if nominal_efficiency_pct is None:
        return DEFAULT_NOMINAL_EFFICIENCY_PCT / 100.0, True
    pct = min(NOMINAL_EFFICIENCY_PCT_MAX, max(NOMINAL_EFFICIENCY_PCT_MIN, nominal_efficiency_pct))
    return pct / 100.0, False


class BoilerEfficiencyModel:
    """ An object to represent the degraded efficiency of an existing boiler """

    def __init__(
            self,
            nominal_efficiency_pct=None,
            age_years=None,
            rated_output=None,
            peak_heat_loss=None,
            ):
        """ Construct a BoilerEfficiencyModel object

        Arguments:
        nominal_efficiency_pct -- nominal (e.g. SEDBUK) efficiency, in % (None if unknown)
        age_years              -- age of the boiler, in years (None if unknown)
        rated_output           -- rated output of the boiler, in kW (None if unknown)
        peak_heat_loss         -- design heat loss of the dwelling, in kW (None if unknown)
        """
        self.__notes = []
        self.__disclosures = []

        self.__nominal, used_fallback = nominal_efficiency(nominal_efficiency_pct)
        if used_fallback:
            self.__disclosures.append(
                'Boiler nominal efficiency not known: assumed '
                + str(DEFAULT_NOMINAL_EFFICIENCY_PCT) + '%'
                )
            self.__notes.append('Baseline efficiency: default')
        else:
            self.__notes.append('Baseline efficiency: ' + str(round(self.__nominal * 100, 1)) + '%')

        if age_years is not None and not is_realistic_age(age_years):
            logger.warning("Boiler age (%s years) is not realistic, ignoring it", age_years)
            self.__disclosures.append(
                'Boiler age (' + str(age_years) + ' years) is not realistic and was ignored'
                )
            age_years = None
        self.__age_factor = age_factor(age_years)
        if age_years is not None:
            self.__notes.append(
                'Age factor ' + str(self.__age_factor) + ' applied for '
                + str(age_years) + ' years'
                )

        if rated_output is None:
            rated_output = DEFAULT_RATED_OUTPUT
            self.__notes.append('Rated output assumed ' + str(DEFAULT_RATED_OUTPUT) + ' kW')
        self.__rated_output = rated_output

        ratio = oversize_ratio(rated_output, peak_heat_loss)
        if ratio is None:
            self.__oversize_band = None
            self.__disclosures.append('Heat loss unknown: oversizing penalty not applied')
        else:
            self.__oversize_band = OversizeBand.from_ratio(ratio)
            self.__notes.append(
                'Oversize ratio ' + str(round(ratio, 2)) + ' ('
                + self.__oversize_band.name.lower() + ')'
                )

    def nominal(self):
        return self.__nominal

    def age_factor(self):
        return self.__age_factor

    def rated_output(self):
        return self.__rated_output

    def oversize_band(self):
        return self.__oversize_band

    def oversize_penalty(self):
        if self.__oversize_band is None:
            return 0.0
        return self.__oversize_band.penalty()

    def notes(self):
        return list(self.__notes)

    def disclosures(self):
        return list(self.__disclosures)

    def base_efficiency(self, demand_series):
        """ Return the efficiency before per-timestep cycling losses, unclamped """
        penalty = combined_penalty(
            self.oversize_penalty(),
            low_load_fraction(demand_series, self.__rated_output),
            )
        return self.__nominal * self.__age_factor * (1.0 - penalty)

    def efficiency_series(self, demand_series):
        """ Return the efficiency at each timestep for the given demand, as a fraction

        Arguments:
        demand_series -- heat demand at each timestep, in kW
        """
        base = self.base_efficiency(demand_series)
        series = []
        for demand in demand_series:
            efficiency = base
            if is_low_load(demand, self.__rated_output):
                efficiency -= LOW_LOAD_STEP_PENALTY
            series.append(clamp_efficiency(efficiency))
        logger.debug(
            "Boiler efficiency series: base %.3f, mean %.3f",
            base,
            sum(series) / len(series) if series else base,
            )
        return series
