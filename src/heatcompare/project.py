#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the high-level control flow for a comparison, and
initialises the relevant objects from the project input data.
"""

# Standard library imports
import logging

# Local imports
from heatcompare.heating_systems.boiler_efficiency import BoilerEfficiencyModel
from heatcompare.heating_systems.heat_source import build_system_config
from heatcompare.scenario.scenario_physics import apply_scenario_overrides
from heatcompare.space_heat_demand.building import BuildingThermalParameters
from heatcompare.space_heat_demand.demand_profile import \
    OccupancySignature, ScenarioProfile, default_scenario_profile, \
    expand_profile, space_heat_demand_series
from heatcompare.timeline.comparison import compare_systems
from heatcompare.timeline.demand_timeline import STEP_MINS, build_demand_timeline
from heatcompare.water_heat_demand.hot_water_events import \
    HotWaterEvent, default_event_schedule, events_from_flow_profile, events_from_lifestyle
from heatcompare.water_heat_demand.supply_path import SupplyPath

logger = logging.getLogger(__name__)


class Project:
    """ An object to represent the comparison of two heating systems in one dwelling """

    def __init__(self, proj_dict):
        """ Construct a Project object and the various components of the comparison

        Arguments:
        proj_dict -- dictionary of project data, containing nested dictionaries
                     of input data for the building, occupancy, hot water use,
                     the existing boiler and the two systems to compare

        Other (self.__) variables:
        building    -- BuildingThermalParameters object for this Project
        profile     -- ScenarioProfile object if one was painted (or defaulted), else None
        demand      -- DemandTimeline object shared by both systems
        configs     -- dictionary of HeatSourceConfig objects with 'A' and 'B' as keys
        eff_series  -- dictionary of boiler efficiency series (or None) with 'A' and 'B' as keys
        disclosures -- list of assumptions made in interpreting the input
        boiler_notes -- list of notes on the existing boiler's degraded efficiency
        """
        self.__disclosures = []

        self.__building, building_disclosures \
            = BuildingThermalParameters.from_dict(proj_dict['Building'])
        self.__disclosures.extend(building_disclosures)
        peak_heat_loss = self.__building.peak_heat_loss()
        if peak_heat_loss is None or peak_heat_loss <= 0.0:
            self.__disclosures.append('Heat loss not known: 24 hour comparison not simulated')

        hot_water_dict = proj_dict.get('HotWater', {})
        occupancy_dict = proj_dict.get('Occupancy', {})

        # Space heating demand profile
        self.__profile = None
        if 'ScenarioProfile' in occupancy_dict:
            self.__profile = ScenarioProfile.from_dict(occupancy_dict['ScenarioProfile'])
            hourly_fractions = self.__profile.hourly_heat_fractions()
        elif 'signature' in occupancy_dict:
            hourly_fractions \
                = OccupancySignature.from_string(occupancy_dict['signature']).hourly_fractions()
        else:
            self.__profile = default_scenario_profile(hot_water_dict.get('bathroom_count', 1))
            hourly_fractions = self.__profile.hourly_heat_fractions()
            self.__disclosures.append(
                'Occupancy pattern not given: assumed comfort heating mornings and evenings'
                )

        space_heat_demand = None
        if peak_heat_loss is not None and peak_heat_loss > 0.0:
            space_heat_demand = space_heat_demand_series(peak_heat_loss, hourly_fractions, STEP_MINS)

        # Hot water events
        if 'events' in hot_water_dict:
            events = [HotWaterEvent.from_dict(data) for data in hot_water_dict['events']]
        elif 'lifestyle' in hot_water_dict:
            events = events_from_lifestyle(hot_water_dict['lifestyle'])
        elif self.__profile is not None and any(lpm > 0.0 for lpm in self.__profile.dhw_lpm()):
            events = events_from_flow_profile(
                self.__profile.dhw_lpm(),
                self.__profile.resolution_mins(),
                )
        else:
            events = default_event_schedule()
            self.__disclosures.append(
                'Hot water use not given: assumed a morning sink draw, '
                'an evening bath and an evening dishwasher cycle'
                )

        supply_path = SupplyPath.for_delivery_mode(
            hot_water_dict.get('delivery_mode'),
            hot_water_dict.get('cold_only', False),
            )
        if supply_path != SupplyPath.FULL:
            self.__disclosures.append(
                'Hot water supply path ' + supply_path.name.lower()
                + ': some draws are not met by the heating system'
                )

        cold_flow_extra = None
        if self.__profile is not None:
            cold_flow_extra = expand_profile(
                self.__profile.cold_lpm(),
                self.__profile.resolution_mins(),
                STEP_MINS,
                )

        self.__demand = build_demand_timeline(
            events,
            supply_path,
            space_heat_demand,
            cold_flow_extra,
            STEP_MINS,
            )
        logger.debug("Project demand built from %d hot water events", len(events))

        # Existing boiler degradation, applied to the 'current' system only
        boiler_model = None
        self.__boiler_notes = []
        if 'Boiler' in proj_dict:
            boiler_dict = proj_dict['Boiler']
            boiler_model = BoilerEfficiencyModel(
                boiler_dict.get('nominal_efficiency_pct'),
                boiler_dict.get('age_years'),
                boiler_dict.get('rated_output_kW'),
                peak_heat_loss,
                )
            self.__disclosures.extend(boiler_model.disclosures())
            self.__boiler_notes = boiler_model.notes()
            logger.debug("Existing boiler: %s", '; '.join(self.__boiler_notes))

        self.__configs = {}
        self.__eff_series = {}
        for name in ('A', 'B'):
            data = proj_dict['Systems'][name]
            config = build_system_config(
                data['system_id'],
                peak_heat_loss,
                data.get('max_kW'),
                data.get('min_kW'),
                data.get('base_efficiency'),
                data.get('design_flow_temp_band'),
                data.get('current_heat_source_type'),
                )
            self.__configs[name] = config
            self.__eff_series[name] = None
            if boiler_model is not None and data['system_id'] == 'current' \
                    and not config.system_type().is_heat_pump():
                self.__eff_series[name] = boiler_model.efficiency_series(
                    space_heat_demand if space_heat_demand is not None
                    else [0.0] * self.__demand.total_steps()
                    )

        self.__spf_midpoint = proj_dict['Systems'].get('spf_midpoint', 3.0)

    def building(self):
        return self.__building

    def demand(self):
        return self.__demand

    def config(self, name):
        return self.__configs[name]

    def disclosures(self):
        return list(self.__disclosures)

    def boiler_notes(self):
        """ Return how the existing boiler's efficiency was arrived at (empty if not given) """
        return list(self.__boiler_notes)

    def run(self):
        """ Run the comparison and return a ComparisonResult object """
        return compare_systems(
            self.__building,
            self.__configs['A'],
            self.__configs['B'],
            self.__demand,
            self.__eff_series['A'],
            self.__eff_series['B'],
            self.__disclosures,
            )

    def scenario_hours(self):
        """ Return the hourly service of the painted profile by both systems, or None """
        if self.__profile is None or not self.__building.can_simulate():
            return None
        return apply_scenario_overrides(
            self.__building.peak_heat_loss(),
            self.__profile,
            self.__configs['A'].system_type(),
            self.__configs['B'].system_type(),
            self.__spf_midpoint,
            )
