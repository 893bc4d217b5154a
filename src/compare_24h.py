#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module provides the entry point to the program and defines the command-line interface.
"""

# Standard library imports
import sys
import json
import csv
import os
import argparse
import logging

# Local imports
from heatcompare.project import Project
from heatcompare.timeline.solver_24h import SystemTimeline


SERIES_UNITS = {
    'temp_room': '[deg C]',
    'heat_delivered': '[kW]',
    'space_heat_required': '[kW]',
    'space_heat_delivered': '[kW]',
    'efficiency': '[ratio]',
    'input_power': '[kW]',
    'dhw_state': '[%]',
    'dhw_shortfall': '[kW]',
    }

def run_project(inp_filename):
    file_path = os.path.splitext(inp_filename)
    output_file = file_path[0] + '_results.csv'
    output_file_summary = file_path[0] + '_results_summary.csv'
    output_file_scenario = file_path[0] + '_results_scenario.csv'

    with open(inp_filename) as json_file:
        project_dict = json.load(json_file)

    project = Project(project_dict)
    comparison = project.run()

    write_core_output_file(output_file, project.demand(), comparison)
    write_core_output_file_summary(output_file_summary, comparison, project.boiler_notes())

    scenario_hours = project.scenario_hours()
    if scenario_hours is not None:
        write_scenario_output_file(output_file_scenario, scenario_hours)

    for disclosure in comparison.disclosures():
        print('Note: ' + disclosure)

def write_core_output_file(output_file, demand, comparison):
    # Note: need to specify newline='' below, otherwise an extra carriage return
    # character is written when running on Windows
    with open(output_file, 'w', newline='') as f:
        writer = csv.writer(f)
        results = (comparison.result_a(), comparison.result_b())

        headings = ['Timestep', 'Time', 'Space heat demand', 'Hot water demand', 'Cold mains flow']
        units_row = ['[count]', '[mins]', '[kW]', '[kW]', '[litres / min]']
        for result in results:
            if not result.simulated():
                continue
            for name in SystemTimeline.SERIES_NAMES:
                headings.append(result.label() + ' ' + name.replace('_', ' '))
                units_row.append(SERIES_UNITS[name])

        writer.writerow(headings)
        writer.writerow(units_row)

        space_heat_demand = demand.space_heat_demand()
        for t_idx, minutes in enumerate(demand.time_minutes()):
            row = [
                t_idx,
                minutes,
                '' if space_heat_demand is None else space_heat_demand[t_idx],
                demand.dhw_demand()[t_idx],
                demand.cold_flow()[t_idx],
                ]
            for result in results:
                if not result.simulated():
                    continue
                for name in SystemTimeline.SERIES_NAMES:
                    row.append(result.series(name)[t_idx])
            writer.writerow(row)

def write_core_output_file_summary(output_file_summary, comparison, boiler_notes=()):
    # Note: need to specify newline='' below, otherwise an extra carriage return
    # character is written when running on Windows
    with open(output_file_summary, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['', '', 'A', 'B'])
        result_a = comparison.result_a()
        result_b = comparison.result_b()
        writer.writerow(['System', '', result_a.label(), result_b.label()])
        writer.writerow(['Simulated', '', result_a.simulated(), result_b.simulated()])
        writer.writerow(['Heat delivered', 'kWh',
                         result_a.total_heat_delivered(), result_b.total_heat_delivered()])
        writer.writerow(['Fuel / electricity input', 'kWh',
                         result_a.total_input_energy(), result_b.total_input_energy()])
        writer.writerow(['Hot water shortfall', 'kWh',
                         result_a.total_dhw_shortfall(), result_b.total_dhw_shortfall()])
        writer.writerow(['Minimum room temperature', 'deg C',
                         result_a.min_temp_room(), result_b.min_temp_room()])
        for note in boiler_notes:
            writer.writerow(['Existing boiler', '', note])
        for disclosure in comparison.disclosures():
            writer.writerow(['Note', '', disclosure])

def write_scenario_output_file(output_file_scenario, scenario_hours):
    with open(output_file_scenario, 'w', newline='') as f:
        writer = csv.writer(f)
        headings = ['Hour', 'CH demand', 'DHW demand', 'Cold flow', 'Purge']
        units_row = ['', '[kW]', '[kW]', '[litres / min]', '']
        for system in ('A', 'B'):
            headings += [
                system + ' to CH', system + ' to DHW',
                system + ' efficiency or COP', system + ' dumped',
                ]
            units_row += ['[kW]', '[kW]', '[ratio]', '[kW]']
        writer.writerow(headings)
        writer.writerow(units_row)
        for record in scenario_hours:
            row = [
                record['hour'],
                record['ch_demand_kW'],
                record['dhw_demand_kW'],
                record['cold_lpm'],
                record['purge'],
                ]
            for system in ('A', 'B'):
                row += [
                    record[system]['q_to_ch_kW'],
                    record[system]['q_to_dhw_kW'],
                    record[system]['eta_or_cop'],
                    record[system]['q_dump_kW'],
                    ]
            writer.writerow(row)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='24 hour heating system comparison')
    parser.add_argument(
        'input_file',
        nargs='+',
        help=('path(s) to file(s) containing comparison inputs to run'),
        )
    parser.add_argument(
        '--parallel', '-p',
        action='store',
        type=int,
        default=0,
        help=('run calculations for different input files in parallel'
              '(specify no of files to run simultaneously)'),
        )
    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='log assumptions (-v) or per-run detail (-vv)',
        )
    cli_args = parser.parse_args()

    if cli_args.verbose >= 2:
        log_level = logging.DEBUG
    elif cli_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
        stream=sys.stderr,
        )

    inp_filenames = cli_args.input_file

    if cli_args.parallel == 0:
        print('Running '+str(len(inp_filenames))+' cases in series')
        for inpfile in inp_filenames:
            run_project(inpfile)
    else:
        import multiprocessing as mp
        print('Running '+str(len(inp_filenames))+' cases in parallel'
              ' ('+str(cli_args.parallel)+' at a time)')
        with mp.Pool(processes=cli_args.parallel) as p:
            p.map(run_project, inp_filenames)
