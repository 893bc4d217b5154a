#!/usr/bin/env python3

""" TODO Copyright & licensing notices

This module contains common set-up for the unit tests
"""

# Standard library imports
import os
import sys

def test_setup():
    """ Add the source directory to the path so that modules under test can be imported """
    src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', 'src'))
    if src_path not in sys.path:
        sys.path.insert(0, src_path)
