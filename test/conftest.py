""" Make the unit_tests package importable when the tests are collected by pytest """

# Standard library imports
import os
import sys

test_path = os.path.dirname(os.path.abspath(__file__))
if test_path not in sys.path:
    sys.path.insert(0, test_path)
