"""
Test runner for hierarchy rendering BDD scenarios.

This file is the entry point for pytest-bdd to discover and run
the Gherkin scenarios from hierarchy_rendering.feature.

Run with:
    pytest tests/test_hierarchy_rendering.py -v
"""

from pytest_bdd import scenarios

# Import step definitions - this registers all steps
from step_defs.hierarchy_steps import *

scenarios("features/hierarchy_rendering.feature")
