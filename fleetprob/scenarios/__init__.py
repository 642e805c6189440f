from .builtins import builtin_scenarios, contradictory_corner, open_water, worked_example
from .definition import Scenario
from .loader import load_scenario, scenario_from_dict
from .validation import validate_scenario

__all__ = [
    "Scenario",
    "worked_example",
    "open_water",
    "contradictory_corner",
    "builtin_scenarios",
    "scenario_from_dict",
    "load_scenario",
    "validate_scenario",
]
