"""
Behave environment configuration

This file is run before each scenario to reset the scenario state.
"""


def before_scenario(context, scenario):
    """Run before each scenario"""
    for name in ("document", "anchor", "result"):
        if hasattr(context, name):
            delattr(context, name)
