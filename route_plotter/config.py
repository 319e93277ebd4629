#!/usr/bin/env python3

"""
Configuration for the route plotter.
"""

import os

# Plugin identity
PLUGIN_NAME = "Route plotter"
PLUGIN_VERSION = "0.4.1"
PLUGIN_AUTHORS = "Patrick Winters"
PLUGIN_LICENCE = "GNU GPLv3"
PLUGIN_WEBSITE = "https://github.com/19wintersp/route-plotter"

# Command line
COMMAND_PREFIX = os.getenv("ROUTE_PLOTTER_COMMAND_PREFIX", ".plot")
DEFAULT_SOURCE = "route"
HELP_COMMAND_WIDTH = 15  # len("clear [NAME]...")

# Route grammar
DIRECT_CONNECTOR = "DCT"
DEFAULT_HOLD_LENGTH_NM = float(os.getenv("ROUTE_PLOTTER_DEFAULT_HOLD_LENGTH", "4"))

# Logging
LOG_LEVEL = os.getenv("ROUTE_PLOTTER_LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
