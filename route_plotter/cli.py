#!/usr/bin/env python3

import sys
import argparse
import json
import logging
from typing import List, Optional

from route_plotter.config import LOG_FORMAT, LOG_LEVEL
from route_plotter.models.navdata import NavDatabase
from route_plotter.plotter import RoutePlotter
from route_plotter.sources.tabular import TabularNavSource

logger = logging.getLogger(__name__)


class Command:
    """Command-line interface running `.plot` commands against CSV navigation data."""

    def __init__(self, args):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
        """
        self.args = args
        self.failed = False
        self.navdata = self.load_navdata()
        self.plotter = RoutePlotter(self.navdata, message_sink=self.show_message)

    def load_navdata(self) -> NavDatabase:
        if not self.args.navdata:
            logger.info("No navigation data directory given, only coordinates can be resolved")
            return NavDatabase()
        return TabularNavSource.load_directory(self.args.navdata).build()

    def show_message(self, sender: str, message: str, urgent: bool = False) -> None:
        prefix = f"{sender}: " if sender else ""
        print(f"{prefix}{message}", file=sys.stderr if urgent else sys.stdout)

    def run(self) -> int:
        for command in self.args.commands:
            logger.debug(f"Running {command!r}")
            if not self.plotter.handle_command(command):
                logger.error(f"Command failed or not handled: {command}")
                self.failed = True

        self.print_routes()
        return 1 if self.failed else 0

    def print_routes(self) -> None:
        if self.args.format == 'json':
            data = {name: route.to_dict() for name, route in self.plotter.store}
            print(json.dumps(data, indent=2))
            return

        for name, route in self.plotter.store:
            print(f"{name}: {len(route)} nodes, {len(route.polylines())} polylines, {route.distance_nm():.1f} nm")
            for node in route:
                if node.is_discontinuity():
                    print("  --")
                    continue
                lat, lon = node.position.to_dms()
                print(f"  {lat} {lon}  {node}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Resolve route plotter commands against navigation data')
    parser.add_argument('commands', help='Plot commands, e.g. ".plot EGLL/27L DCT EGKK"', nargs='+')
    parser.add_argument('-n', '--navdata', help='Directory with points/runways/airways/procedures CSV files')
    parser.add_argument('--format', help='Output format', choices=['json', 'human'], default='human')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT
    )

    return Command(args).run()


if __name__ == '__main__':
    sys.exit(main())
