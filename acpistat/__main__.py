"""acpistat entry point: python -m acpistat"""

import argparse
import logging
from pathlib import Path

from acpistat.cli import run_command
from acpistat.config import LoggingConfig, load_config

log = logging.getLogger("acpistat")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show battery, AC adapter and thermal information")
    parser.set_defaults(units=None)

    parser.add_argument("-b", "--battery", action="store_true", help="Show battery information (default)")
    parser.add_argument("-a", "--ac-adapter", dest="ac_adapter", action="store_true",
                        help="Show AC adapter information")
    parser.add_argument("-t", "--thermal", action="store_true", help="Show thermal information")
    parser.add_argument("-c", "--cooling", action="store_true", help="Show cooling device information")
    parser.add_argument("-V", "--everything", action="store_true", help="Show every device type")
    parser.add_argument("-i", "--details", action="store_true",
                        help="Show capacity details and trip points")

    units = parser.add_mutually_exclusive_group()
    units.add_argument("-f", "--fahrenheit", dest="units", action="store_const", const="fahrenheit",
                       help="Use Fahrenheit as the temperature unit")
    units.add_argument("-k", "--kelvin", dest="units", action="store_const", const="kelvin",
                       help="Use Kelvin as the temperature unit")

    parser.add_argument("--json", action="store_true", help="Print records as JSON")
    parser.add_argument("--power-supply-root", type=Path, help="Override the power supply directory")
    parser.add_argument("--thermal-root", type=Path, help="Override the thermal directory")
    parser.add_argument("-C", "--config", type=Path, help="Path to config.json")
    parser.add_argument("--log-level", default=None, help="Log level")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.everything:
        args.battery = args.ac_adapter = args.thermal = args.cooling = True

    config = load_config(args.config)
    if args.log_level:
        try:
            config.logging = LoggingConfig(level=args.log_level)
        except ValueError as e:
            parser.error(str(e))

    level = getattr(logging, config.logging.level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)-25s %(levelname)-7s %(message)s",
        datefmt="%H:%M:%S",
    )
    log.debug("Power supply root: %s, thermal root: %s",
              args.power_supply_root or config.paths.power_supply,
              args.thermal_root or config.paths.thermal)

    run_command(args, config)


if __name__ == "__main__":
    main()
