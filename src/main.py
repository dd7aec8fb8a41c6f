#!/usr/bin/env python3
""" Entry point of tinysh. """
import argparse
import logging
import sys

from constants import SHELL_NAME, VERSION
from shell import Shell

LOG_FORMAT = "%(asctime)s %(name)s[%(process)d]: %(message)s"


def parse_args(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=SHELL_NAME,
        description="A minimal interactive command interpreter with if/then/else/fi and pipes"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="log interpreter internals to stderr"
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="write the debug log to PATH instead of stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}"
    )
    return parser.parse_args(args)


def configure_logging(debug=False, log_file=None):
    """ Logging stays silent unless asked for. """
    if not debug and not log_file:
        return
    logging.basicConfig(level=logging.DEBUG, filename=log_file, format=LOG_FORMAT)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.debug, args.log_file)

    sh = Shell()
    sh.interrupts.install()
    rc = sh.run()
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
