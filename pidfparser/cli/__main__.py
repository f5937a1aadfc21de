import sys
import logging
import argparse
import configparser
import traceback

from pidfparser import __version__
from pidfparser.config import load_config
from pidfparser import cli


def arg_parse(argv=None):
    argp = argparse.ArgumentParser(description="PIDF document utility")
    argp.add_argument(
        "-c",
        action="store",
        dest="cfg_file",
        default=None,
        help="Path to configuration file",
    )
    argp.add_argument(
        "-l",
        action="store",
        dest="log_level",
        default="warning",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log verbosity",
    )
    argp.add_argument(
        "--version", action="version", version="%%(prog)s version %s" % __version__
    )

    subp = argp.add_subparsers(dest="command")

    cli.check_reg(subp)
    cli.format_reg(subp)

    args = argp.parse_args(argv)

    return (argp, args)


def main(argv=None):
    (argp, args) = arg_parse(argv)
    logging.basicConfig(level=args.log_level.upper(), stream=sys.stderr)

    try:
        load_config(args.cfg_file, explicit=args.cfg_file is not None)
    except (OSError, configparser.Error, ValueError) as exc:
        print(f"Configuration file error: {exc}", file=sys.stderr)
        sys.exit(1)

    commands = {
        "check": cli.check,
        "format": cli.format_doc,
    }

    if not args.command:
        argp.print_usage()
        sys.exit(1)

    try:
        ret = commands[args.command](args)
    except KeyboardInterrupt:
        ret = 1
    except Exception as exc:  # pylint: disable=broad-except
        print(f"{args.command} failed: {str(exc)}", file=sys.stderr)
        print("Unhandled exception:", file=sys.stderr)
        print(traceback.format_exc(), file=sys.stderr)
        ret = 1

    sys.exit(ret)


if __name__ == "__main__":
    main()
