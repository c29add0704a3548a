"""A very tiny CLI.

Invoke using e.g. ``python -m righthand`` to show the visualization, or
``python -m righthand version``.
"""

import sys
import argparse

import righthand


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    # Defaults and aliases
    if argv == ["--version"]:
        argv = ["version"]

    parser = argparse.ArgumentParser(
        prog="righthand",
        description="Show the right-hand rule for angular velocity.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="show",
        help="The command to run: 'show' (default), 'help' or 'version'",
    )
    parser.add_argument("--step", type=float, help="angle increment per tick (rad)")
    parser.add_argument("--interval", type=float, help="time per tick (s)")
    parser.add_argument("--radius", type=float, help="radius of the circle")
    parser.add_argument("--segments", type=int, help="segments of the circle")
    parser.add_argument("--log-level", help="e.g. 'debug' or 'info'")

    args = parser.parse_args(argv)
    command = args.command.lower()

    if command == "help":
        parser.print_help()
    elif command == "version":
        print("righthand v" + righthand.__version__)
    elif command == "show":
        if args.log_level:
            righthand.set_log_level(args.log_level)
        overrides = {
            key: value
            for key, value in (
                ("step", args.step),
                ("interval", args.interval),
                ("radius", args.radius),
                ("segments", args.segments),
            )
            if value is not None
        }
        try:
            config = righthand.DEFAULT_CONFIG.replace(**overrides)
        except (TypeError, ValueError) as err:
            parser.error(str(err))
        righthand.show(config)
    else:
        print(f"Invalid command '{command}'")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
