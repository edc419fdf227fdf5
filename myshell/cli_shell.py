import argparse
import logging
import sys

from myshell.config.settings import Settings
from myshell.container import DependencyContainer
from myshell.exceptions import ConfigurationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="myshell",
        description=(
            "Minimal interactive interpreter of built-in filesystem commands: "
            "cd, pwd, ls, cat, stat, mkdir, rmdir, rm, exit."
        ),
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: MYSHELL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Render stat and ls output with colors",
    )
    parser.add_argument(
        "--no-prompt",
        dest="show_prompt",
        action="store_false",
        help="Do not print the working-directory prompt",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level and not isinstance(logging.getLevelName(args.log_level.upper()), int):
        parser.error(f"unknown logging level: {args.log_level}")

    try:
        settings = Settings()
    except ConfigurationError as e:
        print(f"myshell: {e}", file=sys.stderr)
        return 2

    level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    container = DependencyContainer(
        settings=settings, pretty=args.pretty, show_prompt=args.show_prompt
    )
    try:
        return container.get_interpreter().run()
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
