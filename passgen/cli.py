"""CLI for passgen: generate one or more secure passwords."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import DEFAULTS, PasswordConfig, load_config, save_config, config_path
from .errors import PassgenError
from .generator import generate

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True)
err_console = Console(stderr=True)

_TRUE = {"1", "true", "t", "yes", "y", "on"}
_FALSE = {"0", "false", "f", "no", "n", "off"}
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

CLASS_FLAGS = (
    ("--upper", "use_upper", "Include uppercase letters"),
    ("--lower", "use_lower", "Include lowercase letters"),
    ("--digits", "use_digits", "Include digits"),
    ("--special", "use_special", "Include special characters"),
    ("--no-similar", "no_similar", "Exclude similar characters (i, l, 1, L, o, 0, O)"),
    ("--no-ambiguous", "no_ambiguous", "Exclude ambiguous characters ({ } [ ] ( ) / \\ ' \" ` ~ , ; : . < >)"),
)


def _str2bool(value):
    if isinstance(value, bool):
        return value
    v = str(value).strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean, got {value!r}")


def _error(message: str) -> int:
    err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    return 1


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def build_parser(settings: dict, pre: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        parents=[pre],
        description="Generate cryptographically secure random passwords.",
    )
    parser.add_argument("--length", type=int, default=settings["length"], help="Length of the password")
    parser.add_argument("--count", type=int, default=settings["count"], help="Number of passwords to generate")
    for flag, dest, help_text in CLASS_FLAGS:
        parser.add_argument(
            flag,
            dest=dest,
            type=_str2bool,
            nargs="?",
            const=True,
            default=settings[dest],
            metavar="BOOL",
            help=f"{help_text} (default: {str(settings[dest]).lower()})",
        )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings["log_level"],
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--save-config", action="store_true", help="Store these options as the new defaults")
    return parser


def validate(args) -> Optional[str]:
    """Return an error message for invalid options, or None."""
    if args.length < 1:
        return "Password length must be at least 1"
    if args.count < 1:
        return "Count must be at least 1"
    if not (args.use_upper or args.use_lower or args.use_digits or args.use_special):
        return "At least one character set must be selected"
    return None


def cmd_generate(args) -> int:
    cfg = PasswordConfig.from_mapping(vars(args))
    passwords = []
    try:
        for _ in range(args.count):
            passwords.append(generate(cfg))
    except PassgenError as e:
        return _error(f"generating password: {e}")
    for pw in passwords:
        # plain output: special characters must not be read as rich markup
        console.print(pw, markup=False, highlight=False, emoji=False)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", metavar="PATH", help="Settings file (default: %s)" % config_path())
    known, _ = pre.parse_known_args(argv)

    settings = load_config(known.config)
    parser = build_parser(settings, pre)
    args = parser.parse_args(argv)
    _setup_logging(args.log_level)

    message = validate(args)
    if message:
        return _error(message)

    if args.save_config:
        saved = {key: getattr(args, key) for key in DEFAULTS}
        try:
            path = save_config(saved, args.config)
        except OSError as e:
            return _error(f"could not save settings: {e}")
        err_console.print(f"[green]Saved defaults to:[/green] {escape(path)}", highlight=False)

    return cmd_generate(args)


if __name__ == "__main__":
    sys.exit(main())
