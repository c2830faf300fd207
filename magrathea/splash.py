"""Start-up splash screen."""

from __future__ import annotations

import argparse
import time

_PLUS_RULE = "+" * 109
_EQUALS_RULE = "=" * 109
_CLEAR_SCREEN = "\033[2J\033[H"

_ROWS = (
    (94, "[Magrathea ver 0.1]"),
    (74, "Magrathea, where a shining planet is created in a wasteland with no grass,"),
    (
        84,
        "a place where unseen potential is discovered and gems are polished "
        "by the hands of experts,",
    ),
    (65, "Welcome to Magrathea."),
    (100, " "),
)


def banner(name: str, date: str) -> str:
    """Return the splash banner for the given user name and date."""
    lines = [_PLUS_RULE]
    for stars, (width, text) in enumerate(_ROWS, start=1):
        lines.append("*" * stars + text.rjust(width) + "*" * (6 - stars))
    lines.append(_PLUS_RULE)
    lines.append(f"[User]: {name}\t\t\t\t\t   [Execution Time]: {date}")
    lines.append(_EQUALS_RULE)
    return "\n".join(lines) + "\n"


def _read_line(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def main(argv=None) -> int:
    """Ask for date and name, wait, clear the screen and show the banner."""
    parser = argparse.ArgumentParser(prog="magrathea-splash")
    parser.add_argument("--delay", type=float, default=3.0, help="seconds to wait")
    args = parser.parse_args(argv)

    tokens = _read_line('[Please enter the current date in the "yyyy-mm-dd" format]: ').split()
    date = tokens[0][:10] if tokens else ""
    name = _read_line("[Please enter your name]: ").strip()[:99]

    print("**The input has been processed successfully.**")
    if args.delay > 0:
        time.sleep(args.delay)
    print(_CLEAR_SCREEN, end="")
    print(banner(name, date), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())