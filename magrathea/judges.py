"""Judge list data entry and display."""

from __future__ import annotations

from dataclasses import dataclass

MAX_JUDGES = 100
MAX_INFO_LENGTH = 255
FIELD_COUNT = 7

_LABELS = ("Name", "Gender", "Affiliation", "Title", "Expertise", "Email", "Phone")
_HASH_RULE = "#" * 36
_PLUS_RULE = "+" * 36
_DASH_RULE = "-" * 35


@dataclass
class Judge:
    """One judge's details."""

    name: str
    gender: str
    affiliation: str
    title: str
    expertise: str
    email: str
    phone: str


def is_complete_entry(line: str) -> bool:
    """Return True when the entry holds exactly seven comma-separated items."""
    return line.count(",") == FIELD_COUNT - 1


def _fields(line: str) -> list[str]:
    tokens = [token for token in line.split(",") if token]
    if not tokens:
        return []
    first, *rest = tokens
    return [first.lstrip(' "'), *(token.lstrip(" ") for token in rest)]


def parse_judge(line: str) -> Judge:
    """Parse a comma-separated judge entry."""
    values = _fields(line)
    if len(values) != FIELD_COUNT:
        raise ValueError(f"Judge info incomplete (found {len(values)} fields).")
    return Judge(*values)


def format_judge(line: str, number: int) -> str:
    """Return the display block for judge ``number`` (counted from 1)."""
    values = _fields(line)
    lines = [f"[Judge {number}]"]
    lines.extend(f"{label}: {value}" for label, value in zip(_LABELS, values))
    if len(values) != FIELD_COUNT:
        lines.append(f"Warning: Judge info incomplete (found {len(values)} fields).")
    lines.append(_DASH_RULE)
    return "\n".join(lines) + "\n"


def _read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _read_int(prompt: str) -> int:
    line = _read_line(prompt) or ""
    tokens = line.split()
    try:
        return int(tokens[0]) if tokens else 0
    except ValueError:
        return 0


def main(argv=None) -> int:
    """Enter a judge list from standard input and optionally display it."""
    print(_HASH_RULE)
    print("#      Judge List Data Entry      #")
    print(_HASH_RULE)
    _read_line("Participating Project: ")
    total = min(max(_read_int("Total Number of Judges: "), 0), MAX_JUDGES)
    _read_int("Number of Selected Members: ")

    print(_PLUS_RULE)
    print(f"Starting to input information for {total} judges.")
    print(_PLUS_RULE)
    print()

    entries: list[str] = []
    while len(entries) < total:
        line = _read_line(f"Judge {len(entries) + 1}: ")
        if line is None:
            print()
            print("Input ended before all judges were entered.")
            return 1
        line = line[:MAX_INFO_LENGTH]
        if is_complete_entry(line):
            entries.append(line)
        else:
            print("The input items are incorrect. Please enter them again.")
            print()

    print(_PLUS_RULE)
    print("Judge information entry is complete.")
    print(_PLUS_RULE)

    answer = (_read_line("Should we check the judge information? ") or "").strip()
    if answer[:1] == "Y":
        print(_HASH_RULE)
        print("#        Display Judge Data        #")
        print(_HASH_RULE)
        for number, line in enumerate(entries, start=1):
            print(format_judge(line, number), end="")
    else:
        print("Program terminated.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())