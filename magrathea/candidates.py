"""Audition candidate data entry and review."""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from datetime import date

CANDIDATE_COUNT = 6
REFERENCE_DATE = date(2025, 5, 6)

FIELD_LABELS = (
    "Name",
    "DOB",
    "Gender",
    "Email",
    "Nationality",
    "BMI",
    "Primary Skill",
    "Secondary Skill",
    "TOPIK",
    "MBTI",
    "Introduction",
)

_HASH_RULE = "#" * 36
_EQUALS_RULE = "=" * 93
_DASH_RULE = "-" * 93
_TABLE_HEADER = (
    "Name (Age)        | DOB       | Gender | Email               | Nationality "
    "| BMI  | Primary | Secondary | TOPIK   | MBTI  |"
)


@dataclass
class Candidate:
    """One audition candidate, as entered."""

    name: str
    dob: str
    gender: str
    email: str
    nationality: str
    bmi: str
    primary_skill: str
    secondary_skill: str
    topik: str
    mbti: str
    introduction: str

    def topik_label(self) -> str:
        """Return the TOPIK level, or "Native" for a level starting with 0."""
        return "Native" if self.topik.startswith("0") else self.topik


def calculate_age(dob: str, today: date = REFERENCE_DATE) -> int:
    """Return the age on ``today`` for a birth date written as YYYYMMDD."""
    digits = dob[:8]
    if len(digits) != 8 or not digits.isdigit():
        raise ValueError(f"birth date must be YYYYMMDD, got {dob!r}")
    year, month, day = int(digits[:4]), int(digits[4:6]), int(digits[6:8])
    age = today.year - year
    if (month, day) > (today.month, today.day):
        age -= 1
    return age


def compact_dob(dob: str) -> str:
    """Turn a YYYY/MM/DD style date into YYYYMMDD."""
    if len(dob) < 10:
        raise ValueError(f"birth date must look like YYYY/MM/DD, got {dob!r}")
    return dob[0:4] + dob[5:7] + dob[8:10]


def format_candidate(candidate: Candidate, today: date = REFERENCE_DATE) -> str:
    """Return the review table entry for one candidate."""
    dob = compact_dob(candidate.dob)
    age = calculate_age(dob, today)
    c = candidate
    row = (
        f"{c.name:<15} ({age}) | {dob:<8} | {c.gender:<6} | {c.email:<20} | "
        f"{c.nationality:<12} | {c.bmi:<4} | {c.primary_skill:<7} | "
        f"{c.secondary_skill:<9} | {c.topik_label():<7} | {c.mbti:<5} |"
    )
    return "\n".join([row, _DASH_RULE, c.introduction, _DASH_RULE]) + "\n"


def render_review(group_name: str, candidates, today: date = REFERENCE_DATE) -> str:
    """Return the complete candidate review for an audition group."""
    header = "\n".join(
        [
            "",
            _HASH_RULE,
            f"    [{group_name}] Audition Candidate Data Review",
            _HASH_RULE,
            _EQUALS_RULE,
            _TABLE_HEADER,
            _EQUALS_RULE,
        ]
    )
    return header + "\n" + "".join(format_candidate(c, today) for c in candidates)


def _read_line(prompt: str, limit: int) -> str:
    try:
        return input(prompt)[:limit]
    except EOFError:
        return ""


def main(argv=None) -> int:
    """Collect six candidates from standard input and print the review."""
    group_name = _read_line("Enter audition group name: ", 49)
    print()
    print(_HASH_RULE)
    print(f"    [{group_name}] Audition Candidate Data Entry")
    print(_HASH_RULE)

    candidates = []
    for number in range(1, CANDIDATE_COUNT + 1):
        print(f"Entering information for candidate {number}.")
        print("---------------------------------")
        values = [
            _read_line(f"{index}. {label}: ", 199)
            for index, label in enumerate(FIELD_LABELS, start=1)
        ]
        candidates.append(Candidate(*values))
        print("=================================")

    try:
        print(render_review(group_name, candidates), end="")
    except ValueError as exc:
        print(f"Invalid candidate data: {exc}")
        return 1
    return 0


__all__ = [
    "Candidate",
    "calculate_age",
    "compact_dob",
    "format_candidate",
    "render_review",
    "main",
    "astuple",
    "fields",
]

if __name__ == "__main__":
    raise SystemExit(main())