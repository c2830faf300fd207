"""Mentor and trainee matching for the training programme."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, replace

TRAINEES = (
    "Jin", "Hana", "Minho", "Soo", "Luna", "Kai", "Yuna", "Dae", "Hyo", "Nari",
    "Leo", "Mina", "Taeyang", "Eunji", "Sun", "Bo", "Jae", "Ara", "Hyun", "Yeon",
)

MAX_MENTORS = 8
NAME_LIMIT = 29
MIN_ABILITY = 100
MAX_ABILITY = 1000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Mentor:
    """A mentor and the index of the trainee assigned to them, if any."""

    id: int
    name: str
    trainee_index: int | None = None


def name_value(nickname: str) -> int:
    """Return the sum of the character codes of ``nickname``."""
    return sum(ord(ch) for ch in nickname)


def random_ability(rng=None) -> int:
    """Return a random ability score between 100 and 1000 inclusive."""
    source = rng if rng is not None else random
    return source.randint(MIN_ABILITY, MAX_ABILITY)


def match_mentors(mentors, trainees=TRAINEES) -> list[Mentor]:
    """Pair trainees with mentors one to one.

    Each trainee prefers the mentor at its name value modulo the mentor count;
    a taken mentor passes the trainee on to the next free one.  Only as many
    trainees as there are mentors are matched, in order.
    """
    mentors = list(mentors)
    if not mentors:
        raise ValueError("Please enter mentors first.")
    count = len(mentors)
    assigned: list[int | None] = [None] * count
    for index, trainee in enumerate(list(trainees)[:count]):
        slot = name_value(trainee) % count
        while assigned[slot] is not None:
            slot = (slot + 1) % count
        assigned[slot] = index
    return [
        replace(mentor, trainee_index=index)
        for mentor, index in zip(mentors, assigned)
    ]


def _render_pairs(matched, trainees=TRAINEES) -> str:
    lines = ["=== Mentor-Mentee Pairs ==="]
    for mentor in matched:
        if mentor.trainee_index is None:
            lines.append(
                f"Mentor ID: {mentor.id} ({mentor.name}) has no assigned trainee."
            )
        else:
            idx = mentor.trainee_index
            lines.append(
                f"Trainee No: {idx + 1} ({trainees[idx]}) \u2192 "
                f"Mentor ID: {mentor.id} ({mentor.name})"
            )
    return "\n".join(lines) + "\n"


def _read_int(prompt: str) -> int:
    match = _LEADING_INT.match(input(prompt))
    return int(match.group(1)) if match else -1


def _input_mentors() -> list[Mentor]:
    print()
    print(f"Enter names for up to {MAX_MENTORS} mentors:")
    return [
        Mentor(id=number, name=input(f"Mentor {number} Name: ")[:NAME_LIMIT])
        for number in range(1, MAX_MENTORS + 1)
    ]


def main(argv=None) -> int:
    """Run the mentor matching menu."""
    mentors: list[Mentor] = []
    try:
        while True:
            print()
            print("== Milliways Training Menu ==")
            print("1. Enter Mentors")
            print("2. Match Mentoring")
            print("0. Exit")
            choice = _read_int("Enter your choice: ")
            if choice == 1:
                mentors = _input_mentors()
            elif choice == 2:
                if not mentors:
                    print("Please enter mentors first.")
                    continue
                print()
                print("Matching mentors with trainees...")
                print()
                print(_render_pairs(match_mentors(mentors)), end="")
            elif choice == 0:
                print("Exiting...")
                return 0
            else:
                print("Invalid choice.")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())