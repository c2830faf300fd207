"""Fitness data and basic workout routines for the training programme."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

MEMBERS = (
    ("Jiyeon Park", "Jiyeon"),
    ("Ethan Smith", "Ethan"),
    ("Suphanan Wong", "Suphanan"),
    ("Helena Silva", "Helena"),
    ("Karolina Nowak", "Karolina"),
    ("Liam Wilson", "Liam"),
)

FITNESS_TESTS = (
    "1-Mile Run (min)",
    "100m Sprint (sec)",
    "30 Push-ups (min)",
    "50 Squats (min)",
    "50 Push-ups (min)",
    "400m Swim (min)",
    "Bench Press (x Bodyweight)",
)

TEST_COUNT = len(FITNESS_TESTS)
DAYS = 6

CARDIO_EXERCISES = ("Running", "Cycling", "Fast Walking")
STRENGTH_EXERCISES = {
    1: ("Push-ups", "Squats"),
    2: ("Leg Press", "Leg Curl"),
    3: ("Pull-ups", "Chin-ups"),
    4: ("Plank", "Crunches"),
}
CORE_TYPE = 4

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_float(token: str) -> float:
    match = _NUMBER.match(token)
    return float(match.group(1)) if match else 0.0


def _parse_values(text: str) -> list[float]:
    tokens = [token for token in text.split(",") if token]
    return [_to_float(token) for token in tokens[:TEST_COUNT]]


def parse_fitness_data(text: str) -> tuple[float, ...]:
    """Parse seven comma-separated scores; extra values are ignored."""
    values = _parse_values(text)
    if len(values) != TEST_COUNT:
        raise ValueError(
            f"Invalid number of inputs. Please enter {TEST_COUNT} values."
        )
    return tuple(values)


class FitnessRecords:
    """Fitness test scores of every member, keyed by nickname."""

    def __init__(self, members=MEMBERS):
        self.members = tuple(members)
        self._scores = {nick: [0.0] * TEST_COUNT for _, nick in self.members}

    def full_name(self, nickname: str) -> str:
        """Return the full name of the member with ``nickname``."""
        for name, nick in self.members:
            if nick == nickname:
                return name
        raise KeyError("Nickname not found.")

    def _row(self, nickname: str) -> list[float]:
        try:
            return self._scores[nickname]
        except KeyError:
            raise KeyError("Nickname not found.") from None

    def set_scores(self, nickname: str, scores) -> None:
        """Store scores from the first test onward; later tests keep their value."""
        values = [float(value) for value in scores]
        if len(values) > TEST_COUNT:
            raise ValueError(f"at most {TEST_COUNT} scores, got {len(values)}")
        self._row(nickname)[: len(values)] = values

    def scores_for(self, nickname: str) -> tuple[float, ...]:
        """Return all test scores of one member."""
        return tuple(self._row(nickname))

    def score(self, nickname: str, test_number: int) -> float:
        """Return one test score; ``test_number`` counts from 1."""
        if not 1 <= test_number <= TEST_COUNT:
            raise ValueError("Invalid test number.")
        return self._row(nickname)[test_number - 1]


@dataclass
class WorkoutRoutine:
    """A six-day routine of one cardio and one strength/core exercise per day."""

    days: list[tuple[str, str]] = field(default_factory=list)

    @property
    def core_used(self) -> bool:
        """Whether a core exercise is already in the routine."""
        core = STRENGTH_EXERCISES[CORE_TYPE]
        return any(strength in core for _, strength in self.days)

    @property
    def is_complete(self) -> bool:
        return len(self.days) >= DAYS

    def add_day(self, cardio_index: int, strength_type: int, exercise_index: int):
        """Append a day and return its (cardio, strength) pair."""
        if self.is_complete:
            raise ValueError(f"routine already has {DAYS} days")
        if not 0 <= cardio_index < len(CARDIO_EXERCISES):
            raise ValueError(f"invalid cardio selection: {cardio_index}")
        if strength_type not in STRENGTH_EXERCISES:
            raise ValueError(f"invalid strength/core type: {strength_type}")
        if strength_type == CORE_TYPE and self.core_used:
            raise ValueError("Core exercise already used once. Pick another type.")
        options = STRENGTH_EXERCISES[strength_type]
        if not 0 <= exercise_index < len(options):
            raise ValueError(f"invalid exercise selection: {exercise_index}")
        day = (CARDIO_EXERCISES[cardio_index], options[exercise_index])
        self.days.append(day)
        return day


def _read_int(prompt: str) -> int:
    match = _LEADING_INT.match(input(prompt))
    return int(match.group(1)) if match else -1


def _print_member_scores(records: FitnessRecords, name: str, nickname: str) -> None:
    print()
    print(f"Member: {name} ({nickname})")
    for title, value in zip(FITNESS_TESTS, records.scores_for(nickname)):
        print(f"{title}: {value:.2f}")


def _display_members(records: FitnessRecords) -> None:
    print()
    print("Available Members:")
    for name, nick in records.members:
        print(f"- {name} ({nick})")


def _set_health(records: FitnessRecords) -> None:
    print()
    print("[II. Training > 1. Physical Strength & Knowledge > A. Enter Fitness Data]")
    for name, nick in records.members:
        print(f"Enter fitness data for {name} ({nick}):")
        print(
            "Format: 1-Mile,100m Sprint,Pushups,Squats,Arm Strength,Swimming,Weightlifting"
        )
        values = _parse_values(input()[:199])
        records.set_scores(nick, values)
        if len(values) != TEST_COUNT:
            print(f"Invalid number of inputs. Please enter {TEST_COUNT} values.")
    print()
    print("All fitness data has been recorded.")


def _get_health(records: FitnessRecords) -> None:
    print()
    print("[II. Training > 1. Physical Strength & Knowledge > B. View Fitness Data]")
    print("Choose option:")
    print("1. View all members' data")
    print("2. View one member's full data")
    print("3. View one test result for a member")
    choice = input("Select: ")[:1]

    if choice == "1":
        for name, nick in records.members:
            _print_member_scores(records, name, nick)
    elif choice == "2":
        nickname = input("Enter nickname: ")[:19]
        try:
            name = records.full_name(nickname)
        except KeyError:
            print("Nickname not found.")
            return
        _print_member_scores(records, name, nickname)
    elif choice == "3":
        nickname = input("Enter nickname: ")[:19]
        print(f"Select fitness test (1-{TEST_COUNT}):")
        for number, title in enumerate(FITNESS_TESTS, start=1):
            print(f"{number}. {title}")
        test_number = _read_int("Enter number: ")
        try:
            value = records.score(nickname, test_number)
            name = records.full_name(nickname)
        except ValueError as exc:
            print(exc)
            return
        except KeyError:
            print("Nickname not found.")
            return
        print(f"{name} ({nickname}) - {FITNESS_TESTS[test_number - 1]}: {value:.2f}")
    else:
        print("Invalid selection.")


def _set_routines(records: FitnessRecords, routines: dict[str, WorkoutRoutine]) -> None:
    print()
    print("[II. Training > 1. Physical Strength & Knowledge > C. Set Basic Workout Routine]")
    _display_members(records)
    for name, nick in records.members:
        print()
        print(f"Setting routine for {name} ({nick}):")
        routine = WorkoutRoutine()
        while not routine.is_complete:
            print(f"Day {len(routine.days) + 1} (Mon=1 ~ Sat=6):")
            cardio = _read_int("Select Cardio (0: Running, 1: Cycling, 2: Fast Walking): ")
            kind = _read_int(
                "Select Strength/Core (1: Full-body, 2: Lower-body, 3: Upper-body, 4: Core): "
            )
            if kind == CORE_TYPE and routine.core_used:
                print("Core exercise already used once. Pick another type.")
                continue
            exercise = _read_int("Select Exercise (0 or 1): ")
            try:
                routine.add_day(cardio, kind, exercise)
            except ValueError as exc:
                print(f"{exc}. Please choose again.")
        routines[nick] = routine
    print()
    print("All routines set.")


def _get_routine(records: FitnessRecords, routines: dict[str, WorkoutRoutine]) -> None:
    print()
    print("[II. Training > 1. Physical Strength & Knowledge > D. View Basic Workout Routine]")
    _display_members(records)
    name = input("Enter full member name: ")[:49]
    nickname = next((nick for full, nick in records.members if full == name), None)
    if nickname is None:
        print("Member not found.")
        return
    print()
    print(f"Workout Routine for {name} ({nickname}):")
    days = routines.get(nickname, WorkoutRoutine()).days
    for number in range(1, DAYS + 1):
        cardio, strength = days[number - 1] if number <= len(days) else ("", "")
        print(f"Day {number} - Cardio: {cardio}, Strength/Core: {strength}")


def main(argv=None) -> int:
    """Run the fitness and workout routine menu."""
    records = FitnessRecords()
    routines: dict[str, WorkoutRoutine] = {}
    actions = {
        1: lambda: _set_health(records),
        2: lambda: _get_health(records),
        3: lambda: _set_routines(records, routines),
        4: lambda: _get_routine(records, routines),
    }
    try:
        while True:
            print()
            print("[Main Menu]")
            print("1. Enter Fitness Data")
            print("2. View Fitness Data")
            print("3. Set Workout Routine")
            print("4. View Workout Routine")
            print("0. Exit")
            choice = _read_int("Select option: ")
            if choice == 0:
                break
            action = actions.get(choice)
            if action is None:
                print("Invalid choice.")
            else:
                action()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())