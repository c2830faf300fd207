"""Training stage progress and the main Magrathea menu."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

MAIN_MENU = ("Audition Management", "Training", "Debut")

TRAINING_STAGES = (
    "1. Physical Strength & Knowledge",
    "2. Self-Management & Teamwork",
    "3. Language & Pronunciation",
    "4. Vocal",
    "5. Dance",
    "6. Visual & Image",
    "7. Acting & Stage Performance",
    "8. Fan Communication",
)

STAGE_COUNT = len(TRAINING_STAGES)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class StageStatus(Enum):
    """Evaluation state of one training stage."""

    NOT_STARTED = "N"
    PASSED = "P"
    FAILED = "F"


class StageLockedError(Exception):
    """Raised when a stage is entered before stages 1 and 2 are passed."""


def _new_statuses() -> list[StageStatus]:
    return [StageStatus.NOT_STARTED] * STAGE_COUNT


@dataclass
class TrainingProgress:
    """Pass/fail state of every training stage."""

    statuses: list[StageStatus] = field(default_factory=_new_statuses)

    @staticmethod
    def _check(stage: int) -> None:
        if not 1 <= stage <= STAGE_COUNT:
            raise ValueError(f"stage must be between 1 and {STAGE_COUNT}, got {stage}")

    def status(self, stage: int) -> StageStatus:
        """Return the status of ``stage`` (counted from 1)."""
        self._check(stage)
        return self.statuses[stage - 1]

    def can_access(self, stage: int) -> bool:
        """Stages after the second open only once stages 1 and 2 are passed."""
        self._check(stage)
        if stage <= 2:
            return True
        return all(status is StageStatus.PASSED for status in self.statuses[:2])

    def record(self, stage: int, passed: bool) -> StageStatus:
        """Record an evaluation result for ``stage`` and return its new status."""
        if not self.can_access(stage):
            raise StageLockedError(
                "You must pass stages 1 and 2 before accessing this stage."
            )
        if self.statuses[stage - 1] is StageStatus.PASSED:
            raise ValueError("You have already passed this stage.")
        new_status = StageStatus.PASSED if passed else StageStatus.FAILED
        self.statuses[stage - 1] = new_status
        return new_status


def render_training_menu(progress: TrainingProgress) -> str:
    """Return the training menu with each stage's status letter."""
    lines = ["========= Training Menu ========="]
    lines.extend(
        f"{title} [{status.value}]"
        for title, status in zip(TRAINING_STAGES, progress.statuses)
    )
    return "\n".join(lines) + "\n"


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _read_char(prompt: str) -> str:
    """Return the first non-blank character, skipping empty lines."""
    line = input(prompt)
    while not line.strip():
        line = input()
    return line.strip()[0]


def _training(progress: TrainingProgress) -> None:
    while True:
        print()
        print(render_training_menu(progress), end="")
        choice = _leading_int(input("Select a training stage (1-8), or 0 to return: "))
        if choice is None:
            continue
        if choice == 0:
            return
        if not 1 <= choice <= STAGE_COUNT:
            continue
        if not progress.can_access(choice):
            print()
            print("You must pass stages 1 and 2 before accessing this stage.")
            continue
        if progress.status(choice) is StageStatus.PASSED:
            print()
            print("You have already passed this stage.")
            continue

        print()
        confirm = _read_char("Would you like to enter the evaluation result? (Y/N): ")
        if confirm not in ("Y", "y"):
            continue
        result = _read_char(
            "Did you complete the training and pass the certification? "
            "(Y = Pass, N = Fail): "
        )
        status = progress.record(choice, result in ("Y", "y"))
        word = "Passed" if status is StageStatus.PASSED else "Failed"
        print()
        print(f"Stage {choice} marked as {word}.")


def main(argv=None) -> int:
    """Run the interactive main menu."""
    progress = TrainingProgress()
    try:
        while True:
            print()
            print("========= Main Menu =========")
            for number, item in enumerate(MAIN_MENU, start=1):
                print(f"{number}. {item}")
            line = input("Enter menu number (or 0/Q/q to quit): ")
            if line[:1] in ("0", "Q", "q", ""):
                break
            option = _leading_int(line) or 0
            if option == 1:
                print()
                print("[Audition Management] Feature coming soon...")
            elif option == 2:
                _training(progress)
            elif option == 3:
                print()
                print("[Debut] Feature coming soon...")
            else:
                print()
                print("Invalid selection.")
    except EOFError:
        pass
    print()
    print("Exiting Magrathea system...")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())