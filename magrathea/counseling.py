"""Trauma records and counseling sessions for members."""

from __future__ import annotations

import random
from dataclasses import dataclass

MEMBERS = {
    "Luna": 19, "Kai": 20, "Mira": 21, "Juno": 22, "Zion": 23,
    "Rhea": 24, "Leo": 25, "Nova": 26, "Orion": 27, "Skye": 28,
}

QUESTIONS = (
    "In what situations have you experienced this trauma?",
    "How has this situation affected your daily life and emotions?",
    "How have you tried to overcome this trauma?",
    "What emotions do you associate with this trauma?",
    "What kind of support do you think is necessary to overcome this trauma?",
)

QUESTIONS_PER_SESSION = 3
MAX_COUNSELING = 50
MAX_RESPONSE_LEN = 100
TRAUMA_LIMIT = 199


@dataclass
class TraumaInfo:
    """A member's recorded trauma."""

    nickname: str
    age: int
    trauma: str


@dataclass(frozen=True)
class CounselingResponse:
    """One answered counseling question."""

    nickname: str
    question: str
    response: str


class CounselingCenter:
    """Trauma records and the counseling log."""

    def __init__(self, members=None):
        self.members = dict(MEMBERS if members is None else members)
        self.traumas: dict[str, TraumaInfo] = {}
        self.responses: list[CounselingResponse] = []

    def record_trauma(self, nickname: str, trauma: str) -> TraumaInfo:
        """Record or replace the trauma of a known member."""
        if nickname not in self.members:
            raise KeyError("Nickname not found.")
        info = self.traumas.get(nickname)
        if info is None:
            info = TraumaInfo(nickname, self.members[nickname], trauma)
            self.traumas[nickname] = info
        else:
            info.trauma = trauma
        return info

    def pick_questions(self, rng=None) -> list[str]:
        """Return three distinct questions in random order."""
        source = rng if rng is not None else random
        return source.sample(QUESTIONS, QUESTIONS_PER_SESSION)

    def add_response(self, nickname: str, question: str, response: str) -> CounselingResponse:
        """Log an answer of 1 to 100 characters from a member with a trauma entry."""
        if nickname not in self.traumas:
            raise KeyError("Nickname not found in trauma list.")
        if not 1 <= len(response) <= MAX_RESPONSE_LEN:
            raise ValueError(
                f"response must be 1 to {MAX_RESPONSE_LEN} characters long"
            )
        if len(self.responses) >= MAX_COUNSELING:
            raise ValueError(f"counseling log is full ({MAX_COUNSELING} entries)")
        entry = CounselingResponse(nickname, question, response)
        self.responses.append(entry)
        return entry

    def summary(self) -> str:
        """Return every member's trauma with the answers they gave."""
        parts = ["Counseling Summaries:\n"]
        for info in self.traumas.values():
            parts.append(
                f"\n--- {info.nickname} ---\nAge: {info.age}\n"
                f"Trauma: {info.trauma}\nResponses:\n"
            )
            parts.extend(
                f"Q: {entry.question}\nA: {entry.response}\n"
                for entry in self.responses
                if entry.nickname == info.nickname
            )
        return "".join(parts)


def _read_token(prompt: str) -> str:
    line = input(prompt)
    while not line.split():
        line = input()
    return line.split()[0]


def _enter_trauma(center: CounselingCenter) -> None:
    while True:
        print()
        nickname = _read_token("Enter nickname (or type 'exit' to return): ")
        if nickname == "exit":
            return
        if nickname not in center.members:
            print("Nickname not found. Try again.")
            continue
        trauma = input("Enter trauma description: ")[:TRAUMA_LIMIT]
        center.record_trauma(nickname, trauma)
        print(f"Trauma recorded successfully for {nickname}.")


def _start_counseling(center: CounselingCenter, rng) -> None:
    if not center.traumas:
        print("No members have trauma data.")
        return
    print()
    print("Members with trauma entries:")
    for nickname in center.traumas:
        print(f"- {nickname}")
    nickname = _read_token("Enter nickname to begin counseling: ")
    if nickname not in center.traumas:
        print("Nickname not found in trauma list.")
        return
    for number, question in enumerate(center.pick_questions(rng), start=1):
        print()
        print(f"Q{number}: {question}")
        response = input(f"Your answer (max {MAX_RESPONSE_LEN} chars): ")
        while not 1 <= len(response) <= MAX_RESPONSE_LEN:
            response = input("Invalid input. Please re-enter: ")
        try:
            center.add_response(nickname, question, response)
        except ValueError as exc:
            print(exc)
            return
    print()
    print(f"Counseling session for {nickname} completed.")


def _overcome_trauma(center: CounselingCenter, rng) -> None:
    while True:
        print()
        print("--- Trauma Management ---")
        print("A. Enter Trauma Info")
        print("B. Start Counseling Session")
        print("C. View Counseling Summary")
        print("Q. Return to Main Menu")
        choice = _read_token("Select an option: ")[0].lower()
        if choice == "a":
            _enter_trauma(center)
        elif choice == "b":
            _start_counseling(center, rng)
        elif choice == "c":
            print()
            print(center.summary(), end="")
        elif choice == "q":
            return
        else:
            print("Invalid option.")


def main(argv=None) -> int:
    """Run the trauma management menu."""
    center = CounselingCenter()
    rng = random.Random()
    try:
        while True:
            print()
            print("=== MAIN MENU ===")
            print("1. Overcome Trauma")
            print("Q. Quit")
            choice = _read_token("Select: ")[0]
            if choice.lower() == "q":
                break
            if choice == "1":
                _overcome_trauma(center, rng)
            else:
                print("Invalid option.")
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())