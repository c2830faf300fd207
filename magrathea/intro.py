"""Project member introduction card."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

_RULE = "=" * 69
_THIN_RULE = "-" * 69
_CONTINUATION = " " * 14


@dataclass(frozen=True)
class _Member:
    name: str
    gender: str
    major: str
    years: int
    role: str
    role_gap: str
    skills: str
    introduction: tuple[str, ...]


_MEMBERS = (
    _Member(
        name="Arthur Dent",
        gender="Male",
        major="Mechanical Engineering",
        years=15,
        role="Architect",
        role_gap="\t\t",
        skills="C/C++, Java, Spring, Python, Machine Learning/Deep Learning",
        introduction=(
            "I built my career working on various projects in SNS, fintech, HR, "
            "and media in Silicon Valley.",
            "Through successes and failures, I have gained insights I want to share with you.",
        ),
    ),
    _Member(
        name="Kim Youngjin",
        gender="Male",
        major="Computer Engineering",
        years=2,
        role="Developer",
        role_gap="\t\t",
        skills="C#, Python, JavaScript, React, Kotlin",
        introduction=(
            "Recently, I found immense passion for software development through a "
            "personal asset management project using the MAUI framework.",
            "Solving real-world problems with my code is incredible!",
            "Successfully developing Magrathea has now become one of my bucket list goals.",
        ),
    ),
    _Member(
        name="Im Woncheol",
        gender="Male",
        major="Electronic Engineering",
        years=1,
        role="DBA",
        role_gap="\t\t\t",
        skills="Java, PHP, MongoDB, MS SQL, MySQL",
        introduction=(
            "I believe that applications are ultimately about how they handle data.",
            "While studying Big Data courses in university, I developed a deep "
            "interest in data platforms.",
            "I think the success of this project depends on data.",
            "Just thinking about the data we\u2019ll manage in Magrathea already excites me!",
        ),
    ),
    _Member(
        name="Yoo Goeun",
        gender="Female",
        major="Management Information Systems",
        years=1,
        role="Cloud Engineer",
        role_gap="\t\t",
        skills="Java, PowerShell, Azure, AWS, GCP",
        introduction=(
            "I worked on a project with Kim Youngjin, where I was responsible for "
            "implementing cloud architecture.",
            "During my school years, I became fascinated with cloud computing, "
            "particularly Microsoft Azure.",
            "As I delved deeper, I found that understanding other public cloud "
            "platforms became much easier.",
            "I am determined to complete Magrathea's cloud architecture with my own hands!",
        ),
    ),
    _Member(
        name="Seo Hyekyung",
        gender="Female",
        major="Political Science & International Relations",
        years=0,
        role="Developer",
        role_gap="\t\t",
        skills="Python, Swift, Kotlin, Node.js, Figma",
        introduction=(
            "While I have worked on many projects as academic assignments, this is "
            "my first real-world project where a company's success is at stake.",
            "I am both excited and nervous about whether I can perform well.",
            "When I first heard about the Magrathea project, something inside me "
            "told me that this was a project worth dedicating myself to.",
            "Having already heard of Arthur\u2019s reputation through LinkedIn, I feel "
            "honored to be part of this journey.",
        ),
    ),
)


def to_binary_32(n: int) -> str:
    """Return the 32-bit two's complement form of ``n`` as four space-separated bytes."""
    raw = (n & 0xFFFFFFFF).to_bytes(4, "big")
    return " ".join(format(byte, "08b") for byte in raw)


def _member_lines(member: _Member):
    yield _RULE
    yield f"Name         | {member.name}\t\tGender     | {member.gender}"
    yield (
        f"Major        | {member.major}\tExperience | "
        f"{to_binary_32(member.years)}(2) years"
    )
    yield f"Role         | {member.role}{member.role_gap}Skills     | {member.skills}"
    yield _THIN_RULE
    first, *rest = member.introduction
    yield f"Introduction | {first}"
    for line in rest:
        yield f"{_CONTINUATION}{line}"


def render_introductions() -> str:
    """Return the full introduction card for every project member."""
    lines = ["[Magrathea] \u2764\u2764 Project Member Introduction \u2764\u2764"]
    for member in _MEMBERS:
        lines.extend(_member_lines(member))
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    """Print the introduction card to standard output."""
    parser = argparse.ArgumentParser(
        prog="magrathea-intro",
        description="Show the project member introduction card.",
    )
    parser.parse_args(argv)
    card = render_introductions()
    sys.stdout.write(card)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())