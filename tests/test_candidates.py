import io
from datetime import date

import pytest

from magrathea.candidates import (
    CANDIDATE_COUNT,
    Candidate,
    calculate_age,
    compact_dob,
    format_candidate,
    main,
    render_review,
)

TODAY = date(2025, 5, 6)


def make_candidate(**overrides):
    values = dict(
        name="Jiyeon Park",
        dob="2006/03/14",
        gender="F",
        email="jiyeon@example.com",
        nationality="Korea",
        bmi="18.5",
        primary_skill="Dance",
        secondary_skill="Vocal",
        topik="0",
        mbti="ENFP",
        introduction="I love the stage.",
    )
    values.update(overrides)
    return Candidate(**values)


def test_compact_dob():
    assert compact_dob("2006/03/14") == "20060314"


def test_compact_dob_rejects_short_input():
    with pytest.raises(ValueError):
        compact_dob("2006/3/1")


def test_age_changes_on_birthday():
    on_birthday = calculate_age("20000506", TODAY)
    day_after = calculate_age("20000507", TODAY)
    day_before = calculate_age("20000505", TODAY)
    assert day_after == on_birthday - 1
    assert day_before == on_birthday
    assert on_birthday == 25


def test_age_uses_reference_date_by_default():
    assert calculate_age("20000506") == calculate_age("20000506", TODAY)


def test_age_rejects_bad_digits():
    with pytest.raises(ValueError):
        calculate_age("2000-05-")


def test_topik_label():
    assert make_candidate(topik="0").topik_label() == "Native"
    assert make_candidate(topik="6").topik_label() == "6"


def test_format_candidate_row():
    text = format_candidate(make_candidate(), TODAY)
    lines = text.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("Jiyeon Park    ")
    assert "| 20060314 |" in lines[0]
    assert "| Native  |" in lines[0]
    assert lines[2] == "I love the stage."
    assert lines[1] == lines[3]


def test_render_review_lists_every_candidate():
    people = [make_candidate(name=f"Member {i}") for i in range(3)]
    text = render_review("Milliways", people, TODAY)
    assert "    [Milliways] Audition Candidate Data Review" in text
    assert all(f"Member {i}" in text for i in range(3))
    assert text.count("I love the stage.") == 3


def test_main_reads_six_candidates(monkeypatch, capsys):
    one = [
        "Jiyeon Park", "2006/03/14", "F", "jiyeon@example.com", "Korea", "18.5",
        "Dance", "Vocal", "0", "ENFP", "I love the stage.",
    ]
    data = "Milliways\n" + "\n".join(one * CANDIDATE_COUNT) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main() == 0
    out = capsys.readouterr().out
    assert "[Milliways] Audition Candidate Data Entry" in out
    assert out.count("I love the stage.") == CANDIDATE_COUNT