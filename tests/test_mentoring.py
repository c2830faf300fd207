import builtins
import random

import pytest

from magrathea.mentoring import (
    TRAINEES,
    Mentor,
    main,
    match_mentors,
    name_value,
    random_ability,
)


def _mentors(count):
    return [Mentor(id=n, name=f"Mentor{n}") for n in range(1, count + 1)]


def test_name_value_empty_is_zero():
    assert name_value("") == 0


def test_name_value_single_char_is_its_code():
    assert name_value("A") == ord("A")


@pytest.mark.parametrize("left,right", [("Jin", "Hana"), ("Taeyang", ""), ("a", "b")])
def test_name_value_is_additive(left, right):
    assert name_value(left + right) == name_value(left) + name_value(right)


def test_random_ability_within_bounds():
    rng = random.Random(42)
    values = [random_ability(rng) for _ in range(500)]
    assert min(values) >= 100
    assert max(values) <= 1000


def test_random_ability_is_reproducible_with_seed():
    first = [random_ability(random.Random(7)) for _ in range(3)]
    second = [random_ability(random.Random(7)) for _ in range(3)]
    assert first == second


def test_match_all_eight_mentors_one_to_one():
    matched = match_mentors(_mentors(8))
    indices = sorted(m.trainee_index for m in matched)
    assert indices == list(range(8))


def test_match_keeps_mentor_order_and_ids():
    mentors = _mentors(8)
    matched = match_mentors(mentors)
    assert [(m.id, m.name) for m in matched] == [(m.id, m.name) for m in mentors]


def test_first_trainee_gets_preferred_mentor():
    matched = match_mentors(_mentors(8))
    preferred = name_value(TRAINEES[0]) % 8
    assert matched[preferred].trainee_index == 0


def test_fewer_trainees_leaves_mentors_unassigned():
    matched = match_mentors(_mentors(8), ["Jin", "Hana"])
    assigned = [m.trainee_index for m in matched if m.trainee_index is not None]
    assert sorted(assigned) == [0, 1]
    assert sum(m.trainee_index is None for m in matched) == 6


def test_fewer_mentors_matches_first_trainees_only():
    matched = match_mentors(_mentors(3))
    assert sorted(m.trainee_index for m in matched) == [0, 1, 2]


def test_match_does_not_mutate_input():
    mentors = _mentors(4)
    match_mentors(mentors)
    assert all(m.trainee_index is None for m in mentors)


def test_match_without_mentors_raises():
    with pytest.raises(ValueError):
        match_mentors([])


def test_main_matches_entered_mentors(monkeypatch, capsys):
    answers = iter(["2", "1", *[f"M{n}" for n in range(1, 9)], "2", "0"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Please enter mentors first." in out
    assert out.count("\u2192 Mentor ID:") == 8
    assert out.rstrip().endswith("Exiting...")