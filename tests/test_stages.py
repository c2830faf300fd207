import io

import pytest

from magrathea.stages import (
    STAGE_COUNT,
    StageLockedError,
    StageStatus,
    TrainingProgress,
    main,
    render_training_menu,
)


def test_new_progress_has_every_stage_not_started():
    progress = TrainingProgress()
    assert progress.statuses == [StageStatus.NOT_STARTED] * STAGE_COUNT


def test_menu_shows_status_letters():
    progress = TrainingProgress()
    progress.record(1, True)
    menu = render_training_menu(progress)
    assert "1. Physical Strength & Knowledge [P]" in menu
    assert "8. Fan Communication [N]" in menu
    assert menu.startswith("========= Training Menu =========")


def test_first_two_stages_always_open():
    progress = TrainingProgress()
    assert progress.can_access(1)
    assert progress.can_access(2)


def test_later_stages_locked_until_first_two_passed():
    progress = TrainingProgress()
    assert not progress.can_access(3)
    progress.record(1, True)
    assert not progress.can_access(3)
    progress.record(2, True)
    assert all(progress.can_access(stage) for stage in range(3, STAGE_COUNT + 1))


def test_failed_stage_does_not_unlock():
    progress = TrainingProgress()
    progress.record(1, True)
    progress.record(2, False)
    assert not progress.can_access(5)


def test_record_locked_stage_raises():
    progress = TrainingProgress()
    with pytest.raises(StageLockedError):
        progress.record(3, True)
    assert progress.status(3) is StageStatus.NOT_STARTED


def test_record_already_passed_raises():
    progress = TrainingProgress()
    progress.record(1, True)
    with pytest.raises(ValueError):
        progress.record(1, False)
    assert progress.status(1) is StageStatus.PASSED


def test_failed_stage_can_be_retried():
    progress = TrainingProgress()
    assert progress.record(2, False) is StageStatus.FAILED
    assert progress.record(2, True) is StageStatus.PASSED


@pytest.mark.parametrize("stage", [0, STAGE_COUNT + 1, -1])
def test_out_of_range_stage_rejected(stage):
    progress = TrainingProgress()
    with pytest.raises(ValueError):
        progress.can_access(stage)


def test_main_records_pass(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\nY\nY\n3\n0\nq\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Stage 1 marked as Passed." in out
    assert "You must pass stages 1 and 2 before accessing this stage." in out
    assert "Exiting Magrathea system..." in out


def test_main_other_options(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n3\n7\n\n"))
    main([])
    out = capsys.readouterr().out
    assert "[Audition Management] Feature coming soon..." in out
    assert "[Debut] Feature coming soon..." in out
    assert "Invalid selection." in out