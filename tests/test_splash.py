import io

from magrathea.splash import banner, main


def test_banner_line_count_and_rules():
    lines = banner("Arthur", "2025-05-06").splitlines()
    assert len(lines) == 9
    assert set(lines[0]) == {"+"}
    assert lines[0] == lines[6]
    assert set(lines[8]) == {"="}


def test_banner_triangles():
    lines = banner("Arthur", "2025-05-06").splitlines()
    for stars, row in enumerate(lines[1:6], start=1):
        assert row.startswith("*" * stars)
        assert row.endswith("*" * (6 - stars))


def test_banner_texts_are_right_aligned():
    lines = banner("Arthur", "2025-05-06").splitlines()
    assert lines[1].endswith("[Magrathea ver 0.1]*****")
    assert lines[4].endswith("Welcome to Magrathea.**")
    assert lines[5].strip("*") == " " * 100


def test_banner_user_line():
    lines = banner("Ford Prefect", "2025-05-06").splitlines()
    assert lines[7] == "[User]: Ford Prefect\t\t\t\t\t   [Execution Time]: 2025-05-06"


def test_main_reads_inputs(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2025-05-06\n  Ford Prefect\n"))
    assert main(["--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert "**The input has been processed successfully.**" in out
    assert out.endswith(banner("Ford Prefect", "2025-05-06"))