import pytest

from owllang.util import error, has_suffix, report


@pytest.mark.parametrize(
    "text, suffix, expected",
    [
        ("prog.ow", ".ow", True),
        ("prog.txt", ".ow", False),
        ("w", ".ow", False),
        (".ow", ".ow", True),
        ("anything", "", True),
        ("prog.owl", ".ow", False),
    ],
)
def test_has_suffix(text, suffix, expected):
    assert has_suffix(text, suffix) is expected


def test_report_formats_line_location_and_message(capsys):
    report(3, "at 'x'", "bad")
    assert capsys.readouterr().out == "[line 3] Error at 'x': bad\n"


def test_error_uses_empty_location(capsys):
    error(7, "oops")
    assert capsys.readouterr().out == "[line 7] Error : oops\n"


def test_report_writes_nothing_to_stderr(capsys):
    error(1, "message")
    captured = capsys.readouterr()
    assert captured.err == ""
    assert "message" in captured.out