import pytest

from estructuras import exam_loader
from estructuras.exam_loader import load_list, main, summarize


def test_prepends_three_times_the_header_then_appends():
    lines = ["1", "10", "20", "30", "2", "40", "50"]
    assert list(load_list(lines)) == [30, 20, 10, 40, 50]


def test_lines_with_newlines_are_accepted():
    lines = ["1\n", "4\n", "5\n", "6\n", "1\n", "9\n"]
    assert list(load_list(lines)) == [6, 5, 4, 9]


def test_marker_seven_removes_last_before_appending():
    lines = ["1", "1", "2", "3", "7", "4", "5", "6", "7", "8", "9", "10"]
    result = list(load_list(lines))
    assert 1 not in result
    assert result == [3, 2, 4, 5, 6, 7, 8, 9, 10]


def test_marker_seven_on_empty_list_logs_failure():
    messages = []
    load_list(["0", "7"], log=messages.append)
    assert messages == [exam_loader.POP_FAILED]


def test_short_input_stops_cleanly():
    assert list(load_list(["2", "1", "2"])) == [2, 1]


def test_multiple_blocks_accumulate():
    lines = ["1", "1", "2", "3", "0", "1", "4", "5", "6", "1", "7"]
    assert list(load_list(lines)) == [6, 5, 4, 3, 2, 1, 7]


def test_malformed_number_raises():
    with pytest.raises(ValueError):
        load_list(["x"])


def test_summarize_counts_after_dropping_ten():
    values = ["100"] * 10 + ["1", "5"]
    counts = summarize(["4", *values])
    assert len(counts) == exam_loader.THRESHOLDS
    assert counts == [0, 0, 1, 1, 1, 1, 2, 2, 2, 2]


def test_summarize_counts_are_non_decreasing():
    values = [str(v) for v in (9, 3, 0, 7, 2, 8, 1, 6, 5, 4, 3, 2, 1, 0, 8)]
    counts = summarize(["5", *values])
    assert counts == sorted(counts)


def test_summarize_on_empty_logs_each_failed_pop():
    messages = []
    counts = summarize(["0"], log=messages.append)
    assert counts == [0] * exam_loader.THRESHOLDS
    assert messages.count(exam_loader.POP_FAILED) == exam_loader.TRIMMED_AT_END
    assert messages.count(exam_loader.EMPTY_LIST) == exam_loader.THRESHOLDS


def test_main_prints_summary(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("\n".join(["4"] + ["100"] * 10 + ["1", "5"]) + "\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == exam_loader.START
    assert out[-1] == exam_loader.END
    assert exam_loader.SUMMARY_LINE.format(threshold=9, count=2) in out


def test_main_missing_file_reports_on_stderr(tmp_path, capsys):
    path = tmp_path / "missing.txt"
    assert main([str(path)]) == 0
    assert str(path) in capsys.readouterr().err


def test_main_malformed_file_fails(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("one\n")
    assert main([str(path)]) == 1