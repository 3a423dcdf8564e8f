"""Tests for chart output."""

from snakes_ladders.chart import make_length_histogram, make_race_chart
from snakes_ladders.game import LogEntry


def test_race_chart_writes_png(tmp_path):
    entries = [
        LogEntry(1, 1, "A", 3, 1, 14, ladder_climb=True),
        LogEntry(2, 2, "B", 5, 1, 6),
        LogEntry(3, 1, "A", 2, 14, 16),
    ]
    out = tmp_path / "race.png"
    assert make_race_chart(entries, output_path=str(out)) == str(out)
    assert out.read_bytes()[:4] == b"\x89PNG"


def test_length_histogram_writes_png(tmp_path):
    out = tmp_path / "lengths.png"
    make_length_histogram([20, 35, 35, 41, 60], output_path=str(out))
    assert out.exists()
    assert out.stat().st_size > 0


def test_length_histogram_without_games(tmp_path):
    out = tmp_path / "empty.png"
    assert make_length_histogram([], output_path=str(out)) == str(out)
    assert out.exists()
