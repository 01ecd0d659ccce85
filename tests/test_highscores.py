import pytest

from blockfall.highscores import HEADER, HIGHSCORES_NUM_DISPLAY, HighScoreEntry, HighScores


@pytest.fixture
def table(tmp_path):
    return HighScores(tmp_path / "highscores.csv")


def test_read_missing_file_gives_empty_table(table):
    assert table.read() == 0
    assert table.entries() == ()


def test_entries_best_first(table):
    table.push(100, "low", 1, 2)
    table.push(300, "high", 3, 25)
    table.push(200, "mid", 2, 12)
    assert [e.name for e in table.entries()] == ["high", "mid", "low"]


def test_newer_equal_score_ranks_higher(table):
    table.push(100, "old", 1, 1)
    table.push(100, "new", 1, 1)
    assert [e.name for e in table.entries()] == ["new", "old"]


def test_write_read_round_trip_keeps_order(table):
    table.push(100, "old", 1, 4)
    table.push(100, "new", 2, 8)
    table.push(500, "top", 5, 40)
    before = table.entries()
    table.write()
    other = HighScores(table.path)
    assert other.read() == 3
    assert other.entries() == before


def test_write_format_is_score_name_lines_level(table):
    table.push(300, "Ann", 2, 5)
    table.write()
    assert table.path.read_text(encoding="utf-8") == "300,Ann,5,2\n"


def test_write_replaces_commas_in_names(table):
    table.push(10, "a,b", 1, 1)
    table.write()
    other = HighScores(table.path)
    other.read()
    assert other.entries()[0].name == "a.b"


def test_read_replaces_previous_entries(table):
    table.push(10, "saved", 1, 1)
    table.write()
    table.push(20, "unsaved", 1, 1)
    table.read()
    assert [e.name for e in table.entries()] == ["saved"]


def test_read_rejects_malformed_line(table):
    table.path.write_text("abc,name,1,1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        table.read()


def test_read_rejects_short_line(table):
    table.path.write_text("10,name\n", encoding="utf-8")
    with pytest.raises(ValueError):
        table.read()


def test_set_high_score_saves_and_marks_dirty(table):
    assert table.clean is True
    table.set_high_score(42, "Sam", 3, 9)
    assert table.clean is False
    other = HighScores(table.path)
    other.read()
    assert other.entries() == (HighScoreEntry(42, "Sam", 3, 9),)


def test_is_new_high_on_empty_table(table):
    assert table.is_new_high(0) == 1


def test_is_new_high_finds_position(table):
    for score in (500, 400, 300, 200, 100):
        table.push(score, "x", 1, 1)
    assert table.is_new_high(450) == 2
    assert table.is_new_high(600) == 1


def test_is_new_high_off_full_table(table):
    for score in range(1, 31):
        table.push(score * 10, "x", 1, 1)
    assert table.is_new_high(0) == 0
    assert table.is_new_high(10_000) == 1


def test_score_lines_header_first(table):
    assert table.score_lines() == [HEADER]
    assert HEADER == "Name              Level      Lines    Score"


def test_score_lines_row_layout(table):
    table.push(300, "Ann", 2, 5)
    lines = table.score_lines()
    assert len(lines) == 2
    row = lines[1]
    assert row[:20] == "Ann".ljust(20, ".")
    assert row[20:30] == "2".ljust(10, ".")
    assert row[30:37] == "5".ljust(7, ".")
    assert row[37:] == "300".rjust(6, ".")


def test_score_lines_limited_to_display_rows(table):
    for score in range(40):
        table.push(score, "x", 1, 1)
    assert len(table.score_lines()) == HIGHSCORES_NUM_DISPLAY


def test_score_lines_placeholder_inserted_at_row(table):
    table.push(300, "first", 1, 1)
    table.push(100, "third", 1, 1)
    placeholder = HighScoreEntry(200, "me", 4, 7)
    lines = table.score_lines(placeholder, 2)
    assert len(lines) == 4
    assert lines[1].startswith("first.")
    assert lines[2].startswith("me" + " " * 18)
    assert lines[3].startswith("third.")


def test_score_lines_placeholder_after_last_row(table):
    table.push(300, "first", 1, 1)
    placeholder = HighScoreEntry(5, "me", 1, 1)
    lines = table.score_lines(placeholder, 2)
    assert len(lines) == 3
    assert lines[2].startswith("me ")


def test_score_lines_placeholder_on_empty_table(table):
    placeholder = HighScoreEntry(5, "me", 1, 1)
    lines = table.score_lines(placeholder, 1)
    assert lines[0] == HEADER
    assert lines[1].startswith("me ")
    assert lines[1].endswith("5".rjust(6, "."))