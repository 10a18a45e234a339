import pytest

from gameoflife.core import Cell, Row
from gameoflife.errors import ParseCellError


def test_a_row_contains_ordered_cells():
    row = Row([Cell.LIVE, Cell.DEAD])
    assert row.get_cell(0) == Cell.LIVE
    assert row[1] == Cell.DEAD


def test_a_row_has_a_fixed_amount_of_cells():
    assert len(Row([Cell.LIVE])) == 1
    assert len(Row()) == 0
    assert Row().is_empty()


def test_rows_of_only_dead_or_live_cells():
    assert Row.of_dead_cells(2) == Row([Cell.DEAD, Cell.DEAD])
    assert Row.of_live_cells(1) == Row([Cell.LIVE])


def test_reading_past_the_end_of_a_row_fails():
    row = Row.of_live_cells(2)
    assert row.position_is_valid(1)
    assert not row.position_is_valid(2)
    with pytest.raises(IndexError):
        row.get_cell(2)


def test_a_row_is_parsed_from_glyphs_ignoring_surrounding_whitespace():
    assert Row.parse("  ⬜⬛⬜ ") == Row([Cell.LIVE, Cell.DEAD, Cell.LIVE])


def test_parsing_reports_the_invalid_char_and_its_position():
    with pytest.raises(ParseCellError) as excinfo:
        Row.parse("⬜⬜X")

    assert excinfo.value.invalid_char == 'X'
    assert excinfo.value.column == 2


def test_parsing_counts_columns_from_the_start_of_an_indented_line():
    with pytest.raises(ParseCellError) as excinfo:
        Row.parse("  ⬜X⬜")

    assert excinfo.value.column == 3


def test_a_row_is_displayed_as_glyphs():
    assert str(Row([Cell.DEAD, Cell.LIVE])) == "⬛⬜"


def test_iterating_a_row_yields_cells():
    assert list(Row.parse("⬜⬛")) == [Cell.LIVE, Cell.DEAD]
