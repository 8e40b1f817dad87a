import pytest

from llmquota.style import Style, display_width, format_cell, strip_ansi


def test_render_without_attributes_is_unchanged():
    assert Style().render("plain text") == "plain text"


def test_strip_ansi_round_trip():
    rendered = Style(foreground="#a6e3a1", bold=True).render("abc")
    assert rendered != "abc"
    assert strip_ansi(rendered) == "abc"


def test_display_width_ignores_escapes():
    rendered = Style(foreground="#f38ba8", background="#1e1e2e").render("█░╎—")
    assert display_width(rendered) == display_width("█░╎—") == 4


def test_bold_comes_first_in_sgr():
    assert Style(foreground="#cdd6f4", bold=True).render("x").startswith("\x1b[1;")


def test_padding_adds_blank_lines_and_columns():
    vertical, horizontal = 1, 2
    rendered = Style(padding=(vertical, horizontal)).render("ab")
    lines = rendered.split("\n")
    assert len(lines) == 1 + 2 * vertical
    assert all(display_width(line) == display_width("ab") + 2 * horizontal for line in lines)
    assert lines[vertical].strip() == "ab"


def test_width_pads_lines():
    rendered = Style(width=10).render("ab\nabcd")
    assert [display_width(line) for line in rendered.split("\n")] == [10, 10]


def test_lines_aligned_to_widest():
    rendered = Style(foreground="#89b4fa").render("a\nlonger line")
    widths = {display_width(line) for line in rendered.split("\n")}
    assert widths == {display_width("longer line")}


def test_display_width_of_multiline_is_widest():
    assert display_width("ab\nabcde\nc") == display_width("abcde")


@pytest.mark.parametrize("width", [1, 3, 7, 12])
@pytest.mark.parametrize("value", ["", "5h", "missing local data", "—"])
@pytest.mark.parametrize("align_right", [True, False])
def test_format_cell_width_is_exact(value, width, align_right):
    cell = format_cell(value, width, align_right)
    assert display_width(cell) == width


def test_format_cell_alignment():
    assert format_cell("42%", 6, True).endswith("42%")
    assert format_cell("42%", 6, False).startswith("42%")


def test_format_cell_truncates_from_the_end():
    cell = format_cell("missing local data", 7, False)
    assert "missing local data".startswith(cell)
    assert display_width(cell) == 7


def test_format_cell_non_positive_width():
    assert format_cell("abc", 0, True) == ""
    assert format_cell("abc", -3, False) == ""