"""Tests for TerminalSurface."""

from unittest.mock import Mock, patch
from blessed import Terminal
from term_modal import BorderStyle, Rect, TerminalSurface


def create_mock_terminal(width=80, height=24):
    """Create a mock Terminal with specified dimensions."""
    term = Mock(spec=Terminal)
    term.width = width
    term.height = height
    term.move = Mock(return_value='')
    return term


def printed(mock_print):
    return [c.args[0] for c in mock_print.call_args_list]


class TestDrawText:
    """Tests for draw_text()."""

    @patch('builtins.print')
    def test_moves_and_prints(self, mock_print):
        term = create_mock_terminal()
        TerminalSurface(term).draw_text(4, 2, "hello")

        term.move.assert_called_once_with(2, 4)
        assert printed(mock_print) == ["hello"]

    @patch('builtins.print')
    def test_applies_style(self, mock_print):
        """Test that styles are resolved as blessed formatters."""
        term = create_mock_terminal()
        term.bold_magenta = Mock(side_effect=lambda text: f"<{text}>")
        TerminalSurface(term).draw_text(0, 0, "hi", "bold_magenta")

        assert printed(mock_print) == ["<hi>"]

    @patch('builtins.print')
    def test_clips_right_edge(self, mock_print):
        term = create_mock_terminal(width=10)
        TerminalSurface(term).draw_text(8, 0, "abcdef")

        assert printed(mock_print) == ["ab"]

    @patch('builtins.print')
    def test_clips_left_edge(self, mock_print):
        term = create_mock_terminal()
        TerminalSurface(term).draw_text(-2, 0, "abcdef")

        term.move.assert_called_once_with(0, 0)
        assert printed(mock_print) == ["cdef"]

    @patch('builtins.print')
    def test_offscreen_rows_are_skipped(self, mock_print):
        term = create_mock_terminal(height=5)
        surface = TerminalSurface(term)
        surface.draw_text(0, 5, "below")
        surface.draw_text(0, -1, "above")
        surface.draw_text(80, 0, "right")

        mock_print.assert_not_called()

    @patch('builtins.print')
    def test_real_terminal(self, mock_print):
        """Test drawing with a real (non-interactive) Terminal."""
        TerminalSurface(Terminal()).draw_text(1, 1, "x", "bold_red_on_black")

        assert mock_print.call_count == 1


class TestDrawBox:
    """Tests for draw_box() and fill()."""

    @patch('builtins.print')
    def test_ascii_box(self, mock_print):
        term = create_mock_terminal()
        TerminalSurface(term).draw_box(Rect(0, 0, 5, 3), border=BorderStyle.ASCII)

        assert printed(mock_print) == ["+---+", "|", "   ", "|", "+---+"]

    @patch('builtins.print')
    def test_title_in_top_border(self, mock_print):
        term = create_mock_terminal()
        TerminalSurface(term).draw_box(Rect(0, 0, 12, 2), border=BorderStyle.ROUNDED, title="Hi")

        top = printed(mock_print)[0]
        assert top == "╭─── Hi ───╮"
        assert len(top) == 12

    @patch('builtins.print')
    def test_long_title_is_truncated(self, mock_print):
        term = create_mock_terminal()
        TerminalSurface(term).draw_box(Rect(0, 0, 6, 2), border=BorderStyle.ASCII, title="Very long")

        assert printed(mock_print)[0] == "+ Ver+"

    @patch('builtins.print')
    def test_empty_box_draws_nothing(self, mock_print):
        TerminalSurface(create_mock_terminal()).draw_box(Rect(3, 3, 0, 0))

        mock_print.assert_not_called()

    @patch('builtins.print')
    def test_thin_box_is_filled(self, mock_print):
        TerminalSurface(create_mock_terminal()).draw_box(Rect(0, 0, 4, 1))

        assert printed(mock_print) == ["    "]

    @patch('builtins.print')
    def test_fill(self, mock_print):
        TerminalSurface(create_mock_terminal()).fill(Rect(1, 1, 3, 2))

        assert printed(mock_print) == ["   ", "   "]

    @patch('builtins.print')
    def test_flush(self, mock_print):
        TerminalSurface(create_mock_terminal()).flush()

        mock_print.assert_called_once_with('', end='', flush=True)
