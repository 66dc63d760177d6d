"""
Filename:       draw_tui.py
Author:         jole
Created:        19.10.2026

Description:

Notes:          Screen layout, top to bottom: header, dashed line, the rows of the visible page, search line, help bar.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing import Optional, Sequence

# --- Project defined
from .defs              import HEADERS, WIDTHS, FIELDS, HELP_TEXT, HELPBAR_TEXT, SORT_UP, SORT_DOWN, Record
from .filter_and_sort   import is_number, number_text
from .query_state       import DerivedView, SortDirection
from .tui_state         import UIState, TUITheme
# --- END OF Import section --------------------------------------------------------------------------------------------


SEPARATOR = " | "



class DrawTUI():
    """
    This one is responsible for all the drawing to screen. By drawing I mean writing...
    """

    def header_line(self, _sort_attribute: Optional[str], _sort_direction: Optional[SortDirection]) -> str:
        """
        The column titles, with an arrow behind the one the table is sorted on.
        """

        parts = []
        for (title, w), fld in zip(HEADERS, FIELDS):
            if fld == _sort_attribute and _sort_direction is not None:
                title = f"{title} {SORT_UP if _sort_direction is SortDirection.ASCENDING else SORT_DOWN}"
            parts.append(f"{title:<{w}}")
        return SEPARATOR.join(parts)
    # --- END OF header_line() -----------------------------------------------------------------------------------------



    def format_row(self, _record: Record) -> str:
        """
        One record as a table line. Numbers are right-aligned, everything else left-aligned.
        """

        parts = []
        for fld, w in zip(FIELDS, WIDTHS):
            value = _record.get(fld, "")
            if is_number(value):
                parts.append(f"{number_text(value):>{w}}")
            else:
                parts.append(f"{str(value):<{w}}"[:w])
        return SEPARATOR.join(parts)
    # --- END OF format_row() ------------------------------------------------------------------------------------------



    def draw_header(self,
                    _stdscr,
                    _theme:             TUITheme,
                    _sort_attribute:    Optional[str]           = None,
                    _sort_direction:    Optional[SortDirection] = None
                    ) -> None:
        """
        Draws up the header line on top of the terminal window, and the dashed line underneath.

        :return:    None
        """

        line = self.header_line(_sort_attribute, _sort_direction)
        self._addstr_clip(_stdscr, 0, 0, line, _theme.header)
        self._addstr_clip(_stdscr, 1, 0, "-" * len(line))

        # --- Color the title of the sorted column on top of the header
        if _sort_attribute in FIELDS:
            idx     = FIELDS.index(_sort_attribute)
            col_x   = self._col_start_x(idx)
            self._addstr_clip(_stdscr, 0, col_x, line[col_x:col_x + WIDTHS[idx]], _theme.sorted)
    # --- END OF draw_header -------------------------------------------------------------------------------------------



    def draw_rows(self,
                  _stdscr,
                  _rows:    Sequence[Record],
                  _theme:   TUITheme,
                  _state:   UIState
                  ) -> None:
        """
        Draws the rows of the visible page. The caller hands over one page only, so no scrolling happens here.

        :param _stdscr:  Which screen to draw on
        :return:        None
        """

        # --- Let the user know if we have nothing to show.
        if not _rows:
            self._addstr_clip(_stdscr, 2, 0, "No cars found.", _theme.empty)
            return

        for i, record in enumerate(_rows[:_state.view_height]):
            row_attr = _theme.reversed if i == _state.selected else 0
            self._addstr_clip(_stdscr, i + 2, 0, self.format_row(record), row_attr)
    # --- END OF draw_rows() -------------------------------------------------------------------------------------------



    def draw_search_line(self,
                         _stdscr,
                         _search_text:  str,
                         _pending:      bool,
                         _theme:        TUITheme
                         ) -> None:
        """
        The search text as typed. It shows in the pending color until the debounced search has caught up with it.
        """

        max_y, _ = _stdscr.getmaxyx()
        attr = _theme.pending if _pending else _theme.search
        self._addstr_clip(_stdscr, max_y - 2, 0, f"Search: {_search_text}", attr)
    # --- END OF draw_search_line() ------------------------------------------------------------------------------------



    def draw_helpbar(self,
                     _stdscr,
                     _view:     DerivedView,
                     _theme:    TUITheme,
                     _state:    UIState
                     ) -> None:
        """
        Draws up the help at the bottom of the terminal, with the page indicator on the right.

        :return:        None
        """

        max_y, max_x = _stdscr.getmaxyx()
        right   = self.page_indicator(_view)
        bar     = (HELPBAR_TEXT + "  " + right)[: max_x - 1]
        bar_attr = _theme.help_bar if _state.has_colors else _theme.reversed
        self._addstr_clip(_stdscr, max_y - 1, 0, bar, bar_attr)
    # --- END OF draw_helpbar() ----------------------------------------------------------------------------------------



    def page_indicator(self, _view: DerivedView) -> str:
        pages = max(1, _view.total_pages)
        return f"Page {min(_view.page_index + 1, pages)}/{pages} ({_view.match_count} cars)"
    # --- END OF page_indicator() --------------------------------------------------------------------------------------



    def show_help(self, _stdscr, _theme: TUITheme) -> None:
        """
        Shows the help screen until the user hits a key.
        """

        self.clear_screen(_stdscr)
        for y, line in enumerate(HELP_TEXT):
            self._addstr_clip(_stdscr, y, 2, line, _theme.header if y == 0 else 0)
        _stdscr.refresh()

        # --- Block until a key comes in, even if the main loop runs getch() with a timeout
        _stdscr.timeout(-1)
        _stdscr.getch()
    # --- END OF show_help() -------------------------------------------------------------------------------------------



    def _col_start_x(self, _col_idx: int) -> int:
        """
        Computes the x offset where column _col_idx starts in the printed line.
        Each column is padded to WIDTHS[c], joined by " | " (3 chars).
        """

        return sum(WIDTHS[i] + len(SEPARATOR) for i in range(_col_idx))
    # --- END OF _col_start_x() ----------------------------------------------------------------------------------------



    def _addstr_clip(self, _stdscr, _y: int, _x: int, _text: str, _attr: int = 0) -> None:
        """
        Writes a string to curses _stdscr, clipping if necessary

        :param _stdscr:  Which screen to write to
        :param _y:       y co-ordinate
        :param _x:       x co-ordinate
        :param _text:    What to write
        :param _attr:    Text attributes

        :return:        None
        """

        max_y, max_x = _stdscr.getmaxyx()
        if _y < 0 or _y >= max_y or _x >= max_x:
            return

        _stdscr.addstr(_y, _x, _text[: max_x - _x - 1], _attr)
    # --- END OF _addstr_clip() ----------------------------------------------------------------------------------------



    def clear_screen(self, _stdscr) -> None:
        """
        Clears the screen _stdscr

        :return: None
        """

        _stdscr.erase()
    # --- END OF clear_screen ------------------------------------------------------------------------------------------

# --- END OF class DrawTUI ---------------------------------------------------------------------------------------------
