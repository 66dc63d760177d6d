"""
Filename:       tui_state.py
Author:         jole
Created:        19.10.2026
Description:    Screen-side state and colors. Query state (search, sort, page) lives in the TableController, not here.

Notes:
"""

import curses

from dataclasses import dataclass



@dataclass
class UIState:
    """
        Helper dataclass to hold the variables the draw functions need besides the table itself. TableBrowser owns
    the instance and keeps it up to date, DrawTUI only reads it.
    """
    selected:       int     = 0     # the currently selected row on the visible page
    search_buffer:  str     = ""    # what the user has typed so far, may run ahead of the applied search
    view_height:    int     = 10
    has_colors:     bool    = False
# --- END OF class UIState ---------------------------------------------------------------------------------------------



@dataclass()
class TUITheme:
    header:     int = 0
    sorted:     int = 0
    help_bar:   int = 0
    search:     int = 0
    pending:    int = 0
    empty:      int = 0
    reversed:   int = curses.A_REVERSE

    @staticmethod
    def init_theme() -> "TUITheme":

        if not curses.has_colors():
            return TUITheme()

        curses.start_color()
        curses.use_default_colors()
        curses.curs_set(0)

        curses.init_pair(1, curses.COLOR_CYAN, -1)  # header
        curses.init_pair(2, curses.COLOR_YELLOW, -1)  # sorted column
        curses.init_pair(3, curses.COLOR_BLACK, curses.COLOR_WHITE)  # help bar
        curses.init_pair(4, curses.COLOR_GREEN, -1)  # applied search
        curses.init_pair(5, curses.COLOR_MAGENTA, -1)  # search still waiting for the debounce
        curses.init_pair(6, curses.COLOR_WHITE, -1)  # "no cars found"

        return TUITheme(
            header      = curses.A_BOLD | curses.color_pair(1),
            sorted      = curses.A_BOLD | curses.color_pair(2),
            help_bar    = curses.color_pair(3),
            search      = curses.color_pair(4),
            pending     = curses.color_pair(5),
            empty       = curses.color_pair(6),
            )
    # --- END OF init_theme() ------------------------------------------------------------------------------------------
# --- END OF class TUITheme --------------------------------------------------------------------------------------------
