"""
Filename:   defs.py
Author:     jole
Created:    19.10.2026

Description:    Hold various constants, or other definitions, for use across the project.

Notes:
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import curses
import argparse

from typing import Dict, Union
# --- END OF Import section --------------------------------------------------------------------------------------------



ARGUMENT_DESCRIPTION = "Car Table TUI Browser"

ARGUMENT_EPILOG =   ("Search:\n"
                     "  Type anywhere to search. Make and model match case-insensitive substrings,\n"
                     "  price matches when its digits contain the text (e.g. 250 matches 25000).\n"
                     "  The search runs when typing pauses for the debounce delay.\n"
                     "\nSort:\n"
                     "  F1/F2/F3 sort by make/model/price, the same key again flips the direction.\n"
                     "\nCLI:\n"
                    )

ARGUMENT_FORMATTER_CLASS = argparse.RawDescriptionHelpFormatter

HELP_TEXT = [
            "Car Table Browser Help",
            "",
            "Search:",
            "  <type> : Edit the search text (runs after a short pause)",
            "  Backspace : Delete last character",
            "  Enter : Run the search now",
            "  Esc : Clear the search",
            "",
            "Sort:",
            "  F1 / F2 / F3 : Sort by make / model / price",
            "                 (same key again flips ascending/descending)",
            "",
            "Pages:",
            "  →/PgDn : Next page",
            "  ←/PgUp : Previous page",
            "  Home/End : First/last page",
            "  Ctrl-G : Jump to page number",
            "  ↑/↓ : Move selection within the page",
            "",
            "Other:",
            "  F5 : Show this help",
            "  F10 or Ctrl-X : Quit",
            "",
            "",
            "Hit any key to close this help",
        ]

HELPBAR_TEXT = "F1-F3:Sort ←→:Page ^G:Jump Enter:Search now Esc:Clear F5:Help F10:Quit"

# --- A record is one row of the table, field name -> value
Record      = Dict[str, Union[str, int, float]]

PAGE_SIZE   = 10        # rows per page
DEBOUNCE_MS = 300       # quiescence window for the search input, in milliseconds
TICK_MS     = 50        # how often the main loop wakes up to let the debouncer fire

DEFAULT_LOG_FILE = "car_table_browser.log"

FIELDS      = ("make", "model", "price")

HEADERS                     = [("Make", 14),
                               ("Model", 18),
                               ("Price", 10)
                              ]
HEADER_DICT = dict(HEADERS)

WIDTHS      = [w for _, w in HEADERS]

SORT_UP     = "▲"
SORT_DOWN   = "▼"

CTRL_G      = 7
CTRL_X      = 24
ESCAPE      = 27

SORT_KEYS           = {curses.KEY_F1: "make",
                       curses.KEY_F2: "model",
                       curses.KEY_F3: "price"
                       }

NEXT_PAGE_KEYS      = {curses.KEY_RIGHT, curses.KEY_NPAGE}
PREVIOUS_PAGE_KEYS  = {curses.KEY_LEFT, curses.KEY_PPAGE}

NAVIGATION_KEYS     = {curses.KEY_UP,
                       curses.KEY_DOWN,
                       curses.KEY_HOME,
                       curses.KEY_END
                       } | NEXT_PAGE_KEYS | PREVIOUS_PAGE_KEYS

BACKSPACE_KEYS      = {8, 127, curses.KEY_BACKSPACE}
ENTER_KEYS          = {10, 13, curses.KEY_ENTER}
QUIT_KEYS           = {curses.KEY_F10, CTRL_X}
