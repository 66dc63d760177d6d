"""
Filename:       table_browser.py
Author:         jole
Created:        19.10.2026

Description:    Holds class definitions for TableBrowser along with attributes and methods.

Notes:
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import curses
import locale
import logging
import sys

from typing     import List, Optional

# --- Project defined
from .data              import DATA
from .draw_tui          import DrawTUI
from .defs              import (Record,
                                PAGE_SIZE,
                                DEBOUNCE_MS,
                                TICK_MS,
                                SORT_KEYS,
                                NAVIGATION_KEYS,
                                NEXT_PAGE_KEYS,
                                PREVIOUS_PAGE_KEYS,
                                BACKSPACE_KEYS,
                                ENTER_KEYS,
                                QUIT_KEYS,
                                CTRL_G,
                                ESCAPE
                                )
from .log_helper        import LOGGER_NAME, SILENT, set_stdout_threshold
from .query_state       import DerivedView
from .read_data         import ReadData, NoRecordsFoundError, DataFetchFailedError
from .table_controller  import TableController
from .tui_state         import UIState, TUITheme
# --- END OF Import section --------------------------------------------------------------------------------------------


logger = logging.getLogger(__name__)



class TableBrowser:
    """
    TableBrowser keeps the terminal side of the application together!

    Application execution steps:
        - Load the records, from the bundled dataset or from --source.
        - Hand them to a TableController, applying any initial search and sort from the command line.
        - Run the curses loop: draw the visible page, feed key presses to the controller, and let the debounced
          search fire while the user pauses typing.
    """

    def __init__(self,
                 _source:           Optional[str]   = None,
                 _page_size:        int             = PAGE_SIZE,
                 _debounce_ms:      float           = DEBOUNCE_MS,
                 _initial_search:   Optional[str]   = None,
                 _initial_sort:     Optional[str]   = None,
                 _clamp_on_change:  bool            = True
                 ) -> None:
        self.source             = _source
        self.page_size          = _page_size
        self.debounce_ms        = _debounce_ms
        self.initial_search     = _initial_search
        self.initial_sort       = _initial_sort
        self.clamp_on_change    = _clamp_on_change

        self.state              = UIState(view_height = _page_size)
        self.theme: TUITheme    = TUITheme()
        self.draw: DrawTUI      = DrawTUI()

        # --- Created in run(), once the records are loaded
        self.controller: Optional[TableController] = None
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def load_records(self) -> List[Record]:
        """
        The records to browse: the bundled dataset, or whatever --source points at.

        :raises DataFetchFailedError, NoRecordsFoundError:  From ReadData, if --source was given
        """

        if not self.source:
            return list(DATA)
        return ReadData(self.source).load()
    # --- END OF load_records() ----------------------------------------------------------------------------------------



    def setup_controller(self, _records: List[Record]) -> TableController:
        """
        Create the controller for _records and apply the command line's initial sort and search.
        """

        self.controller = TableController(_records,
                                          _page_size        = self.page_size,
                                          _debounce_ms      = self.debounce_ms,
                                          _clamp_on_change  = self.clamp_on_change)
        self.controller.subscribe(self._on_view_changed)

        if self.initial_sort:
            self.controller.on_sort_requested(self.initial_sort)
        if self.initial_search:
            self.state.search_buffer = self.initial_search
            self.controller.set_search_text(self.initial_search)

        return self.controller
    # --- END OF setup_controller() ------------------------------------------------------------------------------------



    def _on_view_changed(self, _view: DerivedView) -> None:
        # --- New page content, start at its first row
        self.state.selected = 0
    # --- END OF _on_view_changed() ------------------------------------------------------------------------------------



    def _edit_search(self, _text: str) -> None:
        self.state.search_buffer = _text
        self.controller.on_search_text_changed(_text)
    # --- END OF _edit_search() ----------------------------------------------------------------------------------------



    def _get_input(self, _stdscr, _prompt: str, _initial: str = "") -> str:
        """
        Get editable input from the user on the bottom line, with an initial value pre-filled.

        :param _stdscr:  Where to print
        :param _prompt:  Prompt shown before the text
        :param _initial: Initial text to prefill

        :return:        The entered text, or "" if the user hit Esc
        """

        curses.curs_set(1)

        # --- Block on getch() while the prompt is open, the debouncer can wait
        _stdscr.timeout(-1)

        max_y, max_x = _stdscr.getmaxyx()

        buffer: list[str]   = list(_initial)
        cursor: int         = len(buffer)

        while True:
            visible_width   = max_x - 1
            line            = (_prompt + "".join(buffer))[:visible_width]

            _stdscr.move(max_y - 1, 0)
            _stdscr.clrtoeol()
            _stdscr.addnstr(max_y - 1, 0, line, visible_width, self.theme.reversed)
            _stdscr.move(max_y - 1, max(0, min(len(_prompt) + cursor, visible_width - 1)))

            ch = _stdscr.getch()
            match ch:
                case c if c in ENTER_KEYS:
                    break

                case c if c == ESCAPE:
                    buffer = []
                    break

                case c if c in BACKSPACE_KEYS:
                    if cursor > 0:
                        cursor -= 1
                        buffer.pop(cursor)

                case curses.KEY_DC:
                    if cursor < len(buffer):
                        buffer.pop(cursor)

                case curses.KEY_LEFT:
                    if cursor > 0:
                        cursor -= 1
                case curses.KEY_RIGHT:
                    if cursor < len(buffer):
                        cursor += 1

                # Printable ASCII
                case c if 32 <= c <= 126:
                    buffer.insert(cursor, chr(c))
                    cursor += 1

                # Ignore everything else
                case _:
                    pass

        curses.curs_set(0)
        return "".join(buffer).strip()
    # --- END OF _get_input() ------------------------------------------------------------------------------------------



    def _navigate(self, _key: int) -> None:
        """
        Handles the navigation keys: up/down move the selection on the page, the other keys change page.

        :param _key:    The curses.KEY_xxx to handle

        :return:        None
        """

        # --- Rows past view_height are on the page but not on screen
        rows = min(len(self.controller.visible_page), self.state.view_height)
        match _key:
            case curses.KEY_UP if self.state.selected > 0:
                self.state.selected -= 1
            case curses.KEY_DOWN if self.state.selected < rows - 1:
                self.state.selected += 1
            case k if k in NEXT_PAGE_KEYS:
                self.controller.on_next_page()
            case k if k in PREVIOUS_PAGE_KEYS:
                self.controller.on_previous_page()
            case curses.KEY_HOME:
                self.controller.on_first_page()
            case curses.KEY_END:
                self.controller.on_last_page()
            case _:
                pass
    # --- END OF _navigate() -------------------------------------------------------------------------------------------



    def handle_key(self, _key: int, _stdscr = None) -> bool:
        """
        Act on one key press.

        :param _key:    Key code from getch()
        :param _stdscr: Screen, needed for the help screen and the jump prompt

        :return:        True if the user wants to quit
        """

        match _key:
            case k if k in QUIT_KEYS:
                return True

            case curses.KEY_F5:
                self.draw.show_help(_stdscr, self.theme)

            # --- F1/F2/F3, sort on a column (again flips the direction)
            case k if k in SORT_KEYS:
                self.controller.on_sort_requested(SORT_KEYS[k])

            case k if k in NAVIGATION_KEYS:
                self._navigate(k)

            # --- Ctrl-G, jump to page, counted from 1 as shown in the help bar
            case k if k == CTRL_G:
                answer = self._get_input(_stdscr, f"Go to page (1-{max(1, self.controller.total_pages)}): ")
                self.controller.on_jump_to_page(answer, _one_based = True)

            # --- Search now instead of waiting for the debounce
            case k if k in ENTER_KEYS:
                self.controller.flush_search()

            case k if k == ESCAPE:
                self._edit_search("")
                self.controller.flush_search()

            case k if k in BACKSPACE_KEYS:
                self._edit_search(self.state.search_buffer[:-1])

            # --- Printable ASCII goes into the search
            case k if 32 <= k <= 126:
                self._edit_search(self.state.search_buffer + chr(k))

            # --- Any other key we'll just pass
            case _:
                pass

        return False
    # --- END OF handle_key() ------------------------------------------------------------------------------------------



    def _curses_main(self, _stdscr) -> None:
        """
        This constitutes the main loop of the application.
        """

        self.theme              = TUITheme.init_theme()
        self.state.has_colors   = curses.has_colors()

        _stdscr.keypad(True)
        curses.set_escdelay(25)

        quit: bool = False
        while not quit:
            # --- Let a debounced search through before drawing
            self.controller.tick()

            max_y, _ = _stdscr.getmaxyx()
            self.state.view_height = max(1, min(self.page_size, max_y - 4))

            view = self.controller.view
            self.draw.clear_screen(_stdscr)
            self.draw.draw_header(_stdscr, self.theme, self.controller.sort_attribute, self.controller.sort_direction)
            self.draw.draw_rows(_stdscr, view.page_records, self.theme, self.state)
            self.draw.draw_search_line(_stdscr, self.state.search_buffer, self.controller.search_pending, self.theme)
            self.draw.draw_helpbar(_stdscr, view, self.theme, self.state)
            _stdscr.refresh()

            # --- Wake up every TICK_MS even without input, so the debouncer gets polled
            _stdscr.timeout(TICK_MS)
            key = _stdscr.getch()
            if key == -1:
                continue
            quit = self.handle_key(key, _stdscr)
        # --- END OF while not quit ------------------------------------------------------------------------------------
    # --- END OF _curses_main() ----------------------------------------------------------------------------------------



    def run(self) -> int:
        """
        Starting point for the application.

        :return: Exit status, 0 on a normal quit
        """

        try:
            records = self.load_records()
        except NoRecordsFoundError as e:
            print(f"No car records found in {e.source}.", file=sys.stderr)
            return 1
        except DataFetchFailedError as e:
            print(e, file = sys.stderr)
            if e.errors:
                print("Errors:", file = sys.stderr)
                for line in e.errors:
                    print(f"  - {line}", file = sys.stderr)
            return 1

        # --- Locale-aware sorting of make/model, and UTF-8 arrows in the header
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error as e:
            logger.warning(f"TableBrowser.run(): could not set locale ({e}), sorting by code point")

        self.setup_controller(records)

        # --- curses owns the terminal from here on, keep log output in the file only
        set_stdout_threshold(logging.getLogger(LOGGER_NAME), SILENT)

        curses.wrapper(self._curses_main)
        return 0
    # --- END OF run() -------------------------------------------------------------------------------------------------

# --- END OF class TableBrowser ----------------------------------------------------------------------------------------
