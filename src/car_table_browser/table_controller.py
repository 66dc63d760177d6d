"""
Filename:       table_controller.py
Author:         jole
Created:        19.10.2026

Description:    TableController owns the dataset and the current QueryState, turns user events into state transitions,
                and re-derives the visible page after each one.

Notes:          The view always comes from derive(dataset, state), in this order:
                    1. start from the full dataset
                    2. filter on the search text, and count the pages from the filtered records
                    3. sort the filtered records (replaying the sort history)
                    4. cut out the current page
                Nothing is cached between transitions.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from __future__ import annotations

import logging

from typing             import Any, Callable, List, Optional, Sequence, Tuple

# --- Project defined
from .defs              import Record, PAGE_SIZE, DEBOUNCE_MS
from .debounce          import Debouncer
from .filter_and_sort   import FilterAndSort, accessor_for
from .pagination        import (total_pages,
                                clamp_page,
                                slice_page,
                                coerce_page_number,
                                next_page,
                                previous_page,
                                go_to_page
                                )
from .query_state       import DerivedView, QueryState, SortDirection
# --- END OF Import section --------------------------------------------------------------------------------------------


logger = logging.getLogger(__name__)

ViewListener = Callable[[DerivedView], None]



def derive(_dataset: Sequence[Record], _state: QueryState, _fs: Optional[FilterAndSort] = None) -> DerivedView:
    """
    Compute what the table shows for _state. Pure: same dataset and state, same view.
    """

    fs          = _fs or FilterAndSort()
    filtered    = fs.search(_state.search_text, _dataset)
    pages       = total_pages(len(filtered), _state.page_size)
    ordered     = fs.sort_by_keys(filtered, _state.sort_keys)
    page        = slice_page(ordered, _state.page_index, _state.page_size)

    return DerivedView(filtered_records = tuple(filtered),
                       sorted_records   = tuple(ordered),
                       page_records     = tuple(page),
                       total_pages      = pages,
                       page_index       = _state.page_index,
                       page_size        = _state.page_size)
# --- END OF derive() --------------------------------------------------------------------------------------------------



class TableController:
    """
        The table's state machine. UI code sends it events (search text typed, column clicked, page asked for) and
    reads visible_page, current_page and total_pages back, or subscribes to get every new DerivedView pushed to it.

        Search input is debounced: on_search_text_changed() only buffers the text, and the search runs from tick()
    once typing has paused for debounce_ms. Sort and page events apply right away.
    """

    def __init__(self,
                 _dataset:          Sequence[Record],
                 _page_size:        int                         = PAGE_SIZE,
                 _debounce_ms:      float                       = DEBOUNCE_MS,
                 _clock:            Optional[Callable[[], float]] = None,
                 _clamp_on_change:  bool                        = True
                 ) -> None:

        self.dataset: Tuple[Record, ...]    = tuple(_dataset)
        self.clamp_on_change                = _clamp_on_change
        self.fs                             = FilterAndSort()
        self.debouncer                      = Debouncer(_debounce_ms, self._apply_search, _clock)

        self._listeners: List[ViewListener] = []
        self._state                         = QueryState(page_size = _page_size)
        self._view                          = derive(self.dataset, self._state, self.fs)

        logger.debug(f"TableController: {len(self.dataset)} records, page size {_page_size}, "
                     f"{self._view.total_pages} page(s)")
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    # --- Read side ----------------------------------------------------------------------------------------------------
    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def view(self) -> DerivedView:
        return self._view

    @property
    def visible_page(self) -> Tuple[Record, ...]:
        return self._view.page_records

    @property
    def total_pages(self) -> int:
        return self._view.total_pages

    @property
    def current_page(self) -> int:
        return self._state.page_index

    @property
    def search_text(self) -> str:
        return self._state.search_text

    @property
    def sort_attribute(self) -> Optional[str]:
        return self._state.sort_attribute

    @property
    def sort_direction(self) -> Optional[SortDirection]:
        return self._state.sort_direction

    @property
    def search_pending(self) -> bool:
        return self.debouncer.pending
    # --- END OF read side ---------------------------------------------------------------------------------------------



    def subscribe(self, _listener: ViewListener) -> Callable[[], None]:
        """
        Register _listener to get every new DerivedView. Returns a callable that removes it again.
        """

        self._listeners.append(_listener)

        def unsubscribe() -> None:
            if _listener in self._listeners:
                self._listeners.remove(_listener)
        # --- END OF unsubscribe() -------------------------------------------------------------------------------------

        return unsubscribe
    # --- END OF subscribe() -------------------------------------------------------------------------------------------



    # --- Search -------------------------------------------------------------------------------------------------------
    def on_search_text_changed(self, _text: Optional[str], _now: Optional[float] = None) -> None:
        """Buffer new search text. The search itself runs from tick() when the input has been quiet long enough."""
        self.debouncer.push(_text or "", _now)
    # --- END OF on_search_text_changed() ------------------------------------------------------------------------------



    def tick(self, _now: Optional[float] = None) -> bool:
        """
        Give the debouncer a chance to fire. Called by the UI loop on every wake-up.

        :return:    True if a search ran
        """
        return self.debouncer.poll(_now)
    # --- END OF tick() ------------------------------------------------------------------------------------------------



    def flush_search(self) -> bool:
        """Run a buffered search now, e.g. when the user hits Enter."""
        return self.debouncer.flush()
    # --- END OF flush_search() ----------------------------------------------------------------------------------------



    def set_search_text(self, _text: Optional[str]) -> bool:
        """Search for _text right away, skipping the quiet window. Used for the initial --search."""
        self.debouncer.push(_text or "")
        return self.debouncer.flush()
    # --- END OF set_search_text() -------------------------------------------------------------------------------------



    def _apply_search(self, _text: str) -> None:
        new_state   = self._state.with_search(_text)
        view        = derive(self.dataset, new_state, self.fs)

        if self.clamp_on_change:
            page = clamp_page(new_state.page_index, view.total_pages)
            if page != new_state.page_index:
                logger.debug(f"TableController: page {new_state.page_index} out of range, clamped to {page}")
                new_state   = new_state.with_page(page)
                view        = derive(self.dataset, new_state, self.fs)

        logger.info(f"Search {_text!r}: {view.match_count} match(es), {view.total_pages} page(s)")
        self._publish(new_state, view)
    # --- END OF _apply_search() ---------------------------------------------------------------------------------------



    # --- Sort ---------------------------------------------------------------------------------------------------------
    def on_sort_requested(self, _attribute: str) -> None:
        """
        Sort on _attribute, or flip the direction if it already is the sorted column. Unknown columns are ignored.
        The page index is kept, sorting does not change how many records there are.
        """

        accessor = accessor_for(_attribute)
        if accessor is None:
            logger.debug(f"TableController: ignoring sort on unknown column {_attribute!r}")
            return

        self._transition(self._state.with_sort(accessor.name))
        logger.info(f"Sort on {self._state.sort_attribute} ({self._state.sort_direction.value})")
    # --- END OF on_sort_requested() -----------------------------------------------------------------------------------



    # --- Pages --------------------------------------------------------------------------------------------------------
    def on_next_page(self) -> None:
        self._transition(next_page(self._state, self.total_pages))
    # --- END OF on_next_page() ----------------------------------------------------------------------------------------



    def on_previous_page(self) -> None:
        self._transition(previous_page(self._state))
    # --- END OF on_previous_page() ------------------------------------------------------------------------------------



    def on_first_page(self) -> None:
        self._transition(go_to_page(self._state, 0, self.total_pages))
    # --- END OF on_first_page() ---------------------------------------------------------------------------------------



    def on_last_page(self) -> None:
        self._transition(go_to_page(self._state, self.total_pages - 1, self.total_pages))
    # --- END OF on_last_page() ----------------------------------------------------------------------------------------



    def on_jump_to_page(self, _page_number: Any, _one_based: bool = False) -> None:
        """
        Jump to a page number supplied from outside. Anything that isn't a whole number, or is out of range, is
        ignored.

        :param _page_number:    Raw value, e.g. the text typed into the jump prompt
        :param _one_based:      True if the user counts pages from 1, as shown on screen
        """

        target = coerce_page_number(_page_number)
        if target is not None and _one_based:
            target -= 1
        self._transition(go_to_page(self._state, target, self.total_pages))
    # --- END OF on_jump_to_page() -------------------------------------------------------------------------------------



    # --- Plumbing -----------------------------------------------------------------------------------------------------
    def _transition(self, _new_state: QueryState) -> None:
        if _new_state == self._state:
            return
        self._publish(_new_state, derive(self.dataset, _new_state, self.fs))
    # --- END OF _transition() -----------------------------------------------------------------------------------------



    def _publish(self, _state: QueryState, _view: DerivedView) -> None:
        self._state = _state
        self._view  = _view
        logger.debug(f"View: page {_view.page_index + 1}/{_view.total_pages}, "
                     f"{len(_view.page_records)} row(s) of {_view.match_count}")
        for listener in list(self._listeners):
            listener(_view)
    # --- END OF _publish() --------------------------------------------------------------------------------------------

# --- END OF class TableController -------------------------------------------------------------------------------------
