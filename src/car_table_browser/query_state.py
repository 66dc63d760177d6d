"""
Filename:       query_state.py
Author:         jole
Created:        19.10.2026

Description:    Immutable state values driving what the table shows: the query (search, sort, page) and the view
                derived from it.

Notes:          A QueryState is never changed in place. Every transition returns a new instance, which makes each
                step of the controller testable on its own.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from __future__ import annotations

from dataclasses    import dataclass, replace
from enum           import Enum
from typing         import Optional, Tuple

# --- Project defined
from .defs          import Record, PAGE_SIZE
# --- END OF Import section --------------------------------------------------------------------------------------------



class SortDirection(Enum):
    ASCENDING   = "asc"
    DESCENDING  = "desc"

    def flipped(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING
    # --- END OF flipped() ---------------------------------------------------------------------------------------------
# --- END OF class SortDirection ---------------------------------------------------------------------------------------



@dataclass(frozen=True)
class SortKey:
    attribute:  str
    direction:  SortDirection = SortDirection.ASCENDING
# --- END OF class SortKey ---------------------------------------------------------------------------------------------



@dataclass(frozen=True)
class QueryState:
    """
        Search text, sort and page of the table. The sort is kept as a short history, oldest first, where the last
    entry is the active sort. Replaying the history as stable sorts lets equal keys keep the order a previous sort
    gave them, the same way the rows looked on screen before the user clicked the new column.
    """
    search_text:    str                     = ""
    sort_keys:      Tuple[SortKey, ...]     = ()
    page_index:     int                     = 0
    page_size:      int                     = PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.page_index < 0:
            raise ValueError(f"page_index must not be negative, got {self.page_index}")
    # --- END OF __post_init__() ---------------------------------------------------------------------------------------



    @property
    def sort_attribute(self) -> Optional[str]:
        return self.sort_keys[-1].attribute if self.sort_keys else None
    # --- END OF sort_attribute() --------------------------------------------------------------------------------------



    @property
    def sort_direction(self) -> Optional[SortDirection]:
        return self.sort_keys[-1].direction if self.sort_keys else None
    # --- END OF sort_direction() --------------------------------------------------------------------------------------



    def with_search(self, _text: Optional[str]) -> "QueryState":
        return replace(self, search_text = _text or "")
    # --- END OF with_search() -----------------------------------------------------------------------------------------



    def with_sort(self, _attribute: str) -> "QueryState":
        """
        Clicking the active column flips its direction, any other column becomes the active one, ascending.

        :param _attribute:  Field name to sort on, already resolved to its canonical name

        :return:            The new state
        """

        if self.sort_attribute == _attribute:
            active = SortKey(_attribute, self.sort_direction.flipped())
        else:
            active = SortKey(_attribute, SortDirection.ASCENDING)

        # --- Earlier sorts on the same column have no effect any more, the new one decides all ties on it
        history = tuple(k for k in self.sort_keys if k.attribute != _attribute)
        return replace(self, sort_keys = history + (active,))
    # --- END OF with_sort() -------------------------------------------------------------------------------------------



    def with_page(self, _page_index: int) -> "QueryState":
        return replace(self, page_index = _page_index)
    # --- END OF with_page() -------------------------------------------------------------------------------------------

# --- END OF class QueryState ------------------------------------------------------------------------------------------



@dataclass(frozen=True)
class DerivedView:
    """What the table shows for one QueryState: filtered -> sorted -> one page of it."""
    filtered_records:   Tuple[Record, ...]  = ()
    sorted_records:     Tuple[Record, ...]  = ()
    page_records:       Tuple[Record, ...]  = ()
    total_pages:        int                 = 0
    page_index:         int                 = 0
    page_size:          int                 = PAGE_SIZE

    @property
    def match_count(self) -> int:
        return len(self.filtered_records)
    # --- END OF match_count() -----------------------------------------------------------------------------------------

# --- END OF class DerivedView -----------------------------------------------------------------------------------------
