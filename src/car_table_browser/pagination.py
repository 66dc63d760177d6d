"""
Filename:       pagination.py
Author:         jole
Created:        19.10.2026

Description:    Page arithmetic and the page navigation transitions of a QueryState.

Notes:          Navigation outside [0, total_pages) is ignored, the state comes back unchanged. Nothing in here raises
                on bad input from the user.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import logging
import math
import re

from typing         import Any, Optional, Sequence, TypeVar

# --- Project defined
from .query_state   import QueryState
# --- END OF Import section --------------------------------------------------------------------------------------------


logger = logging.getLogger(__name__)

T = TypeVar("T")



def total_pages(_count: int, _page_size: int) -> int:
    return math.ceil(_count / _page_size)
# --- END OF total_pages() ---------------------------------------------------------------------------------------------



def clamp_page(_page_index: int, _total_pages: int) -> int:
    return max(0, min(_page_index, max(1, _total_pages) - 1))
# --- END OF clamp_page() ----------------------------------------------------------------------------------------------



def slice_page(_records: Sequence[T], _page_index: int, _page_size: int) -> Sequence[T]:
    start = _page_index * _page_size
    return _records[start:start + _page_size]
# --- END OF slice_page() ----------------------------------------------------------------------------------------------



def coerce_page_number(_raw: Any) -> Optional[int]:
    """
    Turn a page number coming from the outside (a prompt, a selector) into an int.

        Accepts ints, floats with no fractional part and strings holding an integer. Anything else gives None, which
    fails every bounds check and so ends up as a no-op.

    :param _raw:    Whatever the caller got from the user

    :return:        The page number, or None
    """

    if isinstance(_raw, bool):
        return None
    if isinstance(_raw, int):
        return _raw
    if isinstance(_raw, float):
        return int(_raw) if _raw.is_integer() else None
    if isinstance(_raw, str):
        text = _raw.strip()
        # --- ASCII digits only, int() would also take "1_0" and other scripts' digits
        if not re.fullmatch(r"[+-]?[0-9]+", text):
            return None
        return int(text)
    return None
# --- END OF coerce_page_number() --------------------------------------------------------------------------------------



def next_page(_state: QueryState, _total_pages: int) -> QueryState:
    if _state.page_index < _total_pages - 1:
        return _state.with_page(_state.page_index + 1)
    logger.debug(f"next_page(): already on last page ({_state.page_index + 1}/{_total_pages})")
    return _state
# --- END OF next_page() -----------------------------------------------------------------------------------------------



def previous_page(_state: QueryState) -> QueryState:
    if _state.page_index > 0:
        return _state.with_page(_state.page_index - 1)
    logger.debug("previous_page(): already on first page")
    return _state
# --- END OF previous_page() -------------------------------------------------------------------------------------------



def go_to_page(_state: QueryState, _target: Optional[int], _total_pages: int) -> QueryState:
    if _target is not None and 0 <= _target < _total_pages:
        return _state.with_page(_target)
    logger.debug(f"go_to_page(): ignoring page {_target!r}, {_total_pages} page(s) available")
    return _state
# --- END OF go_to_page() ----------------------------------------------------------------------------------------------
