"""
Filename:       filter_and_sort.py
Author:         jole
Created:        19.10.2026

Description:    Searching and sorting the car records.

Notes:          Fields are looked up through FIELD_ACCESSORS, never by indexing a record with whatever name the caller
                passes in. An unknown field name resolves to None and the caller treats it as "no sort".
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from __future__ import annotations

import locale
import logging

from dataclasses    import dataclass
from functools      import cmp_to_key
from typing         import Any, Callable, Dict, List, Optional, Sequence

# --- Project defined
from .defs          import Record
from .query_state   import SortDirection, SortKey
# --- END OF Import section --------------------------------------------------------------------------------------------


logger = logging.getLogger(__name__)

TEXT    = "text"
NUMBER  = "number"



@dataclass(frozen=True)
class FieldAccessor:
    name:   str
    kind:   str                             # TEXT | NUMBER
    getter: Callable[[Record], Any]
# --- END OF class FieldAccessor ---------------------------------------------------------------------------------------



def _field(_name: str) -> Callable[[Record], Any]:
    return lambda r: r.get(_name)
# --- END OF _field() --------------------------------------------------------------------------------------------------



FIELD_ACCESSORS: Dict[str, FieldAccessor] = {"make":  FieldAccessor("make",  TEXT,   _field("make")),
                                             "model": FieldAccessor("model", TEXT,   _field("model")),
                                             "price": FieldAccessor("price", NUMBER, _field("price")),
                                             }



def accessor_for(_attribute: Optional[str]) -> Optional[FieldAccessor]:
    """Resolve a column name, as typed or clicked by the user, to its accessor. Unknown names give None."""
    if not isinstance(_attribute, str):
        return None
    return FIELD_ACCESSORS.get(_attribute.strip().lower())
# --- END OF accessor_for() --------------------------------------------------------------------------------------------



def is_number(_value: Any) -> bool:
    return isinstance(_value, (int, float)) and not isinstance(_value, bool)
# --- END OF is_number() -----------------------------------------------------------------------------------------------



def number_text(_value: Any) -> str:
    """
    Decimal text of a number the way it is shown in the table: 25000.0 reads "25000", 25000.5 reads "25000.5".
    """
    if isinstance(_value, float) and _value.is_integer():
        return str(int(_value))
    return str(_value)
# --- END OF number_text() ---------------------------------------------------------------------------------------------



def compare_values(_a: Any, _b: Any) -> int:
    """
    Compare two cell values of the same column.

        Two strings compare with the current locale's collation, two numbers by their difference. Any other pair
    (a string against a number, a missing value) compares as equal, so it never moves rows around and never raises.

    :return:    negative, zero or positive
    """

    if isinstance(_a, str) and isinstance(_b, str):
        c = locale.strcoll(_a, _b)
        return (c > 0) - (c < 0)
    if is_number(_a) and is_number(_b):
        diff = _a - _b
        return (diff > 0) - (diff < 0)
    return 0
# --- END OF compare_values() ------------------------------------------------------------------------------------------



class FilterAndSort:
    """
    Single place for:
      - matching the search text against records
      - sorting records on one column, or replaying a whole sort history
    """



    def search(self, _text: Optional[str], _records: Sequence[Record]) -> Sequence[Record]:
        """
        Keep the records where any field matches _text. Text fields match a case-insensitive substring, the price
        matches when its decimal text contains _text.

        :param _text:       Raw search text, empty or None matches everything
        :param _records:    Records to search, in display order

        :return:            _records itself when there is no search text, otherwise a new list in the same order
        """

        if not _text:
            return _records

        pred = self._predicate_any_field_contains(_text)
        return [r for r in _records if pred(r)]
    # --- END OF search() ----------------------------------------------------------------------------------------------



    def sort(self,
             _attribute:    str,
             _records:      Sequence[Record],
             _direction:    SortDirection = SortDirection.ASCENDING
             ) -> List[Record]:
        """
        Stable sort of _records on one column. Descending negates the comparison instead of reversing the result,
        so equal keys keep their incoming order in both directions.

        :return:    A new list, _records is left untouched
        """

        accessor = accessor_for(_attribute)
        if accessor is None:
            logger.debug(f"FilterAndSort.sort(): unknown column {_attribute!r}, order kept")
            return list(_records)

        sign = -1 if _direction is SortDirection.DESCENDING else 1
        get  = accessor.getter
        return sorted(_records, key = cmp_to_key(lambda a, b: sign * compare_values(get(a), get(b))))
    # --- END OF sort() ------------------------------------------------------------------------------------------------



    def sort_by_keys(self, _records: Sequence[Record], _sort_keys: Sequence[SortKey]) -> Sequence[Record]:
        """
        Replay a sort history, oldest first. With no history the records come back unchanged.
        """

        result = _records
        for key in _sort_keys:
            result = self.sort(key.attribute, result, key.direction)
        return result
    # --- END OF sort_by_keys() ----------------------------------------------------------------------------------------



    def _predicate_any_field_contains(self, _needle: str) -> Callable[[Record], bool]:
        n = _needle.lower()

        def field_matches(_accessor: FieldAccessor, _r: Record) -> bool:
            value = _accessor.getter(_r)
            if _accessor.kind == TEXT:
                return isinstance(value, str) and n in value.lower()
            # --- digits have no case, match the raw text
            return is_number(value) and _needle in number_text(value)
        # --- END OF field_matches() -----------------------------------------------------------------------------------

        return lambda r: any(field_matches(a, r) for a in FIELD_ACCESSORS.values())
    # --- END OF _predicate_any_field_contains() -----------------------------------------------------------------------

# --- END OF class FilterAndSort ---------------------------------------------------------------------------------------
