"""
Filename:       car_table_parser.py
Author:         jole
Created:        19.10.2026

Description:    Turn an HTML page holding a table of cars into records.

Notes:          The table needs a header row naming Make, Model and Price, in any order and any case. Extra columns
                are ignored. Rows with missing cells or a price that isn't a number are skipped.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import logging
import re

from typing     import Dict, List, Optional, Union
from bs4        import BeautifulSoup

# --- Project defined
from .defs      import Record, FIELDS
# --- END OF Import section --------------------------------------------------------------------------------------------


logger = logging.getLogger(__name__)



def parse_price(_text: str) -> Optional[Union[int, float]]:
    """
    Read a price cell. Currency signs, spaces and thousands separators are dropped: "$25,000" -> 25000,
    "27 995.50" -> 27995.5. Returns None for anything that isn't a number.
    """

    cleaned = re.sub(r"[^\d.\-]", "", _text or "")
    if not re.fullmatch(r"-?\d+(\.\d+)?", cleaned):
        return None
    value = float(cleaned)
    return int(value) if value.is_integer() else value
# --- END OF parse_price() ---------------------------------------------------------------------------------------------



class CarTableParser:

    def __init__(self,
                 _soup:     BeautifulSoup,
                 ) -> None:

        # --- Assign instance attributes from params
        self.soup = _soup
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def parse(self) -> List[Record]:
        """
        Parse the first table on the page that has all the columns we need.

        :return:    List of records, in page order. Empty if no usable table was found.
        """

        for table in self.soup.find_all("table"):
            rows = table.find_all("tr")
            if not rows:
                continue

            columns = self._column_index(rows[0])
            if columns is None:
                continue

            return self._parse_rows(rows[1:], columns)

        logger.debug("CarTableParser.parse(): no table with make/model/price columns found")
        return []
    # --- END OF parse() -----------------------------------------------------------------------------------------------



    def _column_index(self, _header_row) -> Optional[Dict[str, int]]:
        """
        Map each field to its column in the table, using the header cells (th, or td on tables without th).
        """

        titles  = [c.get_text(strip=True).lower() for c in _header_row.find_all(["th", "td"])]
        index   = {f: titles.index(f) for f in FIELDS if f in titles}
        if len(index) != len(FIELDS):
            return None
        return index
    # --- END OF _column_index() ---------------------------------------------------------------------------------------



    def _parse_rows(self, _rows, _columns: Dict[str, int]) -> List[Record]:
        parsed: List[Record] = []
        needed = max(_columns.values()) + 1

        for r in _rows:
            tds = r.find_all("td")
            if len(tds) < needed:
                continue

            price = parse_price(tds[_columns["price"]].get_text(strip=True))
            if price is None:
                logger.debug(f"CarTableParser: skipping row with price {tds[_columns['price']].get_text(strip=True)!r}")
                continue

            parsed.append({"make":  tds[_columns["make"]].get_text(strip=True),
                           "model": tds[_columns["model"]].get_text(strip=True),
                           "price": price})
        return parsed
    # --- END OF _parse_rows() -----------------------------------------------------------------------------------------

# --- END OF class CarTableParser --------------------------------------------------------------------------------------
