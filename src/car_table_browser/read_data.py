"""
Filename:       read_data.py
Author:         jole
Created:        19.10.2026

Description:    Load the records for the table from somewhere else than the bundled dataset: a local HTML file, or an
                http(s) URL.

Notes:          Downloads stream with progress feedback on stdout and retry timeouts/connection errors with a doubling
                backoff. Anything that still goes wrong ends up as a DataFetchFailedError.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import logging
import time
import requests

from pathlib    import Path
from bs4        import BeautifulSoup
from typing     import Callable, List, Optional

# --- Project defined
from .defs              import Record
from .car_table_parser  import CarTableParser
from .log_helper        import NOTICE  # noqa: F401
# --- END OF Import section --------------------------------------------------------------------------------------------


logger = logging.getLogger(__name__)



class DataFetchFailedError(Exception):
    """Nothing could be read from the source."""

    def __init__(self, _source: str, _errors: Optional[List[str]] = None) -> None:
        self.source = _source
        self.errors = list(_errors or [])
        super().__init__(f"Could not load records from {_source}")
# --- END OF class DataFetchFailedError --------------------------------------------------------------------------------



class NoRecordsFoundError(Exception):
    """The source was read, but holds no table of cars."""

    def __init__(self, _source: str) -> None:
        self.source = _source
        super().__init__(f"No car records found in {_source}")
# --- END OF class NoRecordsFoundError ---------------------------------------------------------------------------------



def is_url(_source: str) -> bool:
    return _source.lower().startswith(("http://", "https://"))
# --- END OF is_url() --------------------------------------------------------------------------------------------------



class ReadData:

    """
    Reads the car table from a file or URL, parses it, and hands back the records.
    """


    def __init__(self,
                 _source:   str,
                 _feedback: bool = True,
                 ) -> None:

        self.source     = _source
        self.feedback   = _feedback
    # --- END OF __init__() method, or constructor if you like ---------------------------------------------------------



    def load(self) -> List[Record]:
        """
            The calling function from the outside. Reads self.source, runs it through BeautifulSoup and the table
        parser, and returns the records.

        :return:                        List of records, in table order
        :raises DataFetchFailedError:   If the source can't be read
        :raises NoRecordsFoundError:    If the source holds no usable table
        """

        html    = self._fetch_url() if is_url(self.source) else self._read_file()
        records = CarTableParser(BeautifulSoup(html, "html.parser")).parse()

        if not records:
            raise NoRecordsFoundError(self.source)

        logger.notice(f"Loaded {len(records)} records from {self.source}")
        return records
    # --- END OF load() ------------------------------------------------------------------------------------------------



    def _read_file(self) -> str:
        try:
            return Path(self.source).read_text(encoding = "utf-8", errors = "replace")
        except OSError as exc:
            logger.error(f"ReadData._read_file(): {exc}")
            raise DataFetchFailedError(self.source, [str(exc)]) from exc
    # --- END OF _read_file() ------------------------------------------------------------------------------------------



    def _fetch_url(self) -> str:
        cb = self._status_inline if self.feedback else None
        try:
            return self._get_text_with_progress_retry(self.source, _status_cb = cb)
        except requests.RequestException as exc:
            logger.error(f"ReadData._fetch_url(): Error fetching {self.source}: {exc}")
            raise DataFetchFailedError(self.source, [f"{exc.__class__.__name__}: {exc}"]) from exc
    # --- END OF _fetch_url() ------------------------------------------------------------------------------------------



    def _status_inline(self, msg: str) -> None:
        """
        Used as callback in _get_text_with_progress(). Prints the download progress to stdout, on one line.

        :param msg: The message to print to stdout
        :return:    None
        """

        print(f"\r{msg}", end="", flush=True)
    # --- END OF _status_inline() --------------------------------------------------------------------------------------



    def _get_text_with_progress(self,
                                _url: str,
                                *, _timeout=(5, 20),
                                _status_cb: Optional[Callable[[str], None]] = None,
                                _chunk_size: int = 65536,
                                _min_update_interval: float = 0.10
                                ) -> str:
        """
            Download text content from a URL with progress reporting.

            This method streams the response in chunks, periodically invoking a
            callback with download status messages. Returns the entire response
            body decoded as text.

            :param _url:                    The URL to fetch.
            :param _timeout:                (connect_timeout, read_timeout) in seconds.
            :param _status_cb:              Optional callback taking a str; called with progress updates.
            :param _chunk_size:             Number of bytes to read per chunk (default 64 KB).
            :param _min_update_interval:    Minimum seconds between status callbacks (default 0.1).
            :return:                        The full response body as decoded text (usually HTML).
            :raises DataFetchFailedError:   If the server responds with an HTTP error.
        """

        UA = "Mozilla/5.0 (compatible; CarTableBrowser/1.0)"
        cb = _status_cb or (lambda _msg: None)

        with requests.get(_url, stream=True, timeout=_timeout, headers={"User-Agent": UA}) as r:
            try:
                r.raise_for_status()
            except requests.HTTPError as e:
                raise DataFetchFailedError(_url, [f"HTTP {r.status_code} {r.reason} for {r.url}"]) from e

            # --- content length, may be missing or non-numeric
            try:
                total = int(r.headers.get("Content-Length", ""))
            except ValueError:
                total = None

            got         = 0
            chunks      = []
            last_emit   = 0.0

            for chunk in r.iter_content(chunk_size=_chunk_size):
                if not chunk:
                    continue
                chunks.append(chunk)
                got += len(chunk)

                now = time.monotonic()
                if now - last_emit >= _min_update_interval:
                    if total:
                        cb(f"Downloading… {got}/{total} bytes ({got / total * 100:.1f}%)")
                    else:
                        cb(f"Downloading… {got} bytes")
                    last_emit = now

            cb(f"Download complete: {got} bytes.\n")
            logger.debug(f"ReadData._get_text_with_progress(): {got} bytes from {_url}")

            # --- Pick a sensible encoding
            enc = r.encoding or r.apparent_encoding or "utf-8"
            try:
                return b"".join(chunks).decode(enc, errors="replace")
            except LookupError:
                # --- Unknown codec name, fall back to utf-8
                return b"".join(chunks).decode("utf-8", errors="replace")
    # --- END OF _get_text_with_progress() -----------------------------------------------------------------------------



    def _get_text_with_progress_retry(self,
                                      _url: str,
                                      *,
                                      _retries: int = 2,
                                      _backoff: float = 0.5,
                                      _status_cb: Optional[Callable[[str],None]] = None,
                                      **_kwargs,
                                      ) -> str:
        """
        Same as _get_text_with_progress(), retrying timeouts and connection errors _retries times, doubling the
        wait between attempts. Other errors, and the last failure, propagate.
        """

        cb = _status_cb or (lambda _msg: None)
        for attempt in range(_retries + 1):
            try:
                return self._get_text_with_progress(_url, _status_cb = cb, **_kwargs)
            except (requests.Timeout, requests.ConnectionError) as e:
                if attempt < _retries:
                    logger.notice(f"ReadData: {e.__class__.__name__}: {e}. Retrying in {_backoff:.1f}s…")
                    cb(f"{e.__class__.__name__}: {e}. Retrying in {_backoff:.1f}s…")
                    time.sleep(_backoff)
                    _backoff *= 2
                else:
                    raise
    # --- END OF _get_text_with_progress_retry() -----------------------------------------------------------------------
# --- END OF class ReadData --------------------------------------------------------------------------------------------
