# --- file: __init__.py

# --- Import section ---------------------------------------------------------------------------------------------------
import argparse
import logging
import sys

from .defs              import (ARGUMENT_EPILOG,
                                ARGUMENT_DESCRIPTION,
                                ARGUMENT_FORMATTER_CLASS,
                                PAGE_SIZE,
                                DEBOUNCE_MS,
                                DEFAULT_LOG_FILE,
                                FIELDS
                                )
from .log_helper        import setup_logger
from .table_browser     import TableBrowser
from .table_controller  import TableController, derive
# --- END OF Import section --------------------------------------------------------------------------------------------



# --- Version (managed by setuptools-scm)
try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0"



def _positive_int(_text: str) -> int:
    value = int(_text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value
# --- END OF _positive_int() -------------------------------------------------------------------------------------------



def build_arg_parser() -> argparse.ArgumentParser:
    """
    Possible command line arguments:
        * --source      {html file or http(s) url with a make/model/price table}, defaults to the bundled cars
        * --page-size   {rows per page}, defaults to 10
        * --debounce    {search delay in ms}, defaults to 300
        * --search      {initial search text}
        * --sort        {make, model, price}, initial sort column
        * --lazy-clamp  keep the page number as is when a search shrinks the result
        * --log-file, --log-level
    """

    arg_parser = argparse.ArgumentParser(description=ARGUMENT_DESCRIPTION,
                                         epilog=ARGUMENT_EPILOG,
                                         formatter_class=ARGUMENT_FORMATTER_CLASS)

    arg_parser.add_argument("--version",
                            action="version",
                            version=f"%(prog)s {__version__}")
    arg_parser.add_argument("--source",
                            type=str,
                            help="HTML file or URL holding a Make/Model/Price table (default: bundled cars)")
    arg_parser.add_argument("--page-size",
                            type=_positive_int,
                            default=PAGE_SIZE,
                            help=f"Rows per page (default: {PAGE_SIZE})")
    arg_parser.add_argument("--debounce",
                            type=_positive_int,
                            default=DEBOUNCE_MS,
                            help=f"Milliseconds of typing pause before the search runs (default: {DEBOUNCE_MS})")
    arg_parser.add_argument("--search",
                            type=str,
                            help="Initial search text (optional)")
    arg_parser.add_argument("--sort",
                            choices=FIELDS,
                            help="Initial sort column, ascending (optional)")
    arg_parser.add_argument("--lazy-clamp",
                            action="store_true",
                            help="Don't pull the page number back into range after a search")
    arg_parser.add_argument("--log-file",
                            type=str,
                            default=DEFAULT_LOG_FILE,
                            help=f"Log file (default: {DEFAULT_LOG_FILE})")
    arg_parser.add_argument("--log-level",
                            choices=("DEBUG", "INFO", "WARNING", "ERROR"),
                            default="INFO",
                            help="Level written to the log file (default: INFO)")
    return arg_parser
# --- END OF build_arg_parser() ----------------------------------------------------------------------------------------



# --- Main entry point (used by pyproject.toml [project.scripts])
def main() -> None:
    """
    CLI entry point.
    """

    args = build_arg_parser().parse_args()

    setup_logger(args.log_file, _file_level = getattr(logging, args.log_level))

    tb: TableBrowser = TableBrowser(_source             = args.source,
                                    _page_size          = args.page_size,
                                    _debounce_ms        = args.debounce,
                                    _initial_search     = args.search,
                                    _initial_sort       = args.sort,
                                    _clamp_on_change    = not args.lazy_clamp)

    sys.exit(tb.run())

__all__ = [
    "__version__",
    "main",
    "build_arg_parser",
    "TableBrowser",
    "TableController",
    "derive"
]
