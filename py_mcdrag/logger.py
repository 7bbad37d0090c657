"""Logging for py_mcdrag.

All modules log through the single `py_mcdrag` logger defined here. The console
handler is attached at import and the logger starts at INFO, so a drag
evaluation is silent unless something needs the user's attention.

What is logged at each level:
    - DEBUG: every `evaluate` call (identification, boundary layer code, number
      of Mach points), each JSON input accepted by McDragCalculator, profiles
      loaded or merged, defaults changed through Settings, numbers re-prompted
      in the interactive session
    - INFO: report copies appended to the copy file, CSV tables and plots
      written by the CLI
    - WARNING: each advisory diagnostic raised for a geometry (nose too short,
      nose too blunt, boattail too long, boattail or flare too steep), and
      config files without a `pymcdrag` section
    - ERROR: rejected input in the CLI (parse errors, bad boundary layer codes,
      geometry that fails validation)

`pymcdrag -d` lowers the level to DEBUG. A file log of a session
can be kept alongside the console:

Examples:
    ```python
    from py_mcdrag import ProjectileGeometry, calculate
    from py_mcdrag.logger import enable_file_logging, disable_file_logging

    enable_file_logging("mcdrag_debug.log")
    calculate(ProjectileGeometry(7.62, 4.0, 0.8))  # NOSE TOO SHORT is logged as a warning
    disable_file_logging()
    ```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)
console_handler.setLevel(logging.DEBUG)  # Lowest level for console

logger: logging.Logger = logging.getLogger('py_mcdrag')
logger.addHandler(console_handler)
logger.setLevel(logging.INFO)

# File handler (optional, added dynamically)
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "debug.log") -> None:
    """Enable logging to a file with DEBUG level output.

    Replaces any existing file handler. The file is opened in append mode.

    Args:
        filename: Name of the log file to create. Defaults to "debug.log".
    """
    global file_handler
    if file_handler is not None:
        disable_file_logging()

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)  # Log everything to the file
    file_formatter = logging.Formatter("%(asctime)s:%(levelname)s:%(message)s")
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)


def disable_file_logging() -> None:
    """Disable file logging and close the file handle.

    Safe to call when file logging is not enabled.
    """
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
