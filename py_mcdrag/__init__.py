"""Zero-yaw drag coefficient estimation for axisymmetric projectiles (McCoy MCDRAG)."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("py_mcdrag")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"

# Standard library imports
import os
import sys

# Third-party imports
from typing_extensions import Any, Dict, Optional

# Local imports
from .logger import logger as log
from .settings import Settings

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib

CONFIG_FILE_NAMES = ('.pymcdrag.toml', 'pymcdrag.toml')


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load configuration from a .pymcdrag.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pymcdrag.toml or pymcdrag.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_pymcdrag_toml(start_dir: Optional[str] = None) -> Optional[str]:
        """Search for the config file starting from the specified directory and walking up.

        Args:
            start_dir: The directory to start searching from. Default is the current working directory.

        Returns:
            The absolute path to the config file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir or os.getcwd())
        while True:
            for name in CONFIG_FILE_NAMES:
                path = os.path.join(current_dir, name)
                if os.path.exists(path):
                    return os.path.abspath(path)

            parent_dir = os.path.dirname(current_dir)
            # If we have reached the root directory, stop searching
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        if (filepath := find_pymcdrag_toml()) is None:
            filepath = find_pymcdrag_toml(os.path.dirname(__file__))

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

        if _pymcdrag := _config.get('pymcdrag'):
            if defaults := _pymcdrag.get('defaults'):
                Settings.set_defaults(**defaults)
            elif not suppress_warnings:
                log.warning("Config has no `pymcdrag.defaults` section")
            if copy_file := _pymcdrag.get('report', {}).get('copy_file'):
                Settings.copy_file = str(copy_file)
        elif not suppress_warnings:
            log.warning("Config has no `pymcdrag` section")

    log.debug("Calculator defaults load success")


def _basic_config(filename: Optional[str] = None,
                  defaults: Optional[Dict[str, Any]] = None,
                  suppress_warnings: bool = False) -> None:
    """Load projectile field defaults from file or Mapping.

    Args:
        filename: Configuration file path
        defaults: Dictionary of ProjectileGeometry field defaults
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and defaults are provided
    """
    if filename and defaults:
        raise ValueError("Can't use defaults and config file at same time")
    if not filename and defaults:
        Settings.set_defaults(**defaults)
    else:
        # trying to load definitions from pymcdrag.toml
        _load_config(filename, suppress_warnings)


basicConfig = _basic_config

basicConfig(suppress_warnings=True)


from .boundary_layer import BoundaryLayer
from .diagnostics import Diagnostic
from .drag_model import MACH_SWEEP, MachSweepPoint, evaluate
from .drag_result import DragResult, calculate
from .exceptions import (ParseError, ProfileLoadingError, InvalidBoundaryLayerCode,
                         InvalidGeometry, MissingInput)
from .interface import McDragCalculator
from .logger import logger, enable_file_logging, disable_file_logging
from .profile_loader import load_profile, load_multiple_toml
from .projectile import ProjectileGeometry
from .report import format_report

__all__ = (
    'basicConfig',
    'Settings',
    'BoundaryLayer',
    'Diagnostic',
    'MACH_SWEEP',
    'MachSweepPoint',
    'evaluate',
    'DragResult',
    'calculate',
    'ParseError',
    'ProfileLoadingError',
    'InvalidBoundaryLayerCode',
    'InvalidGeometry',
    'MissingInput',
    'McDragCalculator',
    'logger',
    'enable_file_logging',
    'disable_file_logging',
    'load_profile',
    'load_multiple_toml',
    'ProjectileGeometry',
    'format_report',
)
