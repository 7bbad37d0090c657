"""Load projectile geometry from TOML profiles.

A profile holds a `[projectile]` table whose keys are ProjectileGeometry
field names:

```toml
[projectile]
identification = "7.62mm M80 ball"
ref_diameter = 7.62
total_length = 3.98
nose_length = 2.03
rt_r = 0.9
boattail_length = 0.5
base_diameter = 0.848
meplat_diameter = 0.1
band_diameter = 1.0
cg_location = 2.3
boundary_layer = "L/T"
```

Omitted optional keys fall back to `Settings` defaults.
"""
import os
import sys

from typing_extensions import Any, Dict, Union

from py_mcdrag.exceptions import ParseError, ProfileLoadingError
from py_mcdrag.logger import logger
from py_mcdrag.projectile import ProjectileGeometry, REQUIRED_FIELDS

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib

__all__ = ('ProfileLoadingError', 'load_multiple_toml', 'load_profile', 'parse_profile')

PathType = Union[str, 'os.PathLike[str]']


def _load_toml(path: PathType) -> Dict[str, Any]:
    try:
        with open(path, "rb") as fp:
            return tomllib.load(fp)
    except OSError as exc:
        raise ProfileLoadingError(f"Can't read profile {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ProfileLoadingError(f"Invalid TOML in {path}: {exc}") from exc


def parse_profile(profile: Dict[str, Any], source: str = '<profile>') -> ProjectileGeometry:
    """Build geometry from an already decoded profile document.

    Raises:
        ProfileLoadingError: If the `projectile` table is missing or malformed
        InvalidBoundaryLayerCode: If boundary_layer is not recognized
        InvalidGeometry: If the geometry violates a model precondition
    """
    if (projectile := profile.get('projectile')) is None:
        raise ProfileLoadingError(f"Required section 'projectile' not found in {source}")
    if not_provided := [key for key in REQUIRED_FIELDS if key not in projectile]:
        raise ProfileLoadingError(f"Required properties {not_provided} are not presented in {source}")
    try:
        geometry = ProjectileGeometry.from_dict(projectile, section='projectile')
    except ParseError as exc:
        raise ProfileLoadingError(f"{source}: {exc}") from exc
    logger.debug(f"Loaded {geometry.identification or 'projectile'} from {source}")
    return geometry


def load_profile(path: PathType) -> ProjectileGeometry:
    """Load geometry from a single TOML profile."""
    return parse_profile(_load_toml(path), os.fspath(path))


def load_multiple_toml(*paths: PathType) -> ProjectileGeometry:
    """Merge the `projectile` tables of several profiles, later files win, and parse the result."""
    if not paths:
        raise ProfileLoadingError("No profile files given")
    merged: Dict[str, Any] = {}
    for path in paths:
        logger.debug(f"Loading profile {path}")
        merged.update(_load_toml(path).get('projectile', {}))
    return parse_profile({'projectile': merged}, ", ".join(os.fspath(p) for p in paths))
