import os
import sys
from pathlib import Path


def _ensure_dev_env_for_tests():
    os.environ.setdefault("PYTHONNOUSERSITE", "1")
    os.environ.setdefault("MPLBACKEND", "Agg")

    root = Path(__file__).resolve().parents[1]
    venv = root / ".venv"
    in_venv = getattr(sys, "base_prefix", sys.prefix) != sys.prefix

    if venv.exists():
        active = Path(sys.prefix).resolve()
        if not (in_venv and str(active).startswith(str(venv.resolve()))):
            print(
                (
                    "Warning: Tests are not running under repo .venv.\n"
                    f"Active: {active}\nExpected under: {venv}\n"
                ),
                file=sys.stderr,
            )


_ensure_dev_env_for_tests()

import logging

import pytest

from py_mcdrag import BoundaryLayer, ProjectileGeometry, Settings
from py_mcdrag.logger import logger

logger.setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def restore_settings():
    Settings.restore_defaults()
    yield
    Settings.restore_defaults()


@pytest.fixture
def example_geometry() -> ProjectileGeometry:
    """7.62 mm boattailed projectile with a small rotating band."""
    return ProjectileGeometry(
        ref_diameter=7.62,
        total_length=4.0,
        nose_length=1.5,
        rt_r=1.0,
        boattail_length=0.5,
        base_diameter=0.9,
        meplat_diameter=0.0,
        band_diameter=1.02,
        cg_location=2.0,
        boundary_layer=BoundaryLayer.LAMINAR_TURBULENT,
        identification="7.62mm example",
    )


@pytest.fixture
def flat_base_geometry() -> ProjectileGeometry:
    """Blunt flat-based shell."""
    return ProjectileGeometry(
        ref_diameter=20.0,
        total_length=3.5,
        nose_length=1.0,
        rt_r=0.5,
        boattail_length=0.0,
        base_diameter=1.0,
        meplat_diameter=0.2,
        band_diameter=1.0,
        boundary_layer=BoundaryLayer.TURBULENT_TURBULENT,
        identification="20mm flat base",
    )
