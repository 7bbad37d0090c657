"""Global settings of the py_mcdrag library"""
from typing_extensions import Any, ClassVar, Dict

from py_mcdrag.boundary_layer import BoundaryLayer
from py_mcdrag.logger import logger

__all__ = ('Settings',)


class Settings:  # pylint: disable=too-few-public-methods
    """Global settings class of the py_mcdrag library.

    Holds the defaults used for optional projectile fields when an input record
    (TOML profile or JSON request) leaves them out, and the report copy file.
    """

    DEFAULTS: ClassVar[Dict[str, Any]] = {
        'rt_r': 0.0,
        'boattail_length': 0.0,
        'base_diameter': 1.0,
        'meplat_diameter': 0.0,
        'band_diameter': 1.0,
        'cg_location': 0.0,
        'boundary_layer': BoundaryLayer.LAMINAR_TURBULENT,
        'identification': '',
    }
    _defaults: ClassVar[Dict[str, Any]] = dict(DEFAULTS)

    COPY_FILE: ClassVar[str] = 'mcdrag.txt'
    copy_file: ClassVar[str] = COPY_FILE

    @classmethod
    def set_defaults(cls, **kwargs: Any) -> None:
        """Override the defaults of optional projectile fields.

        Raises:
            KeyError: If a field has no default
        """
        for key, value in kwargs.items():
            if key not in cls.DEFAULTS:
                raise KeyError(f"'{key}' has no configurable default")
            if key == 'boundary_layer':
                value = BoundaryLayer.parse(value)
            elif key != 'identification':
                value = float(value)
            logger.debug(f"Settings default {key}={value}")
            cls._defaults[key] = value

    @classmethod
    def get_default(cls, key: str) -> Any:
        return cls._defaults[key]

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        return dict(cls._defaults)

    @classmethod
    def restore_defaults(cls) -> None:
        cls._defaults = dict(cls.DEFAULTS)
        cls.copy_file = cls.COPY_FILE
