# #!/usr/bin/env python

"""setup.py script for py_mcdrag library

Set PY_MCDRAG_MYPYC=1 to compile the pure python modules with mypyc.
"""

import os
import warnings

from setuptools import setup


def check_compiler():
    if os.environ.get("PY_MCDRAG_MYPYC") != "1":
        return False
    try:
        from distutils import ccompiler
        from distutils.errors import DistutilsError
    except ImportError as err:
        warnings.warn(f"Can't compile c-extension due to: {err}")
        return False
    try:
        comp = ccompiler.new_compiler(dry_run=True)
        comp.compile([])
        return True
    except DistutilsError as err:
        warnings.warn(f"Can't compile c-extension due to: {err}")
        warnings.warn("Continue installation in pure python mode")
        return False


def get_ext_modules():
    if not check_compiler():
        return None
    from mypyc.build import mypycify
    return mypycify(
        [
            'py_mcdrag/drag_model.py',
            'py_mcdrag/diagnostics.py',
        ],
    )


setup(
    ext_modules=get_ext_modules()
)
