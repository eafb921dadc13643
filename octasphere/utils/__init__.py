"""
Utility functions for Octasphere.

.. currentmodule:: octasphere.utils

.. autosummary::

    bounds.Bounds
    export.MeshExporter
    export.export_obj
    transform.rotate

"""

import os
import logging


logger = logging.getLogger("octasphere")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("OCTASPHERE_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid octasphere log level: {level}")


_set_log_level()
