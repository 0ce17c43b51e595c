# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler

from phasechart.configuration import APP_NAME


def configure_logging(verbose: bool = False) -> None:
    """Route the package's log records through rich, once per process."""
    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
