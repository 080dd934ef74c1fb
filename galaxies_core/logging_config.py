from __future__ import annotations

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = 'galaxies_core'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None,
                  name: str = LOGGER_NAME) -> logging.Logger:
    """Configures the NAME logger with a stdout handler and an optional file handler.

    LEVEL may be a number or a level name in any case ('debug', 'INFO').
    Calling it again replaces the handlers it installed before.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f'unknown log level: {level}')
        level = resolved
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
    )
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug('logging initialised at %s', logging.getLevelName(level))
    return logger
