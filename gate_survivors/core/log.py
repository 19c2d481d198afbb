# core/log.py
import logging

from gate_survivors.core.settings import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
