import logging

logger_base = logging.getLogger(__name__)
logger_base.addHandler(logging.NullHandler())
