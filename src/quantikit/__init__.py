import logging

from . import units

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ['units']
