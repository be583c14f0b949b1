from .regions import LOCALE_NAMES, REGIONS, get_region

__all__ = ['LOCALE_NAMES', 'REGIONS', 'get_region']
