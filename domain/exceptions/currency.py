class CurrencyException(Exception):
    pass


class ProviderError(CurrencyException):
    pass

class RegionLookupError(CurrencyException):
    pass
