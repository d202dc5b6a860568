class ScanInputError(ValueError):
    """Bad range or port argument. Raised before any probe is dispatched."""


class InvalidInput(ScanInputError):
    pass


class InvalidFormat(ScanInputError):
    pass


class InvalidAddress(ScanInputError):
    pass


class InvalidPort(ScanInputError):
    pass


class RangeOrderError(ScanInputError):
    pass
