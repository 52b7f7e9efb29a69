class TaceaKPIError(Exception):
    """Base class for errors raised by the KPI engine."""


class UnknownFieldError(TaceaKPIError, ValueError):
    def __init__(self, field: str):
        super().__init__(f"Unknown counter field: {field!r}")
        self.field = field


class UnknownPresetError(TaceaKPIError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Unknown preset: {name!r}")
        self.name = name


class PersistenceError(TaceaKPIError):
    """Raised by a persistence gateway when the backing store cannot be read or written."""
