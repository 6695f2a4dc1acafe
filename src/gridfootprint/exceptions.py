"""Error taxonomy for footprint calculation."""


class FootprintError(Exception): ...


class PeriodError(FootprintError, ValueError): ...


class ConfigError(FootprintError, ValueError): ...


class IntervalKeyError(FootprintError, ValueError): ...


class SourceError(FootprintError):
    """A data source failed to return usable data."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source


class TransportError(SourceError): ...


class NoDataError(SourceError): ...
