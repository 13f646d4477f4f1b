# src/csv_to_json/errors.py
class ConverterError(Exception):
    """Base class for every failure that aborts a conversion run."""


class InvalidConfiguration(ConverterError):
    pass


class MissingConfiguration(ConverterError):
    pass


class SourceFetchError(ConverterError):
    pass


class RowShapeMismatch(ConverterError):
    """A data row whose field count differs from the header's.

    line_number is 1-based with the header as line 1; blank lines are not counted.
    """

    def __init__(self, line_number: int, expected: int, actual: int):
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid CSV format: Line {line_number} has {actual} values but should have {expected}"
        )


class NoDestinationAvailable(ConverterError):
    pass


class DestinationWriteError(ConverterError):
    pass
