# src/csv_to_json/__init__.py
from .config import ConverterConfig
from .destination import DestinationTarget, change_extension, resolve
from .emitter import emit
from .errors import (
    ConverterError,
    DestinationWriteError,
    InvalidConfiguration,
    MissingConfiguration,
    NoDestinationAvailable,
    RowShapeMismatch,
    SourceFetchError,
)
from .parser import parse
from .pipeline import Pipeline, Stage, first_record

__all__ = [
    "ConverterConfig",
    "ConverterError",
    "DestinationTarget",
    "DestinationWriteError",
    "InvalidConfiguration",
    "MissingConfiguration",
    "NoDestinationAvailable",
    "Pipeline",
    "RowShapeMismatch",
    "SourceFetchError",
    "Stage",
    "change_extension",
    "emit",
    "first_record",
    "parse",
    "resolve",
]
