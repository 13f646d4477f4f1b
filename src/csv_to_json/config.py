# src/csv_to_json/config.py
import logging
import os
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional

from .errors import InvalidConfiguration, MissingConfiguration

STRATEGIES = ("fixed", "env", "discover")

DEFAULT_DELIMITER = ","
DEFAULT_STRATEGY = "discover"
DEFAULT_DESTINATION_ENV_VAR = "OUTPUT_BUCKET"
DEFAULT_DESTINATION_PREFIX = "m346-csv-to-json-output-"
REGION = os.getenv("AWS_REGION", "us-east-1")


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    # unknown names come back as "Level X"
    return level if isinstance(level, int) else logging.INFO


LOG_LEVEL = _log_level(os.getenv("LOG_LEVEL", "INFO"))


def _get_bool(env: Mapping[str, str], name: str, default: str = "false") -> bool:
    return env.get(name, default).strip().lower() in {"1", "true", "yes", "y"}


def _get_set(env: Mapping[str, str], name: str) -> FrozenSet[str]:
    raw = env.get(name, "")
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class ConverterConfig:
    trim_values: bool
    delimiter: str = DEFAULT_DELIMITER
    destination_strategy: str = DEFAULT_STRATEGY
    # bucket name for "fixed"
    destination_name: str = ""
    # variable looked up at resolution time for "env"
    destination_env_var: str = DEFAULT_DESTINATION_ENV_VAR
    destination_prefix: str = DEFAULT_DESTINATION_PREFIX
    source_allow_list: FrozenSet[str] = field(default_factory=frozenset)

    def validate(self) -> "ConverterConfig":
        if not self.delimiter:
            raise MissingConfiguration("CSV_DELIMITER must not be empty")
        if self.destination_strategy not in STRATEGIES:
            raise InvalidConfiguration(
                f"Unknown destination strategy '{self.destination_strategy}', "
                f"expected one of {', '.join(STRATEGIES)}"
            )
        if self.destination_strategy == "fixed" and not self.destination_name:
            raise MissingConfiguration("DESTINATION_BUCKET is required for the 'fixed' strategy")
        if self.destination_strategy == "env" and not self.destination_env_var:
            raise MissingConfiguration("DESTINATION_BUCKET_ENV is required for the 'env' strategy")
        if self.destination_strategy == "discover" and not self.destination_prefix:
            raise MissingConfiguration("DESTINATION_PREFIX is required for the 'discover' strategy")
        return self

    def allows(self, bucket: str) -> bool:
        return not self.source_allow_list or bucket in self.source_allow_list

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ConverterConfig":
        env = os.environ if env is None else env
        return cls(
            trim_values=_get_bool(env, "TRIM_VALUES", "true"),
            delimiter=env.get("CSV_DELIMITER", DEFAULT_DELIMITER),
            destination_strategy=env.get("DESTINATION_STRATEGY", DEFAULT_STRATEGY).strip().lower(),
            destination_name=env.get("DESTINATION_BUCKET", "").strip(),
            destination_env_var=env.get("DESTINATION_BUCKET_ENV", DEFAULT_DESTINATION_ENV_VAR).strip(),
            destination_prefix=env.get("DESTINATION_PREFIX", DEFAULT_DESTINATION_PREFIX).strip(),
            source_allow_list=_get_set(env, "SOURCE_ALLOW_LIST"),
        ).validate()
