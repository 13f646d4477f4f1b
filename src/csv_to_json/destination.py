# src/csv_to_json/destination.py
import logging
import os
from typing import Callable, Dict, Mapping, NamedTuple, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .config import ConverterConfig
from .errors import MissingConfiguration, NoDestinationAvailable

log = logging.getLogger(__name__)


class DestinationTarget(NamedTuple):
    bucket: str
    key: str


def change_extension(key: str, extension: str = ".json") -> str:
    """Replace the last extension of the final path segment, or append one.

    A leading dot counts as an extension start, so "uploads/.csv" becomes
    "uploads/.json".
    """
    dot = key.rfind(".")
    if dot > key.rfind("/"):
        return key[:dot] + extension
    return key + extension


def _fixed_bucket(config: ConverterConfig, s3, env: Mapping[str, str]) -> str:
    if not config.destination_name:
        raise MissingConfiguration("No fixed destination bucket configured")
    return config.destination_name


def _env_bucket(config: ConverterConfig, s3, env: Mapping[str, str]) -> str:
    bucket = (env.get(config.destination_env_var) or "").strip()
    if not bucket:
        raise MissingConfiguration(f"Environment variable {config.destination_env_var} is not set")
    return bucket


def _list_buckets(s3):
    token = None
    while True:
        kwargs = {"ContinuationToken": token} if token else {}
        resp = s3.list_buckets(**kwargs)
        for bucket in resp.get("Buckets", []) or []:
            yield bucket
        token = resp.get("ContinuationToken")
        if not token:
            break


def _discovered_bucket(config: ConverterConfig, s3, env: Mapping[str, str]) -> str:
    prefix = config.destination_prefix
    try:
        candidates = [b for b in _list_buckets(s3) if b["Name"].startswith(prefix)]
    except (ClientError, BotoCoreError) as e:
        raise NoDestinationAvailable(f"Could not list buckets to discover '{prefix}*': {e}") from e

    if not candidates:
        raise NoDestinationAvailable(f"No bucket found with prefix '{prefix}'")
    latest = max(candidates, key=lambda b: b["CreationDate"])
    log.debug("Discovered %d candidate buckets, latest is %s", len(candidates), latest["Name"])
    return latest["Name"]


_RESOLVERS: Dict[str, Callable[..., str]] = {
    "fixed": _fixed_bucket,
    "env": _env_bucket,
    "discover": _discovered_bucket,
}


def resolve(source_key: str, config: ConverterConfig, s3, env: Optional[Mapping[str, str]] = None) -> DestinationTarget:
    env = os.environ if env is None else env
    bucket = _RESOLVERS[config.destination_strategy](config, s3, env)
    return DestinationTarget(bucket, change_extension(source_key, ".json"))
