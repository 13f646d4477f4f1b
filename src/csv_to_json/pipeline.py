# src/csv_to_json/pipeline.py
import enum
import logging
import urllib.parse
from typing import Mapping, Optional, Tuple

from botocore.exceptions import BotoCoreError, ClientError

from . import destination
from .config import ConverterConfig
from .destination import DestinationTarget
from .emitter import emit
from .errors import ConverterError, DestinationWriteError, SourceFetchError
from .parser import parse

log = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"


class Stage(enum.Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    FETCHING = "fetching"
    PARSING = "parsing"
    EMITTING = "emitting"
    RESOLVING_DESTINATION = "resolving_destination"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


def first_record(event: dict) -> Optional[Tuple[str, str]]:
    """Return (bucket, key) of the first S3 record, or None for an empty batch.

    Later records are ignored; one invocation writes at most one object.
    """
    records = event.get("Records") or []
    if not records:
        return None
    rec = records[0]
    bucket = rec["s3"]["bucket"]["name"]
    key = urllib.parse.unquote_plus(rec["s3"]["object"]["key"])
    if len(records) > 1:
        log.warning("Event carries %d records, only %s/%s is processed", len(records), bucket, key)
    return bucket, key


class Pipeline:
    """Converts one uploaded CSV object into a JSON object per invocation."""

    def __init__(self, config: ConverterConfig, s3, env: Optional[Mapping[str, str]] = None):
        self.config = config
        self.s3 = s3
        self.env = env
        self.stage = Stage.IDLE

    def run(self, event: dict) -> dict:
        self.stage = Stage.VALIDATING
        log.info("Lambda function started.")
        log.info("Delimiter: %s", self.config.delimiter)

        source = first_record(event)
        if source is None:
            log.info("No S3 event record found.")
            self.stage = Stage.DONE
            return {"ok": True, "skipped": "empty_batch"}

        bucket, key = source
        if not self.config.allows(bucket):
            log.info("Ignoring %s from bucket %s, not in the source allow-list", key, bucket)
            self.stage = Stage.DONE
            return {"ok": True, "skipped": "source_not_allowed"}

        try:
            return self.process_object(bucket, key)
        except ConverterError as e:
            log.error("Error during %s of %s/%s: %s", self.stage.value, bucket, key, e)
            self.stage = Stage.FAILED
            raise

    def process_object(self, bucket: str, key: str) -> dict:
        log.info("Processing file: %s from bucket: %s", key, bucket)

        self.stage = Stage.FETCHING
        csv_text = self.fetch(bucket, key)

        self.stage = Stage.PARSING
        header, records = parse(csv_text, self.config.delimiter, self.config.trim_values)

        self.stage = Stage.EMITTING
        json_text = emit(header, records)

        self.stage = Stage.RESOLVING_DESTINATION
        target = destination.resolve(key, self.config, self.s3, self.env)
        log.info("Output bucket: %s", target.bucket)

        self.stage = Stage.WRITING
        self.write(target, json_text)

        self.stage = Stage.DONE
        log.info("Successfully converted %d records and uploaded to %s/%s", len(records), target.bucket, target.key)
        return {
            "ok": True,
            "source_bucket": bucket,
            "source_key": key,
            "destination_bucket": target.bucket,
            "destination_key": target.key,
            "record_count": len(records),
        }

    def fetch(self, bucket: str, key: str) -> str:
        try:
            body = self.s3.get_object(Bucket=bucket, Key=key)["Body"].read()
        except (ClientError, BotoCoreError) as e:
            raise SourceFetchError(f"Could not read s3://{bucket}/{key}: {e}") from e
        try:
            return body.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise SourceFetchError(f"s3://{bucket}/{key} is not valid UTF-8: {e}") from e

    def write(self, target: DestinationTarget, json_text: str) -> None:
        try:
            self.s3.put_object(
                Bucket=target.bucket,
                Key=target.key,
                Body=json_text.encode("utf-8"),
                ContentType=CONTENT_TYPE,
            )
        except (ClientError, BotoCoreError) as e:
            raise DestinationWriteError(f"Could not write s3://{target.bucket}/{target.key}: {e}") from e
