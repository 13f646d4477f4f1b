# src/s3_trigger/handler.py
import logging

import boto3

from csv_to_json.config import LOG_LEVEL, REGION, ConverterConfig
from csv_to_json.errors import ConverterError
from csv_to_json.pipeline import Pipeline

log = logging.getLogger()
log.setLevel(LOG_LEVEL)

s3 = boto3.client("s3", region_name=REGION)


def handler(event, context):
    # configuration is read per invocation so the "env" strategy sees current values
    try:
        config = ConverterConfig.from_env()
    except ConverterError as e:
        log.error("Invalid configuration: %s", e)
        raise
    return Pipeline(config, s3).run(event)
