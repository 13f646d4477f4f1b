#!/usr/bin/env python3
# src/csv_to_json/tools/convert_csv.py
"""
Convert a CSV file to JSON outside of Lambda.

  Local:  csv-to-json --input data.csv [--output data.json]
  S3:     csv-to-json --bucket my-raw-bucket --key uploads/data.csv

S3 mode runs the same pipeline as the Lambda for one object, with the
destination taken from the usual environment variables.
"""
import argparse
import dataclasses
import json
import sys
from pathlib import Path

import boto3

from csv_to_json.config import REGION, ConverterConfig
from csv_to_json.emitter import emit
from csv_to_json.errors import ConverterError, DestinationWriteError, SourceFetchError
from csv_to_json.parser import parse
from csv_to_json.pipeline import Pipeline


def _config(args) -> ConverterConfig:
    config = ConverterConfig.from_env()
    overrides = {}
    if args.delimiter is not None:
        overrides["delimiter"] = args.delimiter
    if args.no_trim:
        overrides["trim_values"] = False
    return dataclasses.replace(config, **overrides).validate() if overrides else config


def read_local(input_path: Path) -> str:
    try:
        return input_path.read_bytes().decode("utf-8-sig")
    except OSError as e:
        raise SourceFetchError(f"Could not read {input_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SourceFetchError(f"{input_path} is not valid UTF-8: {e}") from e


def convert_local(input_path: Path, output_path, config: ConverterConfig) -> int:
    header, records = parse(read_local(input_path), config.delimiter, config.trim_values)
    json_text = emit(header, records)
    if output_path:
        try:
            Path(output_path).write_text(json_text, encoding="utf-8")
        except OSError as e:
            raise DestinationWriteError(f"Could not write {output_path}: {e}") from e
    else:
        sys.stdout.write(json_text)
    return len(records)


def convert_s3(bucket: str, key: str, config: ConverterConfig) -> dict:
    s3 = boto3.client("s3", region_name=REGION)
    return Pipeline(config, s3).process_object(bucket, key)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="csv-to-json", description="Convert CSV to a JSON array of records.")
    ap.add_argument("--input", help="Local CSV file")
    ap.add_argument("--output", help="Where to write JSON in local mode (default: stdout)")
    ap.add_argument("--bucket", help="Source S3 bucket")
    ap.add_argument("--key", help="Source S3 object key")
    ap.add_argument("--delimiter", help="Field delimiter (default: CSV_DELIMITER or ',')")
    ap.add_argument("--no-trim", action="store_true", help="Keep whitespace around values")
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if bool(args.input) == bool(args.bucket or args.key):
        ap.error("use either --input or --bucket/--key")
    if not args.input and not (args.bucket and args.key):
        ap.error("--bucket and --key must be given together")

    try:
        config = _config(args)
        if args.input:
            count = convert_local(Path(args.input), args.output, config)
            if args.output:
                print(f"Wrote {count} records to {args.output}", file=sys.stderr)
        else:
            print(json.dumps(convert_s3(args.bucket, args.key, config), indent=2))
    except ConverterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
