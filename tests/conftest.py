"""
Shared pytest fixtures.

The S3 client is a Mock; SDK failures are real botocore ClientError instances.
"""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from csv_to_json.config import ConverterConfig
from tests.helpers import serve_csv


@pytest.fixture
def mock_s3():
    """S3 client serving a small CSV and two discoverable output buckets."""
    s3 = Mock()
    serve_csv(s3, b"id,city\n1,Bern\n2,Zurich\n")
    s3.list_buckets.return_value = {
        "Buckets": [
            {"Name": "out-2024-01-01", "CreationDate": datetime(2024, 1, 1, tzinfo=timezone.utc)},
            {"Name": "out-2024-06-01", "CreationDate": datetime(2024, 6, 1, tzinfo=timezone.utc)},
            {"Name": "raw-uploads", "CreationDate": datetime(2025, 1, 1, tzinfo=timezone.utc)},
        ]
    }
    return s3


@pytest.fixture
def fixed_config():
    return ConverterConfig(
        trim_values=True,
        destination_strategy="fixed",
        destination_name="processed-bucket",
    )


@pytest.fixture
def discover_config():
    return ConverterConfig(
        trim_values=True,
        destination_strategy="discover",
        destination_prefix="out-",
    )
