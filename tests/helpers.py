"""Builders shared by the unit tests."""

from io import BytesIO

from botocore.exceptions import ClientError


def client_error(code: str, operation: str = "GetObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


def make_s3_event(*objects):
    """Build an S3 put notification for (bucket, key) pairs."""
    return {
        "Records": [
            {
                "eventSource": "aws:s3",
                "eventName": "ObjectCreated:Put",
                "s3": {"bucket": {"name": bucket}, "object": {"key": key}},
            }
            for bucket, key in objects
        ]
    }


def serve_csv(s3, content: bytes):
    s3.get_object.side_effect = lambda Bucket, Key: {"Body": BytesIO(content)}
