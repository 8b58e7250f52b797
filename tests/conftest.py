"""Pytest fixtures for dash-assembler tests (moto-backed AWS resources)."""

import os

import pytest
from moto import mock_aws


@pytest.fixture(scope="function")
def aws_credentials():
    """Set fake AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def moto_aws(aws_credentials):
    """Enable moto mock for DynamoDB and SQS."""
    with mock_aws():
        yield


@pytest.fixture
def processed_videos_table(moto_aws):
    """Create ProcessedVideos DynamoDB table (hash key video_id)."""
    import boto3

    client = boto3.client("dynamodb", region_name="us-east-1")
    client.create_table(
        TableName="test-processed-videos",
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "video_id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "video_id", "AttributeType": "N"}],
    )
    return "test-processed-videos"


@pytest.fixture
def processing_errors_table(moto_aws):
    """Create ProcessingErrors DynamoDB table (video_id, error_id)."""
    import boto3

    client = boto3.client("dynamodb", region_name="us-east-1")
    client.create_table(
        TableName="test-processing-errors",
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[
            {"AttributeName": "video_id", "KeyType": "HASH"},
            {"AttributeName": "error_id", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "video_id", "AttributeType": "N"},
            {"AttributeName": "error_id", "AttributeType": "S"},
        ],
    )
    return "test-processing-errors"


@pytest.fixture
def sqs_queue(moto_aws):
    """Create an SQS queue and return its URL."""
    import boto3

    client = boto3.client("sqs", region_name="us-east-1")
    resp = client.create_queue(QueueName="test-video-tasks")
    return resp["QueueUrl"]
