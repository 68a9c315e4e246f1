"""Bucket management: the client contract and its REST implementation."""

from influx.client.buckets.api import BucketsApiClient
from influx.client.buckets.client import BucketClient, resource_id

__all__ = ["BucketClient", "BucketsApiClient", "resource_id"]
