# tests/conftest.py
from __future__ import annotations

import json
import uuid
from urllib.parse import unquote

import httpx
import pytest

from influx.client.core.config import Settings
from influx.client.core.http import ApiClient
from influx.client.platform import PlatformClient


class FakePlatform:
    """In-memory stand-in for the platform REST API, served via MockTransport."""

    def __init__(self) -> None:
        self.orgs = {"org-1": {"id": "org-1", "name": "my-org"}}
        self.users = {
            "user-1": {"id": "user-1", "name": "alice"},
            "user-2": {"id": "user-2", "name": "bob"},
        }
        self.buckets: dict[str, dict] = {}
        self.relations: dict[tuple[str, str], dict[str, dict]] = {}
        self.requests: list[httpx.Request] = []
        self.query_response = ""

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        parts = [unquote(p) for p in raw_path.split("/") if p]
        method = request.method

        if parts == ["health"]:
            return httpx.Response(200, json={"status": "pass"})
        if parts[:2] != ["api", "v2"]:
            return _not_found()
        parts = parts[2:]

        if parts == ["orgs"]:
            name = request.url.params.get("org")
            orgs = [o for o in self.orgs.values() if name is None or o["name"] == name]
            if name is not None and not orgs:
                return _not_found("organization name not found")
            return httpx.Response(200, json={"orgs": orgs})
        if len(parts) == 2 and parts[0] == "orgs":
            org = self.orgs.get(parts[1])
            return httpx.Response(200, json=org) if org else _not_found()

        if parts == ["query"] and method == "POST":
            return httpx.Response(200, text=self.query_response)

        if parts and parts[0] == "buckets":
            return self._buckets(method, parts[1:], request)

        return _not_found()

    def _buckets(self, method: str, parts: list[str], request: httpx.Request) -> httpx.Response:
        if not parts:
            if method == "POST":
                body = json.loads(request.content)
                if body.get("orgID") not in self.orgs:
                    return _not_found("organization not found")
                if any(
                    b["name"] == body["name"] and b["orgID"] == body["orgID"]
                    for b in self.buckets.values()
                ):
                    return httpx.Response(
                        409, json={"code": "conflict", "message": "bucket already exists"}
                    )
                bucket = {**body, "id": uuid.uuid4().hex[:16]}
                bucket.setdefault("retentionRules", [])
                self.buckets[bucket["id"]] = bucket
                return httpx.Response(201, json=bucket)
            org_id = request.url.params.get("orgID")
            org_name = request.url.params.get("org")
            if org_name is not None:
                matches = [o["id"] for o in self.orgs.values() if o["name"] == org_name]
                if not matches:
                    return _not_found("organization name not found")
                org_id = matches[0]
            buckets = [
                b for b in self.buckets.values() if org_id is None or b["orgID"] == org_id
            ]
            return httpx.Response(200, json={"buckets": buckets})

        bucket_id = parts[0]
        if bucket_id not in self.buckets:
            return _not_found("bucket not found")

        if len(parts) == 1:
            if method == "GET":
                return httpx.Response(200, json=self.buckets[bucket_id])
            if method == "PATCH":
                self.buckets[bucket_id].update(json.loads(request.content))
                return httpx.Response(200, json=self.buckets[bucket_id])
            if method == "DELETE":
                del self.buckets[bucket_id]
                return httpx.Response(204)

        role = parts[1].rstrip("s")
        relations = self.relations.setdefault((bucket_id, role), {})
        if len(parts) == 2:
            if method == "GET":
                return httpx.Response(200, json={"users": list(relations.values())})
            if method == "POST":
                user_id = json.loads(request.content)["id"]
                user = self.users.get(user_id)
                if user is None:
                    return _not_found("user not found")
                relations[user_id] = {**user, "role": role}
                return httpx.Response(201, json=relations[user_id])
        if len(parts) == 3 and method == "DELETE":
            if relations.pop(parts[2], None) is None:
                return _not_found("user not found")
            return httpx.Response(204)

        return httpx.Response(405)


def _not_found(message: str = "not found") -> httpx.Response:
    return httpx.Response(404, json={"code": "not found", "message": message})


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def api(platform: FakePlatform) -> ApiClient:
    return ApiClient(base_url="http://influx", transport=platform.transport)


@pytest.fixture
def client(platform: FakePlatform) -> PlatformClient:
    settings = Settings(url="http://influx", token="secret-token", org="my-org")
    return PlatformClient(settings, transport=platform.transport)
