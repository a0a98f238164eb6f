from __future__ import annotations

import pytest


@pytest.fixture
def container_payloads() -> list[dict[str, object]]:
    return [
        {
            "Id": "8dfafdbc3a40",
            "Names": ["/web"],
            "Image": "nginx:1.25",
            "ImageID": "sha256:abc",
            "Command": "nginx -g 'daemon off;'",
            "Created": 1367854155,
            "State": "running",
            "Status": "Up 2 hours",
            "Labels": {"com.example.env": "prod"},
        },
        {
            "Id": "9cd87474be90",
            "Names": ["/db", "/web/db"],
            "Image": "postgres:16",
            "State": "exited",
            "Status": "Exited (0) 5 minutes ago",
            "Labels": None,
        },
    ]
