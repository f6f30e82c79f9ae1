"""Shared fixtures for subsonic_api unit tests."""

import json

import pytest

from subsonic_api.models import SubsonicConfig

STARRED_DOCUMENT = {
    "subsonic-response": {
        "status": "ok",
        "version": "1.16.1",
        "starred": {
            "artist": [{"id": "ar-1", "name": "ABBA"}],
            "album": [
                {
                    "id": "al-1",
                    "name": "Gold",
                    "songCount": 19,
                    "created": "2020-01-01T00:00:00.000Z",
                }
            ],
            "song": [{"id": "song-1", "title": "Dancing Queen", "duration": 231}],
        },
    }
}

STARRED_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<subsonic-response xmlns="http://subsonic.org/restapi" status="ok" version="1.16.1">
    <starred>
        <artist id="ar-1" name="ABBA"/>
        <album id="al-1" name="Gold" songCount="19" created="2020-01-01T00:00:00.000Z"/>
        <song id="song-1" title="Dancing Queen" duration="231"/>
    </starred>
</subsonic-response>
"""


@pytest.fixture
def valid_config():
    """Return a valid SubsonicConfig for testing."""
    return SubsonicConfig(
        url="https://music.example.com",
        username="testuser",
        password="testpass",
        client_name="test-client",
        api_version="1.16.1",
    )


@pytest.fixture
def starred_document():
    """Return the starred sample as a parsed JSON document."""
    return json.loads(json.dumps(STARRED_DOCUMENT))


@pytest.fixture
def starred_json():
    """Return the starred sample as JSON bytes."""
    return json.dumps(STARRED_DOCUMENT).encode("utf-8")


@pytest.fixture
def starred_xml():
    """Return the starred sample as XML bytes."""
    return STARRED_XML


@pytest.fixture
def envelope_json():
    """Return a builder for JSON envelope bodies."""

    def _build(payload=None, status="ok", **header):
        body = {"status": status, "version": "1.16.1"}
        body.update(header)
        body.update(payload or {})
        return json.dumps({"subsonic-response": body}).encode("utf-8")

    return _build
