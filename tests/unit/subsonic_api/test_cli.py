"""
Tests for the subsonic-api command line interface.

Tests cover:
1. Argument parsing
2. Decoding saved JSON and XML responses
3. Exit codes for decode failures and server faults
4. The ping command with a mocked client
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from subsonic_api.cli import create_parser, main
from subsonic_api.envelope import Envelope, ResponseStatus
from subsonic_api.exceptions import AuthenticationError
from subsonic_api.responses import EmptyResponse


class TestParser:
    """Tests for create_parser()."""

    def test_decode_arguments(self):
        """Test decode command arguments."""
        args = create_parser().parse_args(["decode", "starred.xml", "--shape", "StarredResponse", "--format", "xml"])

        assert args.command == "decode"
        assert args.file == "starred.xml"
        assert args.shape == "StarredResponse"
        assert args.format == "xml"

    def test_unknown_shape_rejected(self):
        """Test that only registered shapes are accepted."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["decode", "x.json", "--shape", "NoSuchResponse"])

    def test_command_required(self):
        """Test that a subcommand is required."""
        with pytest.raises(SystemExit):
            create_parser().parse_args([])


class TestDecodeCommand:
    """Tests for the decode command."""

    def test_decode_json(self, tmp_path, capsys, starred_json):
        """Test decoding a saved JSON response."""
        path = tmp_path / "starred.json"
        path.write_bytes(starred_json)

        exit_code = main(["decode", str(path), "--shape", "StarredResponse"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        album = output["subsonic-response"]["starred"]["album"][0]
        assert album["songCount"] == 19
        assert album["created"] == 1577836800000

    def test_decode_xml_by_extension(self, tmp_path, capsys, starred_xml):
        """Test that .xml files are parsed as XML."""
        path = tmp_path / "starred.xml"
        path.write_bytes(starred_xml)

        exit_code = main(["decode", str(path), "--shape", "StarredResponse"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["subsonic-response"]["starred"]["song"][0]["duration"] == 231

    def test_decode_failed_envelope(self, tmp_path):
        """Test that a saved fault exits with 1."""
        path = tmp_path / "fault.json"
        path.write_text(
            json.dumps({"subsonic-response": {"status": "failed", "error": {"code": 70, "message": "Not found"}}})
        )

        assert main(["decode", str(path), "--shape", "EmptyResponse"]) == 1

    def test_decode_malformed_payload(self, tmp_path):
        """Test that payload errors exit with 1."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"subsonic-response": {"status": "ok", "starred": {"song": "abc"}}}))

        assert main(["decode", str(path), "--shape", "StarredResponse"]) == 1

    def test_missing_file(self, tmp_path):
        """Test that an unreadable file exits with 1."""
        assert main(["decode", str(tmp_path / "missing.json"), "--shape", "EmptyResponse"]) == 1


class TestPingCommand:
    """Tests for the ping command."""

    @pytest.fixture
    def subsonic_env(self, monkeypatch):
        """Set the required SUBSONIC_* variables."""
        monkeypatch.setenv("SUBSONIC_URL", "https://music.example.com")
        monkeypatch.setenv("SUBSONIC_USER", "alice")
        monkeypatch.setenv("SUBSONIC_PASSWORD", "secret")

    def test_ping(self, subsonic_env, capsys):
        """Test a successful ping."""
        envelope = Envelope(
            ResponseStatus.OK, "1.16.1", EmptyResponse(), type="navidrome", server_version="0.53.0", open_subsonic=True
        )
        with patch("subsonic_api.cli.SubsonicClient") as client_class:
            client = MagicMock()
            client.system.ping.return_value = envelope
            client_class.return_value.__enter__.return_value = client

            exit_code = main(["ping"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "OK: navidrome 0.53.0 (API 1.16.1, OpenSubsonic: True)"

    def test_ping_auth_failure(self, subsonic_env):
        """Test that authentication faults exit with 1."""
        with patch("subsonic_api.cli.SubsonicClient") as client_class:
            client = MagicMock()
            client.system.ping.side_effect = AuthenticationError(40, "Wrong username or password")
            client_class.return_value.__enter__.return_value = client

            assert main(["ping"]) == 1

    def test_ping_without_environment(self, monkeypatch):
        """Test that missing configuration exits with 1."""
        for name in ("SUBSONIC_URL", "SUBSONIC_USER", "SUBSONIC_PASSWORD", "SUBSONIC_API_KEY"):
            monkeypatch.delenv(name, raising=False)

        assert main(["ping"]) == 1
