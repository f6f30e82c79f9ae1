"""
Tests for subsonic_api.exceptions.

Tests cover:
1. Fault classification by error code
2. Error messages and attributes
3. VersionError raised for unsupported client versions
4. The decode error hierarchy
"""

import pytest

from subsonic_api.exceptions import (
    ApiError,
    AuthenticationError,
    DecodeError,
    ErrorCode,
    InvalidEnvelope,
    MalformedCollection,
    MalformedField,
    MalformedScalar,
    PayloadDecodeError,
    ResponseReadError,
    SubsonicError,
    TransportDecodeError,
    VersionError,
    classify_fault,
)


class TestClassifyFault:
    """Tests for classify_fault()."""

    @pytest.mark.parametrize("code", [40, 41, 42, 43, 44])
    def test_authentication_codes(self, code):
        """Test that codes 40-44 are authentication errors."""
        assert type(classify_fault(code, "denied")) is AuthenticationError

    @pytest.mark.parametrize("code", [20, 30, 50])
    def test_version_codes(self, code):
        """Test that version negotiation codes are version errors."""
        error = classify_fault(code, "upgrade")

        assert type(error) is VersionError
        assert error.requested_version is None
        assert error.supported_version is None

    @pytest.mark.parametrize("code", [0, 10, 60, 70, 99])
    def test_other_codes(self, code):
        """Test that every other code is a plain ApiError."""
        assert type(classify_fault(code, "oops")) is ApiError

    def test_preserves_code_and_message(self):
        """Test that code and message are kept verbatim."""
        error = classify_fault(70, "Song not found")

        assert error.code == 70
        assert error.message == "Song not found"
        assert str(error) == "Subsonic Error 70: Song not found"

    def test_accepts_error_code_members(self):
        """Test classification with ErrorCode members."""
        error = classify_fault(ErrorCode.WRONG_CREDENTIALS, "bad")

        assert isinstance(error, AuthenticationError)
        assert error.code == 40
        assert type(error.code) is int


class TestVersionError:
    """Tests for VersionError.unsupported()."""

    def test_unsupported(self):
        """Test the error raised for a too-new requested version."""
        error = VersionError.unsupported("1.17.0", "1.16.1")

        assert error.code == ErrorCode.CLIENT_MUST_UPGRADE
        assert error.requested_version == "1.17.0"
        assert error.supported_version == "1.16.1"
        assert "1.17.0" in error.message
        assert "1.16.1" in error.message


class TestHierarchy:
    """Tests for the exception class hierarchy."""

    @pytest.mark.parametrize(
        "error_class",
        [ApiError, AuthenticationError, VersionError, DecodeError, TransportDecodeError,
         ResponseReadError, InvalidEnvelope, MalformedField, PayloadDecodeError],
    )
    def test_all_errors_are_subsonic_errors(self, error_class):
        """Test that one except clause catches everything."""
        assert issubclass(error_class, SubsonicError)

    def test_faults_and_decode_errors_are_separate(self):
        """Test that server faults are not decode errors and vice versa."""
        assert not issubclass(ApiError, DecodeError)
        assert not issubclass(DecodeError, ApiError)

    def test_read_error_is_transport_error(self):
        """Test that stream failures are transport decode failures."""
        assert issubclass(ResponseReadError, TransportDecodeError)


class TestDecodeErrors:
    """Tests for decode error attributes."""

    def test_malformed_scalar_message(self):
        """Test the message of a malformed scalar."""
        error = MalformedScalar("song[0].isDir", "maybe", "not a boolean")

        assert error.field == "song[0].isDir"
        assert error.raw_value == "maybe"
        assert str(error) == "song[0].isDir: not a boolean ('maybe')"

    def test_root_field_name(self):
        """Test that an empty path is shown as the root."""
        assert str(MalformedField("", 5, "expected an object")).startswith("<root>:")

    def test_malformed_collection_kind(self):
        """Test that the offending JSON kind is recorded."""
        error = MalformedCollection("starred.song", "abc", "string")

        assert error.raw_kind == "string"
        assert "cannot read string as a list" in str(error)

    def test_payload_decode_error(self):
        """Test that the payload error wraps its cause."""
        cause = MalformedScalar("starred.album[0].created", "x", "not a timestamp")
        error = PayloadDecodeError("StarredResponse", cause.field, cause)

        assert error.response_type == "StarredResponse"
        assert error.field_path == "starred.album[0].created"
        assert error.cause is cause
        assert "StarredResponse" in str(error)
