"""
Tests for @record field tables and the generic decoder/encoder.

Tests cover:
1. Field table construction and validation at class creation
2. Convention-insensitive key matching
3. Defaults for absent and null values
4. Error paths wrapped in PayloadDecodeError
5. Inline (composed) records
6. Canonical encoding
"""

import dataclasses
from datetime import datetime, timezone
from typing import List, Optional

import pytest

from subsonic_api.codec import decode, encode
from subsonic_api.exceptions import (
    MalformedCollection,
    MalformedField,
    MalformedScalar,
    PayloadDecodeError,
)
from subsonic_api.responses import Genre, NowPlayingEntry
from subsonic_api.schema import (
    FieldKind,
    boolean,
    camel_case,
    collection,
    field_specs,
    field_table,
    instant,
    is_record,
    match_key,
    nested,
    record,
    scalar,
    timestamp,
)


@record
class Track:
    id: str = ""
    title: str = ""
    duration: int = 0
    is_dir: bool = boolean()
    created: Optional[int] = timestamp()
    starred: Optional[datetime] = instant()


@record
class Disc:
    name: str = ""
    track: List[Track] = collection(Track)
    tags: List[str] = collection(str, wire="tag")
    main: Optional[Track] = nested(Track, optional=True)
    label: str = scalar("", wire="recordLabel")


class TestFieldNames:
    """Tests for match_key() and camel_case()."""

    def test_match_key_ignores_conventions(self):
        """Test that camelCase, snake_case and kebab-case match."""
        assert match_key("albumId") == match_key("album_id") == match_key("ALBUM-ID") == "albumid"

    @pytest.mark.parametrize(
        "name,wire",
        [("id", "id"), ("song_count", "songCount"), ("artist_info2", "artistInfo2"),
         ("is_dir", "isDir"), ("music_brainz_id", "musicBrainzId")],
    )
    def test_camel_case(self, name, wire):
        """Test wire names derived from attribute names."""
        assert camel_case(name) == wire


class TestRecordDecorator:
    """Tests for @record field tables."""

    def test_field_table_built_at_class_creation(self):
        """Test that every field has a spec with kind and wire name."""
        specs = {spec.name: spec for spec in field_specs(Disc)}

        assert specs["track"].kind is FieldKind.COLLECTION
        assert specs["track"].item_type is Track
        assert specs["tags"].wire_name == "tag"
        assert specs["main"].kind is FieldKind.RECORD
        assert specs["label"].wire_name == "recordLabel"
        assert specs["name"].item_type is str

    def test_field_table_is_read_only(self):
        """Test that the lookup table cannot be modified."""
        with pytest.raises(TypeError):
            field_table(Track).by_key["extra"] = None

    def test_is_record(self):
        """Test record detection for classes and instances."""
        assert is_record(Track)
        assert is_record(Track())
        assert not is_record(dict)

    def test_field_without_default_rejected(self):
        """Test that every field needs a default."""
        with pytest.raises(TypeError, match="must have a default"):

            @record
            class Broken:
                name: str

    def test_bare_bool_rejected(self):
        """Test that booleans must be declared with boolean()."""
        with pytest.raises(TypeError, match="needs a field declaration"):

            @record
            class Broken:
                flag: bool = False

    def test_bare_list_rejected(self):
        """Test that lists must be declared with collection()."""
        with pytest.raises(TypeError, match="needs a field declaration"):

            @record
            class Broken:
                items: list = dataclasses.field(default_factory=list)

    def test_nested_requires_record(self):
        """Test that nested() only accepts @record classes."""
        with pytest.raises(TypeError, match="is not a @record"):

            @record
            class Broken:
                child: Optional[dict] = nested(dict, optional=True)

    def test_defaults_are_not_shared(self):
        """Test that each instance gets its own default list."""
        assert Disc().track is not Disc().track


class TestDecode:
    """Tests for decode()."""

    def test_decodes_all_field_kinds(self):
        """Test scalars, booleans, timestamps, instants and collections together."""
        disc = decode(
            {
                "name": "Gold",
                "recordLabel": "Polar",
                "tag": "pop",
                "track": [
                    {
                        "id": 1,
                        "title": "Dancing Queen",
                        "duration": "231",
                        "isDir": "false",
                        "created": "2021-01-01T00:00:00.000Z",
                        "starred": 1609459200000,
                    }
                ],
            },
            Disc,
        )

        assert disc.name == "Gold"
        assert disc.label == "Polar"
        assert disc.tags == ["pop"]
        assert len(disc.track) == 1
        track = disc.track[0]
        assert track.id == "1"
        assert track.duration == 231
        assert track.is_dir is False
        assert track.created == 1609459200000
        assert track.starred == datetime(2021, 1, 1, tzinfo=timezone.utc)

    def test_key_matching_is_convention_insensitive(self):
        """Test that snake_case and upper-case wire keys still match."""
        track = decode({"IS_DIR": "yes", "Title": "x"}, Track)

        assert track.is_dir is True
        assert track.title == "x"

    def test_unknown_keys_ignored(self):
        """Test that extra wire keys do not fail decoding."""
        track = decode({"id": "1", "bpm": 120, "replayGain": {"trackGain": 1.0}}, Track)
        assert track == Track(id="1")

    def test_absent_and_null_keep_defaults(self):
        """Test that missing and null values keep declared defaults."""
        disc = decode({"name": None, "track": None, "main": None}, Disc)

        assert disc == Disc()
        assert disc.track == []
        assert disc.main is None

    def test_single_object_collection(self):
        """Test that a bare object collection becomes a list."""
        disc = decode({"track": {"id": "x"}}, Disc)
        assert [track.id for track in disc.track] == ["x"]

    def test_nested_record(self):
        """Test nested records decode recursively."""
        disc = decode({"main": {"id": "m", "isDir": 1}}, Disc)
        assert disc.main == Track(id="m", is_dir=True)

    def test_each_decode_returns_fresh_tree(self):
        """Test that decoding twice does not share objects."""
        document = {"track": [{"id": "x"}]}
        first = decode(document, Disc)
        second = decode(document, Disc)

        assert first == second
        assert first.track is not second.track
        assert first.track[0] is not second.track[0]

    def test_malformed_scalar_path(self):
        """Test that the failing field is reported with its full path."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode({"track": [{"id": "1"}, {"id": "2", "created": "garbage"}]}, Disc)

        error = exc_info.value
        assert error.response_type == "Disc"
        assert error.field_path == "track[1].created"
        assert isinstance(error.cause, MalformedScalar)
        assert error.cause.raw_value == "garbage"

    def test_malformed_collection(self):
        """Test that a string where a list belongs is rejected."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode({"track": "abc"}, Disc)

        assert isinstance(exc_info.value.cause, MalformedCollection)
        assert exc_info.value.cause.raw_kind == "string"
        assert exc_info.value.field_path == "track"

    def test_non_object_for_record(self):
        """Test that a scalar where a record belongs is rejected."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode({"main": "m"}, Disc)

        assert isinstance(exc_info.value.cause, MalformedField)
        assert exc_info.value.field_path == "main"

    def test_non_object_document(self):
        """Test that the document itself must be an object."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode(["not", "an", "object"], Disc)

        assert exc_info.value.field_path == ""

    def test_requires_record_shape(self):
        """Test that decode() refuses plain classes."""
        with pytest.raises(TypeError):
            decode({}, dict)

    def test_text_only_value_record(self):
        """Test that a bare string fills the value field of text records."""
        assert decode("Rock", Genre) == Genre(value="Rock")

    def test_inline_record(self):
        """Test that an inline record is decoded from the same object."""
        entry = decode(
            {"id": "s1", "title": "SOS", "username": "bob", "minutesAgo": "2", "playerId": 3},
            NowPlayingEntry,
        )

        assert entry.song.id == "s1"
        assert entry.song.title == "SOS"
        assert entry.username == "bob"
        assert entry.minutes_ago == 2
        assert entry.player_id == 3

    def test_inline_record_errors_keep_parent_path(self):
        """Test that inline fields report paths relative to the shared object."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode({"id": "s1", "isDir": "maybe"}, NowPlayingEntry)

        assert exc_info.value.field_path == "isDir"


class TestEncode:
    """Tests for encode()."""

    def test_canonical_form(self):
        """Test camelCase keys, epoch instants and omitted nulls."""
        track = Track(id="1", is_dir=False, created=5, starred=datetime(2021, 1, 1, tzinfo=timezone.utc))

        assert encode(track) == {
            "id": "1",
            "title": "",
            "duration": 0,
            "isDir": False,
            "created": 5,
            "starred": 1609459200000,
        }

    def test_lists_never_collapse(self):
        """Test that one-element and empty lists stay arrays."""
        encoded = encode(Disc(name="x", track=[Track(id="1")]))

        assert isinstance(encoded["track"], list)
        assert len(encoded["track"]) == 1
        assert encoded["tag"] == []
        assert "main" not in encoded

    def test_round_trip(self):
        """Test that decode(encode(x)) gives x back."""
        disc = Disc(name="x", tags=["a"], track=[Track(id="1", created=7)], main=Track(id="m"), label="L")
        assert decode(encode(disc), Disc) == disc

    def test_inline_fields_flattened(self):
        """Test that inline records merge into their parent object."""
        encoded = encode(decode({"id": "s1", "username": "bob"}, NowPlayingEntry))

        assert encoded["id"] == "s1"
        assert encoded["username"] == "bob"
        assert "song" not in encoded

    def test_encode_list_of_records(self):
        """Test encoding a plain list of records."""
        assert encode([Track(id="1")])[0]["id"] == "1"
