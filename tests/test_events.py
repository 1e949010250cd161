"""Tests for event decoding and the message content models."""

import pytest
from pydantic import ValidationError

from dementia.errors import DecodeError
from dementia.models.events import (
    AudioContent,
    EmoteContent,
    FileContent,
    ImageContent,
    LocationContent,
    MemberEvent,
    MessageEvent,
    NoticeContent,
    RedactionEvent,
    RoomNameEvent,
    TextContent,
    VideoContent,
)
from dementia.sync import decode_event, decode_stripped_event


def _message(content: dict, **extra) -> dict:
    return {
        "type": "m.room.message",
        "sender": "@alice:example.org",
        "event_id": "$ev1",
        "origin_server_ts": 1700000000000,
        "content": content,
        **extra,
    }


class TestMessageVariants:
    @pytest.mark.parametrize(
        "msgtype, cls",
        [
            ("m.text", TextContent),
            ("m.emote", EmoteContent),
            ("m.notice", NoticeContent),
        ],
    )
    def test_text_like(self, msgtype, cls):
        event = decode_event(_message({"msgtype": msgtype, "body": "hello"}))
        assert isinstance(event, MessageEvent)
        assert isinstance(event.content, cls)
        assert event.body == "hello"
        assert event.sender == "@alice:example.org"
        assert event.event_id == "$ev1"

    @pytest.mark.parametrize(
        "msgtype, cls",
        [
            ("m.image", ImageContent),
            ("m.file", FileContent),
            ("m.video", VideoContent),
            ("m.audio", AudioContent),
        ],
    )
    def test_media(self, msgtype, cls):
        event = decode_event(
            _message({"msgtype": msgtype, "body": "thing", "url": "mxc://example.org/abc"})
        )
        assert isinstance(event.content, cls)
        assert event.content.url == "mxc://example.org/abc"

    def test_location(self):
        event = decode_event(
            _message({"msgtype": "m.location", "body": "Big Ben", "geo_uri": "geo:51.5008,0.1247"})
        )
        assert isinstance(event.content, LocationContent)
        assert event.content.geo_uri == "geo:51.5008,0.1247"

    def test_file_keeps_filename_and_info(self):
        event = decode_event(_message({
            "msgtype": "m.file",
            "body": "report",
            "filename": "report.pdf",
            "url": "mxc://example.org/pdf",
            "info": {"size": 100, "mimetype": "application/pdf"},
        }))
        assert event.content.filename == "report.pdf"
        assert event.content.info == {"size": 100, "mimetype": "application/pdf"}

    def test_extra_content_fields_ignored(self):
        event = decode_event(_message({
            "msgtype": "m.text",
            "body": "hi",
            "format": "org.matrix.custom.html",
            "formatted_body": "<b>hi</b>",
        }))
        assert event.content == TextContent(body="hi")


class TestUnrecognised:
    def test_unknown_event_type_is_skipped(self):
        assert decode_event({"type": "m.room.unknowntype", "content": {}}) is None

    def test_missing_type_is_skipped(self):
        assert decode_event({"content": {"body": "x"}}) is None

    def test_unknown_msgtype_is_skipped(self):
        assert decode_event(_message({"msgtype": "org.example.poll", "body": "?"})) is None

    def test_redacted_message_is_skipped(self):
        assert decode_event(_message({})) is None

    def test_non_object_raises(self):
        with pytest.raises(DecodeError):
            decode_event(["not", "an", "event"])


class TestMalformedRecognised:
    def test_media_without_url(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_event(_message({"msgtype": "m.image", "body": "pic.png"}))
        assert exc_info.value.path == ("m.room.message", "m.image", "content", "url")

    def test_location_without_geo_uri(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_event(_message({"msgtype": "m.location", "body": "somewhere"}))
        assert exc_info.value.path[-1] == "geo_uri"

    def test_text_without_body(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_event(_message({"msgtype": "m.text"}))
        assert exc_info.value.path == ("m.room.message", "m.text", "content", "body")

    def test_message_without_sender(self):
        raw = _message({"msgtype": "m.text", "body": "hi"})
        del raw["sender"]
        with pytest.raises(DecodeError) as exc_info:
            decode_event(raw)
        assert exc_info.value.path == ("m.room.message", "m.text", "sender")


class TestStateEvents:
    def test_member(self):
        event = decode_event({
            "type": "m.room.member",
            "sender": "@alice:example.org",
            "state_key": "@bob:example.org",
            "content": {"membership": "join", "displayname": "Bob"},
        })
        assert isinstance(event, MemberEvent)
        assert event.content.membership == "join"
        assert not event.content.is_invite

    def test_member_without_content(self):
        event = decode_event({"type": "m.room.member"})
        assert isinstance(event, MemberEvent)
        assert event.content.membership is None

    def test_redaction_top_level(self):
        event = decode_event({"type": "m.room.redaction", "redacts": "$gone", "content": {}})
        assert isinstance(event, RedactionEvent)
        assert event.redacted_event_id == "$gone"

    def test_redaction_in_content(self):
        event = decode_event({"type": "m.room.redaction", "content": {"redacts": "$gone"}})
        assert event.redacted_event_id == "$gone"

    def test_stripped_name(self):
        event = decode_stripped_event({
            "type": "m.room.name", "state_key": "", "content": {"name": "Lobby"}
        })
        assert isinstance(event, RoomNameEvent)
        assert event.content.name == "Lobby"

    def test_stripped_invite(self):
        event = decode_stripped_event({
            "type": "m.room.member", "state_key": "@bot:example.org",
            "content": {"membership": "invite"},
        })
        assert event.content.is_invite

    def test_stripped_unknown(self):
        assert decode_stripped_event({"type": "m.room.join_rules", "content": {}}) is None


class TestToContent:
    def test_text(self):
        assert TextContent(body="hi").to_content() == {"msgtype": "m.text", "body": "hi"}

    def test_notice(self):
        assert NoticeContent(body="n").to_content() == {"msgtype": "m.notice", "body": "n"}

    def test_image_omits_unset_info(self):
        content = ImageContent(body="a.png", url="mxc://x/y").to_content()
        assert content == {"msgtype": "m.image", "body": "a.png", "url": "mxc://x/y"}

    def test_models_are_frozen(self):
        content = TextContent(body="hi")
        with pytest.raises(ValidationError):
            content.body = "changed"
