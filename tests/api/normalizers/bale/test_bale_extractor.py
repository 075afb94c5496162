"""Testes do classificador de updates e do record inbound."""

from __future__ import annotations

from api.normalizers.bale import build_inbound_record, classify_event
from app.constants.bale import AttachmentKind, EventKind
from app.protocols.models import BinaryArtifact


def test_text_message_has_no_attachment() -> None:
    event = classify_event({"update_id": 1, "message": {"message_id": 3, "text": "oi"}})

    assert event.kind is EventKind.MESSAGE
    assert event.attachment is None


def test_channel_post_wins_over_message() -> None:
    body = {
        "update_id": 1,
        "message": {"message_id": 1, "text": "a"},
        "channel_post": {"message_id": 2, "video": {"file_id": "V"}},
    }

    event = classify_event(body)

    assert event.kind is EventKind.CHANNEL_POST
    assert event.attachment is not None
    assert event.attachment.kind is AttachmentKind.VIDEO
    assert event.attachment.file_id == "V"


def test_photo_takes_precedence_over_document() -> None:
    body = {
        "message": {
            "photo": [{"file_id": "a"}, {"file_id": "b"}],
            "document": {"file_id": "D"},
        }
    }

    attachment = classify_event(body).attachment

    assert attachment is not None
    assert attachment.kind is AttachmentKind.PHOTO
    assert [variant["file_id"] for variant in attachment.variants] == ["a", "b"]


def test_photo_must_be_a_list() -> None:
    body = {"message": {"photo": {"file_id": "x"}, "document": {"file_id": "D"}}}

    attachment = classify_event(body).attachment

    assert attachment is not None
    assert attachment.kind is AttachmentKind.DOCUMENT


def test_video_before_document() -> None:
    body = {"message": {"video": {"file_id": "V"}, "document": {"file_id": "D"}}}

    attachment = classify_event(body).attachment

    assert attachment is not None
    assert attachment.kind is AttachmentKind.VIDEO


def test_update_without_message_passes_through() -> None:
    event = classify_event({"update_id": 9, "callback_query": {"id": "q"}})

    assert event.kind is None
    assert event.attachment is None


def test_event_identity() -> None:
    event = classify_event(
        {"update_id": 5, "message": {"message_id": 7, "chat": {"id": -100}, "text": "x"}}
    )

    assert event.event_identity() == {"update_id": 5, "chat_id": -100, "message_id": 7}


def test_inbound_record_keeps_body_and_binary() -> None:
    body = {"update_id": 1, "message": {"document": {"file_id": "D"}}}
    artifact = BinaryArtifact(data=b"abc", file_name="file_7.pdf", mime_type="application/pdf")

    record = build_inbound_record(classify_event(body), artifact)

    assert record.json == body
    assert record.binary == {"data": artifact}
    assert record.to_dict()["binary"]["data"]["fileName"] == "file_7.pdf"


def test_empty_channel_post_still_takes_precedence() -> None:
    event = classify_event({"update_id": 1, "channel_post": {}, "message": {"text": "oi"}})

    assert event.kind is EventKind.CHANNEL_POST
    assert event.attachment is None


def test_empty_message_is_still_a_message() -> None:
    event = classify_event({"update_id": 2, "message": {}})

    assert event.kind is EventKind.MESSAGE
