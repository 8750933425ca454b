from datetime import datetime, timezone

from elogbook.domain.download_auth import DownloadDescriptor
from elogbook.domain.entries import Attachment, Entry

CREATED = datetime(2024, 2, 2, 18, 45, tzinfo=timezone.utc)


class TestAttachment:
    def test_to_descriptor(self):
        attachment = Attachment(3, "/var/lib/elogbook/aa11", "receipt.pdf", "application/pdf")
        assert attachment.to_descriptor() == DownloadDescriptor("/var/lib/elogbook/aa11", "receipt.pdf")

    def test_from_dict_defaults_mime(self):
        attachment = Attachment.from_dict(
            {"id": "4", "saved_path": "/x", "original_name": "blob"}
        )
        assert attachment.id == 4
        assert attachment.mime == "application/octet-stream"


class TestEntry:
    def test_dict_round_trip_keeps_timezone(self):
        entry = Entry(
            id="e1",
            content="Dinner with friends",
            created_at=CREATED,
            attachments=[Attachment(1, "/x", "menu.jpg", "image/jpeg")],
        )

        restored = Entry.from_dict(entry.to_dict())

        assert restored == entry
        assert restored.created_at.tzinfo is not None

    def test_from_dict_tolerates_missing_attachments(self):
        entry = Entry.from_dict({"content": "quiet day", "created_at": CREATED.isoformat(), "attachments": None})
        assert entry.attachments == []
        assert entry.id is None
