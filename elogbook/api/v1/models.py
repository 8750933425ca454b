"""
API Models for response documentation
"""

from flask_restx import fields

from elogbook.api.v1 import api

attachment_response = api.model(
    "AttachmentResponse",
    {
        "id": fields.Integer(description="Attachment number within the entry"),
        "mime": fields.String(description="MIME type", example="image/png"),
        "original_name": fields.String(
            description="Filename as uploaded", example="photo.png"
        ),
        "download_url": fields.String(
            description="Single-use download link, valid for a few minutes",
            example="/api/v1/downloads/?client=tab-1&token=Ab3dE...",
        ),
    },
)

entry_response = api.model(
    "EntryResponse",
    {
        "id": fields.String(description="Entry identifier"),
        "content": fields.String(description="Entry text"),
        "created_at": fields.DateTime(description="Creation time (ISO 8601)"),
        "attachments": fields.List(fields.Nested(attachment_response)),
    },
)

extend_response = api.model(
    "ExtendResponse",
    {
        "status": fields.String(description="Always 'ok'", example="ok"),
    },
)

error_response = api.model(
    "ErrorResponse",
    {
        "error": fields.String(
            description="Error category",
            enum=[
                "unknown_client",
                "expired_client",
                "unknown_token",
                "file_unavailable",
                "invalid_request",
                "system_error",
            ],
        ),
        "title": fields.String(description="Short error title"),
        "message": fields.String(description="User-friendly error message"),
        "action": fields.String(description="Suggested next step"),
    },
)
