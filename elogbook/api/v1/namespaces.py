"""
API Namespaces - Organized endpoint groups
"""

from flask import current_app, request, send_file
from flask_restx import Namespace, Resource

from elogbook.api.v1.models import entry_response, error_response, extend_response
from elogbook.application.download_access_service import DownloadAccessService
from elogbook.application.entry_listing_service import (
    DEFAULT_PAGE_SIZE,
    EntryListingService,
)
from elogbook.domain.errors import (
    DownloadAuthorizationError,
    ErrorCategory,
    create_error_response,
)

# Outward status per download failure; unknown client and unknown token are
# both "not found", an expired client is a bad request.
DOWNLOAD_ERROR_STATUS = {
    ErrorCategory.UNKNOWN_CLIENT: 404,
    ErrorCategory.EXPIRED_CLIENT: 400,
    ErrorCategory.UNKNOWN_TOKEN: 404,
    ErrorCategory.FILE_UNAVAILABLE: 500,
}


def _resolve(service_type):
    container = getattr(current_app, "container", None)
    if container is None or not container.is_registered(service_type):
        return None
    return container.resolve(service_type)


def _service_unavailable(name: str):
    return create_error_response(
        ErrorCategory.SYSTEM_ERROR,
        f"{name} not initialized",
        status_code=503,
    )


def _parse_int_arg(name: str, default: int):
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    return int(raw)


# =============================================================================
# Entry Namespace - Listing with download links
# =============================================================================

entry_ns = Namespace("entries", description="Journal entry listing")


@entry_ns.route("/")
class EntryList(Resource):
    """List entries"""

    @entry_ns.doc(
        "list_entries",
        params={
            "client": "Client identifier the download links are issued to",
            "limit": "Page size (default 20, max 100)",
            "offset": "Number of newest entries to skip",
        },
    )
    @entry_ns.response(200, "Success", [entry_response])
    @entry_ns.response(400, "Bad Request", error_response)
    @entry_ns.response(503, "Service Unavailable", error_response)
    def get(self):
        """
        List journal entries, newest first

        Every call issues fresh single-use download links for all listed
        attachments and discards expired download sessions.
        """
        try:
            limit = _parse_int_arg("limit", DEFAULT_PAGE_SIZE)
            offset = _parse_int_arg("offset", 0)
        except ValueError:
            return create_error_response(
                ErrorCategory.INVALID_REQUEST,
                "limit and offset must be integers",
                status_code=400,
            )

        client_id = (request.args.get("client") or "").strip() or None

        try:
            listing_service = _resolve(EntryListingService)
            if listing_service is None:
                return _service_unavailable("Entry listing service")

            return listing_service.list_entries(client_id, limit, offset), 200

        except Exception as e:
            current_app.logger.exception(f"Unexpected error listing entries: {str(e)}")
            return create_error_response(
                ErrorCategory.SYSTEM_ERROR,
                f"Unexpected error: {str(e)}",
                status_code=500,
            )


# =============================================================================
# Download Namespace - Token redemption and session extension
# =============================================================================

download_ns = Namespace("downloads", description="Attachment download operations")


def _serve_download(token: str, client_id=None):
    """
    Redeem a token and stream the file.

    The token is consumed before the file is opened; the store lock is not
    held while the response is streamed.
    """
    access_service = _resolve(DownloadAccessService)
    if access_service is None:
        return _service_unavailable("Download service")

    try:
        descriptor, stream = access_service.open_download(token, client_id)
    except DownloadAuthorizationError as e:
        category = access_service.categorize_error(e)
        status_code = DOWNLOAD_ERROR_STATUS.get(category, 500)
        if status_code >= 500:
            current_app.logger.error(f"[DOWNLOAD] {e} (token {token[:8]})")
        return create_error_response(category, str(e), status_code=status_code)

    current_app.logger.debug(
        f"[DOWNLOAD] Serving {descriptor.original_name} for token {token[:8]}"
    )
    return send_file(
        stream,
        as_attachment=True,
        download_name=descriptor.original_name,
    )


@download_ns.route("/")
class ClientDownload(Resource):
    """Download an attachment with a client-scoped token"""

    @download_ns.doc(
        "download_file",
        params={"client": "Client identifier", "token": "Single-use download token"},
    )
    @download_ns.response(200, "File content")
    @download_ns.response(400, "Missing parameters or expired client", error_response)
    @download_ns.response(404, "Unknown client or token", error_response)
    @download_ns.response(500, "File unavailable", error_response)
    def get(self):
        """
        Download an attachment

        The token works once. The response carries the original filename in
        its Content-Disposition header.
        """
        client_id = (request.args.get("client") or "").strip()
        token = (request.args.get("token") or "").strip()

        if not client_id or not token:
            return create_error_response(
                ErrorCategory.INVALID_REQUEST,
                "Both 'client' and 'token' query parameters are required",
                status_code=400,
            )

        return _serve_download(token, client_id)


@download_ns.route("/extend")
class ExtendDownloads(Resource):
    """Keep a client's download links alive"""

    @download_ns.doc("extend_downloads", params={"client": "Client identifier"})
    @download_ns.response(200, "Success", extend_response)
    @download_ns.response(400, "Missing client parameter", error_response)
    def post(self):
        """
        Extend the lifetime of a client's download links

        Resets the deadline to a fixed interval from now. Succeeds whether or
        not the client is known.
        """
        client_id = (request.args.get("client") or "").strip()
        if not client_id:
            return create_error_response(
                ErrorCategory.INVALID_REQUEST,
                "Missing 'client' query parameter",
                status_code=400,
            )

        access_service = _resolve(DownloadAccessService)
        if access_service is None:
            return _service_unavailable("Download service")

        access_service.extend(client_id)
        return {"status": "ok"}, 200


@download_ns.route("/<string:token>")
@download_ns.param("token", "Single-use download token")
class TokenDownload(Resource):
    """Download an attachment with a token issued without a client"""

    @download_ns.doc("download_file_by_token")
    @download_ns.response(200, "File content")
    @download_ns.response(404, "Unknown or used token", error_response)
    @download_ns.response(500, "File unavailable", error_response)
    def get(self, token):
        """
        Download an attachment by path token
        """
        return _serve_download(token.strip())
