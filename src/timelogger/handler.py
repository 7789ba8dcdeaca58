# handler.py

import json
import logging

from .models import Entry, IngestResult
from .sheet_writer import PartialAppendError, append_entries, ensure_header

LIVENESS_MESSAGE = "This web app is active. Use POST to send data."

logger = logging.getLogger(__name__)


def parse_entries(body) -> list[Entry]:
    """Decodes a request body of the form {"entries": [...]} into Entry objects."""
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")

    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    if "entries" not in data:
        raise ValueError("Request body has no 'entries' field")

    entries = data["entries"]
    if not isinstance(entries, list):
        raise ValueError("'entries' must be a list")

    return [Entry.from_dict(item) for item in entries]


def handle_ingest(body, sheet) -> IngestResult:
    """
    Parses the POST body, makes sure the sheet has a header row and appends
    one row per entry. Every failure is returned as an error result.

    `sheet` is a worksheet or a zero-argument callable returning one.
    """
    try:
        entries = parse_entries(body)

        if callable(sheet):
            sheet = sheet()

        header_written = ensure_header(sheet)
        count = append_entries(sheet, entries)
    except PartialAppendError as e:
        logger.error("Append failed after %d row(s), earlier rows were kept: %s",
                     e.rows_written, e, exc_info=e.cause)
        return IngestResult.error(e)
    except Exception as e:
        logger.error("Failed to ingest entries: %s", e, exc_info=True)
        return IngestResult.error(e)

    logger.info("Added %d entries (header written: %s)", count, header_written)
    return IngestResult.success(count)


def handle_liveness() -> str:
    return LIVENESS_MESSAGE
