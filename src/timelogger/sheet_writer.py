# sheet_writer.py

import logging
import os
import threading
from pathlib import Path
from typing import Iterable, Optional

import gspread
from dotenv import load_dotenv
from oauth2client.service_account import ServiceAccountCredentials

from .models import Entry, HEADER_ROW

# ─── Configurable Constants ─────────────────────────────────────────────────────

root = Path(__file__).resolve().parent.parent.parent
env_file = root / ".env.production"
load_dotenv(env_file)

SCOPE = [
    "https://spreadsheets.google.com/feeds",
    "https://www.googleapis.com/auth/drive"
]

HEADER_RANGE = "A1:F1"

logger = logging.getLogger(__name__)

# Serialises the empty-sheet check and the header write within this process
_header_lock = threading.Lock()

# ─── Setup Connection to Google Sheet ───────────────────────────────────────────

def connect_to_sheet(sheet_id: Optional[str] = None, worksheet: Optional[str] = None):
    """
    Opens the configured spreadsheet and returns the target worksheet.
    Falls back to GOOGLE_SHEET_ID / GOOGLE_WORKSHEET from the environment;
    with no worksheet name the first tab is used.
    """
    service_account_file = os.getenv("GOOGLE_SERVICE_ACCOUNT_JSON", "service_account.json")
    sheet_id = sheet_id or os.getenv("GOOGLE_SHEET_ID")
    worksheet = worksheet or os.getenv("GOOGLE_WORKSHEET")

    if not sheet_id:
        raise ValueError("GOOGLE_SHEET_ID is not set in the environment variables.")
    if not os.path.exists(service_account_file):
        raise FileNotFoundError(f"Service account file not found: {service_account_file}")

    creds = ServiceAccountCredentials.from_json_keyfile_name(service_account_file, SCOPE)
    client = gspread.authorize(creds)
    spreadsheet = client.open_by_key(sheet_id)
    if worksheet:
        return spreadsheet.worksheet(worksheet)
    return spreadsheet.sheet1

# ─── Header Row ─────────────────────────────────────────────────────────────────

def sheet_is_empty(sheet) -> bool:
    """
    True when the sheet holds no content at all.

    Row 1 is checked first so a sheet in use costs a single-row read; the
    full download only happens when row 1 is blank.
    """
    if any(sheet.row_values(1)):
        return False
    return len(sheet.get_all_values()) == 0


def ensure_header(sheet) -> bool:
    """
    Writes the bold header row if the sheet is empty. Returns True if written.

    Row 1 is upserted rather than appended, so two writers that both see an
    empty sheet end up with a single header row. A sheet that already has
    rows is left alone, whatever its first row holds.
    """
    with _header_lock:
        if not sheet_is_empty(sheet):
            return False

        sheet.update(range_name=HEADER_RANGE, values=[HEADER_ROW])
        sheet.format(HEADER_RANGE, {"textFormat": {"bold": True}})

    logger.info("Wrote header row to empty sheet")
    return True

# ─── Append Entry Rows ──────────────────────────────────────────────────────────

class PartialAppendError(Exception):
    """An append failed; `rows_written` rows from the same batch stay in the sheet."""

    def __init__(self, cause: BaseException, rows_written: int):
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause
        self.rows_written = rows_written


def append_entries(sheet, entries: Iterable[Entry]) -> int:
    """
    Appends one row per entry, in order. Returns the number of rows written.
    A failing append raises PartialAppendError; earlier rows are not rolled back.
    """
    count = 0
    for entry in entries:
        try:
            sheet.append_row(entry.to_row())
        except Exception as e:
            raise PartialAppendError(e, count) from e
        count += 1
    return count
