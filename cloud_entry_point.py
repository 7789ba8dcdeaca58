import os
from flask import Request
from timelogger.app import json_response, text_response
from timelogger.handler import handle_ingest, handle_liveness
from timelogger.logging_config import configure_logging
from timelogger.sheet_writer import connect_to_sheet

# Cloud Functions has a read-only filesystem unless LOG_DIR points somewhere writable
configure_logging(log_dir=os.getenv("LOG_DIR") or None)

def entry_point(request: Request):
    if request.method == "GET":
        return text_response(handle_liveness())
    return json_response(handle_ingest(request.get_data(), connect_to_sheet))
