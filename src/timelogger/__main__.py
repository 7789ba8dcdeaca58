# __main__.py
import os
import logging
from pathlib import Path
import argparse
from dotenv import load_dotenv

from .app import create_app
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="timelogger")
    p.add_argument("--env", choices=["dev","prod"], default="prod")
    p.add_argument("--host", type=str, default=None, help="Interface to listen on (default: $HOST or 0.0.0.0)")
    p.add_argument("--port", type=int, default=None, help="Port to listen on (default: $PORT or 8080)")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # ── Load the env file they asked for ───────────────────────────────
    root = Path(__file__).resolve().parent.parent.parent
    env_file = root / (".env.production" if args.env=="prod" else ".env.development")
    load_dotenv(env_file, override=True)

    host = args.host or os.getenv("HOST", "0.0.0.0")
    port = args.port or int(os.getenv("PORT", 8080))

    if args.verbose:
        logger.info("Loaded env: %s", env_file)

    if not os.getenv("GOOGLE_SHEET_ID"):
        raise ValueError("GOOGLE_SHEET_ID is not set in the environment variables.")

    app = create_app()
    logger.info("Listening on %s:%s", host, port)
    app.run(host=host, port=port)


if __name__ == "__main__":
    configure_logging()
    main()
