# main.py
import os
from dotenv import load_dotenv
from timelogger.app import create_app
from timelogger.logging_config import configure_logging
from pathlib import Path

# ── Load the production env file ───────────────────────────────────
root = Path(__file__).resolve().parent
env_file = root / ".env.production"
load_dotenv(env_file)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))

if not os.getenv("GOOGLE_SHEET_ID"):
    raise ValueError("GOOGLE_SHEET_ID must be set before starting the web app")

app = create_app()

if __name__ == "__main__":
    configure_logging()
    app.run(host=HOST, port=PORT)
