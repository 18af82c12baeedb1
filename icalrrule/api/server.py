"""Runtime settings for serving the icalrrule API.

Values come from the environment (a local `.env` file is honoured).
"""

import os
from dotenv import load_dotenv

load_dotenv()

APP_IMPORT_PATH = "icalrrule.api.app:app"


def get_server_kwargs() -> dict:
    """Return deterministic uvicorn.run kwargs from the environment.

    This is separated to allow deterministic unit testing without starting a server.
    """
    return {
        "host": os.getenv("RRULE_API_HOST", "0.0.0.0"),
        "port": int(os.getenv("RRULE_API_PORT", "8000")),
        # Auto-reload is a dev convenience only.
        "reload": os.getenv("DEBUG", "False").lower() == "true",
    }
