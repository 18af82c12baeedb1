#!/usr/bin/env python3
"""Run script for icalrrule."""

import uvicorn

from icalrrule.api.server import APP_IMPORT_PATH, get_server_kwargs

if __name__ == "__main__":
    uvicorn.run(APP_IMPORT_PATH, **get_server_kwargs())
