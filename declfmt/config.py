# declfmt/config.py

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv  # type: ignore

load_dotenv()

LOG_LEVEL = (os.getenv("DECLFMT_LOG_LEVEL") or "").strip().upper() or "WARNING"
SERVICE_TITLE = (os.getenv("DECLFMT_SERVICE_TITLE") or "").strip() or "Declaration Formatter (CIR -> declarations)"
CORS_ORIGINS = [
    o.strip()
    for o in (os.getenv("DECLFMT_CORS_ORIGINS") or "http://localhost:5173,http://localhost:3000").split(",")
    if o.strip()
]

# indentation for member lines inside a described type body
MEMBER_INDENT = "    "

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGING_CONFIGURED = True
