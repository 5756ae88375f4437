"""Application configuration management."""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from backend directory
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# Unrecognized level names come back as "Level <name>" strings
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "INFO"
