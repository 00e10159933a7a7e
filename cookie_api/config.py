"""
Configuration module for the Cookie Avatar API
Contains logger setup and environment variables
"""

import os
import logging
from typing import Any

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


# -------------------------
# Logger Setup
# -------------------------
def setup_logger(name: str = __name__, log_file: str = "cookie_api.log") -> logging.Logger:
    """
    Set up and return a logger with both file and console handlers

    Args:
        name: Logger name (usually __name__)
        log_file: Path to log file

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Avoid adding duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


LOG_FILE = os.getenv("LOG_FILE", "cookie_api.log")

# Create the main application logger
logger = setup_logger("cookie_api", LOG_FILE)


def log_event(level: int, message: str, **context: Any) -> None:
    """Helper to emit structured logs with contextual metadata."""
    logger.log(level, "%s | context=%s", message, context)


# -------------------------
# Environment Variables
# -------------------------
TWEETSCOUT_API_KEY = os.getenv("TWEETSCOUT_API_KEY")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

TWEETSCOUT_BASE_URL = os.getenv("TWEETSCOUT_BASE_URL", "https://api.tweetscout.io/v2")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
OPENAI_IMAGE_MODEL = os.getenv("OPENAI_IMAGE_MODEL", "gpt-image-1")
OPENAI_IMAGE_SIZE = os.getenv("OPENAI_IMAGE_SIZE", "1024x1024")

PORT = int(os.getenv("PORT", "3001"))

# Timeouts in seconds
PROFILE_TIMEOUT_SECONDS = 30.0
SOURCE_FETCH_TIMEOUT_SECONDS = 30.0
GENERATION_TIMEOUT_SECONDS = 180.0


# Log configuration status
logger.info("Configuration loaded successfully")
logger.debug(f"TWEETSCOUT_API_KEY configured: {bool(TWEETSCOUT_API_KEY)}")
logger.debug(f"OPENAI_API_KEY configured: {bool(OPENAI_API_KEY)}")
logger.debug(f"TWEETSCOUT_BASE_URL: {TWEETSCOUT_BASE_URL}")
logger.debug(f"OPENAI_BASE_URL: {OPENAI_BASE_URL}")
