"""
Configuration settings for the job application form.

Values come from the environment (or a local `.env` file).
"""

from dotenv import load_dotenv
load_dotenv()          # must run before os.getenv(...)
import os

APP_TITLE = os.getenv("APP_TITLE", "Job Application Form")

# Logging level name, e.g. "DEBUG", "INFO", "WARNING"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Offer the reportlab summary download next to the JSON one
ENABLE_PDF_EXPORT = os.getenv("ENABLE_PDF_EXPORT", "true").strip().lower() in ("1", "true", "yes", "on")
