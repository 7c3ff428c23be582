"""
Configuration settings for the eSigma service layer
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Configure logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD or QA
DATABASE_URL = os.getenv("DATABASE_URL")
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 2))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))
DB_COMMAND_TIMEOUT = float(os.getenv("DB_COMMAND_TIMEOUT", 60))

# Credentials
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 10))
DEFAULT_USER_PASSWORD = os.getenv("DEFAULT_USER_PASSWORD", "password123")

logger.info(f"Environment: {ENV}")

# Missing database is not an error: services fall back to demo mode
if not DATABASE_URL:
    logger.warning("DATABASE_URL not set - services will run in demo mode")
