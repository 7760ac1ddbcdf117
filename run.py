"""
Vendor Schedules API Server Runner
Run this as a separate process: python run.py
"""

import logging
import sys
from pathlib import Path

import uvicorn

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

# Importing the app configures logging
from app.config import HOST, LOG_LEVEL, PORT
from app.main import app

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info(f"🚀 Starting schedules API on http://{HOST}:{PORT}")
    # uvicorn exits the process when the application lifespan fails to start
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
