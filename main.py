"""
Entry point for the Credenciales Backend
"""

import sys
import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from app import create_app
from config.settings import PORT, HOST, LOG_LEVEL, DatabaseSettings

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    db_settings = DatabaseSettings.from_env()
    logger.info(f"Starting Credenciales Backend on port {PORT}")
    uvicorn.run(create_app(db_settings), host=HOST, port=PORT)
