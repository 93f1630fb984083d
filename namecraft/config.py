# namecraft/config.py
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent

class Config:
    """Configuration settings for the name generator"""

    # Storage settings
    DATA_DIR: Path = Path(os.getenv("NAMECRAFT_DATA_DIR", str(BASE_DIR / "data")))

    # Generation settings
    GENERATION_COUNT: int = int(os.getenv("NAMECRAFT_GENERATION_COUNT", "5"))

    # Upload settings
    MAX_IMAGE_SIZE: int = int(os.getenv("NAMECRAFT_MAX_IMAGE_SIZE", str(5 * 1024 * 1024)))

    # Other settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Paths
    LOG_DIR: Path = Path(os.getenv("NAMECRAFT_LOG_DIR", str(BASE_DIR / "logs")))

def setup_logging():
    """Configure logging settings"""
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    Config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = Config.LOG_DIR / "namecraft.log"

    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format=log_format,
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler()
        ]
    )
