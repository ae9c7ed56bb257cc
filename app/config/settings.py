from pathlib import Path
from dotenv import load_dotenv
import os

load_dotenv(Path(__file__).parent.parent / '.env', override=True)

def env_bool(name: str, default: bool = False) -> bool:
    return str(os.getenv(name, str(default))).strip().lower() in {"1", "true", "yes", "on", "y", "t"}

class Settings:
    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').strip().upper()
    LOG_TO_FILE = env_bool("LOG_TO_FILE", False)

    # Directories
    BASE_DIR = Path(__file__).parent.parent
    STORAGE_DIR = Path(os.getenv('STORAGE_DIR', str(BASE_DIR / "storage")))

    # Logs (created lazily by setup_logger)
    LOGS_DIR = Path(os.getenv('LOGS_DIR', str(STORAGE_DIR / "logs")))
    LOG_FILE = LOGS_DIR / "utils.log"
