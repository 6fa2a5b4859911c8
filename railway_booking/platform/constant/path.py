from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# File-backed key-value store directory
DATA_DIR = BASE_DIR / 'railway_data'
