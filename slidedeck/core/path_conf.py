from pathlib import Path

# Project root (the slidedeck package directory)
BASE_PATH = Path(__file__).resolve().parent.parent

# Log files
LOG_DIR = BASE_PATH / 'log'

# SQLite database files
SQLITE_DIR = BASE_PATH / 'data'
