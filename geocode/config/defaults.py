# geocode/config/defaults.py
"""Default configuration values"""

from pathlib import Path

# Project path
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / 'logs'

GEOCODING = {
    'default_variant': 'geohash',
    'default_precision': 8,
}

LOGGING = {
    'level': 'INFO',
    'console': True,
    'use_colors': None,  # auto-detect from the stream
    'file': None,  # e.g. str(LOGS_DIR / 'geocode.log')
    'max_file_size': 10 * 1024 * 1024,  # 10MB
    'backup_count': 5,
}
