"""Settings read from environment variables."""

import os
import pathlib

PACKAGE_DIR = pathlib.Path(__file__).resolve().parent

LOG_CONFIG_PATH: pathlib.Path = pathlib.Path(
    os.environ.get('HEXBOARD_LOG_CONFIG', str(PACKAGE_DIR / 'config' / 'logging.yaml'))
)
LOG_LEVEL: str = os.environ.get('HEXBOARD_LOG_LEVEL', 'INFO').upper()
CONFLICT_POLICY: str = os.environ.get('HEXBOARD_CONFLICT_POLICY', 'raise').lower()
