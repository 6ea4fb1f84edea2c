#!/usr/bin/env python3
"""Run the persons API with uvicorn.

Usage:
    python scripts/serve.py

Environment Variables:
    DATABASE_URL: Optional SQLAlchemy URL, overrides the NAMEIQ_DB_* settings
    NAMEIQ_SERVER_HOST / NAMEIQ_SERVER_PORT: Bind address (default 0.0.0.0:8080)
    NAMEIQ_DB_HOST, NAMEIQ_DB_PORT, NAMEIQ_DB_USER, NAMEIQ_DB_PASSWORD,
    NAMEIQ_DB_NAME, NAMEIQ_DB_SSLMODE: PostgreSQL connection
    NAMEIQ_LOG_LEVEL: debug, info, warning or error
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
import uvicorn


def main():
    load_dotenv()

    # Settings read the environment at import time, after .env is loaded
    from src.config.settings import Settings
    from src.api.app import create_app

    config = Settings()
    app = create_app(config)
    uvicorn.run(app, host=config.server_host, port=config.server_port)


if __name__ == "__main__":
    main()
