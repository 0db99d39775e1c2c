#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - API Server Entry Point
# =============================================================================
# Starts the pest detection API with uvicorn.
#
# Usage:
#   # Start server (settings from environment / .env)
#   python scripts/start_server.py
#
#   # Or through the installed console script
#   pest-detection-server
#
#   # Or use uvicorn directly
#   uvicorn app.main:app --host 0.0.0.0 --port 8080
#
# Prerequisites:
#   - MinIO (or another S3 endpoint) for upload jobs; the server starts
#     without it, but /jobs answers 503
#   - Environment variables set (.env file)
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from app.main import run


def main():
    """Start the API server."""
    print("=" * 60)
    print("Pest Detection API Server")
    print("=" * 60)
    print()
    print(f"Mode:    {settings.SERVER_MODE}")
    print(f"Listen:  {settings.SERVER_HOST}:{settings.SERVER_PORT}")
    print(f"Storage: {settings.STORAGE_ENDPOINT} (bucket {settings.STORAGE_BUCKET})")
    print()
    print("Press Ctrl+C to stop")
    print()

    run()


if __name__ == "__main__":
    main()
