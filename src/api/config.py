"""Service configuration.

Defaults are the production values; HOST, PORT and FRONTEND_DIST_DIR may be
overridden through the environment (or a .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

SERVICE_NAME = "User Demo API"
SERVICE_VERSION = "1.0.0"

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))

# Prebuilt frontend (vite build output), relative to the working directory
FRONTEND_DIST_DIR = Path(os.getenv("FRONTEND_DIST_DIR", "../frontend/dist"))

# CORS: only the local dev servers of the frontend may read responses
CORS_ORIGINS = ["http://localhost:5173", "http://localhost:3000"]
CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Origin", "Content-Type", "Accept", "Authorization"]
CORS_EXPOSE_HEADERS = ["Content-Length"]
CORS_ALLOW_CREDENTIALS = True
CORS_MAX_AGE = 12 * 60 * 60
