# -*- coding: utf-8 -*-
"""Test configuration with safe defaults and no external endpoints."""

from pathlib import Path

# Don't import from base to avoid environment variable loading

# Environment
environment = "test"

# Logging
LOG_LEVEL = "DEBUG"

# Server
HOST = "127.0.0.1"
PORT = 8080

# Timezone configuration
TIMEZONE = "Asia/Bangkok"

# Sentry (disabled for tests)
SENTRY_ENABLE = False
SENTRY_DSN = None
SENTRY_ENVIRONMENT = None

# Vehicle count endpoint (never reached, tests inject their own repository)
VEHICLE_COUNT_BASE_URL = "http://vehicle-count.test/webhook/vehicle_count/all"
VEHICLE_COUNT_SOURCE_TYPE = "camera"
VEHICLE_COUNT_CAMERA_IDS = [1, 2, 3, 4]
VEHICLE_COUNT_REQUEST_TIMEOUT = 5.0

# CORS configuration
ALLOWED_ORIGINS = ["*"]
ALLOWED_ORIGINS_REGEX = None
ALLOWED_METHODS = ["*"]
ALLOWED_HEADERS = ["*"]
ALLOW_CREDENTIALS = False

# Rate limits (more permissive for tests)
RATE_LIMIT_DEFAULT = "10000/second"

# Dashboard templates
HTML_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
