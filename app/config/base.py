# -*- coding: utf-8 -*-
from pathlib import Path

from . import getenv_list_or_action, getenv_or_action

# Logging
LOG_LEVEL = getenv_or_action("LOG_LEVEL", default="INFO")

# Server
HOST = getenv_or_action("HOST", default="0.0.0.0")
PORT = int(getenv_or_action("PORT", default="8080"))

# Timezone configuration
TIMEZONE = getenv_or_action("TIMEZONE", default="Asia/Bangkok")

# Sentry
SENTRY_ENABLE = False
SENTRY_DSN = None
SENTRY_ENVIRONMENT = None

# Vehicle count endpoint
VEHICLE_COUNT_BASE_URL = getenv_or_action(
    "VEHICLE_COUNT_BASE_URL",
    default="http://localhost:5678/webhook/vehicle_count/all",
).rstrip("/")
VEHICLE_COUNT_SOURCE_TYPE = getenv_or_action(
    "VEHICLE_COUNT_SOURCE_TYPE", default="camera"
)
VEHICLE_COUNT_CAMERA_IDS = [
    int(camera_id)
    for camera_id in getenv_list_or_action(
        "VEHICLE_COUNT_CAMERA_IDS", default="1,2,3,4"
    )
]
# Unset, empty or zero means no timeout
_request_timeout = getenv_or_action("VEHICLE_COUNT_REQUEST_TIMEOUT", action="ignore")
VEHICLE_COUNT_REQUEST_TIMEOUT = float(_request_timeout or 0) or None

# CORS configuration
ALLOWED_ORIGINS = getenv_list_or_action("ALLOWED_ORIGINS", default="*")
ALLOWED_ORIGINS_REGEX = getenv_or_action("ALLOWED_ORIGINS_REGEX", action="ignore")
ALLOWED_METHODS = getenv_list_or_action("ALLOWED_METHODS", default="*")
ALLOWED_HEADERS = getenv_list_or_action("ALLOWED_HEADERS", default="*")
ALLOW_CREDENTIALS = (
    getenv_or_action("ALLOW_CREDENTIALS", default="false").lower() == "true"
)

# Rate limits
RATE_LIMIT_DEFAULT = getenv_or_action("RATE_LIMIT_DEFAULT", default="60/minute")

# Dashboard templates
HTML_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
