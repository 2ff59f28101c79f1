# -*- coding: utf-8 -*-
from . import getenv_or_action
from .base import *  # noqa: F401, F403

# Environment
environment = "dev"

# Logging
LOG_LEVEL = getenv_or_action("LOG_LEVEL", default="DEBUG")
