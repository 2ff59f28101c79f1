# -*- coding: utf-8 -*-
from slowapi import Limiter
from slowapi.util import get_remote_address

from app import config

# In-memory storage: a single dashboard process holds no shared state
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[config.RATE_LIMIT_DEFAULT],
    storage_uri="memory://",
)
