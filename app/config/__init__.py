# -*- coding: utf-8 -*-
from os import getenv
from typing import List

from loguru import logger


def getenv_or_action(
    env_name: str, *, action: str = "raise", default: str = None
) -> str:
    """
    Get an environment variable or take an action if it's not set.

    Args:
        env_name (str): The environment variable name.
        action (str, optional): One of "raise", "warn" or "ignore". Defaults to "raise".
        default (str, optional): Value used when the variable is not set.

    Returns:
        str: The value, or an empty string when ignored.
    """
    if action not in ("raise", "warn", "ignore"):
        raise ValueError("action must be one of 'raise', 'warn' or 'ignore'")

    value = getenv(env_name, default)
    if value is None:
        if action == "raise":
            raise EnvironmentError(f"Environment variable {env_name} is not set.")
        if action == "warn":
            logger.warning(f"Warning: Environment variable {env_name} is not set.")
        value = ""
    return value


def getenv_list_or_action(
    env_name: str, *, action: str = "raise", default: str = None
) -> List[str]:
    """
    Get a comma-separated environment variable as a list of stripped strings.
    """
    value = getenv_or_action(env_name, action=action, default=default)
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


environment = getenv_or_action("ENVIRONMENT", action="ignore", default="dev")
if environment == "prod":
    from app.config.prod import *  # noqa: F401, F403
elif environment == "test":
    from app.config.test import *  # noqa: F401, F403
else:
    from app.config.dev import *  # noqa: F401, F403
