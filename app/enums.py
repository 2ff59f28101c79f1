# -*- coding: utf-8 -*-
from enum import Enum


class SearchStatusEnum(str, Enum):
    OK = "ok"
    NO_DATA = "no_data"
    FAILED = "failed"


class SourceStatusEnum(str, Enum):
    ACTIVE = "active"
    NO_DATA = "no_data"
    UNAVAILABLE = "unavailable"


class UnavailableReasonEnum(str, Enum):
    HTTP_STATUS = "http_status"
    EMPTY_BODY = "empty_body"
    MALFORMED = "malformed"
    NETWORK_ERROR = "network_error"
