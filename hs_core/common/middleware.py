# hs_core/common/middleware.py
from __future__ import annotations

import logging
import re
import time

from django.utils.deprecation import MiddlewareMixin

from hs_core.common.api.exceptions import ensure_request_id
from hs_core.common.log import reset_request_id, set_request_id

logger = logging.getLogger(__name__)

_VALID_RID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


class RequestIdMiddleware(MiddlewareMixin):
    """
    Correlates logs and error envelopes with a single request id.

    Behavior:
      - Reuses an inbound X-Request-ID header when it looks sane, otherwise generates one.
      - Attaches request.request_id and binds it to the logging context.
      - Echoes X-Request-ID on every response.
      - Logs one line per /api/ request with status and duration.
    """

    HEADER = "X-Request-ID"
    META_KEY = "HTTP_X_REQUEST_ID"

    def process_request(self, request):
        inbound = (request.META.get(self.META_KEY) or "").strip()
        if inbound and _VALID_RID.match(inbound):
            request.request_id = inbound
        rid = ensure_request_id(request)

        request._hs_rid_token = set_request_id(rid)
        request._hs_started = time.monotonic()
        return None

    def process_response(self, request, response):
        rid = getattr(request, "request_id", None)
        if rid:
            response[self.HEADER] = rid

        started = getattr(request, "_hs_started", None)
        path = getattr(request, "path", "") or ""
        if started is not None and path.startswith("/api/"):
            elapsed_ms = (time.monotonic() - started) * 1000
            logger.info("%s %s -> %s (%.1f ms)", request.method, path, response.status_code, elapsed_ms)

        token = getattr(request, "_hs_rid_token", None)
        if token is not None:
            reset_request_id(token)
            request._hs_rid_token = None
        return response
