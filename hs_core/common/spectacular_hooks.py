from __future__ import annotations

VERSIONED_PREFIX = "/api/v1/"
ALIAS_PREFIX = "/api/"


def _is_alias_route(path: str) -> bool:
    return path.startswith(ALIAS_PREFIX) and not path.startswith(VERSIONED_PREFIX)


def preprocess_exclude_legacy_api(endpoints):
    """
    The housing routes are mounted twice (/api/v1/ and the /api/ alias the
    browser UI calls). Document only the versioned copy.
    """
    return [endpoint for endpoint in endpoints if not _is_alias_route(endpoint[0])]
