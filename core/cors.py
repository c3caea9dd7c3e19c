PREFLIGHT_MAX_AGE = 86400


def get_cors_headers(allowed_origin: str) -> dict[str, str]:
    return {"Access-Control-Allow-Origin": allowed_origin or "*"}


def get_preflight_headers(allowed_origin: str) -> dict[str, str]:
    """Headers for an OPTIONS preflight, sent regardless of the request's own headers."""
    headers = get_cors_headers(allowed_origin)
    headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
    headers["Access-Control-Allow-Headers"] = "Content-Type"
    headers["Access-Control-Max-Age"] = str(PREFLIGHT_MAX_AGE)
    return headers
