from typing import Mapping


def resolve_client_key(headers: Mapping[str, str]) -> str:
    # Headers are proxy-supplied and unauthenticated; good enough for throttling only.
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return headers.get("x-real-ip") or "unknown"
