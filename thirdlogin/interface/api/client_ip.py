"""Client address extraction."""

from fastapi import Request


def client_ip(request: Request) -> str:
    """Public IP address of the client behind any reverse proxies.

    Checks ``X-Forwarded-For`` (first hop), then ``X-Real-IP``, then the
    socket peer.

    Args:
        request: Incoming request

    Returns:
        Client IP address, empty if unknown
    """
    forwarded_for = request.headers.get("x-forwarded-for", "")
    first_hop = forwarded_for.split(",")[0].strip()
    if first_hop:
        return first_hop

    real_ip = request.headers.get("x-real-ip", "").strip()
    if real_ip:
        return real_ip

    return request.client.host if request.client else ""
