"""
Address discovery helpers.
"""

import socket

from common.constants import IP_DISCOVERY_PRIMARY, IP_DISCOVERY_FALLBACK


def get_outbound_ip(target) -> str:
    """Return the local IPv4 address used to reach ``target``.

    Connecting a UDP socket only selects the route; no packet is sent.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
        s.connect(target)
        return s.getsockname()[0]


def detect_public_ip() -> str:
    """Detect the public-facing address, trying 1.1.1.1 then 8.8.8.8."""
    try:
        return get_outbound_ip(IP_DISCOVERY_PRIMARY)
    except OSError:
        return get_outbound_ip(IP_DISCOVERY_FALLBACK)
