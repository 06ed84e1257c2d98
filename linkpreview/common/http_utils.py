"""HTTP transport used to retrieve documents for previews."""

import asyncio
import ipaddress
import socket
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urljoin, urlsplit

import aiohttp

from linkpreview.logging import get_logger

logger = get_logger(__name__)

ALLOWED_SCHEMES = {"http", "https"}
LOCAL_HOSTNAMES = {"localhost", "localhost.localdomain"}
REDIRECT_STATUSES = {301, 302, 303, 307, 308}


def is_safe_url(url: str, allow_private_hosts: bool = False) -> bool:
    """
    Check that a URL may be requested.

    Only http(s) URLs with a host are accepted. Loopback, private, link-local and
    reserved addresses are refused unless ``allow_private_hosts`` is set. Host names
    are not resolved here, so only literal addresses and ``localhost`` are caught.

    Args:
        url: The URL to check
        allow_private_hosts: Accept local and private network hosts

    Returns:
        True if the URL can be fetched
    """
    try:
        parts = urlsplit(url)
        host = parts.hostname
        parts.port  # raises on a malformed port
    except ValueError:
        return False

    if parts.scheme.lower() not in ALLOWED_SCHEMES or not host:
        return False
    if allow_private_hosts:
        return True
    if host.lower() in LOCAL_HOSTNAMES:
        return False

    try:
        address = ipaddress.ip_address(host)
    except ValueError:
        return True  # a name; checked again once resolved, see PublicResolver
    return is_public_address(address)


def is_public_address(address: Union[ipaddress.IPv4Address, ipaddress.IPv6Address]) -> bool:
    return not (
        address.is_loopback
        or address.is_private
        or address.is_link_local
        or address.is_reserved
        or address.is_unspecified
        or address.is_multicast
    )


class PublicResolver(aiohttp.ThreadedResolver):
    """DNS resolver that refuses host names resolving to non-public addresses."""

    async def resolve(self, host: str, port: int = 0, family: socket.AddressFamily = socket.AF_INET) -> List[Dict[str, Any]]:
        hosts = await super().resolve(host, port, family)
        for entry in hosts:
            address = ipaddress.ip_address(entry["host"])
            if not is_public_address(address):
                raise OSError(f"{host} resolves to non-public address {address}")
        return hosts


async def get_request(
    url: str,
    timeout: int = 120,
    headers: Optional[Dict[str, str]] = None,
    max_redirects: int = 5,
    allow_private_hosts: bool = False,
) -> Optional[bytes]:
    """
    Make an async GET request and return the raw response body.

    Redirects are followed one hop at a time so every target goes through
    `is_safe_url`; unless ``allow_private_hosts`` is set, host names are also
    checked after DNS resolution. Any final HTTP response counts as a successful
    transport, error statuses included; those are only logged.

    Args:
        url: The URL to make the request to
        timeout: Timeout in seconds for each request
        headers: Request headers
        max_redirects: Maximum number of redirects to follow
        allow_private_hosts: Allow loopback and private network hosts

    Returns:
        Response body or None if the request failed
    """
    current = url
    try:
        connector = None if allow_private_hosts else aiohttp.TCPConnector(resolver=PublicResolver())
        async with aiohttp.ClientSession(headers=headers, connector=connector) as session:
            for _ in range(max_redirects + 1):
                if not is_safe_url(current, allow_private_hosts=allow_private_hosts):
                    logger.warning(f"Refusing to fetch unsafe URL: {current}")
                    return None

                async with session.get(
                    current,
                    timeout=aiohttp.ClientTimeout(total=timeout),
                    allow_redirects=False,
                ) as response:
                    location = response.headers.get("Location")
                    if response.status in REDIRECT_STATUSES and location:
                        current = urljoin(current, location)
                        continue

                    if response.status >= 400:
                        logger.warning(f"GET {current} returned status {response.status}")
                    return await response.read()

        logger.warning(f"GET {url} exceeded {max_redirects} redirects")
        return None
    except asyncio.TimeoutError:
        logger.error(f"GET {current} timed out after {timeout}s")
        return None
    except (aiohttp.ClientError, OSError, UnicodeError, ValueError) as e:
        logger.error(f"GET {current} failed: {str(e)}")
        return None
