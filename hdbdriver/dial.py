"""Dialers that open the network connection to the database."""

from __future__ import annotations

import socket
from abc import ABC, abstractmethod
from dataclasses import dataclass

_DEFAULT_KEEP_ALIVE = 15.0


@dataclass(frozen=True)
class DialerOptions:
    """Optional dial parameters, in seconds.

    A timeout of 0 means no connect timeout. A keep-alive period of 0 uses
    the default period, a negative one switches keep-alive off.
    """

    timeout: float = 0.0
    tcp_keep_alive: float = 0.0


class Dialer(ABC):
    """Opens a connection to a database address."""

    @abstractmethod
    def dial(self, address: str, options: DialerOptions) -> socket.socket:
        """Return a connected socket for the host:port address."""


def _split_host_port(address: str) -> tuple[str, int]:
    if address.startswith("["):
        end = address.find("]")
        if end < 0:
            raise ValueError(f"address {address}: missing ']' in address")
        host, rest = address[1:end], address[end + 1 :]
        if not rest.startswith(":"):
            raise ValueError(f"address {address}: missing port in address")
        port = rest[1:]
    else:
        host, sep, port = address.rpartition(":")
        if not sep:
            raise ValueError(f"address {address}: missing port in address")
        if ":" in host:
            raise ValueError(f"address {address}: too many colons in address")
    if port.isdigit():
        return host, int(port)
    try:
        return host, socket.getservbyname(port, "tcp")
    except OSError as exc:
        raise ValueError(f"address {address}: unknown port") from exc


def _set_keep_alive(sock: socket.socket, period: float) -> None:
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)
    seconds = max(1, int(period))
    for name in ("TCP_KEEPIDLE", "TCP_KEEPINTVL"):
        option = getattr(socket, name, None)
        if option is not None:
            sock.setsockopt(socket.IPPROTO_TCP, option, seconds)


class DefaultDialer(Dialer):
    """Plain TCP dialer."""

    def dial(self, address: str, options: DialerOptions) -> socket.socket:
        host, port = _split_host_port(address)
        timeout = options.timeout if options.timeout > 0 else None
        sock = socket.create_connection((host or "localhost", port), timeout=timeout)
        try:
            sock.settimeout(None)
            if options.tcp_keep_alive >= 0:
                _set_keep_alive(sock, options.tcp_keep_alive or _DEFAULT_KEEP_ALIVE)
        except OSError:
            sock.close()
            raise
        return sock


DEFAULT_DIALER: Dialer = DefaultDialer()