"""Known chains, their node endpoints and endpoint parsing."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from urllib.parse import urlparse

from .errors import EndpointNotFoundError, NotFoundError, ParsingError, SubwasmLibError


class EndpointType(enum.Enum):
    """Kind of node endpoint."""

    HTTP = "http"
    WEBSOCKET = "websocket"


_SCHEMES = {
    "http": EndpointType.HTTP,
    "https": EndpointType.HTTP,
    "ws": EndpointType.WEBSOCKET,
    "wss": EndpointType.WEBSOCKET,
}


@dataclass(frozen=True)
class NodeEndpoint:
    """An RPC endpoint of a node, kept as the URL string it was given."""

    url: str
    kind: EndpointType

    @classmethod
    def parse(cls, text: str) -> NodeEndpoint:
        """Parse an ``http(s)://`` or ``ws(s)://`` URL into an endpoint."""
        scheme, sep, rest = text.partition("://")
        kind = _SCHEMES.get(scheme.lower()) if sep else None
        if kind is None or not rest:
            raise ParsingError(text, " Expected an http(s):// or ws(s):// url")
        return cls(text, kind)

    def endpoint_type(self) -> EndpointType:
        return self.kind

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True)
class OnchainBlock:
    """A node endpoint and an optional block hash to read the runtime at."""

    endpoint: NodeEndpoint
    block_ref: str | None = None


_CHAIN_URLS: dict[tuple[str, ...], tuple[str, ...]] = {
    ("polkadot", "dot"): (
        "wss://rpc.polkadot.io:443",
        "wss://polkadot-rpc-tn.dwellir.com:443",
        "wss://polkadot-rpc.dwellir.com:443",
    ),
    ("kusama", "ksm"): (
        "wss://kusama-rpc.polkadot.io:443",
        "wss://kusama-rpc-tn.dwellir.com:443",
        "wss://kusama-rpc.dwellir.com:443",
        "wss://kusama-rpc.polkadot.io:443",
        "wss://kusama-try-runtime-node.parity-chains.parity.io:443",
        "wss://kusama.public.curie.radiumblock.co:443/ws",
        "wss://rpc.dotters.network:443/kusama",
        "wss://rpc.ibp.network:443/kusama",
    ),
    ("westend", "wnd"): (
        "wss://westend-rpc.polkadot.io:443",
        "wss://westend-try-runtime-node.parity-chains.parity.io:443",
    ),
    ("rococo",): (
        "wss://rococo-rpc.polkadot.io:443",
        "wss://rococo.api.onfinality.io:443/public-ws",
    ),
    ("statemint",): (
        "wss://statemint-rpc.polkadot.io:443",
        "wss://statemint.api.onfinality.io:443/public-ws",
        "wss://statemint-rpc.dwellir.com:443",
    ),
    ("statemine",): (
        "wss://statemine-rpc.polkadot.io:443",
        "wss://statemine.api.onfinality.io:443/public-ws",
        "wss://statemine-rpc.dwellir.com:443",
    ),
    ("westmint",): ("wss://westmint-rpc.polkadot.io:443",),
    ("karura", "kar"): (
        "wss://karura-rpc-0.aca-api.network:443",
        "wss://karura-rpc-1.aca-api.network:443",
        "wss://karura-rpc-2.aca-api.network:443/ws",
    ),
    ("moonbase",): ("wss://wss.api.moonbase.moonbeam.network:443",),
    ("moonriver", "movr"): ("wss://wss.api.moonriver.moonbeam.network:443",),
    ("moonbeam", "glmr"): ("wss://wss.api.moonbeam.network:443",),
    ("local",): ("http://localhost:9933",),
}

_BY_NAME = {alias: urls for aliases, urls in _CHAIN_URLS.items() for alias in aliases}


def _parse_quietly(urls: tuple[str, ...]) -> list[NodeEndpoint]:
    endpoints = []
    for url in urls:
        try:
            endpoints.append(NodeEndpoint.parse(url))
        except ParsingError:
            continue
    return endpoints


def get_chain_urls(name: str) -> list[NodeEndpoint]:
    """Return the known endpoints for a chain name or alias (matched exactly)."""
    try:
        urls = _BY_NAME[name]
    except KeyError:
        raise EndpointNotFoundError(name) from None
    return _parse_quietly(urls)


class ChainInfoError(SubwasmLibError):
    """A chain name could not be resolved to usable endpoints."""


@dataclass
class ChainInfo:
    """A chain name together with its list of endpoints."""

    name: str
    endpoints: list[NodeEndpoint] = field(default_factory=list)

    @classmethod
    def from_name(cls, name: str) -> ChainInfo:
        """Look up a chain by name or alias, ignoring case."""
        name = name.lower()
        try:
            endpoints = get_chain_urls(name)
        except SubwasmLibError as exc:
            raise ChainInfoError(f"Chain not found: {exc}") from exc
        if not endpoints:
            raise ChainInfoError(f"Unsupported chain: {name}")
        return cls(name, endpoints)

    def get_random_url(self, filter: EndpointType | None = None) -> str:
        """Pick one endpoint URL at random, optionally of a given type."""
        candidates = [
            ep for ep in self.endpoints if filter is None or ep.endpoint_type() is filter
        ]
        if not candidates:
            raise NotFoundError(f"No node found for filter {filter!r}")
        url = random.choice(candidates).url
        parsed = urlparse(url)
        if not parsed.scheme or not parsed.netloc:
            raise ParsingError("url", f" invalid url {url}")
        return url