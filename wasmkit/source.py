"""Where a runtime comes from: a file, a node, a chain alias, a URL or a release reference."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union
from urllib.parse import urlparse

from .chain import ChainInfo, NodeEndpoint, OnchainBlock, get_chain_urls
from .errors import SubwasmLibError, UnknownSourceError
from .github_ref import GithubRef
from .utils import fetch_at_url, is_wasm_from_url

log = logging.getLogger(__name__)


class SourceKind(enum.Enum):
    """The kind of place a runtime is loaded from."""

    FILE = "file"
    CHAIN = "chain"
    ALIAS = "alias"
    URL = "url"
    GITHUB = "github"


SourceValue = Union[Path, OnchainBlock, str, GithubRef]


def _existing_path(text: str) -> Path | None:
    try:
        path = Path(text)
        return path if path.exists() else None
    except (OSError, ValueError):
        return None


def _endpoint(text: str) -> NodeEndpoint | None:
    try:
        return NodeEndpoint.parse(text)
    except SubwasmLibError:
        return None


def _is_url(text: str) -> bool:
    try:
        parsed = urlparse(text)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


@dataclass(frozen=True)
class Source:
    """A runtime source: its kind and the value that locates it."""

    kind: SourceKind
    value: SourceValue

    @classmethod
    def parse(cls, text: str) -> Source:
        """Resolve a user string to a source, trying release refs, aliases, files then URLs."""
        try:
            return cls(SourceKind.GITHUB, GithubRef.parse(text))
        except SubwasmLibError:
            pass

        try:
            if get_chain_urls(text):
                return cls(SourceKind.ALIAS, text)
        except SubwasmLibError:
            pass

        path = _existing_path(text)
        if path is not None:
            return cls(SourceKind.FILE, path)

        if not _is_url(text):
            raise UnknownSourceError(text)

        if "wasm" in text:
            try:
                looks_like_wasm = is_wasm_from_url(text)
            except SubwasmLibError:
                looks_like_wasm = False
            if looks_like_wasm:
                log.debug("What we got at %s could be some wasm indeed", text)
                return cls(SourceKind.URL, text)
        else:
            endpoint = _endpoint(text)
            if endpoint is not None:
                return cls(SourceKind.CHAIN, OnchainBlock(endpoint))

        raise UnknownSourceError(text)

    @classmethod
    def from_options(
        cls,
        file: str | Path | None = None,
        chain: ChainInfo | None = None,
        block: str | None = None,
        url: str | None = None,
    ) -> Source:
        """Pick a source from command options: a file first, then a chain, then a URL."""
        log.debug("Getting source from options: file=%r chain=%r block=%r url=%r", file, chain, block, url)
        if file is not None:
            return cls(SourceKind.FILE, Path(file))
        if chain is not None:
            node_url = chain.get_random_url(None)
            return cls(SourceKind.CHAIN, OnchainBlock(NodeEndpoint.parse(node_url), block))
        if url is not None:
            return cls(SourceKind.URL, url)
        raise UnknownSourceError("No file or chain or url provided!")

    @classmethod
    def get_source_type(cls, text: str) -> Source:
        """Classify ``text`` as an existing file, a node endpoint or a chain alias."""
        path = _existing_path(text)
        if path is not None:
            return cls(SourceKind.FILE, path)
        endpoint = _endpoint(text)
        if endpoint is not None:
            return cls(SourceKind.CHAIN, OnchainBlock(endpoint))
        try:
            get_chain_urls(text)
        except SubwasmLibError:
            raise UnknownSourceError(text) from None
        return cls(SourceKind.ALIAS, text)

    def __str__(self) -> str:
        if self.kind is SourceKind.FILE:
            return f'"{self.value}"'
        if self.kind is SourceKind.CHAIN:
            return f"chain: {self.value!r}"
        if self.kind is SourceKind.ALIAS:
            return f'alias: "{self.value}"'
        if self.kind is SourceKind.URL:
            return f'url: "{self.value}"'
        return f"github: {self.value}"


def select_url(gh_url: str | None, dl_url: str | None) -> str | None:
    """Return whichever of the two URLs was given, or None if both or neither were."""
    if gh_url is None and dl_url is not None:
        return dl_url
    if gh_url is not None and dl_url is None:
        return gh_url
    return None


def get_source(
    file: str | Path | None = None,
    chain: ChainInfo | None = None,
    block: str | None = None,
    dl_url: str | None = None,
) -> Source:
    """Resolve command options to one source, downloading URL sources to a local file."""
    source = Source.from_options(file, chain, block, dl_url)
    if source.kind is SourceKind.URL:
        log.debug("Fetching runtime from %s", source.value)
        runtime_file = fetch_at_url(source.value, None)
        log.debug("Runtime fetched at %s", runtime_file)
        return Source(SourceKind.FILE, runtime_file)
    return source