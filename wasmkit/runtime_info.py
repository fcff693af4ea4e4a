"""Summary information about a runtime and its core version."""

from __future__ import annotations

import json as _json
from dataclasses import dataclass, field
from typing import Any

#: The reserved bytes every valid runtime carries: ``meta`` in ASCII.
RESERVED_META = b"meta"

#: Compressed runtimes at or above this size (in MB) are flagged as heavy.
MAX_SIZE_COMPRESSED_MB = 2.0

_WIDTH_EMOJI = 1
_WIDTH_TITLE = 25


@dataclass(frozen=True)
class CoreVersion:
    """The version a runtime reports about itself."""

    spec_name: str
    impl_name: str
    authoring_version: int
    spec_version: int
    impl_version: int
    transaction_version: int
    state_version: int = 0
    apis: tuple[tuple[str, int], ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "specName": self.spec_name,
            "implName": self.impl_name,
            "authoringVersion": self.authoring_version,
            "specVersion": self.spec_version,
            "implVersion": self.impl_version,
            "apis": [[api_id, version] for api_id, version in self.apis],
            "transactionVersion": self.transaction_version,
            "stateVersion": self.state_version,
        }

    def __str__(self) -> str:
        return (
            f"{self.spec_name}-{self.spec_version} "
            f"({self.impl_name}-{self.impl_version}."
            f"tx{self.transaction_version}.au{self.authoring_version})"
        )


def _line(emoji: str, title: str, value: str) -> str:
    return f"{emoji:<{_WIDTH_EMOJI}} {title:<{_WIDTH_TITLE}} {value}\n"


@dataclass(frozen=True)
class RuntimeInfo:
    """Size, compression, version and hashes of a runtime."""

    size: int
    reserved_meta: bytes
    metadata_version: int
    core_version: CoreVersion
    proposal_hash: str
    parachain_authorize_upgrade_hash: str
    ipfs_hash: str
    blake2_256: str
    compressed: bool = False
    compression_ratio: float = 1.0
    _extra: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def reserved_meta_valid(self) -> bool:
        """Whether the reserved bytes are those of a runtime."""
        return bytes(self.reserved_meta) == RESERVED_META

    @property
    def size_mb(self) -> float:
        return self.size / 1024.0 / 1024.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "compression": {
                "compressed": self.compressed,
                "compression_ratio": self.compression_ratio,
            },
            "reserved_meta": list(bytes(self.reserved_meta)),
            "reserved_meta_valid": self.reserved_meta_valid,
            "metadata_version": self.metadata_version,
            "core_version": self.core_version.to_dict(),
            "proposal_hash": self.proposal_hash,
            "parachain_authorize_upgrade_hash": self.parachain_authorize_upgrade_hash,
            "ipfs_hash": self.ipfs_hash,
            "blake2_256": self.blake2_256,
        }

    def print(self, json: bool = False) -> None:
        """Print the summary, as pretty json or as text."""
        if json:
            print(_json.dumps(self.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(self)

    def print_version(self, json: bool = False) -> None:
        """Print only the core version, as pretty json or as text."""
        version = self.core_version
        if json:
            print(_json.dumps(version.to_dict(), indent=2, ensure_ascii=False))
            return
        print(f"specifications : {version.spec_name} v{version.spec_version}")
        print(f"implementation : {version.impl_name} v{version.impl_version}")
        print(f"transaction    : v{version.transaction_version}")
        print(f"authoring      : v{version.authoring_version}")

    def __str__(self) -> str:
        size_mb = self.size_mb
        warning = "⚠️ HEAVY" if size_mb >= MAX_SIZE_COMPRESSED_MB else ""
        parts = [_line("🏋️ ", "Runtime size:", f"{size_mb:.3f} MB ({self.size:,} bytes) {warning}")]

        if self.compressed:
            saved = 100.0 - self.compression_ratio * 100.0
            parts.append(_line("🗜 ", "Compressed:", f"Yes, {saved:.2f}%"))
        else:
            parts.append(_line("🗜", "Compressed:", "No"))

        status = "OK" if self.reserved_meta_valid else "Unknown!"
        meta_hex = ", ".join(f"{byte:02X}" for byte in bytes(self.reserved_meta))
        parts.append(_line("✨", "Reserved meta:", f"{status} - [{meta_hex}]"))
        parts.append(_line("🎁", "Metadata version:", f"V{self.metadata_version}"))
        parts.append(_line("🔥", "Core version:", str(self.core_version)))
        parts.append(_line("🗳️ ", "system.setCode hash:", self.proposal_hash))
        parts.append(_line("🗳️ ", "authorizeUpgrade hash:", self.parachain_authorize_upgrade_hash))
        parts.append(_line("🗳️ ", "Blake2-256 hash:", self.blake2_256))
        parts.append(_line("📦", "IPFS:", f"https://www.ipfs.io/ipfs/{self.ipfs_hash}"))
        return "".join(parts)