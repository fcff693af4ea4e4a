"""References to runtimes published as release assets in the form ``<runtime>@<version>``."""

from __future__ import annotations

from dataclasses import dataclass

import semver

from .errors import SubwasmLibError

_RELEASE_URL = (
    "https://github.com/paritytech/polkadot/releases/download/"
    "v{version}/{runtime}_runtime-v{runtime_version}.compact.compressed.wasm"
)


@dataclass(frozen=True)
class GithubRef:
    """A runtime name and its release version."""

    runtime: str
    version: semver.Version

    @classmethod
    def parse(cls, text: str) -> GithubRef:
        """Parse ``<runtime>@<version>``; a ``v`` in the version is ignored."""
        parts = text.split("@")
        if len(parts) != 2:
            raise SubwasmLibError(
                "Generic error: Unsupported Github version format, should be <runtime>@<version>"
            )
        runtime, version = parts[0], parts[1].replace("v", "")
        try:
            parsed = semver.Version.parse(version)
        except (ValueError, TypeError) as exc:
            raise SubwasmLibError("Generic error: Version parsing error") from exc
        return cls(runtime, parsed)

    def runtime_version(self) -> str:
        """The runtime version string, e.g. ``9420`` for ``0.9.42``."""
        return (str(self.version).replace(".", "") + "0")[1:]

    def as_url(self) -> str:
        """The download URL; it is not guaranteed to exist."""
        return _RELEASE_URL.format(
            version=self.version,
            runtime=self.runtime,
            runtime_version=self.runtime_version(),
        )

    def __str__(self) -> str:
        return f"{self.runtime}@{self.version}"