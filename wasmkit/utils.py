"""Output, temporary-file and download helpers."""

from __future__ import annotations

import logging
import shutil
import sys
import tempfile
import urllib.error
import urllib.request
import uuid
from pathlib import Path

from .errors import SubwasmLibError

log = logging.getLogger(__name__)

#: Anything smaller than this is considered unlikely to be a valid runtime.
MIN_RUNTIME_SIZE = 500_000

_MAX_LOCAL_INDEX = 1000
_TIMEOUT = 30


def print_big_output_safe(text: str) -> None:
    """Print ``text`` to stdout, ignoring a reader that closed the pipe early."""
    try:
        sys.stdout.write(f"{text}\n")
        sys.stdout.flush()
    except BrokenPipeError:
        return
    except OSError as exc:
        raise SubwasmLibError("i/o error") from exc


def get_output_file_tmp() -> Path:
    """Return a fresh ``<uuid>.wasm`` path inside a ``subwasm`` temp folder."""
    folder = Path(tempfile.gettempdir()) / "subwasm"
    folder.mkdir(exist_ok=True)
    return folder / f"{uuid.uuid4()}.wasm"


def get_output_file_local(wish: str | Path | None = None) -> Path:
    """Return ``wish`` if given, else the first free ``runtime_NNN.wasm`` in the current folder."""
    if wish is not None:
        return Path(wish)
    for index in range(_MAX_LOCAL_INDEX - 1):
        candidate = Path(f"runtime_{index:03d}.wasm")
        if not candidate.exists():
            return candidate
    raise SubwasmLibError("Ran out of indexes")


def fetch_at_url(url: str, target: str | Path | None = None) -> Path:
    """Download ``url`` into ``target`` (a temp file if omitted) and return its path."""
    log.debug("Fetching from %s", url)
    destination = Path(target) if target is not None else get_output_file_tmp()
    try:
        response = urllib.request.urlopen(url, timeout=_TIMEOUT)
    except urllib.error.HTTPError as exc:
        exc.close()
        raise SubwasmLibError(f"Generic error: Failed fetching url at {url}") from exc
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise SubwasmLibError("Generic error: Request error") from exc

    with response:
        try:
            with destination.open("wb") as out:
                shutil.copyfileobj(response, out)
        except OSError as exc:
            raise SubwasmLibError("i/o error") from exc
    return destination


def is_wasm_from_url(url: str) -> bool:
    """Guess whether ``url`` serves a runtime, judging by the size of what it returns."""
    try:
        response = urllib.request.urlopen(url, timeout=_TIMEOUT)
    except urllib.error.HTTPError as exc:
        exc.close()
        log.debug("Error while trying to fetch runtime at %s", url)
        return False
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise SubwasmLibError("i/o error") from exc

    with response:
        length = response.headers.get("Content-Length")
        if length is not None:
            try:
                size = int(length)
            except ValueError:
                size = None
            if size is not None:
                log.debug("The data we got from %s is %d bytes long", url, size)
                return size >= MIN_RUNTIME_SIZE
        try:
            data = response.read()
        except OSError:
            return False
    return len(data) >= MIN_RUNTIME_SIZE