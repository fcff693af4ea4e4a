"""Command line entry point for fetching runtimes and showing build information."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from importlib import metadata as _metadata
from urllib.parse import urlparse

from .buildinfo import build_date, git_commit_hash
from .chain import ChainInfo, NodeEndpoint, OnchainBlock
from .errors import SourceParseError, SubwasmLibError
from .github_ref import GithubRef
from .source import Source, select_url
from .utils import fetch_at_url, get_output_file_local

log = logging.getLogger(__name__)

PROG = "wasmkit"


def _package_version() -> str:
    try:
        return _metadata.version(PROG)
    except _metadata.PackageNotFoundError:
        return "0.0.0"


def parse_source(text: str) -> Source:
    """Parse a command line argument as a runtime source."""
    try:
        return Source.parse(text)
    except SubwasmLibError as exc:
        raise SourceParseError(text) from exc


def _url(text: str) -> str:
    parsed = urlparse(text)
    if not parsed.scheme or not (parsed.netloc or parsed.path):
        raise argparse.ArgumentTypeError(f"invalid url: {text!r}")
    return text


def _onchain_block(text: str) -> OnchainBlock:
    try:
        return OnchainBlock(NodeEndpoint.parse(text))
    except SubwasmLibError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _add_global_options(parser: argparse.ArgumentParser, nested: bool) -> None:
    """Add the options that are accepted before and after a sub-command."""
    no_color_default = bool(os.environ.get("NO_COLOR"))
    defaults = {
        "json": argparse.SUPPRESS if nested else False,
        "quiet": argparse.SUPPRESS if nested else False,
        "no_color": argparse.SUPPRESS if nested else no_color_default,
    }
    parser.add_argument("-j", "--json", action="store_true", default=defaults["json"], help="Output as json")
    parser.add_argument("-q", "--quiet", action="store_true", default=defaults["quiet"], help="Less output")
    parser.add_argument(
        "-n",
        "--no-color",
        dest="no_color",
        action="store_true",
        default=defaults["no_color"],
        help="Do not write color information to the output (also set by NO_COLOR)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Fetch and inspect WASM runtimes of Substrate based chains.",
    )
    _add_global_options(parser, nested=False)
    parser.add_argument("-v", "--version", action="store_true", help="Show the version")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    get = commands.add_parser(
        "get",
        help="Get/Download the runtime wasm",
        description="Get/Download the runtime wasm from a URL or a release reference.",
    )
    _add_global_options(get, nested=True)
    get.add_argument(
        "rpc_url",
        nargs="?",
        type=_onchain_block,
        help="The node url including the port number, e.g. ws://localhost:9944 or http://localhost:9933",
    )
    get.add_argument(
        "-c",
        "--chain",
        type=ChainInfo.from_name,
        help="The name of a chain or an alias; --chain local = http://localhost:9933",
    )
    get.add_argument("-b", "--block", help="The block hash where to fetch the runtime (requires --chain)")
    get.add_argument("-u", "--url", type=_url, help="Load the wasm from a URL (no node)")
    get.add_argument(
        "-g",
        "--github",
        "--gh",
        dest="github",
        help="Load the wasm from a release reference in the format <runtime>@<version>, e.g. kusama@0.9.42",
    )
    get.add_argument(
        "-o",
        "--output",
        "--out",
        dest="output",
        help="Output file; defaults to the first free runtime_NNN.wasm in the current folder",
    )
    return parser


def _check_get(parser: argparse.ArgumentParser, opts: argparse.Namespace) -> None:
    others = [opts.chain, opts.url, opts.github]
    if opts.rpc_url is None and all(value is None for value in others):
        parser.error("get: one of RPC_URL, --chain, --url or --github is required")
    if opts.rpc_url is not None and any(value is not None for value in others):
        parser.error("get: RPC_URL cannot be used with --chain, --url or --github")
    if opts.block is not None and opts.chain is None:
        parser.error("get: --block requires --chain")


def _run_get(opts: argparse.Namespace) -> None:
    gh_url = GithubRef.parse(opts.github).as_url() if opts.github is not None else None
    download_url = select_url(gh_url, opts.url)
    log.debug("download_url: %s", download_url)

    if opts.rpc_url is not None:
        rpc_url: str | None = opts.rpc_url.endpoint.url
    elif opts.chain is not None:
        rpc_url = opts.chain.get_random_url(None)
    else:
        rpc_url = None
    log.debug("rpc_url: %s", rpc_url)

    if download_url is not None:
        target = get_output_file_local(opts.output)
        output = fetch_at_url(download_url, target)
        if not output.exists():
            raise SubwasmLibError("Failed fetching file")
        log.info("Got runtime at %s", output)
        return
    if rpc_url is not None:
        raise SubwasmLibError(
            f"Downloading a runtime from the node at {rpc_url} is not supported, use --url or --github"
        )
    raise SubwasmLibError("Provide either --url or --github, not both")


def _print_version(as_json: bool) -> None:
    commit = git_commit_hash()
    date = build_date()
    version = _package_version()
    if as_json:
        data = {"name": PROG, "version": version, "commit": commit, "build_date": date}
        print(json.dumps(data, indent=2))
    else:
        commit_part = f"-{commit}" if commit else ""
        date_part = f" built {date}" if date else ""
        print(f"{PROG} v{version}{commit_part}{date_part}")


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = build_parser()
    try:
        opts = parser.parse_args(argv)
        if opts.command is None:
            if opts.version:
                _print_version(opts.json)
                return 0
            parser.print_help(sys.stderr)
            return 2
        if opts.command == "get":
            _check_get(parser, opts)
            _run_get(opts)
        return 0
    except SubwasmLibError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())