# wasmkit

`wasmkit` helps you work with Substrate WASM runtimes on your own machine. It
works out where a runtime comes from (a local file, a download URL, a release
reference such as `kusama@0.9.42`, a node endpoint or a chain alias such as
`polkadot` or `dot`), downloads runtimes served over HTTP, and formats reports
about a runtime and its metadata from values you supply.

## Installation

```
pip install .
```

For development, with the test tools:

```
pip install -e ".[test]"
pytest
```

## Command line

Installing the package provides the `wasmkit` command:

```
wasmkit --help
```

Show the tool's own version, as plain text or as JSON. The commit is taken from
the `SUBWASM_CLI_GIT_COMMIT_HASH` environment variable, else from
`git rev-parse --short=11 HEAD`, else reported as `unknown`; the build date is
taken from `SOURCE_DATE_EPOCH` when it holds a valid timestamp, else it is the
current time in UTC:

```
wasmkit --version
wasmkit --version --json
```

### `get`

Download a runtime from a URL, or from a release reference of the form
`<runtime>@<version>`:

```
wasmkit get --url https://example.com/runtime.compact.compressed.wasm
wasmkit get --github kusama@0.9.42 --output kusama.wasm
```

When `--output` (alias `--out`) is not given, the file is saved in the current
folder as the first free name among `runtime_000.wasm`, `runtime_001.wasm` and
so on. `--gh` is an alias of `--github`.

`get` also accepts a node endpoint as a positional argument, or `--chain` with
a chain name or alias (and `--block`, which requires `--chain`). These are
checked and resolved to a node URL, but the command then stops with an error:
see below.

The flags `--json`, `--quiet` and `--no-color` are accepted before or after the
sub-command; `--no-color` is also switched on by the `NO_COLOR` environment
variable. Only `--json` has an effect today, on the `--version` output.

Exit status is 0 on success, 1 when the library reports an error, and 2 for
bad arguments or when no sub-command is given.

## Library

### Chains and endpoints

```python
from wasmkit.chain import ChainInfo, EndpointType, NodeEndpoint, get_chain_urls

info = ChainInfo.from_name("PolkaDOT")     # names and aliases are case-insensitive
print(info.name)                           # "polkadot"
print(info.get_random_url(EndpointType.WEBSOCKET))

get_chain_urls("local")                    # [NodeEndpoint for http://localhost:9933]
NodeEndpoint.parse("ws://localhost:9944").endpoint_type()   # EndpointType.WEBSOCKET
```

`get_chain_urls` matches names exactly and raises `EndpointNotFoundError` for
unknown ones; `ChainInfo.from_name` raises `ChainInfoError`.
`NodeEndpoint.parse` accepts `http`, `https`, `ws` and `wss` URLs and raises
`ParsingError` for anything else.

### Release references

```python
from wasmkit.github_ref import GithubRef

ref = GithubRef.parse("kusama@v1.2.3")
ref.runtime_version()   # "230"
ref.as_url()            # the download URL of the compressed runtime
str(ref)                # "kusama@1.2.3"
```

Anything not of the form `<runtime>@<version>` with a valid semantic version is
rejected with a `SubwasmLibError`.

### Sources

`Source.parse` decides what a string refers to, trying in turn a release
reference, a chain alias, an existing file, a runtime URL and a node endpoint.
A URL containing `wasm` is only accepted if a request to it reports (or
returns) at least 500,000 bytes.

```python
from wasmkit.source import Source, SourceKind, get_source, select_url

src = Source.parse("dot")
assert src.kind is SourceKind.ALIAS
```

Strings that match none of these raise `UnknownSourceError`.
`Source.from_options(file, chain, block, url)` picks a file first, then a chain,
then a URL; `get_source` does the same and downloads a URL source to a
temporary file. `Source.get_source_type` classifies a string as an existing
file, a node endpoint or a chain alias. `select_url` returns whichever of two
URLs was given, or `None` if both or neither were.

### Downloads and output helpers

`wasmkit.utils` provides `fetch_at_url(url, target)`, `is_wasm_from_url(url)`,
`get_output_file_local(wish)`, `get_output_file_tmp()` (a fresh
`<uuid>.wasm` path in a `subwasm` temp folder) and `print_big_output_safe(text)`,
which ignores a reader that closes the pipe early.

### Filters, output formats and reports

```python
import sys
from wasmkit.filters import Filter
from wasmkit.metadata import OutputFormat, write_modules_list

Filter.parse("Balances.transfer")   # module "balances", call "transfer"

fmt = OutputFormat.parse("json+scale")
fmt.default_filename()              # "metadata.jscale"

write_modules_list([(10, "Balances"), (0, "System")], sys.stdout)
#  - 00: System
#  - 10: Balances
```

`wasmkit.runtime_info` holds `CoreVersion` and `RuntimeInfo`: dataclasses you
fill in with a runtime's size, compression, reserved bytes, metadata version,
core version and hashes. `RuntimeInfo.print(json)` prints a text summary or
pretty JSON (`to_dict()` gives the same data), and `print_version(json)` prints
the core version alone.

`wasmkit.buildinfo` exposes `git_commit_hash()` and `build_date()`.

### Errors

All library errors derive from `wasmkit.errors.SubwasmLibError`, with more
specific subclasses such as `PalletNotFoundError`, `NotFoundError`,
`EndpointNotFoundError`, `ParsingError`, `UnknownSourceError`,
`UnsupportedFilterError` and `SourceParseError`.

## What the package does not do

- It does not load or execute WASM runtimes, and cannot decode their metadata.
  `RuntimeInfo` and the metadata helpers format values you provide; nothing in
  the package computes them from a runtime file.
- It does not talk to nodes over RPC. `wasmkit get` with a node endpoint or
  `--chain` resolves the node URL and then exits with an error; use `--url` or
  `--github` to download.
- There are no `info`, `version`, `metadata`, `show`, `diff`, `compress` or
  `decompress` sub-commands; `get` is the only one.