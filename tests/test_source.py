import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest

from wasmkit.chain import ChainInfo, EndpointType, NodeEndpoint
from wasmkit.errors import SubwasmLibError, UnknownSourceError
from wasmkit.github_ref import GithubRef
from wasmkit.source import Source, SourceKind, get_source, select_url

_BIG = b"\x00asm\x01\x00\x00\x00" * 70_000
_SMALL = b"\x00asm" * 10


class _Handler(BaseHTTPRequestHandler):
    routes = {"/runtime.compact.wasm": _BIG, "/tiny.wasm": _SMALL}

    def do_GET(self):
        body = self.routes.get(self.path)
        if body is None:
            self.send_response(404)
            self.send_header("Content-Length", "0")
            self.end_headers()
            return
        self.send_response(200)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}"
    httpd.shutdown()
    httpd.server_close()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


@pytest.mark.parametrize("url", ["ws://localhost:9933", "wss://localhost:9933"])
def test_converts_from_chain_ws(url):
    src = Source.parse(url)
    assert src.kind is SourceKind.CHAIN
    assert src.value.endpoint.kind is EndpointType.WEBSOCKET
    assert src.value.endpoint.url == url


@pytest.mark.parametrize(
    "url",
    [
        "http://localhost:9933",
        "https://localhost:9933",
        "https://1rpc.io:443/astr",
        "https://astar.api.onfinality.io:443/public",
        "https://astar.public.blastapi.io:443",
        "https://evm.astar.network:443",
        "https://evm.shibuya.astar.network:443",
        "https://evm.shiden.astar.network:443",
        "https://http-versi-rpc-node-0.parity-versi.parity.io:443",
        "https://http-wococo-pos-rpc-node-0.parity-testnet.parity.io:443",
        "https://shibuya-rpc.dwellir.com:443",
        "https://shibuya.api.onfinality.io:443/public",
        "https://shibuya.public.blastapi.io:443",
        "https://shiden-rpc.dwellir.com:443",
        "https://shiden.api.onfinality.io:443/public",
        "https://shiden.public.blastapi.io:443",
        "https://www.alchemy.com:443/astar];",
    ],
)
def test_converts_from_chain_http(url):
    src = Source.parse(url)
    assert src.kind is SourceKind.CHAIN
    assert src.value.endpoint.kind is EndpointType.HTTP
    assert src.value.endpoint.url == url


@pytest.mark.parametrize("name", ["polkadot", "dot"])
def test_converts_from_alias(name):
    assert Source.parse(name) == Source(SourceKind.ALIAS, name)


def test_converts_from_url(server):
    url = f"{server}/runtime.compact.wasm"
    assert Source.parse(url) == Source(SourceKind.URL, url)


def test_small_wasm_url_is_unknown(server):
    with pytest.raises(UnknownSourceError):
        Source.parse(f"{server}/tiny.wasm")


def test_converts_from_path(tmp_path):
    (tmp_path / "{subwasm_fake_runtime}.wasm").write_bytes(b"")
    text = str(tmp_path)
    assert Source.parse(text) == Source(SourceKind.FILE, Path(text))


def test_converts_from_github():
    src = Source.parse("kusama@0.9.42")
    assert src.kind is SourceKind.GITHUB
    assert src.value == GithubRef.parse("kusama@0.9.42")
    assert str(src) == "github: kusama@0.9.42"


@pytest.mark.parametrize("value", ["foo", "bar"])
def test_catches_unknown(value):
    with pytest.raises(SubwasmLibError):
        Source.parse(value)


def test_from_options_prefers_file(tmp_path):
    chain = ChainInfo.from_name("local")
    src = Source.from_options(tmp_path / "a.wasm", chain, None, "http://localhost/x.wasm")
    assert src == Source(SourceKind.FILE, tmp_path / "a.wasm")


def test_from_options_chain_carries_block():
    chain = ChainInfo.from_name("local")
    src = Source.from_options(None, chain, "0xabc", "http://localhost/x.wasm")
    assert src.kind is SourceKind.CHAIN
    assert src.value.endpoint == NodeEndpoint.parse("http://localhost:9933")
    assert src.value.block_ref == "0xabc"


def test_from_options_url():
    src = Source.from_options(None, None, None, "http://localhost/x.wasm")
    assert src == Source(SourceKind.URL, "http://localhost/x.wasm")


def test_from_options_nothing():
    with pytest.raises(UnknownSourceError):
        Source.from_options(None, None, None, None)


def test_get_source_type(tmp_path):
    assert Source.get_source_type("polkadot") == Source(SourceKind.ALIAS, "polkadot")
    assert Source.get_source_type(str(tmp_path)) == Source(SourceKind.FILE, tmp_path)
    src = Source.get_source_type("ws://localhost:9944")
    assert src.kind is SourceKind.CHAIN
    assert src.value.endpoint.url == "ws://localhost:9944"
    with pytest.raises(UnknownSourceError):
        Source.get_source_type("foo")


def test_select_url():
    assert select_url(None, "http://a") == "http://a"
    assert select_url("http://b", None) == "http://b"
    assert select_url("http://b", "http://a") is None
    assert select_url(None, None) is None


def test_get_source_keeps_file(tmp_path):
    path = tmp_path / "r.wasm"
    assert get_source(path, None, None, None) == Source(SourceKind.FILE, path)


def test_get_source_downloads_url(server):
    src = get_source(None, None, None, f"{server}/runtime.compact.wasm")
    try:
        assert src.kind is SourceKind.FILE
        assert src.value.read_bytes() == _BIG
    finally:
        src.value.unlink()


def test_get_source_without_options():
    with pytest.raises(UnknownSourceError):
        get_source()