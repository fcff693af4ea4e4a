import pytest

from wasmkit.chain import (
    ChainInfo,
    ChainInfoError,
    EndpointType,
    NodeEndpoint,
    OnchainBlock,
    get_chain_urls,
)
from wasmkit.errors import EndpointNotFoundError, NotFoundError, ParsingError, SubwasmLibError


def test_it_gets_chain_endpoints():
    assert ChainInfo.from_name("local").name == "local"
    assert len(ChainInfo.from_name("local").endpoints) == 1
    assert ChainInfo.from_name("polkadot").name == "polkadot"
    assert ChainInfo.from_name("PolkaDOT").name == "polkadot"
    assert len(ChainInfo.from_name("polkadot").endpoints) > 0
    with pytest.raises(ChainInfoError):
        ChainInfo.from_name("foobar")


def test_it_returns_a_url():
    info = ChainInfo.from_name("polkadot")
    url = info.get_random_url(None)
    assert url in {ep.url for ep in info.endpoints}


def test_it_returns_a_http_url():
    info = ChainInfo.from_name("local")
    assert info.get_random_url(EndpointType.HTTP).startswith("http")


def test_it_returns_a_ws_url():
    info = ChainInfo.from_name("polkadot")
    assert info.get_random_url(EndpointType.WEBSOCKET).startswith("ws")


def test_chain_info():
    assert ChainInfo.from_name("polkadot").endpoints


def test_no_matching_endpoint_raises():
    with pytest.raises(NotFoundError):
        ChainInfo.from_name("local").get_random_url(EndpointType.WEBSOCKET)


def test_chain_info_error_is_lib_error():
    with pytest.raises(SubwasmLibError) as info:
        ChainInfo.from_name("foobar")
    assert "foobar" in str(info.value)


@pytest.mark.parametrize("alias,name", [("dot", "polkadot"), ("ksm", "kusama"), ("wnd", "westend")])
def test_aliases_match_names(alias, name):
    assert get_chain_urls(alias) == get_chain_urls(name)


def test_local_endpoint():
    assert get_chain_urls("local") == [NodeEndpoint("http://localhost:9933", EndpointType.HTTP)]


def test_get_chain_urls_is_case_sensitive():
    with pytest.raises(EndpointNotFoundError):
        get_chain_urls("Polkadot")


@pytest.mark.parametrize(
    "url,kind",
    [
        ("ws://localhost:9933", EndpointType.WEBSOCKET),
        ("wss://localhost:9933", EndpointType.WEBSOCKET),
        ("http://localhost:9933", EndpointType.HTTP),
        ("https://localhost:9933", EndpointType.HTTP),
    ],
)
def test_endpoint_parse(url, kind):
    ep = NodeEndpoint.parse(url)
    assert ep.endpoint_type() is kind
    assert str(ep) == url


@pytest.mark.parametrize("text", ["foo", "tcp://foo.bar", "/tmp/runtime.wasm", "http://"])
def test_endpoint_parse_rejects(text):
    with pytest.raises(ParsingError):
        NodeEndpoint.parse(text)


def test_onchain_block_defaults():
    block = OnchainBlock(NodeEndpoint.parse("ws://localhost:9944"))
    assert block.block_ref is None
    assert block.endpoint.url == "ws://localhost:9944"