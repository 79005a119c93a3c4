from unittest.mock import MagicMock

import pytest

from listing_api.scripts import check_provider


def test_provider_ready(monkeypatch, caplog):
    w3 = MagicMock()
    w3.eth.block_number = 17
    monkeypatch.setattr(check_provider, "get_web3", lambda rpc_url: w3)

    with caplog.at_level("INFO"):
        assert check_provider.check_provider("http://127.0.0.1:8545") == 0

    assert "Current block: 17" in caplog.text


def test_provider_unreachable(monkeypatch, caplog):
    def refuse(rpc_url):
        raise ConnectionError(f"Could not connect to {rpc_url}")

    monkeypatch.setattr(check_provider, "get_web3", refuse)

    assert check_provider.check_provider("http://127.0.0.1:9") == 1
    assert "Provider not reachable" in caplog.text


def test_get_web3_raises_when_not_connected(monkeypatch):
    monkeypatch.setattr(check_provider.Web3, "is_connected", lambda self: False)

    with pytest.raises(ConnectionError):
        check_provider.get_web3("http://127.0.0.1:9")


def test_main_uses_default_rpc_url(monkeypatch):
    seen = []
    monkeypatch.delenv("RPC_URL", raising=False)
    monkeypatch.setattr(check_provider, "load_dotenv", lambda: None)
    monkeypatch.setattr(check_provider, "check_provider", lambda url: seen.append(url) or 0)

    with pytest.raises(SystemExit) as exc:
        check_provider.main()

    assert exc.value.code == 0
    assert seen == ["http://127.0.0.1:8545"]
