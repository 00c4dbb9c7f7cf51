import pook as pook_mod
import pytest

from aocfetch.utils import HttpClient


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    # the inputs directory is relative to the cwd
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def remove_user_env(monkeypatch):
    monkeypatch.delenv("AOC_SESSION", raising=False)
    monkeypatch.delenv("http_proxy", raising=False)
    monkeypatch.delenv("https_proxy", raising=False)


@pytest.fixture(autouse=True)
def http(remove_user_env, monkeypatch):
    # fresh client per test, so that req_count starts at zero
    client = HttpClient()
    monkeypatch.setattr("aocfetch.utils.http", client)
    return client


@pytest.fixture
def test_token(monkeypatch):
    monkeypatch.setenv("AOC_SESSION", "thetesttoken")
    return "thetesttoken"


@pytest.fixture
def pook():
    pook_mod.on()
    yield pook_mod
    pook_mod.off()
    pook_mod.reset()
