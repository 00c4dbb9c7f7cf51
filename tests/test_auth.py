import pytest

from aocfetch.exceptions import MissingSessionError
from aocfetch.get import get_session
from aocfetch.get import load_or_fetch_input


def test_no_session_id(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(MissingSessionError("Missing session ID")):  # type: ignore[call-overload] # using pytest-raisin
        get_session()
    out, err = capsys.readouterr()
    assert out == ""
    assert "ERROR: AoC session ID is needed to get your puzzle data!" in err
    assert "AOC_SESSION" in err


def test_empty_session_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AOC_SESSION", "")
    with pytest.raises(MissingSessionError):
        get_session()


def test_get_session_id_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AOC_SESSION", "tokenfromenv1")
    assert get_session() == "tokenfromenv1"


def test_missing_session_only_matters_on_cache_miss(tmp_path) -> None:
    with pytest.raises(MissingSessionError("Missing session ID")):  # type: ignore[call-overload] # using pytest-raisin
        load_or_fetch_input("1", "2018")
    assert not (tmp_path / "inputs").exists()
    (tmp_path / "inputs").mkdir()
    (tmp_path / "inputs" / "2018-1.txt").write_text("cached")
    assert load_or_fetch_input("1", "2018").body == "cached"
