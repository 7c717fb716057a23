from __future__ import annotations

from config.loader import ConfigLoader


def test_env_overrides_default_with_type(monkeypatch, tmp_path) -> None:
    loader = ConfigLoader(env_path=str(tmp_path / "missing.env"))
    monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FLAG", "yes")

    assert loader.get("REQUEST_TIMEOUT", 10.0) == 12.5
    assert loader.get("PORT", 3000) == 8080
    assert loader.get("FLAG", False) is True


def test_unparseable_value_falls_back(monkeypatch, tmp_path) -> None:
    loader = ConfigLoader(env_path=str(tmp_path / "missing.env"))
    monkeypatch.setenv("PORT", "eighty")

    assert loader.get("PORT", 3000) == 3000


def test_dotenv_file_is_loaded(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("COOKIE_MAX_LENGTH", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("COOKIE_MAX_LENGTH=4000\n")

    loader = ConfigLoader(env_path=str(env_file))

    assert loader.get("COOKIE_MAX_LENGTH", 5000) == 4000


def test_get_list(monkeypatch, tmp_path) -> None:
    loader = ConfigLoader(env_path=str(tmp_path / "missing.env"))
    monkeypatch.setenv("REFRESH_STRATEGIES", " session_probe , authentication_ticket ,")

    assert loader.get_list("REFRESH_STRATEGIES", ["x"]) == ["session_probe", "authentication_ticket"]

    monkeypatch.setenv("REFRESH_STRATEGIES", " , ")
    assert loader.get_list("REFRESH_STRATEGIES", ["x"]) == ["x"]


def test_home_prefixed_default_is_returned_verbatim(monkeypatch, tmp_path) -> None:
    loader = ConfigLoader(env_path=str(tmp_path / "missing.env"))
    monkeypatch.delenv("STATIC_DIR", raising=False)

    assert loader.get("STATIC_DIR", "~/static") == "~/static"
