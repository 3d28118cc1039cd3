from tinylisp import config


def test_defaults(monkeypatch):
    monkeypatch.delenv("TINYLISP_MAX_DEPTH", raising=False)
    monkeypatch.delenv("TINYLISP_PROMPT", raising=False)
    assert config.get_max_depth() == 200
    assert config.get_prompt() == "> "


def test_overrides(monkeypatch):
    monkeypatch.setenv("TINYLISP_MAX_DEPTH", " 64 ")
    monkeypatch.setenv("TINYLISP_PROMPT", "lisp> ")
    assert config.get_max_depth() == 64
    assert config.get_prompt() == "lisp> "


def test_invalid_max_depth_falls_back(monkeypatch):
    for raw in ("abc", "0", "-3", ""):
        monkeypatch.setenv("TINYLISP_MAX_DEPTH", raw)
        assert config.get_max_depth() == 200
