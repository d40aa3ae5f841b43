import pytest

from asciiart import ENV_ASCII_DIR


@pytest.fixture(autouse=True)
def no_ascii_dir_override(monkeypatch):
    """Keep a developer's HYPERFETCH_ASCII_DIR from leaking into tests."""
    monkeypatch.delenv(ENV_ASCII_DIR, raising=False)


@pytest.fixture
def logo_dir(tmp_path):
    """An external logo directory with a full and a small arch logo."""
    (tmp_path / "arch.txt").write_text("$1/\\\n$2/  \\$R!\n", encoding="utf-8")
    (tmp_path / "arch_small.txt").write_text("^\n", encoding="utf-8")
    (tmp_path / "gentoo.txt").write_text("g$1e$2n\r\ntoo\r\n", encoding="utf-8")
    (tmp_path / "README.md").write_text("not a logo", encoding="utf-8")
    return tmp_path
