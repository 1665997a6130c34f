"""
Tests for gogist.credentials and the token path in gogist.config.
"""

import os
import stat
from pathlib import Path

import pytest

from gogist import config
from gogist.credentials import TOKEN_FILE_MODE, CredentialStore, default_store
from gogist.errors import LocalIOError


class TestCredentialStore:

    def test_round_trip(self, tmp_path, token):
        store = CredentialStore(tmp_path / "tok")
        store.write(token)
        assert store.read() == token

    def test_content_is_whole_file(self, tmp_path):
        store = CredentialStore(tmp_path / "tok")
        store.write("abc\n")
        assert (tmp_path / "tok").read_bytes() == b"abc\n"
        assert store.read() == "abc\n"

    def test_owner_only_permissions(self, tmp_path, token):
        path = tmp_path / "tok"
        CredentialStore(path).write(token)
        assert stat.S_IMODE(path.stat().st_mode) == TOKEN_FILE_MODE == 0o600

    def test_overwrite_replaces_and_tightens(self, tmp_path):
        path = tmp_path / "tok"
        path.write_text("old-token-that-is-longer")
        os.chmod(path, 0o644)

        CredentialStore(path).write("new")

        assert path.read_text() == "new"
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_mode_is_owner_only_before_token_is_written(self, tmp_path, monkeypatch):
        path = tmp_path / "tok"
        path.write_text("old")
        os.chmod(path, 0o644)
        modes_at_write = []
        real_fdopen = os.fdopen

        def spying_fdopen(fd, *args, **kwargs):
            fh = real_fdopen(fd, *args, **kwargs)
            real_write = fh.write

            def write(data):
                modes_at_write.append(stat.S_IMODE(os.fstat(fh.fileno()).st_mode))
                return real_write(data)

            fh.write = write
            return fh

        monkeypatch.setattr("gogist.credentials.os.fdopen", spying_fdopen)

        CredentialStore(path).write("new")

        assert modes_at_write == [0o600]
        assert path.read_text() == "new"

    def test_read_missing_raises(self, tmp_path):
        with pytest.raises(LocalIOError, match="cannot read token file"):
            CredentialStore(tmp_path / "absent").read()

    def test_write_into_missing_dir_raises(self, tmp_path):
        with pytest.raises(LocalIOError, match="cannot write token file"):
            CredentialStore(tmp_path / "no" / "such" / "dir" / "tok").write("t")


class TestDefaultStore:

    def test_explicit_path_wins(self, tmp_path):
        store = default_store(str(tmp_path / "explicit"))
        assert store.path == tmp_path / "explicit"

    def test_env_override(self, tmp_path):
        assert default_store().path == tmp_path / ".gogist"

    def test_home_default(self, monkeypatch, tmp_path):
        monkeypatch.delenv("GOGIST_TOKEN_FILE")
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path / "home"))
        assert default_store().path == tmp_path / "home" / config.TOKEN_FILE_NAME

    def test_no_home_raises_io_error(self, monkeypatch):
        monkeypatch.delenv("GOGIST_TOKEN_FILE")

        def _no_home(cls):
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", classmethod(_no_home))

        with pytest.raises(LocalIOError, match="home directory"):
            default_store()
