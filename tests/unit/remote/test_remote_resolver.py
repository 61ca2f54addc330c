"""Tests for the remote descriptor resolver."""

import pytest
from factories import ParsedRemoteUrlFactory
from fakes import FakeMercurialBackend, FakeVCSBackend

from remote_url.core.exceptions import RemoteResolutionError, UnsupportedVCSError
from remote_url.core.models.remote import Protocol
from remote_url.remote.resolver import read_remote, resolve_branch, resolve_remote, web_port


@pytest.mark.unit
class TestResolveRemote:
    """Tests for resolve_remote."""

    def test_github_scp_remote(self, fake_backend: FakeVCSBackend) -> None:
        remote = resolve_remote(fake_backend)
        assert remote.protocol == Protocol.HTTPS
        assert remote.host == "github.com"
        assert remote.port is None
        assert remote.path_to_repo == "acme/site"
        assert remote.branch == "main"

    def test_http_forced(self, fake_backend: FakeVCSBackend) -> None:
        remote = resolve_remote(fake_backend, use_https=False)
        assert remote.protocol == Protocol.HTTP
        assert remote.base_url == "http://github.com"

    def test_named_remote(self) -> None:
        backend = FakeVCSBackend(
            remotes={
                "origin": "git@github.com:acme/site.git",
                "upstream": "https://gitlab.com/upstream/site.git",
            }
        )
        remote = resolve_remote(backend, "upstream")
        assert remote.host == "gitlab.com"
        assert remote.path_to_repo == "upstream/site"

    def test_missing_remote(self, fake_backend: FakeVCSBackend) -> None:
        with pytest.raises(RemoteResolutionError, match="not configured"):
            resolve_remote(fake_backend, "nope")

    def test_unparsable_remote(self) -> None:
        backend = FakeVCSBackend(remotes={"origin": "not a url"})
        with pytest.raises(RemoteResolutionError):
            resolve_remote(backend)

    def test_file_remote_has_no_host(self) -> None:
        backend = FakeVCSBackend(remotes={"origin": "file:///srv/git/site.git"})
        with pytest.raises(RemoteResolutionError, match="no host"):
            resolve_remote(backend)

    def test_prefetched_remote_not_read_again(self, fake_backend: FakeVCSBackend) -> None:
        parsed = ParsedRemoteUrlFactory(resource="gitlab.com", owner="team", name="app")
        remote = resolve_remote(fake_backend, parsed=parsed)
        assert remote.host == "gitlab.com"
        assert remote.path_to_repo == "team/app"
        assert "get_remote_url" not in fake_backend.calls

    def test_https_web_port_kept(self) -> None:
        backend = FakeVCSBackend(remotes={"origin": "https://git.example.org:8443/acme/site.git"})
        remote = resolve_remote(backend)
        assert remote.base_url == "https://git.example.org:8443"

    def test_ssh_port_dropped(self) -> None:
        backend = FakeVCSBackend(remotes={"origin": "ssh://git@git.example.org:2222/acme/site.git"})
        remote = resolve_remote(backend)
        assert remote.port is None
        assert remote.base_url == "https://git.example.org"

    def test_unsupported_vcs(self) -> None:
        backend = FakeMercurialBackend(remotes={"origin": "git@github.com:acme/site.git"})
        with pytest.raises(UnsupportedVCSError):
            resolve_remote(backend)


@pytest.mark.unit
class TestResolveBranch:
    """Tests for resolve_branch."""

    def test_symbolic_branch(self) -> None:
        assert resolve_branch(FakeVCSBackend(branch="feature/docs")) == "feature/docs"

    def test_detached_head_uses_commit(self) -> None:
        backend = FakeVCSBackend(branch=None, head_commit="abc123")
        assert resolve_branch(backend) == "abc123"

    def test_no_branch_no_commit(self) -> None:
        backend = FakeVCSBackend(branch=None, head_commit=None)
        with pytest.raises(RemoteResolutionError, match="branch"):
            resolve_branch(backend)

    def test_read_remote(self, fake_backend: FakeVCSBackend) -> None:
        assert read_remote(fake_backend).full_name == "acme/site"


@pytest.mark.unit
class TestWebPort:
    """Tests for web_port."""

    @pytest.mark.parametrize(
        "protocol,port,expected",
        [
            ("https", None, None),
            ("https", 443, None),
            ("http", 80, None),
            ("https", 8443, 8443),
            ("http", 8080, 8080),
            ("ssh", 2222, None),
            ("git", 9418, None),
        ],
    )
    def test_web_port(self, protocol: str, port: int | None, expected: int | None) -> None:
        parsed = ParsedRemoteUrlFactory(protocol=protocol, port=port)
        assert web_port(parsed) == expected
