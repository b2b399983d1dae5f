"""Tests for data models."""

from pathlib import Path

from git_prompt.models.repository import (
    DirectoryContext,
    RepositoryHandle,
    RepositoryState,
)
from git_prompt.models.status_label import StatusLabel


class TestStatusLabel:
    """Test cases for StatusLabel rendering."""

    def test_plain_text_has_no_markers(self):
        assert StatusLabel("main").render() == "main"

    def test_color_only(self):
        label = StatusLabel("main", color="blue")
        assert label.render() == "%F{blue}main%f"

    def test_bold_only(self):
        label = StatusLabel("main", is_bold=True)
        assert label.render() == "%Bmain%b"

    def test_bold_wraps_color(self):
        """Bold markers are outermost: bold-on, color-on, text, color-off, bold-off."""
        label = StatusLabel("(not repo)", is_bold=True, color="blue")
        assert label.render() == "%B%F{blue}(not repo)%f%b"

    def test_str_matches_render(self):
        label = StatusLabel("main*", color="red")
        assert str(label) == label.render()

    def test_with_color_and_bold_return_copies(self):
        label = StatusLabel("main")
        colored = label.with_color("yellow")
        bolded = colored.bold()

        assert label.color is None
        assert not label.is_bold
        assert colored.color == "yellow"
        assert not colored.is_bold
        assert bolded == StatusLabel("main", is_bold=True, color="yellow")


class TestRepositoryHandle:
    """Test cases for RepositoryHandle."""

    def test_bare_when_no_workdir(self):
        handle = RepositoryHandle(git_dir=Path("/srv/project.git"))
        assert handle.is_bare

    def test_not_bare_with_workdir(self):
        handle = RepositoryHandle(
            git_dir=Path("/home/user/repo/.git"), workdir=Path("/home/user/repo")
        )
        assert not handle.is_bare


class TestDirectoryContext:
    """Test cases for DirectoryContext."""

    def test_without_repository(self):
        context = DirectoryContext(path=Path("/home/user"))
        assert not context.in_repository
        assert not context.at_repository_root

    def test_attach_repository(self):
        context = DirectoryContext(path=Path("/home/user/repo"))
        handle = RepositoryHandle(
            git_dir=Path("/home/user/repo/.git"), workdir=Path("/home/user/repo")
        )

        context.attach_repository(handle)

        assert context.in_repository
        assert context.repository is handle
        assert context.at_repository_root

    def test_subdirectory_is_not_root(self):
        context = DirectoryContext(
            path=Path("/home/user/repo/src"),
            repository=RepositoryHandle(
                git_dir=Path("/home/user/repo/.git"), workdir=Path("/home/user/repo")
            ),
        )
        assert not context.at_repository_root

    def test_bare_repository_is_never_root(self):
        context = DirectoryContext(
            path=Path("/srv/project.git"),
            repository=RepositoryHandle(git_dir=Path("/srv/project.git")),
        )
        assert not context.at_repository_root


class TestRepositoryState:
    """Test cases for RepositoryState."""

    def test_states_are_distinct(self):
        values = [state.value for state in RepositoryState]
        assert len(values) == len(set(values))
        assert RepositoryState("clean") is RepositoryState.CLEAN
