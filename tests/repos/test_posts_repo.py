import pytest

from app.repos.posts_repo import FilesystemPostsRepo, slug_from_path
from tests.conftest import write_post


def test_list_post_files_returns_empty_when_directory_missing(tmp_path):
    repo = FilesystemPostsRepo(tmp_path / "does-not-exist")

    assert repo.list_post_files() == []
    assert repo.list_slugs() == []


def test_list_post_files_only_includes_markdown_files(content_dir):
    write_post(content_dir, "b-post", "---\ntitle: B\n---\nbody")
    write_post(content_dir, "a-post", "---\ntitle: A\n---\nbody")
    (content_dir / "notes.txt").write_text("not a post")
    (content_dir / "draft.md.bak").write_text("backup")
    (content_dir / "nested.md").mkdir()

    repo = FilesystemPostsRepo(content_dir)

    assert [p.name for p in repo.list_post_files()] == ["a-post.md", "b-post.md"]
    assert repo.list_slugs() == ["a-post", "b-post"]


def test_get_post_path_points_at_markdown_file(content_dir):
    expected = write_post(content_dir, "hello", "---\ntitle: Hello\n---\n# Hello")
    repo = FilesystemPostsRepo(str(content_dir))

    assert repo.get_post_path("hello") == expected


def test_get_post_path_returns_none_when_missing(content_dir):
    repo = FilesystemPostsRepo(content_dir)

    assert repo.get_post_path("missing") is None


def test_get_post_path_returns_none_when_directory_missing(tmp_path):
    repo = FilesystemPostsRepo(tmp_path / "nowhere")

    assert repo.get_post_path("anything") is None


@pytest.mark.parametrize("slug", ["", ".", "..", "../secret", "a/b", "a\\b"])
def test_get_post_path_rejects_unsafe_slugs(tmp_path, slug):
    content_dir = tmp_path / "blog"
    write_post(content_dir, "ok", "body")
    (tmp_path / "secret.md").write_text("top secret")
    repo = FilesystemPostsRepo(content_dir)

    assert repo.get_post_path(slug) is None


def test_slug_from_path_strips_only_the_extension(content_dir):
    path = write_post(content_dir, "release.notes", "body")

    assert slug_from_path(path) == "release.notes"
