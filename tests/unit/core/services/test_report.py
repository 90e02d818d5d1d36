from __future__ import annotations

"""
Unit tests for the Report Assembler.

Runs the full report against an in-memory repository and a colourless
console, checking section order, summary lines and readme handling.
"""

import os

import pytest

from gitcat.core.services.report import ReportAssembler
from gitcat.domain.config import ReportConfig
from gitcat.domain.errors import GitCommandError, NotARepositoryError, ReadmeReadError


def _run(repo, console, **config):
    return ReportAssembler(repo, console, ReportConfig(**config)).run()


def test_full_report_with_readme(tmp_path, fake_repo_factory, plain_console, output_buffer) -> None:
    (tmp_path / "README.md").write_text("# Demo\n\nHello *world* [b]x[/b] :smile:\n", encoding="utf-8")
    repo = fake_repo_factory(tracked=["README.md", "src/main.ext"], root_name="demo", cwd=str(tmp_path))

    _run(repo, plain_console, show_readme=True)
    out = output_buffer.getvalue()

    expected_head = "\n".join([
        "demo",
        "├── README.md",
        "└── src",
        "    └── main.ext",
        "",
        "● 2 tracked file(s)",
        "● 0 untracked file(s)",
        "● 0 gitignored file(s)",
        "",
        "─── README.md (as rendered on GitHub) ───",
        "# Demo",
        "",
        "Hello *world* [b]x[/b] :smile:",
    ])
    assert out.startswith(expected_head)


def test_report_without_readme_flag(fake_repo_factory, plain_console, output_buffer) -> None:
    repo = fake_repo_factory(tracked=["a/b.txt", "a/c.txt", "d.txt"], untracked=4, ignored=2)

    snapshot = _run(repo, plain_console)
    lines = output_buffer.getvalue().splitlines()

    assert snapshot.tracked_count == 3
    assert lines[:5] == ["repo", "├── a", "│   ├── b.txt", "│   └── c.txt", "└── d.txt"]
    assert lines[-3:] == ["● 3 tracked file(s)", "● 4 untracked file(s)", "● 2 gitignored file(s)"]
    assert "README" not in output_buffer.getvalue()


def test_readme_not_tracked_prints_notice(tmp_path, fake_repo_factory, plain_console, output_buffer) -> None:
    # Present on disk but untracked: still reported as not found
    (tmp_path / "README.md").write_text("untracked", encoding="utf-8")
    repo = fake_repo_factory(tracked=["docs/README.md", "readme.md"], cwd=str(tmp_path))

    _run(repo, plain_console, show_readme=True)
    out = output_buffer.getvalue()

    assert out.rstrip().endswith("No README.md found in tracked files.")
    assert "untracked\n" not in out


def test_readme_read_failure_is_hard_error(tmp_path, fake_repo_factory, plain_console, output_buffer) -> None:
    repo = fake_repo_factory(tracked=["README.md"], cwd=str(tmp_path))

    with pytest.raises(ReadmeReadError) as exc:
        _run(repo, plain_console, show_readme=True)

    assert isinstance(exc.value.__cause__, OSError)
    assert output_buffer.getvalue() == ""


def test_custom_readme_name(tmp_path, fake_repo_factory, plain_console, output_buffer) -> None:
    (tmp_path / "README.rst").write_text("Title\n=====\n", encoding="utf-8")
    repo = fake_repo_factory(tracked=["README.rst"], cwd=str(tmp_path))

    _run(repo, plain_console, show_readme=True, readme_name="README.rst")

    assert "─── README.rst (as rendered on GitHub) ───\nTitle\n=====" in output_buffer.getvalue()


def test_outside_repository_prints_nothing(fake_repo_factory, plain_console, output_buffer) -> None:
    repo = fake_repo_factory(tracked=["x"], inside=False)

    with pytest.raises(NotARepositoryError):
        _run(repo, plain_console)

    assert repo.snapshot_calls == 0
    assert output_buffer.getvalue() == ""


def test_git_failure_propagates(fake_repo_factory, plain_console, output_buffer) -> None:
    repo = fake_repo_factory(fail_with=GitCommandError(["ls-files"], 1, "boom"))

    with pytest.raises(GitCommandError):
        _run(repo, plain_console)
    assert output_buffer.getvalue() == ""


def test_empty_repository(fake_repo_factory, plain_console, output_buffer) -> None:
    _run(fake_repo_factory(root_name="."), plain_console)

    assert output_buffer.getvalue().splitlines() == [
        ".",
        "",
        "● 0 tracked file(s)",
        "● 0 untracked file(s)",
        "● 0 gitignored file(s)",
    ]


def test_relative_readme_read_uses_process_cwd(tmp_path, monkeypatch, fake_repo_factory, plain_console, output_buffer) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "README.md").write_text("from cwd", encoding="utf-8")

    _run(fake_repo_factory(tracked=["README.md"]), plain_console, show_readme=True)

    assert output_buffer.getvalue().rstrip().endswith("from cwd")
    assert os.getcwd() == str(tmp_path)


def test_readme_written_verbatim_with_tabs_and_crlf(tmp_path, fake_repo_factory, plain_console, output_buffer) -> None:
    content = "make:\n\tgcc -o x x.c\r\nend\n"
    (tmp_path / "README.md").write_bytes(content.encode("utf-8"))
    repo = fake_repo_factory(tracked=["README.md"], cwd=str(tmp_path))

    _run(repo, plain_console, show_readme=True)

    out = output_buffer.getvalue()
    assert out.endswith("─── README.md (as rendered on GitHub) ───\n" + content + "\n")
