"""Tests for the shell module.

The shell runs one line end to end: tokenize, split redirections,
dispatch, and write the merged output.  Console streams are captured
with ``io.StringIO``.
"""

import io
import shutil
import sys
from pathlib import Path

import pytest

from py_shell.config import ShellConfig
from py_shell.env import Environment
from py_shell.logging import LogLevel
from py_shell.results import Terminate
from py_shell.search import SearchPath
from py_shell.shell import Shell


def _shell(path: SearchPath | None = None) -> tuple[Shell, io.StringIO, io.StringIO]:
    """Create a shell with captured console streams."""
    out, err = io.StringIO(), io.StringIO()
    config = ShellConfig(search_path=path or SearchPath())
    shell = Shell(config=config, env=Environment(), stdout=out, stderr=err)
    return shell, out, err


def _script(directory: Path, name: str, body: str) -> Path:
    """Create an executable ``/bin/sh`` script."""
    directory.mkdir(parents=True, exist_ok=True)
    program = directory / name
    program.write_text(f"#!/bin/sh\n{body}\n")
    program.chmod(0o755)
    return program


class TestShellCreation:
    """Verify shell initialisation."""

    def test_config_from_environment(self) -> None:
        """Without a config, one is built from the environment."""
        shell = Shell(env=Environment({"PATH": "/x", "PS1": "> "}))
        assert shell.config.prompt == "> "
        assert shell.config.search_path.directories == (Path("/x"),)

    def test_explicit_config_wins(self) -> None:
        """An explicit config is used as-is."""
        config = ShellConfig(prompt="% ")
        assert Shell(config=config, env=Environment()).config is config


class TestShellExecute:
    """Verify command parsing and dispatch."""

    def test_empty_line_does_nothing(self) -> None:
        """An empty line produces no output."""
        shell, out, err = _shell()
        assert shell.execute("") is None
        assert out.getvalue() == err.getvalue() == ""

    def test_whitespace_only_does_nothing(self) -> None:
        """Whitespace-only input produces no output."""
        shell, out, err = _shell()
        shell.execute("   ")
        assert out.getvalue() == err.getvalue() == ""

    def test_echo_with_quotes(self) -> None:
        """Quoted arguments reach the builtin intact."""
        shell, out, _err = _shell()
        shell.execute("""echo 'hello    world' "a\\"b" c\\ d""")
        assert out.getvalue() == 'hello    world a"b c d\n'

    def test_unknown_command(self) -> None:
        """An unknown command reports on stderr and returns None."""
        shell, out, err = _shell()
        assert shell.execute("foobar x") is None
        assert out.getvalue() == ""
        assert err.getvalue() == "foobar: command not found\n"

    def test_quoted_command_name(self) -> None:
        """The command name itself may be quoted."""
        shell, out, _err = _shell()
        shell.execute("'echo' hi")
        assert out.getvalue() == "hi\n"

    def test_cat_present_and_missing(self, tmp_path: Path) -> None:
        """Both the content and the error are emitted."""
        shell, out, err = _shell()
        (tmp_path / "present.txt").write_text("content\n")
        missing = tmp_path / "missing.txt"
        shell.execute(f"cat {tmp_path / 'present.txt'} {missing}")
        assert out.getvalue() == "content\n"
        assert err.getvalue() == f"cat: {missing}: No such file or directory\n"

    def test_cd_then_pwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A successful cd is visible to the next pwd."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "sub").mkdir()
        shell, out, _err = _shell()
        shell.execute("cd sub")
        shell.execute("pwd")
        assert Path(out.getvalue().strip()).resolve() == (tmp_path / "sub").resolve()

    def test_failed_cd_keeps_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A failed cd reports an error and pwd is unchanged."""
        monkeypatch.chdir(tmp_path)
        shell, out, err = _shell()
        shell.execute("cd nowhere")
        shell.execute("pwd")
        assert err.getvalue() == "cd: nowhere: No such file or directory\n"
        assert Path(out.getvalue().strip()).resolve() == tmp_path.resolve()

    def test_undecodable_input_redirected(self, tmp_path: Path) -> None:
        """Surrogate-escaped input reaches the redirect file as raw bytes."""
        shell, _out, err = _shell()
        target = tmp_path / "f"
        assert shell.execute(f"echo caf\udce9 > {target}") is None
        assert target.read_bytes() == b"caf\xe9"
        assert err.getvalue() == ""


class TestShellExit:
    """Verify the exit command."""

    def test_exit_returns_terminate(self) -> None:
        """``exit 2`` returns Terminate(2) and prints nothing."""
        shell, out, err = _shell()
        assert shell.execute("exit 2") == Terminate(code=2)
        assert out.getvalue() == err.getvalue() == ""

    def test_exit_bypasses_redirection(self, tmp_path: Path) -> None:
        """Redirections on exit are ignored; no file is created."""
        shell, _out, _err = _shell()
        target = tmp_path / "out.txt"
        assert shell.execute(f"exit 0 > {target}") == Terminate(code=0)
        assert not target.exists()

    def test_exit_is_logged(self) -> None:
        """Exiting is recorded in the shell log."""
        shell, _out, _err = _shell()
        shell.execute("exit 5")
        entries = shell.logger.filter(min_level=LogLevel.INFO, source="shell")
        assert any("5" in e.message for e in entries)


@pytest.mark.skipif(sys.platform == "win32", reason="uses /bin/sh scripts")
class TestExternalPrograms:
    """Verify real external programs run through the whole pipeline."""

    def test_program_output(self, tmp_path: Path) -> None:
        """A program's stdout is printed with one trailing newline."""
        bin_dir = tmp_path / "bin"
        _script(bin_dir, "greet", 'echo "hello $1"')
        shell, out, _err = _shell(SearchPath(directories=(bin_dir,)))
        shell.execute("greet 'big world'")
        assert out.getvalue() == "hello big world\n"

    def test_program_failure(self, tmp_path: Path) -> None:
        """A failing program's stderr is reported."""
        bin_dir = tmp_path / "bin"
        _script(bin_dir, "fail", "echo broken >&2\nexit 1")
        shell, out, err = _shell(SearchPath(directories=(bin_dir,)))
        shell.execute("fail")
        assert out.getvalue() == ""
        assert err.getvalue() == "broken\n"

    def test_program_output_redirected(self, tmp_path: Path) -> None:
        """A program's output can be redirected to a file."""
        bin_dir = tmp_path / "bin"
        _script(bin_dir, "greet", "echo one\necho two")
        shell, out, _err = _shell(SearchPath(directories=(bin_dir,)))
        target = tmp_path / "out.txt"
        shell.execute(f"greet > {target}")
        assert out.getvalue() == ""
        assert target.read_text() == "one\ntwo"

    def test_per_operand_program(self, tmp_path: Path) -> None:
        """A per-operand program runs once per file, failures included."""
        bin_dir = tmp_path / "bin"
        _script(
            bin_dir,
            "head",
            'if [ -f "$1" ]; then echo "got $1"; else echo "no $1" >&2; exit 1; fi',
        )
        (tmp_path / "a").write_text("")
        shell, out, err = _shell(SearchPath(directories=(bin_dir,)))
        shell.execute(f"head {tmp_path / 'a'} {tmp_path / 'b'}")
        assert out.getvalue() == f"got {tmp_path / 'a'}\n"
        assert err.getvalue() == f"no {tmp_path / 'b'}\n"

    def test_per_operand_program_with_option(self, tmp_path: Path) -> None:
        """``head -n 1 f`` prints one line from one invocation."""
        head = shutil.which("head")
        if head is None:
            pytest.skip("head is not installed")
        target = tmp_path / "f.txt"
        target.write_text("one\ntwo\nthree\n")
        shell, out, err = _shell(SearchPath(directories=(Path(head).parent,)))
        shell.execute(f"head -n 1 {target}")
        assert out.getvalue() == "one\n"
        assert err.getvalue() == ""
        spawns = [e for e in shell.logger.entries if e.message.startswith("spawn ")]
        assert len(spawns) == 1

    def test_type_reports_program(self, tmp_path: Path) -> None:
        """``type`` finds programs on the configured PATH."""
        bin_dir = tmp_path / "bin"
        program = _script(bin_dir, "greet", "true")
        shell, out, _err = _shell(SearchPath(directories=(bin_dir,)))
        shell.execute("type greet echo")
        assert out.getvalue() == f"greet is {program}\necho is a shell builtin\n"
