"""Tests for the Tailwind CLI compiler wrapper (subprocess is faked)."""

import logging
import subprocess
from pathlib import Path

import pytest

from design_copier.errors import CompilerError
from design_copier.verify import TailwindCompiler, check_version_compatibility


class FakeRun:
    """Replacement for subprocess.run that records calls."""

    def __init__(self, returncode=0, stdout="", stderr="", output_css=".flex{display:flex}", raises=None):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.output_css = output_css
        self.raises = raises
        self.calls = []
        self.inputs = {}

    def __call__(self, args, **kwargs):
        self.calls.append((list(args), kwargs))
        if self.raises is not None:
            raise self.raises
        if "-i" in args:
            self.inputs["stylesheet"] = Path(args[args.index("-i") + 1]).read_text()
        if "--content" in args:
            paths = args[args.index("--content") + 1].split(",")
            self.inputs["content"] = [Path(p).read_text() for p in paths]
        if "-o" in args and self.returncode == 0 and self.output_css is not None:
            Path(args[args.index("-o") + 1]).write_text(self.output_css)
        return subprocess.CompletedProcess(args, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def fake_run(monkeypatch):
    def install(**kwargs):
        fake = FakeRun(**kwargs)
        monkeypatch.setattr(subprocess, "run", fake)
        return fake

    return install


# ---------------------------------------------------------------------------
# compile
# ---------------------------------------------------------------------------


class TestCompile:
    def test_returns_generated_css(self, fake_run):
        fake = fake_run(output_css=".hidden{display:none}")
        css = TailwindCompiler().compile("@tailwind utilities;", ["<div class='hidden'></div>"])
        assert css == ".hidden{display:none}"
        assert fake.inputs["stylesheet"] == "@tailwind utilities;"
        assert fake.inputs["content"] == ["<div class='hidden'></div>"]

    def test_command_line(self, fake_run):
        fake = fake_run()
        TailwindCompiler(executable="npx tailwindcss").compile("", ["<p></p>"])
        args, kwargs = fake.calls[0]
        assert args[:2] == ["npx", "tailwindcss"]
        assert "-i" in args and "-o" in args and "--content" in args
        assert "-c" not in args
        assert "--no-autoprefixer" not in args
        assert kwargs["timeout"] == 60.0

    def test_config_and_autoprefix_flags(self, fake_run, tmp_path):
        fake = fake_run()
        config = tmp_path / "tailwind.config.js"
        TailwindCompiler(config_path=config, autoprefix=False, timeout=5).compile("", ["x"])
        args, kwargs = fake.calls[0]
        assert args[args.index("-c") + 1] == str(config)
        assert "--no-autoprefixer" in args
        assert kwargs["timeout"] == 5

    def test_no_content_omits_flag(self, fake_run):
        fake = fake_run()
        TailwindCompiler().compile("", [])
        assert "--content" not in fake.calls[0][0]

    def test_nonzero_exit(self, fake_run):
        fake_run(returncode=1, stderr="CssSyntaxError: Unclosed block\n  at line 1")
        with pytest.raises(CompilerError) as info:
            TailwindCompiler().compile(".a {", ["x"])
        assert info.value.returncode == 1
        assert "Unclosed block" in str(info.value)
        assert "at line 1" in info.value.stderr

    def test_missing_executable(self, fake_run):
        fake_run(raises=FileNotFoundError("tailwindcss"))
        with pytest.raises(CompilerError, match="not found"):
            TailwindCompiler().compile("", [])

    def test_timeout(self, fake_run):
        fake_run(raises=subprocess.TimeoutExpired(cmd="tailwindcss", timeout=1))
        with pytest.raises(CompilerError, match="timed out"):
            TailwindCompiler(timeout=1).compile("", [])

    def test_missing_output(self, fake_run):
        fake_run(output_css=None)
        with pytest.raises(CompilerError, match="without writing output"):
            TailwindCompiler().compile("", [])

    def test_unencodable_markup(self, fake_run):
        fake = fake_run()
        with pytest.raises(CompilerError, match="Could not write Tailwind input") as info:
            TailwindCompiler().compile("@tailwind utilities;", ["<p>\ud800</p>"])
        assert isinstance(info.value.__cause__, UnicodeEncodeError)
        assert fake.calls == []

    def test_unencodable_stylesheet(self, fake_run):
        fake_run()
        with pytest.raises(CompilerError, match="Could not write Tailwind input"):
            TailwindCompiler().compile(".a { content: \"\ud800\"; }", [])


# ---------------------------------------------------------------------------
# version checks
# ---------------------------------------------------------------------------


class TestVersion:
    def test_version_parsed_from_help(self, fake_run):
        fake_run(stdout="\ntailwindcss v3.4.1\n\nUsage:\n   tailwindcss build [options]\n")
        assert TailwindCompiler().version() == "3.4.1"

    def test_version_missing(self, fake_run):
        fake_run(stdout="usage: something else")
        assert TailwindCompiler().version() is None

    def test_check_logs_version(self, fake_run, caplog):
        fake_run(stdout="tailwindcss v3.4.1")
        with caplog.at_level(logging.INFO, logger="design_copier"):
            assert check_version_compatibility(TailwindCompiler()) == "3.4.1"
        assert "Using Tailwind CSS v3.4.1" in caplog.text

    def test_check_warns_on_v4(self, fake_run, caplog):
        fake_run(stdout="≈ tailwindcss v4.0.0")
        with caplog.at_level(logging.WARNING, logger="design_copier"):
            check_version_compatibility(TailwindCompiler())
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_check_never_raises(self, fake_run, caplog):
        fake_run(raises=FileNotFoundError("tailwindcss"))
        with caplog.at_level(logging.WARNING, logger="design_copier"):
            assert check_version_compatibility(TailwindCompiler()) is None
        assert "Could not check Tailwind version" in caplog.text
