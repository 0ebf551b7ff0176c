import pytest

from frontmatter_tool.main import entrypoint
from frontmatter_tool.models.outcome import Outcome


def _run(*args):
	return entrypoint(list(args), standalone_mode=False)


def _make_fake_impl():
	"""Return a (fake_impl, seen_dict) pair for monkeypatching."""
	seen = {}

	def fake_impl(args, dry_run=False):
		seen["args"] = list(args or [])
		seen["dry_run"] = dry_run
		return Outcome.success()

	return fake_impl, seen


@pytest.mark.parametrize("command,impl", [
    ("get", "get_impl"),
    ("set", "set_impl"),
    ("delete", "delete_impl"),
])
def test_commands_route_to_impl(monkeypatch, command, impl):
	fake_impl, seen = _make_fake_impl()
	monkeypatch.setattr(f"frontmatter_tool.main.{impl}", fake_impl)
	assert _run(command, "a", "b", "file.md") == 0
	assert seen["args"] == ["a", "b", "file.md"]
	assert seen["dry_run"] is False


def test_dry_run_anywhere(monkeypatch):
	"""--dry-run is accepted before and after the arguments."""
	fake_impl, seen = _make_fake_impl()
	monkeypatch.setattr("frontmatter_tool.main.set_impl", fake_impl)
	_run("set", "k=v", "--dry-run", "file.md")
	assert seen == {"args": ["k=v", "file.md"], "dry_run": True}
	_run("--dry-run", "set", "k=v", "file.md")
	assert seen == {"args": ["k=v", "file.md"], "dry_run": True}


def test_set_delete_flag_routes_to_delete(monkeypatch):
	fake_impl, seen = _make_fake_impl()
	monkeypatch.setattr("frontmatter_tool.main.delete_impl", fake_impl)
	_run("set", "--delete", "file.md")
	assert seen["args"] == ["file.md"]


def test_help_does_not_crash():
	"""--help should exit cleanly (SystemExit with code 0)."""
	with pytest.raises(SystemExit) as exc_info:
		entrypoint(["--help"], standalone_mode=True)
	assert exc_info.value.code == 0


# ── end to end ───────────────────────────────────────────────────────


def test_set_message(tmp_path, capsys):
	p = tmp_path / "test_file.md"
	p.write_text("---\ntitle: Old Title\n---\nSome content", encoding="utf-8")
	assert _run("set", "message=Hello World", str(p)) == 0
	content = p.read_text(encoding="utf-8")
	assert "message: Hello World" in content
	assert "title: Old Title" in content
	assert capsys.readouterr().out == ""


def test_get_field(tmp_path, capsys):
	p = tmp_path / "test_file.md"
	p.write_text("---\ntitle: Hello\n---\nBody", encoding="utf-8")
	assert _run("get", "title", str(p)) == 0
	assert capsys.readouterr().out == "Hello\n"


def test_get_all(tmp_path, capsys):
	p = tmp_path / "only_fm.md"
	p.write_text("---\na: 1\nb: 2\n---", encoding="utf-8")
	assert _run("get", str(p)) == 0
	assert capsys.readouterr().out == "a: 1\nb: 2\n"


def test_get_nonexistent_exits_2_silently(tmp_path, capsys):
	p = tmp_path / "test_file.md"
	p.write_text("---\nexists: yes\n---\nContent", encoding="utf-8")
	assert _run("get", "nonexistent", str(p)) == 2
	captured = capsys.readouterr()
	assert captured.out == ""
	assert captured.err == ""


def test_get_without_frontmatter_exits_2(tmp_path, capsys):
	p = tmp_path / "plain.md"
	p.write_text("No frontmatter here.", encoding="utf-8")
	assert _run("get", str(p)) == 2
	assert capsys.readouterr().out == ""


def test_get_standalone_exit_code(tmp_path):
	p = tmp_path / "plain.md"
	p.write_text("No frontmatter here.", encoding="utf-8")
	with pytest.raises(SystemExit) as exc_info:
		entrypoint(["get", str(p)])
	assert exc_info.value.code == 2


def test_get_too_many_keys(tmp_path, capsys):
	p = tmp_path / "doc.md"
	p.write_text("---\na: 1\n---\n", encoding="utf-8")
	assert _run("get", "a", "b", str(p)) == 1
	assert "at most one key" in capsys.readouterr().err


def test_get_malformed_frontmatter_fails(tmp_path, capsys):
	p = tmp_path / "bad.md"
	p.write_text("---\na: [unclosed\n---\n", encoding="utf-8")
	assert _run("get", str(p)) == 1
	captured = capsys.readouterr()
	assert captured.out == ""
	assert captured.err.startswith("Error: invalid YAML frontmatter")


def test_set_invalid_pair(tmp_path, capsys):
	p = tmp_path / "doc.md"
	assert _run("set", "novalue", str(p)) == 1
	assert "invalid key=value format: novalue" in capsys.readouterr().err
	assert not p.exists()


def test_set_requires_pair(tmp_path, capsys):
	assert _run("set", str(tmp_path / "doc.md")) == 1
	assert "at least one key=value" in capsys.readouterr().err


def test_missing_file_argument(capsys):
	assert _run("delete") == 1
	assert "no file specified for delete" in capsys.readouterr().err


def test_unknown_command(capsys):
	assert _run("frobnicate", "file.md") == 1


def test_directory_as_file(tmp_path, capsys):
	assert _run("set", "a=1", str(tmp_path)) == 1
	assert capsys.readouterr().err.startswith("Error:")


def test_set_dry_run_prints_document(tmp_path, capsys):
	p = tmp_path / "test_file.md"
	original = "---\ntitle: Old\n---\nBody"
	p.write_text(original, encoding="utf-8")
	assert _run("set", "--dry-run", "title=New", str(p)) == 0
	assert capsys.readouterr().out == "---\ntitle: New\n---\nBody"
	assert p.read_text(encoding="utf-8") == original


def test_dry_run_on_missing_file_creates_nothing(tmp_path, capsys):
	p = tmp_path / "missing.md"
	for args in (["set", "a=1"], ["delete"], ["delete", "a"], ["get"]):
		_run(*args, "--dry-run", str(p))
	assert not p.exists()


def test_delete_whole_block_dry_run_empty_output(tmp_path, capsys):
	p = tmp_path / "only_fm.md"
	p.write_text("---\na: 1\nb: 2\n---", encoding="utf-8")
	assert _run("delete", "--dry-run", str(p)) == 0
	assert capsys.readouterr().out == ""
	assert _run("delete", str(p)) == 0
	assert p.read_text(encoding="utf-8") == ""


def test_delete_fields(tmp_path, capsys):
	p = tmp_path / "test_file.md"
	p.write_text(
	    "---\ntitle: Test\nauthor: John\ndate: 2023-01-01\n---\nBody content.",
	    encoding="utf-8")
	assert _run("delete", "author", "date", str(p)) == 0
	assert _run("get", str(p)) == 0
	assert capsys.readouterr().out == "title: Test\n"


def test_malformed_set_warns_on_stderr(tmp_path, caplog):
	p = tmp_path / "bad.md"
	p.write_text("---\nold: [unclosed\n---\nBody", encoding="utf-8")
	assert _run("set", "new=1", str(p)) == 0
	assert p.read_text(encoding="utf-8") == "---\nnew: 1\n---\nBody"
	assert "could not parse existing frontmatter" in caplog.text


def test_strict_mode_from_environment(tmp_path, monkeypatch, capsys):
	monkeypatch.setenv("FRONTMATTER_STRICT", "true")
	p = tmp_path / "bad.md"
	original = "---\nold: [unclosed\n---\nBody"
	p.write_text(original, encoding="utf-8")
	assert _run("set", "new=1", str(p)) == 1
	assert p.read_text(encoding="utf-8") == original


def test_invalid_config_fails(tmp_path, monkeypatch, capsys):
	monkeypatch.setenv("FRONTMATTER_INDENT", "1")
	assert _run("get", str(tmp_path / "doc.md")) == 1
	assert capsys.readouterr().err.startswith("Error:")
