from click.testing import CliRunner

from j2j import __version__
from j2j.app.cli import main
from j2j.core import serializer


def test_literal_argument():
    result = CliRunner().invoke(main, ["{foo: 'bar'}", "-i", "0"])
    assert result.exit_code == 0
    assert result.output == '{"foo":"bar"}\n'


def test_reads_stdin_when_no_source():
    result = CliRunner().invoke(main, ["--indent", "0"], input="{foo: 'bar'}\n")
    assert result.exit_code == 0
    assert result.output == '{"foo":"bar"}\n'


def test_expression_with_default_indent():
    result = CliRunner().invoke(main, ["{foo: 2+2}"])
    assert result.exit_code == 0
    assert result.output == '{\n  "foo": 4\n}\n'


def test_file_to_file(tmp_path):
    src = tmp_path / "bar.js"
    src.write_text("module.exports = {\n  entry: './index.js', // main\n  plugins: [],\n};\n", encoding="utf-8")
    dest = tmp_path / "bar.json"
    result = CliRunner().invoke(main, ["-f", str(src), "-o", str(dest), "-i", "0"])
    assert result.exit_code == 0
    assert result.output == ""
    assert dest.read_text(encoding="utf-8") == '{"entry":"./index.js","plugins":[]}'


def test_failure_exits_nonzero():
    result = CliRunner().invoke(main, ["foo"])
    assert result.exit_code == 1
    assert "cannot coerce input into anything usable" in result.output


def test_source_and_file_are_exclusive(tmp_path):
    src = tmp_path / "a.js"
    src.write_text("1", encoding="utf-8")
    result = CliRunner().invoke(main, ["2", "-f", str(src)])
    assert result.exit_code == 2


def test_negative_indent_is_a_usage_error():
    result = CliRunner().invoke(main, ["1", "-i", "-1"])
    assert result.exit_code == 2


def test_version():
    result = CliRunner().invoke(main, ["-v"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help():
    result = CliRunner().invoke(main, ["-h"])
    assert result.exit_code == 0
    assert "Convert JavaScript to JSON." in result.output
    assert "--line-nos" in result.output


def test_debug_does_not_change_stdout():
    plain = CliRunner().invoke(main, ["{a: 1}", "-i", "0"])
    debugged = CliRunner().invoke(main, ["{a: 1}", "-i", "0", "--debug"])
    assert plain.exit_code == debugged.exit_code == 0
    assert debugged.stdout == plain.stdout == '{"a":1}\n'


def _record_decoration(monkeypatch, tty):
    calls = []

    def fake_decorate(text, opts):
        calls.append(opts)
        return text

    original = serializer.should_decorate
    monkeypatch.setattr(serializer, "should_decorate", lambda opts, stream: original(opts, tty))
    monkeypatch.setattr(serializer, "decorate", fake_decorate)
    return calls


def test_terminal_output_is_decorated(monkeypatch, tty):
    calls = _record_decoration(monkeypatch, tty)
    result = CliRunner().invoke(main, ["{a: 1}", "-l"])
    assert result.exit_code == 0
    [opts] = calls
    assert opts.line_numbers is True


def test_no_color_suppresses_decoration(monkeypatch, tty):
    calls = _record_decoration(monkeypatch, tty)
    result = CliRunner().invoke(main, ["{a: 1}", "-i", "0", "-C"])
    assert result.exit_code == 0
    assert result.stdout == '{"a":1}\n'
    assert calls == []


def test_undecodable_input_file(tmp_path):
    src = tmp_path / "latin1.js"
    src.write_bytes(b"{name: '\xe9t\xe9'}")
    result = CliRunner().invoke(main, ["-f", str(src)])
    assert result.exit_code == 1
    assert "cannot read input" in result.stderr


def test_output_into_missing_directory(tmp_path):
    dest = tmp_path / "missing" / "out.json"
    result = CliRunner().invoke(main, ["{a: 1}", "-o", str(dest)])
    assert result.exit_code == 1
    assert "cannot write output" in result.stderr
