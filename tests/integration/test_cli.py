"""
Integration tests for the command line interface.

Tests the complete generate flow including:
- URL input from a file and from stdin
- Strategy selection and ordering
- Output file handling
- Error exits
"""

import pytest
from click.testing import CliRunner

from param_permuter.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def inputs(tmp_path):
    """Write a URL list and a wordlist for the CLI."""
    urls = tmp_path / "urls.txt"
    urls.write_text("http://x.com/a?x=1\n")
    params = tmp_path / "params.txt"
    params.write_text("p1\np2\n")
    return {"urls": str(urls), "params": str(params), "dir": tmp_path}


def generate(runner, *args, **kwargs):
    return runner.invoke(cli, ["--silent", "generate", *args], **kwargs)


class TestGenerateCommand:
    """Test successful runs of the generate command."""

    def test_ignore_end_to_end(self, runner, inputs):
        result = generate(runner, "-l", inputs["urls"], "-p", inputs["params"],
                          "-c", "2", "-v", "Z", "-gs", "ignore")

        assert result.exit_code == 0, result.output
        assert result.stdout == "http://x.com/a?x=1&p2=Z\nhttp://x.com/a?x=1&p1=Z\n"

    def test_urls_from_stdin(self, runner, inputs):
        result = generate(runner, "-p", inputs["params"], "-c", "2", "-v", "Z", "-gs", "ignore",
                          input="  http://x.com/a?x=1  \n\n")

        assert result.exit_code == 0, result.output
        assert result.stdout == "http://x.com/a?x=1&p2=Z\nhttp://x.com/a?x=1&p1=Z\n"

    def test_comma_separated_strategies_run_in_fixed_order(self, runner, inputs):
        result = generate(runner, "-l", inputs["urls"], "-p", inputs["params"],
                          "-c", "2", "-v", "Z", "-gs", "ignore,combine", "-gs", "normal",
                          "-vs", "replace")

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [
            "http://x.com/a?x=Z&p2=Z",
            "http://x.com/a?x=Z&p1=Z",
            "http://x.com/a?x=Z",
            "http://x.com/a?x=1&p2=Z",
            "http://x.com/a?x=1&p1=Z",
        ]

    def test_multiple_values_and_double_encode(self, runner, inputs):
        result = generate(runner, "-l", inputs["urls"], "-p", inputs["params"],
                          "-v", "<a>", "-v", "b", "-gs", "combine", "-de")

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [
            "http://x.com/a?x=1%253Ca%253E",
            "http://x.com/a?x=1b",
        ]

    def test_output_file(self, runner, inputs):
        output = inputs["dir"] / "out.txt"

        result = generate(runner, "-l", inputs["urls"], "-p", inputs["params"],
                          "-c", "2", "-v", "Z", "-gs", "ignore", "-o", str(output))

        assert result.exit_code == 0, result.output
        assert result.stdout == ""
        assert output.read_text() == "http://x.com/a?x=1&p2=Z\nhttp://x.com/a?x=1&p1=Z\n"

    def test_empty_url_list_writes_nothing(self, runner, inputs):
        result = generate(runner, "-p", inputs["params"], "-v", "Z", "-gs", "normal", input="")

        assert result.exit_code == 0, result.output
        assert result.stdout == ""

    def test_skip_invalid(self, runner, inputs):
        result = generate(runner, "-p", inputs["params"], "-c", "2", "-v", "Z", "-gs", "ignore",
                          "--skip-invalid", input="http://[bad/\nhttp://x.com/a?x=1\n")

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["http://x.com/a?x=1&p2=Z", "http://x.com/a?x=1&p1=Z"]

    def test_chunk_default_from_environment(self, runner, inputs, monkeypatch):
        monkeypatch.setenv("PARAM_PERMUTER_CHUNK", "3")

        result = generate(runner, "-l", inputs["urls"], "-p", inputs["params"], "-v", "Z", "-gs", "normal")

        assert result.exit_code == 0, result.output
        assert result.stdout == "http://x.com/a?x=Z&p2=Z&p1=Z\n"

    @pytest.mark.filterwarnings("error::DeprecationWarning")
    def test_generate_emits_no_deprecation_warnings(self, runner, inputs):
        result = generate(runner, "-p", inputs["params"], "-c", "2", "-v", "Z", "-gs", "ignore",
                          input="http://x.com/a?x=1\n")

        assert result.exit_code == 0, result.output
        assert result.stdout == "http://x.com/a?x=1&p2=Z\nhttp://x.com/a?x=1&p1=Z\n"


class TestGenerateErrors:
    """Test configuration and processing errors."""

    def test_second_run_with_same_output_fails(self, runner, inputs):
        output = inputs["dir"] / "out.txt"
        args = ["-l", inputs["urls"], "-p", inputs["params"], "-c", "2", "-v", "Z", "-gs", "ignore",
                "-o", str(output)]

        first = generate(runner, *args)
        second = generate(runner, *args)

        assert first.exit_code == 0
        assert second.exit_code == 1
        assert "already exists" in second.output
        assert output.read_text() == "http://x.com/a?x=1&p2=Z\nhttp://x.com/a?x=1&p1=Z\n"

    @pytest.mark.parametrize("args,message", [
        (["-v", "Z"], "Generation strategy is not given"),
        (["-gs", "normal"], "No values are given"),
        (["-v", "Z", "-gs", "sideways"], "sideways"),
        (["-v", "Z", "-gs", "normal", "-c", "0"], "chunk"),
    ])
    def test_invalid_options(self, runner, inputs, args, message):
        result = generate(runner, "-l", inputs["urls"], "-p", inputs["params"], *args)

        assert result.exit_code == 1
        assert result.stdout == ""
        assert message in result.output

    def test_missing_wordlist(self, runner, inputs):
        result = generate(runner, "-l", inputs["urls"], "-v", "Z", "-gs", "normal")

        assert result.exit_code == 1
        assert "Parameter wordlist file is not given" in result.output

    def test_wordlist_does_not_exist(self, runner, inputs):
        result = generate(runner, "-l", inputs["urls"], "-p", str(inputs["dir"] / "nope.txt"),
                          "-v", "Z", "-gs", "normal")

        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_url_list_does_not_exist(self, runner, inputs):
        result = generate(runner, "-l", str(inputs["dir"] / "nope.txt"), "-p", inputs["params"],
                          "-v", "Z", "-gs", "normal")

        assert result.exit_code == 1
        assert "URL list does not exist" in result.output

    def test_undecodable_wordlist_fails(self, runner, inputs):
        params = inputs["dir"] / "latin1.txt"
        params.write_bytes(b"caf\xe9\n")

        result = generate(runner, "-l", inputs["urls"], "-p", str(params), "-v", "Z", "-gs", "normal")

        assert result.exit_code == 1
        assert result.stdout == ""
        assert "I/O error" in result.output

    @pytest.mark.parametrize("url", ["http://x.com/%zz?a=1", "http://exa mple.com/?a=1"])
    def test_malformed_url_aborts(self, runner, inputs, url):
        result = generate(runner, "-p", inputs["params"], "-v", "Z", "-gs", "ignore", input=url + "\n")

        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Invalid URL" in result.output

    def test_invalid_url_aborts_without_output(self, runner, inputs):
        output = inputs["dir"] / "out.txt"

        result = generate(runner, "-p", inputs["params"], "-c", "2", "-v", "Z", "-gs", "ignore",
                          "-o", str(output), input="http://x.com/a?x=1\nhttp://[bad/\n")

        assert result.exit_code == 1
        assert "Invalid URL" in result.output
        assert not output.exists()


class TestOtherCommands:

    def test_config(self, runner):
        result = runner.invoke(cli, ["--silent", "config"])

        assert result.exit_code == 0

    def test_version(self, runner):
        result = runner.invoke(cli, ["--silent", "version"])

        assert result.exit_code == 0
