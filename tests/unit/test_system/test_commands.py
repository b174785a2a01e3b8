"""
Unit tests for command execution helpers and process tree handling.
"""

import subprocess
import sys

import pytest

from autobuilder.system import format_command, kill_process_tree, prepare_commands, run_command


@pytest.mark.unit
class TestPrepareCommands:
    """Test cases for splitting command strings."""

    @pytest.mark.parametrize(
        "command, expected",
        [
            ("", []),
            ("   ", []),
            ("gofmt -w .", ["gofmt", "-w", "."]),
            ("  -race   -v  ", ["-race", "-v"]),
            ("-v -race -v", ["-v", "-race"]),
            ("a\tb\nc", ["a", "b", "c"]),
        ],
    )
    def test_prepare_commands(self, command, expected):
        assert prepare_commands(command) == expected

    def test_format_command(self):
        assert format_command(["go", "build", "-o", "app"]) == "go build -o app"


@pytest.mark.unit
class TestRunCommand:
    """Test cases for run_command."""

    def test_success(self, temp_dir):
        code, output = run_command([sys.executable, "-c", "print('ok')"], cwd=temp_dir)

        assert code == 0
        assert output.strip() == "ok"

    def test_combined_output_on_failure(self, temp_dir):
        script = "import sys; print('out'); sys.stdout.flush(); sys.stderr.write('err\\n'); sys.exit(4)"

        code, output = run_command([sys.executable, "-c", script], cwd=temp_dir)

        assert code == 4
        assert "out" in output
        assert "err" in output

    def test_missing_program(self, temp_dir):
        code, output = run_command(["no-such-program-71aa"], cwd=temp_dir)

        assert code == -1
        assert "not found" in output

    def test_empty_command(self):
        assert run_command([])[0] == -1


@pytest.mark.unit
class TestKillProcessTree:
    """Test cases for kill_process_tree."""

    def test_kills_running_process(self):
        process = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(60)"])
        try:
            assert kill_process_tree(process.pid) >= 1
            assert process.wait(timeout=10) < 0
        finally:
            if process.poll() is None:
                process.kill()
                process.wait()

    def test_invalid_pid(self):
        assert kill_process_tree(0) == 0
        assert kill_process_tree(-5) == 0

    def test_process_that_no_longer_exists(self):
        process = subprocess.Popen([sys.executable, "-c", "pass"])
        process.wait(timeout=10)

        assert kill_process_tree(process.pid) == 0
