"""Tests for the GitHub Actions runtime helpers."""

from workspace_sync import github_actions as gha

from conftest import read_outputs


class TestInputs:
    def test_get_input(self, monkeypatch):
        monkeypatch.setenv("INPUT_DEP-MAP", "  {}  ")
        assert gha.get_input("dep-map") == "{}"

    def test_get_input_default(self, monkeypatch):
        monkeypatch.delenv("INPUT_HEAD-REF", raising=False)
        assert gha.get_input("head-ref", "HEAD") == "HEAD"


class TestOutputs:
    def test_set_output_multiline(self, actions_env):
        gha.set_output("changed-files", "a.txt\nb.txt")
        gha.set_output("has-changes", "true")
        assert read_outputs(actions_env["output"]) == {
            "changed-files": "a.txt\nb.txt",
            "has-changes": "true",
        }

    def test_set_output_without_runner(self, monkeypatch, capsys):
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
        gha.set_output("updated", "false")
        assert capsys.readouterr().out == "updated=false\n"

    def test_step_summary(self, actions_env):
        assert gha.append_step_summary("# Title\n")
        assert actions_env["summary"].read_text(encoding="utf-8") == "# Title\n"

    def test_step_summary_unavailable(self, monkeypatch):
        monkeypatch.delenv("GITHUB_STEP_SUMMARY", raising=False)
        assert not gha.append_step_summary("x")


class TestWorkflowCommands:
    def test_group(self, actions_env, capsys):
        with gha.group("Projects"):
            gha.info("a")
        assert capsys.readouterr().out == "::group::Projects\na\n::endgroup::\n"

    def test_set_failed_escapes_newlines(self, actions_env, capsys):
        assert gha.set_failed("bad\nthing 100%") == 1
        assert capsys.readouterr().out == "::error::bad%0Athing 100%25\n"

    def test_warning_outside_actions(self, monkeypatch, capsys):
        monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
        gha.warning("careful")
        assert capsys.readouterr().err == "WARNING: careful\n"
