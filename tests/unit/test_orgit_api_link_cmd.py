"""Unit tests for link API commands."""

from orgit.api.link.cmd_export import cmd_export
from orgit.api.link.cmd_parse import cmd_parse
from orgit.api.link.cmd_resolve import cmd_resolve
from orgit.api.link.cmd_store import cmd_store
from orgit.api.StageResult import StageResult
from tests.unit.conftest import run_cmd


class TestCmdResolve:
    def test_success(self, fake_store):
        result = run_cmd(cmd_resolve, "orgit-rev:/repo::deadbeef", format="html", description="fix", store=fake_store)
        assert isinstance(result, StageResult)
        assert result.success
        assert result.output["url"] == '<a href="https://github.com/alice/proj/commit/deadbeef">fix</a>'
        assert result.output["format"] == "html"
        assert result.output["errors"] == []

    def test_no_public_remote(self):
        from tests.unit.conftest import FakeConfigStore

        result = run_cmd(cmd_resolve, "orgit:/nowhere", store=FakeConfigStore())
        assert not result.success
        assert result.output["error_kind"] == "no_public_remote"
        assert "/nowhere" in result.output["errors"][0]

    def test_malformed_link(self, fake_store):
        result = run_cmd(cmd_resolve, "orgit-log:/repo", store=fake_store)
        assert not result.success
        assert result.output["error_kind"] == "malformed_link_address"

    def test_configured_default_remote(self, write_config):
        from tests.unit.conftest import FakeConfigStore

        write_config({"remote": "upstream"})
        store = FakeConfigStore(
            {
                "/repo": {
                    "remotes": {"origin": "git@github.com:a/b.git", "upstream": "git@github.com:c/d.git"},
                    "config": {},
                }
            }
        )
        result = run_cmd(cmd_resolve, "orgit:/repo", store=store)
        assert result.output["url"] == "https://github.com/c/d"

    def test_broken_config(self, orgit_home, fake_store):
        (orgit_home / "config.json").write_text("{")
        result = run_cmd(cmd_resolve, "orgit:/repo", store=fake_store)
        assert not result.success
        assert result.output["errors"][0].startswith("Failed to load config")


class TestCmdParse:
    def test_success(self):
        result = run_cmd(cmd_parse, "orgit-log:~/proj::main")
        assert result.success
        assert result.output["kind"] == "log"
        assert result.output["repository_path"] == "~/proj"
        assert result.output["revision"] == "main"

    def test_failure(self):
        result = run_cmd(cmd_parse, "mailto:someone")
        assert not result.success
        assert result.output["errors"] == ["Not an orgit link: mailto:someone"]


class TestCmdStore:
    def test_commit(self):
        result = run_cmd(cmd_store, "commit", "/srv/proj", revisions=["abc123"])
        assert result.success
        assert result.output["link"] == "orgit-rev:/srv/proj::abc123"
        assert result.output["description"] == "proj (abc123)"

    def test_log_with_several_revisions_warns(self):
        result = run_cmd(cmd_store, "log", "/srv/proj", revisions=["main", "dev"])
        assert result.success
        assert result.output["link"] == "orgit-log:/srv/proj::main"
        assert result.output["warnings"]

    def test_unknown_view(self):
        result = run_cmd(cmd_store, "blame", "/srv/proj")
        assert not result.success
        assert "Unknown view kind" in result.output["errors"][0]

    def test_missing_revision(self):
        result = run_cmd(cmd_store, "commit", "/srv/proj")
        assert not result.success


class TestCmdExport:
    def test_export_to_output(self, tmp_path, fake_store):
        doc = tmp_path / "notes.org"
        doc.write_text("[[orgit-rev:/repo::abc][fix]]\n")
        result = run_cmd(cmd_export, str(doc), format="latex", store=fake_store)
        assert result.success
        assert result.output["text"] == "\\href{https://github.com/alice/proj/commit/abc}{fix}\n"
        assert result.output["links"] == ["orgit-rev:/repo::abc"]

    def test_export_to_file(self, tmp_path, fake_store):
        doc = tmp_path / "notes.org"
        out = tmp_path / "notes.txt"
        doc.write_text("[[orgit:/repo][proj]]")
        result = run_cmd(cmd_export, str(doc), format="text", output_path=str(out), store=fake_store)
        assert result.success
        assert out.read_text() == "https://github.com/alice/proj"
        assert result.output["text"] == ""

    def test_missing_document(self, tmp_path, fake_store):
        result = run_cmd(cmd_export, str(tmp_path / "missing.org"), store=fake_store)
        assert not result.success
        assert "Cannot read" in result.output["errors"][0]

    def test_unresolvable_link(self, tmp_path):
        from tests.unit.conftest import FakeConfigStore

        doc = tmp_path / "notes.org"
        doc.write_text("[[orgit:/repo]]")
        result = run_cmd(cmd_export, str(doc), store=FakeConfigStore())
        assert not result.success
        assert "Cannot determine public remote for /repo" in result.output["errors"][0]
