"""Unit tests for config cmd_show and cmd_init."""

import json

from mdnav.api.config.cmd_init import cmd_init
from mdnav.api.config.cmd_show import cmd_show


class TestCmdShow:
    def test_lists_sections(self, run_cmd):
        result = run_cmd(cmd_show, "")
        assert result.success
        assert result.output["content"]["sections"] == ["perspective", "links", "create_dirs", "silent", "log"]

    def test_section(self, run_cmd, write_config):
        write_config({"perspective": {"priority": "first"}})
        result = run_cmd(cmd_show, "perspective")
        assert result.success
        assert result.output["section"] == "perspective"
        assert result.output["content"]["priority"] == "first"

    def test_scalar_section(self, run_cmd):
        result = run_cmd(cmd_show, "create_dirs")
        assert result.success
        assert result.output["content"] == {"create_dirs": True}

    def test_unknown_section(self, run_cmd):
        result = run_cmd(cmd_show, "nope")
        assert not result.success
        assert "Unknown section" in result.output["errors"][0]

    def test_invalid_config_file(self, run_cmd, write_config):
        write_config("{invalid json")
        result = run_cmd(cmd_show, "perspective")
        assert result.success is False
        assert result.output["section"] == "perspective"
        assert result.output["errors"]


class TestCmdInit:
    def test_writes_defaults(self, run_cmd, mdnav_home):
        result = run_cmd(cmd_init)
        assert result.success
        assert result.output["written"] is True
        data = json.loads((mdnav_home / "config.json").read_text())
        assert data["perspective"]["priority"] == "current"

    def test_refuses_to_overwrite(self, run_cmd, write_config):
        path = write_config({"silent": True})
        result = run_cmd(cmd_init)
        assert not result.success
        assert result.output["written"] is False
        assert "--force" in result.output["errors"][0]
        assert json.loads(path.read_text()) == {"silent": True}

    def test_force_overwrites(self, run_cmd, write_config):
        path = write_config({"silent": True})
        result = run_cmd(cmd_init, force=True)
        assert result.success
        assert json.loads(path.read_text())["silent"] is False
