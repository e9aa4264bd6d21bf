"""End-to-end tests for the create-effect-agent CLI."""

from __future__ import annotations

import json
import re

from typer.testing import CliRunner

from create_effect_agent import __version__
from create_effect_agent.cli.main import app

runner = CliRunner()


def _exported(source: str) -> list[str]:
    return re.findall(r"^export (?:const|class) (\w+)", source, re.MULTILINE)


def _imported(test: str) -> list[str]:
    match = re.search(r"import \{ ([^}]*) \} from '\.\./src/index'", test)
    assert match is not None
    return [name.strip() for name in match.group(1).split(",")]


class TestGenerateCommand:
    """Test the generate command end to end."""

    def test_non_interactive_generation(self, tmp_path):
        target = tmp_path / "demo"
        result = runner.invoke(
            app, ["generate", str(target), "--name", "demo-lib", "--yes", "--no-git"]
        )

        assert result.exit_code == 0, result.output
        assert "demo-lib" in result.output
        assert "Skipped git initialization" in result.output
        assert "npm install" in result.output

        manifest = json.loads((target / "package.json").read_text())
        assert manifest["name"] == "demo-lib"
        assert manifest["type"] == "module"

        source = (target / "src" / "index.ts").read_text()
        test = (target / "test" / "index.test.ts").read_text()
        assert _exported(source) == _imported(test)
        assert not (target / ".git").exists()

    def test_short_yes_flag_and_default_name(self, tmp_path):
        target = tmp_path / "demo"
        result = runner.invoke(app, ["generate", str(target), "-y", "--no-git"])

        assert result.exit_code == 0, result.output
        manifest = json.loads((target / "package.json").read_text())
        assert manifest["name"] == "my-effect-lib"

    def test_preset(self, tmp_path):
        preset = tmp_path / "preset.yaml"
        preset.write_text(
            "package_manager: pnpm\n"
            "rule_formats: [Cursor, Gemini, AggregatedAgentsDoc]\n"
            "platform_pack: frontend\n"
        )
        target = tmp_path / "demo"
        result = runner.invoke(
            app, ["generate", str(target), "--yes", "--no-git", "--preset", str(preset)]
        )

        assert result.exit_code == 0, result.output
        assert "pnpm install" in result.output
        assert (target / ".cursor" / "rules" / "agent.md").exists()
        assert (target / "docs" / "agents" / "Agents.md").exists()
        tsconfig = json.loads((target / "tsconfig.json").read_text())
        assert "DOM" in tsconfig["compilerOptions"]["lib"]

    def test_non_empty_directory(self, tmp_path):
        (tmp_path / "existing.txt").write_text("keep")
        result = runner.invoke(app, ["generate", str(tmp_path), "--yes", "--no-git"])

        assert result.exit_code == 1
        assert "is not empty" in result.output
        assert [p.name for p in tmp_path.iterdir()] == ["existing.txt"]

    def test_invalid_name(self, tmp_path):
        result = runner.invoke(
            app, ["generate", str(tmp_path / "demo"), "--name", "Bad_Name", "--yes", "--no-git"]
        )
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not (tmp_path / "demo").exists()

    def test_name_with_trailing_newline(self, tmp_path):
        target = tmp_path / "demo"
        result = runner.invoke(
            app, ["generate", str(target), "--name", "demo-lib\n", "--yes", "--no-git"]
        )
        assert result.exit_code == 1
        assert "kebab-case" in result.output
        assert not target.exists()

    def test_empty_name(self, tmp_path):
        target = tmp_path / "demo"
        result = runner.invoke(app, ["generate", str(target), "--name", "", "--yes", "--no-git"])
        assert result.exit_code == 1
        assert "must not be empty" in result.output
        assert not target.exists()

    def test_supermemory_template(self, tmp_path):
        target = tmp_path / "demo"
        result = runner.invoke(
            app,
            ["generate", str(target), "--template", "supermemory", "--yes", "--no-git"],
        )

        assert result.exit_code == 0, result.output
        manifest = json.loads((target / "package.json").read_text())
        assert "effect-supermemory" in manifest["dependencies"]
        example = (target / "src" / "supermemory" / "example.ts").read_text()
        example_test = (target / "test" / "supermemory.example.test.ts").read_text()
        assert _exported(example) == [
            "SupermemoryConfigLive",
            "SupermemoryLive",
            "exampleSupermemoryEffect",
        ]
        match = re.search(r"import \{ ([^}]*) \} from '\.\./src/supermemory/example'", example_test)
        assert match is not None
        assert sorted(n.strip() for n in match.group(1).split(",")) == sorted(_exported(example))

    def test_unknown_template(self, tmp_path):
        result = runner.invoke(
            app,
            ["generate", str(tmp_path / "demo"), "--template", "fancy", "--yes", "--no-git"],
        )
        assert result.exit_code == 1
        assert "Unknown template 'fancy'" in result.output

    def test_missing_preset(self, tmp_path):
        result = runner.invoke(
            app,
            [
                "generate",
                str(tmp_path / "demo"),
                "--yes",
                "--preset",
                str(tmp_path / "nope.yaml"),
            ],
        )
        assert result.exit_code == 1
        assert "Preset file not found" in result.output

    def test_file_target(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")
        result = runner.invoke(app, ["generate", str(target), "--yes", "--no-git"])
        assert result.exit_code == 1
        assert "not a directory" in result.output

    def test_interactive(self, tmp_path):
        target = tmp_path / "demo"
        # name, template, package manager, rules, TypeScript pack, Effect pack
        answers = "demo-lib\n1\n3\n1,4,7\n2\n4\n"
        result = runner.invoke(app, ["generate", str(target), "--no-git"], input=answers)

        assert result.exit_code == 0, result.output
        assert (target / ".cursor" / "rules" / "agent.md").exists()
        assert (target / "docs" / "agents" / "Claude.md").exists()
        assert (target / "docs" / "agents" / "Agents.md").exists()
        assert "bun install" in result.output
        assert "export class DataService" in (target / "src" / "index.ts").read_text()

    def test_interactive_bad_selection(self, tmp_path):
        target = tmp_path / "demo"
        result = runner.invoke(
            app, ["generate", str(target), "--no-git"], input="demo-lib\n1\n1\n9\n"
        )
        assert result.exit_code == 1
        assert "Invalid selection" in result.output
        assert not target.exists()


class TestMainApp:
    """Test the top-level app options."""

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "generate" in result.output

    def test_short_help(self):
        result = runner.invoke(app, ["generate", "-h"])
        assert result.exit_code == 0
        assert "--no-git" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_short_version(self):
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert "create-effect-agent" in result.output
