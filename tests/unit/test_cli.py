"""Tests for the tokengraph CLI."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from tokengraph.cli import app

runner = CliRunner()

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _invoke(project_dir: Path, *args: str):
    return runner.invoke(app, ["--manifest", str(project_dir / "tokengraph.toml"), *args])


def _generate(project_dir: Path, *extra: str):
    result = _invoke(project_dir, "generate", *extra)
    assert result.exit_code == 0, result.output
    return result


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


class TestGlobalOptions:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "tokengraph" in result.output

    def test_bad_manifest_exits(self, tmp_path: Path) -> None:
        path = tmp_path / "tokengraph.toml"
        path.write_text("not = [valid", encoding="utf-8")
        result = runner.invoke(app, ["--manifest", str(path), "inspect"])
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_writes_store(self, project_dir: Path) -> None:
        result = _generate(project_dir, "--primary", "#6366F1")
        assert "component" in result.output
        assert (project_dir / "store.json").exists()

    def test_rerun_keeps_ids(self, project_dir: Path) -> None:
        _generate(project_dir)
        first = json.loads((project_dir / "store.json").read_text(encoding="utf-8"))
        _generate(project_dir)
        second = json.loads((project_dir / "store.json").read_text(encoding="utf-8"))
        assert [v["id"] for v in first["variables"]] == [v["id"] for v in second["variables"]]

    def test_vocabulary_error_exits(self, project_dir: Path) -> None:
        (project_dir / "vocabulary.yaml").write_text("bogus: {}\n", encoding="utf-8")
        result = _invoke(project_dir, "generate")
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# inspect / resolve / clear
# ---------------------------------------------------------------------------


class TestInspect:
    def test_requires_store(self, project_dir: Path) -> None:
        result = _invoke(project_dir, "inspect")
        assert result.exit_code == 1

    def test_json_output(self, project_dir: Path) -> None:
        _generate(project_dir)
        result = _invoke(project_dir, "inspect", "--tier", "semantic", "--json")
        assert result.exit_code == 0
        tokens = {t["name"]: t for t in json.loads(result.stdout)}
        assert tokens["background"]["values"] == {
            "Light": "-> primitive/gray-50",
            "Dark": "-> primitive/gray-950",
        }
        assert all(t["tier"] == "semantic" for t in tokens.values())

    def test_table_output(self, project_dir: Path) -> None:
        _generate(project_dir)
        result = _invoke(project_dir, "inspect", "--tier", "component")
        assert result.exit_code == 0
        assert "tokens" in result.output


class TestResolve:
    def test_explains_strategy(self, project_dir: Path) -> None:
        _generate(project_dir)
        result = _invoke(project_dir, "resolve", "component", "x", "primaryForeground", "--json")
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["strategy"] == "exact-peer"
        assert payload["value"] == "-> semantic/primaryForeground"
        assert payload["alias"] is True

    def test_dark_mode_fallback(self, project_dir: Path) -> None:
        _generate(project_dir)
        result = _invoke(
            project_dir, "resolve", "semantic", "foreground", "textColor", "--mode", "Dark"
        )
        assert result.exit_code == 0
        assert "cycle-guard" in result.output
        assert "#FFFFFF" in result.output


class TestClear:
    def test_clear_removes_everything(self, project_dir: Path) -> None:
        _generate(project_dir)
        result = _invoke(project_dir, "clear", "--yes")
        assert result.exit_code == 0
        listed = _invoke(project_dir, "inspect", "--json")
        assert json.loads(listed.stdout) == []

    def test_clear_can_be_declined(self, project_dir: Path) -> None:
        _generate(project_dir)
        result = runner.invoke(
            app, ["--manifest", str(project_dir / "tokengraph.toml"), "clear"], input="n\n"
        )
        assert result.exit_code == 0
        data = json.loads((project_dir / "store.json").read_text(encoding="utf-8"))
        assert data["variables"]


# ---------------------------------------------------------------------------
# export
# ---------------------------------------------------------------------------


class TestExport:
    def test_css(self, project_dir: Path) -> None:
        _generate(project_dir)
        out = project_dir / "tokens.css"
        result = _invoke(project_dir, "export", "css", "--output", str(out))
        assert result.exit_code == 0
        assert ":root {" in out.read_text(encoding="utf-8")

    def test_tailwind_default_path(self, project_dir: Path) -> None:
        _generate(project_dir)
        result = _invoke(project_dir, "export", "tailwind")
        assert result.exit_code == 0
        assert (project_dir / "build" / "tailwind.config.js").exists()

    def test_dtcg(self, project_dir: Path) -> None:
        _generate(project_dir)
        out = project_dir / "tokens.json"
        result = _invoke(project_dir, "export", "dtcg", "-o", str(out))
        assert result.exit_code == 0
        assert "semantic" in json.loads(out.read_text(encoding="utf-8"))

    def test_export_without_store(self, project_dir: Path) -> None:
        result = _invoke(project_dir, "export", "css")
        assert result.exit_code == 1
