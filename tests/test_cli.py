"""Tests for the command-line interface."""

from typer.testing import CliRunner

from nomosize import __version__
from nomosize.cli import app

runner = CliRunner()


def _make_project(tmp_path, make_package):
    node_modules = tmp_path / "node_modules"
    make_package(node_modules / "big", "big", "1.0.0", files={"a.js": 5000})
    make_package(node_modules / "ms", "ms", "2.1.3", files={"index.js": 100})
    make_package(
        node_modules / "debug" / "node_modules" / "ms",
        "ms",
        "2.0.0",
        files={"index.js": 100},
    )
    make_package(node_modules / "debug", "debug", "2.6.9", files={"src.js": 200})
    return tmp_path


class TestReportCommand:
    """Tests for the nomosize command."""

    def test_version(self):
        """Test that --version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"nomosize {__version__}" in result.output

    def test_report(self, tmp_path, make_package):
        """Test a full report of a small project."""
        root = _make_project(tmp_path, make_package)

        result = runner.invoke(app, [str(root)])

        assert result.exit_code == 0
        assert "Found 4 package(s)" in result.output
        assert "big" in result.output
        assert "node_modules/debug/node_modules/ms" in result.output
        assert "(~100.0% of the whole bloat)" in result.output

    def test_top_limits_rows(self, tmp_path, make_package):
        """Test that --top lists only the largest packages."""
        root = _make_project(tmp_path, make_package)

        result = runner.invoke(app, [str(root), "--top", "1"])

        assert result.exit_code == 0
        assert "Found 4 package(s)" in result.output
        assert "1.0.0" in result.output
        assert "2.6.9" not in result.output
        assert "2.1.3" not in result.output

    def test_top_zero(self, tmp_path, make_package):
        """Test that --top 0 lists nothing but still summarizes."""
        root = _make_project(tmp_path, make_package)

        result = runner.invoke(app, [str(root), "-t", "0"])

        assert result.exit_code == 0
        assert "listed above = 0 B (~0.0% of the whole bloat)" in result.output

    def test_merge(self, tmp_path, make_package):
        """Test that --merge shows each version of a package in one row."""
        root = _make_project(tmp_path, make_package)

        result = runner.invoke(app, [str(root), "--merge"])

        assert result.exit_code == 0
        assert "2.1.3" in result.output
        assert "2.0.0" in result.output
        assert "(~100.0% of the whole bloat)" in result.output

    def test_merge_sorted_by_versions(self, tmp_path, make_package):
        """Test that --sort versions lists the most duplicated package first."""
        root = _make_project(tmp_path, make_package)

        result = runner.invoke(app, [str(root), "-m", "-s", "versions", "-t", "1"])

        assert result.exit_code == 0
        assert "2.1.3" in result.output
        assert "1.0.0" not in result.output

    def test_invalid_sort(self, tmp_path):
        """Test that unknown sort keys are rejected."""
        result = runner.invoke(app, [str(tmp_path), "--sort", "name"])

        assert result.exit_code == 2

    def test_negative_top(self, tmp_path):
        """Test that a negative row count is rejected."""
        result = runner.invoke(app, [str(tmp_path), "--top", "-1"])

        assert result.exit_code == 2

    def test_project_without_dependencies(self, tmp_path):
        """Test that a project with no node_modules reports nothing."""
        result = runner.invoke(app, [str(tmp_path)])

        assert result.exit_code == 0
        assert "Found 0 package(s), consuming 0 B total" in result.output

    def test_broken_packages_do_not_fail_the_run(self, tmp_path, make_package):
        """Test that skipped directories are reported but exit status is 0."""
        make_package(tmp_path / "node_modules" / "good", "good")
        (tmp_path / "node_modules" / "leftover").mkdir()

        result = runner.invoke(app, [str(tmp_path)])

        assert result.exit_code == 0
        assert "leftover" in result.output
        assert "Found 1 package(s)" in result.output

    def test_missing_root(self, tmp_path):
        """Test that a nonexistent root is an error."""
        result = runner.invoke(app, [str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_root_is_a_file(self, tmp_path):
        """Test that a file as root is an error."""
        (tmp_path / "package.json").write_text("{}")

        result = runner.invoke(app, [str(tmp_path / "package.json")])

        assert result.exit_code == 1
        assert "not a directory" in result.output

    def test_nested_scoped_paths_are_not_truncated(
        self, tmp_path, make_package, monkeypatch, path_column
    ):
        """Test that deep scoped paths are shown in full in piped output."""
        monkeypatch.setenv("COLUMNS", "80")
        outer = tmp_path / "node_modules" / "@babel" / "plugin-transform-modules-commonjs"
        make_package(outer, "@babel/plugin-transform-modules-commonjs", "7.24.1")
        make_package(
            outer / "node_modules" / "@babel" / "helper-module-transforms",
            "@babel/helper-module-transforms",
            "7.23.3",
        )

        for args in ([str(tmp_path)], [str(tmp_path), "--merge"]):
            result = runner.invoke(app, args)

            assert result.exit_code == 0
            assert (
                "node_modules/@babel/plugin-transform-modules-commonjs/"
                "node_modules/@babel/helper-module-transforms"
            ) in path_column(result.output)

    def test_warns_without_package_json(self, tmp_path):
        """Test that a root without package.json gets a warning but still runs."""
        result = runner.invoke(app, [str(tmp_path)])

        assert result.exit_code == 0
        assert "No package.json" in result.output
        assert "Found 0 package(s)" in result.output

    def test_no_warning_with_package_json(self, tmp_path):
        """Test that a real project root is not warned about."""
        (tmp_path / "package.json").write_text('{"name": "app", "version": "1.0.0"}')

        result = runner.invoke(app, [str(tmp_path)])

        assert result.exit_code == 0
        assert "No package.json" not in result.output
