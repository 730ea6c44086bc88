# tests/test_cli.py
"""Tests for the themeasset command line."""

import tempfile
from pathlib import Path

import pytest

from themeasset.cli import main


@pytest.fixture
def work_dir():
    """Create temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def manifest(work_dir):
    path = work_dir / "assets.yaml"
    path.write_text(
        "styles:\n"
        "  - name: base\n"
        "    source: css/app.css\n"
        "scripts:\n"
        "  - name: app\n"
        "    source: js/app.js\n"
        "    dependencies: [jquery]\n"
        "  - name: jquery\n"
        "    source: js/jquery.js\n"
    )
    return path


class TestCli:
    """Test CLI commands."""

    def test_order(self, manifest, capsys):
        main(["order", str(manifest), "--group", "script"])
        assert capsys.readouterr().out.split() == ["jquery", "app"]

    def test_render_all(self, manifest, capsys):
        main(["render", str(manifest), "--asset-url", "https://x"])
        out = capsys.readouterr().out
        assert 'href="https://x/css/app.css"' in out
        assert out.index("jquery.js") < out.index("app.js")

    def test_render_group(self, manifest, capsys):
        main(["render", str(manifest), "--group", "style", "--asset-url", "https://x"])
        out = capsys.readouterr().out
        assert "<link" in out
        assert "<script" not in out

    def test_render_secure(self, manifest, capsys):
        main(["render", str(manifest), "--group", "style", "--secure"])
        assert 'href="https://localhost/css/app.css"' in capsys.readouterr().out

    def test_render_insecure(self, manifest, capsys):
        main(["render", str(manifest), "--group", "script", "--insecure"])
        out = capsys.readouterr().out
        assert 'src="http://localhost/js/app.js"' in out

    def test_render_with_config(self, manifest, work_dir, capsys):
        config = work_dir / "config.yaml"
        config.write_text("asset_url: https://cdn.example.com/index.php\n")
        main(["render", str(manifest), "--group", "style", "--config", str(config)])
        assert 'href="https://cdn.example.com/css/app.css"' in capsys.readouterr().out

    def test_cycle_exits(self, work_dir, capsys):
        path = work_dir / "cycle.yaml"
        path.write_text(
            "scripts:\n"
            "  - {name: a, source: a.js, dependencies: [b]}\n"
            "  - {name: b, source: b.js, dependencies: [a]}\n"
        )
        with pytest.raises(SystemExit) as exc:
            main(["order", str(path), "--group", "script"])
        assert exc.value.code == 1
        assert "circular dependency" in capsys.readouterr().err

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])
