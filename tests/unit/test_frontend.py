"""Unit tests for the frontend module."""

import pytest

from docbridge.frontend import pdfjs_base_url, render_init_script, write_init_script


class TestRenderInitScript:
    """Tests for render_init_script function."""

    def test_without_service_worker_version(self):
        script = render_init_script()

        assert "let serviceWorkerVersion = null;" in script

    def test_with_service_worker_version(self):
        script = render_init_script("1234567")

        assert 'let serviceWorkerVersion = "1234567";' in script

    def test_version_is_escaped(self):
        """Versions are rendered as string literals, never as code."""
        script = render_init_script('1"; alert(1); "')

        assert 'alert(1); "";' not in script
        assert '"1\\"; alert(1); \\""' in script

    def test_pdfjs_worker_and_cmaps(self):
        script = render_init_script(pdfjs_version="3.11.174")

        assert (
            '"https://cdn.jsdelivr.net/npm/pdfjs-dist@3.11.174/build/pdf.worker.min.js"' in script
        )
        assert 'cMapUrl: "https://cdn.jsdelivr.net/npm/pdfjs-dist@3.11.174/cmaps/"' in script
        assert "cMapPacked: true" in script

    def test_loader_sequence(self):
        """Entrypoint, engine and app are started in order."""
        script = render_init_script()

        positions = [
            script.index("_flutter.loader"),
            script.index(".loadEntrypoint("),
            script.index("engineInitializer.initializeEngine()"),
            script.index('loading.classList.add("init_done")'),
            script.index("appRunner.runApp()"),
            script.index("loading.remove()"),
        ]
        assert positions == sorted(positions)
        assert "}, 200);" in script


class TestPdfjsBaseUrl:
    """Tests for pdfjs_base_url function."""

    def test_default_release(self):
        assert pdfjs_base_url("2.12.313") == "https://cdn.jsdelivr.net/npm/pdfjs-dist@2.12.313"

    @pytest.mark.parametrize("version", ["", "2.12/../x", '2"'])
    def test_invalid_version(self, version):
        with pytest.raises(ValueError):
            pdfjs_base_url(version)


class TestWriteInitScript:
    """Tests for write_init_script function."""

    def test_writes_file(self, tmp_path):
        target = tmp_path / "web" / "init.js"

        result = write_init_script(target, "42")

        assert result == target
        assert target.read_text(encoding="utf-8") == render_init_script("42")
