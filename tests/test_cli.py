"""
Tests for atlaspack CLI

These tests verify the command structure, output files and error handling.
"""

import json

import pytest
from click.testing import CliRunner
from PIL import Image

from atlaspack.cli import cli


@pytest.fixture
def project(tmp_path):
    """Texture list with two images under an assets/ directory"""
    assets = tmp_path / "assets"
    assets.mkdir()
    Image.new('RGBA', (5, 3), (255, 0, 0, 255)).save(assets / "a.png")
    Image.new('RGBA', (3, 3), (0, 255, 0, 255)).save(assets / "b.png")
    config = tmp_path / "textures.json"
    config.write_text(json.dumps({"width": 10, "height": 10, "images": ["a.png", {"path": "b.png"}]}))
    return tmp_path


class TestCLI:
    """Test CLI command structure and basic functionality"""

    def test_cli_help(self):
        """Test that CLI help works"""
        runner = CliRunner()
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'atlaspack' in result.output
        assert 'pack' in result.output
        assert 'plan' in result.output

    def test_cli_version(self):
        """Test that version flag works"""
        runner = CliRunner()
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0

    def test_pack_help(self):
        """Test that pack command help works"""
        runner = CliRunner()
        result = runner.invoke(cli, ['pack', '--help'])
        assert result.exit_code == 0
        assert 'Pack the images' in result.output
        assert '--dir' in result.output
        assert '--border' in result.output
        assert '--verbose' in result.output

    def test_pack_missing_arguments(self):
        """Test that pack requires both output paths"""
        runner = CliRunner()
        result = runner.invoke(cli, ['pack', 'textures.json'])
        assert result.exit_code != 0

    def test_pack_works(self, project):
        """Test that pack writes the atlas image and map"""
        runner = CliRunner()
        out_texture = project / "atlas.png"
        out_map = project / "atlas.json"
        result = runner.invoke(cli, [
            'pack',
            str(project / "textures.json"),
            str(out_texture),
            str(out_map),
            '--dir', str(project / "assets"),
        ])

        if result.exit_code != 0:
            print(f"Output: {result.output}")
        assert result.exit_code == 0
        assert 'Success' in result.output

        data = json.loads(out_map.read_text())
        # default border of 1 pixel
        assert data["textures"]["a.png"] == {"left": 0, "top": 0, "width": 6, "height": 4}
        assert data["textures"]["b.png"] == {"left": 6, "top": 0, "width": 4, "height": 4}
        assert data["size"] == {"width": 10, "height": 4}
        with Image.open(out_texture) as img:
            assert img.size == (10, 4)

    def test_pack_missing_input(self, tmp_path):
        """Test that pack handles a missing texture list"""
        runner = CliRunner()
        result = runner.invoke(cli, [
            'pack',
            '/nonexistent/textures.json',
            str(tmp_path / "atlas.png"),
            str(tmp_path / "atlas.json"),
        ])

        assert result.exit_code == 1
        assert 'not found' in result.output.lower()

    def test_pack_missing_image(self, project):
        """Test that pack reports an image that cannot be opened"""
        runner = CliRunner()
        result = runner.invoke(cli, [
            'pack',
            str(project / "textures.json"),
            str(project / "atlas.png"),
            str(project / "atlas.json"),
        ])

        # without --dir the images are not found
        assert result.exit_code == 1
        assert 'Image Error' in result.output

    def test_pack_capacity_error(self, project):
        """Test that a too-small canvas fails with placed/total counts"""
        config = project / "small.json"
        config.write_text(json.dumps({"width": 4, "height": 4, "images": ["a.png"]}))

        runner = CliRunner()
        result = runner.invoke(cli, [
            'pack',
            str(config),
            str(project / "atlas.png"),
            str(project / "atlas.json"),
            '-d', str(project / "assets"),
        ])

        assert result.exit_code == 1
        assert '4x4' in result.output
        assert 'placed 0 of 1' in result.output
        assert not (project / "atlas.png").exists()

    def test_pack_empty_texture_list(self, project):
        """Test that an empty image list is a config error"""
        config = project / "empty.json"
        config.write_text(json.dumps({"width": 8, "height": 8, "images": []}))

        runner = CliRunner()
        result = runner.invoke(cli, [
            'pack',
            str(config),
            str(project / "atlas.png"),
            str(project / "atlas.json"),
        ])

        assert result.exit_code == 1
        assert 'Config Error' in result.output
        assert 'Unexpected' not in result.output

    def test_plan_prints_layout(self, project):
        """Test that plan prints placements without writing files"""
        runner = CliRunner()
        result = runner.invoke(cli, [
            'plan',
            str(project / "textures.json"),
            '-d', str(project / "assets"),
            '--border', '0',
        ])

        assert result.exit_code == 0
        assert 'a.png' in result.output
        assert 'Atlas size: 8x3' in result.output
        assert not (project / "atlas.png").exists()

    def test_pack_unexpected_error_verbose(self, project, monkeypatch):
        """Test that --verbose prints a traceback for unexpected errors"""
        def explode(config):
            raise RuntimeError("boom")

        monkeypatch.setattr("atlaspack.cli.build", explode)
        runner = CliRunner()
        result = runner.invoke(cli, [
            'pack',
            str(project / "textures.json"),
            str(project / "atlas.png"),
            str(project / "atlas.json"),
            '-d', str(project / "assets"),
            '-v',
        ])

        assert result.exit_code == 1
        assert 'Unexpected error: boom' in result.output
        assert 'Traceback' in result.output
