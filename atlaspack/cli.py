"""
atlaspack CLI - Command-line interface for building texture atlases
"""

import click
import logging
import sys
import traceback
from atlaspack.exceptions import AtlasCapacityError, AtlasError, ConfigError, ImageLoadError
from atlaspack.pipeline import DEFAULT_BORDER, BuildConfig, build, plan
from atlaspack.schema import TextureList


def _setup_logging(verbose):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def _load_config(input_path, base_dir, border, out_texture=None, out_map=None):
    textures = TextureList.load(input_path)
    return BuildConfig.from_texture_list(
        textures,
        base_dir=base_dir,
        output_image=out_texture,
        output_map=out_map,
        border=border,
    )


def _fail(prefix, error, verbose=False):
    click.secho(f"{prefix}: {error}", fg='red', err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(1)


@click.group()
@click.version_option(package_name='atlaspack')
def cli():
    """
    atlaspack - Pack images into a texture atlas.

    Examples:
        atlaspack pack textures.json atlas.png atlas.json -d assets/
        atlaspack plan textures.json -d assets/
    """
    pass


@cli.command()
@click.argument('input_path')
@click.argument('out_texture')
@click.argument('out_map')
@click.option('-d', '--dir', 'base_dir', default='', help='Directory image paths are relative to')
@click.option('--border', default=DEFAULT_BORDER, show_default=True, type=click.IntRange(min=0),
              help='Empty pixels kept right of and below each image')
@click.option('--verbose', '-v', is_flag=True, help='Log progress and packing diagnostics')
def pack(input_path, out_texture, out_map, base_dir, border, verbose):
    """
    Pack the images of a texture list into an atlas image and JSON map.

    Examples:
        atlaspack pack textures.json atlas.png atlas.json
        atlaspack pack textures.json atlas.png atlas.json --dir assets --border 2 -v
    """
    _setup_logging(verbose)
    try:
        config = _load_config(input_path, base_dir, border, out_texture, out_map)
        atlas = build(config)
        click.secho(
            f"✓ Success! Packed {len(atlas.textures)} images into "
            f"{atlas.size.width}x{atlas.size.height} atlas {out_texture}",
            fg='green'
        )
    except ConfigError as e:
        _fail("Config Error", e)
    except ImageLoadError as e:
        _fail("Image Error", e)
    except AtlasCapacityError as e:
        _fail("Capacity Error", e)
    except AtlasError as e:
        _fail("Error", e)
    except FileNotFoundError as e:
        _fail("Error", e)
    except Exception as e:
        _fail("Unexpected error", e, verbose)


@cli.command('plan')
@click.argument('input_path')
@click.option('-d', '--dir', 'base_dir', default='', help='Directory image paths are relative to')
@click.option('--border', default=DEFAULT_BORDER, show_default=True, type=click.IntRange(min=0),
              help='Empty pixels kept right of and below each image')
@click.option('--verbose', '-v', is_flag=True, help='Log progress and packing diagnostics')
def plan_cmd(input_path, base_dir, border, verbose):
    """
    Show where each image would be placed without writing any files.

    Examples:
        atlaspack plan textures.json --dir assets
    """
    _setup_logging(verbose)
    try:
        config = _load_config(input_path, base_dir, border)
        atlas = plan(config)
    except ConfigError as e:
        _fail("Config Error", e)
    except ImageLoadError as e:
        _fail("Image Error", e)
    except AtlasCapacityError as e:
        _fail("Capacity Error", e)
    except Exception as e:
        _fail("Unexpected error", e, verbose)

    for name, rect in sorted(atlas.textures.items(), key=lambda item: (item[1].top, item[1].left)):
        click.echo(f"{rect.left:>6} {rect.top:>6} {rect.width:>6} {rect.height:>6}  {name}")
    click.echo(f"Atlas size: {atlas.size.width}x{atlas.size.height}")


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
