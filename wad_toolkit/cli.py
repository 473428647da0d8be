"""WAD Toolkit CLI."""

import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Optional, Tuple

import click

from . import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """WAD Toolkit - Inspect skin WAD archives and extract loading screens.

    \b
    info        Show header fields
    list        List the chunk table
    extract     Decode every chunk to a directory
    hash        Compute path hashes
    loadscreen  Find and extract the loading-screen portrait
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("archive", type=click.Path(exists=True, path_type=Path))
def info(archive: Path):
    """Show the header of a WAD archive."""
    from .wad import WADReader

    try:
        reader = WADReader.from_file(archive)
        header = reader.header

        click.echo(f"Version:  {header.version}")
        click.echo(f"Checksum: 0x{header.checksum:016X}")
        click.echo(f"Chunks:   {header.chunk_count}")

        codecs = Counter(chunk.codec_name for chunk in reader.chunks)
        for name, count in sorted(codecs.items()):
            click.echo(f"  {name:<13} {count}")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command("list")
@click.argument("archive", type=click.Path(exists=True, path_type=Path))
def list_chunks(archive: Path):
    """List the chunk table of a WAD archive."""
    from .wad import WADReader

    try:
        reader = WADReader.from_file(archive)
        for chunk in reader.chunks:
            click.echo(
                f"{chunk.index:5d}  {chunk.path_hash}  {chunk.codec_name:<13} "
                f"{chunk.compressed_size:>10} -> {chunk.decompressed_size:>10}"
                f"{'  (dup)' if chunk.duplicated else ''}"
            )

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("archive", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output directory (default: <archive_name>_extracted)",
)
def extract(archive: Path, output: Optional[Path]):
    """Decode every chunk of a WAD archive.

    Files are named after their path hash with an extension guessed from
    their contents. Chunks that cannot be decoded are skipped.
    """
    from .wad import WADReader

    click.echo(f"Opening: {archive}")

    try:
        reader = WADReader.from_file(archive)

        if output is None:
            output = archive.parent / f"{archive.name.split('.')[0]}_extracted"

        click.echo(f"Output:  {output}")
        click.echo()

        with click.progressbar(
            list(reader.extract_all(output)),
            label="Extracting",
            item_show_func=lambda x: x[0].path_hash if x else "",
        ) as items:
            extracted_count = sum(1 for _ in items)

        click.echo()
        click.echo(f"Extracted: {extracted_count} of {len(reader.chunks)} chunks")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command("hash")
@click.argument("paths", nargs=-1, required=True)
def hash_paths(paths: Tuple[str, ...]):
    """Print the chunk path hash of each virtual PATH."""
    from .wad import hash_path

    for path in paths:
        click.echo(f"{hash_path(path)}  {path}")


@main.command()
@click.argument("archive", type=click.Path(exists=True, path_type=Path))
@click.option("--champion", help="Champion name used to predict the portrait path")
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output directory (default: next to the archive)",
)
@click.option("--workers", type=int, default=1, show_default=True, help="Threads for the content scan")
def loadscreen(archive: Path, champion: Optional[str], output: Optional[Path], workers: int):
    """Find and extract the loading-screen portrait of a skin WAD.

    Tries the predicted portrait paths first when --champion is given, then
    falls back to scanning for a 308x560 TEX texture.
    """
    from .textures import LoadScreenLocator, LocatorConfig, extract_tex_file
    from .wad import WADReader

    click.echo(f"Loading: {archive}")

    try:
        reader = WADReader.from_file(archive)
        locator = LoadScreenLocator(reader, config=LocatorConfig(workers=workers))

        chunk = locator.locate(champion)
        if chunk is None:
            click.echo("No loading screen found.")
            return

        if output is None:
            output = archive.parent

        tex_path = extract_tex_file(chunk, output, reader)
        click.echo(f"Chunk:     {chunk.index} ({chunk.path_hash})")
        click.echo(f"Extracted: {tex_path}")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
