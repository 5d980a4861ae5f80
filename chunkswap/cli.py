#!filepath: chunkswap/cli.py
from pathlib import Path
from typing import Optional

import typer
from rich import print

from chunkswap import __version__, init_logging
from chunkswap.config.app_config import AppConfig
from chunkswap.engines.chunk_table import ChunkTable
from chunkswap.engines.coordinate_resolver import CoordinateResolver
from chunkswap.engines.region_serializer import RegionSerializer
from chunkswap.utils.errors import RegionFormatError, UserInputError
from chunkswap.utils.filesystem import FileSystem
from chunkswap.utils.path import PathManager
from chunkswap.workflows.chunk_swap_workflow import build_chunk_swap_pipeline

app = typer.Typer(help="Region file chunk swap CLI")


def _load_config(config: Optional[Path], output_dir: Optional[Path] = None) -> AppConfig:
    cfg = AppConfig.load(str(config) if config else None)
    if output_dir is not None:
        cfg.swap.output_dir = str(output_dir)
    init_logging(cfg.log)
    return cfg


@app.command()
def version():
    print(f"v{__version__}")


@app.command(context_settings={"ignore_unknown_options": True})
def swap(
        original_dir: Path,
        replacement_dir: Path,
        x: int = typer.Argument(..., help="world x coordinate (block)"),
        y: int = typer.Argument(..., help="world y coordinate (block)"),
        output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o"),
        config: Optional[Path] = typer.Option(None, "--config", "-c"),
):
    """
    用 replacement 世界中 (x, y) 所在 chunk 替换 original 世界中的同一 chunk
    """
    cfg = _load_config(config, output_dir)
    pipeline = build_chunk_swap_pipeline(cfg)

    try:
        ctx = pipeline.run(original_dir, replacement_dir, x, y)
    except (UserInputError, RegionFormatError) as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    print(f"[green]counted region file size {ctx.output_length}[/green]")
    print(f"[green]written {ctx.output_file}[/green]")


@app.command(context_settings={"ignore_unknown_options": True})
def locate(
        x: int,
        y: int,
        ext: str = typer.Option("mca", "--ext"),
):
    """
    打印 (x, y) 对应的 chunk / region / local 坐标和区域文件名
    """
    pos = CoordinateResolver().resolve(x, y)
    print(f"chunk  ({pos.chunk_x}, {pos.chunk_y})")
    print(f"region ({pos.region_x}, {pos.region_y})")
    print(f"local  ({pos.local_x}, {pos.local_y}) index={pos.index}")
    print(f"file   {PathManager.region_file_name(pos.region_x, pos.region_y, ext)}")


@app.command()
def inspect(region_file: Path):
    """
    打印区域文件的占用槽位数、总 sector 数和压缩后大小
    """
    if not FileSystem.file_exists(region_file):
        print(f"[red]Cannot open region file {region_file}[/red]")
        raise typer.Exit(code=1)

    try:
        table = ChunkTable.load(region_file.read_bytes())
    except RegionFormatError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    compacted = RegionSerializer.required_length(table)
    print(f"chunks     {table.occupied_count}/{len(table)}")
    print(f"sectors    {table.total_sectors}")
    print(f"file size  {FileSystem.get_file_size(region_file)}")
    print(f"compacted  {compacted} ({FileSystem.format_size(compacted)})")


if __name__ == "__main__":
    app()
