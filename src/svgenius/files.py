"""File-system side of conversion: reading sources and writing outputs."""

import logging
from pathlib import Path

from .batch import BatchReport, SourceDocument
from .convert import ConversionResult
from .generator import COMPONENT_EXTENSIONS, MANIFEST_FILENAMES, LanguageMode
from .utils import is_svg_file

logger = logging.getLogger(__name__)


def read_svg_source(source: str | bytes | Path) -> str:
    """Decode an SVG source to text.

    Args:
        source: Markup text, UTF-8 bytes (a BOM is accepted) or a file path.

    Returns:
        Decoded markup.

    Raises:
        FileNotFoundError: If a path does not exist.
        UnicodeDecodeError: If bytes are not valid UTF-8.
        TypeError: If the source type is not supported.
    """
    if isinstance(source, str):
        return source
    if isinstance(source, bytes):
        return source.decode("utf-8-sig")
    if isinstance(source, Path):
        return source.read_bytes().decode("utf-8-sig")
    raise TypeError(
        f"Unsupported source type: {type(source).__name__} "
        "(expected str, bytes or Path)"
    )


def list_svg_files(folder: Path) -> list[Path]:
    """List SVG files directly inside a folder, sorted by file name."""
    return sorted(
        (path for path in folder.iterdir() if is_svg_file(path)),
        key=lambda path: path.name,
    )


def collect_svg_sources(folder: Path) -> list[SourceDocument]:
    """Read every SVG file in a folder into batch sources.

    Args:
        folder: Folder to scan (not recursive).

    Returns:
        SourceDocuments in file name order, with the file name as id.

    Raises:
        FileNotFoundError: If the folder does not exist.
        NotADirectoryError: If the path is not a folder.
    """
    sources = []
    for path in list_svg_files(folder):
        logger.debug("Reading %s", path)
        sources.append(SourceDocument(id=path.name, text=read_svg_source(path)))
    return sources


def component_path(
    out_dir: Path, component_name: str, mode: LanguageMode = "typed"
) -> Path:
    return out_dir / f"{component_name}{COMPONENT_EXTENSIONS[mode]}"


def write_component(result: ConversionResult, out_path: Path) -> Path:
    """Write one component file, creating parent folders as needed."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(result.code, encoding="utf-8")
    logger.debug("Wrote %s", out_path)
    return out_path


def write_batch_outputs(
    report: BatchReport, out_dir: Path, mode: LanguageMode = "typed"
) -> list[Path]:
    """Write every converted component and the manifest, if any.

    Args:
        report: Batch report from run_batch.
        out_dir: Output folder, created if missing.
        mode: Language mode, selects file extensions.

    Returns:
        Written paths in order; the manifest (if any) comes last.
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    written = [
        write_component(result, component_path(out_dir, result.component_name, mode))
        for result in report.results
    ]

    if report.manifest_text is not None:
        manifest_path = out_dir / MANIFEST_FILENAMES[mode]
        manifest_path.write_text(report.manifest_text, encoding="utf-8")
        logger.debug("Wrote manifest %s", manifest_path)
        written.append(manifest_path)

    logger.info("Wrote %d file(s) to %s", len(written), out_dir)
    return written
