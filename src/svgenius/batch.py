"""Batch conversion of many SVG documents.

Failure policy is collect-all: every source yields either a
ConversionResult or a BatchFailure, and both lists keep input order.
Successful items are never dropped because another item failed.
"""

import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import yaml

from .convert import ConversionResult, convert_svg
from .errors import DuplicateComponentError, EmptyBatchError, SvgeniusError
from .generator import LanguageMode, build_manifest, check_language_mode
from .naming import derive_component_name

_SVG_SUFFIX_RE = re.compile(r"\.svg$", re.IGNORECASE)


@dataclass(frozen=True)
class BatchOptions:
    """Batch configuration.

    Attributes:
        language_mode: "typed" (.tsx, index.ts) or "untyped" (.jsx, index.js).
        output_directory: Where the file writer puts generated files.
        emit_manifest: Whether to build a barrel file re-exporting every
            generated component.
        max_workers: Number of worker threads; 1 converts sequentially.
    """

    language_mode: LanguageMode = "typed"
    output_directory: Path | None = None
    emit_manifest: bool = False
    max_workers: int = 1

    def __post_init__(self) -> None:
        check_language_mode(self.language_mode)
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")


@dataclass(frozen=True)
class SourceDocument:
    """One batch input.

    Attributes:
        id: Source identifier, usually the file name.
        text: Decoded SVG markup.
        name: Optional component name overriding the one derived from id.
    """

    id: str
    text: str
    name: str | None = None


@dataclass
class BatchFailure:
    """A source that could not be converted."""

    source_id: str
    error: SvgeniusError

    @property
    def message(self) -> str:
        return f"{self.source_id}: {self.error}"


@dataclass
class BatchReport:
    """Results of a batch run."""

    results: list[ConversionResult] = field(default_factory=list)
    failures: list[BatchFailure] = field(default_factory=list)
    manifest_text: str | None = None

    @property
    def has_errors(self) -> bool:
        return bool(self.failures)

    @property
    def component_names(self) -> list[str]:
        return [result.component_name for result in self.results]


def source_name(source: SourceDocument) -> str:
    """Component name for a source: the override, or one derived from its id."""
    if source.name is not None:
        return derive_component_name(source.name)
    return derive_component_name(_SVG_SUFFIX_RE.sub("", source.id))


def _convert_source(
    source: SourceDocument, mode: LanguageMode
) -> ConversionResult | BatchFailure:
    try:
        return convert_svg(source.text, source_name(source), mode)
    except SvgeniusError as e:
        return BatchFailure(source_id=source.id, error=e)


def run_batch(sources: Sequence[SourceDocument], options: BatchOptions) -> BatchReport:
    """Convert a sequence of SVG documents.

    Items may run on a thread pool (``options.max_workers``), but results,
    failures and the manifest always follow input order. When two sources
    derive the same component name the later one fails with
    DuplicateComponentError.

    Args:
        sources: Ordered batch inputs.
        options: Batch configuration.

    Returns:
        BatchReport with successes, failures and optional manifest text.

    Raises:
        EmptyBatchError: If sources is empty.
    """
    if not sources:
        raise EmptyBatchError("No SVG sources to convert")

    mode = options.language_mode
    if options.max_workers > 1:
        with ThreadPoolExecutor(max_workers=options.max_workers) as executor:
            outcomes = list(executor.map(lambda s: _convert_source(s, mode), sources))
    else:
        outcomes = [_convert_source(source, mode) for source in sources]

    report = BatchReport()
    seen: dict[str, str] = {}
    for source, outcome in zip(sources, outcomes):
        if isinstance(outcome, BatchFailure):
            report.failures.append(outcome)
            continue

        name = outcome.component_name
        if name in seen:
            error = DuplicateComponentError(
                f"Component name '{name}' is already used by {seen[name]}"
            )
            report.failures.append(BatchFailure(source_id=source.id, error=error))
            continue

        seen[name] = source.id
        report.results.append(outcome)

    if options.emit_manifest:
        report.manifest_text = build_manifest(report.component_names)

    return report


def _get_bool(data: dict, key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false, got {value!r}")
    return value


def parse_batch_config_file(config_path: Path) -> BatchOptions:
    """Parse a YAML batch configuration file.

    Recognized keys (all optional):

    - ``typescript``: bool, typed output (default true)
    - ``output``: output directory
    - ``barrel``: bool, emit index file (default false)
    - ``workers``: int, worker threads (default 1)

    Args:
        config_path: Path to the YAML file.

    Returns:
        Parsed BatchOptions.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the configuration format is invalid.
    """
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return BatchOptions()
    if not isinstance(data, dict):
        raise ValueError("Config file must be a YAML dictionary")

    unknown = sorted(set(data) - {"typescript", "output", "barrel", "workers"})
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(map(str, unknown))}")

    language_mode: LanguageMode = "typed"
    if "typescript" in data:
        language_mode = "typed" if _get_bool(data, "typescript") else "untyped"

    output_directory = None
    if data.get("output") is not None:
        output_directory = Path(str(data["output"]))

    emit_manifest = _get_bool(data, "barrel") if "barrel" in data else False

    max_workers = 1
    if "workers" in data:
        workers = data["workers"]
        if isinstance(workers, bool) or not isinstance(workers, int):
            raise ValueError(f"'workers' must be an integer, got {workers!r}")
        max_workers = workers

    return BatchOptions(
        language_mode=language_mode,
        output_directory=output_directory,
        emit_manifest=emit_manifest,
        max_workers=max_workers,
    )


def format_batch_report(report: BatchReport) -> str:
    """Format batch report as text.

    Args:
        report: Batch report.

    Returns:
        Formatted text.
    """
    lines: list[str] = []
    lines.append("=" * 60)
    lines.append("BATCH CONVERSION")
    lines.append("=" * 60)
    lines.append(f"Converted: {len(report.results)}")
    lines.append(f"Failed: {len(report.failures)}")
    lines.append("")

    for result in report.results:
        lines.append(f"  [OK] {result.component_name}")
        for warning in result.warnings:
            lines.append(f"    [WARNING] {warning}")

    for failure in report.failures:
        lines.append(f"  [ERROR] {failure.message}")

    if report.manifest_text is not None:
        lines.append("")
        lines.append(f"Manifest entries: {len(report.results)}")

    return "\n".join(lines)
