"""svgenius - Convert SVG files into React components."""

__version__ = "0.1.0"

from .batch import (
    BatchFailure,
    BatchOptions,
    BatchReport,
    SourceDocument,
    format_batch_report,
    parse_batch_config_file,
    run_batch,
)
from .convert import (
    ConversionResult,
    convert_svg,
    convert_to_code,
    convert_to_markup,
)
from .document import SvgElement, parse_svg_text, serialize_svg
from .errors import (
    ComponentNameError,
    DuplicateComponentError,
    EmptyBatchError,
    EmptyInputError,
    SvgeniusError,
    SvgParseError,
)
from .generator import ComponentSpec, LanguageMode, emit_component
from .naming import derive_component_name
from .transform import TransformReport, transform_svg, transform_svg_with_report

__all__ = [
    # Batch
    "BatchFailure",
    "BatchOptions",
    "BatchReport",
    "SourceDocument",
    "format_batch_report",
    "parse_batch_config_file",
    "run_batch",
    # Single conversion
    "ConversionResult",
    "convert_svg",
    "convert_to_code",
    "convert_to_markup",
    # Pipeline stages
    "SvgElement",
    "parse_svg_text",
    "serialize_svg",
    "TransformReport",
    "transform_svg",
    "transform_svg_with_report",
    "ComponentSpec",
    "LanguageMode",
    "emit_component",
    "derive_component_name",
    # Errors
    "ComponentNameError",
    "DuplicateComponentError",
    "EmptyBatchError",
    "EmptyInputError",
    "SvgeniusError",
    "SvgParseError",
]
