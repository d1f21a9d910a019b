"""Single-document conversion pipeline.

The pipeline processes in order: parse -> transform -> name -> emit
"""

from dataclasses import dataclass, field

from .document import parse_svg_text, serialize_svg
from .errors import EmptyInputError, SvgParseError
from .generator import ComponentSpec, LanguageMode, check_language_mode, emit_component_spec
from .naming import DEFAULT_COMPONENT_NAME, derive_component_name
from .transform import transform_svg_with_report


@dataclass
class ConversionResult:
    """Generated component code and its name."""

    component_name: str
    code: str
    warnings: list[str] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


def _check_not_empty(source_text: str) -> None:
    if not source_text.strip():
        raise EmptyInputError("Empty SVG content provided")


def _transform_markup(source_text: str) -> tuple[str, list[str]]:
    _check_not_empty(source_text)
    root = parse_svg_text(source_text)
    try:
        tree, report = transform_svg_with_report(root)
        return serialize_svg(tree), report.warnings
    except RecursionError as e:
        raise SvgParseError("SVG nesting too deep") from e


def convert_svg(
    source_text: str,
    name: str | None = None,
    mode: LanguageMode = "typed",
) -> ConversionResult:
    """Convert SVG markup to a React component.

    Args:
        source_text: Decoded SVG markup.
        name: Requested component name, normalized to PascalCase. When
            omitted the component is named ``SvgComponent``.
        mode: Language mode of the generated code.

    Returns:
        ConversionResult with the component name and code.

    Raises:
        EmptyInputError: If the source text is blank.
        SvgParseError: If the source text is not a usable SVG document.
        ComponentNameError: If no identifier can be derived from ``name``.
    """
    mode = check_language_mode(mode)
    markup, warnings = _transform_markup(source_text)

    component_name = (
        derive_component_name(name) if name is not None else DEFAULT_COMPONENT_NAME
    )
    spec = ComponentSpec(name=component_name, language_mode=mode, markup=markup)
    return ConversionResult(
        component_name=component_name,
        code=emit_component_spec(spec),
        warnings=warnings,
    )


def convert_to_code(
    source_text: str, name: str | None = None, mode: LanguageMode = "typed"
) -> str:
    """Convert SVG markup and return only the component code."""
    return convert_svg(source_text, name, mode).code


def convert_to_markup(source_text: str) -> str:
    """Convert SVG markup and return only the transformed svg markup.

    Raises:
        EmptyInputError: If the source text is blank.
        SvgParseError: If the source text is not a usable SVG document.
    """
    markup, _ = _transform_markup(source_text)
    return markup
