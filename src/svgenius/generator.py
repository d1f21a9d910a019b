"""React component source generation."""

import re
from dataclasses import dataclass
from typing import Literal

# Language modes
LanguageMode = Literal["typed", "untyped"]
LANGUAGE_MODES: list[LanguageMode] = ["typed", "untyped"]

COMPONENT_EXTENSIONS: dict[LanguageMode, str] = {"typed": ".tsx", "untyped": ".jsx"}
MANIFEST_FILENAMES: dict[LanguageMode, str] = {"typed": "index.ts", "untyped": "index.js"}

PROPS_TYPE = "React.FC<React.SVGProps<SVGSVGElement>>"
PROPS_SPREAD = "{...props}"

_ROOT_OPEN_RE = re.compile(r"<svg\b")

COMPONENT_TEMPLATE = """import * as React from "react";

export const {name}{annotation} = (props) => (
  {markup}
);
"""


@dataclass(frozen=True)
class ComponentSpec:
    """Everything needed to emit one component."""

    name: str
    language_mode: LanguageMode
    markup: str


def check_language_mode(mode: str) -> LanguageMode:
    """Validate a language mode name.

    Raises:
        ValueError: If the mode is not one of LANGUAGE_MODES.
    """
    if mode not in LANGUAGE_MODES:
        valid_modes = ", ".join(LANGUAGE_MODES)
        raise ValueError(f"Invalid language mode '{mode}'. Valid modes: {valid_modes}")
    return mode  # type: ignore


def spread_props(markup: str) -> str:
    """Insert the props spread right after the root ``<svg`` opening."""
    return _ROOT_OPEN_RE.sub(f"<svg {PROPS_SPREAD}", markup, count=1)


def emit_component(markup: str, name: str, mode: LanguageMode = "typed") -> str:
    """Wrap transformed SVG markup in a React component module.

    Args:
        markup: Transformed svg markup.
        name: Component identifier, already valid.
        mode: "typed" adds a React.FC annotation, "untyped" does not.

    Returns:
        Component source code.
    """
    annotation = f": {PROPS_TYPE}" if check_language_mode(mode) == "typed" else ""
    return COMPONENT_TEMPLATE.format(
        name=name, annotation=annotation, markup=spread_props(markup)
    )


def emit_component_spec(spec: ComponentSpec) -> str:
    return emit_component(spec.markup, spec.name, spec.language_mode)


def build_manifest(component_names: list[str]) -> str:
    """Build barrel file text re-exporting each component in order.

    Example:
        >>> build_manifest(["Home", "Settings"])
        'export * from "./Home";\\nexport * from "./Settings";\\n'
    """
    return "".join(f'export * from "./{name}";\n' for name in component_names)
