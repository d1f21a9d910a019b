"""Attribute rewriting for React compatibility.

The rewrite table is fixed:

- ``class`` becomes ``className``
- names containing ``-`` or ``:`` become camelCase (``fill-rule`` ->
  ``fillRule``, ``xlink:href`` -> ``xlinkHref``)
- ``xmlns``, ``xmlns:*`` and ``version`` are dropped
- ``width`` and ``height`` are dropped from the root element only, so the
  rendered SVG scales with its container
"""

import re
from dataclasses import dataclass, field

from .document import Node, SvgElement

RENAMED_ATTRIBUTES = {"class": "className"}
DROPPED_ATTRIBUTES = frozenset(["xmlns", "version"])
DROPPED_ROOT_ATTRIBUTES = ("width", "height")

_SEPARATOR_RE = re.compile(r"[-:]+")


@dataclass
class AttributeCollision:
    """An attribute name that was written more than once on an element."""

    tag: str
    name: str
    kept_value: str
    discarded_value: str

    @property
    def message(self) -> str:
        return (
            f"<{self.tag}>: attribute '{self.name}' set more than once; "
            f"kept {self.kept_value!r}, discarded {self.discarded_value!r}"
        )


@dataclass
class TransformReport:
    """Report of a transform pass."""

    collisions: list[AttributeCollision] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.collisions)

    @property
    def warnings(self) -> list[str]:
        return [collision.message for collision in self.collisions]


def to_camel_case(name: str) -> str:
    """Convert a hyphen or colon separated name to camelCase.

    Example:
        >>> to_camel_case("stroke-linecap")
        'strokeLinecap'
        >>> to_camel_case("fooBar-baz")
        'fooBarBaz'
    """
    parts = [part for part in _SEPARATOR_RE.split(name) if part]
    if not parts:
        return name
    head, *rest = parts
    tail = "".join(part[0].upper() + part[1:].lower() for part in rest)
    return head[0].lower() + head[1:] + tail


def rewrite_attribute_name(name: str) -> str | None:
    """Apply the rewrite table to one attribute name.

    Args:
        name: Attribute name as written in the source markup.

    Returns:
        The new name (possibly unchanged), or None if the attribute is dropped.
    """
    if name in DROPPED_ATTRIBUTES or name.startswith("xmlns:"):
        return None
    if name in RENAMED_ATTRIBUTES:
        return RENAMED_ATTRIBUTES[name]
    if "-" in name or ":" in name:
        return to_camel_case(name)
    return name


def _rewrite_attributes(
    element: SvgElement, report: TransformReport, is_root: bool
) -> tuple[tuple[str, str], ...]:
    result: dict[str, str] = {}
    renamed: set[str] = set()

    for name, value in element.attributes:
        new_name = rewrite_attribute_name(name)
        if new_name is None:
            continue

        is_rename = new_name != name
        if new_name in result:
            # A renamed attribute always wins over a plain one of the same name
            if is_rename or new_name not in renamed:
                kept, discarded = value, result[new_name]
            else:
                kept, discarded = result[new_name], value
            result[new_name] = kept
            report.collisions.append(
                AttributeCollision(
                    tag=element.tag,
                    name=new_name,
                    kept_value=kept,
                    discarded_value=discarded,
                )
            )
        else:
            result[new_name] = value

        if is_rename:
            renamed.add(new_name)

    if is_root:
        for name in DROPPED_ROOT_ATTRIBUTES:
            result.pop(name, None)

    return tuple(result.items())


def _transform_element(
    element: SvgElement, report: TransformReport, is_root: bool = False
) -> SvgElement:
    attributes = _rewrite_attributes(element, report, is_root)
    children: list[Node] = []
    for child in element.children:
        if isinstance(child, SvgElement):
            child = _transform_element(child, report)
        children.append(child)
    return SvgElement(tag=element.tag, attributes=attributes, children=tuple(children))


def transform_svg_with_report(root: SvgElement) -> tuple[SvgElement, TransformReport]:
    """Rewrite attributes of a tree and report attribute collisions.

    The input tree is not modified; a new tree is returned.

    Args:
        root: Root svg element.

    Returns:
        Tuple of (transformed tree, TransformReport).
    """
    report = TransformReport()
    return _transform_element(root, report, is_root=True), report


def transform_svg(root: SvgElement) -> SvgElement:
    """Rewrite attributes of a tree for use as JSX.

    Args:
        root: Root svg element.

    Returns:
        Transformed tree.
    """
    tree, _ = transform_svg_with_report(root)
    return tree
