"""Helpers for working with namespaced XML names."""

from pathlib import Path

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Namespace URI -> conventional prefix, used to spell namespaced attributes
NAMESPACE_PREFIXES = {
    "http://www.w3.org/1999/xlink": "xlink",
    "http://www.w3.org/XML/1998/namespace": "xml",
    "http://www.inkscape.org/namespaces/inkscape": "inkscape",
    "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd": "sodipodi",
}


def split_qualified_name(name: str) -> tuple[str | None, str]:
    """Split an ElementTree name into namespace URI and local name.

    Args:
        name: Tag or attribute name, possibly in ``{uri}local`` form.

    Returns:
        Tuple of (namespace URI or None, local name).

    Example:
        >>> split_qualified_name("{http://www.w3.org/1999/xlink}href")
        ('http://www.w3.org/1999/xlink', 'href')
    """
    if name.startswith("{"):
        uri, local = name[1:].split("}", 1)
        return uri or None, local
    return None, name


def get_local_name(tag: str) -> str:
    """Extract local name from a namespaced tag.

    Example:
        >>> get_local_name("{http://www.w3.org/2000/svg}rect")
        'rect'
    """
    return split_qualified_name(tag)[1]


def get_markup_name(name: str, prefixes: dict[str, str] | None = None) -> str:
    """Spell an ElementTree tag or attribute name the way it appears in markup.

    Names in the SVG namespace lose it. Other namespaced names keep the
    prefix the document declared for their URI (``sketch:type``), falling
    back to the conventional prefix (``xml:space``).

    Args:
        name: Tag or attribute key as stored by ElementTree.
        prefixes: Namespace URI -> prefix declared in the source document.

    Returns:
        Name suitable for serialization.
    """
    uri, local = split_qualified_name(name)
    if uri is None or uri == SVG_NAMESPACE:
        return local
    prefix = (prefixes or {}).get(uri) or NAMESPACE_PREFIXES.get(uri)
    if prefix is None:
        return local
    return f"{prefix}:{local}"


def is_svg_file(path: Path) -> bool:
    """Check if a path names an SVG file (suffix match is case-insensitive)."""
    return path.is_file() and path.suffix.lower() == ".svg"
