"""CSS generation for icon fonts.

Produces the @font-face rule, the base icon class and one ::before rule
per glyph, so a generated font can be dropped straight into a web page:

    <span class="icon icon-home"></span>
"""

from collections.abc import Iterable

_SOURCE_FORMATS = (
    ("woff2", "woff2"),
    ("woff", "woff"),
    ("ttf", "truetype"),
)


def font_face_rule(
    family: str,
    woff2_path: str | None = None,
    woff_path: str | None = None,
    ttf_path: str | None = None,
) -> str:
    """Build the @font-face rule.

    Sources are listed in woff2, woff, ttf order; missing paths are
    omitted, and the src block is dropped entirely when none is given.

    Args:
        family: Font family name
        woff2_path: Optional URL of the WOFF2 file
        woff_path: Optional URL of the WOFF file
        ttf_path: Optional URL of the TTF file

    Returns:
        CSS @font-face rule
    """
    paths = {"woff2": woff2_path, "woff": woff_path, "ttf": ttf_path}
    sources = [
        f'url("{paths[key]}") format("{fmt}")' for key, fmt in _SOURCE_FORMATS if paths[key]
    ]
    separator = ",\n       "
    src_block = f"  src: {separator.join(sources)};\n" if sources else ""

    return (
        "@font-face {\n"
        f'  font-family: "{family}";\n'
        f"{src_block}"
        "  font-weight: normal;\n"
        "  font-style: normal;\n"
        "}"
    )


def base_class_rule(prefix: str, family: str) -> str:
    """Build the base class shared by every icon (e.g. `.icon`)."""
    return (
        f".{prefix} {{\n"
        f'  font-family: "{family}";\n'
        "  font-style: normal;\n"
        "  font-weight: normal;\n"
        "  speak: none;\n"
        "  display: inline-block;\n"
        "  line-height: 1;\n"
        "  text-transform: none;\n"
        "  -webkit-font-smoothing: antialiased;\n"
        "  -moz-osx-font-smoothing: grayscale;\n"
        "}"
    )


def glyph_rule(prefix: str, name: str, unicode: int, family: str) -> str:
    """Build the ::before rule for one glyph.

    Examples:
        >>> glyph_rule("icon", "home", 0xE001, "neptune")
        '.icon-home::before { content: "\\\\e001"; font-family: "neptune"; }'
    """
    return (
        f'.{prefix}-{name}::before {{ content: "\\{unicode:x}"; font-family: "{family}"; }}'
    )


def stylesheet(
    family: str,
    prefix: str,
    glyphs: Iterable[tuple[str, int]],
    woff2_path: str | None = None,
    woff_path: str | None = None,
    ttf_path: str | None = None,
) -> str:
    """Build a complete stylesheet.

    Args:
        family: Font family name
        prefix: CSS class prefix
        glyphs: (name, code point) pairs
        woff2_path: Optional URL of the WOFF2 file
        woff_path: Optional URL of the WOFF file
        ttf_path: Optional URL of the TTF file

    Returns:
        @font-face rule, base class and glyph rules separated by blank lines
    """
    rules = "\n".join(glyph_rule(prefix, name, unicode, family) for name, unicode in glyphs)
    face = font_face_rule(family, woff2_path, woff_path, ttf_path)
    return f"{face}\n\n{base_class_rule(prefix, family)}\n\n{rules}"
