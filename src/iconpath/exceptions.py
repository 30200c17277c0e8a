"""Exception hierarchy for iconpath."""


class IconPathError(Exception):
    """Base exception for all iconpath errors."""

    pass


class PathDataError(IconPathError):
    """Malformed SVG path-data text."""

    def __init__(self, path_data: str, reason: str) -> None:
        self.path_data = path_data
        self.reason = reason
        super().__init__(f"Invalid path data '{path_data}': {reason}")


class GlyphError(IconPathError):
    """Errors related to glyph construction."""

    pass


class GlyphBuildError(GlyphError):
    """A glyph outline could not be drawn."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Error building glyph '{glyph_name}': {reason}")


class FontError(IconPathError):
    """Errors related to font assembly or saving."""

    pass


class FontBuildError(FontError):
    """Font tables could not be assembled."""

    def __init__(self, family_name: str, reason: str) -> None:
        self.family_name = family_name
        self.reason = reason
        super().__init__(f"Failed to build font '{family_name}': {reason}")


class FontSaveError(FontError):
    """Error saving a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")


class ManifestError(IconPathError):
    """Unreadable or invalid icon-font manifest."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid manifest '{path}': {reason}")
