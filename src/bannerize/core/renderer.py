"""Render entry points for bannerize.

This module wires the font library and the composer together. It is the
boundary a presentation layer (the CLI) calls.

Key components:
- render: Render text with a named banner
- BannerRenderer: Settings-driven renderer that keeps statistics
"""

from bannerize.config import BannerSettings, get_default_settings
from bannerize.core.composer import compose, count_unsupported, split_lines
from bannerize.io import FontLibrary
from bannerize.utils import RenderStats


def library_from_settings(settings: BannerSettings) -> FontLibrary:
    """Build a FontLibrary from application settings."""
    return FontLibrary(
        settings.library.font_dir,
        extension=settings.library.extension,
        layout=settings.font.to_layout(),
        cache=settings.library.cache_tables,
    )


def render(font_identifier: str, text: str, library: FontLibrary | None = None) -> str:
    """Render text with the named banner.

    Args:
        font_identifier: Banner name to look up in the library
        text: Text to render; split into lines on line breaks
        library: Library to load the banner from (default: built from
            default settings)

    Returns:
        Rendered block-letter text

    Raises:
        FontNotFoundError: If the banner does not exist
        FontFormatError: If the banner font file is malformed
    """
    if library is None:
        library = library_from_settings(get_default_settings())
    table = library.load(font_identifier)
    return compose(table, split_lines(text))


class BannerRenderer:
    """Renders text using banners from a configured library.

    Example:
        renderer = BannerRenderer(BannerSettings())
        art = renderer.render("Hello", banner="shadow")
    """

    def __init__(self, settings: BannerSettings, library: FontLibrary | None = None) -> None:
        """Initialize the renderer.

        Args:
            settings: Bannerize settings
            library: Font library to use (default: built from settings)
        """
        self.settings = settings
        self.library = library or library_from_settings(settings)
        self._stats = RenderStats()

    def render(self, text: str, banner: str | None = None) -> str:
        """Render text with a banner.

        Args:
            text: Text to render
            banner: Banner name (default: ``settings.library.default_banner``)

        Returns:
            Rendered block-letter text
        """
        name = banner or self.settings.library.default_banner
        table = self.library.load(name)
        lines = split_lines(text)
        result = compose(table, lines)
        self._stats.record(lines, count_unsupported(table, lines))
        return result

    @property
    def stats(self) -> RenderStats:
        """Get rendering statistics."""
        return self._stats
