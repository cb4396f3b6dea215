"""Banner font library.

This module provides the FontLibrary class, which maps banner names to
font files in a directory, opens them and loads their glyph tables.
"""

import logging
import threading
from pathlib import Path

import structlog

from bannerize.domain import STANDARD_LAYOUT, FontLayout, GlyphTable
from bannerize.exceptions import FontFormatError, FontLoadError, FontNotFoundError
from bannerize.io.reader import load_glyph_table


class FontLibrary:
    """Directory of banner font files.

    Each banner ``name`` lives at ``font_dir / (name + extension)``. With
    ``cache=True`` every banner is parsed at most once, even under
    concurrent lookups, and later lookups share the built table.

    Example:
        library = FontLibrary(Path("banners"))
        table = library.load("standard")
    """

    def __init__(
        self,
        font_dir: Path,
        extension: str = ".txt",
        layout: FontLayout = STANDARD_LAYOUT,
        cache: bool = False,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the font library.

        Args:
            font_dir: Directory containing banner font files
            extension: File extension of banner font files
            layout: Layout every font in the directory follows
            cache: Keep loaded tables for later lookups
            logger: Logger for load events (default: ``bannerize.library``)
        """
        self._font_dir = Path(font_dir)
        self._extension = extension
        self._layout = layout
        self._cache_enabled = cache
        self._logger = logger or structlog.wrap_logger(logging.getLogger("bannerize.library"))

        self._tables: dict[str, GlyphTable] = {}
        self._build_locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    @property
    def font_dir(self) -> Path:
        """Directory searched for banners."""
        return self._font_dir

    @property
    def layout(self) -> FontLayout:
        """Layout used to parse banners."""
        return self._layout

    def path_for(self, name: str) -> Path:
        """Return the font file path for a banner name.

        Raises:
            FontNotFoundError: If the name cannot refer to a file in the
                library directory
        """
        if not name or name.startswith(".") or "/" in name or "\\" in name:
            raise FontNotFoundError(name)
        return self._font_dir / f"{name}{self._extension}"

    def names(self) -> list[str]:
        """Return the sorted names of all banners in the library."""
        if not self._font_dir.is_dir():
            return []
        return sorted(
            path.name[: -len(self._extension)] if self._extension else path.name
            for path in self._font_dir.iterdir()
            if path.is_file() and path.name.endswith(self._extension)
        )

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            return self.path_for(name).is_file()
        except FontNotFoundError:
            return False

    def load(self, name: str) -> GlyphTable:
        """Load the glyph table for a banner.

        Args:
            name: Banner name

        Returns:
            GlyphTable parsed from the banner's font file

        Raises:
            FontNotFoundError: If the banner does not exist
            FontFormatError: If the font file is truncated
            FontLoadError: If the font file cannot be read
        """
        if not self._cache_enabled:
            return self._read(name)

        table = self._tables.get(name)
        if table is not None:
            self._logger.debug("Banner cache hit", banner=name)
            return table

        with self._guard:
            build_lock = self._build_locks.setdefault(name, threading.Lock())

        with build_lock:
            table = self._tables.get(name)
            if table is None:
                table = self._read(name)
                self._tables[name] = table
            else:
                self._logger.debug("Banner cache hit", banner=name)
        return table

    def clear_cache(self) -> None:
        """Drop all cached glyph tables.

        Waits for builds in progress so none of them publishes into the
        cache after it has been cleared.
        """
        with self._guard:
            build_locks = list(self._build_locks.values())
        for build_lock in build_locks:
            build_lock.acquire()
        try:
            self._tables.clear()
        finally:
            for build_lock in build_locks:
                build_lock.release()

    def _read(self, name: str) -> GlyphTable:
        path = self.path_for(name)
        self._logger.debug("Loading banner", banner=name, path=str(path))

        try:
            with path.open("r", encoding="utf-8", newline="\n") as stream:
                table = load_glyph_table(stream, layout=self._layout, source=str(path))
        except FileNotFoundError as e:
            self._logger.warning("Banner not found", banner=name, path=str(path))
            raise FontNotFoundError(name, str(path)) from e
        except FontFormatError as e:
            self._logger.error("Malformed banner font", banner=name, error=str(e))
            raise
        except (OSError, UnicodeDecodeError) as e:
            self._logger.error("Banner could not be read", banner=name, error=str(e))
            raise FontLoadError(str(path), str(e)) from e

        self._logger.info("Banner loaded", banner=name, glyphs=len(table))
        return table
