"""Source/test stub pairs a template promises to keep in sync."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StubPair:
    """A source stub and the test stub that imports from it.

    Attributes:
        source_path: Relative path of the source module.
        test_path: Relative path of the test module.
        import_specifier: Module specifier the test imports the source by.
        symbols: Names the source exports and the test imports, in
            declaration order.
    """

    source_path: str
    test_path: str
    import_specifier: str
    symbols: tuple[str, ...]
