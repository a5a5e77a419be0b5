# -*- coding: utf-8 -*-
"""
QR Raster - Module Matrix

This module defines the typed module codes of a QR symbol and the read-only
square matrix the renderer walks.

Every module code carries two facets:
    - polarity: the IS_DARK bit is set for dark modules
    - category: the functional role (finder, timing, data, ...), which is the
      code with the IS_DARK bit cleared

Classes:
    ModuleType: Enumeration of module codes
    ModuleMatrix: Immutable square grid of ModuleType codes
"""

from enum import IntEnum
from typing import Iterable, Iterator, List, Sequence, Tuple

from .errors import InvalidMatrix
from .functional_areas import alignment_positions, build_function_mask, finder_origins

IS_DARK = 0b100000000000


class ModuleType(IntEnum):
    NULL = 0b000000000000
    DARKMODULE = 0b000000000001
    DATA = 0b000000000010
    FINDER = 0b000000000100
    SEPARATOR = 0b000000001000
    ALIGNMENT = 0b000000010000
    TIMING = 0b000000100000
    FORMAT = 0b000001000000
    VERSION = 0b000010000000
    QUIETZONE = 0b000100000000
    LOGO = 0b001000000000
    FINDER_DOT = 0b010000000000

    NULL_DARK = NULL | IS_DARK
    DARKMODULE_DARK = DARKMODULE | IS_DARK
    DATA_DARK = DATA | IS_DARK
    FINDER_DARK = FINDER | IS_DARK
    SEPARATOR_DARK = SEPARATOR | IS_DARK
    ALIGNMENT_DARK = ALIGNMENT | IS_DARK
    TIMING_DARK = TIMING | IS_DARK
    FORMAT_DARK = FORMAT | IS_DARK
    VERSION_DARK = VERSION | IS_DARK
    QUIETZONE_DARK = QUIETZONE | IS_DARK
    LOGO_DARK = LOGO | IS_DARK
    FINDER_DOT_DARK = FINDER_DOT | IS_DARK

    @property
    def is_dark(self) -> bool:
        return bool(self.value & IS_DARK)

    @property
    def category(self) -> "ModuleType":
        """The light variant of this code, shared by both polarities."""
        return ModuleType(self.value & ~IS_DARK)

    def with_polarity(self, dark: bool) -> "ModuleType":
        return ModuleType(self.category | IS_DARK) if dark else self.category


class ModuleMatrix:
    """
    Square grid of module codes, indexed as ``matrix.get(x, y)``.

    Rows run top to bottom (y) and columns left to right (x), both 0-based.
    The grid is copied on construction and never mutated afterwards.

    Raises:
        InvalidMatrix: If the grid is empty, not square, or holds a value
            that is not a known module code.
    """

    def __init__(self, rows: Iterable[Iterable[int]]):
        grid = [tuple(row) for row in rows]
        size = len(grid)

        if size == 0:
            raise InvalidMatrix("Matrix must have at least one row")

        for y, row in enumerate(grid):
            if len(row) != size:
                raise InvalidMatrix(
                    f"Matrix must be square: row {y} has {len(row)} modules, expected {size}"
                )

        try:
            self._rows = tuple(tuple(ModuleType(value) for value in row) for row in grid)
        except (ValueError, TypeError) as ex:
            raise InvalidMatrix(f"Matrix contains an unknown module code: {ex}") from ex

        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def get(self, x: int, y: int) -> ModuleType:
        return self._rows[y][x]

    def check(self, x: int, y: int) -> bool:
        """True if the module at (x, y) is dark."""
        return self._rows[y][x].is_dark

    def check_type_in(self, x: int, y: int, types: Iterable[ModuleType]) -> bool:
        """True if the category of the module at (x, y) is one of ``types``.

        Both polarities of a listed type match.
        """
        category = self._rows[y][x].category
        return any(ModuleType(t).category == category for t in types)

    def rows(self) -> Tuple[Tuple[ModuleType, ...], ...]:
        return self._rows

    def __iter__(self) -> Iterator[Tuple[int, int, ModuleType]]:
        """Yield ``(x, y, module_type)`` in row-major order."""
        for y, row in enumerate(self._rows):
            for x, module_type in enumerate(row):
                yield x, y, module_type

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other) -> bool:
        if not isinstance(other, ModuleMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"ModuleMatrix(size={self._size})"

    @classmethod
    def from_bool_rows(cls, rows: Iterable[Iterable[bool]]) -> "ModuleMatrix":
        """Build a matrix from a plain dark/light grid (True = dark).

        Every module is typed as data since no structure is known.
        """
        return cls(
            [ModuleType.DATA_DARK if value else ModuleType.DATA for value in row]
            for row in rows
        )

    @classmethod
    def from_symbol(cls, rows: Sequence[Sequence[bool]], version: int, border: int = 0) -> "ModuleMatrix":
        """
        Build a typed matrix from a QR symbol's dark/light grid.

        Functional areas are located with the ISO/IEC 18004 geometry of the
        given version, and a quiet zone of ``border`` light modules is added
        on each side.

        Args:
            rows: Symbol matrix without quiet zone (truthy = dark)
            version (int): QR code version (1-40)
            border (int): Quiet zone width in modules

        Returns:
            ModuleMatrix: Typed matrix of side ``len(rows) + 2 * border``
        """
        grid = [list(row) for row in rows]
        size = len(grid)
        if size == 0:
            raise InvalidMatrix("Symbol matrix must have at least one row")
        if border < 0:
            raise InvalidMatrix(f"Quiet zone width must not be negative, got {border}")

        types = classify_modules(grid, version)
        full = size + 2 * border
        quiet_row = [ModuleType.QUIETZONE] * full
        out: List[List[ModuleType]] = [list(quiet_row) for _ in range(border)]
        for row in types:
            out.append([ModuleType.QUIETZONE] * border + row + [ModuleType.QUIETZONE] * border)
        out.extend(list(quiet_row) for _ in range(border))
        return cls(out)

    @classmethod
    def from_segno(cls, symbol, border: int = 4) -> "ModuleMatrix":
        """Build a typed matrix from a ``segno.QRCode`` symbol."""
        if symbol.is_micro:
            raise InvalidMatrix("Micro QR symbols are not supported")
        return cls.from_symbol(list(symbol.matrix), int(symbol.version), border=border)


def classify_modules(rows: Sequence[Sequence[bool]], version: int) -> List[List[ModuleType]]:
    """
    Assign a ModuleType to every module of a QR symbol.

    Precedence follows how the areas overlap in a real symbol: finder, then
    separator, alignment, timing, format and version information; whatever
    is left is data.

    Args:
        rows: Symbol matrix without quiet zone (truthy = dark)
        version (int): QR code version (1-40)

    Returns:
        List[List[ModuleType]]: Typed grid, same shape as ``rows``
    """
    size = len(rows)
    func_mask, sep_mask = build_function_mask(size, version)
    finders = finder_origins(size)
    alignments = alignment_positions(size, version)
    # DARKMODULE: the single always-dark module next to the bottom-left finder
    dark_module = (size - 8, 8)

    out = []
    for r in range(size):
        row = []
        for c in range(size):
            if any(r0 <= r < r0 + 7 and c0 <= c < c0 + 7 for (r0, c0) in finders):
                category = ModuleType.FINDER
            elif sep_mask[r][c]:
                category = ModuleType.SEPARATOR
            elif (r, c) == dark_module:
                category = ModuleType.DARKMODULE
            elif _in_alignment(r, c, alignments):
                category = ModuleType.ALIGNMENT
            elif r == 6 or c == 6:
                category = ModuleType.TIMING
            elif func_mask[r][c] and (r == 8 or c == 8):
                category = ModuleType.FORMAT
            elif func_mask[r][c] and version >= 7:
                category = ModuleType.VERSION
            else:
                category = ModuleType.DATA
            row.append(category.with_polarity(bool(rows[r][c])))
        out.append(row)
    return out


def _in_alignment(r: int, c: int, positions: List[Tuple[int, int]]) -> bool:
    return any(abs(r - cy) <= 2 and abs(c - cx) <= 2 for (cy, cx) in positions)
