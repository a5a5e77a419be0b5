# -*- coding: utf-8 -*-
"""
QR Raster - Functional Areas

Locates the functional patterns of a QR symbol according to ISO/IEC 18004:
finder patterns, separators, timing patterns, alignment patterns, format
information and version information. Used to type the modules of a plain
dark/light symbol matrix before rendering.

Functions:
    finder_origins: Top-left corners of the three finder patterns
    compute_alignment_centers: Alignment pattern center coordinates
    alignment_positions: Alignment pattern centers actually placed in a symbol
    build_function_mask: Masks for functional and separator areas
"""

from typing import List, Tuple


def finder_origins(size: int) -> List[Tuple[int, int]]:
    """(row, col) of the top-left corner of each 7x7 finder pattern."""
    return [(0, 0), (0, size - 7), (size - 7, 0)]


def compute_alignment_centers(version: int) -> List[int]:
    """
    Calculate the center coordinates of alignment patterns for a QR version.

    The returned coordinates apply to both rows and columns; every pair of
    them is a candidate center. Version 1 has no alignment patterns.

    Args:
        version (int): QR code version (1-40)

    Returns:
        List[int]: Center coordinates, ascending

    Example:
        >>> compute_alignment_centers(7)
        [6, 22, 38]
    """
    if version <= 1:
        return []

    size = 21 + (version - 1) * 4
    num = version // 7 + 2

    # Steps between centers are even and equal, counted back from the last
    # one; the gap to the first center (always 6) takes the remainder.
    # Version 32 is the one exception to the step formula.
    if version == 32:
        step = 26
    else:
        step = (version * 4 + num * 2 + 1) // (num * 2 - 2) * 2

    centers = [size - 7 - i * step for i in range(num - 1)]
    centers.append(6)
    return sorted(centers)


def alignment_positions(size: int, version: int) -> List[Tuple[int, int]]:
    """(row, col) alignment centers, skipping those that would hit a finder."""
    centers = compute_alignment_centers(version)
    positions = []
    for cy in centers:
        for cx in centers:
            if (cy <= 6 and cx <= 6) or (cy <= 6 and cx >= size - 7) or (cy >= size - 7 and cx <= 6):
                continue
            positions.append((cy, cx))
    return positions


def build_function_mask(size: int, version: int) -> Tuple[List[List[bool]], List[List[bool]]]:
    """
    Build masks identifying functional and separator areas of a QR symbol.

    Args:
        size (int): Symbol size in modules (21 for v1, 25 for v2, ...)
        version (int): QR code version (1-40)

    Returns:
        Tuple[List[List[bool]], List[List[bool]]]: (func_mask, sep_mask)
            - func_mask[r][c] is True for finder, timing, alignment,
              format, version and dark-module positions
            - sep_mask[r][c] is True for the 1-module border around finders
    """
    func_mask = [[False] * size for _ in range(size)]
    sep_mask = [[False] * size for _ in range(size)]

    def mark(r: int, c: int) -> None:
        if 0 <= r < size and 0 <= c < size:
            func_mask[r][c] = True

    # Finder patterns and their separators
    for (r0, c0) in finder_origins(size):
        for r in range(r0 - 1, r0 + 8):
            for c in range(c0 - 1, c0 + 8):
                if not (0 <= r < size and 0 <= c < size):
                    continue
                if r0 <= r <= r0 + 6 and c0 <= c <= c0 + 6:
                    func_mask[r][c] = True
                else:
                    sep_mask[r][c] = True

    # Timing patterns
    for i in range(size):
        mark(6, i)
        mark(i, 6)

    # Alignment patterns
    for (cy, cx) in alignment_positions(size, version):
        for r in range(cy - 2, cy + 3):
            for c in range(cx - 2, cx + 3):
                mark(r, c)

    # Format information: around the top-left finder, under the top-right
    # finder, and beside the bottom-left finder (which also holds the dark module)
    for i in range(9):
        mark(8, i)
        mark(i, 8)
    for i in range(8):
        mark(8, size - 1 - i)
        mark(size - 1 - i, 8)

    # Version information (v7+): two 6x3 blocks
    if version >= 7:
        for r in range(6):
            for c in range(size - 11, size - 8):
                mark(r, c)
                mark(c, r)

    return func_mask, sep_mask
