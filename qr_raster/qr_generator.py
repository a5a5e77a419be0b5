# -*- coding: utf-8 -*-
"""
QR Code Generator Module

Thin wrapper around segno that produces the symbol the renderer draws.
The renderer itself never encodes data; this module only exists so text can
be turned into an image end to end.

Functions:
    make_qr: Generate a QR code symbol
    make_matrix: Generate a QR code symbol as a typed ModuleMatrix
"""

import logging
from typing import Optional, Union

import segno

from .matrix import ModuleMatrix

logger = logging.getLogger(__name__)


def make_qr(
    text: str,
    ecc: str = 'M',
    version: Optional[Union[int, str]] = None,
    mode: Optional[str] = None,
    encoding: Optional[str] = None,
    eci: bool = False,
    mask: Union[str, int, None] = 'auto',
    boost_error: bool = True,
) -> segno.QRCode:
    """
    Generate a QR code symbol with the given parameters.

    Args:
        text (str): The data to encode in the QR code
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')
        version (Optional[Union[int, str]]): QR code version (1-40) or 'auto'
        mode (Optional[str]): Encoding mode ('numeric', 'alphanumeric',
            'byte', 'kanji'); None lets segno pick the most compact one
        encoding (Optional[str]): Character encoding for byte mode
        eci (bool): Add an ECI header with the encoding
        mask (Union[str, int, None]): Mask pattern 0-7, or 'auto'/None for
            the pattern with the lowest penalty
        boost_error (bool): Increase the ECC level if it fits the version

    Returns:
        segno.QRCode: Generated QR code object

    Raises:
        ValueError: If parameters are invalid
        segno.DataOverflowError: If data doesn't fit in the given version
    """
    mask_arg = None if mask in (None, 'auto') else int(mask)
    ver_arg = None if version in (None, 'auto') else int(version)

    symbol = segno.make_qr(
        text,
        error=ecc,
        version=ver_arg,
        mode=mode,
        encoding=encoding,
        eci=bool(eci),
        mask=mask_arg,
        boost_error=bool(boost_error),
    )
    logger.debug(f"Encoded {len(text)} chars as QR version {symbol.version}, mask {symbol.mask}")
    return symbol


def make_matrix(text: str, border: int = 4, **kwargs) -> ModuleMatrix:
    """
    Encode ``text`` and return the typed module matrix, quiet zone included.

    Keyword arguments are passed on to make_qr.

    Example:
        >>> matrix = make_matrix("Hello World", ecc='Q')
        >>> matrix.size
        29
    """
    return ModuleMatrix.from_segno(make_qr(text, **kwargs), border=border)
