# -*- coding: utf-8 -*-
"""
QR Code Generator Module

Encodes payloads with segno and hands the resulting module matrix to the
styled renderer.

Functions:
    make_qr: Generate a QR code symbol with segno
    render_text_svg: Encode text and render it as styled SVG
    render_qr_svg: Format a structured payload, encode it and render it

Classes:
    SegnoMatrix: ModuleMatrix view of a segno symbol
    BoolMatrix: ModuleMatrix view of a list of rows
"""

import logging
from typing import Iterable, Optional, Sequence, Union

import segno

from .content import ContentConfig, ContentType, format_content
from .options import RenderOptions, ResolvedOptions, resolve_options
from .renderer import render_matrix

logger = logging.getLogger(__name__)


class SegnoMatrix:
    """Read-only ModuleMatrix over ``segno.QRCode.matrix`` (border excluded)."""

    def __init__(self, qr: segno.QRCode):
        self._rows = qr.matrix
        self.size = len(self._rows)

    def get_module(self, x: int, y: int) -> bool:
        return bool(self._rows[y][x])


class BoolMatrix:
    """
    Read-only ModuleMatrix over a square list of rows.

    Example:
        >>> m = BoolMatrix([[1, 0], [0, 1]])
        >>> m.size, m.get_module(1, 0)
        (2, False)
    """

    def __init__(self, rows: Iterable[Sequence]):
        self._rows = tuple(tuple(bool(v) for v in row) for row in rows)
        self.size = len(self._rows)
        if any(len(row) != self.size for row in self._rows):
            raise ValueError("Module matrix must be square")

    def get_module(self, x: int, y: int) -> bool:
        return self._rows[y][x]


def make_qr(
    text: str,
    ecc: str = 'L',
    version: Optional[Union[int, str]] = None,
    mode: Optional[str] = None,
    encoding: Optional[str] = None,
    mask: Union[str, int] = 'auto',
    boost_error: bool = False
) -> segno.QRCode:
    """
    Generate a standard (non-micro) QR code symbol.

    The ECC level is passed to segno unchanged; ``boost_error`` is off by
    default so segno does not raise it on its own.

    Args:
        text (str): The data to encode
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')
        version (Optional[Union[int, str]]): 1-40, or None/'auto' for the
            smallest version that fits
        mode (Optional[str]): segno encoding mode, None to let segno choose
        encoding (Optional[str]): Character encoding for byte mode
        mask (Union[str, int]): 'auto' or a mask pattern 0-7
        boost_error (bool): Let segno raise the ECC level when space allows

    Returns:
        segno.QRCode: Generated QR code object

    Raises:
        ValueError: If parameters are invalid
        segno.DataOverflowError: If data doesn't fit in the requested version
    """
    mask_arg = None if mask == 'auto' else int(mask)
    ver_arg = None if (version in (None, 'auto')) else int(version)

    qr = segno.make(
        text,
        error=ecc,
        version=ver_arg,
        mode=mode,
        encoding=encoding,
        mask=mask_arg,
        boost_error=bool(boost_error),
        micro=False
    )
    logger.debug(f"Encoded {len(text)} chars as version {qr.version}-{qr.error}")
    return qr


def render_text_svg(
    text: str,
    options: Optional[Union[RenderOptions, ResolvedOptions]] = None
) -> str:
    """Encode ``text`` at the configured ECC level and render it as styled SVG."""
    opts = resolve_options(options)
    qr = make_qr(text, ecc=opts.ecc)
    return render_matrix(SegnoMatrix(qr), opts)


def render_qr_svg(
    content_type: ContentType,
    config: ContentConfig,
    options: Optional[Union[RenderOptions, ResolvedOptions]] = None
) -> str:
    """
    Format a structured payload, encode it and render it as styled SVG.

    Args:
        content_type (ContentType): Payload kind (WIFI, URL, ...)
        config: Matching *Config dataclass
        options: Render options; missing fields take their defaults

    Returns:
        str: SVG document

    Raises:
        UnknownContentTypeError: If the content type is not supported
        OptionsError: If the options are invalid

    Example:
        >>> svg = render_qr_svg(ContentType.URL, URLConfig('example.com'),
        ...                     RenderOptions(data_style=ShapeStyle.ROUNDED_SQUARE))
    """
    payload = format_content(content_type, config)
    return render_text_svg(payload, options)
