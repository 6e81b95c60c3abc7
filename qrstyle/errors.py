# -*- coding: utf-8 -*-
"""
Exception types raised by the qrstyle package.
"""


class QRStyleError(Exception):
    """Base class for every error raised by qrstyle."""


class OptionsError(QRStyleError, ValueError):
    """Render options could not be resolved (bad number, bad colour...)."""


class StyleNotSupportedError(OptionsError):
    """A shape style was selected for a region that cannot draw it."""

    def __init__(self, region, style):
        self.region = region
        self.style = style
        super().__init__(f"Style {style.name} is not supported for region {region.name}")


class UnknownContentTypeError(QRStyleError, ValueError):
    """The payload content type has no formatter."""

    def __init__(self, content_type):
        self.content_type = content_type
        super().__init__(f"Unknown QR content type: {content_type!r}")
