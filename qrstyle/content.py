# -*- coding: utf-8 -*-
"""
QR Content Formatting Module

Builds payload strings for the structured formats most scanners understand:
plain text, URLs, WiFi credentials, phone numbers, SMS and e-mail.

Functions:
    format_wifi, format_phone, format_sms, format_email, format_url, format_text
    format_content: Dispatch on a ContentType
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from urllib.parse import quote

from .errors import UnknownContentTypeError


class ContentType(Enum):
    TEXT = 'TEXT'
    URL = 'URL'
    WIFI = 'WIFI'
    PHONE = 'PHONE'
    SMS = 'SMS'
    EMAIL = 'EMAIL'


class WiFiEncryption(Enum):
    WPA = 'WPA'
    WEP = 'WEP'
    NOPASS = 'nopass'


@dataclass
class WiFiConfig:
    ssid: str
    password: Optional[str] = None
    encryption: Optional[WiFiEncryption] = None
    hidden: bool = False


@dataclass
class PhoneConfig:
    phone_number: str


@dataclass
class SMSConfig:
    phone_number: str
    message: Optional[str] = None


@dataclass
class EmailConfig:
    email: str
    subject: Optional[str] = None
    body: Optional[str] = None


@dataclass
class URLConfig:
    url: str


@dataclass
class TextConfig:
    text: str


ContentConfig = Union[WiFiConfig, PhoneConfig, SMSConfig, EmailConfig, URLConfig, TextConfig]

_WIFI_SPECIAL = re.compile(r'([\\;,":])')
_NOT_DIALABLE = re.compile(r'[^0-9+]')
_HAS_SCHEME = re.compile(r'^[a-zA-Z]+://')

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _escape_wifi(value: str) -> str:
    return _WIFI_SPECIAL.sub(r'\\\1', value)


def _dialable(number: str) -> str:
    # Keep digits and '+' for international numbers
    return _NOT_DIALABLE.sub('', number)


def format_wifi(config: WiFiConfig) -> str:
    """
    Format WiFi credentials as a ``WIFI:`` payload.

    SSID and password have ``\\ ; , " :`` backslash-escaped. The password and
    hidden fields are only written when set.

    Example:
        >>> format_wifi(WiFiConfig(ssid='My;Net"', password='pw'))
        'WIFI:T:WPA;S:My\\\\;Net\\\\";P:pw;;'
    """
    encryption = (config.encryption or WiFiEncryption.WPA).value
    payload = f"WIFI:T:{encryption};S:{_escape_wifi(config.ssid)};"
    if config.password:
        payload += f"P:{_escape_wifi(config.password)};"
    if config.hidden:
        payload += "H:true;"
    return payload + ";"


def format_phone(config: PhoneConfig) -> str:
    return f"TEL:{_dialable(config.phone_number)}"


def format_sms(config: SMSConfig) -> str:
    number = _dialable(config.phone_number)
    if config.message:
        return f"SMSTO:{number}:{config.message}"
    return f"SMSTO:{number}"


def format_email(config: EmailConfig) -> str:
    """Format a ``MAILTO:`` payload with percent-encoded subject and body."""
    params = []
    if config.subject:
        params.append(f"subject={quote(config.subject, safe=_URI_COMPONENT_SAFE)}")
    if config.body:
        params.append(f"body={quote(config.body, safe=_URI_COMPONENT_SAFE)}")
    payload = f"MAILTO:{config.email}"
    if params:
        payload += "?" + "&".join(params)
    return payload


def format_url(config: URLConfig) -> str:
    """Return the URL, prefixed with ``https://`` when it has no scheme."""
    url = config.url
    if not _HAS_SCHEME.match(url):
        url = f"https://{url}"
    return url


def format_text(config: TextConfig) -> str:
    return config.text


_FORMATTERS = {
    ContentType.TEXT: format_text,
    ContentType.URL: format_url,
    ContentType.WIFI: format_wifi,
    ContentType.PHONE: format_phone,
    ContentType.SMS: format_sms,
    ContentType.EMAIL: format_email,
}


def format_content(content_type: ContentType, config: ContentConfig) -> str:
    """
    Format a structured payload.

    Args:
        content_type (ContentType): Payload kind (a ContentType or its name)
        config: Matching *Config dataclass

    Returns:
        str: Text to encode in the QR symbol

    Raises:
        UnknownContentTypeError: If the content type has no formatter
    """
    if isinstance(content_type, str):
        try:
            content_type = ContentType(content_type.strip().upper())
        except ValueError:
            raise UnknownContentTypeError(content_type) from None
    formatter = _FORMATTERS.get(content_type)
    if formatter is None:
        raise UnknownContentTypeError(content_type)
    return formatter(config)
