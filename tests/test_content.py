"""Tests for payload formatting."""

import pytest

from qrstyle.content import (
    ContentType,
    EmailConfig,
    PhoneConfig,
    SMSConfig,
    TextConfig,
    URLConfig,
    WiFiConfig,
    WiFiEncryption,
    format_content,
)
from qrstyle.errors import UnknownContentTypeError


def test_wifi_escapes_special_characters():
    payload = format_content(ContentType.WIFI, WiFiConfig(ssid='My;Net"', password='a:b,c\\'))
    assert payload == r'WIFI:T:WPA;S:My\;Net\";P:a\:b\,c\\;;'


def test_wifi_without_password_hidden_network():
    payload = format_content(ContentType.WIFI, WiFiConfig(
        ssid='home', encryption=WiFiEncryption.NOPASS, hidden=True))
    assert payload == 'WIFI:T:nopass;S:home;H:true;;'


def test_phone_keeps_digits_and_plus():
    assert format_content(ContentType.PHONE, PhoneConfig('+1 (555) 010-9999')) == 'TEL:+15550109999'


def test_phone_drops_non_ascii_digits():
    assert format_content(ContentType.PHONE, PhoneConfig('+\u0661\u0662 555')) == 'TEL:+555'
    assert format_content(ContentType.SMS, SMSConfig('\u0663555')) == 'SMSTO:555'


def test_sms():
    assert format_content(ContentType.SMS, SMSConfig('555-0100')) == 'SMSTO:5550100'
    assert format_content(ContentType.SMS, SMSConfig('555-0100', 'hi there')) == 'SMSTO:5550100:hi there'


def test_email_percent_encodes():
    payload = format_content(ContentType.EMAIL, EmailConfig(
        'a@example.com', subject='Hello & welcome', body="It's 100%"))
    assert payload == "MAILTO:a@example.com?subject=Hello%20%26%20welcome&body=It's%20100%25"


def test_email_without_params():
    assert format_content(ContentType.EMAIL, EmailConfig('a@example.com')) == 'MAILTO:a@example.com'


def test_url_scheme_is_added_when_missing():
    assert format_content(ContentType.URL, URLConfig('example.com')) == 'https://example.com'
    assert format_content(ContentType.URL, URLConfig('http://example.com')) == 'http://example.com'
    assert format_content(ContentType.URL, URLConfig('ftp://files')) == 'ftp://files'


def test_text_and_type_by_name():
    assert format_content('text', TextConfig('raw')) == 'raw'


def test_unknown_content_type():
    with pytest.raises(UnknownContentTypeError):
        format_content('VCARD', TextConfig('x'))
    with pytest.raises(ValueError):
        format_content(None, TextConfig('x'))
