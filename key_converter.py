# -*- coding: utf-8 -*-
"""
Разбирает ключ Outline (ss://) и собирает JSON-конфиг клиента Shadowsocks.
Формат: ss://base64(method:password)@host:port[/?outline=1]
"""
import base64
import binascii
import json
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "
ERROR_INVALID_FORMAT = "Invalid key format"

KEY_PREFIX = "ss://"
OUTLINE_SUFFIX = "/?outline=1"

LOCAL_ADDRESS = "127.0.0.1"
LOCAL_PORT = 1080
TIMEOUT = 300
MODE = "tcp_and_udp"
FAST_OPEN = False

_PORT_RE = re.compile(r"[0-9]+")

Base64Decoder = Callable[[str], str]


class InvalidKeyFormat(ValueError):
    """В ключе нет разделителя @ между учётными данными и адресом."""

    def __init__(self):
        super().__init__(ERROR_INVALID_FORMAT)


class PortOutOfRange(ValueError):
    pass


@dataclass(frozen=True)
class ShadowsocksConfig:
    server: str
    server_port: int
    password: str
    method: str

    def to_dict(self) -> dict:
        """Поля в том порядке, в котором их ждут клиенты Shadowsocks."""
        return {
            "server": self.server,
            "server_port": self.server_port,
            "password": self.password,
            "method": self.method,
            "local_address": LOCAL_ADDRESS,
            "local_port": LOCAL_PORT,
            "timeout": TIMEOUT,
            "mode": MODE,
            "fast_open": FAST_OPEN,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=4)


def decode_base64(data: str) -> str:
    """Строгий base64 (стандартный алфавит). Недостающие '=' дописываются, как это делает atob."""
    if len(data) % 4 == 1:
        raise binascii.Error("Incorrect base64 length")
    padded = data + "=" * (-len(data) % 4)
    return base64.b64decode(padded, validate=True).decode("utf-8")


def parse_port(port_text: str) -> int:
    if not _PORT_RE.fullmatch(port_text):
        raise ValueError(f"invalid literal for int() with base 10: {port_text!r}")
    port = int(port_text)
    if port > 65535:
        raise PortOutOfRange(f"Port out of range: {port}")
    return port


def parse_outline_key(outline_key: str, b64decode: Base64Decoder = decode_base64) -> ShadowsocksConfig:
    """Из ключа Outline получить ShadowsocksConfig. Ошибки не перехватываются."""
    cleaned = outline_key.removesuffix(OUTLINE_SUFFIX).removeprefix(KEY_PREFIX)
    at_idx = cleaned.find("@")
    if at_idx == -1:
        raise InvalidKeyFormat()

    credentials_part = cleaned[:at_idx]
    endpoint_part = cleaned[at_idx + 1 :]

    decoded = b64decode(credentials_part)
    # пароль может содержать ':', поэтому делим только по первому
    cipher, password = decoded.split(":", 1)

    host, port_text = endpoint_part.split(":")
    port = parse_port(port_text)

    return ShadowsocksConfig(server=host, server_port=port, password=password, method=cipher)


def convert(outline_key: str, b64decode: Base64Decoder = decode_base64) -> str:
    """Ключ Outline -> JSON-конфиг Shadowsocks, либо строка "Error: <причина>"."""
    try:
        config = parse_outline_key(outline_key, b64decode)
    except Exception as e:
        logger.debug("Key conversion failed: %s: %s", type(e).__name__, e)
        return f"{ERROR_PREFIX}{e}"
    logger.debug("Converted key for %s:%s (%s)", config.server, config.server_port, config.method)
    return config.to_json()


def is_error(result: str) -> bool:
    return result.startswith(ERROR_PREFIX)


def error_reason(result: str) -> str:
    return result.removeprefix(ERROR_PREFIX)
