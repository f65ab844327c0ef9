"""
Tests for SecureLogger and the Logger / Encryptor protocols.

The marker "encryption" must round-trip and must pass anything that does
not carry the marker on both ends straight through.
"""

import pytest

from payment_interfaces.services.secure_logger import Encryptor, Logger, SecureLogger


@pytest.fixture
def secure_logger():
    return SecureLogger()


def test_satisfies_both_protocols(secure_logger):
    assert isinstance(secure_logger, Logger)
    assert isinstance(secure_logger, Encryptor)


def test_log_prints_message(secure_logger, capsys):
    secure_logger.log("hello")

    assert capsys.readouterr().out == "Logging: hello\n"


def test_encrypt_wraps_in_marker(secure_logger):
    assert secure_logger.encrypt("Confidential data") == "ENCRYPTED[Confidential data]"


@pytest.mark.parametrize("text", ["", "Confidential data", "card 4111-1111", "unicode ✓"])
def test_decrypt_reverses_encrypt(secure_logger, text):
    assert secure_logger.decrypt(secure_logger.encrypt(text)) == text


@pytest.mark.parametrize(
    "text",
    [
        "plain text",
        "",
        "ENCRYPTED[",
        "ENCRYPTED[missing suffix",
        "missing prefix]",
        "encrypted[wrong case]",
        " ENCRYPTED[leading space]",
    ],
)
def test_decrypt_passes_through_non_marker_input(secure_logger, text):
    assert secure_logger.decrypt(text) == text


def test_decrypt_is_idempotent_on_plain_text(secure_logger):
    once = secure_logger.decrypt("plain")
    assert secure_logger.decrypt(once) == once


def test_decrypt_strips_only_one_layer(secure_logger):
    double = secure_logger.encrypt(secure_logger.encrypt("x"))

    assert secure_logger.decrypt(double) == "ENCRYPTED[x]"


def test_secure_log_encrypts_then_logs(secure_logger, capsys):
    secure_logger.secure_log("Sensitive payment information")

    assert capsys.readouterr().out == "Logging: ENCRYPTED[Sensitive payment information]\n"
