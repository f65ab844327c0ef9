"""Tests for ProcessorFactory caching and lookup."""

import pytest

from payment_interfaces.domain.models import ProcessorName
from payment_interfaces.domain.payment import (
    CreditCardProcessor,
    CryptoCurrencyProcessor,
    PayPalProcessor,
)
from payment_interfaces.services.factory import ProcessorFactory


@pytest.fixture(autouse=True)
def clean_factory():
    ProcessorFactory.reset()
    yield
    ProcessorFactory.reset()


def test_getters_return_cached_instances():
    assert ProcessorFactory.get_credit_card_processor() is ProcessorFactory.get_credit_card_processor()
    assert ProcessorFactory.get_paypal_processor() is ProcessorFactory.get_paypal_processor()
    assert ProcessorFactory.get_crypto_processor() is ProcessorFactory.get_crypto_processor()


def test_getters_return_expected_types():
    assert isinstance(ProcessorFactory.get_credit_card_processor(), CreditCardProcessor)
    assert isinstance(ProcessorFactory.get_paypal_processor(), PayPalProcessor)
    assert isinstance(ProcessorFactory.get_crypto_processor(), CryptoCurrencyProcessor)


@pytest.mark.parametrize("name", list(ProcessorName))
def test_get_processor_by_name(name):
    processor = ProcessorFactory.get_processor(name)

    assert processor.get_processor_name() == name.value


def test_get_processor_accepts_plain_label():
    assert ProcessorFactory.get_processor("PayPal") is ProcessorFactory.get_paypal_processor()


def test_get_processor_unknown_label():
    with pytest.raises(ValueError):
        ProcessorFactory.get_processor("Cash")


def test_all_processors_order():
    names = [p.get_processor_name() for p in ProcessorFactory.all_processors()]

    assert names == ["Credit Card", "PayPal", "Cryptocurrency"]


def test_reset_creates_fresh_instances():
    first = ProcessorFactory.get_paypal_processor()
    ProcessorFactory.reset()

    assert ProcessorFactory.get_paypal_processor() is not first


def test_named_getters_share_the_lookup_cache():
    assert ProcessorFactory.get_credit_card_processor() is ProcessorFactory.get_processor(ProcessorName.CREDIT_CARD)
    assert ProcessorFactory.all_processors()[2] is ProcessorFactory.get_crypto_processor()
