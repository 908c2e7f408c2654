"""Testes da fonte de aleatoriedade (random_source)."""

import base64
import string

import pytest

from atlas_automation.core.errors import RANDOM_SOURCE_FAILURE, error_payload_from_exception
from atlas_automation.core.exceptions import RandomSourceFailure
from atlas_automation.security.random_source import (
    generate_random_ascii_string,
    generate_random_base64_string,
    generate_random_bytes,
)


BASE64_ALPHABET = set(string.ascii_letters + string.digits + "+/")
URLSAFE_ALPHABET = set(string.ascii_letters + string.digits + "-_")


def test_random_bytes_have_requested_size():
    assert len(generate_random_bytes(28)) == 28


def test_injected_source_is_used(counting_random_source):
    data = generate_random_bytes(4, source=counting_random_source)

    assert data == bytes([1, 2, 3, 4])
    assert counting_random_source.calls == [4]


def test_source_error_becomes_random_source_failure(failing_random_source):
    with pytest.raises(RandomSourceFailure) as exc_info:
        generate_random_bytes(16, source=failing_random_source)

    assert isinstance(exc_info.value.__cause__, OSError)
    payload = error_payload_from_exception(exc_info.value)
    assert payload.type == RANDOM_SOURCE_FAILURE
    assert payload.details["exception_class"] == "OSError"


@pytest.mark.parametrize("error", [RuntimeError("rng exhausted"), KeyError("pool"), NotImplementedError()])
def test_any_source_error_becomes_random_source_failure(error):
    def _raise(size):
        raise error

    with pytest.raises(RandomSourceFailure) as exc_info:
        generate_random_bytes(8, source=_raise)

    assert exc_info.value.__cause__ is error
    assert exc_info.value.details["exception_class"] == type(error).__name__


def test_short_read_is_a_failure():
    with pytest.raises(RandomSourceFailure):
        generate_random_bytes(16, source=lambda size: b"\x00" * (size - 1))


@pytest.mark.parametrize("length", [1, 5, 6, 500])
def test_ascii_string_has_exact_length(length):
    value = generate_random_ascii_string(length)

    assert len(value) == length
    assert set(value) <= URLSAFE_ALPHABET


@pytest.mark.parametrize("length", [1, 7, 500])
def test_base64_string_has_exact_length_and_alphabet(length):
    value = generate_random_base64_string(length)

    assert len(value) == length
    assert set(value) <= BASE64_ALPHABET


def test_base64_string_is_prefix_of_encoding(counting_random_source):
    value = generate_random_base64_string(8, source=counting_random_source)

    assert value == base64.b64encode(bytes(range(1, 7))).decode("ascii")[:8]
