import pytest

from json_schema_to_sdl.utils import camel_case, last_case_word, snake_case


@pytest.mark.parametrize(
    "text,expected",
    [
        ("first_name", "firstName"),
        ("Pet_status", "PetStatus"),
        ("x-rate--limit", "xRateLimit"),
        ("api.version", "apiVersion"),
        ("two words", "twoWords"),
        ("Pet", "Pet"),
        ("Order_shipping_address", "OrderShippingAddress"),
        # Separators not followed by a lowercase letter are kept
        ("item_1", "item_1"),
        ("A_B", "A_B"),
    ],
)
def test_camel_case(text, expected):
    assert camel_case(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("available", "AVAILABLE"),
        ("inStock", "IN_STOCK"),
        ("out-of-stock", "OUT_OF_STOCK"),
        ("v1.beta", "V1_BETA"),
        ("on hold", "ON_HOLD"),
        ("IN_STOCK", "IN_STOCK"),
    ],
)
def test_snake_case(text, expected):
    assert snake_case(text) == expected


@pytest.mark.parametrize("text", ["first_name", "Pet_status", "a_-_b", "x-rate--limit", "already", "item_1"])
def test_camel_case_is_idempotent(text):
    once = camel_case(text)
    assert camel_case(once) == once


@pytest.mark.parametrize("text", ["available", "inStock", "out-of-stock", "v1.beta", "PENDING"])
def test_snake_case_is_idempotent(text):
    once = snake_case(text)
    assert snake_case(once) == once


@pytest.mark.parametrize(
    "text,expected",
    [
        ("PetStatusCode", "Code"),
        ("StatusCode", "Code"),
        ("Pet", "Pet"),
        ("status", "status"),
        ("HTTPCode", "Code"),
    ],
)
def test_last_case_word(text, expected):
    assert last_case_word(text) == expected
