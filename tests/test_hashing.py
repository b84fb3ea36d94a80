import pytest

from entropycore.hashing import string_hash


def test_empty_key_with_zero_seed_hashes_to_zero():
    assert string_hash("") == 0
    assert string_hash(b"", 0) == 0


def test_text_and_utf8_bytes_agree():
    for text in ["a", "abc", "abcd", "Entropy::TypeId", "naïve"]:
        assert string_hash(text) == string_hash(text.encode("utf-8"))


def test_bytearray_and_memoryview_agree_with_bytes():
    data = b"some payload"
    assert string_hash(bytearray(data)) == string_hash(data)
    assert string_hash(memoryview(data)) == string_hash(data)


def test_default_seed_is_zero():
    assert string_hash("hello world") == string_hash("hello world", 0)


def test_result_fits_in_32_bits():
    for text in ["", "x", "xy", "xyz", "wxyz", "a longer piece of text" * 7]:
        value = string_hash(text, 12345)
        assert 0 <= value <= 0xFFFFFFFF


def test_same_length_keys_hash_differently():
    results = {string_hash(text, 7) for text in ["repeat", "repeal", "defeat"]}
    assert len(results) == 3


def test_seed_changes_result():
    assert len({string_hash("abcdef", seed) for seed in range(8)}) == 8


def test_every_tail_length_is_distinct():
    text = "abcdefgh"
    results = {string_hash(text[:n]) for n in range(1, len(text) + 1)}
    assert len(results) == len(text)


def test_large_seed_is_masked_to_32_bits():
    assert string_hash("abc", 1 << 32) == string_hash("abc", 0)
    assert string_hash("abc", -1) == string_hash("abc", 0xFFFFFFFF)


def test_non_string_key_rejected():
    with pytest.raises(TypeError):
        string_hash(42)