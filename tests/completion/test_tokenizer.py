"""Unit tests for the partial descriptor tokenizer."""

import pytest

from jvmcomplete.completion.tokenizer import DescriptorToken, tokenize


@pytest.mark.parametrize(
    "raw,prefix,fragment",
    [
        ("La/B", "L", "a/B"),
        ("[[La/", "[[L", "a/"),
        ("[[[Ljava/lang/S", "[[[L", "java/lang/S"),
        ("  Ljava/  ", "L", "java/"),
        ("LLookup", "L", "Lookup"),
        ("La/L[", "L", "a/L["),
    ],
)
def test_accepts_reference_tokens(raw, prefix, fragment):
    assert tokenize(raw) == DescriptorToken(prefix, fragment)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "a/B",
        "[[a",
        "La/B;",
        "L;",
        "L",
        "[[L",
        "I",
    ],
)
def test_rejects_non_completable_input(raw):
    assert tokenize(raw) is None


def test_token_completes_class_name():
    token = DescriptorToken("[L", "java/")
    assert token.complete("java/util/List") == "[Ljava/util/List;"
