"""Unit tests for the prefix matchers."""

from jvmcomplete.completion.matcher import match_descriptors, match_internal_names, match_signatures
from jvmcomplete.completion.tokenizer import DescriptorToken


def test_internal_names_exclude_exact_match():
    names = ["a/B", "a/Bar", "a/Baz", "c/D"]
    assert match_internal_names(names, "a/B") == ["a/Bar", "a/Baz"]


def test_internal_names_keep_input_order():
    names = ["z/A", "a/A"]
    assert match_internal_names(names, "") == ["z/A", "a/A"]


def test_descriptors_reattach_prefix_and_terminator():
    token = DescriptorToken("[[L", "a/B")
    assert match_descriptors(["a/B", "a/Bar", "c/D"], token) == ["[[La/B;", "[[La/Bar;"]


def test_signatures_are_sorted():
    assert match_signatures(iter(["z()V", "a()V", "m(I)V"]), "") == ["a()V", "m(I)V", "z()V"]
    assert match_signatures(["zz()V", "za()V", "a()V"], "z") == ["za()V", "zz()V"]
