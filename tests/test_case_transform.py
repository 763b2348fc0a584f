"""
Module: test_case_transform.py

Author: Michael Economou
Date: 2026-09-23

Tests for case transformations.
"""

import pytest

from cleanfy.models.transform_config import CaseMode
from cleanfy.modules.case_transform_module import CaseTransformModule, apply_case, to_title


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world", "Hello World"),
        ("HELLO WORLD", "Hello World"),
        ("hELLo WoRLD", "Hello World"),
        ("file 123 name", "File 123 Name"),
        ("hello_world", "Hello_World"),
        ("hello-world", "Hello-World"),
        ("hello.world", "Hello.World"),
        ("hello  world", "Hello  World"),
        ("a", "A"),
        ("", ""),
        ("123", "123"),
        ("2nd_TRY", "2nd_Try"),
        ("heLLo", "Hello"),
    ],
)
def test_to_title(text, expected):
    assert to_title(text) == expected


class TestCaseTransformModule:
    """Mode dispatch"""

    def test_none_is_unmodified(self):
        assert CaseTransformModule.apply("MiXeD_Case", CaseMode.NONE) == "MiXeD_Case"

    def test_lower(self):
        assert CaseTransformModule.apply("MiXeD_Case", CaseMode.LOWER) == "mixed_case"

    def test_upper(self):
        assert CaseTransformModule.apply("MiXeD_Case", CaseMode.UPPER) == "MIXED_CASE"

    def test_title(self):
        assert CaseTransformModule.apply("MiXeD_Case", CaseMode.TITLE) == "Mixed_Case"

    def test_extension_rule(self):
        assert CaseTransformModule.applies_to_extension(CaseMode.LOWER) is True
        assert CaseTransformModule.applies_to_extension(CaseMode.UPPER) is True
        assert CaseTransformModule.applies_to_extension(CaseMode.TITLE) is False
        assert CaseTransformModule.applies_to_extension(CaseMode.NONE) is False

    def test_string_mode(self):
        assert apply_case("abc", "upper") == "ABC"
        with pytest.raises(ValueError):
            apply_case("abc", "sideways")
