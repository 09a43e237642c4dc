"""Unit tests for module name normalization."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from codediffs.exceptions import ValidationError
from codediffs.normalize import module_name_pattern, replace_module_names


@pytest.mark.unit
class TestReplaceModuleNames:
    """Tests for replace_module_names function."""

    def test_function_call(self):
        """Test a call site loses its counter."""
        assert replace_module_names("call i64 @julia_f_2007(i64 %0)") == "call i64 @f(i64 %0)"

    def test_define_line(self):
        """Test the definition of the function is rewritten."""
        code = "define i64 @julia_f1_2007(i64 signext %0) #0 {"
        assert replace_module_names(code) == "define i64 @f1(i64 signext %0) #0 {"

    def test_name_with_underscores_and_digits(self):
        """Test names may contain underscores and digits."""
        assert replace_module_names("@julia_my_func2_15(") == "@my_func2("

    def test_other_prefixes(self):
        """Test every generator prefix is recognized."""
        code = "japi1_g_3 jfptr_g_4 tojlinvoke_g_5"
        assert replace_module_names(code) == "g g g"

    def test_function_name_filter(self):
        """Test only the requested function is rewritten."""
        assert replace_module_names("julia_f_1 julia_g_2", function_name="g") == "julia_f_1 g"

    def test_no_module_names(self):
        """Test code without module names is unchanged."""
        code = "  %1 = add i64 %0, 1\n  ret i64 %1"
        assert replace_module_names(code) == code

    def test_empty_code(self):
        """Test empty code stays empty."""
        assert replace_module_names("") == ""

    def test_names_inside_identifiers_are_kept(self):
        """Test a prefix in the middle of a word is not matched."""
        code = "myjulia_f_1 julia_f_1x"
        assert replace_module_names(code) == code

    def test_multiline(self):
        """Test every line of a listing is normalized."""
        code = "define void @julia_h_10() {\n  call void @julia_h_10()\n}"
        assert replace_module_names(code) == "define void @h() {\n  call void @h()\n}"

    def test_custom_prefixes(self):
        """Test prefixes can be replaced."""
        assert replace_module_names("mod_f_1 julia_f_2", prefixes=("mod",)) == "f julia_f_2"


@pytest.mark.unit
class TestModuleNamePattern:
    """Tests for module_name_pattern validation."""

    @pytest.mark.parametrize("function_name", ["", "f(x)", "a b", "f-g", "@f", "f;"])
    def test_invalid_function_name(self, function_name):
        """Test function names with forbidden characters are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            module_name_pattern(function_name)
        assert exc_info.value.parameter_name == "function_name"

    def test_no_prefixes(self):
        """Test at least one prefix is required."""
        with pytest.raises(ValidationError):
            module_name_pattern(prefixes=())

    def test_groups(self):
        """Test the name and counter are captured."""
        match = module_name_pattern().search("@julia_f1_2007(")
        assert match is not None
        assert match.group("name") == "f1"
        assert match.group("counter") == "2007"

    def test_function_name_is_escaped(self):
        """Test regex metacharacters in the function name are literal."""
        pattern = module_name_pattern("f.g")
        assert pattern.search("julia_f.g_1")
        assert not pattern.search("julia_fxg_1")


@pytest.mark.unit
@pytest.mark.fuzzing
class TestNormalizationProperties:
    """Property-based tests for normalization."""

    @given(st.text(alphabet="julia_fg0123 @(),\n", max_size=60))
    def test_fixed_point(self, code):
        """Normalizing twice gives the same text as normalizing once."""
        once = replace_module_names(code)
        assert replace_module_names(once) == once

    @given(st.text(alphabet="abcxyz %@=,\n", max_size=60))
    def test_code_without_prefixes_unchanged(self, code):
        """Code without any generator prefix is never modified."""
        assert replace_module_names(code) == code
