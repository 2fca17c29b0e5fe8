from tests._shared_cases import CANONICAL_CASES, MESSY_TRADER, MESSY_TRADER_FORMATTED
from traderfmt.format import FormatOptions, IndentStyle
from traderfmt.parser import parse_result
from traderfmt.pipeline import run_format


def test_run_format_reuses_provided_parse_result() -> None:
    parsed = parse_result("<FileEnd> x\n")

    result = run_format("ignored", parse=parsed)

    assert result.parse is parsed
    assert result.formatted_text == "<FileEnd> x \n\n"


def test_run_format_reports_unchanged_canonical_source() -> None:
    source = CANONICAL_CASES[-1].source

    result = run_format(source)

    assert result.formatted_text == source
    assert result.changed is False


def test_run_format_reports_changed_source() -> None:
    result = run_format(MESSY_TRADER)

    assert result.formatted_text == MESSY_TRADER_FORMATTED
    assert result.changed is True
    assert result.options == FormatOptions()


def test_run_format_uses_given_options() -> None:
    options = FormatOptions.for_style(IndentStyle.MIXED)

    result = run_format("<Trader> T\n// note\n", options)

    assert result.options is options
    assert result.formatted_text == "<Trader> T \n    \t// note\n\n"


def test_top_level_package_exports() -> None:
    import traderfmt

    assert traderfmt.run_format("// hi\n").formatted_text == "// hi\n"
    assert traderfmt.parse("// hi\n") == parse_result("// hi\n").tokens
