"""Tests for usage site recognition and disambiguation."""

import pytest

from component_usage.models import ScanResult, UsageKind, UsageSite
from component_usage.scanner.usage_extractor import UsageExtractor


@pytest.fixture
def extractor():
    return UsageExtractor()


def keys_of(sites, kind):
    return [site.key for site in sites if site.kind is kind]


class TestPlainSymbolUsage:
    """Tests for plain (non-namespace) symbols."""

    def test_markup_opening_and_self_closing_tags(self, extractor):
        content = """
<Button onClick={save}>Save</Button>
<Button variant="ghost" />
<Button
  size="lg"
>
  Multi-line
</Button>
"""
        sites = extractor.find_usages(content, ["Button"])

        assert keys_of(sites, UsageKind.MARKUP) == ["Button", "Button", "Button"]
        assert keys_of(sites, UsageKind.CALL) == []

    def test_closing_tags_are_not_counted(self, extractor):
        sites = extractor.find_usages("</Button>", ["Button"])

        assert sites == []

    def test_markup_requires_identifier_boundary(self, extractor):
        content = "<ButtonGroup /><Button-like /><Button$Alt />"

        assert extractor.find_usages(content, ["Button"]) == []

    def test_namespace_markup_requires_identifier_boundary(self, extractor):
        assert extractor.find_usages("<UI.Card$Alt />", ["*UI"]) == []

    def test_calls_are_counted_per_occurrence(self, extractor):
        content = "const a = useTheme();\nconst b = useTheme();\n"

        sites = extractor.find_usages(content, ["useTheme"])

        assert sites == [
            UsageSite("useTheme", UsageKind.CALL),
            UsageSite("useTheme", UsageKind.CALL),
        ]

    def test_member_and_prefixed_calls_are_ignored(self, extractor):
        content = "api.useTheme();\nmyuseTheme();\n$useTheme();\n"

        assert extractor.find_usages(content, ["useTheme"]) == []

    def test_call_requires_parenthesis_right_after_name(self, extractor):
        assert extractor.find_usages("useTheme ();", ["useTheme"]) == []

    def test_markup_suppresses_every_call_in_the_file(self, extractor):
        """One markup use hides all call-like text for that symbol in the file."""
        content = """
<Button>Save</Button>
const fallback = Button("primary");
"""
        sites = extractor.find_usages(content, ["Button"])

        assert keys_of(sites, UsageKind.MARKUP) == ["Button"]
        assert keys_of(sites, UsageKind.CALL) == []

    def test_call_without_markup_is_counted(self, extractor):
        sites = extractor.find_usages('const x = Button("primary");', ["Button"])

        assert sites == [UsageSite("Button", UsageKind.CALL)]

    def test_look_alike_text_in_strings_is_counted(self, extractor):
        """Text matching works on raw text, strings included."""
        sites = extractor.find_usages('const doc = "use <Button /> here";', ["Button"])

        assert keys_of(sites, UsageKind.MARKUP) == ["Button"]


class TestNamespaceUsage:
    """Tests for namespace member access."""

    def test_namespace_markup(self, extractor):
        sites = extractor.find_usages("<UI.Card />", ["*UI"])

        assert sites == [UsageSite("UI.Card", UsageKind.MARKUP)]

    def test_namespace_closing_tag_is_not_counted(self, extractor):
        sites = extractor.find_usages("<UI.Card>\n  body\n</UI.Card>", ["*UI"])

        assert sites == [UsageSite("UI.Card", UsageKind.MARKUP)]

    def test_namespace_call(self, extractor):
        sites = extractor.find_usages("UI.formatDate(now); UI.formatDate(then);", ["*UI"])

        assert keys_of(sites, UsageKind.CALL) == ["UI.formatDate", "UI.formatDate"]

    def test_namespace_call_suppressed_for_markup_member(self, extractor):
        content = """
<UI.Card title="x" />
const card = UI.Card({ title: "y" });
const date = UI.formatDate(now);
"""
        sites = extractor.find_usages(content, ["*UI"])

        assert keys_of(sites, UsageKind.MARKUP) == ["UI.Card"]
        assert keys_of(sites, UsageKind.CALL) == ["UI.formatDate"]

    def test_plain_member_access_is_not_usage(self, extractor):
        assert extractor.find_usages("const theme = UI.theme;", ["*UI"]) == []


class TestUsageExtractorProcess:
    """Tests for instance table updates."""

    def test_process_records_into_split_tables(self, extractor):
        result = ScanResult()
        result.add_import("*NS", "a.tsx")
        result.add_import("useTheme", "a.tsx")

        extractor.process("<NS.Card />\nuseTheme();\nuseTheme();", "a.tsx", result)

        assert result.markup_instances == {"NS.Card": ["a.tsx"]}
        assert result.call_instances == {"useTheme": ["a.tsx", "a.tsx"]}
        assert "NS.Card" not in result.call_instances

    def test_symbols_are_searched_in_files_that_do_not_import_them(self, extractor):
        """Search scope is every known symbol, not just the file's imports."""
        result = ScanResult()
        result.add_import("Button", "a.tsx")

        extractor.process('Button("primary");', "b.js", result)

        assert result.call_instances == {"Button": ["b.js"]}

    def test_same_symbol_can_differ_in_kind_across_files(self, extractor):
        result = ScanResult()
        result.add_import("Button", "a.tsx")

        extractor.process("<Button />", "a.tsx", result)
        extractor.process("Button();", "b.js", result)

        assert result.markup_instances == {"Button": ["a.tsx"]}
        assert result.call_instances == {"Button": ["b.js"]}
