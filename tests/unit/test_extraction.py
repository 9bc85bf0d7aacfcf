"""
Unit tests for code extraction.
Tests: extract_code presets, find_fenced_blocks, find_graphql_operations.
"""
import pytest

from codecheck.extraction.codeblocks import (
    extract_code,
    find_fenced_blocks,
    find_graphql_operations,
    looks_like_graphql_operation,
    strip_markdown_fences,
)
from codecheck.models.extraction import EXTRACTION_PRESETS, ExtractionOptions, get_preset


SAMPLES = [
    "",
    "const a = 1;",
    "```js\nconst a = 1; // trailing\n/* block */\nconst b = 2;\n```",
    "  \n```typescript\n<!-- note -->\n\n\n<s-box></s-box>\n```\n  ",
    "```graphql\n# comment\nquery Q($id: ID!) @cached {\n  product(id: $id) { ...F }\n}\nfragment F on Product { title }\n```",
    "```query { shop }```",
    "```\n```\n```",
    "line one\r\nline two\r\n",
]


class TestStripMarkdownFences:
    def test_tagged_fence_removed(self):
        assert strip_markdown_fences("```js\nconst a = 1;\n```") == "const a = 1;"

    def test_untagged_fence_removed(self):
        assert strip_markdown_fences("```\nconst a = 1;\n```") == "const a = 1;"

    def test_text_without_fences_unchanged(self):
        assert strip_markdown_fences("const a = 1;") == "const a = 1;"

    def test_single_line_fence_keeps_leading_keyword(self):
        assert strip_markdown_fences("```query { shop }```") == "query { shop }"


class TestExtractCode:
    def test_none_preset_is_identity(self):
        assert extract_code("  ```js\nx\n```  ", "none") == "  ```js\nx\n```  "

    def test_typescript_preset_removes_html_comments(self):
        raw = "```tsx\n<!-- layout -->\n<s-box></s-box>\n```"
        assert extract_code(raw, "typescript") == "<s-box></s-box>"

    def test_javascript_preset_removes_c_comments(self):
        raw = "```js\nconst a = 1; // note\n/* block */\nconst b = 2;\n```"
        cleaned = extract_code(raw, "javascript")
        assert "//" not in cleaned
        assert "/*" not in cleaned
        assert cleaned.startswith("const a = 1;")
        assert cleaned.endswith("const b = 2;")

    def test_fenced_preset_keeps_comments(self):
        raw = "```rust\n// entry point\nfn main() {}\n```"
        assert extract_code(raw, "fenced") == "// entry point\nfn main() {}"

    def test_graphql_clean_removes_hash_comments(self):
        raw = "```graphql\n# fetch the shop\nquery { shop { name } }\n```"
        assert extract_code(raw, "graphql_clean") == "query { shop { name } }"

    def test_graphql_strict_removes_directives(self):
        raw = "query { shop @include(if: true) { name } }"
        assert extract_code(raw, "graphql_strict") == "query { shop { name } }"

    def test_graphql_strict_removes_named_fragments(self):
        raw = "query { shop { ...ShopFields } }\nfragment ShopFields on Shop { name }"
        cleaned = extract_code(raw, "graphql_strict")
        assert "fragment" not in cleaned
        assert "ShopFields" not in cleaned
        assert cleaned.startswith("query { shop {")

    def test_graphql_strict_keeps_inline_fragments(self):
        raw = "query { node { ... on Product { title } } }"
        assert "... on Product" in extract_code(raw, "graphql_strict")

    def test_graphql_strict_removes_variables(self):
        raw = "query GetProduct($id: ID!) { product(id: $id) { title } }"
        assert extract_code(raw, "graphql_strict") == "query GetProduct { product { title } }"

    def test_nested_fences_all_removed(self):
        nested = "```graphql\n```gql\nquery { a }\n```\n```"
        assert strip_markdown_fences(nested) == "```gql\nquery { a }\n```"
        assert extract_code(nested, "graphql_clean") == "query { a }"

    def test_crlf_normalised(self):
        assert extract_code("a\r\nb", "none") == "a\nb"

    def test_accepts_options_record(self):
        options = ExtractionOptions(trim_whitespace=True)
        assert extract_code("  x  ", options) == "x"

    def test_unknown_preset_raises(self):
        with pytest.raises(KeyError, match="Available presets"):
            extract_code("x", "cobol")

    @pytest.mark.parametrize("preset", sorted(EXTRACTION_PRESETS))
    @pytest.mark.parametrize("raw", SAMPLES)
    def test_idempotent(self, preset, raw):
        once = extract_code(raw, preset)
        assert extract_code(once, preset) == once


class TestPresets:
    def test_presets_are_immutable(self):
        preset = get_preset("graphql_strict")
        with pytest.raises(AttributeError):
            preset.trim_whitespace = False

    def test_strict_extends_clean(self):
        clean = get_preset("graphql_clean")
        strict = get_preset("graphql_strict")
        assert clean.remove_graphql_comments and strict.remove_graphql_comments
        assert not clean.remove_graphql_variables
        assert strict.remove_graphql_variables


class TestFindFencedBlocks:
    def test_blocks_in_document_order(self, mixed_markdown):
        blocks = find_fenced_blocks(mixed_markdown)
        assert [b.language for b in blocks] == ["javascript", "rust", "graphql"]
        assert blocks[0].body == "function f() { return 1; }"

    def test_language_filter_is_case_insensitive(self):
        markdown = "```JS\nlet a;\n```\n\n```python\nx = 1\n```\n"
        blocks = find_fenced_blocks(markdown, languages=["js"])
        assert [b.body for b in blocks] == ["let a;"]

    def test_untagged_blocks_only_on_request(self):
        markdown = "```\n<s-text>Hi</s-text>\n```\n"
        assert find_fenced_blocks(markdown, languages=["tsx"]) == []
        blocks = find_fenced_blocks(markdown, languages=["tsx"], include_untagged=True)
        assert [b.body for b in blocks] == ["<s-text>Hi</s-text>"]

    def test_no_fences(self):
        assert find_fenced_blocks("just prose") == []


class TestFindGraphQLOperations:
    def test_tagged_fences_win(self):
        markdown = (
            "```graphql\nquery { shop { name } }\n```\n\n"
            "```\n{ shop { currencyCode } }\n```\n"
        )
        assert find_graphql_operations(markdown) == ["query { shop { name } }"]

    def test_fallback_to_operation_shaped_fences(self):
        markdown = (
            "```\nnot graphql at all\n```\n\n"
            "```\nquery Q { shop { name } }\n```\n"
        )
        assert find_graphql_operations(markdown) == ["query Q { shop { name } }"]

    def test_raw_operation_without_fences(self):
        assert find_graphql_operations("  mutation { productCreate(title: \"x\") { id } }  ") == [
            'mutation { productCreate(title: "x") { id } }'
        ]

    def test_raw_text_kept_whatever_its_shape(self):
        assert find_graphql_operations("  qeury { shop { name } }  ") == ["qeury { shop { name } }"]

    def test_comment_only_raw_text_yields_nothing(self):
        assert find_graphql_operations("# fill in the query later\n   \n") == []

    def test_unrelated_fences_yield_nothing(self):
        assert find_graphql_operations("```js\nconst a = 1;\n```\n") == []

    def test_empty_tagged_fence_yields_nothing(self):
        assert find_graphql_operations("```graphql\n# todo\n```\n") == []

    def test_comments_stripped_from_candidates(self):
        markdown = "```gql\n# shop name\nquery { shop { name } }\n```\n"
        assert find_graphql_operations(markdown) == ["query { shop { name } }"]


class TestLooksLikeGraphQLOperation:
    @pytest.mark.parametrize("code", [
        "query { a }",
        "mutation M { a }",
        "subscription { a }",
        "fragment F on T { a }",
        "{ a }",
        "# leading comment\nquery { a }",
    ])
    def test_operation_shapes(self, code):
        assert looks_like_graphql_operation(code)

    @pytest.mark.parametrize("code", ["const a = {}", "queryable thing", ""])
    def test_non_operations(self, code):
        assert not looks_like_graphql_operation(code)
