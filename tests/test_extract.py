from __future__ import annotations

from landing_specgen.extract import extract_block, find_iteration_template, find_tagged_blocks
from landing_specgen.extract.extractor import iter_describe_groups
from landing_specgen.model.specs import FallbackTemplate, Matched, NotFound


def test_tagged_group_is_matched_whole(tagged_footer_spec: str) -> None:
    result = extract_block(tagged_footer_spec, "a")

    assert isinstance(result, Matched)
    assert result.page_key == "a"
    # The inner if/else braces must not end the block early
    assert "} else {" in result.block
    assert "ASSERT_A" in result.block


def test_tagged_groups_do_not_leak_other_pages() -> None:
    src = (
        "describe('[a] Pricing', () => {\n  it('x', () => { expect(1).to.eq(1); });\n});\n"
        "describe('[b] Pricing', () => {\n  it('ONLY_B', () => {});\n});\n"
        "describe('[a] Pricing extra', () => {\n  it('SECOND_A', () => {});\n});\n"
    )
    result = extract_block(src, "a")

    assert isinstance(result, Matched)
    assert "ONLY_B" not in result.block
    assert result.block.index("expect(1)") < result.block.index("SECOND_A")


def test_tag_must_match_exactly() -> None:
    src = "describe('[ab] Footer', () => { it('x', () => {}); });"
    assert find_tagged_blocks(src, "a") == []


def test_nested_tagged_groups_are_not_duplicated() -> None:
    src = "describe('[a] Outer', () => {\n  describe('[a] Inner', () => {\n    it('x', () => {});\n  });\n});\n"
    blocks = find_tagged_blocks(src, "a")
    assert len(blocks) == 1
    assert "[a] Inner" in blocks[0]


def test_tag_in_comment_or_string_is_ignored() -> None:
    src = (
        "// describe('[a] Footer', () => { it('COMMENTED', () => {}); });\n"
        "const s = \"describe('[a] Footer', () => {})\";\n"
    )
    assert find_tagged_blocks(src, "a") == []


def test_regex_literal_with_brace_in_tagged_body() -> None:
    src = (
        "describe('[a] Discount', () => {\n"
        "  it('price', () => {\n"
        "    expect(/\\d+\\s*[}₴]/.test(text)).to.equal(true);\n"
        "  });\n"
        "  it('LAST_TEST', () => {});\n"
        "});\n"
    )
    result = extract_block(src, "a")
    assert isinstance(result, Matched)
    assert "LAST_TEST" in result.block


def test_iteration_template_is_returned_verbatim(loop_hero_spec: str) -> None:
    result = extract_block(loop_hero_spec, "a")

    assert isinstance(result, FallbackTemplate)
    assert result.page_key == "a"
    assert result.block.lstrip().startswith("describe(`[${page.key}] Hero block`")
    # Not instantiated with the page's data
    assert "page.expected.h1" in result.block


def test_iteration_callback_forms() -> None:
    for head in ("page => {", "function (page, index) {", "(page, i) => {"):
        src = f"targetPages.forEach({head}\n  it('BODY', () => {{}});\n}});\n"
        body = find_iteration_template(src)
        assert body is not None, head
        assert "BODY" in body


def test_iteration_requires_page_parameter() -> None:
    src = "targetPages.forEach((p) => { it('x', () => {}); });"
    assert find_iteration_template(src) is None


def test_not_found_is_a_result_not_an_error() -> None:
    src = "describe('Header / Menu / Navigation Tests', () => { it('x', () => {}); });"
    result = extract_block(src, "a")

    assert isinstance(result, NotFound)
    assert "[a]" in result.reason


def test_unbalanced_group_is_skipped() -> None:
    src = "describe('[a] Broken', () => {\n  it('x', () => {\n"
    assert isinstance(extract_block(src, "a"), NotFound)


def test_iter_describe_groups_skips_non_literal_titles() -> None:
    src = "describe(title, () => {});\ndescribe('Named', () => {});"
    titles = [g.title for g in iter_describe_groups(src)]
    assert titles == ["Named"]
