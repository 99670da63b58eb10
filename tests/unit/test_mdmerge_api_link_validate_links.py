"""Unit tests for mdmerge.api.link.validate_links."""

from mdmerge.api.link.LinkError import LinkError
from mdmerge.api.link.LinkErrorKind import LinkErrorKind
from mdmerge.api.link.validate_links import validate_file_links, validate_links


def test_valid_link(write_md, build_doc_context):
    a = write_md("A.md", "## Some Section\n")
    b = write_md("B.md", "[see](./A.md#some-section)\n")
    assert validate_links(build_doc_context(a, b), [a, b]) == {}


def test_dead_label_link(write_md, build_doc_context):
    a = write_md("A.md", "## Some Section\n")
    b = write_md("B.md", "[see](./A.md#missing)\n")
    report = validate_links(build_doc_context(a, b), [a, b])
    assert report == {b: [LinkError.dead_label_link("A.md", "missing")]}


def test_dead_file_link_for_missing_file(write_md, build_doc_context):
    b = write_md("B.md", "[see](./Nope.md#missing)\n")
    report = validate_links(build_doc_context(b), [b])
    assert report == {b: [LinkError.dead_file_link("Nope.md", "missing")]}


def test_dead_file_link_for_file_outside_the_document(write_md, build_doc_context):
    write_md("A.md", "## Intro\n")
    b = write_md("B.md", "[see](./A.md#intro)\n")
    # A.md exists on disk but is not an input file
    report = validate_links(build_doc_context(b), [b])
    assert report[b][0].kind is LinkErrorKind.DEAD_FILE_LINK


def test_unknown_file_is_reported_before_label(write_md, build_doc_context):
    b = write_md("B.md", "[see](./Nope.md#intro)\n")
    (error,) = validate_links(build_doc_context(b), [b])[b]
    assert error.kind is LinkErrorKind.DEAD_FILE_LINK


def test_label_clash(write_md, build_doc_context):
    a = write_md("A.md", "# Intro\n# Intro\n")
    b = write_md("B.md", "[see](./A.md#intro)\n")
    report = validate_links(build_doc_context(a, b), [a, b])
    assert report == {b: [LinkError.label_clash("A.md", "intro")]}


def test_direct_link(write_md, build_doc_context):
    a = write_md("A.md", "# Intro\n")
    c = write_md("C.md", "[whole file](./A.md)\n")
    report = validate_links(build_doc_context(a, c), [a, c])
    assert report == {c: [LinkError.direct_link("A.md")]}


def test_target_is_resolved_from_the_source_directory(write_md, build_doc_context):
    a = write_md("guide/A.md", "# Intro\n")
    b = write_md("guide/B.md", "[ok](./A.md#intro) [bad](./B2.md#intro)\n")
    report = validate_links(build_doc_context(a, b), [a, b])
    assert report == {b: [LinkError.dead_file_link("guide/B2.md", "intro")]}


def test_aliased_paths_reach_the_same_file(write_md, build_doc_context):
    a = write_md("one/A.md", "# Intro\n")
    b = write_md("two/B.md", "[see](./../one/A.md#intro)\n")
    assert validate_links(build_doc_context(a, b), [a, b]) == {}


def test_errors_grouped_by_source_in_input_order(write_md, build_doc_context):
    a = write_md("A.md", "# Intro\n[x](./B.md#gone)\n")
    b = write_md("B.md", "# Usage\n[y](./A.md)\n[z](./A.md#also-gone)\n")
    c = write_md("C.md", "[fine](./A.md#intro)\n")
    report = validate_links(build_doc_context(a, b, c), [a, b, c])

    assert list(report) == [a, b]
    assert report[b] == [LinkError.direct_link("A.md"), LinkError.dead_label_link("A.md", "also-gone")]


def test_local_links_ignored_by_default(write_md, build_doc_context):
    a = write_md("A.md", "# Intro\n[up](#nowhere)\n")
    assert validate_file_links(build_doc_context(a), a) == []


def test_local_links_checked_when_enabled(write_md, build_doc_context):
    a = write_md("A.md", "# Intro\n# Twice\n# Twice\n[up](#intro) [x](#nowhere) [y](#twice)\n")
    errors = validate_file_links(build_doc_context(a), a, local_links=True)
    assert errors == [LinkError.dead_label_link("A.md", "nowhere"), LinkError.label_clash("A.md", "twice")]


def test_link_error_descriptions():
    assert LinkError.label_clash("A.md", "x").describe() == 'link to overloaded label "x" in file "A.md"'
    assert LinkError.dead_label_link("A.md", "x").describe() == 'link to inexistent label "x" in file "A.md"'
    assert LinkError.dead_file_link("A.md", "x").describe() == 'link to inexistent file "A.md" (label is "x")'
    assert LinkError.direct_link("A.md").describe() == "direct link to file A.md"
    assert LinkError.direct_link("A.md").to_dict() == {
        "kind": "direct_link",
        "file": "A.md",
        "label": None,
        "message": "direct link to file A.md",
    }
