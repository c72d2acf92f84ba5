"""Spec model, graph and export tests."""

import warnings

import pytest

from spec_stream.core import DanglingReferenceWarning, JSONParseError
from spec_stream.document import Spec, dangling_references, section_ids, spec_to_react_code, walk
from spec_stream.document.codegen import EMPTY_SPEC_PLACEHOLDER, format_prop_value


@pytest.mark.unit
def test_empty_spec():
    """Test the empty document."""
    spec = Spec.empty()
    assert spec.is_empty()
    assert spec.root == ""
    assert spec.elements == {}
    assert spec.state is None
    assert spec.to_dict() == {"root": "", "elements": {}}


@pytest.mark.unit
def test_from_dict_normalizes():
    """Test a hand-edited document is cleaned up."""
    spec = Spec.from_dict(
        {
            "root": 5,
            "elements": {"a": {"type": "Text"}, "b": "junk", "c": {"type": "Box", "props": None}},
            "state": ["not", "a", "map"],
        }
    )
    assert spec.root == ""
    assert set(spec.elements) == {"a", "c"}
    assert spec.elements["a"]["props"] == {}
    assert spec.elements["c"]["props"] == {}
    assert spec.state is None


@pytest.mark.unit
def test_from_dict_copies_input():
    """Test the source mapping is not shared."""
    raw = {"root": "page", "elements": {"page": {"type": "PageRoot", "props": {}, "children": []}}}
    spec = Spec.from_dict(raw)
    raw["elements"]["page"]["children"].append("x")
    assert spec.elements["page"]["children"] == []


@pytest.mark.unit
def test_from_json():
    """Test parsing a spec from JSON text."""
    spec = Spec.from_json('{"root": "page", "elements": {}, "state": {"n": 1}}')
    assert spec.root == "page"
    assert spec.state == {"n": 1}

    with pytest.raises(JSONParseError):
        Spec.from_json("[1, 2]")
    with pytest.raises(JSONParseError):
        Spec.from_json("not json")


@pytest.mark.unit
def test_snapshot_is_independent(page_spec):
    """Test snapshots do not follow later mutations."""
    snap = page_spec.snapshot()
    page_spec.elements["hero"]["props"]["title"] = "Changed"
    assert snap.elements["hero"]["props"]["title"] == "Welcome"
    assert snap != page_spec


@pytest.mark.unit
def test_to_json_round_trip(page_spec):
    """Test JSON text export."""
    assert Spec.from_json(page_spec.to_json()) == page_spec
    assert "\n" in page_spec.to_json(indent=2)


@pytest.mark.unit
def test_element_view(page_spec):
    """Test the typed element view."""
    hero = page_spec.element("hero")
    assert hero.type == "HeroBlock"
    assert hero.props["variant"] == "hero83"
    assert hero.children == []
    assert page_spec.element("ghost") is None


@pytest.mark.unit
def test_walk_render_order():
    """Test depth-first order and depth."""
    spec = Spec(
        root="page",
        elements={
            "page": {"type": "PageRoot", "props": {}, "children": ["nav", "hero"]},
            "nav": {"type": "Nav", "props": {}, "children": ["logo"]},
            "logo": {"type": "Logo", "props": {}, "children": []},
            "hero": {"type": "Hero", "props": {}, "children": []},
        },
    )
    assert [(depth, element_id) for depth, element_id, _ in walk(spec)] == [
        (0, "page"),
        (1, "nav"),
        (2, "logo"),
        (1, "hero"),
    ]


@pytest.mark.unit
def test_walk_warns_on_dangling(page_spec):
    """Test missing children are skipped with a warning."""
    page_spec.elements["page"]["children"].append("pending")
    with pytest.warns(DanglingReferenceWarning):
        ids = [element_id for _, element_id, _ in walk(page_spec)]
    assert ids == ["page", "hero"]
    assert dangling_references(page_spec) == [("page", "pending")]


@pytest.mark.unit
def test_walk_stops_on_cycle():
    """Test a self-referencing tree terminates."""
    spec = Spec(
        root="a",
        elements={
            "a": {"type": "Box", "props": {}, "children": ["b"]},
            "b": {"type": "Box", "props": {}, "children": ["a"]},
        },
    )
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert [element_id for _, element_id, _ in walk(spec)] == ["a", "b"]


@pytest.mark.unit
def test_walk_empty_spec(empty_spec):
    """Test walking a spec without a root."""
    assert list(walk(empty_spec)) == []


@pytest.mark.unit
def test_section_ids(page_spec):
    """Test only existing root children are listed."""
    page_spec.elements["page"]["children"].append("later")
    assert section_ids(page_spec) == ["hero"]


@pytest.mark.unit
def test_format_prop_value():
    """Test JSX attribute formatting."""
    assert format_prop_value("say \"hi\"") == '"say \\"hi\\""'
    assert format_prop_value(True) == "{true}"
    assert format_prop_value(None) == "{null}"
    assert format_prop_value(3) == "{3}"
    assert format_prop_value(["a"]) == '{["a"]}'


@pytest.mark.unit
def test_spec_to_react_code(page_spec):
    """Test JSX export with a missing child."""
    page_spec.elements["page"]["children"].append("pending")
    assert spec_to_react_code(page_spec) == (
        "function GeneratedUI() {\n"
        "  return (\n"
        "  <PageRoot>\n"
        '    <HeroBlock title="Welcome" variant="hero83" />\n'
        "    {/* missing: pending */}\n"
        "  </PageRoot>\n"
        "  );\n"
        "}"
    )


@pytest.mark.unit
def test_spec_to_react_code_empty(empty_spec):
    """Test the placeholder for an empty spec."""
    assert spec_to_react_code(empty_spec) == EMPTY_SPEC_PLACEHOLDER
    assert spec_to_react_code(None) == EMPTY_SPEC_PLACEHOLDER
