"""Property-based tests for patch application and stream parsing."""

import pytest
from hypothesis import given, settings as hypothesis_settings, strategies as st

from spec_stream.core import safe_json_dumps
from spec_stream.document import Spec, get_value, join_path
from spec_stream.patch import apply_patch_batch, apply_spec_patch
from spec_stream.stream import MixedStreamParser, SpecStreamSession, compile_stream

pytestmark = pytest.mark.unit

keys = st.text(min_size=1, max_size=8)
ids = st.sampled_from(["page", "hero", "nav", "footer", "cta"])

json_values = st.recursive(
    st.none() | st.booleans() | st.integers(min_value=-(2 ** 53), max_value=2 ** 53) | st.text(max_size=12),
    lambda children: st.lists(children, max_size=4) | st.dictionaries(st.text(max_size=6), children, max_size=4),
    max_leaves=12,
)

elements = st.builds(
    lambda element_type, title: {"type": element_type, "props": {"title": title}, "children": []},
    st.sampled_from(["PageRoot", "HeroBlock", "Text"]),
    st.text(max_size=10),
)

patches = st.one_of(
    st.builds(lambda k, v: {"op": "add", "path": join_path("state", k), "value": v}, keys, json_values),
    st.builds(lambda k, v: {"op": "replace", "path": join_path("state", k), "value": v}, keys, json_values),
    st.builds(lambda k: {"op": "remove", "path": join_path("state", k)}, keys),
    st.builds(lambda i: {"op": "add", "path": "/root", "value": i}, ids),
    st.builds(lambda i, e: {"op": "add", "path": join_path("elements", i), "value": e}, ids, elements),
    st.builds(lambda p, c: {"op": "add", "path": join_path("elements", p, "children", "-"), "value": c}, ids, ids),
    st.builds(lambda i: {"op": "remove", "path": join_path("elements", i)}, ids),
    st.builds(lambda op: {"op": op, "path": "/root", "value": "x"}, st.sampled_from(["move", "copy", "test"])),
)

prose = st.text(alphabet="abcdefghij .!", min_size=1, max_size=20).filter(lambda s: s.strip())


def to_stream(items):
    """Render patches and prose lines as one JSONL-ish stream."""
    return "\n".join(item if isinstance(item, str) else safe_json_dumps(item) for item in items) + "\n"


@given(keys, keys, json_values)
def test_add_then_get(outer, inner, value):
    """Property test: a value added at a mapping path reads back equal."""
    spec = Spec.empty()
    path = join_path("state", outer, inner)
    apply_spec_patch(spec, {"op": "add", "path": path, "value": value})
    assert get_value(spec, path) == value


@given(st.dictionaries(keys, json_values, max_size=5), keys)
def test_remove_is_idempotent(state, key):
    """Property test: removing twice equals removing once."""
    spec = Spec(state=dict(state))
    remove = {"op": "remove", "path": join_path("state", key)}
    apply_spec_patch(spec, remove)
    once = spec.snapshot()
    apply_spec_patch(spec, remove)
    assert spec == once


@given(st.lists(json_values, max_size=10))
def test_appends_keep_order(items):
    """Property test: N appends yield the N values in order."""
    spec = Spec(state={"items": []})
    for item in items:
        apply_spec_patch(spec, {"op": "add", "path": "/state/items/-", "value": item})
    assert spec.state["items"] == items


@given(st.lists(patches, max_size=15))
def test_stream_and_batch_agree(patch_list):
    """Property test: the stream path and the batch path build the same spec."""
    streamed = compile_stream(to_stream(patch_list))

    batched = Spec.empty()
    apply_patch_batch(batched, {"patches": patch_list})

    assert streamed.to_json() == batched.to_json()


def record_events(chunks):
    """Push chunks through a parser and return its (kind, payload) events."""
    events = []
    parser = MixedStreamParser(
        on_patch=lambda patch: events.append(("patch", patch)),
        on_text=lambda line: events.append(("text", line)),
    )
    for chunk in chunks:
        parser.push(chunk)
    parser.flush()
    return events


@hypothesis_settings(max_examples=50)
@given(st.lists(st.one_of(patches, prose), min_size=1, max_size=10), st.data())
def test_chunk_boundaries_do_not_matter(items, data):
    """Property test: any chunking of the stream gives the same event sequence."""
    text = to_stream(items)
    cuts = sorted(data.draw(st.lists(st.integers(min_value=0, max_value=len(text)), max_size=8)))
    bounds = [0] + cuts + [len(text)]
    chunks = [text[start:end] for start, end in zip(bounds, bounds[1:])]

    events = record_events(chunks)
    assert events == record_events([text])
    assert [kind for kind, _ in events] == ["text" if isinstance(item, str) else "patch" for item in items]

    session = SpecStreamSession()
    for chunk in chunks:
        session.push(chunk)
    assert session.flush().to_json() == compile_stream(text).to_json()


@given(st.lists(st.one_of(patches, prose), max_size=10))
def test_compile_is_deterministic(items):
    """Property test: the same stream always builds the same spec."""
    text = to_stream(items)
    assert compile_stream(text) == compile_stream(text)
