from __future__ import annotations

import copy

import pytest

from picotags.plugin import RequestState, TagsPlugin, TagsPluginConfig


def _raw_pages() -> dict[str, dict]:
    return {
        "p1": {"id": "p1", "meta": {"tags": "x,y", "filter": ""}},
        "p2": {"id": "p2", "meta": {"tags": "y,z", "filter": ""}},
        "p3": {"id": "p3", "meta": {"tags": "", "filter": ""}},
    }


def _current(filter_value: object) -> dict:
    return {"id": "index", "meta": {"tags": "", "filter": filter_value}}


@pytest.fixture
def plugin() -> TagsPlugin:
    return TagsPlugin()


def test_header_fields(plugin: TagsPlugin) -> None:
    assert plugin.on_header_fields_requested() == {"tags": "Tags", "filter": "Filter"}
    custom = TagsPlugin(TagsPluginConfig(tags_header="Labels", filter_header="Show"))
    assert custom.on_header_fields_requested() == {"tags": "Labels", "filter": "Show"}


def test_on_meta_parsed_returns_normalized_fields(plugin: TagsPlugin) -> None:
    meta = {"title": "Hello", "tags": "a, b", "filter": None}
    updates = plugin.on_meta_parsed(meta)
    assert updates == {"tags": ["a", "b"], "filter": []}
    assert meta["tags"] == "a, b"


def test_on_meta_parsed_missing_fields(plugin: TagsPlugin) -> None:
    assert plugin.on_meta_parsed({}) == {"tags": [], "filter": []}


@pytest.mark.parametrize(
    ("filter_value", "expected"),
    [
        ("x", ["p1"]),
        ("y", ["p1", "p2"]),
        ("z, x", ["p1", "p2"]),
    ],
)
def test_filter_end_to_end(
    plugin: TagsPlugin, filter_value: str, expected: list[str]
) -> None:
    result = plugin.on_pages_loaded(_raw_pages(), _current(filter_value))
    assert list(result.state.filtered_pages) == expected
    variables = plugin.on_render_data_requested(result.state)
    assert list(variables["filtered_pages"]) == expected


@pytest.mark.parametrize("filter_value", ["", None, []])
def test_no_filter_leaves_pages_unfiltered(
    plugin: TagsPlugin, filter_value: object
) -> None:
    result = plugin.on_pages_loaded(_raw_pages(), _current(filter_value))
    assert result.state.filtered_pages == {}
    assert list(result.pages) == ["p1", "p2", "p3"]
    assert "filtered_pages" not in plugin.on_render_data_requested(result.state)


def test_tags_normalized_on_every_page(plugin: TagsPlugin) -> None:
    result = plugin.on_pages_loaded(_raw_pages(), None)
    assert result.pages["p1"]["meta"]["tags"] == ["x", "y"]
    assert result.pages["p2"]["meta"]["tags"] == ["y", "z"]
    assert result.pages["p3"]["meta"]["tags"] == []
    assert result.state == RequestState()


def test_inputs_are_not_mutated(plugin: TagsPlugin) -> None:
    pages = _raw_pages()
    snapshot = copy.deepcopy(pages)
    plugin.on_pages_loaded(pages, _current("x"))
    assert pages == snapshot


def test_second_invocation_keeps_normalized_tags(plugin: TagsPlugin) -> None:
    pages = {
        "p1": {"meta": {"tags": ["a, b", "c"]}},
        "p2": {"meta": {"tags": "a, b"}},
    }
    first = plugin.on_pages_loaded(pages, None)
    second = plugin.on_pages_loaded(first.pages, None)
    assert second.pages["p1"]["meta"]["tags"] == ["a, b", "c"]
    assert second.pages["p2"]["meta"]["tags"] == ["a", "b"]
    assert second.pages == first.pages


def test_page_without_meta_gets_empty_tags(plugin: TagsPlugin) -> None:
    result = plugin.on_pages_loaded({"bare": {"id": "bare"}}, None)
    assert result.pages["bare"]["meta"]["tags"] == []


def test_page_tags_come_from_current_page(plugin: TagsPlugin) -> None:
    current = {"meta": {"tags": "news, release", "filter": ""}}
    result = plugin.on_pages_loaded(_raw_pages(), current)
    assert result.state.page_tags == ("news", "release")
    variables = plugin.on_render_data_requested(result.state)
    assert variables == {"page_tags": ["news", "release"]}


def test_render_data_uses_configured_names() -> None:
    plugin = TagsPlugin(
        TagsPluginConfig(filtered_pages_variable="posts", page_tags_variable="labels")
    )
    state = RequestState(filtered_pages={"p1": {"meta": {}}}, page_tags=("a",))
    assert set(plugin.on_render_data_requested(state)) == {"posts", "labels"}


def test_filter_without_matches_is_not_exposed(plugin: TagsPlugin) -> None:
    result = plugin.on_pages_loaded(_raw_pages(), _current("missing"))
    assert result.state.filtered_pages == {}
    assert plugin.on_render_data_requested(result.state) == {}


def test_requests_do_not_share_state(plugin: TagsPlugin) -> None:
    first = plugin.on_pages_loaded(_raw_pages(), _current("x"))
    second = plugin.on_pages_loaded(_raw_pages(), _current(""))
    assert list(first.state.filtered_pages) == ["p1"]
    assert second.state.filtered_pages == {}


def test_non_string_labels_are_dropped(plugin: TagsPlugin) -> None:
    pages = {
        "p1": {"meta": {"tags": [{"a": 1}]}},
        "p2": {"meta": {"tags": [["x"], "x"]}},
    }
    result = plugin.on_pages_loaded(pages, {"meta": {"filter": ["x", {"b": 2}]}})
    assert result.pages["p1"]["meta"]["tags"] == []
    assert result.pages["p2"]["meta"]["tags"] == ["x"]
    assert list(result.state.filtered_pages) == ["p2"]
    assert plugin.on_meta_parsed({"tags": [1, "a"], "filter": [None]}) == {
        "tags": ["a"],
        "filter": [],
    }
