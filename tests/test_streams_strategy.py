"""Tests for the streams strategy."""

from unittest.mock import MagicMock

import pytest

from ontask.core.checkboxes import FinderContext
from ontask.core.streams import Stream
from ontask.strategies import StreamsStrategy


def make_provider(streams, available=True):
    provider = MagicMock()
    provider.is_available.return_value = available
    provider.get_all_streams.return_value = streams
    return provider


@pytest.fixture
def streams():
    return [
        Stream(id="1", name="Work", folder="Streams/Work"),
        Stream(id="2", name="Personal", folder="Streams/Personal"),
    ]


@pytest.fixture
def vault(make_vault):
    return make_vault(
        {
            "Streams/Work/2024-01-14.md": "- [ ] work old\n",
            "Streams/Work/2024-01-15.md": "- [ ] work a\n- [x] work b\n",
            "Streams/Personal/2024-01-15.md": "- [ ] personal a\n",
            "Streams/Personal/Someday.md": "- [ ] personal someday\n",
            "Elsewhere/2024-01-15.md": "- [ ] not a stream\n",
        }
    )


class TestStreamsStrategy:
    def test_name_and_label(self, vault, matcher, streams):
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        assert strategy.name == "streams"
        assert strategy.source_name == "Streams"

    def test_merges_streams_in_provider_order(self, vault, matcher, streams):
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        items = strategy.find_checkboxes(FinderContext())

        assert [i.checkbox_text for i in items] == [
            "work old",
            "work a",
            "work b",
            "personal a",
            "personal someday",
        ]
        assert all(i.source_name == "Streams" for i in items)
        assert "not a stream" not in [i.checkbox_text for i in items]

    def test_source_path_is_document_path(self, vault, matcher, streams):
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        items = strategy.find_checkboxes(FinderContext())
        assert all(i.source_path == i.document.path for i in items)

    def test_limit_is_shared_across_streams(self, vault, matcher, streams):
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        items = strategy.find_checkboxes(FinderContext(limit=4))
        assert [i.checkbox_text for i in items] == ["work old", "work a", "work b", "personal a"]

    def test_today_filter(self, vault, matcher, streams):
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        items = strategy.find_checkboxes(FinderContext(only_show_today=True))
        assert [i.checkbox_text for i in items] == ["work a", "work b", "personal a"]

    def test_unavailable_provider(self, matcher, streams):
        store = MagicMock()
        provider = make_provider(streams, available=False)
        strategy = StreamsStrategy(store, matcher, provider)

        assert strategy.is_available() is False
        assert strategy.find_checkboxes(FinderContext()) == []
        provider.get_all_streams.assert_not_called()
        store.read.assert_not_called()

    def test_no_streams_does_not_touch_store(self, matcher):
        store = MagicMock()
        strategy = StreamsStrategy(store, matcher, make_provider([]))

        assert strategy.find_checkboxes(FinderContext()) == []
        store.get_document.assert_not_called()
        store.list_documents.assert_not_called()
        store.read.assert_not_called()

    def test_provider_failure_degrades_to_empty(self, vault, matcher):
        provider = make_provider([])
        provider.get_all_streams.side_effect = RuntimeError("plugin crashed")
        strategy = StreamsStrategy(vault, matcher, provider)
        assert strategy.find_checkboxes(FinderContext()) == []

    def test_availability_failure_degrades_to_empty(self, vault, matcher, streams):
        provider = make_provider(streams)
        provider.is_available.side_effect = RuntimeError("plugin crashed")
        strategy = StreamsStrategy(vault, matcher, provider)
        assert strategy.find_checkboxes(FinderContext()) == []

    def test_skips_streams_without_folder(self, vault, matcher):
        streams = [
            Stream(id="1", name="Blank", folder="  "),
            Stream(id="2", name="Personal", folder="Streams/Personal"),
        ]
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        items = strategy.find_checkboxes(FinderContext())
        assert [i.checkbox_text for i in items] == ["personal a", "personal someday"]

    def test_missing_stream_folder_contributes_nothing(self, vault, matcher):
        streams = [
            Stream(id="1", name="Gone", folder="Streams/Gone"),
            Stream(id="2", name="Work", folder="Streams/Work"),
        ]
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        items = strategy.find_checkboxes(FinderContext())
        assert len(items) == 3

    def test_stream_backed_by_single_note(self, vault, matcher):
        streams = [Stream(id="1", name="Someday", folder="Streams/Personal/Someday.md")]
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        items = strategy.find_checkboxes(FinderContext())
        assert [i.checkbox_text for i in items] == ["personal someday"]

    def test_explicit_file_paths_bypass_streams(self, vault, matcher, streams):
        provider = make_provider(streams)
        strategy = StreamsStrategy(vault, matcher, provider)
        items = strategy.find_checkboxes(
            FinderContext(file_paths=["Streams/Personal/Someday.md"])
        )
        assert [i.checkbox_text for i in items] == ["personal someday"]
        provider.get_all_streams.assert_not_called()

    def test_get_configuration(self, vault, matcher, streams):
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        assert strategy.get_configuration() == {"streams": ["Work", "Personal"]}


class TestFindCheckboxesInStream:
    def test_scans_only_that_stream(self, vault, matcher, streams):
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        items = strategy.find_checkboxes_in_stream(streams[1], FinderContext())
        assert [i.checkbox_text for i in items] == ["personal a", "personal someday"]
        assert all(i.source_name == "Streams" for i in items)

    def test_has_its_own_limit(self, vault, matcher, streams):
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        items = strategy.find_checkboxes_in_stream(streams[0], FinderContext(limit=2))
        assert [i.checkbox_text for i in items] == ["work old", "work a"]

    def test_today_filter(self, vault, matcher, streams):
        strategy = StreamsStrategy(vault, matcher, make_provider(streams))
        items = strategy.find_checkboxes_in_stream(
            streams[0], FinderContext(only_show_today=True)
        )
        assert [i.checkbox_text for i in items] == ["work a", "work b"]

    def test_empty_when_unavailable(self, vault, matcher, streams):
        strategy = StreamsStrategy(vault, matcher, make_provider(streams, available=False))
        assert strategy.find_checkboxes_in_stream(streams[0], FinderContext()) == []
