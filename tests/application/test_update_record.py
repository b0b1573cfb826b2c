"""Tests for the Update Record use case."""

import pytest

from recordstore.application.dto import UpdateRecordCommand
from recordstore.application.update_record import UpdateRecordHandler
from recordstore.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from recordstore.domain.model.record import RecordFormat
from recordstore.domain.model.release_metadata import ReleaseMetadata
from recordstore.domain.model.value_objects import Money
from tests.fakes import FakeMetadataProvider, FakeRecordRepository, make_record

RECORD_ID = "a" * 24
OTHER_ID = "b" * 24


def _setup(releases=None):
    repo = FakeRecordRepository([
        make_record(RECORD_ID, tracklist=["Old Track"], mbid="mb-old"),
        make_record(OTHER_ID, artist="Miles Davis", album="Kind of Blue"),
    ])
    provider = FakeMetadataProvider(releases)
    return UpdateRecordHandler(repo, provider), repo, provider


class TestUpdateRecord:

    def test_partial_update_changes_only_given_fields(self):
        handler, repo, _ = _setup()
        before = repo.get_by_id(RECORD_ID)

        dto = handler.handle(RECORD_ID, UpdateRecordCommand(price=Money.of("19.99"), qty=7))

        assert str(dto.price) == "19.99"
        assert dto.qty == 7
        assert dto.artist == before.artist
        assert dto.tracklist == ["Old Track"]
        assert dto.last_modified >= before.last_modified

    def test_missing_record(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Record not found"):
            handler.handle("0" * 24, UpdateRecordCommand(qty=1))

    def test_identity_clash_with_another_record(self):
        handler, repo, _ = _setup()

        with pytest.raises(DuplicateEntityError):
            handler.handle(RECORD_ID, UpdateRecordCommand(artist="Miles Davis", album="Kind of Blue"))
        assert repo.get_by_id(RECORD_ID).artist == "The Beatles"

    def test_identity_unchanged_is_not_a_clash_with_itself(self):
        handler, _, _ = _setup()
        dto = handler.handle(RECORD_ID, UpdateRecordCommand(artist="The Beatles"))
        assert dto.artist == "The Beatles"

    def test_new_mbid_replaces_tracklist(self):
        release = ReleaseMetadata(tracks=["Taxman", "Eleanor Rigby"])
        handler, repo, provider = _setup(releases={"mb-new": release})

        dto = handler.handle(RECORD_ID, UpdateRecordCommand(mbid="mb-new"))

        assert provider.calls == ["mb-new"]
        assert dto.mbid == "mb-new"
        assert repo.get_by_id(RECORD_ID).tracklist == ["Taxman", "Eleanor Rigby"]

    def test_failed_lookup_keeps_previous_tracklist(self):
        handler, repo, _ = _setup()

        dto = handler.handle(RECORD_ID, UpdateRecordCommand(mbid="mb-broken"))

        assert dto.mbid == "mb-broken"
        assert repo.get_by_id(RECORD_ID).tracklist == ["Old Track"]

    def test_same_mbid_is_not_refetched(self):
        handler, _, provider = _setup()
        handler.handle(RECORD_ID, UpdateRecordCommand(mbid="mb-old"))
        assert provider.calls == []

    def test_negative_stock_rejected_and_nothing_saved(self):
        handler, repo, _ = _setup()
        with pytest.raises(ValidationError):
            handler.handle(RECORD_ID, UpdateRecordCommand(qty=-1))
        assert repo.get_by_id(RECORD_ID).qty == 5

    def test_format_change_checked_for_identity(self):
        handler, _, _ = _setup()
        dto = handler.handle(RECORD_ID, UpdateRecordCommand(format=RecordFormat.DIGITAL))
        assert dto.format == "Digital"
