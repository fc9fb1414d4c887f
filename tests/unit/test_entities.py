"""
Unit tests for repeatable form rows and the slug field.
"""

import pydantic
import pytest

from form.entities import EntityList, IdSequence, SlugField
from models.procedure import Procedure
from models.professional import Professional


@pytest.fixture
def professionals():
    return EntityList(lambda row_id: Professional(id=row_id))


class TestEntityList:
    """Test add/remove/update by id."""

    def test_starts_with_one_stub(self, professionals):
        assert len(professionals) == 1
        stub = next(iter(professionals))
        assert stub.professional_name == ""
        assert stub.is_draft()

    def test_add_appends_with_fresh_id(self, professionals):
        first_id = professionals.ids()[0]
        second_id = professionals.add()
        third_id = professionals.add()

        assert professionals.ids() == [first_id, second_id, third_id]
        assert len({first_id, second_id, third_id}) == 3

    def test_remove_by_id(self, professionals):
        first_id = professionals.ids()[0]
        second_id = professionals.add()

        assert professionals.remove(first_id) is True
        assert professionals.ids() == [second_id]

    def test_remove_last_is_refused(self, professionals):
        only_id = professionals.ids()[0]

        assert professionals.remove(only_id) is False
        assert professionals.ids() == [only_id]

    def test_remove_unknown_id(self, professionals):
        professionals.add()
        assert professionals.remove("missing") is False
        assert len(professionals) == 2

    def test_update_targets_id_not_position(self, professionals):
        first_id = professionals.ids()[0]
        second_id = professionals.add()
        professionals.remove(first_id)
        third_id = professionals.add()

        professionals.update(third_id, "professional_name", "Ana")

        assert professionals.get(third_id).professional_name == "Ana"
        assert professionals.get(second_id).professional_name == ""

    def test_update_unknown_id_is_noop(self, professionals):
        assert professionals.update("missing", "professional_name", "Ana") is False
        assert all(row.is_draft() for row in professionals)

    def test_update_unknown_field_raises(self, professionals):
        row_id = professionals.ids()[0]
        with pytest.raises(ValueError):
            professionals.update(row_id, "nickname", "Ana")
        with pytest.raises(ValueError):
            professionals.update(row_id, "id", "99")

    def test_update_validates_value(self, professionals):
        row_id = professionals.ids()[0]
        with pytest.raises(pydantic.ValidationError):
            professionals.update(row_id, "profession", "astrologo")

    def test_submittable_excludes_drafts(self, professionals):
        named_id = professionals.add()
        professionals.update(named_id, "professional_name", "Ana")
        blank_id = professionals.add()
        professionals.update(blank_id, "professional_name", "   ")

        assert [row.id for row in professionals.submittable()] == [named_id]

    def test_reset_keeps_ids_unique(self, professionals):
        old_ids = set(professionals.ids())
        professionals.add()
        professionals.reset()

        assert len(professionals) == 1
        assert not old_ids & set(professionals.ids())

    def test_shared_id_sequence(self):
        ids = IdSequence()
        professionals = EntityList(lambda row_id: Professional(id=row_id), ids)
        procedures = EntityList(lambda row_id: Procedure(id=row_id), ids)

        assert set(professionals.ids()).isdisjoint(procedures.ids())


class TestSlugField:
    """Test derived-then-sticky slug."""

    def test_derive_until_touched(self):
        slug = SlugField()

        assert slug.derive("clinica") is True
        assert slug.value == "clinica"

        slug.edit("minha_clinica")
        assert slug.derive("clinica_nova") is False
        assert slug.value == "minha_clinica"

    def test_touched_even_when_equal_to_derived(self):
        slug = SlugField()
        slug.derive("clinica")
        slug.edit("clinica")

        slug.derive("outra")
        assert slug.value == "clinica"

    def test_reset(self):
        slug = SlugField()
        slug.edit("x")
        slug.reset()

        assert slug.value == ""
        assert slug.touched is False
