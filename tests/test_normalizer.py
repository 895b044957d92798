"""Tests for alias resolution and the validation gate."""

import pytest

from ycard.core.aliases import JOB_ALIASES, PERSON_ALIASES, resolve
from ycard.core.errors import DocumentValidationError, IssueKind
from ycard.core.normalizer import (
    normalize_document,
    normalize_person,
    normalize_ycard,
    resolve_person_fields,
)


def _kinds(result):
    return {issue.kind for issue in result.issues}


class TestAliasPriority:
    """Canonical keys win, then aliases in their fixed order."""

    def test_canonical_beats_alias(self):
        """Test canonical name wins over an alias."""
        result = normalize_person({"uid": "j", "name": "John", "nombre": "Juan"})

        assert result.person.name == "John"

    def test_canonical_beats_alias_whatever_the_key_order(self):
        """Test that input key order does not matter."""
        result = normalize_person({"nombre": "Juan", "uid": "j", "name": "John"})

        assert result.person.name == "John"

    @pytest.mark.parametrize(
        "raw, field, expected",
        [
            ({"displayName": "JD", "nombre": "Juan"}, "name", "Juan"),
            ({"nombre": "Juan", "displayName": "JD"}, "name", "Juan"),
            ({"lastName": "Doe", "sn": "Smith", "apellido": "Pérez"}, "surname", "Pérez"),
            ({"lastName": "Doe", "sn": "Smith"}, "surname", "Smith"),
            ({"role": "Engineer", "puesto": "Ingeniera"}, "title", "Ingeniera"),
            ({"mail": "m@x.com", "correo": "c@x.com"}, "email", "c@x.com"),
            ({"company": "Co", "organization": "Org"}, "org", "Org"),
            ({"ou": "OU", "department": "Dept"}, "org_unit", "Dept"),
            ({"boss": "b", "上司": "s", "jefe": "j"}, "manager", "j"),
            ({"boss": "b", "上司": "s"}, "manager", "s"),
        ],
    )
    def test_first_alias_in_priority_order_wins(self, raw, field, expected):
        """Test that the earliest alias in the priority list wins."""
        result = normalize_person({"uid": "a", **raw})

        assert getattr(result.person, field) == expected

    def test_null_value_falls_through(self):
        """Test that a key present with a null value does not win."""
        result = normalize_person({"uid": "a", "name": None, "nombre": "Juan"})

        assert result.person.name == "Juan"

    def test_id_alias_for_uid(self):
        """Test that 'id' stands in for 'uid' and 'uid' wins when both exist."""
        assert normalize_person({"id": "x"}).person.uid == "x"
        assert normalize_person({"id": "x", "uid": "y"}).person.uid == "y"

    def test_phone_and_address_aliases(self):
        """Test directory-protocol aliases for phone and address."""
        result = normalize_person(
            {"uid": "a", "tel": ["555"], "adr": {"city": "Springfield"}}
        )

        assert result.person.phone == ("555",)
        assert result.person.address.city == "Springfield"

    def test_no_alias_key_survives(self):
        """Test that only canonical field names remain after resolution."""
        resolved = resolve_person_fields(
            {"id": "a", "nombre": "Ann", "sn": "Lee", "jefe": "b", "favorite": "blue"}
        )

        assert set(resolved) == {"uid", "name", "surname", "manager"}
        assert set(resolved) <= set(PERSON_ALIASES)

    def test_unknown_keys_are_ignored(self):
        """Test that unknown input keys are not errors."""
        result = normalize_person({"uid": "a", "favorite_color": "blue"})

        assert result.ok
        assert "favorite_color" not in result.person.model_dump()

    def test_resolve_reports_winning_key(self):
        """Test the low-level resolver."""
        assert resolve({"sn": "Lee", "apellido": "P"}, PERSON_ALIASES["surname"]) == ("apellido", "P")
        assert resolve({}, PERSON_ALIASES["surname"]) == (None, None)


class TestJobs:
    """Job entries go through the same fallback chains."""

    def test_job_aliases_and_defaults(self):
        """Test role/manager aliases and default values."""
        result = normalize_person({"uid": "a", "jobs": [{"title": "CTO", "jefe": "ceo"}]})
        job = result.person.jobs[0]

        assert job.role == "CTO"
        assert job.manager == "ceo"
        assert job.fte == 1
        assert job.dotted == ()
        assert job.primary is False

    def test_role_beats_title(self):
        """Test that canonical role wins over its alias."""
        result = normalize_person({"uid": "a", "jobs": [{"title": "T", "role": "R"}]})

        assert result.person.jobs[0].role == "R"

    def test_job_table_is_canonical_first(self):
        """Test that every job priority list starts with its canonical key."""
        for field, keys in JOB_ALIASES.items():
            assert keys[0] == field


class TestI18n:
    """Translation tables are structurally validated and alias-folded."""

    def test_aliased_fields_are_folded(self):
        """Test that aliased i18n field names are mapped to canonical ones."""
        result = normalize_person(
            {
                "uid": "a",
                "i18n": {
                    "apellido": {"es": "García"},
                    "puesto": {"es": "Jefa"},
                    "title": {"en": "Chief"},
                    "bio": {"en": "Hello"},
                },
            }
        )

        assert result.person.i18n == {
            "surname": {"es": "García"},
            "title": {"en": "Chief"},
            "bio": {"en": "Hello"},
        }

    def test_malformed_translations_are_type_mismatch(self):
        """Test that i18n must map fields to mappings of strings."""
        result = normalize_person({"uid": "a", "i18n": {"name": "not-a-mapping"}})

        assert not result.ok
        assert _kinds(result) == {IssueKind.TYPE_MISMATCH}

    def test_odd_language_codes_do_not_fail(self):
        """Test that language-code format is not checked during normalization."""
        result = normalize_person({"uid": "a", "i18n": {"name": {"English": "Ann"}}})

        assert result.ok


class TestValidationGate:
    """Structural and range checks, collected all at once."""

    def test_fte_in_range_accepted(self):
        """Test fte=0.8 is accepted."""
        result = normalize_person({"uid": "a", "jobs": [{"fte": 0.8}]})

        assert result.ok
        assert result.person.jobs[0].fte == 0.8

    def test_fte_out_of_range_rejected(self):
        """Test fte=1.5 is rejected as out of range."""
        result = normalize_person({"uid": "a", "jobs": [{"fte": 1.5}]})

        assert not result.ok
        assert _kinds(result) == {IssueKind.OUT_OF_RANGE_VALUE}
        assert result.issues[0].path == "jobs.0.fte"

    def test_missing_uid(self):
        """Test a person with neither uid nor id."""
        result = normalize_person({"name": "Ann"})

        assert not result.ok
        assert _kinds(result) == {IssueKind.MISSING_REQUIRED_FIELD}
        assert result.issues[0].path == "uid"

    def test_empty_uid(self):
        """Test that an empty uid counts as missing."""
        result = normalize_person({"uid": ""})

        assert _kinds(result) == {IssueKind.MISSING_REQUIRED_FIELD}

    def test_uid_only_is_valid(self):
        """Test that every other field is optional."""
        assert normalize_person({"uid": "a"}).ok

    @pytest.mark.parametrize(
        "raw",
        [
            {"email": 5},
            {"email": {"work": "a@x.com"}},
            {"email": ["a@x.com", 7]},
            {"phone": [{"type": "home"}]},
            {"phone": [["555"]]},
            {"address": "1 Main St"},
            {"jobs": "CTO"},
        ],
    )
    def test_wrong_shapes_are_type_mismatch(self, raw):
        """Test that values not matching their declared shape are type mismatches."""
        result = normalize_person({"uid": "a", **raw})

        assert not result.ok
        assert _kinds(result) == {IssueKind.TYPE_MISMATCH}

    def test_all_issues_are_collected(self):
        """Test that validation does not stop at the first problem."""
        result = normalize_person(
            {"email": 5, "jobs": [{"fte": 1.5}, {"fte": -1}]}
        )

        assert _kinds(result) == {
            IssueKind.MISSING_REQUIRED_FIELD,
            IssueKind.TYPE_MISMATCH,
            IssueKind.OUT_OF_RANGE_VALUE,
        }
        paths = {issue.path for issue in result.issues}
        assert {"uid", "jobs.0.fte", "jobs.1.fte"} <= paths

    def test_non_mapping_person(self):
        """Test a person entry that is not a mapping."""
        result = normalize_person("jordan", path="people.0")

        assert _kinds(result) == {IssueKind.TYPE_MISMATCH}
        assert result.issues[0].path == "people.0"


class TestNormalizeDocument:
    """Document-level normalization."""

    def test_issues_from_every_person(self):
        """Test that every person is checked and issues carry their position."""
        result = normalize_document(
            {
                "people": [
                    {"uid": "a"},
                    {"name": "no uid"},
                    {"uid": "c", "jobs": [{"fte": 2}]},
                ]
            }
        )

        assert not result.ok
        assert result.document.uids() == ["a"]
        assert [issue.path for issue in result.issues] == ["people.1.uid", "people.2.jobs.0.fte"]

    def test_bad_roots(self):
        """Test documents without a usable people list."""
        assert normalize_document([]).issues[0].kind == IssueKind.TYPE_MISMATCH
        assert normalize_document({}).issues[0].kind == IssueKind.MISSING_REQUIRED_FIELD
        assert normalize_document({"people": {"uid": "a"}}).issues[0].kind == IssueKind.TYPE_MISMATCH

    def test_duplicate_uids_are_not_errors(self):
        """Test that duplicate uids pass normalization."""
        result = normalize_document({"people": [{"uid": "a"}, {"uid": "a"}]})

        assert result.ok
        assert len(result.document) == 2

    def test_normalize_ycard_raises_with_all_issues(self):
        """Test the raising variant."""
        with pytest.raises(DocumentValidationError) as exc_info:
            normalize_ycard({"people": [{"name": "x"}, {"uid": "b", "jobs": [{"fte": 3}]}]})

        assert len(exc_info.value.issues) == 2
