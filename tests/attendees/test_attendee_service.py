from __future__ import annotations

import pytest

from conference_registration.core.exceptions import ConflictError, NotFoundError, ValidationError


def test_create_assigns_id_and_timestamp(container):
    attendee = container.attendee_service.create(name="  John Doe ", email="john@example.com", phone="555-0101")

    assert attendee.attendee_id == 1
    assert attendee.name == "John Doe"
    assert attendee.phone == "555-0101"
    assert attendee.registration_date is not None


def test_blank_phone_is_stored_as_none(container):
    attendee = container.attendee_service.create(name="Jane", email="jane@example.com", phone="  ")
    assert attendee.phone is None


@pytest.mark.parametrize("name, email", [("", "a@example.com"), ("Ann", ""), (None, "a@example.com"), ("Ann", None)])
def test_name_and_email_are_required(container, name, email):
    with pytest.raises(ValidationError, match="Name and email are required"):
        container.attendee_service.create(name=name, email=email)


def test_duplicate_email_is_a_conflict_and_count_unchanged(container, make_attendee):
    make_attendee(email="dup@example.com")

    with pytest.raises(ConflictError, match="Email already exists"):
        container.attendee_service.create(name="Other", email="dup@example.com")

    assert len(container.attendee_service.list()) == 1


def test_email_uniqueness_ignores_case(container, make_attendee):
    make_attendee(email="Case@Example.com")

    with pytest.raises(ConflictError):
        container.attendee_service.create(name="Other", email="case@example.com")


def test_list_is_newest_first(container, make_attendee):
    first, second = make_attendee(), make_attendee()

    assert [a.attendee_id for a in container.attendee_service.list()] == [second.attendee_id, first.attendee_id]


def test_get_unknown_is_not_found(container):
    with pytest.raises(NotFoundError, match="Attendee not found"):
        container.attendee_service.get(42)


def test_update_replaces_fields_and_keeps_timestamp(container, make_attendee):
    attendee = make_attendee(phone="555")

    updated = container.attendee_service.update(
        attendee.attendee_id, name="New Name", email="new@example.com", phone=None
    )

    assert updated.attendee_id == attendee.attendee_id
    assert (updated.name, updated.email, updated.phone) == ("New Name", "new@example.com", None)
    assert updated.registration_date == attendee.registration_date


def test_update_may_keep_own_email(container, make_attendee):
    attendee = make_attendee(email="keep@example.com")

    updated = container.attendee_service.update(attendee.attendee_id, name="Renamed", email="keep@example.com")

    assert updated.name == "Renamed"


def test_update_to_someone_elses_email_is_a_conflict(container, make_attendee):
    make_attendee(email="taken@example.com")
    other = make_attendee()

    with pytest.raises(ConflictError):
        container.attendee_service.update(other.attendee_id, name="x", email="taken@example.com")


def test_update_unknown_is_not_found(container):
    with pytest.raises(NotFoundError):
        container.attendee_service.update(9, name="x", email="x@example.com")


def test_update_requires_fields(container, make_attendee):
    attendee = make_attendee()
    with pytest.raises(ValidationError):
        container.attendee_service.update(attendee.attendee_id, name="", email="x@example.com")


def test_delete_cascades_to_registrations(container, make_attendee, make_session):
    attendee = make_attendee()
    keeper = make_attendee()
    s1, s2 = make_session("One", capacity=5), make_session("Two", capacity=5)
    for s in (s1, s2):
        container.registration_service.register(attendee.attendee_id, s.session_id)
    container.registration_service.register(keeper.attendee_id, s1.session_id)

    container.attendee_service.delete(attendee.attendee_id)

    assert list(container.registration_service.list_for_attendee(attendee.attendee_id)) == []
    assert container.registration_service.session_details(s1.session_id).registered == 1
    assert container.registration_service.session_details(s2.session_id).registered == 0


def test_delete_unknown_is_not_found(container):
    with pytest.raises(NotFoundError):
        container.attendee_service.delete(3)
