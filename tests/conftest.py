from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional

import pytest

from conference_registration.attendees.model import Attendee
from conference_registration.container import wire
from conference_registration.core.exceptions import ConflictError, DuplicateRegistrationError, NotFoundError
from conference_registration.registrations.model import (
    AttendeeRegistration,
    Registration,
    SessionDetails,
    SessionRegistrant,
)
from conference_registration.sessions.model import Session


class InMemoryStore:
    """Relational state shared by the in-memory repositories.

    Mirrors the MySQL schema: unique email (case-insensitive), unique
    (attendee, session) pair, cascading deletes, one lock per admission.
    """

    def __init__(self):
        self.attendees: dict[int, Attendee] = {}
        self.sessions: dict[int, Session] = {}
        self.registrations: dict[int, Registration] = {}
        self.lock = threading.RLock()
        self._ids = {"attendee": 0, "session": 0, "registration": 0}
        self._clock = datetime(2026, 3, 1, 9, 0, 0)

    def next_id(self, kind: str) -> int:
        self._ids[kind] += 1
        return self._ids[kind]

    def tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock


class InMemoryAttendees:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_by_id(self, attendee_id: int) -> Optional[Attendee]:
        return self._store.attendees.get(int(attendee_id))

    def get_by_email(self, email: str) -> Optional[Attendee]:
        for a in self._store.attendees.values():
            if a.email.casefold() == email.casefold():
                return a
        return None

    def list_all(self):
        return sorted(self._store.attendees.values(), key=lambda a: a.attendee_id, reverse=True)

    def create(self, *, name, email, phone) -> int:
        with self._store.lock:
            if self.get_by_email(email):
                raise ConflictError("Email already exists")
            attendee_id = self._store.next_id("attendee")
            self._store.attendees[attendee_id] = Attendee(
                attendee_id=attendee_id,
                name=name,
                email=email,
                phone=phone,
                registration_date=self._store.tick(),
            )
            return attendee_id

    def update(self, *, attendee_id, name, email, phone) -> bool:
        with self._store.lock:
            current = self._store.attendees.get(int(attendee_id))
            if not current:
                return False
            owner = self.get_by_email(email)
            if owner and owner.attendee_id != current.attendee_id:
                raise ConflictError("Email already exists")
            self._store.attendees[current.attendee_id] = replace(current, name=name, email=email, phone=phone)
            return True

    def delete(self, attendee_id: int) -> bool:
        with self._store.lock:
            if self._store.attendees.pop(int(attendee_id), None) is None:
                return False
            for rid, r in list(self._store.registrations.items()):
                if r.attendee_id == int(attendee_id):
                    del self._store.registrations[rid]
            return True


class InMemorySessions:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_by_id(self, session_id: int) -> Optional[Session]:
        return self._store.sessions.get(int(session_id))

    def list_all(self):
        return sorted(self._store.sessions.values(), key=lambda s: s.session_id, reverse=True)

    def create(self, *, title, speaker, time, location, description, capacity) -> int:
        with self._store.lock:
            session_id = self._store.next_id("session")
            self._store.sessions[session_id] = Session(
                session_id=session_id,
                title=title,
                speaker=speaker,
                time=time,
                location=location,
                description=description,
                capacity=capacity,
            )
            return session_id

    def update(self, *, session_id, title, speaker, time, location, description, capacity) -> bool:
        with self._store.lock:
            current = self._store.sessions.get(int(session_id))
            if not current:
                return False
            self._store.sessions[current.session_id] = replace(
                current,
                title=title,
                speaker=speaker,
                time=time,
                location=location,
                description=description,
                capacity=capacity,
            )
            return True

    def delete(self, session_id: int) -> bool:
        with self._store.lock:
            if self._store.sessions.pop(int(session_id), None) is None:
                return False
            for rid, r in list(self._store.registrations.items()):
                if r.session_id == int(session_id):
                    del self._store.registrations[rid]
            return True


class InMemoryAdmission:
    def __init__(self, store: InMemoryStore, session_id: int):
        self._store = store
        self._session_id = int(session_id)

    @property
    def session(self) -> Optional[Session]:
        return self._store.sessions.get(self._session_id)

    def occupancy(self) -> int:
        return sum(1 for r in self._store.registrations.values() if r.session_id == self._session_id)

    def has_registration(self, attendee_id: int) -> bool:
        return any(
            r.attendee_id == int(attendee_id) and r.session_id == self._session_id
            for r in self._store.registrations.values()
        )

    def attendee_exists(self, attendee_id: int) -> bool:
        return int(attendee_id) in self._store.attendees

    def insert(self, attendee_id: int) -> Registration:
        if int(attendee_id) not in self._store.attendees:
            raise NotFoundError("Attendee not found")
        if self.has_registration(attendee_id):
            raise DuplicateRegistrationError("Already registered for this session")
        registration_id = self._store.next_id("registration")
        registration = Registration(
            registration_id=registration_id,
            attendee_id=int(attendee_id),
            session_id=self._session_id,
            registration_date=self._store.tick(),
        )
        self._store.registrations[registration_id] = registration
        return registration


class InMemoryRegistrations:
    def __init__(self, store: InMemoryStore):
        self._store = store
        self.admissions_opened = 0

    @contextmanager
    def admission(self, session_id: int):
        with self._store.lock:
            self.admissions_opened += 1
            yield InMemoryAdmission(self._store, session_id)

    def delete(self, *, attendee_id: int, session_id: int) -> bool:
        with self._store.lock:
            for rid, r in list(self._store.registrations.items()):
                if r.attendee_id == int(attendee_id) and r.session_id == int(session_id):
                    del self._store.registrations[rid]
                    return True
            return False

    def session_details(self, session_id: int):
        with self._store.lock:
            session = self._store.sessions.get(int(session_id))
            if session is None:
                return None
            registered = sum(1 for r in self._store.registrations.values() if r.session_id == session.session_id)
            return SessionDetails(session=session, registered=registered)

    def list_for_session(self, session_id: int):
        rows = [
            SessionRegistrant(
                registration_id=r.registration_id,
                attendee_id=r.attendee_id,
                session_id=r.session_id,
                registration_date=r.registration_date,
                attendee_name=self._store.attendees[r.attendee_id].name,
                attendee_email=self._store.attendees[r.attendee_id].email,
            )
            for r in self._store.registrations.values()
            if r.session_id == int(session_id)
        ]
        rows.sort(key=lambda r: (r.registration_date, r.registration_id), reverse=True)
        return rows

    def list_for_attendee(self, attendee_id: int):
        rows = []
        for r in self._store.registrations.values():
            if r.attendee_id != int(attendee_id):
                continue
            s = self._store.sessions[r.session_id]
            rows.append(
                AttendeeRegistration(
                    registration_id=r.registration_id,
                    attendee_id=r.attendee_id,
                    session_id=r.session_id,
                    registration_date=r.registration_date,
                    session_title=s.title,
                    speaker=s.speaker,
                    time=s.time,
                    location=s.location,
                )
            )
        rows.sort(key=lambda r: (r.time, r.registration_id))
        return rows


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def container(store):
    return wire(
        attendees_repo=InMemoryAttendees(store),
        sessions_repo=InMemorySessions(store),
        registrations_repo=InMemoryRegistrations(store),
    )


@pytest.fixture
def make_attendee(container):
    counter = {"n": 0}

    def _make(name: Optional[str] = None, email: Optional[str] = None, phone: Optional[str] = None) -> Attendee:
        counter["n"] += 1
        n = counter["n"]
        return container.attendee_service.create(
            name=name or f"Attendee {n}",
            email=email or f"attendee{n}@example.com",
            phone=phone,
        )

    return _make


@pytest.fixture
def make_session(container):
    def _make(title: str = "Intro", *, capacity=None, time: str = "10:00 AM", **extra) -> Session:
        return container.session_service.create(
            title=title,
            speaker=extra.get("speaker", "Dr. Sarah Williams"),
            time=time,
            location=extra.get("location", "Room A"),
            description=extra.get("description"),
            capacity=capacity,
        )

    return _make


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from conference_registration.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
