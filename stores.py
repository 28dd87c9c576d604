import secrets
import threading
from collections import namedtuple
from contextlib import contextmanager

from flask import current_app

from errors import Conflict, InvalidInput, NotFound, Unauthorized
from models import db, User, LoginSession, ROLE_USER, ROLE_ADMIN

Account = namedtuple('Account', ['username', 'password', 'role'])
SessionInfo = namedtuple('SessionInfo', ['id', 'username', 'role'])


def _account(user):
    return Account(user.username, user.password, user.role)


class _Store:
    # All stores share one sqlite connection, so they must share one lock
    def __init__(self, lock=None):
        self._lock = lock if lock is not None else threading.RLock()

    @contextmanager
    def _transaction(self):
        with self._lock:
            try:
                yield db.session
                db.session.commit()
            except Exception:
                db.session.rollback()
                raise
            finally:
                db.session.close()


class CredentialStore(_Store):

    def get(self, username):
        if not username:
            return None
        with self._transaction() as s:
            user = s.get(User, username)
            return _account(user) if user is not None else None

    def register(self, username, password):
        if not username or not password:
            raise InvalidInput()
        with self._transaction() as s:
            if s.get(User, username) is not None:
                raise Conflict()
            user = User(username=username, password=password, role=ROLE_USER)
            s.add(user)
            s.flush()
            return _account(user)

    def authenticate(self, username, password):
        user = self.get(username)
        # Plain equality, passwords are not hashed
        if user is None or user.password != password:
            raise Unauthorized('invalid')
        return user

    def promote(self, username):
        if not username:
            raise NotFound('no user')
        with self._transaction() as s:
            user = s.get(User, username)
            if user is None:
                raise NotFound('no user')
            user.role = ROLE_ADMIN
            s.flush()
            return _account(user)

    def seed_admin(self, username, password):
        with self._transaction() as s:
            user = s.get(User, username)
            if user is None:
                user = User(username=username)
                s.add(user)
            user.password = password
            user.role = ROLE_ADMIN
            s.flush()
            return _account(user)


class SessionStore(_Store):
    # Sessions never expire

    def create(self, username, role):
        session_id = secrets.token_urlsafe(32)
        with self._transaction() as s:
            s.add(LoginSession(id=session_id, username=username, role=role))
        return session_id

    def destroy(self, session_id):
        if not session_id:
            return
        with self._transaction() as s:
            s.query(LoginSession).filter_by(id=session_id).delete()

    def lookup(self, session_id):
        if not session_id:
            return None
        with self._transaction() as s:
            found = s.get(LoginSession, session_id)
            if found is None:
                return None
            return SessionInfo(found.id, found.username, found.role)


def credential_store():
    return current_app.extensions['credential_store']


def session_store():
    return current_app.extensions['session_store']
