from functools import wraps

from flask import current_app, g, request
from itsdangerous import BadSignature, URLSafeSerializer

from errors import Forbidden, Unauthorized
from models import ROLE_ADMIN
from stores import session_store


def _serializer():
    return URLSafeSerializer(current_app.config['SECRET_KEY'], salt='session-id')


def _cookie_name():
    return current_app.config.get('SESSION_COOKIE_NAME', 'sid')


def session_id_from_request():
    raw = request.cookies.get(_cookie_name())
    if not raw:
        return None
    try:
        return _serializer().loads(raw)
    except BadSignature:
        return None


def current_session():
    if 'session' not in g:
        g.session = session_store().lookup(session_id_from_request())
    return g.session


def set_session_cookie(response, session_id):
    response.set_cookie(_cookie_name(), _serializer().dumps(session_id),
                        httponly=True, samesite='Lax')
    return response


def clear_session_cookie(response):
    response.delete_cookie(_cookie_name())
    return response


def require_session(session):
    if session is None:
        raise Unauthorized()
    return session


def require_admin(session):
    if session is None or session.role != ROLE_ADMIN:
        raise Forbidden()
    return session


def guarded(*checks):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            session = current_session()
            for check in checks:
                session = check(session)
            g.session = session
            return view(*args, **kwargs)
        return wrapper
    return decorator


login_required = guarded(require_session)
admin_required = guarded(require_admin)
