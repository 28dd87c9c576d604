from flask import Blueprint, current_app, g, jsonify, request

from api.gate import (admin_required, clear_session_cookie, session_id_from_request,
                      set_session_cookie)
from stores import credential_store, session_store

accounts = Blueprint('accounts', __name__, url_prefix='/api')


def _body():
    # JSON objects and urlencoded forms are both accepted
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


def _start_session(user):
    sessions = session_store()
    sessions.destroy(session_id_from_request())
    session_id = sessions.create(user.username, user.role)
    return set_session_cookie(jsonify({'ok': True}), session_id)


@accounts.route('/signup', methods=['POST'])
def signup():
    data = _body()
    user = credential_store().register(data.get('username'), data.get('password'))
    return _start_session(user)


@accounts.route('/login', methods=['POST'])
def login():
    data = _body()
    user = credential_store().authenticate(data.get('username'), data.get('password'))
    return _start_session(user)


@accounts.route('/logout', methods=['POST'])
def logout():
    session_store().destroy(session_id_from_request())
    return clear_session_cookie(jsonify({'ok': True}))


@accounts.route('/promote', methods=['POST'])
@admin_required
def promote():
    username = _body().get('username')
    credential_store().promote(username)
    current_app.logger.info('%s promoted %s to admin', g.session.username, username)
    return jsonify({'ok': True})
