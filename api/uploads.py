from flask import Blueprint, jsonify, request

from api.gate import admin_required, login_required
from errors import InvalidInput
from storage import upload_sink

uploads = Blueprint('uploads', __name__)


@uploads.route('/api/upload', methods=['POST'])
@login_required
def upload_video():
    file = request.files.get('video')
    if file is None or not file.filename:
        raise InvalidInput('no file')

    stored = upload_sink().store(file, file.filename)
    return jsonify({'ok': True, 'file': stored.public_path, 'name': stored.original_name})


@uploads.route('/api/uploads', methods=['GET'])
@admin_required
def list_uploads():
    return jsonify({'ok': True, 'uploads': upload_sink().list()})


@uploads.route('/uploads/<path:filename>', methods=['GET'])
def serve_upload(filename):
    return upload_sink().send(filename)
