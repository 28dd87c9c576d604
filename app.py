import logging
import threading

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from config import Config
from errors import ApiError, PayloadTooLarge
from models import db
from storage import UploadSink
from stores import CredentialStore, SessionStore


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(e):
        return jsonify({'error': e.code}), e.status

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(e):
        return handle_api_error(PayloadTooLarge())

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.name.lower()}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        app.logger.exception('Unhandled error: %s', e)
        return jsonify({'error': 'internal'}), 500


def create_app(config_object=Config):
    app = Flask(__name__, static_folder=config_object.PUBLIC_FOLDER, static_url_path='')
    app.config.from_object(config_object)

    CORS(app)
    db.init_app(app)

    sink = UploadSink(app.config['UPLOAD_FOLDER'])
    sink.ensure_directory()
    app.extensions['upload_sink'] = sink
    db_lock = threading.RLock()
    app.extensions['credential_store'] = CredentialStore(db_lock)
    app.extensions['session_store'] = SessionStore(db_lock)

    from api.accounts import accounts
    from api.uploads import uploads

    app.register_blueprint(accounts)
    app.register_blueprint(uploads)
    register_error_handlers(app)

    @app.route('/')
    def index():
        return app.send_static_file('index.html')

    with app.app_context():
        db.create_all()
        app.extensions['credential_store'].seed_admin(
            app.config['ADMIN_USERNAME'], app.config['ADMIN_PASSWORD'])
        app.logger.info('Seeded admin account %s', app.config['ADMIN_USERNAME'])

    return app


if (__name__ == "__main__"):
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    app = create_app()
    app.logger.info('Server running on port %s', Config.PORT)
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, threaded=True)
