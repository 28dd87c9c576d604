import os
import json

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _load_file_config(base_dir=BASE_DIR):
    for name in ("config.json", "democonfig.json"):
        path = os.path.join(base_dir, name)
        if os.path.exists(path):
            with open(path) as f:
                return json.load(f)
    return {}


config = _load_file_config()


def _setting(key, default=None):
    return os.getenv(key, config.get(key, default))


class Config:
    SECRET_KEY = _setting('SECRET_KEY', 'replace_this_secret_with_env_var')  # Signs the session cookie
    SESSION_COOKIE_NAME = _setting('SESSION_COOKIE_NAME', 'sid')

    UPLOAD_FOLDER = _setting('UPLOAD_FOLDER', os.path.join(BASE_DIR, 'uploads'))
    PUBLIC_FOLDER = _setting('PUBLIC_FOLDER', os.path.join(BASE_DIR, 'public'))
    MAX_CONTENT_LENGTH = int(_setting('MAX_CONTENT_LENGTH', 2 * 1024 * 1024 * 1024))  # 2GB upload ceiling

    ADMIN_USERNAME = _setting('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = _setting('ADMIN_PASSWORD', 'adminpass')

    # In-memory database, lives as long as the process
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    DEBUG = str(_setting('DEBUG', False)).lower() in ('1', 'true', 'yes')
    HOST = _setting('HOST', '0.0.0.0')
    PORT = int(_setting('PORT', 3000))
