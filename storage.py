import os
import re
import time

from flask import current_app, send_from_directory

from errors import InvalidInput, StorageError

PUBLIC_PREFIX = '/uploads/'


class UploadedFile:
    def __init__(self, stored_name, original_name, path):
        self.stored_name = stored_name
        self.original_name = original_name
        self.path = path

    @property
    def public_path(self):
        return PUBLIC_PREFIX + self.stored_name


def stored_name_for(original_name, now=None):
    """Return '<ms timestamp>-<name>' with whitespace runs collapsed to '_'."""
    if now is None:
        now = time.time()
    return '%d-%s' % (int(now * 1000), re.sub(r'\s+', '_', original_name))


class UploadSink:
    def __init__(self, directory):
        self.directory = directory

    def ensure_directory(self):
        os.makedirs(self.directory, exist_ok=True)

    def store(self, stream, original_name):
        # Drop any client-side directory components
        original_name = os.path.basename(original_name.replace('\\', '/'))
        if not original_name:
            raise InvalidInput('no file')
        stored_name = stored_name_for(original_name)
        path = os.path.join(self.directory, stored_name)
        stream.save(path)
        current_app.logger.info('Stored upload %s (%s)', stored_name, original_name)
        return UploadedFile(stored_name, original_name, path)

    def list(self):
        try:
            entries = os.listdir(self.directory)
        except OSError:
            raise StorageError()
        return [{'file': PUBLIC_PREFIX + name, 'name': name} for name in entries]

    def send(self, filename):
        return send_from_directory(self.directory, filename)


def upload_sink():
    return current_app.extensions['upload_sink']
