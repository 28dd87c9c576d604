class ApiError(Exception):
    status = 500
    code = 'error'

    def __init__(self, code=None):
        if code is not None:
            self.code = code
        super().__init__(self.code)


class InvalidInput(ApiError):
    status = 400
    code = 'missing'


class Unauthorized(ApiError):
    status = 401
    code = 'unauthorized'


class Forbidden(ApiError):
    status = 403
    code = 'forbidden'


class NotFound(ApiError):
    status = 404
    code = 'not found'


class Conflict(ApiError):
    status = 409
    code = 'exists'


class PayloadTooLarge(ApiError):
    status = 413
    code = 'too large'


class StorageError(ApiError):
    status = 500
    code = 'read failed'
