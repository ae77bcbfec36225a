class CouchDBException(Exception):
    """There was an ambiguous error interacting with CouchDB."""
    pass


class TransportError(CouchDBException):
    """The request could not be delivered or its response could not be read."""
    pass


class Timeout(TransportError):
    """The request timed out."""
    pass


class CodecError(CouchDBException, ValueError):
    """A payload could not be encoded to, or decoded from, JSON."""
    pass


class StatusError(CouchDBException):
    """CouchDB answered with an unexpected HTTP status."""
    def __init__(self, status_code, message=None):
        self.status_code = status_code
        self.message = message or "unexpected status code {status_code} from couchdb".format(
            status_code=status_code)
        super(StatusError, self).__init__(self.message)


class HTTPBadRequest(StatusError):
    """400 Bad Request"""
    status_code = 400

    def __init__(self, message="Bad Request"):
        super(HTTPBadRequest, self).__init__(self.__class__.status_code, message)


class HTTPUnauthorized(StatusError):
    """401 Unauthorized"""
    status_code = 401

    def __init__(self, message="Unauthorized"):
        super(HTTPUnauthorized, self).__init__(self.__class__.status_code, message)


class HTTPForbidden(StatusError):
    """403 Forbidden"""
    status_code = 403

    def __init__(self, message="Forbidden"):
        super(HTTPForbidden, self).__init__(self.__class__.status_code, message)


class HTTPNotFound(StatusError):
    """404 Not Found"""
    status_code = 404

    def __init__(self, message="Not Found"):
        super(HTTPNotFound, self).__init__(self.__class__.status_code, message)


class HTTPConflict(StatusError):
    status_code = 409

    def __init__(self, message="Conflict"):
        super(HTTPConflict, self).__init__(self.__class__.status_code, message)


class HTTPPreconditionFailed(StatusError):
    status_code = 412

    def __init__(self, message="Precondition failed"):
        super(HTTPPreconditionFailed, self).__init__(self.__class__.status_code, message)


class HTTPServerError(StatusError):
    status_code = 500

    def __init__(self, message="Internal Server Error"):
        super(HTTPServerError, self).__init__(self.__class__.status_code, message)


class MissingView(HTTPNotFound):
    """A requested view does not exist and could not be provisioned."""
    pass


_status_error_lookup = {
    exc.status_code: exc for exc in [
        HTTPBadRequest, HTTPUnauthorized, HTTPForbidden, HTTPNotFound,
        HTTPConflict, HTTPPreconditionFailed, HTTPServerError,
    ]
}


def status_error_lookup(status_code, message=None):
    if status_code in _status_error_lookup:
        if message:
            return _status_error_lookup[status_code](message)
        return _status_error_lookup[status_code]()
    else:
        return StatusError(status_code=status_code, message=message)
