# -*- coding: utf-8 -
#
# This file is part of couchclient released under the MIT license.
# See the NOTICE for more information.

"""
All exceptions used in couchclient.
"""


class ResourceError(Exception):
    """ base class for errors built from a CouchDB HTTP response.

    @attr msg: str, server reason or raw body text
    @attr status_int: int, HTTP status code of the response
    @attr response: `CouchDBResponse` instance, if any
    """

    status_int = None

    def __init__(self, msg=None, http_code=None, response=None):
        self.msg = msg or ''
        if http_code is not None:
            self.status_int = http_code
        self.response = response
        Exception.__init__(self, self.msg)

    def __str__(self):
        if self.status_int is not None:
            return "%s (HTTP %s)" % (self.msg, self.status_int)
        return self.msg


class RequestFailed(ResourceError):
    """ raised when CouchDB answers with a status the operation
    does not expect """


class ResourceNotFound(RequestFailed):
    """ Exception raised when resource is not found"""
    status_int = 404


class ResourceConflict(RequestFailed):
    """ Exception raised when there is conflict while updating"""
    status_int = 409


class PreconditionFailed(RequestFailed):
    """ Exception raised when 412 HTTP error is received in response
    to a request """
    status_int = 412


class Unauthorized(RequestFailed):
    """ raised on 401 and 403 responses """


class RequestError(Exception):
    """ raised when the request could not be sent or no response was
    received (connection refused, timeout, ...). The underlying
    `requests` exception is kept in `__cause__`. """


class InvalidResponse(ValueError):
    """ raised when a response body is not JSON or lacks an
    expected member """


class BadValueError(Exception):
    """ exception raised when a decoded value can't be converted
    by the caller's wrapper """
