# -*- coding: utf-8 -
#
# This file is part of couchclient released under the MIT license.
# See the NOTICE for more information.


"""
Mostly utility functions couchclient uses internally that don't
really belong anywhere else in the modules.
"""
import json
import re
from urllib.parse import unquote

from .exceptions import InvalidResponse

VALID_DB_NAME = re.compile(r'^[a-z][a-z0-9_$()+-/]*$')
SPECIAL_DBS = ("_users", "_replicator",)
def validate_dbname(name):
    """ validate dbname """
    if name in SPECIAL_DBS:
        return True
    elif not VALID_DB_NAME.match(unquote(name)):
        raise ValueError("Invalid db name: '%s'" % name)
    return True

def decode_json(body):
    """ decode a JSON response body

    @param body: str or bytes
    @return: decoded python object
    @raise InvalidResponse: if the body isn't valid JSON
    """
    try:
        if isinstance(body, bytes):
            body = body.decode('utf-8')
        return json.loads(body)
    except ValueError as e:
        raise InvalidResponse("response is not JSON: %s (%r)" % (e,
            body[:200]))

def get_member(obj, name, kind=str, where="response"):
    """ return `obj[name]`, checking that obj is a JSON object and that
    the member exists and is an instance of `kind`.

    @param obj: decoded JSON value
    @param name: str, member name
    @param kind: type or tuple of types expected
    @param where: str, used in the error message
    @raise InvalidResponse: on any shape mismatch
    """
    if not isinstance(obj, dict):
        raise InvalidResponse("expected an object in %s, got %r" % (where,
            obj))
    try:
        value = obj[name]
    except KeyError:
        raise InvalidResponse("no '%s' member in %s: %r" % (name, where,
            obj))
    if not isinstance(value, kind):
        raise InvalidResponse("expected '%s' to be %s in %s, got %r" % (
            name, _kind_name(kind), where, value))
    return value

def _kind_name(kind):
    if isinstance(kind, tuple):
        return " or ".join(k.__name__ for k in kind)
    return kind.__name__

def error_reason(data):
    """ extract `(error, reason)` from a decoded CouchDB error body.
    Old servers nest the reason inside the `error` object. Members that
    aren't strings are returned as None. """
    if isinstance(data, str):
        return None, data
    if not isinstance(data, dict):
        return None, None
    error = data.get('error')
    reason = data.get('reason')
    if isinstance(error, dict):
        reason = error.get('reason', reason)
        error = error.get('error', 'conflict')
    return _str_or_none(error), _str_or_none(reason)

def _str_or_none(value):
    if isinstance(value, str):
        return value
    return None
