# -*- coding: utf-8 -
#
# This file is part of couchclient released under the MIT license.
# See the NOTICE for more information.

"""
couchclient.resource
~~~~~~~~~~~~~~~~~~~~

This module provides a common interface for all CouchDB requests. Requests
are sent with a :class:`requests.Session`, so connections are pooled per
resource tree and TLS, proxies and authentication are configured the
`requests` way.

Example:

    >>> resource = CouchdbResource()
    >>> info = resource.get().json_body
    >>> info['couchdb']
    'Welcome'

"""
import json
import logging
from urllib.parse import quote

import requests

from .exceptions import ResourceNotFound, ResourceConflict, \
PreconditionFailed, Unauthorized, RequestFailed, RequestError
from .utils import decode_json, error_reason
from .version import __version__

USER_AGENT = 'couchclient/%s' % __version__

JSON_PARAMS = ('key', 'keys', 'startkey', 'endkey', 'start_key', 'end_key')

SESSION_OPTIONS = ('auth', 'verify', 'cert', 'proxies')

log = logging.getLogger(__name__)


class CouchDBResponse(object):
    """ thin wrapper around a :class:`requests.Response` """

    def __init__(self, response):
        self.response = response

    @property
    def status_int(self):
        return self.response.status_code

    @property
    def headers(self):
        return self.response.headers

    def body_string(self):
        return self.response.text

    @property
    def json_body(self):
        return decode_json(self.response.content)

    def __repr__(self):
        return "<%s %s %s>" % (self.__class__.__name__,
                self.response.request.method if self.response.request
                else '', self.status_int)


class CouchdbResource(object):

    def __init__(self, uri="http://127.0.0.1:5984", session=None,
            timeout=None, headers=None, **client_opts):
        """Constructor for a `CouchdbResource` object.

        CouchdbResource represent an HTTP resource to CouchDB.

        @param uri: str, full uri to the server.
        @param session: `requests.Session` to send requests with. A new
            one is created if omitted.
        @param timeout: float or (connect, read) tuple, in seconds,
            passed to every request. None waits forever.
        @param headers: dict, extra headers sent with every request.
        @param client_opts: `auth`, `verify`, `cert` or `proxies`, set on
            the session.
        """
        if not uri:
            raise ValueError("Resource uri is missing")
        self.uri = uri.rstrip('/')
        self.timeout = timeout

        if session is None:
            session = requests.Session()
        for name, value in client_opts.items():
            if name not in SESSION_OPTIONS:
                raise TypeError("unknown client option: %r" % name)
            setattr(session, name, value)
        if headers:
            session.headers.update(headers)
        self.session = session

    def clone(self):
        """ return a resource on the same uri sharing this session """
        return self.__class__(self.uri, session=self.session,
                timeout=self.timeout)

    def __call__(self, path):
        """ return a resource for `path` below this one """
        res = self.clone()
        res.uri = self.make_uri(path)
        return res

    def make_uri(self, path=None):
        if not path:
            return self.uri
        return "%s/%s" % (self.uri, path.lstrip('/'))

    def head(self, path=None, headers=None, **params):
        return self.request('HEAD', path=path, headers=headers, **params)

    def get(self, path=None, headers=None, **params):
        return self.request('GET', path=path, headers=headers, **params)

    def delete(self, path=None, headers=None, **params):
        return self.request('DELETE', path=path, headers=headers, **params)

    def post(self, path=None, payload=None, headers=None, **params):
        return self.request('POST', path=path, payload=payload,
                headers=headers, **params)

    def put(self, path=None, payload=None, headers=None, **params):
        return self.request('PUT', path=path, payload=payload,
                headers=headers, **params)

    def request(self, method, path=None, payload=None, headers=None, **params):
        """ Perform HTTP call to the couchdb server and manage
        JSON conversions, support GET, HEAD, POST, PUT and DELETE.

        Usage example, get infos of a couchdb server on
        http://127.0.0.1:5984 :

            import couchclient
            resource = couchclient.CouchdbResource()
            infos = resource.request('GET').json_body

        @param method: str, the HTTP action to be performed:
            'GET', 'HEAD', 'POST', 'PUT', or 'DELETE'
        @param path: str, path to add to the uri, already quoted
        @param payload: str, bytes or any object that could be
            converted to JSON.
        @param headers: dict, optional headers that will
            be added to HTTP request.
        @param params: Optional parameters added to the request.
            Parameters are for example the parameters for a view. See
            `CouchDB View API reference
            <https://docs.couchdb.org/en/stable/api/ddoc/views.html>`_.

        @return: `CouchDBResponse` for any status below 400.
        @raise RequestFailed: or one of its subclasses for status >= 400.
        @raise RequestError: if no response could be obtained.
        """
        headers = dict(headers or {})
        headers.setdefault('Accept', 'application/json')
        headers.setdefault('User-Agent', USER_AGENT)

        if payload is not None:
            if not hasattr(payload, 'read') and \
                    not isinstance(payload, (str, bytes)):
                payload = json.dumps(payload).encode('utf-8')
                headers.setdefault('Content-Type', 'application/json')

        uri = self.make_uri(path)
        try:
            resp = self.session.request(method, uri, data=payload,
                    headers=headers, params=encode_params(params),
                    timeout=self.timeout)
        except requests.RequestException as e:
            log.error("%s %s failed: %s", method, uri, e)
            raise RequestError("%s %s failed: %s" % (method, uri, e)) from e

        resp = CouchDBResponse(resp)
        log.debug("%s %s -> %s", method, uri, resp.status_int)
        if resp.status_int >= 400:
            raise status_error(resp)
        return resp


def status_error(resp):
    """ build the exception matching an error response """
    status = resp.status_int
    msg = resp.body_string()
    if resp.headers.get('content-type', '').startswith('application/json'):
        try:
            error, reason = error_reason(json.loads(msg))
        except ValueError:
            pass
        else:
            msg = reason or error or msg

    if status == 404:
        return ResourceNotFound(msg, http_code=404, response=resp)
    elif status == 409:
        return ResourceConflict(msg, http_code=409, response=resp)
    elif status == 412:
        return PreconditionFailed(msg, http_code=412, response=resp)
    elif status in (401, 403):
        return Unauthorized(msg, http_code=status, response=resp)
    return RequestFailed(msg, http_code=status, response=resp)


def encode_params(params):
    """ encode parameters in json if needed """
    _params = {}
    if params:
        for name, value in params.items():
            if value is None:
                continue
            elif name in JSON_PARAMS or not isinstance(value, str):
                value = json.dumps(value)
            _params[name] = value
    return _params


def escape_docid(docid):
    if docid.startswith('/'):
        docid = docid[1:]
    if docid.startswith('_design/'):
        docid = '_design/%s' % quote(docid[8:], safe='')
    else:
        docid = quote(docid, safe='')
    return docid


def escape_dbname(dbname):
    if dbname.startswith('/'):
        dbname = dbname[1:]
    return quote(dbname, safe='')
