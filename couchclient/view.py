# -*- coding: utf-8 -
#
# This file is part of couchclient released under the MIT license.
# See the NOTICE for more information.

"""
View definitions and view result decoding.

A view set is stored as a design document::

    {"language": "javascript",
     "views": {"by_type": {"map": "function(doc) { emit(doc.type, null); }"}}}

and queried at ``/<db>/_design/<view set>/_view/<view>``.
"""
from collections import namedtuple

from .exceptions import BadValueError
from .resource import escape_docid
from .utils import get_member

DEFAULT_LANGUAGE = "javascript"


class ViewDefinition(namedtuple('ViewDefinition', 'name map_fun reduce_fun')):
    """ one view of a view set: its name, the source of its map function
    and, optionally, the source of its reduce function """

    __slots__ = ()

    def __new__(cls, name, map_fun, reduce_fun=None):
        return super(ViewDefinition, cls).__new__(cls, name, map_fun,
                reduce_fun)

    def to_json(self):
        funs = {"map": self.map_fun}
        if self.reduce_fun is not None:
            funs["reduce"] = self.reduce_fun
        return funs


ViewRow = namedtuple('ViewRow', 'id value')


def design_docid(view_set):
    return "_design/%s" % view_set


def design_doc(views, language=DEFAULT_LANGUAGE):
    """ build the body of the design document holding `views`

    @param views: iterable of `ViewDefinition`
    @param language: str, language of the map/reduce sources
    @return: dict
    """
    views = list(views)
    names = [v.name for v in views]
    if len(set(names)) != len(names):
        raise ValueError("duplicate view name in %r" % names)
    return {
        "language": language,
        "views": dict((v.name, v.to_json()) for v in views)
    }


def view_path(view_set, view):
    return "%s/_view/%s" % (escape_docid(design_docid(view_set)),
            escape_docid(view))


def view_rows(result):
    return get_member(result, 'rows', list, "view result")


def row_id(row):
    """ the document id of a view row """
    return get_member(row, 'id', str, "view row")


def decode_row(row, wrapper=None):
    """ turn a raw view row into a `ViewRow`, passing its value through
    `wrapper` when given """
    docid = row_id(row)
    value = get_member(row, 'value', object, "view row")
    if wrapper is not None:
        value = wrap_value(wrapper, value)
    return ViewRow(docid, value)


def wrap_value(wrapper, value):
    try:
        return wrapper(value)
    except Exception as e:
        raise BadValueError("can't convert %r: %s" % (value, e)) from e
