# -*- coding: utf-8 -
#
# This file is part of couchclient released under the MIT license.
# See the NOTICE for more information.

import logging

from .version import version_info, __version__

from .resource import CouchdbResource, CouchDBResponse
from .exceptions import ResourceError, RequestFailed, ResourceNotFound, \
ResourceConflict, PreconditionFailed, Unauthorized, RequestError, \
InvalidResponse, BadValueError
from .client import Server, Database, DocRef, Document, Conflict
from .view import ViewDefinition, ViewRow

LOG_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG
}

def set_logging(level, handler=None):
    """
    Set level of logging, and choose where to display/save logs
    (file or standard output).
    """
    if not handler:
        handler = logging.StreamHandler()

    loglevel = LOG_LEVELS.get(level, logging.INFO)
    logger = logging.getLogger('couchclient')
    logger.setLevel(loglevel)
    format = r"%(asctime)s [%(process)d] [%(levelname)s] %(message)s"
    datefmt = r"%Y-%m-%d %H:%M:%S"

    handler.setFormatter(logging.Formatter(format, datefmt))
    logger.addHandler(handler)
