# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""Python client API for CouchDB documents and views.

>>> server = Server()
>>> db = server['python-tests']
>>> rev = db.put_doc('johndoe', {'type': 'Person', 'name': 'John Doe'})
>>> doc = db.get_doc('johndoe')
>>> doc['name']
'John Doe'
>>> db.put_doc('johndoe', {'type': 'Person'}) is None    # stale revision
True

Views are created on first use from the supplied source:

>>> by_type = ViewQuery('people', 'by_type',
...                     map_def='function(doc) { emit(doc.type, null); }',
...                     startkey='Person', endkey='Person')
>>> [row.id for row in db.query(by_type)]
['johndoe']
"""
import os

import furl

from couchview import exceptions, util, views
from couchview.logging import logger
from couchview.session import Session, join_path, json_body

__all__ = ['Server', 'Database', 'Document', 'ViewQuery', 'ViewResult', 'Row']
__docformat__ = 'restructuredtext en'


DEFAULT_BASE_URL = os.environ.get('COUCHDB_URL', 'http://localhost:5984/')


def _timeout_from_env(value):
    """Parse a `COUCHDB_TIMEOUT` value, ignoring anything that is not a number."""
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("ignoring invalid COUCHDB_TIMEOUT %r", value)
        return None


DEFAULT_TIMEOUT = _timeout_from_env(os.environ.get('COUCHDB_TIMEOUT'))

ViewQuery = views.ViewQuery
ViewResult = views.ViewResult
Row = views.Row


def _expect(resp, *status_codes):
    """Release `resp` and raise unless its status is one of `status_codes`."""
    if resp.status_code not in status_codes:
        resp.close()
        raise exceptions.status_error_lookup(resp.status_code, resp.reason)
    return resp


class Server(object):
    """Representation of a CouchDB server.

    >>> server = Server() # connects to the local_server
    >>> remote_server = Server('http://example.com:5984/')
    >>> slow_server = Server('http://example.com:5984/', timeout=30)

    Databases are reached through item access; they are assumed to exist:

    >>> db = server['python-tests']
    >>> db.name
    'python-tests'
    """

    def __init__(self, url=DEFAULT_BASE_URL, session=None, timeout=DEFAULT_TIMEOUT):
        """Initialize the server object.

        :param url: the URI of the server (for example ``http://localhost:5984/``)
        :param session: an optional `Session` to issue requests with
        :param timeout: seconds to wait for each round trip, `None` to wait forever
        """
        self._url = url
        if session:
            self._session = session
            self._session.base_url = url
            if timeout is not None:
                self._session.timeout = timeout
        else:
            self._session = Session(base_url=self._url, timeout=timeout)

    @property
    def url(self):
        return self._url

    @property
    def session(self):
        return self._session

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.url)

    def __getitem__(self, name):
        """Return a `Database` object representing the database with the
        specified name.

        :param name: the name of the database
        :rtype: `Database`
        """
        return Database(self, name)

    def version(self):
        """The version string of the CouchDB server.

        :rtype: `str`"""
        data = json_body(_expect(self._session.get(""), 200))
        if not isinstance(data, dict) or not isinstance(data.get('version'), str):
            raise exceptions.CodecError("server welcome has no version")
        return data['version']

    def uuids(self, count=1):
        """Retrieve a batch of uuids

        :param count: a number of uuids to fetch
        :return: a list of uuids
        :raise CodecError: if the server returned no uuids or malformed ones
        """
        params = {'count': count} if count != 1 else None
        data = json_body(_expect(self._session.get("_uuids", params=params), 200))
        uuids = data.get('uuids') if isinstance(data, dict) else None
        if not isinstance(uuids, list) or not all(isinstance(u, str) for u in uuids):
            raise exceptions.CodecError("malformed uuids response: %r" % (data,))
        if not uuids:
            raise exceptions.CodecError("server returned no uuids")
        return uuids

    def uuid(self):
        """Retrieve a single fresh uuid."""
        return self.uuids()[0]


class Database(object):
    """Representation of a database on a CouchDB server.

    A database handle holds no mutable state and can be shared between
    threads.

    >>> db = Database.from_url('http://localhost:5984/python-tests')
    >>> db.put_doc('gotham', {'type': 'City', 'name': 'Gotham City'})  #doctest: +ELLIPSIS
    '1-...'
    >>> db.get_doc('gotham')                #doctest: +ELLIPSIS
    <Document 'gotham'@'1-...' {...}>
    >>> db.get_doc('metropolis') is None
    True
    """

    def __init__(self, server, name):
        self._name = name
        self._server = server

    @classmethod
    def from_url(cls, url, **options):
        """
        Initialize a database object from a URL instead of a `Server` object.

        Also works with just a name, in which case the server url defaults to the default URL.
        """
        parsed_url = furl.furl(url)
        segments = [s for s in parsed_url.path.segments if s]
        if len(segments) != 1:
            raise ValueError("URL must contain exactly one path segment, the database name.")
        db_name = segments[0]
        parsed_url.remove(path=True)
        server = Server(url=parsed_url.url or DEFAULT_BASE_URL, **options)
        return cls(server=server, name=db_name)

    @property
    def name(self):
        return self._name

    @property
    def server(self):
        return self._server

    def path(self, *segments):
        return join_path(self.name, *segments)

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.name)

    def __contains__(self, id):
        """Return whether the database contains a document with the specified
        ID.

        :param id: the document ID
        :return: `True` if a document with the ID exists, `False` otherwise
        """
        try:
            self.server.session.head(self.path(id)).close()
        except exceptions.HTTPNotFound:
            return False
        return True

    def get_doc(self, id, default=None, wrapper=None):
        """Return the document with the specified ID.

        :param id: the document ID
        :param default: the value to return when the document is not found
        :param wrapper: an optional callable building the result from the
                        decoded JSON object; defaults to `Document`
        :return: the document, or `default` if no document with the ID exists
        :raise StatusError: on any status other than 200 or 404
        :raise CodecError: if the body is not a JSON object
        """
        try:
            resp = self.server.session.get(self.path(id))
        except exceptions.HTTPNotFound:
            return default
        data = json_body(_expect(resp, 200))
        if not isinstance(data, dict):
            raise exceptions.CodecError("document %r is not a JSON object" % (id,))
        if wrapper is not None:
            return wrapper(data)
        return Document(data)

    def put_doc(self, id, doc):
        """Create or update the document with the specified ID.

        A conflict is not an error: when the server rejects the write because
        the document has a newer or different revision, `None` is returned.

        :param id: the document ID
        :param doc: the JSON-encodable document content
        :return: the new revision, or `None` if the write was rejected
        :rtype: `str`
        """
        body = util.json_payload(doc)
        try:
            resp = self.server.session.put(self.path(id), data=body, headers=util.JSON_HEADERS)
        except exceptions.HTTPConflict:
            return None
        data = json_body(_expect(resp, 201))
        rev = data.get('rev') if isinstance(data, dict) else None
        if not isinstance(rev, str) or not rev:
            raise exceptions.CodecError("response to PUT %r has no revision: %r" % (id, data))
        return rev

    def uuid(self):
        """Retrieve a single fresh uuid from this database's server."""
        return self.server.uuid()

    def ensure_view(self, query):
        """Install the design document defining `query`'s view.

        The write is get-or-create: if the design document already exists
        (for instance because a concurrent caller created it first) the
        server answers 409, which counts as success.

        :param query: a `ViewQuery` carrying a `map_def`
        :return: `True` if this call created the design document, `False` if
                 it was already present
        :raise StatusError: on any status other than 201 or 409
        """
        if not query.map_def:
            raise ValueError("view %s/%s has no map function" % (query.design, query.name))
        body = util.json_payload(query.design_doc())
        try:
            resp = self.server.session.put(
                self.path('_design', query.design), data=body, headers=util.JSON_HEADERS)
        except exceptions.HTTPConflict:
            logger.info("design document %s already exists in %s", query.design_id, self.name)
            return False
        _expect(resp, 201).close()
        logger.info("created design document %s in %s", query.design_id, self.name)
        return True

    def query(self, query, rows=None, wrapper=None):
        """Query a view, creating it first if the server does not have it.

        When the view is missing and `query.map_def` is set, the design
        document is installed with `ensure_view` and the query is retried
        exactly once. A view that is still missing after that, or a missing
        view without a `map_def`, raises `MissingView`.

        :param query: a `ViewQuery`
        :param rows: an optional list the decoded rows are appended to, in
                     the order the server returned them
        :param wrapper: an optional callable turning each raw row object into
                        the caller's row type; defaults to `Row.from_json`
        :return: the view results, with `offset` and `total_rows`
        :rtype: `ViewResult`
        """
        path = self.path(*query.path_segments)
        params = query.params()
        try:
            resp = self.server.session.get(path, params=params)
        except exceptions.HTTPNotFound as exc:
            if not query.map_def:
                raise exceptions.MissingView(
                    "view %s/%s does not exist" % (query.design, query.name)) from exc
            logger.info("view %s/%s missing in %s, creating it", query.design, query.name, self.name)
            self.ensure_view(query)
            try:
                resp = self.server.session.get(path, params=params)
            except exceptions.HTTPNotFound as retry_exc:
                raise exceptions.MissingView(
                    "view %s/%s still missing after creation" % (query.design, query.name)) from retry_exc
        data = json_body(_expect(resp, 200))
        return views.decode_result(data, rows=rows, wrapper=wrapper)


class Document(dict):
    """Representation of a document in the database.

    This is basically just a dictionary with the two additional properties
    `id` and `rev`, which contain the document ID and revision, respectively.
    """

    def __repr__(self):
        return '<%s %r@%r %r>' % (type(self).__name__, self.id, self.rev,
                                  dict([(k,v) for k,v in self.items()
                                        if k not in ('_id', '_rev')]))

    @property
    def id(self):
        """The document ID.

        :rtype: str
        """
        return self.get('_id')

    @property
    def rev(self):
        """The document revision.

        :rtype: str
        """
        return self.get('_rev')
