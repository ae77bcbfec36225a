import collections

from couchview import exceptions
from couchview.util import jsons as _jsons


DESIGN_PREFIX = '_design/'


class ViewQuery(collections.namedtuple("ViewQuery", [
        "design", "name", "map_def", "reduce_def", "startkey", "endkey",
        "key", "limit", "skip", "descending", "include_docs"])):
    """A query against the view `name` of the design document `design`.

    `map_def` and `reduce_def` hold the JavaScript source used to create the
    view when the server does not have it yet. Without a `map_def` a missing
    view cannot be created and querying it fails.

    Keys may be any JSON-encodable value; they are sent as JSON literals so
    that range queries follow CouchDB's collation rather than string order.
    """
    __slots__ = ()

    def __new__(cls, design, name, map_def=None, reduce_def=None,
                startkey=None, endkey=None, key=None, limit=None, skip=None,
                descending=False, include_docs=False):
        return super(ViewQuery, cls).__new__(
            cls, design, name, map_def, reduce_def, startkey, endkey, key,
            limit, skip, descending, include_docs)

    @property
    def path_segments(self):
        return ['_design', self.design, '_view', self.name]

    @property
    def design_id(self):
        return DESIGN_PREFIX + self.design

    def params(self):
        """Return the query string parameters, each value a JSON literal."""
        params = {}
        if self.startkey is not None:
            params["startkey"] = _jsons(self.startkey)
        if self.endkey is not None:
            params["endkey"] = _jsons(self.endkey)
        if self.key is not None:
            params["key"] = _jsons(self.key)
        if self.limit is not None:
            params["limit"] = _jsons(self.limit)
        if self.skip is not None:
            params["skip"] = _jsons(self.skip)
        if self.descending:
            params["descending"] = _jsons(True)
        if self.include_docs:
            params["include_docs"] = _jsons(True)
            params["reduce"] = _jsons(False)
        return params

    def view_def(self):
        view = {"map": self.map_def}
        if self.reduce_def:
            view["reduce"] = self.reduce_def
        return view

    def design_doc(self):
        """The design document holding only this view's definition."""
        return {
            "_id": self.design_id,
            "views": {self.name: self.view_def()},
        }


class Row(collections.namedtuple("Row", ["id", "key", "value", "doc"])):
    __slots__ = ()

    @classmethod
    def from_json(cls, row):
        if not isinstance(row, dict):
            raise exceptions.CodecError("view row is not an object: %r" % (row,))
        return cls(row.get("id"), row.get("key"), row.get("value"), row.get("doc"))


class ViewResult(object):
    """Result of view query; contains rows, offset, total_rows.
    Instances of this class are not supposed to be created by client software.
    """

    def __init__(self, rows, offset, total_rows):
        self.rows = rows
        self.offset = offset
        self.total_rows = total_rows

    def __len__(self):
        return len(self.rows)

    def __getitem__(self, i):
        return self.rows[i]

    def __iter__(self):
        return iter(self.rows)

    def __repr__(self):
        return '<%s offset=%r total_rows=%r rows=%d>' % (
            type(self).__name__, self.offset, self.total_rows, len(self.rows))

    def json(self):
        "Return data in a JSON-like representation."
        result = dict()
        result["total_rows"] = self.total_rows
        result["offset"] = self.offset
        return result


def decode_result(data, rows=None, wrapper=None):
    """Decode a view response envelope.

    Rows are converted with `wrapper` in server order and appended to `rows`
    when a caller-owned list is given.
    """
    if wrapper is None:
        wrapper = Row.from_json
    if not isinstance(data, dict):
        raise exceptions.CodecError("view response is not an object")
    raw_rows = data.get("rows", [])
    if not isinstance(raw_rows, list):
        raise exceptions.CodecError("view response rows are not a list")
    for field in ("offset", "total_rows"):
        value = data.get(field)
        if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
            raise exceptions.CodecError("view response %s is not an integer: %r" % (field, value))
    decoded = [wrapper(row) for row in raw_rows]
    if rows is None:
        rows = []
    rows.extend(decoded)
    return ViewResult(rows, data.get("offset"), data.get("total_rows"))
