"""Error policies layered over `Server` and `Database` handles.

The core API reports failures by raising `CouchDBException` subclasses and
reports negative outcomes (missing document, rejected write) as return
values. `AbortOnError` is for callers that would rather stop the process
than handle failures:

>>> db = AbortOnError(Server()['python-tests'])
>>> db.get_doc('missing') is None      # not an error, passes through
True
"""
import functools

from couchview.client import Database, Server
from couchview.exceptions import CouchDBException
from couchview.logging import logger


_WRAPPABLE = (Server, Database)


def abort(exc):
    """Default handler: log the failure and halt the process."""
    logger.critical("aborting on couchdb error: %s", exc)
    raise SystemExit(1) from exc


class AbortOnError(object):
    """Proxy routing every `CouchDBException` raised by `target` to `handler`.

    Attributes that are not callable are passed through unchanged, except
    `Server` and `Database` handles, which are wrapped with the same policy. The
    handler receives the exception; whatever it returns is returned to the
    caller in place of the failed call's result.
    """

    def __init__(self, target, handler=None):
        self._target = target
        self._handler = handler or abort

    @property
    def target(self):
        return self._target

    def __getattr__(self, name):
        if name in ('_target', '_handler'):
            raise AttributeError(name)
        attr = getattr(self._target, name)
        if isinstance(attr, _WRAPPABLE):
            return AbortOnError(attr, self._handler)
        if name.startswith('_') or not callable(attr):
            return attr

        @functools.wraps(attr)
        def guarded(*args, **kwargs):
            try:
                result = attr(*args, **kwargs)
            except CouchDBException as exc:
                return self._handler(exc)
            if isinstance(result, _WRAPPABLE):
                return AbortOnError(result, self._handler)
            return result

        return guarded

    def __getitem__(self, key):
        try:
            result = self._target[key]
        except CouchDBException as exc:
            return self._handler(exc)
        if isinstance(result, _WRAPPABLE):
            return AbortOnError(result, self._handler)
        return result

    def __contains__(self, item):
        try:
            return item in self._target
        except CouchDBException as exc:
            return self._handler(exc)

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self._target)

