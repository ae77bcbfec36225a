from timeit import default_timer

import furl
import requests.exceptions
from requests_toolbelt import sessions

from couchview import exceptions
from couchview.logging import log_request


def normalize_base_url(url):
    """Return `url` with a trailing slash so relative paths join beneath it."""
    parsed = furl.furl(url)
    if not parsed.path.isdir:
        parsed.path.segments.append('')
    return parsed.url


def join_path(*segments):
    """Join path segments literally; callers supply URL-safe identifiers."""
    return '/'.join(str(segment) for segment in segments)


def json_body(resp):
    """Decode the JSON body of `resp` and release the response."""
    try:
        return resp.json()
    except ValueError as exc:
        raise exceptions.CodecError(
            "malformed JSON in response to {0}".format(resp.url)) from exc
    finally:
        resp.close()


class Session(object):
    """Wrapper around BaseUrlSession that automatically wraps certain exceptions when making requests"""

    def __init__(self, base_url=None, timeout=None):
        self._base_session = sessions.BaseUrlSession(
            base_url=normalize_base_url(base_url) if base_url else None)
        self.timeout = timeout

    @property
    def base_url(self):
        return self._base_session.base_url

    @base_url.setter
    def base_url(self, url):
        self._base_session.base_url = normalize_base_url(url)

    def request(self, method, url, *args, **kwargs):
        url = str(url)
        kwargs.setdefault('timeout', self.timeout)
        start = default_timer()
        status_code = None
        try:
            resp = self._base_session.request(method, url, *args, **kwargs)
            status_code = resp.status_code
            try:
                resp.raise_for_status()
            except requests.exceptions.HTTPError:
                resp.close()
                raise
        except requests.exceptions.HTTPError as exc:
            raise exceptions.status_error_lookup(
                exc.response.status_code, exc.response.reason) from exc
        except requests.exceptions.Timeout as exc:
            raise exceptions.Timeout(str(exc)) from exc
        except requests.exceptions.RequestException as exc:
            raise exceptions.TransportError(str(exc)) from exc
        finally:
            log_request(method, url, status_code, default_timer() - start)
        return resp

    def head(self, url, **kwargs):
        return self.request("HEAD", url=url, **kwargs)

    def get(self, url, **kwargs):
        return self.request("GET", url=url, **kwargs)

    def put(self, url, data=None, **kwargs):
        return self.request("PUT", url=url, data=data, **kwargs)
