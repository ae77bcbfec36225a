import json

from couchview import exceptions


JSON_HEADERS = {'Content-Type': 'application/json'}


def jsons(data, indent=None):
    """Convert data into JSON string."""
    try:
        return json.dumps(data, ensure_ascii=False, allow_nan=False, indent=indent)
    except (TypeError, ValueError) as exc:
        raise exceptions.CodecError("cannot encode %r as JSON" % (data,)) from exc


def json_payload(data):
    """Encode `data` as a UTF-8 JSON request body."""
    return jsons(data).encode('utf-8')
