from flask import jsonify


def envelope(data=None, message=None, status=200, pagination=None):
    body = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    if pagination is not None:
        body["pagination"] = pagination
    return jsonify(body), status
