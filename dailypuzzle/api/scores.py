from flask import Blueprint, current_app, jsonify, request
import json

from dailypuzzle import get_store, socketio
from dailypuzzle.services.scores import Submission


scores = Blueprint('scores', __name__)

SUBMISSION_FIELDS = ('score', 'moves', 'pieces')
OPTIONAL_FIELDS = ('date',)


class MalformedSubmission(ValueError):
    """The POSTed body cannot be turned into a Submission."""


def _read_body(max_bytes: int) -> bytes:
    if request.content_length is not None and request.content_length > max_bytes:
        raise MalformedSubmission(f'body must not be larger than {max_bytes} bytes')
    raw = request.stream.read(max_bytes + 1)
    if len(raw) > max_bytes:
        raise MalformedSubmission(f'body must not be larger than {max_bytes} bytes')
    return raw


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def decode_submission(raw: bytes) -> Submission:
    """Parse and validate a score body.

    The body must hold exactly one JSON object with the fields ``score``,
    ``moves`` and ``pieces`` (non-negative integers) and an optional
    ``date`` (YYYYMMDD integer or null). Unknown keys are rejected.
    """
    try:
        text = raw.decode('utf-8')
    except UnicodeDecodeError as exc:
        raise MalformedSubmission(f'body contains badly-formed JSON (at character {exc.start})') from exc
    if not text.strip():
        raise MalformedSubmission('body must not be empty')

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        if exc.msg == 'Extra data':
            raise MalformedSubmission('body must only contain a single JSON value') from exc
        if exc.pos >= len(text.rstrip()):
            # Input ended mid-value
            raise MalformedSubmission('body contains badly-formed JSON') from exc
        raise MalformedSubmission(f'body contains badly-formed JSON (at character {exc.pos})') from exc

    if not isinstance(data, dict):
        offset = len(text) - len(text.lstrip())
        raise MalformedSubmission(f'body contains incorrect JSON type (at character {offset})')

    for key in data:
        if key not in SUBMISSION_FIELDS and key not in OPTIONAL_FIELDS:
            raise MalformedSubmission(f'body contains unknown key "{key}"')

    values = {}
    for field in SUBMISSION_FIELDS:
        if field not in data:
            raise MalformedSubmission(f'body is missing field "{field}"')
        value = data[field]
        if not _is_int(value):
            raise MalformedSubmission(f'body contains incorrect JSON type for field "{field}"')
        if value < 0:
            raise MalformedSubmission(f'field "{field}" must be a non-negative integer')
        values[field] = value

    day = data.get('date')
    if day is not None and not _is_int(day):
        raise MalformedSubmission('body contains incorrect JSON type for field "date"')

    return Submission(date=day, **values)


@scores.errorhandler(MalformedSubmission)
def handle_malformed_submission(exc):
    current_app.logger.info(f"[bad-request] {request.method} {request.path}: {exc}")
    return jsonify({'error': str(exc)}), 400


@scores.route('/scores', methods=['GET'])
def retrieve_scores():
    record = get_store().read()
    return jsonify(record.to_dict())


@scores.route('/scores', methods=['POST'])
def save_scores():
    max_bytes = int(current_app.config.get('MAX_SUBMISSION_BYTES', 1024))
    submission = decode_submission(_read_body(max_bytes))

    record = get_store().merge(submission)
    current_app.logger.info(f"[merge] score={record.score}, moves={record.moves}, pieces={record.pieces}")

    payload = record.to_dict()
    # Push the new best to open boards
    socketio.emit('scores_update', payload, namespace='/ws')
    return jsonify(payload)
