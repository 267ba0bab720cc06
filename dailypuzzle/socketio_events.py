from flask_socketio import emit

from dailypuzzle import get_store, socketio


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})
    emit('scores', get_store().read().to_dict())


def handle_get_scores(data=None):
    emit('scores', get_store().read().to_dict())


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('get_scores', handle_get_scores, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')

    if testing:
        socketio.on_event('connect', handle_connect, namespace='/')
        socketio.on_event('get_scores', handle_get_scores, namespace='/')
        socketio.on_event('ping', handle_ping, namespace='/')
