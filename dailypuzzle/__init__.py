from flask import Flask, current_app, jsonify, request
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.exceptions import InternalServerError
import click
from config import Config

from dailypuzzle.services.scores import DailyRecordStore, generate_daily_board

socketio = SocketIO(async_mode=None)

STORE_KEY = 'daily_scores'


def create_app(config_class=Config, store=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One record store per app; tests pass their own with a fake clock
    if store is None:
        store = DailyRecordStore(
            rows=flask_app.config.get('BOARD_ROWS', 12),
            cols=flask_app.config.get('BOARD_COLS', 12),
            logger=flask_app.logger,
        )
    flask_app.extensions[STORE_KEY] = store

    mount = flask_app.config.get('MOUNT', '')

    from dailypuzzle.main import main
    flask_app.register_blueprint(main, url_prefix=mount)

    from dailypuzzle.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix=mount)

    from dailypuzzle.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @flask_app.before_request
    def log_request():
        flask_app.logger.info(f"[request] {request.method} {request.full_path.rstrip('?')}, ref={request.referrer!r}")

    @flask_app.errorhandler(InternalServerError)
    def handle_server_error(exc):
        original = getattr(exc, 'original_exception', None) or exc
        flask_app.logger.error(f"[server-error] {request.method} {request.path}: {original!r}")
        return jsonify({'error': 'Internal Server Error'}), 500

    @click.command('board')
    @click.option('--date', 'day', type=int, default=None, help='Day as YYYYMMDD; defaults to today.')
    def board_command(day):
        """Prints the daily board and today's best result."""
        daily = flask_app.extensions[STORE_KEY]
        record = daily.read()
        board = record.board if day is None else generate_daily_board(day, daily.size)
        click.echo(f"Board for {day or record.date} ({daily.rows}x{daily.cols})")
        for row in range(daily.rows):
            click.echo(''.join(board[row * daily.cols:(row + 1) * daily.cols]))
        click.echo(f"score={record.score} moves={record.moves} pieces={record.pieces}")

    flask_app.cli.add_command(board_command)

    return flask_app


def get_store() -> DailyRecordStore:
    return current_app.extensions[STORE_KEY]
