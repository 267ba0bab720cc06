from flask import Blueprint, render_template

from dailypuzzle import get_store

main = Blueprint('main', __name__)


@main.route('/')
@main.route('/index.html')
def index():
    store = get_store()
    record = store.read()
    return render_template(
        'index.html',
        rows=store.rows,
        cols=store.cols,
        date=record.date,
        score=record.score,
        moves=record.moves,
        pieces=record.pieces,
        daily_board=record.board,
    )
