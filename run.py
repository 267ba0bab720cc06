import logging

from dailypuzzle import create_app, socketio

logging.basicConfig(level=logging.INFO)
app = create_app()

if __name__ == '__main__':
    app.logger.info(f"Starting server at port {app.config['PORT']}")
    socketio.run(app, host='0.0.0.0', port=app.config['PORT'])
