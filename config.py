import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Path prefix the page and score routes are mounted under, e.g. "/puzzle"
    MOUNT = os.environ.get('MOUNT', '').rstrip('/')
    PORT = int(os.environ.get('PORT') or '5454')
    # Daily board dimensions
    BOARD_ROWS = int(os.environ.get('BOARD_ROWS', '12'))
    BOARD_COLS = int(os.environ.get('BOARD_COLS', '12'))
    # Upper bound for a POSTed score body (bytes)
    MAX_SUBMISSION_BYTES = int(os.environ.get('MAX_SUBMISSION_BYTES', '1024'))
    # Comma-separated origins allowed for CORS and Socket.IO
    CORS_ORIGINS = [o.strip() for o in os.environ.get(
        'CORS_ORIGINS', 'http://localhost:5454,http://127.0.0.1:5454').split(',') if o.strip()]
