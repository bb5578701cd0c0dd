import os
import time

# Debug logging (stdout belongs to curses, so everything goes to a file)
DEBUG = os.environ.get('MATRIXRAIN_DEBUG', '0') in ('1', 'true', 'True')
LOG_PATH = os.environ.get('MATRIXRAIN_LOG', '/tmp/matrixrain.log')


def log(msg: str):
    if not DEBUG:
        return
    try:
        with open(LOG_PATH, 'a') as f:
            f.write(f"[{time.strftime('%Y-%m-%d %H:%M:%S')}] {msg}\n")
    except Exception:
        pass
