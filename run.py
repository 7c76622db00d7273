# run.py
# This script launches the Flask application.
# Because the project is installed in editable mode via pyproject.toml,
# Python knows where to find the 'queens' package without any path manipulation.

import logging

from queens.app import app

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    # The 'debug=True' flag enables auto-reloading when source files are changed.
    app.run(host='0.0.0.0', port=5001, debug=True)
