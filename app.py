"""
Bin Monitor API
Application Entry Point

Run with ``python app.py`` or ``flask --app app run``. The API is served
under /api.
"""

import os

from binmonitor import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=os.environ.get('FLASK_DEBUG') == '1', host='0.0.0.0',
            port=int(os.environ.get('PORT', '5000')))
