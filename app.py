"""
Portfolio Hub
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the portfolio_hub package.
"""

import logging

from portfolio_hub import create_app
from portfolio_hub.config import Config

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    app.run(debug=False, host='0.0.0.0', port=app.config['PORT'])
