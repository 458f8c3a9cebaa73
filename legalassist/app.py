# app.py
import logging
import os
from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from legalassist.config.database import db_instance
from legalassist.config.settings import Config
from legalassist.errors import APIError
from legalassist.utils.auth_middleware import login_manager
from legalassist.routes.auth import auth_bp
from legalassist.routes.documents import documents_bp
from legalassist.routes.agents import agents_bp

logger = logging.getLogger(__name__)


def create_app(config=None):
    """Application factory"""
    app = Flask(__name__)

    # Configuration
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    # Ensure upload directory exists
    app.config['UPLOAD_FOLDER'] = os.path.abspath(app.config['UPLOAD_FOLDER'])
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    # Initialize extensions
    CORS(app)

    # Initialize the in-memory store
    db_instance.initialize(app)

    # Bearer tokens are resolved per request by the auth middleware
    login_manager.init_app(app)

    # Register blueprints
    app.register_blueprint(auth_bp, url_prefix='/api')
    app.register_blueprint(documents_bp, url_prefix='/api')
    app.register_blueprint(agents_bp, url_prefix='/api')

    # Serve uploaded files
    @app.route('/uploads/<path:filename>')
    def uploaded_file(filename):
        return send_from_directory(app.config['UPLOAD_FOLDER'], filename)

    # Error handlers
    @app.errorhandler(APIError)
    def api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'message': 'Not found'}), 404

    @app.errorhandler(RequestEntityTooLarge)
    def file_too_large(error):
        limit_mb = app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
        return jsonify({'message': f'File too large. Maximum size is {limit_mb}MB.'}), 413

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'message': 'Internal server error'}), 500

    return app


def main():
    app = create_app()

    logger.info("Starting LegalAssist AI...")
    logger.info("Upload folder: %s", app.config['UPLOAD_FOLDER'])
    if app.config['JWT_SECRET'] == 'your-secret-key':
        logger.warning("JWT_SECRET not set, using the development default")

    app.run(
        host='0.0.0.0',
        port=app.config['PORT'],
        debug=os.getenv('FLASK_ENV') == 'development'
    )


if __name__ == '__main__':
    main()
