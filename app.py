"""Flask application with route handlers"""
from flask import Flask, jsonify, request
from flask_cors import CORS
import os

from config.database import load_config, create_store_client
from services.waitlist_service import WaitlistController, SubmissionOutcome
from services.waitlist_store import WaitlistStore
from utils.client_context import RequestClientContext
from utils.logger import log_info
from utils.validation import sanitize_string, validate_email

MAX_EMAIL_LENGTH = 320

STATUS_CODES = {
    SubmissionOutcome.SUCCESS: 201,
    SubmissionOutcome.DUPLICATE: 200,
    SubmissionOutcome.ERROR: 502,
}


def create_app(config=None, store=None):
    """
    Build the Flask app.

    The store configuration is loaded once here; a missing SUPABASE_URL or
    SUPABASE_ANON_KEY stops start-up with a ValueError. Tests pass a ready
    `store` instead.
    """
    if store is None:
        config = config or load_config()
        store = WaitlistStore(create_store_client(config), table=config.table)

    app = Flask(__name__)
    app.config['WAITLIST_STORE'] = store

    origins = os.environ.get('CORS_ORIGINS', '*')
    CORS(app, resources={
        r"/api/*": {
            "origins": [o.strip() for o in origins.split(',') if o.strip()] or "*",
            "methods": ["POST", "OPTIONS"],
            "allow_headers": ["Content-Type"]
        }
    })

    @app.route('/')
    def home():
        return jsonify({
            "message": "Interview Lens Waitlist API",
            "status": "running",
            "version": "1.0.0"
        })

    @app.route('/health')
    def health_check():
        return jsonify({
            "status": "healthy",
            "message": "API is running successfully"
        })

    @app.route('/api/waitlist', methods=['POST'])
    def join_waitlist():
        """Add email to waitlist"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Email is required"}), 400

        email = sanitize_string(data.get('email'))
        if not email:
            return jsonify({"error": "Email is required"}), 400
        if len(email) > MAX_EMAIL_LENGTH or not validate_email(email):
            return jsonify({"error": "Invalid email format"}), 400

        controller = WaitlistController(app.config['WAITLIST_STORE'], RequestClientContext(request))
        outcome = controller.submit(email)
        return jsonify({"outcome": outcome.value, **controller.state()}), STATUS_CODES[outcome]

    return app


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    log_info(f"Starting waitlist API on port {port}")
    create_app().run(host='0.0.0.0', port=port)
