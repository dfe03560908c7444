from flask import Flask, jsonify, request
from waitress import serve
from paste.translogger import TransLogger
import logging

import config
from stream_handler import stream_handler

# Create the Flask app instance
app = Flask(__name__)

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

MANIFEST = {
    "id": config.ADDON_ID,
    "version": config.ADDON_VERSION,
    "name": "Ratings Aggregator",
    "description": "IMDb, TMDb, Metacritic, Rotten Tomatoes, Common Sense Media and CringeMDB ratings "
                   "with the IMDb Parents Guide, shown as a stream entry.",
    "resources": ["stream"],
    "types": ["movie", "series"],
    "idPrefixes": ["tt"],
    "catalogs": [],
    "behaviorHints": {"configurable": False},
}


@app.after_request
def add_cors_headers(response):
    # Add-on clients fetch from any origin
    response.headers['Access-Control-Allow-Origin'] = '*'
    response.headers['Access-Control-Allow-Headers'] = '*'
    return response


@app.route('/', methods=['GET'])
def status():
    return jsonify({"status": "ok", "manifest": f"{request.host_url}manifest.json"})


@app.route('/manifest.json', methods=['GET'])
def manifest():
    return jsonify(MANIFEST)


@app.route('/stream/<media_type>/<media_id>.json', methods=['GET'])
def get_streams(media_type, media_id):
    return jsonify(stream_handler({"type": media_type, "id": media_id}))


# Run the Flask app
if __name__ == '__main__':
    logger.info("Application started")
    logger.info(f"Server starting on http://{config.HOST}:{config.PORT}")
    logger.info(f"Manifest available at http://{config.HOST}:{config.PORT}/manifest.json")
    serve(TransLogger(app, setup_console_handler=False), host=config.HOST, port=config.PORT)
