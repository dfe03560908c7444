import os

IMDB_BASE_URL = os.environ.get('IMDB_BASE_URL', 'https://www.imdb.com').rstrip('/')
OMDB_API_KEY = os.environ.get('OMDB_API_KEY', '')
TMDB_API_KEY = os.environ.get('TMDB_API_KEY', '')

# Seconds, applied to every outbound request
REQUEST_TIMEOUT = float(os.environ.get('REQUEST_TIMEOUT', '10'))

HOST = os.environ.get('HOST', '0.0.0.0')
PORT = int(os.environ.get('PORT', '8080'))
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

ADDON_ID = os.environ.get('ADDON_ID', 'community.ratings.aggregator')
ADDON_VERSION = os.environ.get('ADDON_VERSION', '1.0.0')
