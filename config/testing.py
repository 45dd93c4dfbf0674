SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

DEFAULT_CLASS_NAME = "Section 001"

LOG_LEVEL = "WARNING"
LOG_JSON = False

HOST = "127.0.0.1"
PORT = 5000
