# Environment variables
DOTENV_FILE = ".env"
ENV_HOST = "MOYSKLAD_HOST"
ENV_TOKEN = "MOYSKLAD_TOKEN"
ENV_LOGIN = "MOYSKLAD_LOGIN"
ENV_PASSWORD = "MOYSKLAD_PASSWORD"
ENV_TIMEOUT = "MOYSKLAD_TIMEOUT"
ENV_DEBUG = "MOYSKLAD_DEBUG"

# Remote API
DEFAULT_HOST = "https://api.moysklad.ru"
API_PATH = "/api/remap/1.2"
DEFAULT_TIMEOUT = 30.0

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
CONTENT_TYPE_JSON = "application/json"
ACCEPT_JSON = "application/json;charset=utf-8"

# Statuses the API answers with on success
SUCCESS_STATUS_CODES = frozenset({200, 201, 204})
