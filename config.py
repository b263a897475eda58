import os

SECRET_KEY = os.getenv("SECRET_KEY")

# Logging level for logging.basicConfig in create_app
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Keypad state lives in the signed session cookie
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = "Lax"
SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true"

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
