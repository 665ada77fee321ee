import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./orderdesk.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    AUTH_DISABLED = bool(data.get("AUTH_DISABLED", False))

    # "sqlalchemy" or "memory"
    STORE_BACKEND = data.get("STORE_BACKEND", "sqlalchemy")

    # Invoicing
    DEFAULT_TAX_RATE = str(data.get("DEFAULT_TAX_RATE", "0.2"))  # fraction, 0.2 = 20%
    INVOICE_DUE_DAYS = int(data.get("INVOICE_DUE_DAYS", 30))
    CURRENCY_SYMBOL = data.get("CURRENCY_SYMBOL", "$")

    # Issuer block printed on invoice PDFs; left out when empty
    COMPANY_NAME = data.get("COMPANY_NAME", "")
    COMPANY_ADDRESS = data.get("COMPANY_ADDRESS", "")
