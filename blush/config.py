# blush/config.py

import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    def __init__(self):
        self.database_url = (os.getenv("DATABASE_URL") or "sqlite:///./blush.db").strip()
        origins = os.getenv("CORS_ORIGINS") or "http://127.0.0.1:5500"
        self.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]
        self.bcrypt_rounds = int(os.getenv("BCRYPT_ROUNDS", 10))
        self.log_level = (os.getenv("LOG_LEVEL") or "INFO").upper()
        self.port = int(os.getenv("PORT", 5000))


settings = Settings()
