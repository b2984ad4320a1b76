from dotenv import load_dotenv
import os

load_dotenv()


def _csv(value):
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    DEBUG = os.getenv("DEBUG", "False") == "True"

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 5000))

    SUPABASE_URL = os.getenv("SUPABASE_URL")
    SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY")

    # Signing secret of the hosted auth server; tokens are verified remotely when unset
    SUPABASE_JWT_SECRET = os.getenv("SUPABASE_JWT_SECRET")
    JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "authenticated")

    # Direct Postgres connection used only for schema bootstrap and readiness
    DATABASE_URL = os.getenv("DATABASE_URL")

    INITIAL_POINTS = int(os.getenv("INITIAL_POINTS", 1000))

    CORS_ORIGINS = _csv(os.getenv("CORS_ORIGINS", "*"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON = os.getenv("LOG_JSON", "True") == "True"

    API_URL = os.getenv("API_URL", "http://localhost:5000")
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", 10))

    REQUIRED_IN_PRODUCTION = ("SUPABASE_URL", "SUPABASE_SERVICE_KEY")

    @property
    def is_production(self):
        return self.ENVIRONMENT == "production"

    def validate(self):
        if not self.is_production:
            return
        missing = [name for name in self.REQUIRED_IN_PRODUCTION if not getattr(self, name)]
        if missing:
            raise RuntimeError(
                f"Missing required environment variables: {', '.join(missing)}"
            )


settings = Settings()
