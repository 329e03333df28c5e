from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://taskmind:taskmind@db:5432/taskmind")

    JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
    JWT_EXPIRE_MIN = int(getenv("JWT_EXPIRE_MIN", "15"))  #expire au bout de 15 minutes
    JWT_REFRESH_EXPIRE_MIN = int(getenv("JWT_REFRESH_EXPIRE_MIN", "43200"))  #expire au bout d'1 mois

    # Transcription vocale (ElevenLabs). Sans clé -> transcription de démo
    ELEVENLABS_API_KEY = getenv("ELEVENLABS_API_KEY", "")
    ELEVENLABS_BASE_URL = getenv("ELEVENLABS_BASE_URL", "https://api.elevenlabs.io")
    ELEVENLABS_MODEL_ID = getenv("ELEVENLABS_MODEL_ID", "scribe_v1")
    TRANSCRIPTION_TIMEOUT = int(getenv("TRANSCRIPTION_TIMEOUT", "60"))

    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    LOG_FILE = getenv("LOG_FILE", "")

settings = Settings()
