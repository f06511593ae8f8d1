from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenAI: roast text + fallback voice
    openai_api_key: str = ""
    openai_base_url: str | None = None
    openai_chat_model: str = "gpt-4o"
    openai_tts_model: str = "gpt-4o-mini-tts"
    llm_timeout_seconds: int = 30

    # Sampling knobs, tuned for variety over repetition
    roast_temperature: float = 1.2
    roast_top_p: float = 1.0
    roast_presence_penalty: float = 0.6
    roast_frequency_penalty: float = 0.4
    roast_max_tokens: int = 200

    # ElevenLabs: primary voice
    elevenlabs_api_key: str = ""
    elevenlabs_base_url: str = "https://api.elevenlabs.io"
    elevenlabs_model_id: str | None = None
    voice_stability: float = 0.5
    voice_similarity_boost: float = 0.9
    voice_style: float = 0.7
    tts_timeout_seconds: int = 30

    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
