from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_TITLE: str = "Calculadora AFV"
    LOG_LEVEL: str = "INFO"

    # --- Formato de números (mensajes y tabla) ---
    THOUSANDS_SEPARATOR: str = ","
    DECIMAL_SEPARATOR: str = "."
    MAX_FRACTION_DIGITS: int = 3

    # Tope aplicado al limpiar la entrada del formulario / API
    MAX_POINTS: float = 1_000_000_000_000

    # --- Valores por defecto del formulario ---
    DEFAULT_RISK_TIER: str = "TL A"
    DEFAULT_LOYALTY_LEVEL: str = "Bronce"

    # Rol que no puede liberar pedidos (se menciona en el rechazo)
    RELEASE_AUTHORITY: str = "GV"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
