# config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Project-wide settings (Pydantic V2).
    Loaded from environment variables / .env, falling back to the defaults below.
    """

    # Project Info
    PROJECT_NAME: str = "Accel_Kinetics"
    VERSION: str = "1.0.0"

    # Output
    LOG_DIR: str = "./logs"

    # Derivation defaults (used when a session's configuration omits a key)
    DEFAULT_MASS: float = 1.0  # kg
    DEFAULT_RESISTANCE: float = 0.1  # Ω
    DEFAULT_V0: float = 0.0  # m/s, applied along Y on the first tick
    DEFAULT_STEP_TIME: float = 0.1  # s between ticks
    DEFAULT_CHART_LENGTH: float = 2.0  # s of trailing records shown live
    DEFAULT_TABLE_VALUE_LENGTH: int = 3  # decimals for presentation
    DEFAULT_KE_0: float = 0.0  # J, settings-surface only

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    def default_parameters(self) -> dict:
        """Default parameter mapping keyed by the configuration names."""
        return {
            "Mass": self.DEFAULT_MASS,
            "Resistance": self.DEFAULT_RESISTANCE,
            "V0": self.DEFAULT_V0,
            "StepTime": self.DEFAULT_STEP_TIME,
            "ChartLength": self.DEFAULT_CHART_LENGTH,
            "TableValueLength": self.DEFAULT_TABLE_VALUE_LENGTH,
            "KE_0": self.DEFAULT_KE_0,
        }


# Singleton instance
settings = Settings()
