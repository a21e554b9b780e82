"""
Configuration Management for Personal Ledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Report builders never read these settings themselves - the reporter and
orchestrator pass the relevant values in, so every computation stays a
function of its arguments.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Display fallbacks and defaults used when building reports."""
    
    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        extra="ignore"
    )
    
    # Fallback resolution
    fallback_category_name: str = Field(
        default="Outros",
        description="Breakdown group for expenses whose category is missing"
    )
    fallback_category_color: str = Field(
        default="#94a3b8",
        description="Neutral colour used for the fallback group"
    )
    removed_category_label: str = Field(
        default="Categoria removida",
        description="Label shown for a budget whose category was deleted"
    )
    uncategorized_label: str = Field(
        default="Sem categoria",
        description="Label shown in listings for transactions without a category"
    )
    missing_account_label: str = Field(
        default="Conta não encontrada",
        description="Label shown in listings when the account is missing"
    )
    
    # Report defaults
    default_series_months: int = Field(
        default=6,
        ge=1,
        le=60,
        description="Trailing months shown by the analysis view"
    )
    recent_transactions_limit: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Rows in the dashboard's recent transactions list"
    )
    month_label_format: str = Field(
        default="%B %Y",
        description="strftime format for monthly series labels"
    )
    
    # Export
    export_delimiter: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Field delimiter for CSV exports"
    )
    export_filename_prefix: str = Field(
        default="transacoes",
        min_length=1,
        description="Prefix of the exported file name"
    )
    
    @field_validator('export_delimiter')
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """Quotes and line breaks cannot delimit fields."""
        if v in {'"', "\n", "\r"}:
            raise ValueError(f"Unsupported export delimiter: {v!r}")
        return v


class AppSettings(BaseSettings):
    """
    Main application settings.
    
    Loads configuration from environment variables and .env file.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for local structured logs"
    )
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {allowed}")
        return v.upper()


class Settings(BaseSettings):
    """
    Root settings container.
    
    Aggregates all sub-settings for easy access.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    @property
    def engine(self) -> EngineSettings:
        return EngineSettings()
    
    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).
    
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.
    
    Returns a dict of {setting_name: is_valid}.
    Useful for startup checks.
    """
    results = {}
    
    settings = get_settings()
    
    try:
        _ = settings.engine
        results["engine"] = True
    except Exception as e:
        results["engine"] = False
        results["engine_error"] = str(e)
    
    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)
    
    return results
