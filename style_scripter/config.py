"""Configuration management"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


class Config(BaseModel):
    """Application configuration"""

    app_name: str = "Channel Style Scripter"
    app_version: str = "0.1.0"

    # API Keys (only used by the MCP tool; HTTP callers send their own)
    youtube_api_key: str = Field(default_factory=lambda: os.getenv("YOUTUBE_API_KEY", ""))
    openai_api_key: str = Field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))

    # AI Model Configuration
    ai_provider: str = Field(
        default_factory=lambda: os.getenv("AI_PROVIDER", "openai")
    )  # "openai", "deepseek"
    style_model: Optional[str] = Field(default_factory=lambda: os.getenv("STYLE_MODEL"))
    script_model: Optional[str] = Field(default_factory=lambda: os.getenv("SCRIPT_MODEL"))
    style_temperature: float = Field(default=0.3)
    script_temperature: float = Field(default=0.7)

    # Transcripts
    transcript_language: str = Field(
        default_factory=lambda: os.getenv("TRANSCRIPT_LANGUAGE", "en")
    )
    model_transcript_chars: int = Field(default=3000)
    excerpt_chars: int = Field(default=320)
    max_guidelines: int = Field(default=6)

    # Performance
    max_concurrent_transcripts: int = Field(
        default_factory=lambda: int(os.getenv("MAX_CONCURRENT_TRANSCRIPTS", "8"))
    )

    # Server Configuration
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "8080")))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    cors_origins: list[str] = Field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
    )
    mcp_server_name: str = Field(
        default_factory=lambda: os.getenv("MCP_SERVER_NAME", "channel-style-scripter")
    )

    def model_for(self, stage: str) -> str:
        """Resolve the model name for the "style" or "script" stage"""
        configured = self.style_model if stage == "style" else self.script_model
        if configured:
            return configured
        if self.ai_provider == "deepseek":
            return "deepseek-chat"
        return "gpt-4o-mini"

    def validate_keys(self) -> list[str]:
        """Validate environment API keys and return list of missing keys"""
        missing = []
        if not self.youtube_api_key:
            missing.append("YOUTUBE_API_KEY")
        if not self.openai_api_key:
            missing.append("OPENAI_API_KEY")
        return missing


# Global config instance
config = Config()
