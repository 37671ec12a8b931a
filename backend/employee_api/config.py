"""
Configuration management for the Employee Directory API.
Loads environment variables and provides application settings.
"""
from typing import List

from pydantic_settings import BaseSettings

# Listening port is fixed; it is not read from the environment.
PORT = 5000


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # PostgreSQL Configuration
    db_host: str = "localhost"
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "employeesdb"
    db_port: int = 5432
    # "require" asks for TLS without verifying the server certificate
    db_sslmode: str = "require"
    db_connect_timeout: int = 10

    # Connection pool bounds
    db_pool_min: int = 1
    db_pool_max: int = 10

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False

    def connection_kwargs(self) -> dict:
        """Keyword arguments handed to psycopg2 for every pooled connection."""
        return {
            "host": self.db_host,
            "user": self.db_user,
            "password": self.db_password,
            "dbname": self.db_name,
            "port": self.db_port,
            "sslmode": self.db_sslmode,
            "connect_timeout": self.db_connect_timeout,
        }
