"""
Environment-driven settings sources.

Values come from process environment variables or a local ``.env`` file.
"""
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Connection parameters for the categories store (``DB_*``)."""

    model_config = SettingsConfigDict(
        env_prefix='DB_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    engine: str = 'django.db.backends.postgresql'
    host: str = 'localhost'
    port: int = 5432
    user: str = 'postgres'
    password: str = ''
    name: str = 'admin_videos'
    conn_max_age: int = 300

    def as_django(self) -> dict:
        """Entry for Django's DATABASES setting."""
        return {
            'ENGINE': self.engine,
            'NAME': self.name,
            'USER': self.user,
            'PASSWORD': self.password,
            'HOST': self.host,
            'PORT': str(self.port),
            'CONN_MAX_AGE': self.conn_max_age,
        }


class AppSettings(BaseSettings):
    """Process-level switches (``DJANGO_*``)."""

    model_config = SettingsConfigDict(
        env_prefix='DJANGO_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    secret_key: str = 'django-insecure-development-only'
    debug: bool = False
    allowed_hosts: str = '*'
    log_level: str = 'INFO'

    @field_validator('log_level', mode='before')
    @classmethod
    def upper_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def allowed_host_list(self) -> List[str]:
        """``DJANGO_ALLOWED_HOSTS`` is comma-separated."""
        return [host.strip() for host in self.allowed_hosts.split(',') if host.strip()]
